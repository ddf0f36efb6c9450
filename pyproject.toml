[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "joincrypt"
version = "0.1.0"
description = "Elliptic-curve commutative encryption, hashing to curves and big-number helpers in pure Python"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "cryptography",
    "elliptic-curve",
    "commutative-encryption",
    "private-set-intersection",
    "hash-to-curve",
    "random-oracle",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["joincrypt"]

[tool.pytest.ini_options]
addopts = "-ra"
