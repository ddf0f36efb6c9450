"""Elliptic-curve commutative encryption, hashing to curves and big-number helpers."""

__version__ = "0.1.0"

__all__ = [
    "bigint",
    "context",
    "ec_commutative_cipher",
    "ec_group",
    "ec_point",
    "ec_point_util",
    "errors",
]