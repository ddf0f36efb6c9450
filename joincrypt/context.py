"""Hashing, random-number and prime-generation services for the primitives.

A :class:`Context` bundles the operations that the higher-level primitives
need beyond plain integer arithmetic: hashing to byte strings, a random
oracle onto a bounded integer domain, a keyed PRF, prime generation and
cryptographically strong randomness. Numbers are plain Python ``int`` values.
"""

from __future__ import annotations

import enum
import hashlib
import hmac
import math
import secrets
from typing import Union

from joincrypt.bigint import from_bytes, is_prime, last_n_bits, to_bytes
from joincrypt.errors import InvalidArgumentError

BytesLike = Union[bytes, bytearray, memoryview, str]

# The counter prepended to each hashed block is serialized as a single byte
# for the whole supported range; beyond this length it would grow.
_MAX_ORACLE_BITS = 130048

_MIN_PRF_KEY_BITS = 80
_MAX_PRF_OUTPUT_BITS = 512


class _HashKind(enum.Enum):
    SHA256 = ("sha256", 256)
    SHA512 = ("sha512", 512)

    @property
    def digest_name(self) -> str:
        return self.value[0]

    @property
    def bits(self) -> int:
        return self.value[1]


def _as_bytes(data: BytesLike) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


def _random_with_top_two_bits(bits: int) -> int:
    """Return a random ``bits``-bit integer whose two highest bits are set."""
    return secrets.randbits(bits) | (3 << (bits - 2))


class Context:
    """Provides hashing, random-oracle, PRF, prime and randomness services.

    Methods are overridable so that tests can substitute deterministic
    randomness.
    """

    def sha256_string(self, data: BytesLike) -> bytes:
        """Return the SHA-256 digest of ``data``."""
        return hashlib.sha256(_as_bytes(data)).digest()

    def sha512_string(self, data: BytesLike) -> bytes:
        """Return the SHA-512 digest of ``data``."""
        return hashlib.sha512(_as_bytes(data)).digest()

    def _hash(self, data: bytes, kind: _HashKind) -> bytes:
        if kind is _HashKind.SHA512:
            return self.sha512_string(data)
        return self.sha256_string(data)

    def _random_oracle(self, x: BytesLike, max_value: int, kind: _HashKind) -> int:
        if max_value <= 0:
            raise InvalidArgumentError("max_value must be positive.")
        x = _as_bytes(x)
        block_bits = kind.bits
        output_bits = max_value.bit_length() + block_bits
        iterations = math.ceil(output_bits / block_bits)
        if iterations * block_bits >= _MAX_ORACLE_BITS:
            raise InvalidArgumentError(
                "The domain bit length must not be greater than "
                f"{_MAX_ORACLE_BITS}. Desired bit length: {output_bits}"
            )
        excess_bits = iterations * block_bits - output_bits
        accumulated = 0
        for counter in range(1, iterations + 1):
            accumulated <<= block_bits
            accumulated += from_bytes(self._hash(to_bytes(counter) + x, kind))
        return (accumulated >> excess_bits) % max_value

    def random_oracle_sha256(self, x: BytesLike, max_value: int) -> int:
        """Map ``x`` deterministically into ``[0, max_value)`` using SHA-256."""
        return self._random_oracle(x, max_value, _HashKind.SHA256)

    def random_oracle_sha512(self, x: BytesLike, max_value: int) -> int:
        """Map ``x`` deterministically into ``[0, max_value)`` using SHA-512."""
        return self._random_oracle(x, max_value, _HashKind.SHA512)

    def prf(self, key: BytesLike, data: BytesLike, max_value: int) -> int:
        """Evaluate an HMAC-SHA512 based PRF keyed by ``key`` on ``data``.

        The result lies in ``[0, max_value)``. The key must be at least 80
        bits long and ``max_value`` at most 512 bits long.
        """
        key = _as_bytes(key)
        data = _as_bytes(data)
        if len(key) * 8 < _MIN_PRF_KEY_BITS:
            raise InvalidArgumentError(
                f"The PRF key must be at least {_MIN_PRF_KEY_BITS} bits long."
            )
        bits = max_value.bit_length()
        if bits > _MAX_PRF_OUTPUT_BITS:
            raise InvalidArgumentError(
                "The requested output length is not supported. The maximum "
                f"supported output length is {_MAX_PRF_OUTPUT_BITS}. The "
                f"requested output length is {bits}"
            )
        if max_value <= 0:
            raise InvalidArgumentError("max_value must be positive.")
        while True:
            digest_value = from_bytes(hmac.new(key, data, hashlib.sha512).digest())
            reduced = last_n_bits(digest_value, bits)
            if reduced < max_value:
                return reduced
            data = to_bytes(digest_value)

    def generate_safe_prime(self, prime_length: int) -> int:
        """Return a random safe prime ``p`` of exactly ``prime_length`` bits.

        ``(p - 1) / 2`` is prime as well.
        """
        if prime_length < 2 or (prime_length < 6 and prime_length != 3):
            raise InvalidArgumentError(
                f"No safe prime of {prime_length} bits can be generated."
            )
        while True:
            half = _random_with_top_two_bits(prime_length - 1) | 1
            candidate = 2 * half + 1
            if is_prime(half) and is_prime(candidate):
                return candidate

    def generate_prime(self, prime_length: int) -> int:
        """Return a random prime of exactly ``prime_length`` bits."""
        if prime_length < 2:
            raise InvalidArgumentError(
                f"No prime of {prime_length} bits can be generated."
            )
        while True:
            candidate = _random_with_top_two_bits(prime_length) | 1
            if is_prime(candidate):
                return candidate

    def generate_rand_less_than(self, max_value: int) -> int:
        """Return a uniformly random integer in ``[0, max_value)``."""
        if max_value <= 0:
            raise InvalidArgumentError("max_value must be positive.")
        return secrets.randbelow(max_value)

    def generate_rand_between(self, start: int, end: int) -> int:
        """Return a uniformly random integer in ``[start, end)``."""
        if not start < end:
            raise InvalidArgumentError("start must be less than end.")
        return self.generate_rand_less_than(end - start) + start

    def generate_random_bytes(self, num_bytes: int) -> bytes:
        """Return ``num_bytes`` cryptographically strong random bytes."""
        if num_bytes < 0:
            raise InvalidArgumentError(
                f"num_bytes must be nonnegative, provided value was {num_bytes}."
            )
        return secrets.token_bytes(num_bytes)

    def relatively_prime_random_less_than(self, num: int) -> int:
        """Return a random value below ``num`` that is coprime to ``num``."""
        candidate = self.generate_rand_less_than(num)
        while math.gcd(candidate, num) > 1:
            candidate = self.generate_rand_less_than(num)
        return candidate