"""Arbitrary-precision integer helpers used by the cryptographic primitives.

Plain Python ``int`` values carry the arithmetic; this module supplies the
operations that the language does not provide directly, with the byte
encoding and error behaviour the rest of the package relies on.
"""

from __future__ import annotations

import math
import secrets

from joincrypt.errors import InvalidArgumentError

DEFAULT_PRIME_ERROR_PROBABILITY = 1e-40

_UINT64_BITS = 64


def _small_primes(limit: int) -> tuple[int, ...]:
    sieve = bytearray([1]) * (limit + 1)
    sieve[0:2] = b"\x00\x00"
    for candidate in range(2, math.isqrt(limit) + 1):
        if sieve[candidate]:
            sieve[candidate * candidate :: candidate] = bytes(
                len(range(candidate * candidate, limit + 1, candidate))
            )
    return tuple(n for n, flag in enumerate(sieve) if flag)


_SMALL_PRIMES = _small_primes(1000)


def to_bytes(value: int) -> bytes:
    """Return the minimal big-endian encoding of a non-negative integer.

    Zero encodes to the empty byte string.
    """
    if value < 0:
        raise InvalidArgumentError("Cannot serialize a negative BigNum.")
    return value.to_bytes((value.bit_length() + 7) // 8, "big")


def from_bytes(data: bytes) -> int:
    """Interpret ``data`` as an unsigned big-endian integer."""
    return int.from_bytes(bytes(data), "big")


def to_uint64(value: int) -> int:
    """Return the magnitude of ``value`` if it fits in 64 bits."""
    magnitude = abs(value)
    if magnitude.bit_length() > _UINT64_BITS:
        raise InvalidArgumentError("BigNum has more than 64 bits.")
    return magnitude


def _miller_rabin_rounds(error_probability: float) -> int:
    if not error_probability > 0:
        raise InvalidArgumentError("error_probability must be positive.")
    return max(1, math.ceil(-math.log(error_probability) / math.log(4)))


def is_prime(value: int, error_probability: float = DEFAULT_PRIME_ERROR_PROBABILITY) -> bool:
    """Probabilistic primality test.

    Returns False for composites and True for primes, with the chance of a
    composite being accepted bounded by ``error_probability``.
    """
    rounds = _miller_rabin_rounds(error_probability)
    if value < 2:
        return False
    for small in _SMALL_PRIMES:
        if value == small:
            return True
        if value % small == 0:
            return False

    odd_part = value - 1
    twos = (odd_part & -odd_part).bit_length() - 1
    odd_part >>= twos

    for _ in range(rounds):
        witness = 2 + secrets.randbelow(value - 3)
        x = pow(witness, odd_part, value)
        if x in (1, value - 1):
            continue
        for _ in range(twos - 1):
            x = x * x % value
            if x == value - 1:
                break
        else:
            return False
    return True


def is_safe_prime(
    value: int, error_probability: float = DEFAULT_PRIME_ERROR_PROBABILITY
) -> bool:
    """Return True if ``value`` and ``(value - 1) / 2`` are both prime."""
    if not is_prime(value, error_probability):
        return False
    if (value - 1) % 2:
        return False
    return is_prime((value - 1) // 2, error_probability)


def last_n_bits(value: int, n: int) -> int:
    """Keep only the lowest ``n`` bits of the magnitude, preserving the sign.

    A negative ``n`` leaves the value unchanged.
    """
    if n < 0:
        return value
    masked = abs(value) & ((1 << n) - 1)
    return -masked if value < 0 else masked


def is_bit_set(value: int, n: int) -> bool:
    """Return True if bit ``n`` of the magnitude of ``value`` is set."""
    if n < 0:
        return False
    return bool((abs(value) >> n) & 1)


def trunc_div(a: int, b: int) -> int:
    """Divide ``a`` by ``b``, rounding the quotient towards zero."""
    if b == 0:
        raise ZeroDivisionError("division by zero")
    quotient = abs(a) // abs(b)
    return -quotient if (a < 0) != (b < 0) else quotient


def exact_div(a: int, b: int) -> int:
    """Divide ``a`` by ``b``, requiring the division to leave no remainder."""
    quotient = trunc_div(a, b)
    if quotient * b != a:
        raise InvalidArgumentError(
            "Division leaves a remainder; use trunc_div for truncated division."
        )
    return quotient


def mod_inverse(value: int, modulus: int) -> int:
    """Return ``value ** -1 mod modulus``."""
    if modulus == 0:
        raise InvalidArgumentError("Modulus must be nonzero.")
    try:
        return pow(value, -1, abs(modulus))
    except ValueError as exc:
        raise InvalidArgumentError(
            f"{value} has no inverse modulo {modulus}."
        ) from exc


def mod_sqrt(value: int, modulus: int) -> int:
    """Return ``r`` with ``r * r == value (mod modulus)`` for a prime modulus."""
    p = modulus
    if p < 2:
        raise InvalidArgumentError("Modulus must be a prime.")
    a = value % p
    if a == 0:
        return 0
    if p == 2:
        return a
    if pow(a, (p - 1) // 2, p) != 1:
        raise InvalidArgumentError("Value is not a square modulo the modulus.")

    if p % 4 == 3:
        root = pow(a, (p + 1) // 4, p)
    else:
        root = _tonelli_shanks(a, p)

    if root * root % p != a:
        raise InvalidArgumentError("Modulus is not a prime.")
    return root


def _tonelli_shanks(a: int, p: int) -> int:
    q = p - 1
    s = 0
    while q % 2 == 0:
        q //= 2
        s += 1

    z = 2
    while pow(z, (p - 1) // 2, p) != p - 1:
        z += 1
        if z >= p:
            raise InvalidArgumentError("Modulus is not a prime.")

    m = s
    c = pow(z, q, p)
    t = pow(a, q, p)
    root = pow(a, (q + 1) // 2, p)
    while t != 1:
        i = 0
        probe = t
        while probe != 1:
            probe = probe * probe % p
            i += 1
            if i == m:
                raise InvalidArgumentError("Modulus is not a prime.")
        b = pow(c, 1 << (m - i - 1), p)
        m = i
        c = b * b % p
        t = t * c % p
        root = root * b % p
    return root


def mod_negate(value: int, modulus: int) -> int:
    """Return ``-value mod modulus``; zero is returned unchanged."""
    if value == 0:
        return value
    return modulus - value % modulus