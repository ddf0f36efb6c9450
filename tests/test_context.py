import math

import pytest

from joincrypt.bigint import is_prime, is_safe_prime
from joincrypt.context import Context
from joincrypt.errors import InvalidArgumentError


@pytest.fixture
def ctx():
    return Context()


def test_sha256_known_vector(ctx):
    assert ctx.sha256_string(b"abc").hex() == (
        "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"
    )


def test_sha512_digest_length(ctx):
    assert len(ctx.sha512_string(b"abc")) == 64
    assert ctx.sha512_string(b"abc") != ctx.sha512_string(b"abd")


def test_random_oracle_sha256_is_deterministic_and_bounded(ctx):
    bound = (1 << 300) + 12345
    first = ctx.random_oracle_sha256(b"input", bound)
    second = ctx.random_oracle_sha256(b"input", bound)
    assert first == second
    assert 0 <= first < bound


def test_random_oracle_distinguishes_inputs_and_hashes(ctx):
    bound = 1 << 256
    a = ctx.random_oracle_sha256(b"one", bound)
    b = ctx.random_oracle_sha256(b"two", bound)
    c = ctx.random_oracle_sha512(b"one", bound)
    assert len({a, b, c}) == 3


@pytest.mark.parametrize("bound", [1, 2, 7, 1000, (1 << 1024) - 1])
def test_random_oracle_sha512_in_range(ctx, bound):
    value = ctx.random_oracle_sha512(b"data", bound)
    assert 0 <= value < bound


def test_random_oracle_rejects_huge_domain(ctx):
    with pytest.raises(InvalidArgumentError):
        ctx.random_oracle_sha256(b"x", 1 << 130048)


def test_random_oracle_rejects_zero_bound(ctx):
    with pytest.raises(InvalidArgumentError):
        ctx.random_oracle_sha256(b"x", 0)


def test_prf_deterministic_and_bounded(ctx):
    key = b"0123456789abcdef"
    bound = (1 << 200) + 17
    first = ctx.prf(key, b"message", bound)
    assert first == ctx.prf(key, b"message", bound)
    assert 0 <= first < bound


def test_prf_depends_on_key(ctx):
    bound = 1 << 256
    assert ctx.prf(b"0123456789", b"m", bound) != ctx.prf(b"9876543210", b"m", bound)


@pytest.mark.parametrize("bound", [1, 5, 255, 256, 1 << 511])
def test_prf_small_and_large_bounds(ctx, bound):
    assert 0 <= ctx.prf(b"0123456789", b"data", bound) < bound


def test_prf_rejects_short_key(ctx):
    with pytest.raises(InvalidArgumentError):
        ctx.prf(b"012345678", b"data", 100)


def test_prf_rejects_too_large_bound(ctx):
    with pytest.raises(InvalidArgumentError):
        ctx.prf(b"0123456789", b"data", 1 << 512)


def test_generate_prime_has_requested_length(ctx):
    prime = ctx.generate_prime(64)
    assert prime.bit_length() == 64
    assert is_prime(prime)
    assert prime >> 62 == 3


def test_generate_safe_prime(ctx):
    prime = ctx.generate_safe_prime(40)
    assert prime.bit_length() == 40
    assert is_safe_prime(prime)


def test_generate_tiny_safe_prime(ctx):
    assert ctx.generate_safe_prime(3) == 7


@pytest.mark.parametrize("length", [1, 2, 4, 5])
def test_generate_safe_prime_rejects_small_lengths(ctx, length):
    with pytest.raises(InvalidArgumentError):
        ctx.generate_safe_prime(length)


def test_generate_prime_rejects_small_length(ctx):
    with pytest.raises(InvalidArgumentError):
        ctx.generate_prime(1)


def test_generate_rand_less_than(ctx):
    values = {ctx.generate_rand_less_than(10) for _ in range(200)}
    assert values <= set(range(10))
    assert len(values) > 1


def test_generate_rand_less_than_rejects_nonpositive(ctx):
    with pytest.raises(InvalidArgumentError):
        ctx.generate_rand_less_than(0)


def test_generate_rand_between(ctx):
    for _ in range(100):
        assert 5 <= ctx.generate_rand_between(5, 9) < 9


def test_generate_rand_between_rejects_empty_range(ctx):
    with pytest.raises(InvalidArgumentError):
        ctx.generate_rand_between(9, 9)


def test_generate_random_bytes(ctx):
    assert len(ctx.generate_random_bytes(32)) == 32
    assert ctx.generate_random_bytes(0) == b""


def test_generate_random_bytes_rejects_negative(ctx):
    with pytest.raises(InvalidArgumentError):
        ctx.generate_random_bytes(-1)


def test_relatively_prime_random_less_than(ctx):
    num = 2 * 3 * 5 * 7 * 11 * 13
    for _ in range(50):
        value = ctx.relatively_prime_random_less_than(num)
        assert 0 <= value < num
        assert math.gcd(value, num) == 1