# joincrypt

Pure-Python building blocks for private set intersection: big-number helpers,
hashing and randomness services, elliptic-curve points and groups, and a
commutative cipher. It has no third-party runtime dependencies.

## Modules

- `joincrypt.bigint` works on plain Python `int` values:
  - `to_bytes` and `from_bytes` give the minimal big-endian encoding. Zero
    encodes to `b""` and negative values are rejected.
  - `to_uint64` rejects values wider than 64 bits.
  - `is_prime` and `is_safe_prime` are Miller–Rabin tests with a configurable
    error probability.
  - `last_n_bits` and `is_bit_set` work on bits.
  - `exact_div` and `trunc_div` divide; `exact_div` rejects a remainder and
    `trunc_div` rounds towards zero.
  - `mod_inverse`, `mod_sqrt` (prime modulus) and `mod_negate` do modular
    arithmetic.
- `joincrypt.context.Context` provides:
  - `sha256_string` and `sha512_string`.
  - `random_oracle_sha256` and `random_oracle_sha512`, which map bytes
    deterministically into `[0, max_value)`.
  - `prf`, an HMAC-SHA512 based PRF. The key must be at least 80 bits and the
    output at most 512 bits.
  - `generate_prime` and `generate_safe_prime`.
  - `generate_rand_less_than`, `generate_rand_between`,
    `generate_random_bytes` and `relatively_prime_random_less_than`.
- `joincrypt.ec_point` holds the curves and their points:
  - `CurveId` names the supported curves: `PRIME256V1`, `SECP224R1`,
    `SECP384R1` and `SECP521R1`. `curve_for(curve_id)` returns the matching
    `Curve`.
  - `ECPoint` is an immutable point. It offers `mul`, `add`, `inverse`,
    `is_point_at_infinity` and `is_on_curve`, and the operators `+`, `-` and
    `*`.
  - Points convert to and from X9.62 form with `from_bytes`,
    `to_bytes_compressed` and `to_bytes_uncompressed`.
- `joincrypt.ec_group.ECGroup` is created with `ECGroup.create(curve_id, context)`:
  - It generates and checks private keys in `[1, order)`.
  - It hashes messages onto the curve with `get_point_by_hashing_to_curve_sha256`
    or `get_point_by_hashing_to_curve_sha512`, using try-and-increment.
  - It returns the fixed generator, a random generator, or the point at
    infinity.
  - It decodes points with `create_ec_point`, which rejects invalid encodings
    and the identity.
  - It exposes `order`, `cofactor`, `curve_id` and `curve_params`.
- `joincrypt.ec_commutative_cipher` provides `ECCommutativeCipher` and `HashType`:
  - A plaintext is encrypted by hashing it onto the curve and multiplying the
    point by a secret scalar.
  - Encrypting under key `a` and then `b` gives the same result as `b` and then
    `a`.
  - Ciphertexts are compressed point encodings.
- `joincrypt.ec_point_util.ECPointUtil` offers `get_random_curve_point`,
  `hash_to_curve` and `is_curve_point`.
- `joincrypt.errors` holds the exceptions. Failures raise `InvalidArgumentError`
  (also a `ValueError`) or `InternalError` (also a `RuntimeError`). Both
  subclass `CryptoError`.

## Installation

```
pip install .
```

## Example: commutative encryption

```python
from joincrypt.ec_point import CurveId
from joincrypt.ec_commutative_cipher import ECCommutativeCipher, HashType

alice = ECCommutativeCipher.create_with_new_key(CurveId.PRIME256V1, HashType.SHA256)
bob = ECCommutativeCipher.create_with_new_key(CurveId.PRIME256V1, HashType.SHA256)

a_then_b = bob.re_encrypt(alice.encrypt(b"user-42"))
b_then_a = alice.re_encrypt(bob.encrypt(b"user-42"))
assert a_then_b == b_then_a

# Decrypting removes one layer.
assert alice.decrypt(a_then_b) == bob.encrypt(b"user-42")
assert alice.decrypt(alice.encrypt(b"user-42")) == alice.hash_to_the_curve(b"user-42")
```

## Example: curve points

```python
from joincrypt.ec_point import CurveId
from joincrypt.ec_commutative_cipher import HashType
from joincrypt.ec_point_util import ECPointUtil

util = ECPointUtil.create(CurveId.PRIME256V1)
encoded = util.hash_to_curve(b"hello", HashType.SHA512)
assert util.is_curve_point(encoded)
assert not util.is_curve_point(b"not a point")
```

## Example: random oracle and PRF

```python
from joincrypt.context import Context

ctx = Context()
value = ctx.random_oracle_sha256(b"input", 2**255)
assert 0 <= value < 2**255

prf_key = ctx.generate_random_bytes(16)
prf_value = ctx.prf(prf_key, b"data", 1000)
assert 0 <= prf_value < 1000
```

## What this package does not do

This package is a library of primitives only. It does not include:

- a client or server that runs an intersection protocol over a network;
- a command-line program;
- reading of data sets from files;
- additive homomorphic encryption for summing associated values.

## Running the tests

```
pip install .[test]
pytest
```