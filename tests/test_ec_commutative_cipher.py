import pytest

from joincrypt.bigint import from_bytes, to_bytes
from joincrypt.ec_commutative_cipher import ECCommutativeCipher, HashType
from joincrypt.ec_point import CurveId
from joincrypt.errors import InvalidArgumentError

CURVE = CurveId.PRIME256V1


@pytest.fixture(scope="module")
def cipher_a():
    return ECCommutativeCipher.create_with_new_key(CURVE, HashType.SHA256)


@pytest.fixture(scope="module")
def cipher_b():
    return ECCommutativeCipher.create_with_new_key(CURVE, HashType.SHA256)


def test_ciphertext_is_compressed_point(cipher_a):
    ciphertext = cipher_a.encrypt(b"alice")
    assert len(ciphertext) == 33
    assert ciphertext[0] in (2, 3)


def test_encrypt_is_deterministic(cipher_a):
    key = from_bytes(cipher_a.private_key_bytes())
    hashed = cipher_a.group.create_ec_point(cipher_a.hash_to_the_curve(b"bob"))
    expected = hashed.mul(key).to_bytes_compressed()
    first = cipher_a.encrypt(b"bob")
    second = cipher_a.encrypt(b"bob")
    assert first == expected
    assert second == expected
    assert cipher_a.encrypt(b"bobby") != expected


def test_encryption_is_commutative(cipher_a, cipher_b):
    via_a = cipher_b.re_encrypt(cipher_a.encrypt(b"carol"))
    via_b = cipher_a.re_encrypt(cipher_b.encrypt(b"carol"))
    assert via_a == via_b


def test_decrypt_recovers_hashed_point(cipher_a):
    ciphertext = cipher_a.encrypt(b"dave")
    assert cipher_a.decrypt(ciphertext) == cipher_a.hash_to_the_curve(b"dave")


def test_decrypt_removes_one_layer(cipher_a, cipher_b):
    double = cipher_b.re_encrypt(cipher_a.encrypt(b"erin"))
    assert cipher_a.decrypt(double) == cipher_b.encrypt(b"erin")


def test_key_round_trip(cipher_a):
    key_bytes = cipher_a.private_key_bytes()
    restored = ECCommutativeCipher.create_from_key(CURVE, key_bytes, HashType.SHA256)
    assert restored.private_key_bytes() == key_bytes
    assert restored.encrypt(b"frank") == cipher_a.encrypt(b"frank")


def test_private_key_in_range(cipher_a):
    key = from_bytes(cipher_a.private_key_bytes())
    assert 1 <= key < cipher_a.group.order


def test_key_one_is_identity():
    cipher = ECCommutativeCipher.create_from_key(CURVE, to_bytes(1), HashType.SHA256)
    assert cipher.encrypt(b"grace") == cipher.hash_to_the_curve(b"grace")


def test_encrypt_point_multiplies_by_key(cipher_a):
    generator = cipher_a.group.get_fixed_generator()
    key = from_bytes(cipher_a.private_key_bytes())
    assert cipher_a.encrypt_point(generator) == generator.mul(key)


def test_sha512_hash_lands_on_curve():
    cipher = ECCommutativeCipher.create_with_new_key(CURVE, HashType.SHA512)
    hashed = cipher.hash_to_the_curve(b"heidi")
    point = cipher.group.create_ec_point(hashed)
    assert point.is_on_curve()
    assert cipher.decrypt(cipher.encrypt(b"heidi")) == hashed


def test_hash_types_agree_with_group():
    cipher = ECCommutativeCipher.create_from_key(CURVE, to_bytes(5), HashType.SHA512)
    expected = cipher.group.get_point_by_hashing_to_curve_sha512(b"ivan")
    assert cipher.hash_to_the_curve(b"ivan") == expected.to_bytes_compressed()


@pytest.mark.parametrize("key_bytes", [b"", b"\x00"])
def test_zero_key_rejected(key_bytes):
    with pytest.raises(InvalidArgumentError):
        ECCommutativeCipher.create_from_key(CURVE, key_bytes, HashType.SHA256)


def test_key_equal_to_order_rejected(cipher_a):
    order = cipher_a.group.order
    with pytest.raises(InvalidArgumentError):
        ECCommutativeCipher.create_from_key(CURVE, to_bytes(order), HashType.SHA256)


def test_unknown_curve_rejected():
    with pytest.raises(InvalidArgumentError):
        ECCommutativeCipher.create_with_new_key(1, HashType.SHA256)


def test_invalid_hash_type_rejected():
    with pytest.raises(InvalidArgumentError):
        ECCommutativeCipher.create_with_new_key(CURVE, "md5")


def test_re_encrypt_rejects_garbage(cipher_a):
    with pytest.raises(InvalidArgumentError):
        cipher_a.re_encrypt(b"not a point")


def test_decrypt_rejects_point_at_infinity(cipher_a):
    with pytest.raises(InvalidArgumentError):
        cipher_a.decrypt(b"\x00")