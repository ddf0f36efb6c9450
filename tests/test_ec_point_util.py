import pytest

from joincrypt.ec_commutative_cipher import HashType
from joincrypt.ec_point import CurveId
from joincrypt.errors import InvalidArgumentError
from joincrypt.ec_point_util import ECPointUtil


@pytest.fixture(scope="module")
def util():
    return ECPointUtil.create(CurveId.PRIME256V1)


def test_random_point_is_curve_point(util):
    encoded = util.get_random_curve_point()
    assert len(encoded) == 33
    assert util.is_curve_point(encoded)


@pytest.mark.parametrize("hash_type", [HashType.SHA256, HashType.SHA512])
def test_hash_to_curve_gives_curve_point(util, hash_type):
    encoded = util.hash_to_curve(b"message", hash_type)
    assert util.is_curve_point(encoded)
    assert util.hash_to_curve(b"message", hash_type) == encoded


def test_hash_to_curve_matches_group(util):
    expected = util.group.get_point_by_hashing_to_curve_sha256(b"abc")
    assert util.hash_to_curve(b"abc", HashType.SHA256) == expected.to_bytes_compressed()


def test_hash_to_curve_sha512_matches_group(util):
    expected = util.group.get_point_by_hashing_to_curve_sha512(b"abc")
    assert util.hash_to_curve(b"abc", HashType.SHA512) == expected.to_bytes_compressed()


def test_generator_encoding_is_curve_point(util):
    encoded = util.group.get_fixed_generator().to_bytes_compressed()
    assert util.is_curve_point(encoded)


@pytest.mark.parametrize("data", [b"", b"\x00", b"garbage", b"\x02" + b"\xff" * 32])
def test_invalid_encodings_are_not_curve_points(util, data):
    assert util.is_curve_point(data) is False


def test_invalid_hash_type_rejected(util):
    with pytest.raises(InvalidArgumentError):
        util.hash_to_curve(b"message", "md5")


def test_unknown_curve_rejected():
    with pytest.raises(InvalidArgumentError):
        ECPointUtil.create(12345)


def test_other_curve_points_have_curve_size():
    util = ECPointUtil.create(CurveId.SECP384R1)
    encoded = util.get_random_curve_point()
    assert len(encoded) == 49
    assert util.is_curve_point(encoded)