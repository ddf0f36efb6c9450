"""A commutative cipher over an elliptic-curve group.

A plaintext is hashed onto the curve and multiplied by a secret scalar. The
cipher is commutative: encrypting with key ``a`` then re-encrypting with key
``b`` gives the same ciphertext as encrypting with ``b`` then ``a``.
Ciphertexts are compressed X9.62 point encodings.
"""

from __future__ import annotations

import enum

from joincrypt.bigint import from_bytes, mod_inverse, to_bytes
from joincrypt.context import BytesLike, Context
from joincrypt.ec_group import ECGroup
from joincrypt.ec_point import ECPoint
from joincrypt.errors import InvalidArgumentError


class HashType(enum.Enum):
    """The hash function used to map plaintexts onto the curve."""

    SHA256 = "sha256"
    SHA512 = "sha512"


def _validate_hash_type(hash_type: object) -> HashType:
    try:
        return HashType(hash_type)
    except ValueError:
        raise InvalidArgumentError("Invalid hash type.") from None


class ECCommutativeCipher:
    """Encrypts strings as ``key * H(plaintext)`` on an elliptic curve."""

    def __init__(
        self, context: Context, group: ECGroup, private_key: int, hash_type: HashType
    ) -> None:
        self._context = context
        self._group = group
        self._private_key = private_key
        self._private_key_inverse = mod_inverse(private_key, group.order)
        self._hash_type = hash_type

    @property
    def group(self) -> ECGroup:
        """The group the cipher works in."""
        return self._group

    @property
    def hash_type(self) -> HashType:
        """The hash function used to map plaintexts onto the curve."""
        return self._hash_type

    @classmethod
    def create_with_new_key(
        cls, curve_id: int, hash_type: HashType = HashType.SHA256
    ) -> ECCommutativeCipher:
        """Create a cipher with a fresh random key in ``[1, order)``."""
        context = Context()
        group = ECGroup.create(curve_id, context)
        hash_type = _validate_hash_type(hash_type)
        return cls(context, group, group.generate_private_key(), hash_type)

    @classmethod
    def create_from_key(
        cls, curve_id: int, key_bytes: bytes, hash_type: HashType = HashType.SHA256
    ) -> ECCommutativeCipher:
        """Create a cipher from a big-endian encoded key.

        Raises :class:`InvalidArgumentError` if the key is not in ``[1, order)``.
        """
        context = Context()
        group = ECGroup.create(curve_id, context)
        hash_type = _validate_hash_type(hash_type)
        private_key = from_bytes(key_bytes)
        group.check_private_key(private_key)
        return cls(context, group, private_key, hash_type)

    def _hash_point(self, plaintext: BytesLike) -> ECPoint:
        if self._hash_type is HashType.SHA512:
            return self._group.get_point_by_hashing_to_curve_sha512(plaintext)
        if self._hash_type is HashType.SHA256:
            return self._group.get_point_by_hashing_to_curve_sha256(plaintext)
        raise InvalidArgumentError("Invalid hash type.")

    def encrypt(self, plaintext: BytesLike) -> bytes:
        """Hash ``plaintext`` onto the curve and encrypt the resulting point."""
        return self.encrypt_point(self._hash_point(plaintext)).to_bytes_compressed()

    def re_encrypt(self, ciphertext: bytes) -> bytes:
        """Encrypt an already encrypted point with this cipher's key."""
        point = self._group.create_ec_point(ciphertext)
        return self.encrypt_point(point).to_bytes_compressed()

    def encrypt_point(self, point: ECPoint) -> ECPoint:
        """Multiply ``point`` by the private key."""
        return point.mul(self._private_key)

    def decrypt(self, ciphertext: bytes) -> bytes:
        """Remove this cipher's layer of encryption from ``ciphertext``."""
        point = self._group.create_ec_point(ciphertext)
        return point.mul(self._private_key_inverse).to_bytes_compressed()

    def hash_to_the_curve(self, plaintext: BytesLike) -> bytes:
        """Return the compressed encoding of ``plaintext`` hashed onto the curve."""
        return self._hash_point(plaintext).to_bytes_compressed()

    def private_key_bytes(self) -> bytes:
        """Return the private key in big-endian form."""
        return to_bytes(self._private_key)