"""Helpers for random curve points, hashing to a curve and validating points."""

from __future__ import annotations

from joincrypt.context import BytesLike, Context
from joincrypt.ec_commutative_cipher import HashType
from joincrypt.ec_group import ECGroup
from joincrypt.errors import CryptoError, InvalidArgumentError


class ECPointUtil:
    """Generates random points, hashes strings to the curve and checks points."""

    def __init__(self, context: Context, group: ECGroup) -> None:
        self._context = context
        self._group = group

    @classmethod
    def create(cls, curve_id: int) -> ECPointUtil:
        """Create a helper for a named curve.

        Raises :class:`InvalidArgumentError` for an unknown curve id.
        """
        context = Context()
        return cls(context, ECGroup.create(curve_id, context))

    @property
    def group(self) -> ECGroup:
        """The group the helper works in."""
        return self._group

    def get_random_curve_point(self) -> bytes:
        """Return the compressed encoding of a random point on the curve."""
        return self._group.get_random_generator().to_bytes_compressed()

    def hash_to_curve(self, data: BytesLike, hash_type: HashType = HashType.SHA256) -> bytes:
        """Hash ``data`` onto the curve and return the compressed point."""
        if hash_type is HashType.SHA512:
            point = self._group.get_point_by_hashing_to_curve_sha512(data)
        elif hash_type is HashType.SHA256:
            point = self._group.get_point_by_hashing_to_curve_sha256(data)
        else:
            raise InvalidArgumentError("Invalid hash type.")
        return point.to_bytes_compressed()

    def is_curve_point(self, data: bytes) -> bool:
        """Return True if ``data`` encodes a valid point other than the identity."""
        try:
            self._group.create_ec_point(data)
        except CryptoError:
            return False
        return True