"""Elliptic-curve groups of prime order built on named curves.

An :class:`ECGroup` ties a named curve to a :class:`Context` and offers key
generation and validation, hashing of arbitrary strings onto the curve and
safe construction of points from their encodings.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from joincrypt.bigint import exact_div, is_bit_set, is_prime, mod_negate, mod_sqrt, to_bytes
from joincrypt.context import BytesLike, Context
from joincrypt.ec_point import Curve, CurveId, ECPoint, curve_for
from joincrypt.errors import InternalError, InvalidArgumentError


@dataclass(frozen=True)
class CurveParams:
    """Parameters of the curve ``y^2 = x^3 + a*x + b`` over ``GF(p)``."""

    p: int
    a: int
    b: int


class ECGroup:
    """The group of points on a named elliptic curve."""

    def __init__(self, context: Context, curve: Curve) -> None:
        params = CurveParams(curve.p, curve.a, curve.b)
        if not is_prime(params.p):
            raise InternalError("ECGroup: curve parameter p is not prime.")
        self._context = context
        self._curve = curve
        self._params = params
        self._p_minus_one_over_two = exact_div(params.p - 1, 2)

    @classmethod
    def create(cls, curve_id: int, context: Context) -> ECGroup:
        """Build the group for a named curve.

        Raises :class:`InvalidArgumentError` for an unknown curve id.
        """
        return cls(context, curve_for(curve_id))

    @property
    def context(self) -> Context:
        """The context supplying randomness and hashing."""
        return self._context

    @property
    def curve(self) -> Curve:
        """The underlying curve."""
        return self._curve

    @property
    def curve_params(self) -> CurveParams:
        """The parameters ``p``, ``a`` and ``b`` of the curve."""
        return self._params

    @property
    def order(self) -> int:
        """The order of the group."""
        return self._curve.order

    @property
    def cofactor(self) -> int:
        """The cofactor of the group."""
        return self._curve.cofactor

    @property
    def curve_id(self) -> CurveId:
        """The identifier of the named curve."""
        return self._curve.curve_id

    def generate_private_key(self) -> int:
        """Return a random private key in ``[1, order)``."""
        return self._context.generate_rand_between(1, self.order)

    def check_private_key(self, private_key: int) -> None:
        """Raise :class:`InvalidArgumentError` unless the key lies in ``[1, order)``."""
        if private_key <= 0 or private_key >= self.order:
            raise InvalidArgumentError(
                "The given key is out of bounds, needs to be in [1, order) instead."
            )

    def compute_y_square(self, x: int) -> int:
        """Return ``x^3 + a*x + b mod p``."""
        p, a, b = self._params.p, self._params.a, self._params.b
        return (x**3 + a * x + b) % p

    def _is_square(self, q: int) -> bool:
        return pow(q, self._p_minus_one_over_two, self._params.p) == 1

    def _is_valid(self, point: ECPoint) -> bool:
        return point.is_on_curve() and not point.is_point_at_infinity()

    def _create_ec_point_xy(self, x: int, y: int) -> ECPoint:
        try:
            point = ECPoint(self._curve, x, y)
        except InvalidArgumentError:
            raise InvalidArgumentError(
                "ECGroup.create_ec_point(x, y) - The point is not valid."
            ) from None
        if not self._is_valid(point):
            raise InvalidArgumentError(
                "ECGroup.create_ec_point(x, y) - The point is not valid."
            )
        return point

    def _hash_candidate(self, x: int) -> Optional[ECPoint]:
        p = self._params.p
        mod_x = x % p
        y_square = self.compute_y_square(mod_x)
        if not self._is_square(y_square):
            return None
        root = mod_sqrt(y_square, p)
        if is_bit_set(root, 0):
            root = mod_negate(root, p)
        return self._create_ec_point_xy(mod_x, root)

    def _hash_to_curve(
        self, message: BytesLike, oracle: Callable[[BytesLike, int], int]
    ) -> ECPoint:
        p = self._params.p
        x = oracle(message, p)
        while True:
            point = self._hash_candidate(x)
            if point is not None:
                return point
            x = oracle(to_bytes(x), p)

    def get_point_by_hashing_to_curve_sha256(self, message: BytesLike) -> ECPoint:
        """Hash ``message`` onto the curve with SHA-256 by try-and-increment."""
        return self._hash_to_curve(message, self._context.random_oracle_sha256)

    def get_point_by_hashing_to_curve_sha512(self, message: BytesLike) -> ECPoint:
        """Hash ``message`` onto the curve with SHA-512 by try-and-increment."""
        return self._hash_to_curve(message, self._context.random_oracle_sha512)

    def get_fixed_generator(self) -> ECPoint:
        """Return the standard generator of the group."""
        return self._curve.generator

    def get_random_generator(self) -> ECPoint:
        """Return a random multiple of the fixed generator."""
        scalar = self._context.generate_rand_between(1, self.order)
        return self.get_fixed_generator().mul(scalar)

    def create_ec_point(self, data: bytes) -> ECPoint:
        """Decode a point, rejecting malformed encodings and the identity."""
        try:
            point = ECPoint.from_bytes(self._curve, data)
        except InvalidArgumentError as exc:
            raise InvalidArgumentError(
                f"ECGroup.create_ec_point(bytes) - Could not decode point.\n{exc}"
            ) from None
        if not self._is_valid(point):
            raise InvalidArgumentError(
                "ECGroup.create_ec_point(bytes) - Decoded point is not valid."
            )
        return point

    def get_point_at_infinity(self) -> ECPoint:
        """Return the identity element of the group."""
        return ECPoint.infinity(self._curve)