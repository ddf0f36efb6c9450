"""Elliptic curves over prime fields and points on them.

Points are immutable values; arithmetic returns new points. Encoding follows
ANSI X9.62: compressed ``02``/``03`` followed by x, uncompressed ``04``
followed by x and y, and a single zero byte for the point at infinity.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional, Tuple

from joincrypt.bigint import from_bytes, mod_sqrt
from joincrypt.errors import InvalidArgumentError

_Affine = Optional[Tuple[int, int]]


class CurveId(enum.IntEnum):
    """Identifiers of the supported named curves."""

    PRIME256V1 = 415
    SECP224R1 = 713
    SECP384R1 = 715
    SECP521R1 = 716


@dataclass(frozen=True)
class Curve:
    """A short Weierstrass curve ``y^2 = x^3 + a*x + b`` over ``GF(p)``."""

    curve_id: CurveId
    name: str
    p: int
    a: int
    b: int
    gx: int
    gy: int
    order: int
    cofactor: int = 1

    @property
    def field_size(self) -> int:
        """Number of bytes in an encoded field element."""
        return (self.p.bit_length() + 7) // 8

    @property
    def generator(self) -> ECPoint:
        """The standard base point of the curve."""
        return ECPoint(self, self.gx, self.gy)

    def y_square(self, x: int) -> int:
        """Return ``x^3 + a*x + b mod p``."""
        return (x * x * x + self.a * x + self.b) % self.p

    def contains(self, x: int, y: int) -> bool:
        """Return True if the affine point ``(x, y)`` lies on the curve."""
        if not (0 <= x < self.p and 0 <= y < self.p):
            return False
        return (y * y - self.y_square(x)) % self.p == 0


def _nist_curve(curve_id, name, p, b, gx, gy, order) -> Curve:
    return Curve(curve_id, name, p, p - 3, b, gx, gy, order)


_P224 = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFF000000000000000000000001
_P256 = 0xFFFFFFFF00000001000000000000000000000000FFFFFFFFFFFFFFFFFFFFFFFF
_P384 = int(
    "FFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFE"
    "FFFFFFFF0000000000000000FFFFFFFF",
    16,
)
_P521 = (1 << 521) - 1

_CURVES = {
    CurveId.SECP224R1: _nist_curve(
        CurveId.SECP224R1,
        "secp224r1",
        _P224,
        0xB4050A850C04B3ABF54132565044B0B7D7BFD8BA270B39432355FFB4,
        0xB70E0CBD6BB4BF7F321390B94A03C1D356C21122343280D6115C1D21,
        0xBD376388B5F723FB4C22DFE6CD4375A05A07476444D5819985007E34,
        0xFFFFFFFFFFFFFFFFFFFFFFFFFFFF16A2E0B8F03E13DD29455C5C2A3D,
    ),
    CurveId.PRIME256V1: _nist_curve(
        CurveId.PRIME256V1,
        "prime256v1",
        _P256,
        0x5AC635D8AA3A93E7B3EBBD55769886BC651D06B0CC53B0F63BCE3C3E27D2604B,
        0x6B17D1F2E12C4247F8BCE6E563A440F277037D812DEB33A0F4A13945D898C296,
        0x4FE342E2FE1A7F9B8EE7EB4A7C0F9E162BCE33576B315ECECBB6406837BF51F5,
        0xFFFFFFFF00000000FFFFFFFFFFFFFFFFBCE6FAADA7179E84F3B9CAC2FC632551,
    ),
    CurveId.SECP384R1: _nist_curve(
        CurveId.SECP384R1,
        "secp384r1",
        _P384,
        int(
            "B3312FA7E23EE7E4988E056BE3F82D19181D9C6EFE8141120314088F5013875A"
            "C656398D8A2ED19D2A85C8EDD3EC2AEF",
            16,
        ),
        int(
            "AA87CA22BE8B05378EB1C71EF320AD746E1D3B628BA79B9859F741E082542A38"
            "5502F25DBF55296C3A545E3872760AB7",
            16,
        ),
        int(
            "3617DE4A96262C6F5D9E98BF9292DC29F8F41DBD289A147CE9DA3113B5F0B8C0"
            "0A60B1CE1D7E819D7A431D7C90EA0E5F",
            16,
        ),
        int(
            "FFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFC7634D81F4372DDF"
            "581A0DB248B0A77AECEC196ACCC52973",
            16,
        ),
    ),
    CurveId.SECP521R1: _nist_curve(
        CurveId.SECP521R1,
        "secp521r1",
        _P521,
        int(
            "0051953EB9618E1C9A1F929A21A0B68540EEA2DA725B99B315F3B8B489918EF1"
            "09E156193951EC7E937B1652C0BD3BB1BF073573DF883D2C34F1EF451FD46B50"
            "3F00",
            16,
        ),
        int(
            "00C6858E06B70404E9CD9E3ECB662395B4429C648139053FB521F828AF606B4D"
            "3DBAA14B5E77EFE75928FE1DC127A2FFA8DE3348B3C1856A429BF97E7E31C2E5"
            "BD66",
            16,
        ),
        int(
            "011839296A789A3BC0045C8A5FB42C7D1BD998F54449579B446817AFBD17273E"
            "662C97EE72995EF42640C550B9013FAD0761353C7086A272C24088BE94769FD1"
            "6650",
            16,
        ),
        int(
            "01FFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFF"
            "FA51868783BF2F966B7FCC0148F709A5D03BB5C9B8899C47AEBB6FB71E913864"
            "09",
            16,
        ),
    ),
}


def curve_for(curve_id: int) -> Curve:
    """Return the curve registered under ``curve_id``."""
    try:
        return _CURVES[CurveId(curve_id)]
    except ValueError:
        raise InvalidArgumentError(
            f"Could not create group: unknown curve id {curve_id}."
        ) from None


def _affine_add(curve: Curve, first: _Affine, second: _Affine) -> _Affine:
    if first is None:
        return second
    if second is None:
        return first
    p = curve.p
    x1, y1 = first
    x2, y2 = second
    if x1 == x2:
        if (y1 + y2) % p == 0:
            return None
        slope = (3 * x1 * x1 + curve.a) * pow(2 * y1, -1, p) % p
    else:
        slope = (y2 - y1) * pow(x2 - x1, -1, p) % p
    x3 = (slope * slope - x1 - x2) % p
    y3 = (slope * (x1 - x3) - y1) % p
    return x3, y3


def _affine_mul(curve: Curve, point: _Affine, scalar: int) -> _Affine:
    result: _Affine = None
    for bit in bin(scalar)[2:]:
        result = _affine_add(curve, result, result)
        if bit == "1":
            result = _affine_add(curve, result, point)
    return result


@dataclass(frozen=True)
class ECPoint:
    """A point on a :class:`Curve`; ``x`` and ``y`` are None at infinity."""

    curve: Curve
    x: Optional[int] = None
    y: Optional[int] = None

    def __post_init__(self) -> None:
        if (self.x is None) != (self.y is None):
            raise InvalidArgumentError("Both coordinates must be given, or neither.")
        if self.x is not None and not self.curve.contains(self.x, self.y):
            raise InvalidArgumentError("The point is not on the curve.")

    @classmethod
    def _from_affine(cls, curve: Curve, affine: _Affine) -> ECPoint:
        if affine is None:
            return cls(curve)
        return cls(curve, affine[0], affine[1])

    @property
    def _affine(self) -> _Affine:
        if self.x is None:
            return None
        return self.x, self.y

    @classmethod
    def from_bytes(cls, curve: Curve, data: bytes) -> ECPoint:
        """Decode an X9.62 octet string into a point on ``curve``."""
        data = bytes(data)
        if not data:
            raise InvalidArgumentError("Could not decode point: empty input.")
        form = data[0]
        size = curve.field_size
        if form == 0:
            if len(data) != 1:
                raise InvalidArgumentError("Could not decode point: bad length.")
            return cls.infinity(curve)
        if form in (2, 3):
            if len(data) != 1 + size:
                raise InvalidArgumentError("Could not decode point: bad length.")
            x = from_bytes(data[1:])
            if x >= curve.p:
                raise InvalidArgumentError("Could not decode point: x out of range.")
            try:
                y = mod_sqrt(curve.y_square(x), curve.p)
            except InvalidArgumentError:
                raise InvalidArgumentError(
                    "Could not decode point: no point with this x coordinate."
                ) from None
            if (y & 1) != (form & 1):
                y = (curve.p - y) % curve.p
            if (y & 1) != (form & 1):
                raise InvalidArgumentError("Could not decode point: invalid encoding.")
            return cls(curve, x, y)
        if form in (4, 6, 7):
            if len(data) != 1 + 2 * size:
                raise InvalidArgumentError("Could not decode point: bad length.")
            x = from_bytes(data[1 : 1 + size])
            y = from_bytes(data[1 + size :])
            if form != 4 and (y & 1) != (form & 1):
                raise InvalidArgumentError("Could not decode point: invalid encoding.")
            return cls(curve, x, y)
        raise InvalidArgumentError(f"Could not decode point: unknown form {form}.")

    @classmethod
    def infinity(cls, curve: Curve) -> ECPoint:
        """Return the point at infinity, the identity of the group."""
        return cls(curve)

    def to_bytes_compressed(self) -> bytes:
        """Encode the point in compressed X9.62 form."""
        if self.x is None:
            return b"\x00"
        size = self.curve.field_size
        return bytes([2 | (self.y & 1)]) + self.x.to_bytes(size, "big")

    def to_bytes_uncompressed(self) -> bytes:
        """Encode the point in uncompressed X9.62 form."""
        if self.x is None:
            return b"\x00"
        size = self.curve.field_size
        return b"\x04" + self.x.to_bytes(size, "big") + self.y.to_bytes(size, "big")

    def mul(self, scalar: int) -> ECPoint:
        """Return ``scalar * self``; negative scalars are allowed."""
        group_size = self.curve.order * self.curve.cofactor
        return self._from_affine(
            self.curve, _affine_mul(self.curve, self._affine, scalar % group_size)
        )

    def add(self, other: ECPoint) -> ECPoint:
        """Return ``self + other``."""
        if other.curve != self.curve:
            raise InvalidArgumentError("Cannot add points on different curves.")
        return self._from_affine(
            self.curve, _affine_add(self.curve, self._affine, other._affine)
        )

    def inverse(self) -> ECPoint:
        """Return the additive inverse ``-self``."""
        if self.x is None:
            return self
        return ECPoint(self.curve, self.x, (-self.y) % self.curve.p)

    def is_point_at_infinity(self) -> bool:
        """Return True if this is the identity element."""
        return self.x is None

    def is_on_curve(self) -> bool:
        """Return True if the point belongs to its curve's group."""
        return self.x is None or self.curve.contains(self.x, self.y)

    def __add__(self, other: ECPoint) -> ECPoint:
        if not isinstance(other, ECPoint):
            return NotImplemented
        return self.add(other)

    def __neg__(self) -> ECPoint:
        return self.inverse()

    def __sub__(self, other: ECPoint) -> ECPoint:
        if not isinstance(other, ECPoint):
            return NotImplemented
        return self.add(other.inverse())

    def __mul__(self, scalar: int) -> ECPoint:
        if not isinstance(scalar, int):
            return NotImplemented
        return self.mul(scalar)

    __rmul__ = __mul__