"""
Affine point validation and modular square roots for curves of the form
y^2 = x^3 - 3x + b

The a = -3 shape covers the NIST P-curves, P-256 included.
"""

from dataclasses import dataclass
from typing import Protocol, Optional
import logging

from ..ser import InvalidKeyError

logger = logging.getLogger(__name__)


class CurveParams(Protocol):
    """Protocol defining the interface for elliptic curve parameters"""

    # Curve field prime (p)
    P: int

    # Scalar field prime (n)
    N: int

    # Curve parameter b for y^2 = x^3 - 3x + b
    B: int

    # Generator point coordinates
    G_X: int
    G_Y: int

    # Coordinate byte length
    COORD_BYTES: int


def curve_polynomial(b: int, p: int, x: int) -> int:
    """Evaluate x^3 - 3x + b mod p, always in [0, p)"""
    x3 = x * x * x
    three_x = (x << 1) + x
    return (x3 - three_x + b) % p


def _tonelli_shanks(value: int, p: int) -> int:
    # Write p - 1 = q * 2^s with q odd
    q, s = p - 1, 0
    while q % 2 == 0:
        q //= 2
        s += 1

    # Any quadratic non-residue works as z
    z = 2
    while pow(z, (p - 1) // 2, p) != p - 1:
        z += 1

    m = s
    c = pow(z, q, p)
    t = pow(value, q, p)
    root = pow(value, (q + 1) // 2, p)

    while t != 1:
        # Least i with t^(2^i) == 1
        i, t2 = 0, t
        while t2 != 1:
            t2 = (t2 * t2) % p
            i += 1
        b = pow(c, 1 << (m - i - 1), p)
        m = i
        c = (b * b) % p
        t = (t * c) % p
        root = (root * b) % p

    return root


def mod_sqrt(value: int, p: int) -> Optional[int]:
    """
    Compute a square root of value modulo the odd prime p.

    Returns None if value is a quadratic non-residue. When a root r is returned
    the other root is p - r.
    """
    value %= p
    if value == 0:
        return 0

    # Euler's criterion
    if pow(value, (p - 1) // 2, p) != 1:
        return None

    if p % 4 == 3:
        # y = value^((p+1)/4), valid for P-256 and P-384
        root = pow(value, (p + 1) // 4, p)
    else:
        root = _tonelli_shanks(value, p)

    if (root * root) % p != value:
        return None
    return root


@dataclass(frozen=True)
class Point:
    """Elliptic curve point in affine coordinates"""

    x: int
    y: int

    @classmethod
    def generator(cls, curve: CurveParams) -> 'Point':
        """Return the generator point for the curve"""
        return cls(curve.G_X, curve.G_Y)


def is_on_curve(x: int, y: int, curve: CurveParams) -> bool:
    """Check 0 <= x, y < p and y^2 = x^3 - 3x + b (mod p)"""
    if not (0 <= x < curve.P and 0 <= y < curve.P):
        return False
    return (y * y) % curve.P == curve_polynomial(curve.B, curve.P, x)


def validate_point(x: int, y: int, curve: CurveParams) -> Point:
    """
    Build a Point from externally supplied coordinates.

    Both the compressed and the uncompressed public key parsers go through
    here, so they reject exactly the same set of points.
    """
    if x < 0 or x >= curve.P:
        logger.debug("rejecting point: x out of field range")
        raise InvalidKeyError("pubkey X parameter is >= to P")
    if y < 0 or y >= curve.P:
        logger.debug("rejecting point: y out of field range")
        raise InvalidKeyError("pubkey Y parameter is >= to P")
    if not is_on_curve(x, y, curve):
        logger.debug("rejecting point: not on curve")
        raise InvalidKeyError("pubkey isn't on the curve")
    return Point(x, y)
