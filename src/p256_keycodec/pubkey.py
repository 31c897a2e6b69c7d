"""
SEC1 public key serialization for P-256

Uncompressed keys are 0x04 || X || Y, compressed keys are (0x02 | y&1) || X,
with every coordinate written as a fixed-width big-endian field.
"""

import logging

from .crypto import CurveParams, P256, Point, curve_polynomial, mod_sqrt, validate_point
from .ser import (
    EmptyInputError,
    InvalidEncodingError,
    InvalidKeyError,
    NoSquareRootError,
    read_uint,
    write_uint,
)

logger = logging.getLogger(__name__)

PUBKEY_UNCOMPRESSED = 0x04  # x coord + y coord
PUBKEY_COMPRESSED_EVEN = 0x02
PUBKEY_COMPRESSED_ODD = 0x03


def serialize_uncompressed(point: Point, curve: CurveParams = P256) -> bytes:
    """Serialize a point as 0x04 || X || Y"""
    width = curve.COORD_BYTES
    return bytes([PUBKEY_UNCOMPRESSED]) + write_uint(point.x, width) + write_uint(point.y, width)


def serialize_compressed(point: Point, curve: CurveParams = P256) -> bytes:
    """Serialize a point as its parity tag followed by X"""
    tag = PUBKEY_COMPRESSED_EVEN | (point.y & 1)
    return bytes([tag]) + write_uint(point.x, curve.COORD_BYTES)


def serialize_public_key(point: Point, compressed: bool = False, curve: CurveParams = P256) -> bytes:
    if compressed:
        return serialize_compressed(point, curve)
    return serialize_uncompressed(point, curve)


def parse_uncompressed(data: bytes, curve: CurveParams = P256, strict: bool = False) -> Point:
    """
    Parse an uncompressed public key.

    The leading tag byte is skipped without inspection unless strict is set,
    in which case anything other than 0x04 is an InvalidEncodingError.
    Coordinates must be below p and the point must lie on the curve.
    """
    if len(data) == 0:
        raise EmptyInputError("pubkey string is empty")

    width = curve.COORD_BYTES
    if len(data) != 1 + 2 * width:
        logger.debug("rejecting uncompressed pubkey of %d bytes", len(data))
        raise InvalidEncodingError(f"uncompressed pubkey must be {1 + 2 * width} bytes")
    if strict and data[0] != PUBKEY_UNCOMPRESSED:
        logger.debug("rejecting uncompressed pubkey with tag 0x%02x", data[0])
        raise InvalidEncodingError("uncompressed pubkey must start with 0x04")

    x, offset = read_uint(data, 1, width)
    y, _ = read_uint(data, offset, width)
    return validate_point(x, y, curve)


def parse_compressed(data: bytes, curve: CurveParams = P256) -> Point:
    """
    Parse a compressed public key, recovering Y from the curve equation.

    The square root of x^3 - 3x + b is taken mod p and negated when its
    parity does not match the tag byte.
    """
    if len(data) == 0:
        raise EmptyInputError("pubkey string is empty")

    width = curve.COORD_BYTES
    if len(data) != 1 + width:
        logger.debug("rejecting compressed pubkey of %d bytes", len(data))
        raise InvalidEncodingError(f"compressed pubkey must be {1 + width} bytes")

    tag = data[0]
    if tag != PUBKEY_COMPRESSED_EVEN and tag != PUBKEY_COMPRESSED_ODD:
        logger.debug("rejecting compressed pubkey with tag 0x%02x", tag)
        raise InvalidEncodingError("compressed pubkey tag must be 0x02 or 0x03")

    p = curve.P
    x, _ = read_uint(data, 1, width)
    if x >= p:
        raise InvalidKeyError("pubkey X parameter is >= to P")

    y = mod_sqrt(curve_polynomial(curve.B, p, x), p)
    if y is None:
        logger.debug("rejecting compressed pubkey: x has no square root")
        raise NoSquareRootError("pubkey X has no matching Y on the curve")
    if (y & 1) != (tag & 1):
        y = (p - y) % p

    # Re-check the recovered point through the shared validator
    return validate_point(x, y, curve)


def parse_public_key(data: bytes, curve: CurveParams = P256) -> Point:
    """Parse either public key encoding, dispatching on the tag byte"""
    if len(data) == 0:
        raise EmptyInputError("pubkey string is empty")

    tag = data[0]
    if tag == PUBKEY_UNCOMPRESSED:
        return parse_uncompressed(data, curve, strict=True)
    if tag in (PUBKEY_COMPRESSED_EVEN, PUBKEY_COMPRESSED_ODD):
        return parse_compressed(data, curve)
    logger.debug("rejecting pubkey with unknown tag 0x%02x", tag)
    raise InvalidEncodingError(f"unknown pubkey tag 0x{tag:02x}")
