"""
Fixed-width private key serialization
"""

import logging

from .crypto import CurveParams, P256
from .ser import EmptyInputError, InvalidEncodingError, InvalidKeyError, write_uint

logger = logging.getLogger(__name__)

PRIVATE_KEY_LENGTH = 32


def serialize_private_key(d: int, width: int = PRIVATE_KEY_LENGTH) -> bytes:
    """
    Serialize the scalar d as exactly `width` big-endian bytes.

    Raises ScalarOverflowError if d does not fit; key material is never
    truncated.
    """
    return write_uint(d, width)


def parse_private_key(data: bytes, curve: CurveParams = P256) -> int:
    """Parse a fixed-width private key, requiring 0 < d < n"""
    if len(data) == 0:
        raise EmptyInputError("private key string is empty")
    if len(data) != curve.COORD_BYTES:
        logger.debug("rejecting private key of %d bytes", len(data))
        raise InvalidEncodingError(f"private key must be {curve.COORD_BYTES} bytes")

    d = int.from_bytes(data, byteorder='big')
    if d == 0 or d >= curve.N:
        logger.debug("rejecting private key: scalar out of range")
        raise InvalidKeyError("private key must be in [1, N)")
    return d
