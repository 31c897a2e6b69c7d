"""
Fixed-width integer serialization helpers and the error taxonomy

Every codec in this package reports failures through a subclass of
KeyCodecError so callers can branch on the exact validation that failed.
"""

from enum import Enum
from typing import Optional, Tuple
import logging

logger = logging.getLogger(__name__)


class KeyCodecError(Exception):
    """An error when encoding or decoding signatures and keys"""

    class ErrorType(Enum):
        """Kinds of codec errors"""
        DECODE = "decode"
        EMPTY_INPUT = "empty_input"
        INVALID_ENCODING = "invalid_encoding"
        INVALID_KEY = "invalid_key"
        NO_SQUARE_ROOT = "no_square_root"
        OVERFLOW = "overflow"

    # Only the subclasses below carry a kind
    error_type: Optional[ErrorType] = None

    def __init__(self, message: str = ""):
        self.message = message
        if self.error_type is None:
            super().__init__(message)
            return
        value = self.error_type.value
        super().__init__(f"{value}: {message}" if message else value)


class DecodeError(KeyCodecError):
    """Malformed DER signature, or a missing/zero/negative scalar"""
    error_type = KeyCodecError.ErrorType.DECODE


class EmptyInputError(KeyCodecError):
    """Zero-length input where key data was expected"""
    error_type = KeyCodecError.ErrorType.EMPTY_INPUT


class InvalidEncodingError(KeyCodecError):
    """Unknown tag byte or wrong fixed length"""
    error_type = KeyCodecError.ErrorType.INVALID_ENCODING


class InvalidKeyError(KeyCodecError):
    """Coordinate out of range, point not on the curve, or scalar out of range"""
    error_type = KeyCodecError.ErrorType.INVALID_KEY


class NoSquareRootError(KeyCodecError):
    """Compressed X has no matching Y on the curve"""
    error_type = KeyCodecError.ErrorType.NO_SQUARE_ROOT


class ScalarOverflowError(KeyCodecError):
    """Scalar does not fit the fixed serialization width"""
    error_type = KeyCodecError.ErrorType.OVERFLOW


def write_uint(value: int, width: int) -> bytes:
    """
    Write a non-negative integer as exactly `width` big-endian bytes,
    zero-padded on the left.

    Raises ScalarOverflowError rather than truncating.
    """
    if value < 0:
        logger.debug("refusing to serialize negative integer")
        raise ScalarOverflowError("negative integer cannot be serialized")
    if value.bit_length() > width * 8:
        logger.debug("integer of %d bits exceeds %d byte width", value.bit_length(), width)
        raise ScalarOverflowError(f"integer does not fit in {width} bytes")
    return value.to_bytes(width, byteorder='big')


def read_uint(data: bytes, offset: int, width: int) -> Tuple[int, int]:
    """Read a `width`-byte big-endian integer at offset, return (value, new_offset)"""
    if offset + width > len(data):
        raise InvalidEncodingError(f"not enough data for {width}-byte integer")
    return int.from_bytes(data[offset:offset + width], byteorder='big'), offset + width
