"""
DER encoding of ECDSA signatures and low-S canonicalization

An ECDSA signature (r, s) verifies exactly when (r, n - s) does. Only the
variant with s <= n / 2 is considered canonical, so normalizing s before a
signature leaves the signer removes the malleability.
"""

from typing import NamedTuple
import logging

from cryptography.hazmat.primitives.asymmetric.utils import (
    decode_dss_signature,
    encode_dss_signature,
)

from .crypto import CurveParams, P256
from .ser import DecodeError, ScalarOverflowError

logger = logging.getLogger(__name__)


class Signature(NamedTuple):
    """An ECDSA signature as its two scalars"""
    r: int
    s: int


def encode_signature(r: int, s: int) -> bytes:
    """
    Encode (r, s) as a DER SEQUENCE of two INTEGERs.

    Integers use the minimal two's-complement length, so the output is
    deterministic for a given pair. Negative scalars raise
    ScalarOverflowError.
    """
    if r < 0 or s < 0:
        logger.debug("refusing to encode signature with a negative scalar")
        raise ScalarOverflowError("signature scalars must be non-negative")
    return encode_dss_signature(r, s)


def decode_signature(data: bytes) -> Signature:
    """
    Decode a DER signature into its (r, s) scalars.

    Raises DecodeError if the bytes are not a well formed SEQUENCE of exactly
    two INTEGERs, or if either scalar is not strictly positive.
    """
    try:
        r, s = decode_dss_signature(bytes(data))
    except (TypeError, ValueError) as e:
        logger.debug("rejecting signature: malformed DER")
        raise DecodeError(f"failed unmarshalling signature [{e}]") from e

    if r <= 0:
        logger.debug("rejecting signature: non-positive R")
        raise DecodeError("invalid signature, R must be larger than zero")
    if s <= 0:
        logger.debug("rejecting signature: non-positive S")
        raise DecodeError("invalid signature, S must be larger than zero")

    return Signature(r, s)


def is_low_s(s: int, curve: CurveParams = P256) -> bool:
    """Check whether s <= n >> 1"""
    return s <= curve.N >> 1


def to_low_s(s: int, curve: CurveParams = P256) -> int:
    """
    Return the canonical form of s: s itself if it is already low,
    otherwise n - s. The argument is never modified.
    """
    if is_low_s(s, curve):
        return s
    return curve.N - s


def normalize_signature(data: bytes, curve: CurveParams = P256) -> bytes:
    """Re-encode a DER signature with its S component in low-S form"""
    r, s = decode_signature(data)
    return encode_signature(r, to_low_s(s, curve))
