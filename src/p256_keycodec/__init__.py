"""
P-256 Key and Signature Codec

Encoding, decoding and validation primitives for ECDSA signatures and keys on
NIST P-256 (secp256r1):

- DER encoding of (r, s) signature pairs
- low-S canonicalization against signature malleability
- SEC1 compressed and uncompressed public keys, including point decompression
- fixed-width private key scalars

Signing, verification, key generation and key storage are left to the caller.
Every operation is a pure function; curve parameters are passed explicitly and
default to P-256.
"""

from .crypto import (
    CurveParams,
    P256Curve,
    P256,
    Point,
    curve_polynomial,
    mod_sqrt,
    is_on_curve,
    validate_point
)

from .signature import (
    Signature,
    encode_signature,
    decode_signature,
    is_low_s,
    to_low_s,
    normalize_signature
)

from .pubkey import (
    serialize_uncompressed,
    serialize_compressed,
    serialize_public_key,
    parse_uncompressed,
    parse_compressed,
    parse_public_key
)

from .privkey import (
    serialize_private_key,
    parse_private_key
)

from .ser import (
    KeyCodecError,
    DecodeError,
    EmptyInputError,
    InvalidEncodingError,
    InvalidKeyError,
    NoSquareRootError,
    ScalarOverflowError
)

__version__ = "0.1.0"

__all__ = [
    # Curve parameters
    "CurveParams",
    "P256Curve",
    "P256",
    "Point",
    "curve_polynomial",
    "mod_sqrt",
    "is_on_curve",
    "validate_point",

    # Signatures
    "Signature",
    "encode_signature",
    "decode_signature",
    "is_low_s",
    "to_low_s",
    "normalize_signature",

    # Public keys
    "serialize_uncompressed",
    "serialize_compressed",
    "serialize_public_key",
    "parse_uncompressed",
    "parse_compressed",
    "parse_public_key",

    # Private keys
    "serialize_private_key",
    "parse_private_key",

    # Errors
    "KeyCodecError",
    "DecodeError",
    "EmptyInputError",
    "InvalidEncodingError",
    "InvalidKeyError",
    "NoSquareRootError",
    "ScalarOverflowError",
]
