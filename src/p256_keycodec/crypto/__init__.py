"""
Curve parameters and base-field arithmetic

This module provides the P-256 parameter set together with the square root
and point validation helpers shared by the key codecs.
"""

from .ec import CurveParams, Point, curve_polynomial, mod_sqrt, is_on_curve, validate_point
from .secp256r1 import P256Curve, P256

__all__ = [
    'CurveParams',
    'Point',
    'curve_polynomial',
    'mod_sqrt',
    'is_on_curve',
    'validate_point',
    'P256Curve',
    'P256',
]
