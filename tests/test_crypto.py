"""
Test cases for curve parameters, point validation and modular square roots
"""

import pytest
from cryptography.hazmat.primitives.asymmetric import ec

from p256_keycodec import (
    P256,
    P256Curve,
    Point,
    curve_polynomial,
    mod_sqrt,
    is_on_curve,
    validate_point,
    InvalidKeyError,
    KeyCodecError,
)

# y^2 = x^3 - 3x + 1 over GF(23), 25 points including infinity
TOY_CURVE = P256Curve(P=23, N=25, B=1, G_X=0, G_Y=1, COORD_BYTES=1)


def _squares(p: int) -> set:
    return {(i * i) % p for i in range(p)}


def test_curve_parameters_match_cryptography():
    """The generator is the one cryptography derives from private scalar 1"""
    numbers = ec.derive_private_key(1, ec.SECP256R1()).public_key().public_numbers()
    assert (numbers.x, numbers.y) == (P256.G_X, P256.G_Y)
    assert P256.COORD_BYTES == 32
    assert P256.P % 4 == 3


def test_curve_parameters_are_immutable():
    with pytest.raises(AttributeError):
        P256.P = 7


def test_curve_polynomial_range():
    assert curve_polynomial(1, 23, 0) == 1
    # 1 - 3 + 1 = -1 wraps to p - 1
    assert curve_polynomial(1, 23, 1) == 22
    assert curve_polynomial(1, 23, 2) == 3
    for x in range(0, 100):
        assert 0 <= curve_polynomial(P256.B, P256.P, x) < P256.P


def test_curve_polynomial_matches_generator():
    assert curve_polynomial(P256.B, P256.P, P256.G_X) == (P256.G_Y * P256.G_Y) % P256.P


@pytest.mark.parametrize("p", [3, 7, 11, 13, 17, 23, 29, 41, 97])
def test_mod_sqrt_small_primes(p):
    """Covers both the p = 3 mod 4 shortcut and Tonelli-Shanks"""
    squares = _squares(p)
    for value in range(p):
        root = mod_sqrt(value, p)
        if value in squares:
            assert root is not None
            assert 0 <= root < p
            assert (root * root) % p == value
        else:
            assert root is None


def test_mod_sqrt_reduces_input():
    root = mod_sqrt(3 + 23 * 5, 23)
    assert root in (7, 16)


def test_mod_sqrt_zero():
    assert mod_sqrt(0, P256.P) == 0


def test_mod_sqrt_p256():
    y2 = (P256.G_Y * P256.G_Y) % P256.P
    root = mod_sqrt(y2, P256.P)
    assert root in (P256.G_Y, P256.P - P256.G_Y)


def test_mod_sqrt_non_residue_p256():
    # -1 is a non-residue for any p = 3 mod 4
    assert mod_sqrt(P256.P - 1, P256.P) is None


def test_is_on_curve():
    assert is_on_curve(P256.G_X, P256.G_Y, P256)
    assert is_on_curve(P256.G_X, P256.P - P256.G_Y, P256)
    assert not is_on_curve(P256.G_X, P256.G_Y + 1, P256)
    assert not is_on_curve(0, 0, P256)
    assert not is_on_curve(P256.G_X + P256.P, P256.G_Y, P256)


def test_is_on_curve_toy():
    assert is_on_curve(0, 1, TOY_CURVE)
    assert is_on_curve(0, 22, TOY_CURVE)
    assert is_on_curve(2, 7, TOY_CURVE)
    assert not is_on_curve(1, 0, TOY_CURVE)


def test_validate_point():
    point = validate_point(P256.G_X, P256.G_Y, P256)
    assert point == Point.generator(P256)
    assert point == Point(P256.G_X, P256.G_Y)


@pytest.mark.parametrize("x, y", [
    (0, 0),
    (P256.P, P256.G_Y),
    (P256.G_X, P256.P),
    (P256.G_X, P256.G_Y + 1),
    (-1, P256.G_Y),
])
def test_validate_point_rejects(x, y):
    with pytest.raises(InvalidKeyError) as excinfo:
        validate_point(x, y, P256)
    assert excinfo.value.error_type == KeyCodecError.ErrorType.INVALID_KEY


def test_point_is_immutable():
    point = Point(1, 2)
    with pytest.raises(AttributeError):
        point.x = 3
