import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from glvmul.fields import BN254_FP, BN254_FR, P256_FP, P256_FR
from glvmul.params import CurveParams, get_bn254_params, get_p256_params
from glvmul.point import AffinePoint, ConstraintError, Curve, new_curve
from glvmul.weierstrass import BN254_CURVE, P256_CURVE

INF = AffinePoint(0, 0)


@pytest.fixture(scope="module")
def p256() -> Curve:
    return new_curve(P256_FP, P256_FR, get_p256_params())


@pytest.fixture(scope="module")
def bn254() -> Curve:
    return new_curve(BN254_FP, BN254_FR, get_bn254_params())


def _mul(ref, curve: Curve, k: int) -> AffinePoint:
    g = curve.generator()
    x, y = ref.scalar_mult((g.x, g.y), k)
    return AffinePoint(x, y)


def _as_tuple(p: AffinePoint) -> tuple[int, int]:
    return (p.x, p.y)


def test_generator_matches_params(p256):
    params = get_p256_params()
    g = p256.generator()
    assert (g.x, g.y) == (params.gx, params.gy)
    assert P256_CURVE.is_on_curve(_as_tuple(g))


def test_new_curve_bn254_keeps_endomorphism(bn254):
    params = get_bn254_params()
    assert bn254.eigenvalue == params.eigenvalue % BN254_FR.modulus
    assert bn254.third_root_one == params.third_root_one
    assert bn254.add_a is False


def test_new_curve_p256_has_no_endomorphism(p256):
    assert p256.eigenvalue is None
    assert p256.third_root_one is None
    assert p256.add_a is True
    assert p256.a == P256_CURVE.a


def test_new_curve_drops_half_given_endomorphism():
    base = get_bn254_params()
    params = CurveParams(
        a=base.a, b=base.b, gx=base.gx, gy=base.gy, gm=base.gm,
        eigenvalue=base.eigenvalue, third_root_one=None,
    )
    curve = new_curve(BN254_FP, BN254_FR, params)
    assert curve.eigenvalue is None
    assert curve.third_root_one is None


def test_neg_is_involution(p256):
    p = _mul(P256_CURVE, p256, 5)
    assert p256.neg(p256.neg(p)) == p
    assert _as_tuple(p256.neg(p)) == P256_CURVE.neg(_as_tuple(p))


def test_assert_is_equal(p256):
    p = _mul(P256_CURVE, p256, 7)
    q = _mul(P256_CURVE, p256, 8)
    with pytest.raises(ConstraintError):
        p256.assert_is_equal(p, q)
    unreduced = AffinePoint(p.x + P256_FP.modulus, p.y)
    assert p256.assert_is_equal(p, unreduced) is None


def test_add_unified_distinct(p256):
    p = _mul(P256_CURVE, p256, 3)
    q = _mul(P256_CURVE, p256, 11)
    assert p256.add_unified(p, q) == _mul(P256_CURVE, p256, 14)


def test_add_unified_doubling(p256, bn254):
    p = _mul(P256_CURVE, p256, 9)
    assert p256.add_unified(p, p) == _mul(P256_CURVE, p256, 18)
    q = _mul(BN254_CURVE, bn254, 9)
    assert bn254.add_unified(q, q) == _mul(BN254_CURVE, bn254, 18)


def test_add_unified_infinity_cases(p256):
    p = _mul(P256_CURVE, p256, 4)
    assert p256.add_unified(INF, p) == p
    assert p256.add_unified(p, INF) == p
    assert p256.add_unified(INF, INF) == INF
    assert p256.add_unified(p, p256.neg(p)) == INF


@settings(max_examples=20, deadline=None)
@given(st.integers(1, 2**64), st.integers(1, 2**64))
def test_add_unified_matches_reference(k, m):
    curve = new_curve(P256_FP, P256_FR, get_p256_params())
    result = curve.add_unified(_mul(P256_CURVE, curve, k), _mul(P256_CURVE, curve, m))
    assert result == _mul(P256_CURVE, curve, k + m)


def test_select(p256):
    p = _mul(P256_CURVE, p256, 2)
    q = _mul(P256_CURVE, p256, 3)
    assert p256.select(1, p, q) == p
    assert p256.select(0, p, q) == q
    with pytest.raises(ConstraintError):
        p256.select(2, p, q)


def test_lookup2(p256):
    pts = [_mul(P256_CURVE, p256, k) for k in (2, 3, 4, 5)]
    assert p256.lookup2(0, 0, *pts) == pts[0]
    assert p256.lookup2(1, 0, *pts) == pts[1]
    assert p256.lookup2(0, 1, *pts) == pts[2]
    assert p256.lookup2(1, 1, *pts) == pts[3]
    with pytest.raises(ConstraintError):
        p256.lookup2(3, 0, *pts)


def test_mux(p256):
    pts = [_mul(P256_CURVE, p256, k) for k in (2, 3, 4)]
    assert p256.mux(2, *pts) == pts[2]
    assert p256.mux(0, *pts) == pts[0]
    with pytest.raises(ConstraintError):
        p256.mux(3, *pts)
    with pytest.raises(ValueError):
        p256.mux(0)


def test_incomplete_add(p256):
    p = _mul(P256_CURVE, p256, 6)
    q = _mul(P256_CURVE, p256, 10)
    assert p256._add(p, q) == _mul(P256_CURVE, p256, 16)
    with pytest.raises(ConstraintError):
        p256._add(p, p)


def test_double_and_triple(p256, bn254):
    p = _mul(P256_CURVE, p256, 13)
    assert p256._double(p) == _mul(P256_CURVE, p256, 26)
    assert p256._triple(p) == _mul(P256_CURVE, p256, 39)
    q = _mul(BN254_CURVE, bn254, 13)
    assert bn254._double(q) == _mul(BN254_CURVE, bn254, 26)
    assert bn254._triple(q) == _mul(BN254_CURVE, bn254, 39)


def test_double_and_add(p256):
    p = _mul(P256_CURVE, p256, 5)
    q = _mul(P256_CURVE, p256, 12)
    assert p256._double_and_add(p, q) == _mul(P256_CURVE, p256, 22)


def test_double_and_add_select(bn254):
    p = _mul(BN254_CURVE, bn254, 5)
    q = _mul(BN254_CURVE, bn254, 12)
    assert bn254._double_and_add_select(1, p, q) == _mul(BN254_CURVE, bn254, 22)
    assert bn254._double_and_add_select(0, p, q) == _mul(BN254_CURVE, bn254, 29)
    with pytest.raises(ConstraintError):
        bn254._double_and_add_select(1, p, p)