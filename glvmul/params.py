"""Curve parameters and precomputed generator tables."""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from itertools import accumulate

from .fields import BN254_FP, P256_FP, EmulatedField
from .weierstrass import BN254_CURVE, P256_CURVE, Point, WeierstrassCurve

_BN254_GENERATOR: Point = (1, 2)
_P256_GENERATOR: Point = (
    0x6B17D1F2E12C4247F8BCE6E563A440F277037D812DEB33A0F4A13945D898C296,
    0x4FE342E2FE1A7F9B8EE7EB4A7C0F9E162BCE33576B315ECECBB6406837BF51F5,
)
_TABLE_SIZE = 256


@dataclass(frozen=True)
class CurveParams:
    """Parameters of a curve y^2 = x^3 + ax + b with base point (gx, gy).

    ``gm`` holds [3]G, [5]G, [7]G followed by [2^i]G for i = 3..255.
    ``eigenvalue`` and ``third_root_one`` describe the GLV endomorphism when
    the curve has one, and are None otherwise.
    """

    a: int
    b: int
    gx: int
    gy: int
    gm: tuple[Point, ...]
    eigenvalue: int | None = None
    third_root_one: int | None = None


def _generator_table(curve: WeierstrassCurve, g: Point) -> tuple[Point, ...]:
    doubles = list(
        accumulate(range(_TABLE_SIZE - 1), lambda pt, _: curve.double(pt), initial=g)
    )
    table = [
        curve.add(doubles[1], g),
        curve.add(doubles[2], g),
        curve.add(doubles[3], curve.neg(g)),
    ]
    table.extend(doubles[3:])
    return tuple(table)


def compute_bn254_table() -> tuple[Point, ...]:
    """Precomputed multiples of the BN254 G1 generator."""
    return _generator_table(BN254_CURVE, _BN254_GENERATOR)


def compute_p256_table() -> tuple[Point, ...]:
    """Precomputed multiples of the P-256 base point."""
    return _generator_table(P256_CURVE, _P256_GENERATOR)


@lru_cache(maxsize=None)
def get_bn254_params() -> CurveParams:
    """Curve parameters of BN254 (alt_bn128), with base field BN254Fp."""
    return CurveParams(
        a=BN254_CURVE.a,
        b=BN254_CURVE.b,
        gx=_BN254_GENERATOR[0],
        gy=_BN254_GENERATOR[1],
        gm=compute_bn254_table(),
        eigenvalue=4407920970296243842393367215006156084916469457145843978461,
        third_root_one=2203960485148121921418603742825762020974279258880205651966,
    )


@lru_cache(maxsize=None)
def get_p256_params() -> CurveParams:
    """Curve parameters of P-256 (secp256r1), with base field P256Fp."""
    return CurveParams(
        a=P256_CURVE.a,
        b=P256_CURVE.b,
        gx=_P256_GENERATOR[0],
        gy=_P256_GENERATOR[1],
        gm=compute_p256_table(),
    )


def get_curve_params(base: EmulatedField) -> CurveParams:
    """Return the stored parameters of the curve whose base field is ``base``."""
    if base.modulus == BN254_FP.modulus:
        return get_bn254_params()
    if base.modulus == P256_FP.modulus:
        return get_p256_params()
    raise ValueError("no stored parameters")