"""Out-of-circuit computations whose results the circuits then check."""

from __future__ import annotations

from collections.abc import Callable, Sequence

from .fields import BN254_FP, BN254_FR, P256_FP, P256_FR
from .lattice import precompute_lattice, split_scalar
from .weierstrass import BN254_CURVE, INFINITY, P256_CURVE

Hint = Callable[[int, Sequence[int]], list[int]]

_SUPPORTED = {
    P256_FP.modulus: (P256_FP, P256_FR, P256_CURVE, True),
    BN254_FP.modulus: (BN254_FP, BN254_FR, BN254_CURVE, False),
}


def _expect_inputs(inputs: Sequence[int], count: int) -> None:
    if len(inputs) != count:
        word = "one input" if count == 1 else f"{count} inputs"
        raise ValueError(f"expecting {word}")


def decompose_scalar_g1_subscalars(field: int, inputs: Sequence[int]) -> list[int]:
    """Absolute values of the GLV split of ``inputs[0]`` for eigenvalue ``inputs[1]``.

    The absolute values are returned because negative values would otherwise
    be reduced modulo the wrong field.
    """
    _expect_inputs(inputs, 2)
    s, eigenvalue = inputs
    u, v = split_scalar(s, precompute_lattice(field, eigenvalue))
    return [abs(u), abs(v)]


def decompose_scalar_g1_signs(field: int, inputs: Sequence[int]) -> list[int]:
    """Sign bits (1 for negative) of the GLV split of ``inputs[0]``."""
    _expect_inputs(inputs, 2)
    s, eigenvalue = inputs
    u, v = split_scalar(s, precompute_lattice(field, eigenvalue))
    return [int(u < 0), int(v < 0)]


def scalar_mul_hint(field: int, inputs: Sequence[int]) -> list[int]:
    """Compute [s]P from the limbs of P.x, P.y and s.

    ``field`` is the base field modulus; P-256 and BN254 are supported.
    """
    try:
        fp, fr, curve, check_point = _SUPPORTED[field]
    except KeyError:
        raise ValueError("unsupported curve") from None
    n = fp.nb_limbs
    if len(inputs) < 2 * n:
        raise ValueError("expecting the limbs of two coordinates and a scalar")
    px = fp.from_limbs(inputs[:n])
    py = fp.from_limbs(inputs[n : 2 * n])
    s = fr.from_limbs(inputs[2 * n :])

    if check_point:
        point = (px, py)
        if point != INFINITY and not curve.is_on_curve(point):
            raise ValueError("scalar multiplication of an invalid point")
    else:
        point = (px % curve.p, py % curve.p)

    qx, qy = curve.scalar_mult(point, s)
    return [qx, qy]


def half_gcd_signs(field: int, inputs: Sequence[int]) -> list[int]:
    """1 if the second coordinate of the short vector for ``inputs[0]`` is negative."""
    _expect_inputs(inputs, 1)
    lattice = precompute_lattice(field, inputs[0])
    return [int(lattice.v1[1] < 0)]


def half_gcd(field: int, inputs: Sequence[int]) -> list[int]:
    """Short (s1, |s2|) with s1 + s2*inputs[0] = 0 modulo ``field``."""
    _expect_inputs(inputs, 1)
    lattice = precompute_lattice(field, inputs[0])
    return [lattice.v1[0], abs(lattice.v1[1])]


def get_hints() -> list[Hint]:
    """All hints the circuits rely on."""
    return [
        decompose_scalar_g1_signs,
        decompose_scalar_g1_subscalars,
        scalar_mul_hint,
        half_gcd,
        half_gcd_signs,
    ]