"""Short lattice bases for splitting scalars (GLV-style decompositions)."""

from __future__ import annotations

from dataclasses import dataclass
from math import isqrt


def _euclid_divmod(n: int, d: int) -> tuple[int, int]:
    """Euclidean division: the remainder always lies in [0, |d|)."""
    if d == 0:
        raise ZeroDivisionError("division by zero")
    if d > 0:
        return divmod(n, d)
    q = -(n // -d)
    return q, n - q * d


def _rounding(n: int, d: int) -> int:
    """n / d rounded to the nearest integer."""
    q, _ = _euclid_divmod(n + (d >> 1), d)
    return q


def _shift_for(det: int) -> int:
    return 2 * (((det.bit_length() + 32) >> 6) << 6)


@dataclass(frozen=True)
class Lattice:
    """A Z-module spanned by ``v1`` and ``v2``, with ``v[0] + v[1]*k = 0 (mod r)``.

    ``det`` is the determinant of the basis and ``b1``, ``b2`` are the
    precomputed roundings used to split scalars without a division.
    """

    v1: tuple[int, int]
    v2: tuple[int, int]
    det: int
    b1: int
    b2: int

    @property
    def shift(self) -> int:
        """Number of bits the roundings are scaled by."""
        return _shift_for(self.det)


def precompute_lattice(r: int, k: int) -> Lattice:
    """Build a short basis of the lattice of (a, b) with a + b*k = 0 (mod r).

    The first vector comes from stopping the extended Euclidean algorithm on
    (r, k) once the remainder drops to sqrt(r) or below.
    """
    if r <= 0:
        raise ValueError("modulus must be positive")
    sqroot = isqrt(r)

    r0, t0 = r, 0
    r1, t1 = k, 1
    while r1 > sqroot:
        q, rem = _euclid_divmod(r0, r1)
        r0, t0, r1, t1 = r1, t1, rem, t0 - q * t1

    if r1 == 0:
        raise ValueError("k must be nonzero modulo r")
    q, next_r = _euclid_divmod(r0, r1)
    next_t = t0 - q * t1

    v1 = (r1, -t1)
    if r0 * r0 + t0 * t0 > next_r * next_r + next_t * next_t:
        v2 = (next_r, -next_t)
    else:
        v2 = (r0, -t0)

    det = v1[0] * v2[1] - v1[1] * v2[0]
    if det == 0:
        raise ValueError("degenerate lattice")
    n = _shift_for(det)
    b1 = _rounding(v2[1] << n, det)
    b2 = -_rounding(v1[1] << n, det)
    return Lattice(v1=v1, v2=v2, det=det, b1=b1, b2=b2)


def split_scalar(s: int, lattice: Lattice) -> tuple[int, int]:
    """Return (u, v) with u + v*k = s (mod r) for the lattice built from (r, k).

    Both parts may be negative.
    """
    n = lattice.shift
    k1 = (s * lattice.b1) >> n
    k2 = (-(s * lattice.b2)) >> n
    w0 = k1 * lattice.v1[0] + k2 * lattice.v2[0]
    w1 = k1 * lattice.v1[1] + k2 * lattice.v2[1]
    return s - w0, -w1