"""Affine point operations on an emulated curve, with their constraint checks.

Coordinates are plain integers modulo the base field. Operations that a
circuit would constrain raise ConstraintError when the witness values do not
satisfy those constraints: a division by zero in an incomplete formula, a
non-boolean selector, an out-of-range multiplexer index or a failed equality
assertion.
"""

from __future__ import annotations

from dataclasses import dataclass

from .fields import EmulatedField
from .params import CurveParams


class ConstraintError(Exception):
    """Raised when witness values do not satisfy a circuit constraint."""


@dataclass(frozen=True)
class AffinePoint:
    """A point (x, y) on the curve; (0, 0) stands for the point at infinity.

    Membership of the curve is not checked.
    """

    x: int
    y: int


_INFINITY = AffinePoint(0, 0)


@dataclass(frozen=True)
class Curve:
    """An initialised curve over the base field ``base`` with scalars in ``scalars``."""

    base: EmulatedField
    scalars: EmulatedField
    params: CurveParams
    g: AffinePoint
    gm: tuple[AffinePoint, ...]
    a: int
    b: int
    add_a: bool
    eigenvalue: int | None = None
    third_root_one: int | None = None

    # -- field helpers -------------------------------------------------------

    @property
    def _p(self) -> int:
        return self.base.modulus

    def _div(self, num: int, den: int) -> int:
        den %= self._p
        if den == 0:
            raise ConstraintError("division by zero")
        return num * pow(den, -1, self._p) % self._p

    def _is_infinity(self, point: AffinePoint) -> bool:
        return point.x % self._p == 0 and point.y % self._p == 0

    @staticmethod
    def _bit(b: int) -> int:
        if b not in (0, 1):
            raise ConstraintError("selector is not boolean")
        return int(b)

    def _point(self, x: int, y: int) -> AffinePoint:
        return AffinePoint(x % self._p, y % self._p)

    def _tangent_numerator(self, x: int) -> int:
        num = 3 * x * x
        if self.add_a:
            num += self.a
        return num

    # -- public API ----------------------------------------------------------

    def generator(self) -> AffinePoint:
        """The base point of the curve."""
        return self.g

    def generator_multiples(self) -> tuple[AffinePoint, ...]:
        """The precomputed multiples of the base point."""
        return self.gm

    def neg(self, p: AffinePoint) -> AffinePoint:
        """Return the inverse of ``p``."""
        return AffinePoint(p.x, (-p.y) % self._p)

    def assert_is_equal(self, p: AffinePoint, q: AffinePoint) -> None:
        """Raise ConstraintError unless ``p`` and ``q`` are the same point."""
        if (p.x - q.x) % self._p or (p.y - q.y) % self._p:
            raise ConstraintError("points are not equal")

    def add_unified(self, p: AffinePoint, q: AffinePoint) -> AffinePoint:
        """Return p + q with the unified formulas of Brier and Joye.

        ``p`` may equal ``q`` and either or both may be (0, 0).
        """
        modulus = self._p
        p_is_zero = self._is_infinity(p)
        q_is_zero = self._is_infinity(q)

        sum_x = p.x + q.x
        num = sum_x * sum_x - p.x * q.x
        if self.add_a:
            num += self.a
        den = (p.y + q.y) % modulus
        opposite = den == 0
        slope = self._div(num, 1 if opposite else den)

        xr = (slope * slope - sum_x) % modulus
        yr = ((p.x - xr) * slope - p.y) % modulus
        result = AffinePoint(xr, yr)

        if p_is_zero:
            result = q
        if q_is_zero:
            result = p
        if opposite:
            result = _INFINITY
        return result

    def select(self, b: int, p: AffinePoint, q: AffinePoint) -> AffinePoint:
        """Return ``p`` if ``b`` is 1 and ``q`` if it is 0."""
        return p if self._bit(b) else q

    def lookup2(
        self,
        b0: int,
        b1: int,
        i0: AffinePoint,
        i1: AffinePoint,
        i2: AffinePoint,
        i3: AffinePoint,
    ) -> AffinePoint:
        """Return i0, i1, i2 or i3 as selected by the bits (b0, b1), b0 lowest."""
        return (i0, i1, i2, i3)[self._bit(b0) + 2 * self._bit(b1)]

    def mux(self, sel: int, *args: AffinePoint) -> AffinePoint:
        """Return ``args[sel]``."""
        if not args:
            raise ValueError("mux needs at least one input")
        if not 0 <= sel < len(args):
            raise ConstraintError("mux selector out of range")
        return args[sel]

    # -- incomplete formulas used by the scalar multiplications ---------------

    def _add(self, p: AffinePoint, q: AffinePoint) -> AffinePoint:
        """p + q; p must differ from q and -q and neither may be zero."""
        slope = self._div(q.y - p.y, q.x - p.x)
        xr = slope * slope - p.x - q.x
        yr = slope * (p.x - xr) - p.y
        return self._point(xr, yr)

    def _double(self, p: AffinePoint) -> AffinePoint:
        """2p; p.y must be nonzero."""
        slope = self._div(self._tangent_numerator(p.x), 2 * p.y)
        xr = slope * slope - 2 * p.x
        yr = slope * (p.x - xr) - p.y
        return self._point(xr, yr)

    def _triple(self, p: AffinePoint) -> AffinePoint:
        """3p without computing the y coordinate of 2p; p.y must be nonzero."""
        modulus = self._p
        y2 = 2 * p.y
        slope1 = self._div(self._tangent_numerator(p.x), y2)
        x2 = (slope1 * slope1 - 2 * p.x) % modulus
        slope2 = (self._div(y2, p.x - x2) - slope1) % modulus
        xr = slope2 * slope2 - p.x - x2
        yr = slope2 * (p.x - xr) - p.y
        return self._point(xr, yr)

    def _double_and_add(self, p: AffinePoint, q: AffinePoint) -> AffinePoint:
        """2p + q computed as (p + q) + p; p must differ from q and -q."""
        modulus = self._p
        slope1 = self._div(q.y - p.y, q.x - p.x)
        x2 = (slope1 * slope1 - p.x - q.x) % modulus
        slope2 = (slope1 + self._div(2 * p.y, x2 - p.x)) % modulus
        x3 = (slope2 * slope2 - p.x - x2) % modulus
        y3 = slope2 * (x3 - p.x) - p.y
        return self._point(x3, y3)

    def _double_and_add_select(
        self, b: int, p: AffinePoint, q: AffinePoint
    ) -> AffinePoint:
        """2p + q if ``b`` is 1, 2q + p if it is 0."""
        modulus = self._p
        slope1 = self._div(q.y - p.y, q.x - p.x)
        x2 = (slope1 * slope1 - p.x - q.x) % modulus
        t = self.select(b, p, q)
        slope2 = (slope1 + self._div(2 * t.y, x2 - t.x)) % modulus
        x3 = (slope2 * slope2 - t.x - x2) % modulus
        y3 = slope2 * x3 - slope2 * t.x - t.y
        return self._point(x3, y3)


def new_curve(
    base: EmulatedField, scalars: EmulatedField, params: CurveParams
) -> Curve:
    """Build a Curve over ``base`` with scalar field ``scalars`` from ``params``.

    The endomorphism values are kept only when both of them are given.
    """
    gm = tuple(AffinePoint(base.element(x), base.element(y)) for x, y in params.gm)
    eigenvalue: int | None = None
    third_root_one: int | None = None
    if params.eigenvalue is not None and params.third_root_one is not None:
        eigenvalue = scalars.element(params.eigenvalue)
        third_root_one = base.element(params.third_root_one)
    return Curve(
        base=base,
        scalars=scalars,
        params=params,
        g=AffinePoint(base.element(params.gx), base.element(params.gy)),
        gm=gm,
        a=base.element(params.a),
        b=base.element(params.b),
        add_a=params.a != 0,
        eigenvalue=eigenvalue,
        third_root_one=third_root_one,
    )