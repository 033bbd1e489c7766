"""Affine arithmetic on short Weierstrass curves y^2 = x^3 + ax + b."""

from __future__ import annotations

from dataclasses import dataclass

from .fields import BN254_FP, P256_FP

Point = tuple[int, int]

# (0, 0) is not on either supported curve and stands for the point at infinity.
INFINITY: Point = (0, 0)


@dataclass(frozen=True)
class WeierstrassCurve:
    """A curve y^2 = x^3 + ax + b over the prime field of order ``p``."""

    p: int
    a: int
    b: int

    def _normalise(self, point: Point) -> Point:
        x, y = point
        return x % self.p, y % self.p

    def is_on_curve(self, point: Point) -> bool:
        """Whether ``point`` satisfies the curve equation; (0, 0) does not."""
        x, y = point
        if point == INFINITY or not (0 <= x < self.p and 0 <= y < self.p):
            return False
        return (y * y - (x * x * x + self.a * x + self.b)) % self.p == 0

    def neg(self, point: Point) -> Point:
        """Return the inverse of ``point``."""
        if point == INFINITY:
            return INFINITY
        x, y = self._normalise(point)
        return x, (-y) % self.p

    def _chord(self, slope: int, x1: int, y1: int, x2: int) -> Point:
        x3 = (slope * slope - x1 - x2) % self.p
        y3 = (slope * (x1 - x3) - y1) % self.p
        return x3, y3

    def add(self, p: Point, q: Point) -> Point:
        """Return p + q, handling every special case."""
        if p == INFINITY:
            return q
        if q == INFINITY:
            return p
        x1, y1 = self._normalise(p)
        x2, y2 = self._normalise(q)
        if x1 == x2:
            if (y1 + y2) % self.p == 0:
                return INFINITY
            return self.double((x1, y1))
        slope = (y2 - y1) * pow(x2 - x1, -1, self.p) % self.p
        return self._chord(slope, x1, y1, x2)

    def double(self, point: Point) -> Point:
        """Return 2 * point."""
        if point == INFINITY:
            return INFINITY
        x, y = self._normalise(point)
        if y == 0:
            return INFINITY
        slope = (3 * x * x + self.a) * pow(2 * y, -1, self.p) % self.p
        return self._chord(slope, x, y, x)

    def scalar_mult(self, point: Point, k: int) -> Point:
        """Return [k]point by left-to-right double-and-add."""
        if k < 0:
            return self.scalar_mult(self.neg(point), -k)
        result = INFINITY
        for bit in bin(k)[2:]:
            result = self.double(result)
            if bit == "1":
                result = self.add(result, point)
        return result


BN254_CURVE = WeierstrassCurve(p=BN254_FP.modulus, a=0, b=3)

P256_CURVE = WeierstrassCurve(
    p=P256_FP.modulus,
    a=P256_FP.modulus - 3,
    b=0x5AC635D8AA3A93E7B3EBBD55769886BC651D06B0CC53B0F63BCE3C3E27D2604B,
)