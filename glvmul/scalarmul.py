"""Scalar multiplication on an emulated curve, with the checks a circuit makes.

Two algorithms are provided:

* ``scalar_mul_fake_glv`` takes [s]Q from a hint and verifies it by splitting
  s into two half-size sub-scalars s1, s2 with s1 + s2*s = 0 (mod r) and
  checking that [s1]Q + [s2]([s]Q) is the neutral element.
* ``scalar_mul_joye`` computes [s]P with the right-to-left double-and-add
  ladder of Joye.

Both raise ConstraintError when an equality check fails or an incomplete
formula meets a zero denominator.
"""

from __future__ import annotations

from .hints import half_gcd, half_gcd_signs, scalar_mul_hint
from .point import AffinePoint, ConstraintError, Curve

_INFINITY = AffinePoint(0, 0)


def _bits(value: int, width: int) -> list[int]:
    """Little-endian bits of a non-negative ``value``, ``width`` of them."""
    return [(value >> i) & 1 for i in range(width)]


def scalar_mul_fake_glv(
    curve: Curve,
    q: AffinePoint,
    s: int,
    complete_arithmetic: bool = False,
) -> AffinePoint:
    """Return [s]Q, taken from a hint and checked with a half-size decomposition.

    Unless ``complete_arithmetic`` is set, ``s`` must be nonzero and ``q`` must
    not be (0, 0).
    """
    r = curve.scalars.modulus
    p = curve.base.modulus
    s %= r
    q = AffinePoint(q.x % p, q.y % p)

    s_is_zero = complete_arithmetic and s == 0
    s_eff = 1 if s_is_zero else s

    # Sub-scalars s1, s2 with s1 + s2*s = 0 (mod r), both about sqrt(r).
    s1, s2 = half_gcd(r, [s_eff])
    (sign,) = half_gcd_signs(r, [s_eff])
    s2_signed = (-s2) % r if sign else s2 % r
    if (s1 + s_eff * s2_signed) % r:
        raise ConstraintError("sub-scalars do not satisfy s1 + s*s2 = 0 (mod r)")
    # s1 = s2 = 0 would make the check below hold for any claimed result.
    if s2_signed == 0:
        raise ConstraintError("second sub-scalar is zero")

    inputs = [
        *curve.base.to_limbs(q.x),
        *curve.base.to_limbs(q.y),
        *curve.scalars.to_limbs(s),
    ]
    rx, ry = scalar_mul_hint(p, inputs)
    r0, r1 = rx, ry

    add_fn = curve._add
    q_is_zero = False
    if complete_arithmetic:
        add_fn = curve.add_unified
        q_is_zero = curve._is_infinity(q)
        if q_is_zero:
            # Continue with a dummy Q = (1, 1) and R = (0, 1).
            q = AffinePoint(1, 1)
            r0, r1 = 0, 1

    nbits = (r.bit_length() + 1) // 2
    width = curve.scalars.bit_length
    s1bits = _bits(s1, width)
    s2bits = _bits(s2, width)

    q_neg = curve.neg(q)
    q_triple = curve._triple(q)
    r_pos = AffinePoint(r0, (-r1) % p if sign else r1)
    r_neg = curve.neg(r_pos)
    if complete_arithmetic:
        r_triple = curve.add_unified(curve.add_unified(r_pos, r_pos), r_pos)
    else:
        r_triple = curve._triple(r_pos)

    # The accumulator starts at Q + R, as if the top bits of s1 and s2 were 1.
    acc = curve._add(q, r_pos)

    # Two merged iterations add T = [2]P + P' with P, P' in {±Q ± R}.
    t1 = curve._add(q_triple, r_triple)
    t2 = acc
    t3 = curve._add(q_triple, r_pos)
    t4 = curve._add(q, r_triple)
    t5 = curve.neg(t2)
    t6 = curve.neg(t1)
    t7 = curve.neg(t4)
    t8 = curve.neg(t3)
    t9 = curve._add(q_triple, r_neg)
    r_triple_neg = curve.neg(r_triple)
    t10 = curve._add(q, r_triple_neg)
    t11 = curve._add(q_triple, r_triple_neg)
    t12 = curve._add(r_neg, q)
    t13 = curve.neg(t10)
    t14 = curve.neg(t9)
    t15 = curve.neg(t12)
    t16 = curve.neg(t11)
    table = (
        t6, t10, t14, t2, t7, t11, t15, t3,
        t8, t12, t16, t4, t5, t9, t13, t1,
    )

    def lookup(i: int) -> AffinePoint:
        selector = s1bits[i] + 2 * s2bits[i] + 4 * s1bits[i - 1] + 8 * s2bits[i - 1]
        return curve.mux(selector, *table)

    if nbits % 2 == 0:
        # Handled apart: doubleAndAdd would hit T = ±Acc for bits 00 and 11.
        t = curve.lookup2(s1bits[nbits - 1], s2bits[nbits - 1], t5, t12, t15, t2)
        acc = curve._double(acc)
        acc = curve._add(acc, t)
    else:
        nbits += 1

    for i in range(nbits - 2, 2, -2):
        t = lookup(i)
        acc = curve._double(acc)
        acc = curve._double_and_add(acc, t)

    # Last merged iteration: add [3]R as well to stay clear of incomplete cases.
    t = curve._add(lookup(2), r_triple)
    acc = curve._double(acc)
    acc = curve._double_and_add(acc, t)

    # Subtract Q and R where the lowest bits are 0.
    q_corrected = add_fn(q_neg, acc)
    acc = curve.select(s1bits[0], acc, q_corrected)
    r_corrected = add_fn(r_neg, acc)
    acc = curve.select(s2bits[0], acc, r_corrected)

    if complete_arithmetic:
        acc = curve.select(int(s_is_zero or q_is_zero), r_triple, acc)

    # [s1]Q + [s2]R + [3]R = [s1 + s2*s]Q + [3]R = [3]R.
    curve.assert_is_equal(acc, r_triple)
    return AffinePoint(rx, ry)


def scalar_mul_joye(
    curve: Curve,
    p: AffinePoint,
    s: int,
    complete_arithmetic: bool = False,
    nb_scalar_bits: int = 0,
) -> AffinePoint:
    """Return [s]P with Joye's right-to-left double-and-add ladder.

    Only the lowest ``nb_scalar_bits`` bits of ``s`` are used when that number
    is above 2 and below the bit length of the scalar field. Unless
    ``complete_arithmetic`` is set, ``p`` must not be (0, 0).
    """
    modulus = curve.base.modulus
    p = AffinePoint(p.x % modulus, p.y % modulus)

    p_is_zero = False
    if complete_arithmetic:
        p_is_zero = curve._is_infinity(p)
        if p_is_zero:
            p = AffinePoint(1, 1)

    r = curve.scalars.modulus
    n = r.bit_length()
    bits = _bits(s % r, n)
    if 2 < nb_scalar_bits < n:
        n = nb_scalar_bits

    # Bit 0 is taken as 1 and corrected at the end; bit 1 uses a tripling.
    rb = curve._triple(p)
    r0 = curve.select(bits[1], rb, p)
    r1 = curve.select(bits[1], p, rb)

    for bit in bits[2 : n - 1]:
        rb = curve._double_and_add_select(bit, r0, r1)
        r0 = curve.select(bit, rb, r0)
        r1 = curve.select(bit, r1, rb)

    rb = curve._double_and_add_select(bits[n - 1], r0, r1)
    r0 = curve.select(bits[n - 1], rb, r0)

    # For s = 0, R0 = P here and P + (-P) gives (0, 0).
    r0 = curve.select(bits[0], r0, curve.add_unified(r0, curve.neg(p)))

    if complete_arithmetic:
        r0 = curve.select(int(p_is_zero), _INFINITY, r0)
    return r0