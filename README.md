# glvmul

Scalar multiplication on the short Weierstrass curves BN254 and P-256, worked
out the way a constrained computation would do it. Coordinates are plain
integers modulo the base field, and every check that a circuit would enforce
is evaluated directly: a failed equality, a zero denominator in an incomplete
formula, a non-boolean selector or an out-of-range multiplexer index raises
`glvmul.point.ConstraintError`.

Two algorithms are provided in `glvmul.scalarmul`:

- `scalar_mul_fake_glv(curve, q, s, complete_arithmetic=False)` takes `[s]Q`
  from `scalar_mul_hint`, splits `s` into half-size sub-scalars `s1`, `s2`
  with `s1 + s2*s = 0 (mod r)` (from the `half_gcd` and `half_gcd_signs`
  hints), and checks that `[s1]Q + [s2]([s]Q)` is the neutral element before
  returning the hinted point.
- `scalar_mul_joye(curve, p, s, complete_arithmetic=False, nb_scalar_bits=0)`
  computes `[s]P` with Joye's right-to-left double-and-add ladder. When
  `nb_scalar_bits` is above 2 and below the bit length of the scalar field,
  only that many low bits of `s` are used.

The point `(0, 0)` stands for the point at infinity. Without
`complete_arithmetic`, `scalar_mul_fake_glv` needs a nonzero `s` and a `q`
other than `(0, 0)`, and `scalar_mul_joye` needs a `p` other than `(0, 0)`.
With `complete_arithmetic` set, those cases are handled and give `(0, 0)`.

## Install

```
pip install .
pip install ".[test]"   # with pytest and hypothesis
```

No third-party libraries are needed at run time.

## Use

```python
from glvmul.fields import P256_FP, P256_FR
from glvmul.params import get_p256_params
from glvmul.point import new_curve
from glvmul.scalarmul import scalar_mul_fake_glv, scalar_mul_joye

curve = new_curve(P256_FP, P256_FR, get_p256_params())
g = curve.generator()

r = scalar_mul_fake_glv(curve, g, 123456789)
assert r == scalar_mul_joye(curve, g, 123456789)
```

BN254 works the same way with `BN254_FP`, `BN254_FR` and `get_bn254_params()`.
`get_curve_params(base)` returns the stored parameters for a base field
(`BN254_FP` or `P256_FP`) and raises `ValueError` for any other.

## Modules

- `glvmul.limbs`: `recompose(limbs, nb_bits)` and
  `decompose(value, nb_bits, count)` for little-endian limb vectors;
  `decompose` raises `ValueError` when the value does not fit.
- `glvmul.fields`: `EmulatedField` (modulus, limb count and width, with
  `element`, `to_limbs`, `from_limbs`) and the constants `BN254_FP`,
  `BN254_FR`, `P256_FP`, `P256_FR`.
- `glvmul.weierstrass`: `WeierstrassCurve` with complete affine arithmetic
  (`is_on_curve`, `neg`, `add`, `double`, `scalar_mult`) and the curves
  `BN254_CURVE`, `P256_CURVE`.
- `glvmul.params`: `CurveParams`, `get_bn254_params()`, `get_p256_params()`,
  `get_curve_params(base)`, and the generator tables from
  `compute_bn254_table()` and `compute_p256_table()` (`[3]G`, `[5]G`, `[7]G`
  followed by `[2^i]G` for `i = 3..255`).
- `glvmul.lattice`: `Lattice`, `precompute_lattice(r, k)` for a short basis of
  the lattice of `(a, b)` with `a + b*k = 0 (mod r)`, and
  `split_scalar(s, lattice)`.
- `glvmul.hints`: `decompose_scalar_g1_subscalars`,
  `decompose_scalar_g1_signs`, `scalar_mul_hint`, `half_gcd`,
  `half_gcd_signs`, all listed by `get_hints()`. `scalar_mul_hint` supports
  the P-256 and BN254 base fields and raises `ValueError` for others.
- `glvmul.point`: `AffinePoint`, `Curve` (`generator`, `generator_multiples`,
  `neg`, `assert_is_equal`, `add_unified`, `select`, `lookup2`, `mux`),
  `new_curve(base, scalars, params)` and `ConstraintError`.

## What it does not do

The package evaluates the checks on concrete values only. It does not build
constraint systems, compile circuits, or create or verify proofs. The
endomorphism values in `CurveParams` (`eigenvalue`, `third_root_one`) are
stored on the curve but no scalar multiplication here uses them.

## Tests

```
pytest
```