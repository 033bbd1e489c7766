import pytest
from hypothesis import given, strategies as st

from glvmul.fields import BN254_FP, BN254_FR, P256_FP, P256_FR, EmulatedField

ALL_FIELDS = [BN254_FP, BN254_FR, P256_FP, P256_FR]

NIST_P256 = 2**256 - 2**224 + 2**192 + 2**96 - 1


def test_p256_modulus_is_the_nist_prime():
    assert P256_FP.modulus == NIST_P256
    assert P256_FP.element(NIST_P256) == 0
    assert P256_FP.element(NIST_P256 - 1) == NIST_P256 - 1


def test_bn254_scalar_field_bit_length():
    assert BN254_FR.bit_length == 254
    assert BN254_FR.element(1 << 253) == 1 << 253
    assert BN254_FR.from_limbs(BN254_FR.to_limbs(1 << 253)) == 1 << 253


@pytest.mark.parametrize("field", ALL_FIELDS)
def test_limbs_hold_the_modulus(field):
    top = field.modulus - 1
    limbs = EmulatedField.to_limbs(field, top)
    assert field.nb_limbs * field.bits_per_limb >= field.bit_length
    assert EmulatedField.from_limbs(field, limbs) == top


@pytest.mark.parametrize("field", ALL_FIELDS)
def test_element_reduces(field):
    assert EmulatedField.element(field, field.modulus + 5) == 5
    assert EmulatedField.element(field, -1) == field.modulus - 1


@pytest.mark.parametrize("field", ALL_FIELDS)
def test_to_limbs_length(field):
    limbs = EmulatedField.to_limbs(field, field.modulus - 1)
    assert len(limbs) == field.nb_limbs
    assert all(0 <= limb < (1 << field.bits_per_limb) for limb in limbs)


def test_to_limbs_rejects_negative():
    with pytest.raises(ValueError):
        P256_FP.to_limbs(-1)


def test_to_limbs_rejects_too_wide():
    with pytest.raises(ValueError):
        BN254_FP.to_limbs(1 << 256)


@given(st.sampled_from(ALL_FIELDS), st.integers(min_value=0))
def test_limb_round_trip(field, raw):
    value = EmulatedField.element(field, raw)
    limbs = EmulatedField.to_limbs(field, value)
    assert EmulatedField.from_limbs(field, limbs) == value