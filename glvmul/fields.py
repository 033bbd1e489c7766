"""Parameters of the emulated (non-native) fields used by the circuits."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from .limbs import decompose, recompose


@dataclass(frozen=True)
class EmulatedField:
    """A prime field represented as a fixed number of limbs."""

    name: str
    modulus: int
    nb_limbs: int
    bits_per_limb: int

    @property
    def bit_length(self) -> int:
        """Bit length of the modulus."""
        return self.modulus.bit_length()

    def element(self, value: int) -> int:
        """Return the canonical representative of ``value`` in the field."""
        return value % self.modulus

    def to_limbs(self, value: int) -> list[int]:
        """Split a non-negative integer into the field's limbs."""
        if value < 0:
            raise ValueError("cannot split a negative value into limbs")
        return decompose(value, self.bits_per_limb, self.nb_limbs)

    def from_limbs(self, limbs: Iterable[int]) -> int:
        """Join limbs back into an integer, without reduction."""
        return recompose(limbs, self.bits_per_limb)


BN254_FP = EmulatedField(
    name="BN254Fp",
    modulus=21888242871839275222246405745257275088696311157297823662689037894645226208583,
    nb_limbs=4,
    bits_per_limb=64,
)

BN254_FR = EmulatedField(
    name="BN254Fr",
    modulus=21888242871839275222246405745257275088548364400416034343698204186575808495617,
    nb_limbs=4,
    bits_per_limb=64,
)

P256_FP = EmulatedField(
    name="P256Fp",
    modulus=0xFFFFFFFF00000001000000000000000000000000FFFFFFFFFFFFFFFFFFFFFFFF,
    nb_limbs=4,
    bits_per_limb=64,
)

P256_FR = EmulatedField(
    name="P256Fr",
    modulus=0xFFFFFFFF00000000FFFFFFFFFFFFFFFFBCE6FAADA7179E84F3B9CAC2FC632551,
    nb_limbs=4,
    bits_per_limb=64,
)