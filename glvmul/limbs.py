"""Splitting integers into fixed-width limbs and joining them back."""

from __future__ import annotations

from collections.abc import Iterable


def recompose(limbs: Iterable[int], nb_bits: int) -> int:
    """Combine little-endian limbs of width ``nb_bits`` into one integer.

    The result is ``sum(limbs[i] << (nb_bits * i))``. It is not reduced
    modulo anything, and limbs wider than ``nb_bits`` are accepted as they are.
    """
    result = 0
    for limb in reversed(list(limbs)):
        result = (result << nb_bits) + limb
    return result


def decompose(value: int, nb_bits: int, count: int) -> list[int]:
    """Split ``value`` into ``count`` little-endian limbs of ``nb_bits`` bits.

    Raises ValueError if the value does not fit into ``count`` limbs.
    """
    if value.bit_length() > count * nb_bits:
        raise ValueError("decomposed integer does not fit into the limbs")
    base = 1 << nb_bits
    limbs = []
    for _ in range(count):
        limbs.append(value % base)
        value >>= nb_bits
    return limbs