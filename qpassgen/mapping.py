"""
Mapping logic: convert random bits into alphabet characters.
"""

from __future__ import annotations

from typing import List


def bit_width(alphabet_size: int) -> int:
    """
    Number of bits needed per character: floor(log2(alphabet_size)) + 1.

    For an exact power of two this is one bit more than strictly needed,
    which is harmless for the floor scaling below.
    """
    if alphabet_size < 1:
        raise ValueError("Alphabet must contain at least one character.")
    return alphabet_size.bit_length()


def bits_to_int(bits: List[int]) -> int:
    """
    Interpret bits (most significant first) as an unsigned integer.
    """
    value = 0
    for bit in bits:
        value = (value << 1) | bit
    return value


def scale_to_index(value: int, num_bits: int, alphabet_size: int) -> int:
    """
    Scale ``value`` in [0, 2**num_bits) down to an index in [0, alphabet_size).

    index = floor(value * alphabet_size / 2**num_bits). Since value is at
    most 2**num_bits - 1 the product stays below alphabet_size * 2**num_bits,
    so the result is always a valid index.
    """
    if not 0 <= value < (1 << num_bits):
        raise ValueError(f"Value {value} does not fit in {num_bits} bits.")
    return (value * alphabet_size) >> num_bits


def bits_to_char(bits: List[int], alphabet: str) -> str:
    """
    Map one character's worth of bits onto the alphabet.
    """
    index = scale_to_index(bits_to_int(bits), len(bits), len(alphabet))
    return alphabet[index]
