"""
Random bit sources.

Anything with a ``next_bits(n)`` method returning ``n`` independent,
uniformly distributed bits (ints 0/1) can feed the generator. The quantum
engine is the default; SystemBitSource draws from the OS CSPRNG instead.
"""

from __future__ import annotations

import secrets
from typing import List, Protocol

from .errors import BitSourceError


class RandomBitSource(Protocol):
    def next_bits(self, n: int) -> List[int]:
        ...


class SystemBitSource:
    """
    Bit source backed by the ``secrets`` module.
    """

    def next_bits(self, n: int) -> List[int]:
        if n < 1:
            raise ValueError(f"Bit count must be positive, got {n}.")
        value = secrets.randbits(n)
        # Most significant bit first.
        return [(value >> (n - 1 - i)) & 1 for i in range(n)]


def check_bits(bits: List[int], n: int) -> List[int]:
    """
    Make sure a bit source honoured its contract for a request of ``n`` bits.
    """
    if len(bits) != n:
        raise BitSourceError(f"Requested {n} bits, bit source returned {len(bits)}.")
    if any(bit not in (0, 1) for bit in bits):
        raise BitSourceError(f"Bit source returned non-binary values: {bits!r}.")
    return bits
