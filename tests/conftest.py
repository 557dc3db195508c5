from __future__ import annotations

from qpassgen.config import DEFAULT_CONFIG


class ScriptedBitSource:
    """
    Deterministic bit source: replays integer values as fixed-width bit lists.
    """

    def __init__(self, values, repeat_last: bool = False) -> None:
        self.values = list(values)
        self.repeat_last = repeat_last
        self.calls: list[int] = []
        self._pos = 0

    def next_bits(self, n: int) -> list[int]:
        self.calls.append(n)
        if self._pos < len(self.values):
            value = self.values[self._pos]
            self._pos += 1
        elif self.repeat_last and self.values:
            value = self.values[-1]
        else:
            raise RuntimeError("Scripted bit source exhausted")
        return [(value >> (n - 1 - i)) & 1 for i in range(n)]


def value_for_index(index: int, alphabet_size: int, num_bits: int) -> int:
    """Smallest sample value that scales onto ``index``."""
    return -(-index * (1 << num_bits) // alphabet_size)


def values_for(password: str, alphabet: str = DEFAULT_CONFIG.alphabet) -> list[int]:
    num_bits = len(alphabet).bit_length()
    return [value_for_index(alphabet.index(ch), len(alphabet), num_bits) for ch in password]

