"""
Configuration for the Quantum Password Generator.
"""

from __future__ import annotations

from dataclasses import dataclass

from .mapping import bit_width

LOWERCASE = "abcdefghijklmnopqrstuvwxyz"
UPPERCASE = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
DIGITS = "0123456789"
# Less scary looking subset of the ASCII punctuation set.
SYMBOLS = "!$^*()"


@dataclass
class PasswordConfig:
    # Desired password length in characters.
    password_length: int = 16

    # Disjoint character groups. Concatenated in order they form the alphabet.
    character_groups: tuple[str, ...] = (LOWERCASE, UPPERCASE, DIGITS, SYMBOLS)

    # A password must contain at least one character from this many groups.
    min_groups: int = 3

    # None means retry until a password passes the composition rule.
    max_attempts: int | None = None

    # Seed for the Aer simulator. Only useful for reproducible runs.
    simulator_seed: int | None = None

    @property
    def alphabet(self) -> str:
        return "".join(self.character_groups)

    @property
    def bit_width(self) -> int:
        """
        Bits drawn per character: floor(log2(len(alphabet))) + 1.
        """
        return bit_width(len(self.alphabet))

    def validate(self) -> None:
        """
        Raise ValueError if the configuration can never produce a password.
        """
        if self.password_length < 1:
            raise ValueError(
                f"password_length must be positive, got {self.password_length}."
            )
        if not self.character_groups:
            raise ValueError("At least one character group is required.")

        seen: set[str] = set()
        for group in self.character_groups:
            if not group:
                raise ValueError("Character groups must not be empty.")
            if seen.intersection(group) or len(set(group)) != len(group):
                raise ValueError(
                    f"Character group {group!r} repeats a character; "
                    "groups must be disjoint."
                )
            seen.update(group)

        if not 1 <= self.min_groups <= len(self.character_groups):
            raise ValueError(
                f"min_groups={self.min_groups} must be between 1 and "
                f"{len(self.character_groups)}."
            )
        if self.min_groups > self.password_length:
            raise ValueError(
                f"min_groups={self.min_groups} exceeds "
                f"password_length={self.password_length}."
            )
        if self.max_attempts is not None and self.max_attempts < 1:
            raise ValueError(
                f"max_attempts must be positive or None, got {self.max_attempts}."
            )


# Default configuration instance you can import elsewhere
DEFAULT_CONFIG = PasswordConfig()
