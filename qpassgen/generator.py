"""
Password generator: fill a fixed-length buffer from a random bit source and
retry until the composition rule holds.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from .config import PasswordConfig, DEFAULT_CONFIG
from .entropy import RandomBitSource, check_bits
from .errors import RetryLimitExceeded
from .mapping import bit_width, bits_to_char
from .quantum_engine import QuantumEngine
from .requirements import meets_requirements, represented_groups

logger = logging.getLogger(__name__)


@dataclass
class GenerationResult:
    """
    Full result of one password generation.
    """
    # Final password
    password: str

    # Candidates drawn, including the accepted one
    attempts: int

    # Random bits requested from the source across all attempts
    bits_consumed: int
    bits_per_char: int

    groups_represented: int

    # Theoretical strength estimate: length * log2(alphabet size)
    entropy_bits: float
    config: PasswordConfig


class PasswordGenerator:
    """
    Generates passwords one character at a time from a RandomBitSource.

    If no source is given, a QuantumEngine is created for the config.
    """

    def __init__(
        self,
        source: RandomBitSource | None = None,
        config: PasswordConfig | None = None,
    ) -> None:
        self.config = config or DEFAULT_CONFIG
        self.config.validate()

        if source is None:
            source = QuantumEngine(self.config)
        self.source = source

        self.alphabet = self.config.alphabet
        self.num_bits = bit_width(len(self.alphabet))

    def meets_requirements(self, password: str) -> bool:
        return meets_requirements(
            password, self.config.character_groups, self.config.min_groups
        )

    def _fill_buffer(self) -> list[str]:
        buffer = [""] * self.config.password_length
        for i in range(len(buffer)):
            bits = check_bits(self.source.next_bits(self.num_bits), self.num_bits)
            buffer[i] = bits_to_char(bits, self.alphabet)
        return buffer

    def generate_with_meta(self) -> GenerationResult:
        """
        Draw candidates until one passes the composition rule.

        Every attempt refills the whole buffer; a rejected candidate is
        discarded, never patched. Raises RetryLimitExceeded when
        ``config.max_attempts`` is set and runs out.
        """
        cfg = self.config
        attempts = 0

        while True:
            attempts += 1
            password = "".join(self._fill_buffer())

            if self.meets_requirements(password):
                break

            logger.debug(
                "Attempt %d rejected: %d groups represented, %d required",
                attempts,
                represented_groups(password, cfg.character_groups),
                cfg.min_groups,
            )
            if cfg.max_attempts is not None and attempts >= cfg.max_attempts:
                raise RetryLimitExceeded(attempts)

        logger.debug("Password accepted after %d attempt(s)", attempts)

        return GenerationResult(
            password=password,
            attempts=attempts,
            bits_consumed=attempts * cfg.password_length * self.num_bits,
            bits_per_char=self.num_bits,
            groups_represented=represented_groups(password, cfg.character_groups),
            entropy_bits=len(password) * math.log2(len(self.alphabet)),
            config=cfg,
        )

    def generate(self) -> str:
        return self.generate_with_meta().password
