"""
Command-line interface and high-level generator functions.
"""

from __future__ import annotations

import logging

from .config import PasswordConfig
from .entropy import RandomBitSource
from .generator import GenerationResult, PasswordGenerator


def generate_password_with_meta(
    config: PasswordConfig | None = None,
    source: RandomBitSource | None = None,
) -> GenerationResult:
    """
    High-level generation pipeline with metadata:

    - Sample one character worth of random bits at a time (quantum engine by default).
    - Scale each sample into the alphabet.
    - Retry the whole password until the composition rule holds.
    """
    return PasswordGenerator(source, config).generate_with_meta()


def generate_password(
    config: PasswordConfig | None = None,
    source: RandomBitSource | None = None,
) -> str:
    return generate_password_with_meta(config, source).password


def main() -> None:
    """
    Entry point for `qpassgen`, `python -m qpassgen` or `run_qpassgen.py`.

    Prints the password as the only line on stdout.
    """
    logging.basicConfig(
        level=logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    print(generate_password())
