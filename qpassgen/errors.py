"""
Exceptions raised by the password generator.
"""


class QuantumPassError(Exception):
    """Base class for generator errors."""


class BitSourceError(QuantumPassError):
    """The random bit source failed to deliver the requested bits."""


class RetryLimitExceeded(QuantumPassError):
    """No candidate passed the composition rule within max_attempts."""

    def __init__(self, attempts: int) -> None:
        super().__init__(
            f"No password met the composition rule after {attempts} attempts."
        )
        self.attempts = attempts
