"""
Quantum Password Generator package.
"""

from .config import PasswordConfig, DEFAULT_CONFIG
from .entropy import RandomBitSource, SystemBitSource
from .errors import BitSourceError, QuantumPassError, RetryLimitExceeded
from .generator import GenerationResult, PasswordGenerator
from .requirements import meets_requirements
from .cli import generate_password, generate_password_with_meta

__all__ = [
    "PasswordConfig",
    "DEFAULT_CONFIG",
    "RandomBitSource",
    "SystemBitSource",
    "BitSourceError",
    "QuantumPassError",
    "RetryLimitExceeded",
    "GenerationResult",
    "PasswordGenerator",
    "meets_requirements",
    "generate_password",
    "generate_password_with_meta",
]
