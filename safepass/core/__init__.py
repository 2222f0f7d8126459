"""
SafePass Core Module
=====================

Data models and the exception hierarchy. The engine facade lives in
:mod:`safepass.core.engine`.
"""

from safepass.core.errors import (
    CryptographicUnavailableError,
    InvalidConfigurationError,
    SafePassError,
)
from safepass.core.models import (
    DEFAULT_TIERS,
    CharacterCounts,
    CharacterPresence,
    CrackTimeDisplay,
    CrackTimeResult,
    CrackTimeSeconds,
    EntropyResult,
    GeneratorOptions,
    HardRequirements,
    ListSize,
    PasswordReport,
    PatternResult,
    StrengthResult,
    StrengthTier,
)

__all__ = [
    "DEFAULT_TIERS",
    "CharacterCounts",
    "CharacterPresence",
    "CrackTimeDisplay",
    "CrackTimeResult",
    "CrackTimeSeconds",
    "CryptographicUnavailableError",
    "EntropyResult",
    "GeneratorOptions",
    "HardRequirements",
    "InvalidConfigurationError",
    "ListSize",
    "PasswordReport",
    "PatternResult",
    "SafePassError",
    "StrengthResult",
    "StrengthTier",
]
