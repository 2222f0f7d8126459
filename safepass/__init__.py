"""
SafePass -- Password Quality Assessment Toolkit
================================================

Rates password strength against a configurable tier table, estimates
entropy and time-to-crack, detects weak patterns, checks passwords
against lists of known-compromised passwords, and generates secure
random passwords.

Modules:
    - safepass.core.engine: Configuration-driven orchestrator
    - safepass.core.models: Pydantic data models
    - safepass.core.errors: Exception hierarchy
    - safepass.analyzers: Pure, synchronous password analyzers
    - safepass.collectors: Common-password wordlist loading
    - safepass.generators: CSPRNG-backed password generation
    - safepass.output: Console and report output
    - safepass.cli: Click-based command-line interface

References:
    - NIST SP 800-63B (2017). Digital Identity Guidelines.
    - OWASP Authentication Cheat Sheet.
"""

from safepass.analyzers import (
    analyze_password,
    analyze_password_patterns,
    calculate_password_entropy,
    check_password_strength,
    estimate_crack_time,
)
from safepass.collectors import WordlistCache, is_common_password
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
from safepass.generators import generate_secure_random_password
from safepass.core.engine import SafePassEngine

__version__ = "1.0.0"
__tool_name__ = "safepass"

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
    "SafePassEngine",
    "SafePassError",
    "StrengthResult",
    "StrengthTier",
    "WordlistCache",
    "analyze_password",
    "analyze_password_patterns",
    "calculate_password_entropy",
    "check_password_strength",
    "estimate_crack_time",
    "generate_secure_random_password",
    "is_common_password",
]
