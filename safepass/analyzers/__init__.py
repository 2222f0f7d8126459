"""
SafePass Analyzers
===================

Pure, synchronous password analyzers. Each module exposes a class with an
``analyze`` method and a module-level function bound to a default
instance.
"""

from safepass.analyzers.characters import classify_characters
from safepass.analyzers.combined import PasswordAnalyzer, analyze_password
from safepass.analyzers.crack_time import CrackTimeEstimator, estimate_crack_time
from safepass.analyzers.entropy import EntropyAnalyzer, calculate_password_entropy
from safepass.analyzers.patterns import PatternAnalyzer, analyze_password_patterns
from safepass.analyzers.strength import (
    StrengthAnalyzer,
    check_password_strength,
    validate_tiers,
)

__all__ = [
    "CrackTimeEstimator",
    "EntropyAnalyzer",
    "PasswordAnalyzer",
    "PatternAnalyzer",
    "StrengthAnalyzer",
    "analyze_password",
    "analyze_password_patterns",
    "calculate_password_entropy",
    "check_password_strength",
    "classify_characters",
    "estimate_crack_time",
    "validate_tiers",
]
