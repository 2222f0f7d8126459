"""
Password Entropy Estimator
===========================

Combinatorial entropy approximation: the password is treated as drawn
uniformly from the union of the character classes it uses, so

    entropy = length * log2(pool_size) * 1.045

where the pool adds a fixed nominal size per present class (26 lowercase,
26 uppercase, 10 digits, 33 symbols) regardless of how many distinct
symbols actually occur. The 1.045 factor is an empirical correction kept
for compatibility with previously published scores.

Reference:
    Burr, W. E. et al. (2006). NIST SP 800-63 Appendix A --
    Estimating Password Entropy and Strength.
"""

from __future__ import annotations

import math

from safepass.analyzers.characters import classify_characters
from safepass.core.models import CharacterPresence, EntropyResult

LOWERCASE_POOL = 26
UPPERCASE_POOL = 26
DIGIT_POOL = 10
SYMBOL_POOL = 33

ENTROPY_CORRECTION = 1.045


class EntropyAnalyzer:
    """Estimates password entropy from character classes and length.

    Usage::

        result = EntropyAnalyzer().analyze("Tr0ub4dor&3")
        print(f"{result.entropy} bits from a pool of {result.pool_size}")
    """

    def analyze(self, password: str) -> EntropyResult:
        contains, _ = classify_characters(password)
        length = len(password)

        if length == 0:
            return EntropyResult(entropy=0.0, pool_size=0, length=0, contains=contains)

        pool_size = self.pool_size(contains)
        entropy = length * math.log2(pool_size) * ENTROPY_CORRECTION
        return EntropyResult(
            entropy=round(entropy, 2),
            pool_size=pool_size,
            length=length,
            contains=contains,
        )

    @staticmethod
    def pool_size(contains: CharacterPresence) -> int:
        """Nominal alphabet size for the classes flagged in *contains*."""
        pool = 0
        if contains.lowercase:
            pool += LOWERCASE_POOL
        if contains.uppercase:
            pool += UPPERCASE_POOL
        if contains.number:
            pool += DIGIT_POOL
        if contains.symbol:
            pool += SYMBOL_POOL
        return pool


_DEFAULT_ANALYZER = EntropyAnalyzer()


def calculate_password_entropy(password: str) -> EntropyResult:
    """Estimate the entropy of *password* in bits (0 for an empty string)."""
    return _DEFAULT_ANALYZER.analyze(password)
