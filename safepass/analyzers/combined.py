"""
Combined Password Analysis
===========================

Runs the strength, entropy, crack-time and pattern analyzers on the same
password and groups their independent results into one report.
"""

from __future__ import annotations

from typing import Optional

from safepass.analyzers.crack_time import CrackTimeEstimator
from safepass.analyzers.entropy import EntropyAnalyzer
from safepass.analyzers.patterns import PatternAnalyzer
from safepass.analyzers.strength import StrengthAnalyzer
from safepass.core.models import HardRequirements, PasswordReport


class PasswordAnalyzer:
    """Facade over the four password analyzers.

    Usage::

        report = PasswordAnalyzer().analyze("MyP@ssw0rd!")
        print(report.strength.value, report.entropy.entropy)
    """

    def __init__(
        self,
        strength: Optional[StrengthAnalyzer] = None,
        entropy: Optional[EntropyAnalyzer] = None,
        crack_time: Optional[CrackTimeEstimator] = None,
        patterns: Optional[PatternAnalyzer] = None,
    ) -> None:
        self._strength = strength or StrengthAnalyzer()
        self._entropy = entropy or EntropyAnalyzer()
        self._crack_time = crack_time or CrackTimeEstimator(self._entropy)
        self._patterns = patterns or PatternAnalyzer()

    def analyze(
        self,
        password: str,
        requirements: Optional[HardRequirements] = None,
    ) -> PasswordReport:
        return PasswordReport(
            strength=self._strength.analyze(password, requirements),
            entropy=self._entropy.analyze(password),
            crack_time=self._crack_time.analyze(password),
            patterns=self._patterns.analyze(password),
        )


_DEFAULT_ANALYZER = PasswordAnalyzer()


def analyze_password(password: str) -> PasswordReport:
    """Full analysis of *password* with the default tiers and no requirements."""
    return _DEFAULT_ANALYZER.analyze(password)
