"""
Weak Pattern Analyzer
======================

Detects the structures attackers try first and scores the resulting
risk. Matching is case-insensitive; four detectors run in a fixed order
and each records at most one description:

1. Keyboard patterns -- the row runs ``qwerty``, ``asdfgh`` and ``zxcvbn``,
   the columns ``1qaz`` through ``0p;/``, then any three-key piece of
   those (``sdf``, ``qaz``). Whole runs are listed ahead of their pieces.
2. Sequential characters -- three ascending letters (``abc``) and three
   ascending digits (``123``); the letter and digit runs are reported
   separately but share one flag and one weight.
3. Repeated characters -- one character three or more times in a row.
4. Years -- a four-digit ``19xx`` or ``20xx`` group.

Risk score = 30 (keyboard) + 25 (sequential) + 20 (repeated) + 25 (date),
capped at 100.

References:
    - Weir, M. et al. (2009). Password Cracking Using Probabilistic
      Context-Free Grammars. IEEE S&P.
    - Bonneau, J. (2012). The Science of Guessing. IEEE S&P.
"""

from __future__ import annotations

import string
from typing import Optional

from safepass.core.models import PatternResult

_ROW_RUNS: tuple[str, ...] = ("qwerty", "asdfgh", "zxcvbn")
_COLUMNS: tuple[str, ...] = ("1qaz", "2wsx", "3edc", "4rfv", "5tgb", "6yhn", "7ujm", "8ik,", "9ol.", "0p;/")


def _keyboard_table() -> tuple[str, ...]:
    runs = _ROW_RUNS + _COLUMNS
    windows = [run[i : i + 3] for run in runs for i in range(len(run) - 2)]
    return tuple(dict.fromkeys(runs + tuple(windows)))


KEYBOARD_PATTERNS: tuple[str, ...] = _keyboard_table()

_ALPHABET = string.ascii_lowercase
_DIGITS = string.digits
_DIGIT_SET = frozenset(string.digits)

KEYBOARD_WEIGHT = 30
SEQUENTIAL_WEIGHT = 25
REPEATED_WEIGHT = 20
DATE_WEIGHT = 25
MAX_RISK_SCORE = 100
GENERIC_SUGGESTION_THRESHOLD = 50

SUGGEST_KEYBOARD = "Avoid keyboard patterns like 'qwerty' or 'asdf'"
SUGGEST_SEQUENTIAL = "Avoid sequential characters like 'abc' or '123'"
SUGGEST_REPEATED = "Avoid repeating the same character three or more times"
SUGGEST_DATE = "Avoid using years or dates in your password"
SUGGEST_RANDOM = "Consider using a randomly generated password"


class PatternAnalyzer:
    """Detects common weak patterns and scores the password's risk.

    Usage::

        result = PatternAnalyzer().analyze("qwerty123")
        print(result.risk_score)          # 55
        print(result.detected_patterns)   # keyboard + numeric sequence
    """

    def analyze(self, password: str) -> PatternResult:
        lowered = password.lower()
        detected: list[str] = []
        suggestions: list[str] = []
        score = 0

        keyboard = self._find_keyboard(lowered)
        if keyboard is not None:
            detected.append(f"Keyboard pattern: {keyboard}")
            suggestions.append(SUGGEST_KEYBOARD)
            score += KEYBOARD_WEIGHT

        letters = self._find_ascending(lowered, _ALPHABET)
        digits = self._find_ascending(lowered, _DIGITS)
        if letters is not None:
            detected.append(f"Sequential letters: {letters}")
        if digits is not None:
            detected.append(f"Sequential numbers: {digits}")
        has_sequential = letters is not None or digits is not None
        if has_sequential:
            suggestions.append(SUGGEST_SEQUENTIAL)
            score += SEQUENTIAL_WEIGHT

        repeated = self._find_repeated(lowered)
        if repeated is not None:
            detected.append(f"Repeated characters: {repeated}")
            suggestions.append(SUGGEST_REPEATED)
            score += REPEATED_WEIGHT

        year = self._find_year(lowered)
        if year is not None:
            detected.append(f"Date pattern: {year}")
            suggestions.append(SUGGEST_DATE)
            score += DATE_WEIGHT

        score = min(score, MAX_RISK_SCORE)
        if score > GENERIC_SUGGESTION_THRESHOLD:
            suggestions.append(SUGGEST_RANDOM)

        return PatternResult(
            has_keyboard_pattern=keyboard is not None,
            has_sequential_chars=has_sequential,
            has_repeated_chars=repeated is not None,
            has_date_pattern=year is not None,
            risk_score=score,
            detected_patterns=tuple(detected),
            suggestions=tuple(suggestions),
        )

    # ------------------------------------------------------------------ #
    #  Detectors
    # ------------------------------------------------------------------ #

    @staticmethod
    def _find_keyboard(text: str) -> Optional[str]:
        """First keyboard-table entry occurring in *text*."""
        return next((p for p in KEYBOARD_PATTERNS if p in text), None)

    @staticmethod
    def _find_ascending(text: str, alphabet: str) -> Optional[str]:
        """First three-character run of *alphabet* occurring in *text*."""
        for start in range(len(alphabet) - 2):
            run = alphabet[start : start + 3]
            if run in text:
                return run
        return None

    @staticmethod
    def _find_repeated(text: str) -> Optional[str]:
        """First character repeated three or more times in a row."""
        run = 1
        for idx in range(1, len(text)):
            if text[idx] == text[idx - 1]:
                run += 1
                if run == 3:
                    return text[idx] * 3
            else:
                run = 1
        return None

    @staticmethod
    def _find_year(text: str) -> Optional[str]:
        """First four-digit group reading 19xx or 20xx."""
        for start in range(len(text) - 3):
            group = text[start : start + 4]
            if group[:2] in ("19", "20") and all(c in _DIGIT_SET for c in group[2:]):
                return group
        return None


_DEFAULT_ANALYZER = PatternAnalyzer()


def analyze_password_patterns(password: str) -> PatternResult:
    """Detect keyboard, sequential, repeated, and year patterns in *password*."""
    return _DEFAULT_ANALYZER.analyze(password)
