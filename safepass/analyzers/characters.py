"""
Character Classifier
=====================

Single pass over a password that derives which character classes are
present and how often each occurs. Classes are ASCII lowercase, ASCII
uppercase, ASCII digits, and "symbol" -- every other code point,
including whitespace and all non-ASCII letters.
"""

from __future__ import annotations

import string

from safepass.core.models import CharacterCounts, CharacterPresence

_LOWER = frozenset(string.ascii_lowercase)
_UPPER = frozenset(string.ascii_uppercase)
_DIGITS = frozenset(string.digits)


def classify_characters(password: str) -> tuple[CharacterPresence, CharacterCounts]:
    """Classify every code point of *password*.

    Args:
        password: Password to scan; may be empty.

    Returns:
        Tuple of (presence flags, per-class counts).
    """
    lower = upper = digits = special = 0
    for char in password:
        if char in _LOWER:
            lower += 1
        elif char in _UPPER:
            upper += 1
        elif char in _DIGITS:
            digits += 1
        else:
            special += 1

    presence = CharacterPresence(
        lowercase=lower > 0,
        uppercase=upper > 0,
        number=digits > 0,
        symbol=special > 0,
    )
    counts = CharacterCounts(
        lowercase=lower,
        uppercase=upper,
        numbers=digits,
        special=special,
    )
    return presence, counts
