"""
SafePass Core Data Models
==========================

Pydantic models for every value the SafePass analyzers produce or
consume. Result models are frozen: each analysis call returns a fresh,
immutable snapshot with no identity beyond its fields, so two calls on
the same password compare equal.

All models serialise to JSON and are consumed by the console output and
report generators.

References:
    - NIST SP 800-63B (2017). Digital Identity Guidelines --
      Authentication and Lifecycle Management.
    - Pydantic v2 documentation. https://docs.pydantic.dev/latest/
"""

from __future__ import annotations

import enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


# ===================================================================== #
#  Enumerations
# ===================================================================== #


class ListSize(str, enum.Enum):
    """Identifiers of the known-compromised password lists.

    Only ``300`` (the most frequent breached passwords) is bundled; the
    larger sizes are read from a configured ``wordlist.data_dir``.
    """

    TOP_300 = "300"
    TEN_K = "10k"
    HUNDRED_K = "100k"
    TWO_FIFTY_K = "250k"
    FIVE_HUNDRED_K = "500k"
    ONE_M = "1m"
    TWO_M = "2m"
    FIVE_M = "5m"
    TEN_M = "10m"


# ===================================================================== #
#  Character Classification
# ===================================================================== #


class CharacterPresence(_Frozen):
    """Which character classes occur in a password.

    ``symbol`` covers every code point outside ``[A-Za-z0-9]``, including
    whitespace and all non-ASCII text.
    """

    lowercase: bool = False
    uppercase: bool = False
    number: bool = False
    symbol: bool = False

    @property
    def diversity(self) -> int:
        """Number of distinct classes present (0-4)."""
        return sum((self.lowercase, self.uppercase, self.number, self.symbol))


class CharacterCounts(_Frozen):
    """Occurrences of each character class in a password."""

    lowercase: int = Field(default=0, ge=0)
    uppercase: int = Field(default=0, ge=0)
    numbers: int = Field(default=0, ge=0)
    special: int = Field(default=0, ge=0)


# ===================================================================== #
#  Strength Tiers
# ===================================================================== #


class StrengthTier(_Frozen):
    """One named strength level.

    Attributes:
        id: Numeric level, increasing with strength.
        value: Display label (e.g. "Medium").
        min_length: Minimum password length for this tier.
        min_diversity: Minimum number of character classes (0-4).
    """

    id: int = Field(ge=0)
    value: str = Field(min_length=1)
    min_length: int = Field(default=0, ge=0)
    min_diversity: int = Field(default=0, ge=0, le=4)


DEFAULT_TIERS: tuple[StrengthTier, ...] = (
    StrengthTier(id=0, value="Too weak", min_length=0, min_diversity=0),
    StrengthTier(id=1, value="Weak", min_length=8, min_diversity=2),
    StrengthTier(id=2, value="Medium", min_length=10, min_diversity=4),
    StrengthTier(id=3, value="Strong", min_length=12, min_diversity=4),
)


class HardRequirements(_Frozen):
    """Caller-supplied gates; any failure forces the lowest tier.

    A minimum of ``0`` is treated as not configured.
    """

    require_uppercase: bool = False
    require_number: bool = False
    require_symbol: bool = False
    min_uppercase_count: int = Field(default=0, ge=0)
    min_number_count: int = Field(default=0, ge=0)
    min_symbol_count: int = Field(default=0, ge=0)


class StrengthResult(_Frozen):
    """Outcome of tier resolution for one password.

    ``counts`` is ``None`` only when a boolean requirement gate failed.
    """

    id: int
    value: str
    contains: CharacterPresence
    length: int = 0
    counts: Optional[CharacterCounts] = None


# ===================================================================== #
#  Entropy and Crack Time
# ===================================================================== #


class EntropyResult(_Frozen):
    """Approximate password entropy.

    Attributes:
        entropy: Estimated entropy in bits, rounded to 2 decimal places.
        pool_size: Nominal alphabet size of the present classes.
        length: Password length in code points.
        contains: Character classes present at analysis time.
    """

    entropy: float = 0.0
    pool_size: int = 0
    length: int = 0
    contains: CharacterPresence = Field(default_factory=CharacterPresence)


class CrackTimeSeconds(_Frozen):
    """Raw time-to-guess in seconds for each attacker model."""

    online_throttled: float = 0.0
    online_unthrottled: float = 0.0
    offline_slow_hash: float = 0.0
    offline_fast_hash: float = 0.0


class CrackTimeDisplay(_Frozen):
    """Human-readable time-to-guess for each attacker model."""

    online_throttled: str = "instantly"
    online_unthrottled: str = "instantly"
    offline_slow_hash: str = "instantly"
    offline_fast_hash: str = "instantly"


class CrackTimeResult(_Frozen):
    seconds: CrackTimeSeconds = Field(default_factory=CrackTimeSeconds)
    display: CrackTimeDisplay = Field(default_factory=CrackTimeDisplay)


# ===================================================================== #
#  Patterns and Aggregate Report
# ===================================================================== #


class PatternResult(_Frozen):
    """Weak-pattern findings and the resulting risk score.

    Attributes:
        has_keyboard_pattern: A keyboard row/column run was found.
        has_sequential_chars: An ascending letter or digit run was found.
        has_repeated_chars: A character repeats three or more times.
        has_date_pattern: A 19xx/20xx year appears.
        risk_score: Weighted detector total, clamped to [0, 100].
        detected_patterns: Descriptions in detection order.
        suggestions: Remediations in detection order.
    """

    has_keyboard_pattern: bool = False
    has_sequential_chars: bool = False
    has_repeated_chars: bool = False
    has_date_pattern: bool = False
    risk_score: int = Field(default=0, ge=0, le=100)
    detected_patterns: tuple[str, ...] = ()
    suggestions: tuple[str, ...] = ()


class PasswordReport(_Frozen):
    """Every analysis of one password grouped under named fields."""

    strength: StrengthResult
    entropy: EntropyResult
    crack_time: CrackTimeResult
    patterns: PatternResult


# ===================================================================== #
#  Generator Options
# ===================================================================== #


class GeneratorOptions(_Frozen):
    """Options for :func:`safepass.generate_secure_random_password`.

    Attributes:
        length: Number of characters to generate.
        include_uppercase: Draw from ``A-Z``.
        include_lowercase: Draw from ``a-z``.
        include_numbers: Draw from ``0-9``.
        include_symbols: Draw from the symbol set.
        exclude_similar_characters: Drop look-alikes such as ``l``/``1``/``O``/``0``.
        exclude_ambiguous_characters: Drop brackets, quotes, and similar symbols.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    length: int = Field(default=16, gt=0)
    include_uppercase: bool = True
    include_lowercase: bool = True
    include_numbers: bool = True
    include_symbols: bool = True
    exclude_similar_characters: bool = False
    exclude_ambiguous_characters: bool = False
