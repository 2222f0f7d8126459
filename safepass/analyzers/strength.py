"""
Strength Tier Resolver
=======================

Maps a password onto an ordered table of named strength tiers using two
inputs only: its length and its character-class diversity (how many of
lowercase, uppercase, digit and symbol occur).

Resolution works in three steps:

1. Optional hard requirements are checked in a fixed order; the first
   failure forces the lowest tier.
2. The first tier (lowest index) whose length and diversity floors are
   both met is located.
3. From there the scan walks forward while the next tier is also met,
   yielding the highest tier reachable by contiguous upgrade. Tier floors
   are not required to be nested by a single key, so the first match is
   not necessarily the best one.

Tier tables are plain data and may be supplied by the caller; the only
structural requirement is that the first tier accepts every password
(``min_length == 0`` and ``min_diversity == 0``).

Reference:
    NIST SP 800-63B (2017), Section 5.1.1.2 -- Memorized Secret Verifiers.
"""

from __future__ import annotations

from typing import Optional, Sequence

from safepass.analyzers.characters import classify_characters
from safepass.core.errors import InvalidConfigurationError
from safepass.core.models import (
    DEFAULT_TIERS,
    CharacterCounts,
    CharacterPresence,
    HardRequirements,
    StrengthResult,
    StrengthTier,
)


def validate_tiers(tiers: Sequence[StrengthTier]) -> tuple[StrengthTier, ...]:
    """Check a tier table against the structural invariant.

    Args:
        tiers: Candidate tier table.

    Returns:
        The table as a tuple.

    Raises:
        InvalidConfigurationError: If the table is empty, ids do not
            ascend, or the first tier does not accept every password.
    """
    table = tuple(tiers)
    if not table:
        raise InvalidConfigurationError("Tier table must contain at least one tier")
    first = table[0]
    if first.min_length != 0 or first.min_diversity != 0:
        raise InvalidConfigurationError(
            f"First tier '{first.value}' must have min_length=0 and "
            f"min_diversity=0 (got {first.min_length}/{first.min_diversity})"
        )
    ids = [tier.id for tier in table]
    if any(a >= b for a, b in zip(ids, ids[1:])):
        raise InvalidConfigurationError(
            f"Tier ids must be strictly ascending (got {ids})"
        )
    return table


class StrengthAnalyzer:
    """Resolves the strength tier of a password.

    Usage::

        analyzer = StrengthAnalyzer()
        result = analyzer.analyze("Pass1!word")
        print(result.id, result.value)   # 2 Medium
    """

    def __init__(self, tiers: Optional[Sequence[StrengthTier]] = None) -> None:
        self.tiers: tuple[StrengthTier, ...] = (
            validate_tiers(tiers) if tiers is not None else DEFAULT_TIERS
        )

    def analyze(
        self,
        password: str,
        requirements: Optional[HardRequirements] = None,
        tiers: Optional[Sequence[StrengthTier]] = None,
    ) -> StrengthResult:
        """Resolve the strength tier of *password*.

        Args:
            password: Password to rate.
            requirements: Optional hard requirements.
            tiers: Tier table overriding the analyzer's own for this call.

        Returns:
            StrengthResult carrying the tier, presence flags, length and,
            unless a boolean gate failed, per-class counts.

        Raises:
            InvalidConfigurationError: If *tiers* is empty.
        """
        table = tuple(tiers) if tiers is not None else self.tiers
        if not table:
            raise InvalidConfigurationError("Tier table must contain at least one tier")

        contains, counts = classify_characters(password)
        length = len(password)

        if requirements is not None:
            failure = self._check_requirements(requirements, contains, counts)
            if failure is not None:
                floor = table[0]
                return StrengthResult(
                    id=floor.id,
                    value=floor.value,
                    contains=contains,
                    length=length,
                    counts=counts if failure == "minimum" else None,
                )

        level = self._resolve_level(table, length, contains.diversity)
        tier = table[level]
        return StrengthResult(
            id=tier.id,
            value=tier.value,
            contains=contains,
            length=length,
            counts=counts,
        )

    # ------------------------------------------------------------------ #
    #  Helpers
    # ------------------------------------------------------------------ #

    @staticmethod
    def _check_requirements(
        requirements: HardRequirements,
        contains: CharacterPresence,
        counts: CharacterCounts,
    ) -> Optional[str]:
        """Return ``"gate"`` or ``"minimum"`` for the first failure, else None."""
        if requirements.require_uppercase and not contains.uppercase:
            return "gate"
        if requirements.require_number and not contains.number:
            return "gate"
        if requirements.require_symbol and not contains.symbol:
            return "gate"

        if requirements.min_uppercase_count and counts.uppercase < requirements.min_uppercase_count:
            return "minimum"
        if requirements.min_number_count and counts.numbers < requirements.min_number_count:
            return "minimum"
        if requirements.min_symbol_count and counts.special < requirements.min_symbol_count:
            return "minimum"
        return None

    @staticmethod
    def _qualifies(tier: StrengthTier, length: int, diversity: int) -> bool:
        return length >= tier.min_length and diversity >= tier.min_diversity

    def _resolve_level(
        self,
        table: tuple[StrengthTier, ...],
        length: int,
        diversity: int,
    ) -> int:
        """Index of the highest tier reachable by contiguous upgrade."""
        level = next(
            (
                idx
                for idx, tier in enumerate(table)
                if self._qualifies(tier, length, diversity)
            ),
            0,
        )
        while level < len(table) - 1 and self._qualifies(
            table[level + 1], length, diversity
        ):
            level += 1
        return level


_DEFAULT_ANALYZER = StrengthAnalyzer()


def check_password_strength(
    password: str,
    requirements: Optional[HardRequirements] = None,
    tiers: Optional[Sequence[StrengthTier]] = None,
) -> StrengthResult:
    """Rate *password* against *tiers* (default: the four built-in tiers).

    Any failed requirement yields the lowest tier regardless of length
    or diversity.
    """
    return _DEFAULT_ANALYZER.analyze(password, requirements, tiers)
