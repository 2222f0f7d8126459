"""
SafePass Engine
================

Central orchestrator for SafePass. :class:`SafePassEngine` wires the
configured tier table, hard requirements, wordlist cache and generator
defaults into the analyzers, and converts a full assessment into a
:class:`shared.models.ScanResult` of findings for console and report
output.

Architecture follows the Facade pattern (Gamma et al., 1994).

References:
    - Gamma, E., Helm, R., Johnson, R., & Vlissides, J. (1994).
      Design Patterns: Elements of Reusable Object-Oriented Software.
    - NIST SP 800-63B (2017). Digital Identity Guidelines.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Optional, Union

from pydantic import ValidationError

from shared.config import SafePassConfig
from shared.logger import SafePassLogger, configure_logging
from shared.models import Finding, Risk, ScanResult, Severity

from safepass.analyzers.combined import PasswordAnalyzer
from safepass.analyzers.strength import StrengthAnalyzer, validate_tiers
from safepass.collectors.wordlist import WordlistCache
from safepass.core.errors import InvalidConfigurationError
from safepass.core.models import (
    GeneratorOptions,
    HardRequirements,
    ListSize,
    PasswordReport,
    StrengthTier,
)
from safepass.generators.password import PasswordGenerator

_NIST_REFERENCE = "NIST SP 800-63B (2017). Digital Identity Guidelines."


class SafePassEngine:
    """Orchestrates password assessment, wordlist lookups and generation.

    Usage::

        engine = SafePassEngine()
        result = await engine.analyze("P@ssw0rd!")
        common = await engine.check_common("password123")
        passwords = engine.generate(count=3, length=20)

    Attributes:
        config: SafePass configuration instance.
        logger: Logger for the engine.

    Raises:
        InvalidConfigurationError: If the configured tier table or
            requirements are invalid.
    """

    def __init__(self, config: Optional[SafePassConfig] = None) -> None:
        self.config = config or SafePassConfig()
        self.logger = SafePassLogger("engine")
        configure_logging(self.config.global_settings)

        self.tiers = self._build_tiers()
        self.requirements = self._build_requirements()
        self._analyzer = PasswordAnalyzer(strength=StrengthAnalyzer(self.tiers))
        self._wordlists = WordlistCache(self.config.wordlist.data_dir or None)
        self._generator = PasswordGenerator()

    # ------------------------------------------------------------------ #
    #  Assessment
    # ------------------------------------------------------------------ #

    def report(self, password: str) -> PasswordReport:
        """Run every analyzer with the configured tiers and requirements."""
        return self._analyzer.analyze(password, self.requirements)

    async def analyze(
        self,
        password: str,
        *,
        check_common: Optional[bool] = None,
        list_size: Union[ListSize, str, None] = None,
    ) -> ScanResult:
        """Assess *password* and express the outcome as findings.

        Args:
            password: The password to assess.
            check_common: Override ``wordlist.check_common`` from config.
            list_size: Override ``wordlist.default_size`` from config.

        Returns:
            ScanResult whose ``metadata`` holds the serialised
            :class:`PasswordReport` and the wordlist outcome.
        """
        result = ScanResult(
            tool_name="safepass",
            target="[password]",
            start_time=datetime.now(timezone.utc),
        )
        if check_common is None:
            check_common = self.config.wordlist.check_common
        size = list_size or self.config.wordlist.default_size

        with self.logger.operation("analyze"):
            try:
                with self.logger.timed("password assessment"):
                    report = self.report(password)
                    is_common = (
                        await self.check_common(password, size) if check_common else None
                    )

                result.metadata = {
                    "report": report.model_dump(mode="json"),
                    "common_password": is_common,
                    "list_size": (
                        (size.value if isinstance(size, ListSize) else str(size))
                        if check_common
                        else None
                    ),
                }
                for finding in self._findings(report, is_common):
                    result.add_finding(finding)

                result.risk = Risk(
                    score=self._risk_score(report, is_common),
                    factors=list(report.patterns.detected_patterns),
                )
                result.finalize(
                    f"Strength: {report.strength.value} "
                    f"({report.strength.id}/{self.tiers[-1].id}), "
                    f"entropy={report.entropy.entropy:.2f} bits, "
                    f"pattern risk={report.patterns.risk_score}/100"
                )
            except Exception as exc:
                self.logger.exception("Password assessment failed: %s", exc)
                result.add_finding(Finding(
                    title="Password Assessment Error",
                    description=f"Error during password assessment: {exc}",
                    severity=Severity.MEDIUM,
                ))
                result.finalize(f"Error: {exc}")

        return result

    async def check_common(
        self, password: str, list_size: Union[ListSize, str, None] = None
    ) -> bool:
        """Membership of *password* in the configured or given wordlist."""
        size = list_size or self.config.wordlist.default_size
        return await self._wordlists.contains(password, size)

    # ------------------------------------------------------------------ #
    #  Generation
    # ------------------------------------------------------------------ #

    def generate(self, count: int = 1, **overrides: Any) -> list[str]:
        """Generate *count* passwords from config defaults plus *overrides*.

        Raises:
            InvalidConfigurationError: For invalid options or an empty pool.
            CryptographicUnavailableError: If the random source fails.
        """
        defaults = {
            name: getattr(self.config.generator, name)
            for name in GeneratorOptions.model_fields
        }
        try:
            options = GeneratorOptions(**{**defaults, **overrides})
        except ValidationError as exc:
            raise InvalidConfigurationError(f"Invalid generator options: {exc}") from exc

        with self.logger.operation("generate"):
            self.logger.info("Generating %d password(s)", count, length=options.length)
            return [self._generator.generate(options) for _ in range(count)]

    # ------------------------------------------------------------------ #
    #  Configuration helpers
    # ------------------------------------------------------------------ #

    def _build_tiers(self) -> tuple[StrengthTier, ...]:
        try:
            tiers = [StrengthTier(**raw) for raw in self.config.strength.tiers]
        except (ValidationError, TypeError) as exc:
            raise InvalidConfigurationError(f"Invalid strength tier: {exc}") from exc
        return validate_tiers(tiers)

    def _build_requirements(self) -> Optional[HardRequirements]:
        strength = self.config.strength
        if not strength.has_requirements:
            return None
        try:
            return HardRequirements(
                require_uppercase=strength.require_uppercase,
                require_number=strength.require_number,
                require_symbol=strength.require_symbol,
                min_uppercase_count=strength.min_uppercase_count,
                min_number_count=strength.min_number_count,
                min_symbol_count=strength.min_symbol_count,
            )
        except ValidationError as exc:
            raise InvalidConfigurationError(f"Invalid requirements: {exc}") from exc

    # ------------------------------------------------------------------ #
    #  Findings
    # ------------------------------------------------------------------ #

    def _strength_fraction(self, tier_id: int) -> float:
        """Position of *tier_id* in the table, 0.0 (lowest) to 1.0 (highest)."""
        ids = [tier.id for tier in self.tiers]
        if len(ids) == 1:
            return 1.0
        return ids.index(tier_id) / (len(ids) - 1)

    def _strength_severity(self, tier_id: int) -> Severity:
        fraction = self._strength_fraction(tier_id)
        if fraction == 0.0:
            return Severity.CRITICAL
        if fraction < 0.5:
            return Severity.HIGH
        if fraction < 1.0:
            return Severity.MEDIUM
        return Severity.INFO

    def _risk_score(self, report: PasswordReport, is_common: Optional[bool]) -> float:
        if is_common:
            return 100.0
        strength_risk = 100.0 * (1.0 - self._strength_fraction(report.strength.id))
        return max(strength_risk, float(report.patterns.risk_score))

    def _findings(
        self, report: PasswordReport, is_common: Optional[bool]
    ) -> list[Finding]:
        strength = report.strength
        entropy = report.entropy
        findings: list[Finding] = [
            Finding(
                title=f"Password Strength: {strength.value}",
                description=(
                    f"Length {strength.length}, "
                    f"{strength.contains.diversity} of 4 character classes, "
                    f"estimated entropy {entropy.entropy:.2f} bits "
                    f"(pool size {entropy.pool_size})."
                ),
                severity=self._strength_severity(strength.id),
                evidence={
                    "tier": strength.id,
                    "length": strength.length,
                    "contains": strength.contains.model_dump(),
                    "entropy_bits": entropy.entropy,
                },
                references=[_NIST_REFERENCE],
            )
        ]

        if is_common:
            findings.append(Finding(
                title="Known Compromised Password",
                description=(
                    "The password appears in a list of commonly used or "
                    "breached passwords and will be among the first guesses."
                ),
                severity=Severity.CRITICAL,
                recommendation="Choose a password that is not on any breach list.",
                references=[_NIST_REFERENCE],
            ))

        display = report.crack_time.display
        findings.append(Finding(
            title="Estimated Crack Time",
            description=(
                f"Online throttled: {display.online_throttled}; "
                f"online unthrottled: {display.online_unthrottled}; "
                f"offline slow hash: {display.offline_slow_hash}; "
                f"offline fast hash: {display.offline_fast_hash}."
            ),
            severity=(
                Severity.HIGH if display.offline_fast_hash == "instantly" else Severity.INFO
            ),
        ))

        patterns = report.patterns
        for description in patterns.detected_patterns:
            findings.append(Finding(
                title="Weak Pattern Detected",
                description=description,
                severity=Severity.LOW,
            ))

        for suggestion in patterns.suggestions:
            findings.append(Finding(
                title="Improvement Suggestion",
                description=suggestion,
                severity=Severity.INFO,
            ))

        return findings
