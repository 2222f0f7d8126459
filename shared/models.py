"""
SafePass Shared Data Models
============================

Pydantic v2 models shared by the SafePass engine, console output, and
report generators: qualitative severity and risk levels, individual
findings, and the aggregated :class:`ScanResult` of one assessment.

Severity follows the CVSS v3.1 qualitative scale; the 0-100 risk score
bands follow the OWASP Risk Rating Methodology.

References:
    - OWASP Risk Rating Methodology.
      https://owasp.org/www-community/OWASP_Risk_Rating_Methodology
    - FIRST. (2019). Common Vulnerability Scoring System v3.1.
    - Pydantic v2 documentation. https://docs.pydantic.dev/latest/
"""

from __future__ import annotations

import datetime as _dt
import json as _json
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


def _utcnow() -> _dt.datetime:
    return _dt.datetime.now(_dt.timezone.utc)


# ========================== Enumerations ===================================


class Severity(str, Enum):
    """Finding severity, most severe first."""

    CRITICAL = "CRITICAL"
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"
    INFO = "INFO"

    @property
    def css_class(self) -> str:
        return f"severity-{self.value.lower()}"


# Lower bound of each band, highest first
_RISK_BANDS: tuple[tuple[float, str], ...] = (
    (90.0, "CRITICAL"),
    (70.0, "HIGH"),
    (40.0, "MEDIUM"),
    (10.0, "LOW"),
)


class RiskLevel(str, Enum):
    """Qualitative band of a 0-100 risk score.

    CRITICAL >= 90, HIGH >= 70, MEDIUM >= 40, LOW >= 10, else NEGLIGIBLE.
    """

    CRITICAL = "CRITICAL"
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"
    NEGLIGIBLE = "NEGLIGIBLE"

    @classmethod
    def from_score(cls, score: float) -> RiskLevel:
        for floor, name in _RISK_BANDS:
            if score >= floor:
                return cls(name)
        return cls.NEGLIGIBLE


# ========================== Core Models ====================================


class Finding(BaseModel):
    """One observation about an assessed password.

    ``evidence`` holds derived values only (tier, length, entropy), never
    the password. Dicts and lists are stored as compact JSON text.
    """

    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore")

    severity: Severity
    title: str = Field(..., min_length=1, max_length=256)
    description: str = Field(..., min_length=1)
    evidence: str = ""
    recommendation: str = ""
    references: list[str] = Field(default_factory=list)

    @field_validator("evidence", mode="before")
    @classmethod
    def _evidence_as_text(cls, value: Any) -> str:
        if isinstance(value, (dict, list)):
            return _json.dumps(value, ensure_ascii=False, sort_keys=True, default=str)
        return value if isinstance(value, str) else str(value)


class Risk(BaseModel):
    """Overall risk: the numeric score is canonical, the level derived."""

    score: float = Field(..., ge=0.0, le=100.0)
    level: Optional[RiskLevel] = None
    factors: list[str] = Field(default_factory=list)

    @model_validator(mode="after")
    def _fill_level(self) -> Risk:
        if self.level is None:
            self.level = RiskLevel.from_score(self.score)
        return self


class ScanResult(BaseModel):
    """Outcome of one assessment run.

    ``metadata`` carries the serialised analysis (the engine stores the
    full :class:`~safepass.core.models.PasswordReport` under ``report``)
    for the report generators.
    """

    model_config = ConfigDict(validate_assignment=True, extra="ignore")

    tool_name: str = Field(..., min_length=1)
    target: str = Field(..., min_length=1)
    start_time: _dt.datetime = Field(default_factory=_utcnow)
    end_time: Optional[_dt.datetime] = None
    findings: list[Finding] = Field(default_factory=list)
    risk: Optional[Risk] = None
    summary: str = ""
    metadata: dict[str, Any] = Field(default_factory=dict)

    @property
    def duration_seconds(self) -> float | None:
        if self.end_time is None:
            return None
        return (self.end_time - self.start_time).total_seconds()

    @property
    def severity_counts(self) -> dict[str, int]:
        """Findings per severity name, every severity present."""
        counts = dict.fromkeys((s.value for s in Severity), 0)
        for item in self.findings:
            counts[item.severity.value] += 1
        return counts

    @property
    def highest_severity(self) -> Severity | None:
        ranking = list(Severity)
        present = {item.severity for item in self.findings}
        return next((s for s in ranking if s in present), None)

    @property
    def finding_count(self) -> int:
        return len(self.findings)

    def add_finding(self, finding: Finding) -> None:
        self.findings.append(finding)

    def finalize(self, summary: str | None = None) -> ScanResult:
        """Stamp ``end_time`` and set the summary; returns ``self``.

        Without an explicit *summary* one is built from the severity
        counts.
        """
        self.end_time = _utcnow()
        if summary is None:
            counted = ", ".join(
                f"{name}: {n}" for name, n in self.severity_counts.items() if n
            )
            summary = f"Assessment complete. Findings: {self.finding_count} ({counted or 'none'})"
        self.summary = summary
        return self
