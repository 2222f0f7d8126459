import pytest

from shared.models import RiskLevel, Severity

from safepass.core.engine import SafePassEngine
from safepass.core.errors import InvalidConfigurationError


@pytest.fixture
def engine(config):
    return SafePassEngine(config)


async def test_analyze_builds_findings(engine):
    result = await engine.analyze("qwerty123")

    assert result.tool_name == "safepass"
    assert result.target == "[password]"
    assert result.end_time is not None
    assert result.metadata["common_password"] is False
    assert result.metadata["list_size"] == "10k"
    assert result.metadata["report"]["strength"]["value"] == "Weak"

    titles = [finding.title for finding in result.findings]
    assert titles[0] == "Password Strength: Weak"
    assert "Estimated Crack Time" in titles
    assert titles.count("Weak Pattern Detected") == 2
    assert titles.count("Improvement Suggestion") == 3
    assert "Known Compromised Password" not in titles

    assert result.findings[0].severity == Severity.HIGH
    assert result.risk.score == pytest.approx(200 / 3)
    assert result.risk.level == RiskLevel.MEDIUM
    assert result.summary.startswith("Strength: Weak (1/3)")


async def test_common_password_is_critical(engine):
    result = await engine.analyze("password")
    assert result.metadata["common_password"] is True
    assert result.risk.score == 100
    assert result.risk.level == RiskLevel.CRITICAL
    assert result.highest_severity == Severity.CRITICAL
    assert any(f.title == "Known Compromised Password" for f in result.findings)


async def test_strong_password(engine):
    result = await engine.analyze("k7#Vq!92xLp@Zr")
    assert result.findings[0].severity == Severity.INFO
    assert result.risk.score == 0
    assert result.risk.level == RiskLevel.NEGLIGIBLE


async def test_common_check_can_be_skipped(engine):
    result = await engine.analyze("password", check_common=False)
    assert result.metadata["common_password"] is None
    assert result.metadata["list_size"] is None


async def test_unloadable_list_size(engine):
    result = await engine.analyze("password", list_size="100k")
    assert result.metadata["common_password"] is False
    assert result.metadata["list_size"] == "100k"


async def test_analysis_failure_becomes_finding(engine, monkeypatch):
    def boom(password):
        raise RuntimeError("analyzer exploded")

    monkeypatch.setattr(engine, "report", boom)
    result = await engine.analyze("anything")
    assert result.findings[-1].title == "Password Assessment Error"
    assert result.summary == "Error: analyzer exploded"


async def test_check_common_uses_default_size(engine):
    assert await engine.check_common("letmein")
    assert not await engine.check_common("letmein", "1m")


def test_configured_requirements_apply(config):
    config.strength.require_symbol = True
    engine = SafePassEngine(config)
    assert engine.requirements is not None
    report = engine.report("Password12345")
    assert report.strength.id == 0
    assert report.strength.counts is None


def test_configured_tiers(config):
    config.strength.tiers = [
        {"id": 0, "value": "Low"},
        {"id": 10, "value": "High", "min_length": 4, "min_diversity": 1},
    ]
    engine = SafePassEngine(config)
    assert engine.report("abcd").strength.value == "High"


@pytest.mark.parametrize(
    "tiers",
    [
        [],
        [{"id": 0, "value": "Strict", "min_length": 8}],
        [{"id": "zero", "value": "Bad"}],
        [{"value": "Missing id"}],
    ],
)
def test_invalid_tier_config(config, tiers):
    config.strength.tiers = tiers
    with pytest.raises(InvalidConfigurationError):
        SafePassEngine(config)


def test_generate_uses_config_defaults(config):
    config.generator.length = 20
    config.generator.include_symbols = False
    passwords = SafePassEngine(config).generate(count=3)
    assert len(passwords) == 3
    assert all(len(p) == 20 and p.isalnum() for p in passwords)


def test_generate_overrides(engine):
    (password,) = engine.generate(length=8, include_lowercase=False, include_uppercase=False, include_symbols=False)
    assert len(password) == 8
    assert password.isdigit()


def test_generate_invalid_options(engine):
    with pytest.raises(InvalidConfigurationError):
        engine.generate(length=0)
