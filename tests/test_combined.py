from safepass import (
    analyze_password,
    analyze_password_patterns,
    calculate_password_entropy,
    check_password_strength,
    estimate_crack_time,
)
from safepass.analyzers.combined import PasswordAnalyzer
from safepass.analyzers.strength import StrengthAnalyzer
from safepass.core.models import HardRequirements, StrengthTier


def test_report_matches_individual_analyzers():
    password = "Summer2024!"
    report = analyze_password(password)
    assert report.strength == check_password_strength(password)
    assert report.entropy == calculate_password_entropy(password)
    assert report.crack_time == estimate_crack_time(password)
    assert report.patterns == analyze_password_patterns(password)


def test_empty_password_report():
    report = analyze_password("")
    assert report.strength.id == 0
    assert report.entropy.entropy == 0
    assert report.crack_time.display.offline_fast_hash == "instantly"
    assert report.patterns.risk_score == 0


def test_report_serialises():
    data = analyze_password("qwerty123").model_dump(mode="json")
    assert set(data) == {"strength", "entropy", "crack_time", "patterns"}
    assert data["patterns"]["risk_score"] == 55
    assert isinstance(data["patterns"]["detected_patterns"], list)


def test_custom_analyzer_uses_its_tiers_and_requirements():
    analyzer = PasswordAnalyzer(
        strength=StrengthAnalyzer([
            StrengthTier(id=0, value="No"),
            StrengthTier(id=1, value="Yes", min_length=3),
        ])
    )
    assert analyzer.analyze("abc").strength.value == "Yes"
    gated = analyzer.analyze("abc", HardRequirements(require_number=True))
    assert gated.strength.value == "No"
