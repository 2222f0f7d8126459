import pytest
from pydantic import ValidationError

from safepass import check_password_strength
from safepass.analyzers.strength import StrengthAnalyzer, validate_tiers
from safepass.core.errors import InvalidConfigurationError
from safepass.core.models import DEFAULT_TIERS, HardRequirements, StrengthTier


@pytest.mark.parametrize(
    ("password", "tier_id", "label"),
    [
        ("", 0, "Too weak"),
        ("abc123", 0, "Too weak"),
        ("password123", 1, "Weak"),
        ("Pass1!word", 2, "Medium"),
        ("Password123!@#", 3, "Strong"),
    ],
)
def test_default_tiers(password, tier_id, label):
    result = check_password_strength(password)
    assert result.id == tier_id
    assert result.value == label
    assert result.length == len(password)
    assert result.counts is not None


def test_long_but_single_class_stays_too_weak():
    assert check_password_strength("a" * 40).id == 0


def test_length_counts_code_points():
    result = check_password_strength("p\u00e4ssw\u00f6rd")
    assert result.length == 8


def test_result_is_deterministic_and_frozen():
    first = check_password_strength("Pass1!word")
    assert first == check_password_strength("Pass1!word")
    with pytest.raises(ValidationError):
        first.id = 3


def test_extending_password_never_lowers_tier():
    password = ""
    previous = 0
    for char in "Pass1!word-Extra":
        password += char
        current = check_password_strength(password).id
        assert current >= previous
        previous = current


# --------------------------------------------------------------------------- #
#  Hard requirements
# --------------------------------------------------------------------------- #


def test_boolean_gate_failure_drops_counts():
    result = check_password_strength(
        "Password123!@#", HardRequirements(require_symbol=True)
    )
    assert result.id == 3

    result = check_password_strength(
        "password12345678", HardRequirements(require_uppercase=True)
    )
    assert result.id == 0
    assert result.value == "Too weak"
    assert result.counts is None
    assert result.contains.lowercase
    assert result.length == 16


def test_minimum_failure_keeps_counts():
    result = check_password_strength(
        "Password123!@#", HardRequirements(min_symbol_count=4)
    )
    assert result.id == 0
    assert result.counts is not None
    assert result.counts.special == 3


def test_zero_minimum_is_not_enforced():
    result = check_password_strength("Pass1!word", HardRequirements(min_number_count=0))
    assert result.id == 2


def test_satisfied_requirements_do_not_change_tier():
    requirements = HardRequirements(
        require_uppercase=True,
        require_number=True,
        require_symbol=True,
        min_uppercase_count=1,
        min_number_count=3,
        min_symbol_count=3,
    )
    assert check_password_strength("Password123!@#", requirements).id == 3


def test_boolean_gates_are_checked_before_minimums():
    requirements = HardRequirements(require_number=True, min_uppercase_count=5)
    result = check_password_strength("abcdefgh", requirements)
    assert result.counts is None


# --------------------------------------------------------------------------- #
#  Custom tier tables
# --------------------------------------------------------------------------- #


def test_custom_tiers():
    tiers = [
        StrengthTier(id=0, value="Bad", min_length=0, min_diversity=0),
        StrengthTier(id=5, value="Okay", min_length=4, min_diversity=1),
        StrengthTier(id=9, value="Great", min_length=6, min_diversity=2),
    ]
    assert check_password_strength("abc", tiers=tiers).value == "Bad"
    assert check_password_strength("abcd", tiers=tiers).value == "Okay"
    result = check_password_strength("abcde1", tiers=tiers)
    assert (result.id, result.value) == (9, "Great")


def test_upgrade_walk_stops_at_first_unmet_tier():
    tiers = [
        StrengthTier(id=0, value="Low", min_length=0, min_diversity=0),
        StrengthTier(id=1, value="Long", min_length=20, min_diversity=0),
        StrengthTier(id=2, value="Mixed", min_length=4, min_diversity=2),
    ]
    assert check_password_strength("abc123", tiers=tiers).value == "Low"


def test_single_tier_table():
    tiers = [StrengthTier(id=0, value="Any")]
    assert check_password_strength("Password123!@#", tiers=tiers).value == "Any"


def test_empty_tier_table_raises():
    with pytest.raises(InvalidConfigurationError):
        check_password_strength("abc", tiers=[])


def test_validate_tiers_accepts_defaults():
    assert validate_tiers(DEFAULT_TIERS) == DEFAULT_TIERS


@pytest.mark.parametrize(
    "tiers",
    [
        [],
        [StrengthTier(id=0, value="Strict", min_length=4)],
        [StrengthTier(id=0, value="A"), StrengthTier(id=0, value="B", min_length=3)],
        [StrengthTier(id=2, value="A"), StrengthTier(id=1, value="B", min_length=3)],
    ],
)
def test_validate_tiers_rejects_bad_tables(tiers):
    with pytest.raises(InvalidConfigurationError):
        validate_tiers(tiers)


def test_analyzer_validates_constructor_tiers():
    with pytest.raises(InvalidConfigurationError):
        StrengthAnalyzer([StrengthTier(id=0, value="Strict", min_diversity=1)])
