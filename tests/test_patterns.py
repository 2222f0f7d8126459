import pytest

from safepass import analyze_password_patterns
from safepass.analyzers.patterns import (
    KEYBOARD_PATTERNS,
    SUGGEST_DATE,
    SUGGEST_KEYBOARD,
    SUGGEST_RANDOM,
    SUGGEST_REPEATED,
    SUGGEST_SEQUENTIAL,
)


def test_qwerty123():
    result = analyze_password_patterns("qwerty123")
    assert result.has_keyboard_pattern
    assert result.has_sequential_chars
    assert not result.has_repeated_chars
    assert not result.has_date_pattern
    assert result.risk_score == 55
    assert result.detected_patterns == ("Keyboard pattern: qwerty", "Sequential numbers: 123")
    assert result.suggestions == (SUGGEST_KEYBOARD, SUGGEST_SEQUENTIAL, SUGGEST_RANDOM)


def test_clean_password():
    result = analyze_password_patterns("Tr0ub4dor&3")
    assert result.risk_score == 0
    assert result.detected_patterns == ()
    assert result.suggestions == ()


def test_matching_is_case_insensitive():
    assert analyze_password_patterns("QWERTY").has_keyboard_pattern
    assert analyze_password_patterns("xABCx").has_sequential_chars


def test_keyboard_table_order():
    assert KEYBOARD_PATTERNS[:3] == ("qwerty", "asdfgh", "zxcvbn")
    assert KEYBOARD_PATTERNS[3:13][-1] == "0p;/"
    assert {"sdf", "qaz", "p;/"} <= set(KEYBOARD_PATTERNS)
    assert len(KEYBOARD_PATTERNS) == len(set(KEYBOARD_PATTERNS))
    # whole runs are reported ahead of their three-key pieces
    result = analyze_password_patterns("qwertyuiop")
    assert result.detected_patterns[0] == "Keyboard pattern: qwerty"


def test_only_listed_runs_and_their_pieces():
    for other_keys in ("uiop", "hjkl", "bnm"):
        assert not analyze_password_patterns(other_keys).has_keyboard_pattern
    assert analyze_password_patterns("xcv").detected_patterns == ("Keyboard pattern: xcv",)


def test_column_pattern():
    result = analyze_password_patterns("1qaz")
    assert result.detected_patterns == ("Keyboard pattern: 1qaz",)
    assert result.risk_score == 30


def test_letters_and_digits_share_one_weight():
    result = analyze_password_patterns("xyz789")
    assert result.detected_patterns == ("Sequential letters: xyz", "Sequential numbers: 789")
    assert result.suggestions == (SUGGEST_SEQUENTIAL,)
    assert result.risk_score == 25


def test_descending_run_is_not_sequential():
    assert not analyze_password_patterns("cba").has_sequential_chars


def test_repeated_characters():
    result = analyze_password_patterns("hmmm!")
    assert result.has_repeated_chars
    assert result.detected_patterns == ("Repeated characters: mmm",)
    assert result.suggestions == (SUGGEST_REPEATED,)
    assert result.risk_score == 20


def test_two_repeats_are_not_flagged():
    assert not analyze_password_patterns("aabb").has_repeated_chars


def test_date_pattern():
    result = analyze_password_patterns("born1987")
    assert result.has_date_pattern
    assert "Date pattern: 1987" in result.detected_patterns
    assert SUGGEST_DATE in result.suggestions


@pytest.mark.parametrize("text", ["1800", "2100", "19a1"])
def test_non_year_groups(text):
    assert not analyze_password_patterns(text).has_date_pattern


def test_score_is_clamped():
    result = analyze_password_patterns("qwertyabc111990")
    assert result.has_keyboard_pattern
    assert result.has_sequential_chars
    assert result.has_repeated_chars
    assert result.has_date_pattern
    assert result.risk_score == 100
    assert result.suggestions[-1] == SUGGEST_RANDOM


def test_generic_suggestion_needs_score_above_fifty():
    # keyboard (30) + repeated (20) = 50
    result = analyze_password_patterns("qwe!!!")
    assert result.risk_score == 50
    assert SUGGEST_RANDOM not in result.suggestions
