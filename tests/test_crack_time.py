import math

import pytest

from safepass import estimate_crack_time
from safepass.analyzers.crack_time import CrackTimeEstimator

FIELDS = ("online_throttled", "online_unthrottled", "offline_slow_hash", "offline_fast_hash")


def test_empty_password_is_instant():
    result = estimate_crack_time("")
    for field in FIELDS:
        assert getattr(result.seconds, field) == 0
        assert getattr(result.display, field) == "instantly"


def test_single_lowercase_letter():
    result = estimate_crack_time("a")
    assert result.display.online_throttled == "18 minutes"
    assert result.display.online_unthrottled == "3 seconds"
    assert result.display.offline_slow_hash == "instantly"
    assert result.display.offline_fast_hash == "instantly"


def test_raw_seconds_follow_rates():
    result = estimate_crack_time("a")
    guesses = 2 ** 4.91
    assert result.seconds.online_throttled == pytest.approx(guesses / (100 / 3600))
    assert result.seconds.online_unthrottled == pytest.approx(guesses / 10)
    assert result.seconds.offline_slow_hash == pytest.approx(guesses / 1e4)
    assert result.seconds.offline_fast_hash == pytest.approx(guesses / 1e10)


def test_strong_password_takes_centuries():
    result = estimate_crack_time("aA1!" * 10)
    for field in FIELDS:
        assert getattr(result.display, field) == "centuries"


def test_overflowing_guess_count_is_centuries():
    result = estimate_crack_time("aA1!" * 5000)
    assert math.isinf(result.seconds.offline_fast_hash)
    assert result.display.offline_fast_hash == "centuries"


@pytest.mark.parametrize(
    ("seconds", "threshold", "expected"),
    [
        (0.5e-6, 1e-6, "instantly"),
        (0.5, 1.0, "instantly"),
        (0.5, 1e-6, "instantly"),
        (1, 1.0, "1 second"),
        (59, 1.0, "59 seconds"),
        (60, 1.0, "1 minute"),
        (7200, 1.0, "2 hours"),
        (86_400, 1.0, "1 day"),
        (604_800 * 3, 1.0, "3 weeks"),
        (2_592_000, 1.0, "1 month"),
        (31_536_000 * 5, 1.0, "5 years"),
        (31_536_000 * 200, 1.0, "200 years"),
        (31_536_000 * 201, 1.0, "centuries"),
        (math.inf, 1.0, "centuries"),
    ],
)
def test_format_duration(seconds, threshold, expected):
    assert CrackTimeEstimator.format_duration(seconds, threshold) == expected
