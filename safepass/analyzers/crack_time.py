"""
Crack Time Estimator
=====================

Converts estimated entropy into time-to-guess under four attacker
models, assuming the attacker must enumerate ``2 ** entropy`` guesses:

- Online, throttled:      100 guesses per hour
- Online, unthrottled:    10 guesses per second
- Offline, slow hash:     10^4 guesses per second (bcrypt, scrypt, Argon2)
- Offline, fast hash:     10^10 guesses per second (MD5/SHA-1 on GPUs)

Durations are rendered in the largest whole calendar unit. Online
attacks count as "instantly" below a microsecond; offline attacks below
one full second. Anything past 200 years is reported as "centuries".

Reference:
    Wheeler, D. L. (2016). zxcvbn: Low-Budget Password Strength
    Estimation. USENIX Security.
"""

from __future__ import annotations

import math

from safepass.analyzers.entropy import EntropyAnalyzer
from safepass.core.models import CrackTimeDisplay, CrackTimeResult, CrackTimeSeconds

ONLINE_THROTTLED_RATE = 100 / 3600
ONLINE_UNTHROTTLED_RATE = 10
OFFLINE_SLOW_HASH_RATE = 10_000
OFFLINE_FAST_HASH_RATE = 10_000_000_000

ONLINE_INSTANT_THRESHOLD = 1e-6
OFFLINE_INSTANT_THRESHOLD = 1.0

_YEAR = 31_536_000
_CENTURIES_THRESHOLD = 200 * _YEAR

_UNITS: tuple[tuple[str, int], ...] = (
    ("year", _YEAR),
    ("month", 2_592_000),
    ("week", 604_800),
    ("day", 86_400),
    ("hour", 3_600),
    ("minute", 60),
    ("second", 1),
)


class CrackTimeEstimator:
    """Projects crack times for a password under four attacker models.

    Usage::

        result = CrackTimeEstimator().analyze("correcthorse")
        print(result.display.offline_fast_hash)
    """

    # (field name, guesses per second, "instantly" threshold in seconds)
    _ATTACK_SPEEDS: tuple[tuple[str, float, float], ...] = (
        ("online_throttled", ONLINE_THROTTLED_RATE, ONLINE_INSTANT_THRESHOLD),
        ("online_unthrottled", ONLINE_UNTHROTTLED_RATE, ONLINE_INSTANT_THRESHOLD),
        ("offline_slow_hash", OFFLINE_SLOW_HASH_RATE, OFFLINE_INSTANT_THRESHOLD),
        ("offline_fast_hash", OFFLINE_FAST_HASH_RATE, OFFLINE_INSTANT_THRESHOLD),
    )

    def __init__(self, entropy_analyzer: EntropyAnalyzer | None = None) -> None:
        self._entropy = entropy_analyzer or EntropyAnalyzer()

    def analyze(self, password: str) -> CrackTimeResult:
        entropy = self._entropy.analyze(password).entropy
        if entropy == 0:
            return CrackTimeResult()

        guesses = self._guesses(entropy)
        seconds: dict[str, float] = {}
        display: dict[str, str] = {}
        for name, rate, threshold in self._ATTACK_SPEEDS:
            seconds[name] = guesses / rate
            display[name] = self.format_duration(seconds[name], threshold)

        return CrackTimeResult(
            seconds=CrackTimeSeconds(**seconds),
            display=CrackTimeDisplay(**display),
        )

    @staticmethod
    def _guesses(entropy: float) -> float:
        """``2 ** entropy``, saturating to infinity past the float range."""
        try:
            return 2.0 ** entropy
        except OverflowError:
            return math.inf

    @staticmethod
    def format_duration(seconds: float, instant_threshold: float) -> str:
        """Format *seconds* as a human-readable duration.

        Args:
            seconds: Raw estimate in seconds.
            instant_threshold: Values below this render as "instantly".

        Returns:
            "instantly", "centuries", or "<n> <unit>[s]".
        """
        if not math.isfinite(seconds):
            return "centuries"
        if seconds < instant_threshold:
            return "instantly"
        if seconds > _CENTURIES_THRESHOLD:
            return "centuries"

        for unit, size in _UNITS:
            count = int(seconds // size)
            if count >= 1:
                return f"{count} {unit}{'' if count == 1 else 's'}"
        return "instantly"


_DEFAULT_ESTIMATOR = CrackTimeEstimator()


def estimate_crack_time(password: str) -> CrackTimeResult:
    """Estimate time-to-guess for *password* under four attacker models."""
    return _DEFAULT_ESTIMATOR.analyze(password)
