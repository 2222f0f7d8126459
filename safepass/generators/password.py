"""
Secure Random Password Generator
=================================

Builds a character pool from the selected classes, removes optional
exclusion sets, and draws each character uniformly from the pool using
bytes from the operating system's CSPRNG.

Bytes are mapped to pool indices by rejection sampling: byte values at or
above the largest multiple of the pool size are discarded, so every pool
character has exactly the same probability.

References:
    - Python ``secrets`` module. https://docs.python.org/3/library/secrets.html
    - NIST SP 800-90A Rev. 1 (2015). Recommendation for Random Number
      Generation Using Deterministic Random Bit Generators.
"""

from __future__ import annotations

import secrets
import string
from typing import Any, Callable, Optional

from pydantic import ValidationError

from shared.logger import SafePassLogger

from safepass.core.errors import CryptographicUnavailableError, InvalidConfigurationError
from safepass.core.models import GeneratorOptions

LOWERCASE = string.ascii_lowercase
UPPERCASE = string.ascii_uppercase
NUMBERS = string.digits
SYMBOLS = "!@#$%^&*()_+-=[]{}|;:,.<>?"

# Glyphs easily confused with one another in common fonts
SIMILAR_CHARACTERS = "il1Lo0O"
# Symbols that are awkward to type, quote, or read aloud
AMBIGUOUS_CHARACTERS = "{}[]()/\\'\"`~,;:.<>"

_log = SafePassLogger("generator")

RandomBytes = Callable[[int], bytes]


class PasswordGenerator:
    """Generates passwords from a configurable character pool.

    Usage::

        generator = PasswordGenerator()
        password = generator.generate(GeneratorOptions(length=20))

    Args:
        random_bytes: Source of uniformly random bytes. Defaults to
            :func:`secrets.token_bytes`.
    """

    def __init__(self, random_bytes: Optional[RandomBytes] = None) -> None:
        self._random_bytes = random_bytes or secrets.token_bytes

    @staticmethod
    def build_pool(options: GeneratorOptions) -> str:
        """Character pool for *options*, in a stable order without duplicates."""
        pool = ""
        if options.include_lowercase:
            pool += LOWERCASE
        if options.include_uppercase:
            pool += UPPERCASE
        if options.include_numbers:
            pool += NUMBERS
        if options.include_symbols:
            pool += SYMBOLS

        excluded = ""
        if options.exclude_similar_characters:
            excluded += SIMILAR_CHARACTERS
        if options.exclude_ambiguous_characters:
            excluded += AMBIGUOUS_CHARACTERS
        return "".join(c for c in pool if c not in excluded)

    def generate(self, options: Optional[GeneratorOptions] = None) -> str:
        """Generate one password.

        Raises:
            InvalidConfigurationError: If no characters remain in the pool.
            CryptographicUnavailableError: If the random source fails.
        """
        options = options or GeneratorOptions()
        pool = self.build_pool(options)
        if not pool:
            raise InvalidConfigurationError(
                "No characters available: enable at least one character class "
                "or relax the exclusion options"
            )

        pool_size = len(pool)
        limit = 256 - (256 % pool_size)
        chars: list[str] = []
        while len(chars) < options.length:
            # Request extra bytes to cover rejected samples
            needed = options.length - len(chars)
            for byte in self._fetch(needed + needed // 2 + 1):
                if byte < limit:
                    chars.append(pool[byte % pool_size])
                    if len(chars) == options.length:
                        break

        _log.debug("Generated password", length=options.length, pool_size=pool_size)
        return "".join(chars)

    def _fetch(self, count: int) -> bytes:
        try:
            data = self._random_bytes(count)
        except (NotImplementedError, OSError) as exc:
            _log.error("Secure random source failed: %s", exc)
            raise CryptographicUnavailableError(
                f"Secure random source unavailable: {exc}"
            ) from exc
        if len(data) < count:
            raise CryptographicUnavailableError(
                f"Secure random source returned {len(data)} of {count} bytes"
            )
        return data


_DEFAULT_GENERATOR = PasswordGenerator()


def generate_secure_random_password(
    options: Optional[GeneratorOptions] = None,
    **overrides: Any,
) -> str:
    """Generate a password from *options*, with keyword overrides.

    Example::

        generate_secure_random_password(length=24, include_symbols=False)

    Raises:
        InvalidConfigurationError: For invalid options or an empty pool.
        CryptographicUnavailableError: If the random source fails.
    """
    base = options.model_dump() if options is not None else {}
    try:
        merged = GeneratorOptions(**{**base, **overrides})
    except ValidationError as exc:
        raise InvalidConfigurationError(f"Invalid generator options: {exc}") from exc
    return _DEFAULT_GENERATOR.generate(merged)
