"""
Common Password Wordlists
==========================

Membership checks against lists of known-compromised passwords. Each
list size (``300``, then ``10k`` through ``10m``) is a JSON array of
strings stored as ``common-passwords-<size>.json``. The package bundles
the ``300`` list in ``safepass/data``; larger lists come from a
configured directory.

Lists are loaded on first use and memoized per size in a
:class:`WordlistCache`. Concurrent first loads of the same size may both
read the file; the later write wins, which is harmless because content is
fixed per size. A list that cannot be loaded makes every lookup against
it return ``False``: the check is advisory and must never break a
password form.

Reference:
    NIST SP 800-63B (2017), Section 5.1.1.2 -- verifiers SHALL compare
    prospective secrets against values known to be commonly used or
    compromised.
"""

from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import Optional, Union

from shared.logger import SafePassLogger

from safepass.core.models import ListSize

DEFAULT_DATA_DIR: Path = Path(__file__).resolve().parent.parent / "data"

_log = SafePassLogger("wordlist")


class WordlistCache:
    """Loads and memoizes common-password sets per list size.

    Usage::

        cache = WordlistCache()
        if await cache.contains("password123", ListSize.TOP_300):
            ...

    Args:
        data_dir: Directory holding ``common-passwords-<size>.json`` files.
            Defaults to the lists bundled with the package.
    """

    def __init__(self, data_dir: Union[str, Path, None] = None) -> None:
        self.data_dir = Path(data_dir) if data_dir else DEFAULT_DATA_DIR
        self._sets: dict[ListSize, frozenset[str]] = {}

    def path_for(self, size: ListSize) -> Path:
        return self.data_dir / f"common-passwords-{size.value}.json"

    def is_loaded(self, size: ListSize) -> bool:
        return size in self._sets

    def clear(self) -> None:
        """Forget every loaded list."""
        self._sets.clear()

    async def load(self, size: ListSize) -> Optional[frozenset[str]]:
        """Return the set for *size*, reading it on first use.

        Returns:
            The password set, or ``None`` if the list cannot be loaded.
        """
        cached = self._sets.get(size)
        if cached is not None:
            return cached

        path = self.path_for(size)
        with _log.operation("load"):
            try:
                words = await asyncio.to_thread(self._read, path)
            except (OSError, ValueError, TypeError) as exc:
                _log.warning(
                    "Wordlist %s unavailable: %s", size.value, exc, path=str(path)
                )
                return None
            _log.debug("Loaded wordlist %s (%d entries)", size.value, len(words))

        self._sets[size] = words
        return words

    async def contains(self, password: str, size: Union[ListSize, str]) -> bool:
        """True when *password* appears verbatim in the list for *size*."""
        try:
            list_size = ListSize(size)
        except ValueError:
            _log.warning("Unknown wordlist size: %r", size)
            return False

        words = await self.load(list_size)
        return words is not None and password in words

    @staticmethod
    def _read(path: Path) -> frozenset[str]:
        with open(path, "r", encoding="utf-8") as fh:
            data = json.load(fh)
        if not isinstance(data, list) or not all(isinstance(w, str) for w in data):
            raise ValueError(f"{path.name} is not a JSON array of strings")
        return frozenset(data)


_default_cache: Optional[WordlistCache] = None


def get_default_cache() -> WordlistCache:
    """Process-wide cache over the bundled lists, created on first use."""
    global _default_cache
    if _default_cache is None:
        _default_cache = WordlistCache()
    return _default_cache


async def is_common_password(
    password: str,
    list_size: Union[ListSize, str] = ListSize.TOP_300,
    *,
    cache: Optional[WordlistCache] = None,
) -> bool:
    """Check *password* against the known-compromised list for *list_size*.

    Never raises: an unknown size or a list that cannot be loaded yields
    ``False``.
    """
    return await (cache or get_default_cache()).contains(password, list_size)
