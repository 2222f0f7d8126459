"""
SafePass Collectors
====================

Loaders for external reference data: the bundled and configurable lists
of known-compromised passwords.
"""

from safepass.collectors.wordlist import (
    WordlistCache,
    get_default_cache,
    is_common_password,
)

__all__ = ["WordlistCache", "get_default_cache", "is_common_password"]
