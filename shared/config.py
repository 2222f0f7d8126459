"""
SafePass Configuration Management
==================================

Dataclass configuration for the SafePass toolkit, loaded from TOML.

Lookup order for the configuration file:

1. The path passed to :meth:`SafePassConfig.load` (``--config`` on the CLI).
2. The ``SAFEPASS_CONFIG`` environment variable.
3. ``safepass.toml`` in the current working directory.

Only an explicitly requested file must exist; otherwise a missing file
means built-in defaults. Each TOML table (``[global]``, ``[strength]``,
``[wordlist]``, ``[generator]``) maps to one dataclass below, and keys a
section does not declare are dropped.

References:
    - Wiggins, A. (2011). The Twelve-Factor App, III. Config.
      https://12factor.net/config
    - TOML v1.0.0 Specification. https://toml.io/en/v1.0.0
"""

from __future__ import annotations

import os
import sys
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, Optional, TypeVar

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

CONFIG_ENV_VAR = "SAFEPASS_CONFIG"
DEFAULT_CONFIG_NAME = "safepass.toml"

_Section = TypeVar("_Section")


def _default_tiers() -> list[dict[str, Any]]:
    return [
        {"id": 0, "value": "Too weak", "min_length": 0, "min_diversity": 0},
        {"id": 1, "value": "Weak", "min_length": 8, "min_diversity": 2},
        {"id": 2, "value": "Medium", "min_length": 10, "min_diversity": 4},
        {"id": 3, "value": "Strong", "min_length": 12, "min_diversity": 4},
    ]


# ========================== Tool-Specific Configs ==========================


@dataclass(frozen=False, slots=True)
class StrengthConfig:
    """Configuration for the strength tier resolver.

    ``tiers`` is an ordered list of tables with ``id``, ``value``,
    ``min_length`` and ``min_diversity`` keys. The requirement fields
    mirror :class:`safepass.core.models.HardRequirements`; a count of
    ``0`` means the minimum is not enforced.
    """

    tiers: list[dict[str, Any]] = field(default_factory=_default_tiers)
    require_uppercase: bool = False
    require_number: bool = False
    require_symbol: bool = False
    min_uppercase_count: int = 0
    min_number_count: int = 0
    min_symbol_count: int = 0

    @property
    def has_requirements(self) -> bool:
        """True when at least one hard requirement is configured."""
        return any((
            self.require_uppercase,
            self.require_number,
            self.require_symbol,
            self.min_uppercase_count,
            self.min_number_count,
            self.min_symbol_count,
        ))


@dataclass(frozen=False, slots=True)
class WordlistConfig:
    """Configuration for the common-password wordlist lookup.

    An empty ``data_dir`` selects the lists bundled with the package.
    """

    data_dir: str = ""
    default_size: str = "300"
    check_common: bool = True


@dataclass(frozen=False, slots=True)
class GeneratorConfig:
    """Default options for the secure random password generator."""

    length: int = 16
    include_uppercase: bool = True
    include_lowercase: bool = True
    include_numbers: bool = True
    include_symbols: bool = True
    exclude_similar_characters: bool = False
    exclude_ambiguous_characters: bool = False


# =========================== Global Settings ===============================


@dataclass(frozen=False, slots=True)
class GlobalConfig:
    """Global settings shared across all SafePass modules.

    Controls logging verbosity, output directories, and general
    operational parameters.
    """

    log_level: str = "WARNING"
    log_file: str = ""
    log_json: bool = False
    output_dir: str = "output"
    debug: bool = False
    version: str = "1.0.0"


# =========================== Master Config =================================


def _section(cls: type[_Section], table: Any) -> _Section:
    """Build dataclass *cls* from a TOML table, keeping declared keys only."""
    if not isinstance(table, dict):
        raise ValueError(f"Expected a table for {cls.__name__}, got {type(table).__name__}")
    declared = {f.name for f in fields(cls)}  # type: ignore[arg-type]
    return cls(**{key: value for key, value in table.items() if key in declared})


@dataclass(frozen=False, slots=True)
class SafePassConfig:
    """All SafePass settings, one attribute per TOML table.

    Usage:
        >>> config = SafePassConfig.load("safepass.toml")
        >>> config.wordlist.default_size
        '300'
    """

    global_settings: GlobalConfig = field(default_factory=GlobalConfig)
    strength: StrengthConfig = field(default_factory=StrengthConfig)
    wordlist: WordlistConfig = field(default_factory=WordlistConfig)
    generator: GeneratorConfig = field(default_factory=GeneratorConfig)

    @staticmethod
    def resolve_path(path: str | Path | None = None) -> tuple[Path, bool]:
        """Return the config path to read and whether it was requested explicitly."""
        if path is not None:
            return Path(path), True
        from_env = os.environ.get(CONFIG_ENV_VAR)
        if from_env:
            return Path(from_env), True
        return Path.cwd() / DEFAULT_CONFIG_NAME, False

    @classmethod
    def load(cls, path: str | Path | None = None) -> SafePassConfig:
        """Read configuration from TOML, falling back to defaults.

        Args:
            path: Configuration file. When omitted, ``$SAFEPASS_CONFIG``
                and then ``./safepass.toml`` are tried.

        Raises:
            FileNotFoundError: If an explicitly requested file is missing.
            ValueError: If the file is not valid TOML or a section is not
                a table (``tomllib.TOMLDecodeError`` is a ValueError).
        """
        config_path, explicit = cls.resolve_path(path)
        if not config_path.is_file():
            if explicit:
                raise FileNotFoundError(f"Configuration file not found: {config_path}")
            return cls()

        raw = tomllib.loads(config_path.read_text(encoding="utf-8"))
        return cls(
            global_settings=_section(GlobalConfig, raw.get("global", {})),
            strength=_section(StrengthConfig, raw.get("strength", {})),
            wordlist=_section(WordlistConfig, raw.get("wordlist", {})),
            generator=_section(GeneratorConfig, raw.get("generator", {})),
        )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


# ========================= Module-level convenience ========================

_cached: Optional[SafePassConfig] = None


def get_config(path: str | Path | None = None) -> SafePassConfig:
    """Process-wide configuration, loaded on first call.

    Passing *path* reloads from that file and replaces the cached value.
    """
    global _cached
    if _cached is None or path is not None:
        _cached = SafePassConfig.load(path)
    return _cached
