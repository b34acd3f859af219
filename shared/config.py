"""
AlgoLex Configuration Management
=================================

Centralized configuration for the AlgoLex toolkit using Python
dataclasses and TOML-based persistence.

Architecture follows the Twelve-Factor App methodology for configuration
management (Wiggins, 2011), separating config from code.

References:
    - Wiggins, A. (2011). The Twelve-Factor App. https://12factor.net/
    - TOML v1.0.0 Specification. https://toml.io/en/v1.0.0
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Any

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib


# ---------------------------------------------------------------------------
# Default configuration file path relative to the AlgoLex root
# ---------------------------------------------------------------------------
_DEFAULT_CONFIG_PATH: Path = Path(__file__).resolve().parent.parent / "config.toml"


# ========================== Tool-Specific Configs ==========================


@dataclass(frozen=False, slots=True)
class DecomposerConfig:
    """Configuration for the algorithm name decomposer.

    The standard SHA digest spellings are always applied; entries in
    ``extra_digest_pairs`` are added on top of them, each as a
    ``[plain, hyphenated]`` pair (e.g. ``["SHA3256", "SHA3-256"]``).
    """

    extra_digest_pairs: list[list[str]] = field(default_factory=list)
    deduplicate_names: bool = True
    comment_prefix: str = "#"

    def digest_pairs(self) -> list[tuple[str, str]]:
        """Return the well-formed extra pairs as tuples.

        Entries that are not exactly two strings are skipped.
        """
        pairs: list[tuple[str, str]] = []
        for entry in self.extra_digest_pairs:
            if (
                isinstance(entry, (list, tuple))
                and len(entry) == 2
                and all(isinstance(item, str) for item in entry)
            ):
                pairs.append((entry[0], entry[1]))
        return pairs


# =========================== Global Settings ===============================


@dataclass(frozen=False, slots=True)
class GlobalConfig:
    """Global settings shared across all AlgoLex modules.

    Controls logging verbosity and log-file destination.
    """

    log_level: str = "WARNING"
    log_file: str = ""
    log_json: bool = False
    debug: bool = False


# =========================== Master Config =================================


@dataclass(frozen=False, slots=True)
class LexConfig:
    """Master configuration aggregating tool-specific and global settings.

    Usage:
        >>> config = LexConfig.load()                  # from default path
        >>> config = LexConfig.load("custom.toml")     # from custom path
        >>> print(config.global_settings.log_level)
        'WARNING'
    """

    global_settings: GlobalConfig = field(default_factory=GlobalConfig)
    decomposer: DecomposerConfig = field(default_factory=DecomposerConfig)

    # ------------------------------------------------------------------ #
    #  TOML Loading
    # ------------------------------------------------------------------ #

    @classmethod
    def load(cls, path: str | Path | None = None) -> LexConfig:
        """Load configuration from a TOML file.

        If *path* is ``None`` the loader looks for ``config.toml`` in the
        AlgoLex project root.  Missing keys gracefully fall back to
        dataclass defaults -- no ``KeyError`` is raised.

        Args:
            path: Filesystem path to a TOML configuration file.
                  Defaults to ``<project_root>/config.toml``.

        Returns:
            A fully-populated :class:`LexConfig` instance.

        Raises:
            FileNotFoundError: If the specified path does not exist
                *and* was explicitly provided by the caller.
        """
        config_path = Path(path) if path is not None else _DEFAULT_CONFIG_PATH

        if not config_path.exists():
            if path is not None:
                raise FileNotFoundError(
                    f"Configuration file not found: {config_path}"
                )
            return cls()

        with open(config_path, "rb") as fh:
            raw: dict[str, Any] = tomllib.load(fh)

        return cls(
            global_settings=cls._build_section(GlobalConfig, raw.get("global", {})),
            decomposer=cls._build_section(DecomposerConfig, raw.get("decomposer", {})),
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialise the entire configuration tree to a plain dictionary."""
        return asdict(self)

    @staticmethod
    def _build_section(cls: type, data: dict[str, Any]) -> Any:
        """Instantiate a dataclass *cls* using only the keys it declares.

        Unknown keys in the TOML source are silently ignored so that
        forward-compatible config files do not break older code.
        """
        valid_keys = {f.name for f in cls.__dataclass_fields__.values()}  # type: ignore[attr-defined]
        filtered = {k: v for k, v in data.items() if k in valid_keys}
        return cls(**filtered)


# ========================= Module-level convenience ========================

def get_config(path: str | Path | None = None) -> LexConfig:
    """Module-level convenience wrapper around :meth:`LexConfig.load`.

    Caches the result so that repeated imports share one instance.
    """
    if not hasattr(get_config, "_cached") or path is not None:
        get_config._cached = LexConfig.load(path)  # type: ignore[attr-defined]
    return get_config._cached  # type: ignore[attr-defined]
