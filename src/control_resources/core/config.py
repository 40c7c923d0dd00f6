"""
Module: core.config

Purpose:
    Configuration for label and mnemonic resolution. Immutable, validated
    on construction, and loadable from a JSON file with graceful fallback
    to defaults.

Key Classes:
    - ResolverConfig: Marker characters, casing locale, lookup suffixes

Key Functions:
    - load_resolver_config(path): Read a ResolverConfig from JSON

Dependencies:
    - dataclasses (std)
    - json (std)

Used By:
    - core.keys
    - core.mnemonics
    - core.labels
    - core.binder
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict

logger = logging.getLogger(__name__)

# Ampersand marker, shared with Qt and Swing property files.
AMPERSAND_MARKER = "&"

# Underscore marker, enforced by JavaFX and GTK.
UNDERSCORE_MARKER = "_"


@dataclass(frozen=True)
class ResolverConfig:
    """
    Settings for resolving labels, tooltips and mnemonics (immutable).

    Attributes:
        marker: Mnemonic marker embedded in raw string table labels
        target_marker: Marker inserted when translating instead of stripping
        locale: Locale used to uppercase mnemonic characters ("en_US" style)
        label_suffix: Key suffix for label lookups
        tool_tip_suffix: Key suffix for tooltip lookups
        placeholder_delimiter: Character wrapped around a key whose label
            lookup failed, e.g. "!File.Open!"

    Invariants:
        - marker, target_marker, placeholder_delimiter are single characters
        - label_suffix and tool_tip_suffix are non-blank
        - locale is non-blank

    Example:
        >>> config = ResolverConfig(marker="_")
        >>> config.label_suffix
        'label'
    """

    marker: str = AMPERSAND_MARKER
    target_marker: str = UNDERSCORE_MARKER
    locale: str = "en_US"
    label_suffix: str = "label"
    tool_tip_suffix: str = "toolTip"
    placeholder_delimiter: str = "!"

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        for name in ("marker", "target_marker", "placeholder_delimiter"):
            value = getattr(self, name)
            if not isinstance(value, str) or len(value) != 1:
                raise ValueError(f"{name} must be a single character: {value!r}")
        for name in ("label_suffix", "tool_tip_suffix", "locale"):
            value = getattr(self, name)
            if not isinstance(value, str) or not value.strip():
                raise ValueError(f"{name} must be a non-blank string: {value!r}")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ResolverConfig":
        """
        Build a config from a mapping, ignoring unknown keys.

        Raises:
            ValueError: If a known key holds an invalid value
        """
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})

    def to_dict(self) -> Dict[str, str]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


DEFAULT_CONFIG = ResolverConfig()


def load_resolver_config(path: Path) -> ResolverConfig:
    """
    Load a ResolverConfig from a JSON file.

    Any malformed data results in a fallback to DEFAULT_CONFIG, never an
    exception, so a broken config file cannot stop controls from being built.

    Args:
        path: Location of the JSON file.

    Returns:
        The parsed config, or DEFAULT_CONFIG if the file is missing or invalid.
    """
    if not path.exists():
        logger.debug("Resolver config not found at %s, using defaults", path)
        return DEFAULT_CONFIG

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        logger.warning("Failed to read resolver config %s: %s", path, e)
        return DEFAULT_CONFIG

    if not isinstance(data, dict):
        logger.warning("Resolver config %s is not a JSON object, using defaults", path)
        return DEFAULT_CONFIG

    try:
        return ResolverConfig.from_dict(data)
    except (TypeError, ValueError) as e:
        logger.warning("Invalid resolver config %s: %s", path, e)
        return DEFAULT_CONFIG
