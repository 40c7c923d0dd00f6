"""
Control Resources Core Package

Toolkit-independent resolution of control presentation from a string
table: key composition, mnemonic marker handling, label and tooltip
resolution, and binding onto any control that implements the Control
protocol. Toggle appearance and numeric ranges live in core.models.

Nothing in this package imports a GUI toolkit. Toolkit adapters live in
control_resources.gui.
"""

from .binder import (
    Control,
    IconProvider,
    apply_icon_set,
    apply_icons,
    apply_text,
    apply_tool_tip,
    bind,
    bind_from_files,
)
from .config import DEFAULT_CONFIG, ResolverConfig, load_resolver_config
from .errors import ControlResourceError, MissingResourceError, MnemonicIndexError
from .keys import compose_key, compose_lookup_key
from .labels import (
    parse_label,
    resolve_clean_label,
    resolve_label,
    resolve_toggle_texts,
    resolve_tool_tip,
)
from .mnemonics import (
    find_marker_index,
    mnemonic_char_at,
    mnemonic_spec,
    strip_or_translate,
    upper_for_locale,
)
from .strings import MappingStringTable, StringTable

__all__ = [
    "Control",
    "ControlResourceError",
    "DEFAULT_CONFIG",
    "IconProvider",
    "MappingStringTable",
    "MissingResourceError",
    "MnemonicIndexError",
    "ResolverConfig",
    "StringTable",
    "apply_icon_set",
    "apply_icons",
    "apply_text",
    "apply_tool_tip",
    "bind",
    "bind_from_files",
    "compose_key",
    "compose_lookup_key",
    "find_marker_index",
    "load_resolver_config",
    "mnemonic_char_at",
    "mnemonic_spec",
    "parse_label",
    "resolve_clean_label",
    "resolve_label",
    "resolve_toggle_texts",
    "resolve_tool_tip",
    "strip_or_translate",
    "upper_for_locale",
]
