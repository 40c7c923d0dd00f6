"""
Core Models Package

Value objects shared by the resolver, the binder and the toolkit adapters.
Everything except NumericRange is a frozen dataclass: resolved labels and
icon sets are shared by reference between controls and must not change
underneath them. NumericRange is mutable through explicit setters because
an editor's valid bounds can move at runtime.
"""

from .appearance import ToggleAppearance
from .icons import IconContext, IconHandle, IconSet, IconSlot
from .label import NO_MARKER, Label, MnemonicSpec
from .ranges import AngleRange, NumericRange, Verification

__all__ = [
    "AngleRange",
    "IconContext",
    "IconHandle",
    "IconSet",
    "IconSlot",
    "Label",
    "MnemonicSpec",
    "NO_MARKER",
    "NumericRange",
    "ToggleAppearance",
    "Verification",
]
