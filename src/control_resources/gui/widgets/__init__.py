from .color_toggle_button import ColorToggleButton
from .number_editor import NumberEditor

__all__ = ["ColorToggleButton", "NumberEditor"]
