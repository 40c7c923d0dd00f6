"""
Color Toggle Button Widget

A checkable push button whose background, text colour and text follow its
selection state. Colours come from a ToggleAppearance, texts either from the
caller or from a string table.
"""
from typing import Optional

from PySide6.QtWidgets import QPushButton

from control_resources.core.binder import apply_icon_set
from control_resources.core.config import ResolverConfig
from control_resources.core.labels import resolve_toggle_texts, resolve_tool_tip
from control_resources.core.models import IconContext, IconSet, ToggleAppearance
from control_resources.core.strings import StringTable
from control_resources.gui.control import QtControl
from control_resources.gui.styles.theme import (
    Fonts,
    TOGGLE_BUTTON_STYLE,
    get_colors,
    toggle_appearance,
)


class ColorToggleButton(QPushButton):
    """
    Two-state colour button.

    When no appearance is given the theme's toggle colours are used and
    refreshed by update_theme(); an explicit appearance is kept as is.
    """

    def __init__(
        self,
        selected_text: str = "",
        deselected_text: Optional[str] = None,
        appearance: Optional[ToggleAppearance] = None,
        tool_tip: Optional[str] = None,
        selected: bool = False,
        parent=None,
    ):
        super().__init__(parent)

        self._selected_text = selected_text
        self._deselected_text = selected_text if deselected_text is None else deselected_text
        self._themed = appearance is None
        self._appearance = appearance or toggle_appearance()

        self.setCheckable(True)
        self.setChecked(selected)
        if tool_tip:
            self.setToolTip(tool_tip)

        self.toggled.connect(self._on_toggled)
        self._update_state()

    @classmethod
    def from_resources(
        cls,
        group: str,
        item: Optional[str],
        table: StringTable,
        icons: Optional[IconSet] = None,
        appearance: Optional[ToggleAppearance] = None,
        selected: bool = False,
        config: Optional[ResolverConfig] = None,
        parent=None,
    ) -> "ColorToggleButton":
        """
        Build a toggle button from string table entries.

        If the icon set has an enabled icon the button shows the icon only;
        otherwise it shows the resolved selected/deselected texts.
        """
        texts = resolve_toggle_texts(group, item, table, config) or ("", "")
        button = cls(
            selected_text=texts[0],
            deselected_text=texts[1],
            appearance=appearance,
            tool_tip=resolve_tool_tip(group, item, table, config),
            selected=selected,
            parent=parent,
        )
        if icons is not None:
            control = QtControl(button, IconContext.CONTROL_PANEL)
            if apply_icon_set(control, icons):
                button.set_texts("", "")
        return button

    # ─────────────────────────────────────────────────────────────────────────
    # State
    # ─────────────────────────────────────────────────────────────────────────

    def appearance(self) -> ToggleAppearance:
        return self._appearance

    def set_appearance(self, appearance: ToggleAppearance) -> None:
        self._appearance = appearance
        self._themed = False
        self._update_state()

    def set_texts(self, selected_text: str, deselected_text: str) -> None:
        self._selected_text = selected_text
        self._deselected_text = deselected_text
        self._update_state()

    def background(self) -> str:
        return self._appearance.background_for(self.isChecked())

    def foreground(self) -> str:
        return self._appearance.text_color_for(self.isChecked())

    def current_text(self) -> str:
        return self._selected_text if self.isChecked() else self._deselected_text

    def _on_toggled(self, checked: bool) -> None:
        self._update_state()

    def _update_state(self) -> None:
        selected = self.isChecked()
        C = get_colors()
        self.setText(self.current_text())
        self.setStyleSheet(
            TOGGLE_BUTTON_STYLE.format(
                background=self._appearance.background_for(selected),
                text=self._appearance.text_color_for(selected),
                inset=self._appearance.inset_color_for(selected),
                weight=Fonts.WEIGHT_MEDIUM,
                disabled_bg=C.DISABLED_BG,
                disabled_text=C.TEXT_DISABLED,
            )
        )

    def update_theme(self) -> None:
        """Update colors when theme changes."""
        if self._themed:
            self._appearance = toggle_appearance()
        self._update_state()
