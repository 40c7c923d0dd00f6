"""
Number Editor Widget

A line edit for a single bounded number. When editing finishes the text is
checked against a NumericRange; an out-of-range value is replaced by the
nearest bound and the text is selected so the user sees the correction.
"""
import logging
import math
from typing import Optional

from PySide6.QtCore import Signal
from PySide6.QtWidgets import QLineEdit

from control_resources.core.models import NumericRange

logger = logging.getLogger(__name__)


class NumberEditor(QLineEdit):
    """
    Bounded numeric input.

    Signals:
        valueCommitted(float): Emitted after every commit with the accepted
            (possibly corrected) value
    """

    valueCommitted = Signal(float)

    def __init__(
        self,
        value_range: NumericRange,
        value: Optional[float] = None,
        decimals: int = 2,
        parent=None,
    ):
        super().__init__(parent)

        self._range = value_range
        self._decimals = max(0, decimals)
        self._value = value_range.clamp(value if value is not None else value_range.minimum)
        self.setText(self._format(self._value))

        self.editingFinished.connect(self.commit)

    def value(self) -> float:
        """Last committed value."""
        return self._value

    def value_range(self) -> NumericRange:
        return self._range

    def set_value(self, value: float) -> None:
        """Show a value without range checking; commit() checks it."""
        self._value = value
        self.setText(self._format(value))

    def set_range(self, minimum: float, maximum: float) -> None:
        """Move the bounds and re-check the current value against them."""
        self._range.set_range(minimum, maximum)
        self.commit()

    def commit(self) -> bool:
        """
        Parse, verify and normalise the current text.

        Returns:
            True if the entered value was already in range.
        """
        try:
            entered = float(self.text().strip())
        except ValueError:
            entered = math.nan
        if not math.isfinite(entered):
            logger.debug("Rejected non-numeric input %r", self.text())
            self.set_value(self._value)
            self.selectAll()
            return False

        valid, normalized = self._range.verify_and_normalize(entered)
        self.set_value(normalized)
        if not valid:
            self.selectAll()
        self.valueCommitted.emit(normalized)
        return valid

    def _format(self, value: float) -> str:
        return f"{value:.{self._decimals}f}"
