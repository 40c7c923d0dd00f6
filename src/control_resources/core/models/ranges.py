"""
Module: ranges

Purpose:
    Closed numeric ranges for bounded input fields. A range reports whether
    a value is acceptable and, when it is not, the nearest acceptable value.
    Writing the corrected value back to an input surface is the caller's job.

Key Classes:
    - NumericRange: Inclusive [minimum, maximum] with clamping
    - AngleRange: Degree range that unwraps before clamping
    - Verification: (valid, value) outcome of verify_and_normalize

Dependencies:
    - dataclasses, math (std)

Used By:
    - gui.widgets.number_editor
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import NamedTuple

FULL_CYCLE_DEGREES = 360.0


class Verification(NamedTuple):
    """Outcome of checking a value against a range."""

    valid: bool
    value: float


@dataclass
class NumericRange:
    """
    Inclusive numeric range, mutable through explicit setters.

    minimum <= maximum is expected but not enforced, so the bounds can be
    moved one at a time without tripping over an intermediate state.

    Attributes:
        minimum: Smallest accepted value (inclusive)
        maximum: Largest accepted value (inclusive)

    Example:
        >>> r = NumericRange(0.0, 10.0)
        >>> r.verify_and_normalize(15.0)
        Verification(valid=False, value=10.0)
        >>> r.verify_and_normalize(5.0)
        Verification(valid=True, value=5.0)
    """

    minimum: float
    maximum: float

    @classmethod
    def percent(cls) -> "NumericRange":
        """The conventional 0-100 percentage range."""
        return cls(0.0, 100.0)

    # ─────────────────────────────────────────────────────────────────────────
    # Mutators
    # ─────────────────────────────────────────────────────────────────────────

    def set_range(self, minimum: float, maximum: float) -> None:
        self.set_minimum(minimum)
        self.set_maximum(maximum)

    def set_minimum(self, minimum: float) -> None:
        self.minimum = minimum

    def set_maximum(self, maximum: float) -> None:
        self.maximum = maximum

    # ─────────────────────────────────────────────────────────────────────────
    # Queries
    # ─────────────────────────────────────────────────────────────────────────

    def is_in_range(self, value: float) -> bool:
        return self.minimum <= value <= self.maximum

    def clamp(self, value: float) -> float:
        """Return minimum if below range or NaN, maximum if above, else value."""
        if math.isnan(value) or value < self.minimum:
            return self.minimum
        if value > self.maximum:
            return self.maximum
        return value

    def verify_and_normalize(self, value: float) -> Verification:
        """
        Check a value and supply its normalised replacement.

        Returns:
            (True, value) unchanged when in range, otherwise
            (False, clamp(value)).
        """
        if self.is_in_range(value):
            return Verification(True, value)
        return Verification(False, self.clamp(value))


@dataclass
class AngleRange(NumericRange):
    """
    Range of angles in degrees.

    Values are first unwrapped into (-360, 360) keeping their sign. A range
    spanning a full cycle then wraps out-of-range angles by one period
    instead of clamping them, so 370 in [0, 360] becomes 10 rather than 360.
    NaN and infinities normalise to the minimum.

    Example:
        >>> AngleRange(-90.0, 90.0).clamp(-200.0)
        -90.0
        >>> AngleRange(0.0, 360.0).clamp(-90.0)
        270.0
    """

    @property
    def span(self) -> float:
        return self.maximum - self.minimum

    def clamp(self, value: float) -> float:
        # No direction to unwrap or wrap a non-finite angle in.
        if not math.isfinite(value):
            return self.minimum
        unwrapped = math.fmod(value, FULL_CYCLE_DEGREES)

        full_cycle = self.span >= FULL_CYCLE_DEGREES
        if unwrapped < self.minimum:
            return unwrapped + FULL_CYCLE_DEGREES if full_cycle else self.minimum
        if unwrapped > self.maximum:
            return unwrapped - FULL_CYCLE_DEGREES if full_cycle else self.maximum
        return unwrapped
