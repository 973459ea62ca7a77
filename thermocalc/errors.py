"""
Exception types raised by the conversion engine.
"""
from __future__ import annotations


class ThermocoupleError(Exception):
    """Base class for every error raised by thermocalc."""


class UnknownThermocoupleTypeError(ThermocoupleError, ValueError):
    """The type selector is not one of the 13 supported thermocouple types."""

    def __init__(self, value: object) -> None:
        super().__init__(f"Unknown thermocouple type: {value!r}")
        self.value = value


class OutOfRangeError(ThermocoupleError, ValueError):
    """An input lies outside the documented domain of a converter."""

    def __init__(
        self,
        label: str,
        quantity: str,
        value: float,
        lower: float,
        upper: float,
    ) -> None:
        super().__init__(
            f"Type {label} {quantity} {value:g} outside documented range "
            f"[{lower:g}, {upper:g}]"
        )
        self.label = label
        self.quantity = quantity
        self.value = value
        self.lower = lower
        self.upper = upper
