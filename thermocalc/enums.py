"""
Enumerations shared across the package: thermocouple type selector,
conversion direction and out‑of‑range policy.
"""
from __future__ import annotations

from enum import Enum, IntEnum

import numpy as np

from thermocalc.errors import UnknownThermocoupleTypeError


class ThermocoupleType(IntEnum):
    """Thermocouple type selector with stable ordinals (R = 0 … M = 12)."""

    R = 0
    S = 1
    B = 2
    J = 3
    T = 4
    E = 5
    K = 6
    N = 7
    A1 = 8
    A2 = 9
    A3 = 10
    L = 11
    M = 12

    @property
    def label(self) -> str:
        """Name as printed in the standard, e.g. 'K' or 'A-1'."""
        if self.name.startswith("A"):
            return f"A-{self.name[1:]}"
        return self.name

    @classmethod
    def parse(cls, value: object) -> "ThermocoupleType":
        """
        Coerce an enum member, an ordinal or a name ('K', 'a-1', 'A2') to a member.
        Raises UnknownThermocoupleTypeError for anything else.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().upper().replace("-", "")
            if key in cls.__members__:
                return cls[key]
            raise UnknownThermocoupleTypeError(value)
        if isinstance(value, (int, np.integer)) and not isinstance(value, bool):
            try:
                return cls(int(value))
            except ValueError:
                raise UnknownThermocoupleTypeError(value) from None
        raise UnknownThermocoupleTypeError(value)


class Direction(Enum):
    TEMPERATURE_TO_EMF = "temperature_to_emf"
    EMF_TO_TEMPERATURE = "emf_to_temperature"


class RangePolicy(str, Enum):
    """
    What a converter does with input outside its documented domain.

    EXTRAPOLATE  evaluate the nearest segment's polynomial (reduced accuracy)
    CLAMP        pin the input to the nearest domain bound first
    REJECT       raise OutOfRangeError
    """

    EXTRAPOLATE = "extrapolate"
    CLAMP = "clamp"
    REJECT = "reject"
