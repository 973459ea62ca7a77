"""
Re‑export the public bits so `from thermocalc import get_temperature`
just works without digging into sub‑modules.
"""
from .compensation import (
    ColdJunctionCompensator,
    get_temperature,
    log_unknown_type,
    raise_unknown_type,
)
from .enums import Direction, RangePolicy, ThermocoupleType
from .errors import OutOfRangeError, ThermocoupleError, UnknownThermocoupleTypeError
from .polynomial import CoefficientSet, PiecewisePolynomial
from .thermocouple import (
    THERMOCOUPLES,
    Thermocouple,
    emf_to_temperature,
    get_thermocouple,
    temperature_to_emf,
)

__all__ = [
    "ColdJunctionCompensator",
    "get_temperature",
    "log_unknown_type",
    "raise_unknown_type",
    "Direction",
    "RangePolicy",
    "ThermocoupleType",
    "OutOfRangeError",
    "ThermocoupleError",
    "UnknownThermocoupleTypeError",
    "CoefficientSet",
    "PiecewisePolynomial",
    "THERMOCOUPLES",
    "Thermocouple",
    "emf_to_temperature",
    "get_thermocouple",
    "temperature_to_emf",
]
