"""
Cold‑junction compensation and type dispatch.

    E_total = E_measured + E(t_cold)
    t_hot   = t(E_total)

Both conversions use the same thermocouple type. An unknown type selector
is a programming error: the error hook is notified and NaN is returned.
"""
from __future__ import annotations

import math
from typing import Callable

import numpy as np

from thermocalc.constants import DEFAULT_RANGE_POLICY
from thermocalc.enums import RangePolicy, ThermocoupleType
from thermocalc.errors import UnknownThermocoupleTypeError
from thermocalc.logger_setup import app_logger
from thermocalc.thermocouple import Thermocouple

ErrorHook = Callable[[object], None]


# --------------------------------------------------------------------------- #
# Error hooks
# --------------------------------------------------------------------------- #
def log_unknown_type(tc_type: object) -> None:
    """Default hook: report and carry on."""
    app_logger.error(
        f"Unknown thermocouple type {tc_type!r}; expected one of "
        f"{', '.join(t.label for t in ThermocoupleType)}"
    )


def raise_unknown_type(tc_type: object) -> None:
    """Hook for callers that want a hard fault instead of NaN."""
    raise UnknownThermocoupleTypeError(tc_type)


# --------------------------------------------------------------------------- #
# Compensator
# --------------------------------------------------------------------------- #
class ColdJunctionCompensator:
    """
    Converts a measured EMF plus the reference‑junction temperature into
    the hot‑junction temperature. Holds no per‑call state; one instance
    can be shared between threads.
    """

    def __init__(
        self,
        error_hook: ErrorHook | None = None,
        policy: RangePolicy | str = DEFAULT_RANGE_POLICY,
    ) -> None:
        self.error_hook: ErrorHook = error_hook or log_unknown_type
        self.policy = RangePolicy(policy)
        self._thermocouples = {
            tc_type: Thermocouple(tc_type, self.policy) for tc_type in ThermocoupleType
        }

    def thermocouple(self, tc_type: object) -> Thermocouple | None:
        """Converter for `tc_type`, or None after notifying the error hook."""
        try:
            return self._thermocouples[ThermocoupleType.parse(tc_type)]
        except UnknownThermocoupleTypeError:
            self.error_hook(tc_type)
            return None

    def get_temperature(
        self,
        cold_junction_temperature: float | np.ndarray,
        measured_emf: float | np.ndarray,
        tc_type: object,
    ) -> float | np.ndarray:
        """Hot‑junction temperature (°C) from the measured EMF (mV)."""
        thermocouple = self.thermocouple(tc_type)
        if thermocouple is None:
            return math.nan

        cold_junction_emf = thermocouple.temperature_to_emf(cold_junction_temperature)
        total_emf = np.add(measured_emf, cold_junction_emf)
        return thermocouple.emf_to_temperature(total_emf)

    def get_emf(
        self,
        cold_junction_temperature: float | np.ndarray,
        hot_junction_temperature: float | np.ndarray,
        tc_type: object,
    ) -> float | np.ndarray:
        """EMF (mV) the thermocouple produces between the two junctions."""
        thermocouple = self.thermocouple(tc_type)
        if thermocouple is None:
            return math.nan

        hot_emf = thermocouple.temperature_to_emf(hot_junction_temperature)
        cold_emf = thermocouple.temperature_to_emf(cold_junction_temperature)
        difference = np.subtract(hot_emf, cold_emf)
        return float(difference) if np.ndim(difference) == 0 else difference


_default_compensator = ColdJunctionCompensator()


def get_temperature(
    cold_junction_temperature: float | np.ndarray,
    measured_emf: float | np.ndarray,
    tc_type: object,
    error_hook: ErrorHook | None = None,
) -> float | np.ndarray:
    """
    Hot‑junction temperature (°C) for `measured_emf` (mV) read against a
    reference junction at `cold_junction_temperature` (°C).
    """
    compensator = _default_compensator
    if error_hook is not None:
        compensator = ColdJunctionCompensator(error_hook)
    return compensator.get_temperature(cold_junction_temperature, measured_emf, tc_type)
