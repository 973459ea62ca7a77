"""
Per‑type temperature ⇄ EMF converters.
Only depends on NumPy; safe to import anywhere.

Every converter accepts a float or an ndarray and returns the same shape.
Out‑of‑domain input follows the converter's RangePolicy:

  extrapolate (default)  nearest segment's polynomial, accuracy not certified
  clamp                  input pinned to the documented bound first
  reject                 OutOfRangeError
"""
from __future__ import annotations

import numpy as np

from thermocalc.coefficients import FORWARD, INVERSE
from thermocalc.constants import DEFAULT_RANGE_POLICY, DEFAULT_TABLE_STEP
from thermocalc.enums import RangePolicy, ThermocoupleType
from thermocalc.errors import OutOfRangeError
from thermocalc.logger_setup import app_logger
from thermocalc.polynomial import PiecewisePolynomial


class Thermocouple:
    """Temperature (°C) ⇄ EMF (mV) conversion pair for one thermocouple type."""

    def __init__(
        self,
        tc_type: ThermocoupleType | int | str,
        policy: RangePolicy | str = DEFAULT_RANGE_POLICY,
    ) -> None:
        self.type = ThermocoupleType.parse(tc_type)
        self.policy = RangePolicy(policy)
        self._forward: PiecewisePolynomial = FORWARD[self.type]
        self._inverse: PiecewisePolynomial = INVERSE[self.type]

    def __repr__(self) -> str:
        return f"Thermocouple({self.type.label!r}, policy={self.policy.value!r})"

    # ------------------------------------------------------------------ #
    # documented domains
    # ------------------------------------------------------------------ #
    @property
    def temperature_range(self) -> tuple[float, float]:
        return self._forward.lower, self._forward.upper

    @property
    def emf_range(self) -> tuple[float, float]:
        return self._inverse.lower, self._inverse.upper

    # ------------------------------------------------------------------ #
    # public API
    # ------------------------------------------------------------------ #
    def temperature_to_emf(self, temperature: float | np.ndarray) -> float | np.ndarray:
        """Thermoelectric EMF (mV) with the reference junction at 0 °C."""
        temperature = self._within_domain(temperature, self._forward, "temperature")
        return self._forward(temperature)

    def emf_to_temperature(self, emf: float | np.ndarray) -> float | np.ndarray:
        """Hot‑junction temperature (°C) for an EMF (mV) referenced to 0 °C."""
        emf = self._within_domain(emf, self._inverse, "EMF")
        return self._inverse(emf)

    def with_policy(self, policy: RangePolicy | str) -> "Thermocouple":
        return Thermocouple(self.type, policy)

    def reference_table(
        self,
        start: float | None = None,
        stop: float | None = None,
        step: float = DEFAULT_TABLE_STEP,
    ) -> tuple[np.ndarray, np.ndarray]:
        """
        Tabulate EMF against temperature, endpoints included.
        Defaults to the whole documented temperature range.
        """
        if step <= 0:
            raise ValueError("step must be positive")
        lower, upper = self.temperature_range
        start = lower if start is None else start
        stop = upper if stop is None else stop
        if stop < start:
            raise ValueError("stop must not precede start")

        count = int(np.floor((stop - start) / step + 1e-9)) + 1
        temperatures = start + step * np.arange(count)
        if not np.isclose(temperatures[-1], stop):
            temperatures = np.append(temperatures, stop)
        return temperatures, np.asarray(self.temperature_to_emf(temperatures))

    # ------------------------------------------------------------------ #
    # internals
    # ------------------------------------------------------------------ #
    def _within_domain(
        self,
        value: float | np.ndarray,
        table: PiecewisePolynomial,
        quantity: str,
    ) -> float | np.ndarray:
        if self.policy is RangePolicy.EXTRAPOLATE:
            return value

        values = np.asarray(value, dtype=float)
        outside = (values < table.lower) | (values > table.upper)
        if not outside.any():
            return value

        if self.policy is RangePolicy.REJECT:
            first = float(values[outside].flat[0]) if values.ndim else float(values)
            raise OutOfRangeError(self.type.label, quantity, first, table.lower, table.upper)

        app_logger.debug(
            f"Type {self.type.label}: clamping {int(outside.sum())} {quantity} "
            f"value(s) to [{table.lower:g}, {table.upper:g}]"
        )
        clamped = np.clip(values, table.lower, table.upper)
        return float(clamped) if clamped.ndim == 0 else clamped


# --------------------------------------------------------------------------- #
# Module‑level converters (default range policy)
# --------------------------------------------------------------------------- #
THERMOCOUPLES: dict[ThermocoupleType, Thermocouple] = {
    tc_type: Thermocouple(tc_type) for tc_type in ThermocoupleType
}


def get_thermocouple(
    tc_type: ThermocoupleType | int | str,
    policy: RangePolicy | str | None = None,
) -> Thermocouple:
    """Converter pair for `tc_type`; raises UnknownThermocoupleTypeError."""
    thermocouple = THERMOCOUPLES[ThermocoupleType.parse(tc_type)]
    if policy is None or RangePolicy(policy) is thermocouple.policy:
        return thermocouple
    return thermocouple.with_policy(policy)


def temperature_to_emf(
    tc_type: ThermocoupleType | int | str, temperature: float | np.ndarray
) -> float | np.ndarray:
    return get_thermocouple(tc_type).temperature_to_emf(temperature)


def emf_to_temperature(
    tc_type: ThermocoupleType | int | str, emf: float | np.ndarray
) -> float | np.ndarray:
    return get_thermocouple(tc_type).emf_to_temperature(emf)


temperature_to_emf_r = THERMOCOUPLES[ThermocoupleType.R].temperature_to_emf
emf_to_temperature_r = THERMOCOUPLES[ThermocoupleType.R].emf_to_temperature
temperature_to_emf_s = THERMOCOUPLES[ThermocoupleType.S].temperature_to_emf
emf_to_temperature_s = THERMOCOUPLES[ThermocoupleType.S].emf_to_temperature
temperature_to_emf_b = THERMOCOUPLES[ThermocoupleType.B].temperature_to_emf
emf_to_temperature_b = THERMOCOUPLES[ThermocoupleType.B].emf_to_temperature
temperature_to_emf_j = THERMOCOUPLES[ThermocoupleType.J].temperature_to_emf
emf_to_temperature_j = THERMOCOUPLES[ThermocoupleType.J].emf_to_temperature
temperature_to_emf_t = THERMOCOUPLES[ThermocoupleType.T].temperature_to_emf
emf_to_temperature_t = THERMOCOUPLES[ThermocoupleType.T].emf_to_temperature
temperature_to_emf_e = THERMOCOUPLES[ThermocoupleType.E].temperature_to_emf
emf_to_temperature_e = THERMOCOUPLES[ThermocoupleType.E].emf_to_temperature
temperature_to_emf_k = THERMOCOUPLES[ThermocoupleType.K].temperature_to_emf
emf_to_temperature_k = THERMOCOUPLES[ThermocoupleType.K].emf_to_temperature
temperature_to_emf_n = THERMOCOUPLES[ThermocoupleType.N].temperature_to_emf
emf_to_temperature_n = THERMOCOUPLES[ThermocoupleType.N].emf_to_temperature
temperature_to_emf_a1 = THERMOCOUPLES[ThermocoupleType.A1].temperature_to_emf
emf_to_temperature_a1 = THERMOCOUPLES[ThermocoupleType.A1].emf_to_temperature
temperature_to_emf_a2 = THERMOCOUPLES[ThermocoupleType.A2].temperature_to_emf
emf_to_temperature_a2 = THERMOCOUPLES[ThermocoupleType.A2].emf_to_temperature
temperature_to_emf_a3 = THERMOCOUPLES[ThermocoupleType.A3].temperature_to_emf
emf_to_temperature_a3 = THERMOCOUPLES[ThermocoupleType.A3].emf_to_temperature
temperature_to_emf_l = THERMOCOUPLES[ThermocoupleType.L].temperature_to_emf
emf_to_temperature_l = THERMOCOUPLES[ThermocoupleType.L].emf_to_temperature
temperature_to_emf_m = THERMOCOUPLES[ThermocoupleType.M].temperature_to_emf
emf_to_temperature_m = THERMOCOUPLES[ThermocoupleType.M].emf_to_temperature
