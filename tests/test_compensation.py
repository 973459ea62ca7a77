"""Tests for thermocalc.compensation - cold-junction compensation and dispatch."""

from __future__ import annotations

import math
import threading

import numpy as np
import pytest

from thermocalc.compensation import (
    ColdJunctionCompensator,
    get_temperature,
    log_unknown_type,
    raise_unknown_type,
)
from thermocalc.enums import RangePolicy, ThermocoupleType
from thermocalc.errors import OutOfRangeError, UnknownThermocoupleTypeError
from thermocalc.thermocouple import THERMOCOUPLES


class RecordingHook:
    def __init__(self):
        self.calls = []

    def __call__(self, tc_type):
        self.calls.append(tc_type)


# ---- Dispatch ---------------------------------------------------------------------


def test_zero_emf_returns_cold_junction_temperature():
    assert get_temperature(25.0, 0.0, ThermocoupleType.K) == pytest.approx(25.0, abs=0.05)


@pytest.mark.parametrize("tc_type", list(ThermocoupleType), ids=lambda t: t.label)
def test_matches_manual_compensation(tc_type):
    thermocouple = THERMOCOUPLES[tc_type]
    hot = 0.8 * thermocouple.temperature_range[1]
    cold = 25.0
    measured = thermocouple.temperature_to_emf(hot) - thermocouple.temperature_to_emf(cold)

    expected = thermocouple.emf_to_temperature(measured + thermocouple.temperature_to_emf(cold))
    assert get_temperature(cold, measured, tc_type) == pytest.approx(expected)


@pytest.mark.parametrize(
    "tc_type, hot",
    [("K", 500.0), ("J", 300.0), ("T", -100.0), ("N", 900.0), ("S", 1200.0), ("L", 400.0)],
)
def test_recovers_hot_junction_temperature(tc_type, hot):
    thermocouple = THERMOCOUPLES[ThermocoupleType.parse(tc_type)]
    cold = 22.5
    measured = thermocouple.temperature_to_emf(hot) - thermocouple.temperature_to_emf(cold)
    assert get_temperature(cold, measured, tc_type) == pytest.approx(hot, abs=0.1)


def test_accepts_ordinals_and_names():
    by_member = get_temperature(20.0, 4.0, ThermocoupleType.K)
    assert get_temperature(20.0, 4.0, 6) == by_member
    assert get_temperature(20.0, 4.0, "k") == by_member


def test_array_inputs():
    result = get_temperature(25.0, np.array([0.0, 1.0, 2.0]), "K")
    assert result.shape == (3,)
    assert result[0] == pytest.approx(25.0, abs=0.05)
    assert np.all(np.diff(result) > 0)


def test_per_channel_cold_junction():
    cold = np.array([20.0, 25.0, 30.0])
    result = get_temperature(cold, np.zeros(3), "J")
    np.testing.assert_allclose(result, cold, atol=0.05)


# ---- Error hook --------------------------------------------------------------------


@pytest.mark.parametrize("bad_type", [13, 255, -1, "X", "A4", None, 6.0, True])
def test_unknown_type_invokes_hook_once(bad_type):
    hook = RecordingHook()
    result = get_temperature(25.0, 1.0, bad_type, error_hook=hook)
    assert math.isnan(result)
    assert hook.calls == [bad_type]


def test_known_type_does_not_invoke_hook():
    hook = RecordingHook()
    compensator = ColdJunctionCompensator(hook)
    for tc_type in ThermocoupleType:
        compensator.get_temperature(25.0, 0.0, tc_type)
    assert hook.calls == []


def test_default_hook_logs(caplog):
    with caplog.at_level("ERROR", logger="ThermoCalc"):
        result = get_temperature(25.0, 1.0, 42)
    assert math.isnan(result)
    assert "Unknown thermocouple type 42" in caplog.text
    assert "A-1" in caplog.text


def test_log_unknown_type_returns_none(caplog):
    assert log_unknown_type("Q") is None


def test_missing_hook_falls_back_to_logging(caplog):
    compensator = ColdJunctionCompensator(error_hook=None)
    assert compensator.error_hook is log_unknown_type
    with caplog.at_level("ERROR", logger="ThermoCalc"):
        assert compensator.thermocouple("Q") is None
    assert compensator.thermocouple("K").type is ThermocoupleType.K
    assert "Unknown thermocouple type 'Q'" in caplog.text


def test_raising_hook_propagates():
    compensator = ColdJunctionCompensator(raise_unknown_type)
    with pytest.raises(UnknownThermocoupleTypeError) as excinfo:
        compensator.get_temperature(25.0, 1.0, 99)
    assert excinfo.value.value == 99


def test_hook_return_value_is_ignored():
    compensator = ColdJunctionCompensator(lambda tc_type: 123.0)
    assert math.isnan(compensator.get_temperature(25.0, 1.0, 99))


# ---- Policy and reverse direction -----------------------------------------------


def test_policy_applies_to_both_conversions():
    compensator = ColdJunctionCompensator(policy=RangePolicy.REJECT)
    with pytest.raises(OutOfRangeError):
        compensator.get_temperature(25.0, 60.0, "K")
    with pytest.raises(OutOfRangeError):
        compensator.get_temperature(-300.0, 0.0, "K")


def test_clamp_policy_saturates():
    compensator = ColdJunctionCompensator(policy="clamp")
    assert compensator.get_temperature(25.0, 60.0, "K") == pytest.approx(1372.0, abs=0.1)


def test_get_emf_is_inverse_of_get_temperature():
    compensator = ColdJunctionCompensator()
    measured = compensator.get_emf(25.0, 400.0, "E")
    assert isinstance(measured, float)
    assert compensator.get_temperature(25.0, measured, "E") == pytest.approx(400.0, abs=0.05)


def test_get_emf_zero_when_junctions_match():
    assert ColdJunctionCompensator().get_emf(30.0, 30.0, "N") == pytest.approx(0.0)


def test_get_emf_unknown_type():
    hook = RecordingHook()
    assert math.isnan(ColdJunctionCompensator(hook).get_emf(0.0, 100.0, "Z"))
    assert hook.calls == ["Z"]


# ---- Concurrency -------------------------------------------------------------------


def test_shared_compensator_across_threads():
    compensator = ColdJunctionCompensator()
    expected = compensator.get_temperature(21.0, 10.0, "K")
    results = []
    lock = threading.Lock()

    def worker():
        for _ in range(200):
            value = compensator.get_temperature(21.0, 10.0, "K")
            with lock:
                results.append(value)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(results) == 1600
    assert all(value == expected for value in results)
