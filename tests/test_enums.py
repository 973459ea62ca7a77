"""Tests for thermocalc.enums and thermocalc.logger_setup."""

from __future__ import annotations

import logging

import numpy as np
import pytest

from thermocalc.enums import RangePolicy, ThermocoupleType
from thermocalc.errors import UnknownThermocoupleTypeError
from thermocalc.logger_setup import setup_logger


class TestThermocoupleType:
    def test_stable_ordinals(self):
        assert [int(t) for t in ThermocoupleType] == list(range(13))
        assert [t.name for t in ThermocoupleType] == [
            "R", "S", "B", "J", "T", "E", "K", "N", "A1", "A2", "A3", "L", "M"
        ]
        assert ThermocoupleType.R == 0
        assert ThermocoupleType.K == 6
        assert ThermocoupleType.M == 12

    def test_labels(self):
        assert ThermocoupleType.K.label == "K"
        assert ThermocoupleType.A1.label == "A-1"
        assert ThermocoupleType.A3.label == "A-3"

    @pytest.mark.parametrize(
        "raw, expected",
        [
            (ThermocoupleType.N, ThermocoupleType.N),
            (7, ThermocoupleType.N),
            (np.uint8(7), ThermocoupleType.N),
            ("n", ThermocoupleType.N),
            (" A-2 ", ThermocoupleType.A2),
            ("a3", ThermocoupleType.A3),
        ],
    )
    def test_parse(self, raw, expected):
        assert ThermocoupleType.parse(raw) is expected

    @pytest.mark.parametrize("raw", [13, -1, "", "A", "W5", False, 1.0, None, b"K"])
    def test_parse_rejects(self, raw):
        with pytest.raises(UnknownThermocoupleTypeError) as excinfo:
            ThermocoupleType.parse(raw)
        assert excinfo.value.value is raw or excinfo.value.value == raw


def test_range_policy_values():
    assert RangePolicy("clamp") is RangePolicy.CLAMP
    assert [p.value for p in RangePolicy] == ["extrapolate", "clamp", "reject"]


def test_setup_logger_replaces_handlers(tmp_path):
    log_file = tmp_path / "thermocalc.log"
    logger = setup_logger(level=logging.INFO, log_file=str(log_file))
    logger = setup_logger(level=logging.INFO, log_file=str(log_file))

    assert len(logger.handlers) == 2
    logger.info("reference table written")
    for handler in logger.handlers:
        handler.flush()
    assert "ThermoCalc - INFO - reference table written" in log_file.read_text()

    for handler in logger.handlers:
        handler.close()


def test_setup_logger_console_only():
    logger = setup_logger(log_file=None)
    assert [type(h) for h in logger.handlers] == [logging.StreamHandler]
