#!/usr/bin/env python3
"""
Command‑line front end.

  thermocalc temperature K 25 1.234      hot junction °C from CJ °C + measured mV
  thermocalc emf K 100 --cold 25         measured mV for a hot/cold junction pair
  thermocalc table K --step 50 -o k.csv  reference table, printed or written to CSV
"""
from __future__ import annotations

import argparse
import logging
import sys

from thermocalc.compensation import ColdJunctionCompensator, raise_unknown_type
from thermocalc.constants import DEFAULT_RANGE_POLICY, DEFAULT_TABLE_STEP, RANGE_POLICIES
from thermocalc.enums import ThermocoupleType
from thermocalc.errors import ThermocoupleError
from thermocalc.logger_setup import setup_logger
from thermocalc.recorder import write_reference_table
from thermocalc.thermocouple import get_thermocouple


def _tc_type(raw: str) -> ThermocoupleType:
    try:
        return ThermocoupleType.parse(raw)
    except ThermocoupleError:
        raise argparse.ArgumentTypeError(
            f"unknown type {raw!r}; choose from "
            f"{', '.join(t.label for t in ThermocoupleType)}"
        ) from None


###############################################################################
# CLI glue
###############################################################################

def _cli(argv=None):
    p = argparse.ArgumentParser(
        prog="thermocalc",
        description="Thermocouple temperature/EMF conversion (GOST R 8.585-2001).",
    )
    p.add_argument("--policy", choices=RANGE_POLICIES, default=DEFAULT_RANGE_POLICY,
                   help="out-of-range handling (default: %(default)s)")
    p.add_argument("--verbose", action="store_true")
    sub = p.add_subparsers(dest="command", required=True)

    t = sub.add_parser("temperature", help="hot-junction temperature from a measured EMF")
    t.add_argument("type", type=_tc_type)
    t.add_argument("cold_junction", type=float, help="reference junction temperature, °C")
    t.add_argument("emf", type=float, help="measured EMF, mV")

    e = sub.add_parser("emf", help="EMF produced for a hot-junction temperature")
    e.add_argument("type", type=_tc_type)
    e.add_argument("temperature", type=float, help="hot junction temperature, °C")
    e.add_argument("--cold", type=float, default=0.0,
                   help="reference junction temperature, °C (default: %(default)s)")

    tb = sub.add_parser("table", help="temperature/EMF reference table")
    tb.add_argument("type", type=_tc_type)
    tb.add_argument("--start", type=float)
    tb.add_argument("--stop", type=float)
    tb.add_argument("--step", type=float, default=DEFAULT_TABLE_STEP)
    tb.add_argument("-o", "--output", help="write CSV here instead of printing")
    return p.parse_args(argv)


def main(argv=None) -> int:
    args = _cli(argv)
    setup_logger(level=logging.DEBUG if args.verbose else logging.WARNING)
    compensator = ColdJunctionCompensator(raise_unknown_type, policy=args.policy)

    try:
        if args.command == "temperature":
            result = compensator.get_temperature(args.cold_junction, args.emf, args.type)
            print(f"{result:.2f} °C")
        elif args.command == "emf":
            result = compensator.get_emf(args.cold, args.temperature, args.type)
            print(f"{result:.3f} mV")
        else:
            thermocouple = get_thermocouple(args.type, args.policy)
            if args.output:
                rows = write_reference_table(
                    args.output, thermocouple, args.start, args.stop, args.step
                )
                print(f"Wrote {rows} rows to {args.output}")
            else:
                temperatures, emfs = thermocouple.reference_table(
                    args.start, args.stop, args.step
                )
                print(f"{'°C':>8s} {'mV':>9s}")
                for temperature, emf in zip(temperatures, emfs):
                    print(f"{temperature:8g} {emf:9.3f}")
    except (ThermocoupleError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
