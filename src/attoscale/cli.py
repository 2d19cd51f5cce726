from __future__ import annotations

import argparse
import importlib
import inspect
import logging
import sys

from attoscale.core.errors import AttoscaleError

logger = logging.getLogger("attoscale")

LOG_FORMAT = "%(asctime)s - %(module)s - %(levelname)s - %(message)s"


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def _precision(p: argparse.ArgumentParser) -> None:
    p.add_argument("--precision", type=int, default=None, help="Fractional second digits (default: exact)")


def cmd_convert(argv: list[str]) -> int:
    from attoscale import api

    p = argparse.ArgumentParser(prog="attoscale convert", description="Convert an instant to another time scale.")
    p.add_argument("instant", help='e.g. "2004-05-14T16:43:32 TAI"')
    p.add_argument("--to", dest="target", action="append", required=True, help="target scale (repeatable)")
    _precision(p)
    args = p.parse_args(argv)

    t = api.parse(args.instant)
    print(t.to_string(args.precision))
    for target in args.target:
        print(api.convert(t, target.upper()).to_string(args.precision))
    return 0


def cmd_duration(argv: list[str]) -> int:
    from attoscale import api
    from attoscale.core.units import unit_from_name

    p = argparse.ArgumentParser(prog="attoscale duration", description="Parse and normalize an ISO-8601 duration.")
    p.add_argument("duration", help='e.g. "P1DT2H3.5S"')
    p.add_argument("--unit", action="append", default=[], help="also print the value in this unit (repeatable)")
    _precision(p)
    args = p.parse_args(argv)

    d = api.duration(args.duration)
    print(d.to_iso(args.precision))
    print(f"  attoseconds = {d.count}")
    for name in args.unit:
        unit = unit_from_name(name)
        print(f"  {unit.name:<11} = {d.as_float(unit)!r}")
    return 0


def cmd_leap_seconds(argv: list[str]) -> int:
    from attoscale import api
    from attoscale.calendar.date import Date
    from attoscale.scales.leap_seconds import LEAP_SECOND_DAYS

    p = argparse.ArgumentParser(prog="attoscale leap-seconds", description="Leap second table or one-day lookup.")
    p.add_argument("date", nargs="?", help="YYYY-MM-DD (omit to list the table)")
    args = p.parse_args(argv)

    if args.date:
        info = api.leap_seconds_on(args.date)
        flag = "yes" if info["leap_second_day"] else "no"
        print(f"{info['date']}: leap second at end of day: {flag}; TAI - UTC = {info['tai_minus_utc']} s")
        return 0

    print(f"{'leap second day':<16} {'TAI - UTC after':>16}")
    print("-" * 33)
    for day, before in LEAP_SECOND_DAYS:
        print(f"{str(Date.from_day_count(day)):<16} {before + 1:>14} s")
    return 0


def cmd_mjd(argv: list[str]) -> int:
    from attoscale import api
    from attoscale.calendar.civil import GregorianDate, HistoricDate, JulianDate
    from attoscale.calendar.mjd import ModifiedJulianDate

    p = argparse.ArgumentParser(prog="attoscale mjd", description="Historic date <-> Modified Julian Date.")
    g = p.add_mutually_exclusive_group(required=True)
    g.add_argument("--date", help="YYYY-MM-DD (historic calendar)")
    g.add_argument("--mjd", type=int, help="MJD day number")
    args = p.parse_args(argv)

    if args.date:
        date = api.parse_ymd(args.date).into_date()
        mjd = ModifiedJulianDate.from_date(date)
    else:
        mjd = ModifiedJulianDate(args.mjd)
        date = mjd.into_date()

    print(f"MJD        = {mjd.day_number}")
    print(f"Historic   = {HistoricDate.from_date(date)}")
    print(f"Gregorian  = {GregorianDate.from_date(date)}")
    print(f"Julian     = {JulianDate.from_date(date)}")
    print(f"Week day   = {date.week_day().name.title()}")
    return 0


def cmd_scales(argv: list[str]) -> int:
    from attoscale import api

    p = argparse.ArgumentParser(prog="attoscale scales", description="List the supported time scales.")
    p.parse_args(argv)

    print(f"{'abbr':<9} {'epoch':<11} {'TAI offset':<14} {'uniform':<8} name")
    print("-" * 80)
    for abbr in api.list_scales():
        info = api.scale_info(abbr)
        offset = info["tai_offset"] or "-"
        print(f"{abbr:<9} {info['epoch']:<11} {offset:<14} {str(info['uniform']):<8} {info['name']}")
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    p = argparse.ArgumentParser(prog="attoscale", description="Attosecond time scale toolkit CLI.")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("convert", help="Convert an instant between time scales")
    sub.add_parser("duration", help="Parse an ISO-8601 duration")
    sub.add_parser("leap-seconds", help="Show the leap second table")
    sub.add_parser("mjd", help="Modified Julian Date conversions")
    sub.add_parser("scales", help="List time scales")

    # design tools
    sub.add_parser("rate-params", help="Derive the relativistic rate constants as exact rationals.")

    # diagnostics
    p_diag = sub.add_parser("diag", help="Diagnostics tools (numpy required)")
    p_diag.add_argument("tool", choices=["round-trip"], help="Which diagnostic to run")

    args, rest = p.parse_known_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING, format=LOG_FORMAT)

    commands = {
        "convert": cmd_convert,
        "duration": cmd_duration,
        "leap-seconds": cmd_leap_seconds,
        "mjd": cmd_mjd,
        "scales": cmd_scales,
    }
    try:
        if args.cmd in commands:
            return commands[args.cmd](rest)
        if args.cmd == "rate-params":
            return _run_module_main("attoscale.design.rate_params", rest)
        if args.cmd == "diag":
            tool_map = {
                "round-trip": "attoscale.diagnostics.round_trip",
            }
            return _run_module_main(tool_map[args.tool], rest)
    except (AttoscaleError, KeyError, ValueError) as err:
        logger.debug("%s failed", args.cmd, exc_info=True)
        print(f"error: {err}", file=sys.stderr)
        return 2

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
