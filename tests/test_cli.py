# tests/test_cli.py

import pytest

from attoscale import api
from attoscale.calendar.civil import HistoricDate
from attoscale.cli import main
from attoscale.scales.time_point import GpsTime, TaiTime


def test_convert(capsys):
    assert main(["convert", "2004-05-14T16:43:32 TAI", "--to", "GPST", "--to", "tt"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "2004-05-14T16:43:32 TAI",
        "2004-05-14T16:43:13 GPST",
        "2004-05-14T16:44:04.184 TT",
    ]


def test_convert_unknown_scale(capsys):
    assert main(["convert", "2004-05-14T16:43:32 TAI", "--to", "XYZ"]) == 2
    assert "error:" in capsys.readouterr().err


def test_convert_unsupported(capsys):
    assert main(["convert", "2006-01-15T21:25:42.684 TT", "--to", "TDB"]) == 2
    assert "no conversion rule from TT to TDB" in capsys.readouterr().err


def test_duration(capsys):
    assert main(["duration", "PT60M", "--unit", "s"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "PT1H"
    assert out[1].strip() == "attoseconds = 3600000000000000000"
    assert out[2].split("=")[1].strip() == "3600.0"

    assert main(["duration", "P1M1Y"]) == 2
    assert "out of order" in capsys.readouterr().err


def test_leap_seconds(capsys):
    assert main(["leap-seconds", "2016-12-31"]) == 0
    out = capsys.readouterr().out
    assert "2016-12-31" in out and "yes" in out and "36" in out

    assert main(["leap-seconds"]) == 0
    out = capsys.readouterr().out
    assert "2016-12-31" in out
    assert "1971-12-31" in out


def test_mjd(capsys):
    assert main(["mjd", "--date", "2000-01-01"]) == 0
    out = capsys.readouterr().out
    assert "MJD        = 51544" in out
    assert "Week day   = Saturday" in out

    assert main(["mjd", "--mjd", "-2400001"]) == 0
    out = capsys.readouterr().out
    assert "Historic   = -4712-01-01" in out

    assert main(["mjd", "--date", "2000/01/01"]) == 2


def test_scales(capsys):
    assert main(["scales"]) == 0
    out = capsys.readouterr().out
    for abbr in ("TAI", "UTC", "TT", "TCG", "TCB", "TDB", "GPST", "QZSST", "BDT", "GLONASST"):
        assert abbr in out


def test_rate_params(capsys):
    assert main(["rate-params", "--check"]) == 0
    assert "All rate constants match" in capsys.readouterr().out


def test_api_helpers():
    assert api.convert(api.parse("2004-05-14T16:43:32 TAI"), "GPST") == GpsTime.from_historic_datetime(
        2004, 5, 14, 16, 43, 13
    )
    assert api.time_point_type("TAI") is TaiTime
    assert api.get_scale("GPST").abbreviation == "GPST"
    assert api.scale_info("UTC")["uniform"] is False
    assert api.parse_ymd("-44-03-15") == HistoricDate(-44, 3, 15)
    assert api.leap_seconds_on("2017-01-01") == {
        "date": "2017-01-01",
        "leap_second_day": False,
        "tai_minus_utc": 37,
    }
    with pytest.raises(ValueError):
        api.parse_ymd("yesterday")
    with pytest.raises(KeyError):
        api.get_scale("LST")
