"""
Tests for the console entry point.
"""

import pytest

from busfinder import cli
from busfinder.config import settings
from busfinder.models import Route, SearchType
from tests.helpers import FakeClock, at, departures


def test_build_session_departure_target():
    session = cli.build_session(Route.OUTBOUND, SearchType.DEPARTURE, "22:50", clock=FakeClock(at(12, 0)))
    assert departures(session.search_results) == ["23:06", "23:38"]


def test_build_session_defaults_to_now():
    session = cli.build_session(Route.OUTBOUND, SearchType.DEPARTURE, clock=FakeClock(at(7, 5)))
    assert departures(session.search_results) == ["7:10", "7:20"]


def test_build_session_arrival_target():
    session = cli.build_session(Route.INBOUND, SearchType.ARRIVAL, "8:30", clock=FakeClock(at(6, 0)))
    assert departures(session.search_results) == ["8:18", "8:08"]
    assert session.search_criteria_description == "search: arrival target 08:30"


def test_main_cli_prints_view(capsys):
    assert cli.main_cli(["--route", "inbound", "--mode", "arrival", "--at", "8:30", "--log-level", "WARNING"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Route: Kaihin-Makuhari Sta. -> Columbus City")
    assert "Full timetable:" in out


def test_main_cli_writes_html(tmp_path, capsys):
    target = tmp_path / "view.html"
    assert cli.main_cli(["--html", str(target), "--no-timetable", "--log-level", "WARNING"]) == 0
    assert "<html" in target.read_text(encoding="utf-8")


def test_main_cli_rejects_bad_time():
    with pytest.raises(SystemExit):
        cli.main_cli(["--at", "8h30"])


def test_main_cli_invalid_timetable_file(tmp_path, monkeypatch):
    path = tmp_path / "timetable.json"
    path.write_text('{"outbound": [{"departure": "7:00"}]}', encoding="utf-8")
    monkeypatch.setattr(settings, "timetable_file", path)
    assert cli.main_cli(["--log-level", "CRITICAL"]) == 1


def test_main_cli_uses_timetable_file(tmp_path, monkeypatch, capsys):
    path = tmp_path / "timetable.json"
    path.write_text('{"outbound": [{"departure": "5:55", "arrival": "6:05"}]}', encoding="utf-8")
    monkeypatch.setattr(settings, "timetable_file", path)
    assert cli.main_cli(["--log-level", "WARNING"]) == 0
    assert "5:55 ->  6:05" in capsys.readouterr().out


def test_main_cli_timetable_file_not_utf8(tmp_path, monkeypatch):
    path = tmp_path / "timetable.json"
    path.write_bytes(b'{"outbound": [{"departure": "\xff7:00", "arrival": "7:08"}]}')
    monkeypatch.setattr(settings, "timetable_file", path)
    assert cli.main_cli(["--log-level", "CRITICAL"]) == 1


def test_main_cli_unwritable_html_path(tmp_path, capsys):
    target = tmp_path / "missing-dir" / "view.html"
    assert cli.main_cli(["--html", str(target), "--log-level", "CRITICAL"]) == 1
    assert not target.exists()
