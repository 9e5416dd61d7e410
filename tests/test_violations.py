import io
import sys

import pytest

from trafficrecords.violations import (
    Violation,
    ViolationLog,
    format_violation,
    load_violations,
    main,
    parse_violation_line,
)

HEADER = "VehicleNumber,Type,Location\n"


def _violation(number="XX 00 AA 0000", kind="Speeding", location="Ring Road"):
    return Violation(number, kind, location)


def test_parse_quoted_number_and_trims_location():
    assert parse_violation_line('"XX 00 AA 0000",Speeding,Ring Road  \t') == _violation()


def test_parse_keeps_commas_in_location():
    violation = parse_violation_line('"XX 00 AA 0000",Speeding,Ring Road, Sector 5')
    assert violation.location == "Ring Road, Sector 5"


def test_parse_number_may_hold_comma():
    violation = parse_violation_line('"XX,00AA0000",Parking,Market')
    assert violation.vehicle_number == "XX,00AA0000"
    assert violation.kind == "Parking"


def test_parse_all_whitespace_location_untouched():
    violation = parse_violation_line('"XX 00 AA 0000",Speeding,   ')
    assert violation.location == "   "


def test_parse_without_quotes_raises():
    with pytest.raises(ValueError):
        parse_violation_line("XX00AA0000,Speeding,Ring Road")


def test_load_violations_skips_header(tmp_path):
    path = tmp_path / "violations.csv"
    path.write_text(HEADER + '"XX 00 AA 0000",Speeding,Ring Road\n"YY 11 BB 1111",Parking,Market\n')
    violations = load_violations(path)
    assert violations == [_violation(), Violation("YY 11 BB 1111", "Parking", "Market")]


def test_load_violations_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_violations(tmp_path / "absent.csv")


def test_format_violation():
    assert format_violation(_violation()) == "XX 00 AA 0000 Speeding Ring Road"


def test_log_add_and_lines():
    log = ViolationLog()
    log.add(_violation())
    log.add(_violation(kind="Parking"))
    assert len(log) == 2
    assert list(log.lines()) == [format_violation(v) for v in log]


def test_log_edit_replaces_first_match_only():
    log = ViolationLog([_violation(), _violation()])
    replacement = _violation(location="Market")
    assert log.edit(_violation(), replacement) is True
    assert log.violations == [replacement, _violation()]


def test_log_edit_without_match_changes_nothing():
    log = ViolationLog([_violation()])
    assert log.edit(_violation(kind="Parking"), _violation(location="Market")) is False
    assert log.violations == [_violation()]


def test_log_delete_removes_all_matches():
    other = _violation(kind="Parking")
    log = ViolationLog([_violation(), other, _violation()])
    assert log.delete(_violation()) == 2
    assert log.violations == [other]


def test_log_delete_without_match_returns_zero():
    log = ViolationLog([_violation()])
    assert log.delete(_violation(location="Market")) == 0
    assert len(log) == 1


def test_main_add_and_display(tmp_path, monkeypatch, capsys):
    path = tmp_path / "violations.csv"
    path.write_text(HEADER)
    monkeypatch.setattr(sys, "stdin", io.StringIO("2\nYY11BB1111\nParking\nOld Market\n1\nx\n"))
    assert main([str(path)]) == 0
    out = capsys.readouterr().out
    assert format_violation(Violation("YY11BB1111", "Parking", "Old Market")) in out
    assert "Exiting question 2" in out


def test_main_edit_record(tmp_path, monkeypatch, capsys):
    path = tmp_path / "violations.csv"
    path.write_text(HEADER + '"XX00AA0000",Speeding,Ring Road\n')
    script = "4\nXX00AA0000\nSpeeding\nRing Road\nYY11BB1111\nParking\nMarket\n1\n0\n"
    monkeypatch.setattr(sys, "stdin", io.StringIO(script))
    main([str(path)])
    out = capsys.readouterr().out
    assert format_violation(Violation("YY11BB1111", "Parking", "Market")) in out
    assert format_violation(Violation("XX00AA0000", "Speeding", "Ring Road")) not in out


def test_main_missing_file_reports(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("9\n"))
    assert main([str(tmp_path / "absent.csv")]) == 0
    assert "Error while opening file" in capsys.readouterr().err