import pytest

from wallcal_cli import build_parser, main


@pytest.mark.parametrize("raw, shown", [
    ("8:00-9:00", "08:00"),
    ("13:00-14:00", "13:00"),
    ("All Day", "unparseable"),
])
def test_parse_time(capsys, raw, shown):
    main(["--no-seed", "parse-time", raw])
    assert capsys.readouterr().out.strip() == shown


def test_month_grid(capsys):
    main(["--no-seed", "month", "--year", "2025", "--month", "10", "--today", "2025-10-15"])
    lines = capsys.readouterr().out.rstrip("\n").splitlines()
    assert lines[0] == "OCTOBER 2025"
    assert lines[1].split() == ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]
    assert len(lines) == 2 + 5
    assert "[15]" in lines[4]
    assert lines[2].lstrip().startswith("1")


def test_month_marks_event_days(capsys):
    main(["month", "--year", "2025", "--month", "11", "--today", "2025-11-01", "--selected", "2025-11-03"])
    out = capsys.readouterr().out
    assert "NOVEMBER 2025" in out
    assert " 7 *3" in out
    assert "< 3>" in out


def test_month_needs_year_and_month():
    with pytest.raises(SystemExit):
        main(["--no-seed", "month", "--year", "2025"])


def test_add_without_title(capsys):
    main(["--no-seed", "add", "2025-11-07", ""])
    assert "Title is required" in capsys.readouterr().out


def test_add_defaults_to_all_day(capsys):
    main(["--no-seed", "add", "2025-11-07", "Holiday"])
    out = capsys.readouterr().out
    assert "Added: Holiday @ All Day on 2025-11-07" in out
    assert "FRIDAY  7 NOV 25" in out


def test_day_lists_seeded_events_in_order(capsys):
    main(["day", "2025-11-07"])
    out = capsys.readouterr().out
    positions = [out.index(t) for t in ("Lecture", "Math Deadline", "Futsal")]
    assert positions == sorted(positions)


def test_empty_day(capsys):
    main(["--no-seed", "day", "2025-11-08"])
    assert "(no events)" in capsys.readouterr().out


def test_bad_date_is_rejected():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["day", "07-11-2025"])
