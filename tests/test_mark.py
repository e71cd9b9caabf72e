# tests/test_mark.py

from unittest.mock import Mock

import pytest

import calchina
from calchina.core.errors import BackendUnavailableError, InvalidChineseDateError
from calchina.core.types import DiaryDate
from calchina.diary.mark import WindowMarker, mark_date_pattern

def test_specific_month_marks_both_readings(codec, absday):
    mark = Mock()
    mark_date_pattern(codec, 2, 1, 7840, "red", mark=mark)
    assert mark.call_count == 2

    seen = set()
    for call in mark.call_args_list:
        month, day, year, from_abs, to_abs, color = call.args
        assert (month, day, year, color) == (2, 1, 7840, "red")
        assert from_abs == codec.from_absolute
        seen.add(to_abs(DiaryDate(month, day, year)))
    assert seen == {absday(2023, 2, 20), absday(2023, 3, 22)}

def test_wildcard_month_marks_once(codec):
    mark = Mock()
    mark_date_pattern(codec, 0, 15, 7840, mark=mark)
    assert mark.call_count == 1
    assert mark.call_args.args[4] == codec.to_absolute

def test_window_marker_specific_date(codec, absday):
    marker = WindowMarker(absday(2023, 1, 1), absday(2023, 12, 31))
    mark_date_pattern(codec, 2, 1, 7840, "blue", mark=marker)
    assert marker.marks == {absday(2023, 2, 20): "blue", absday(2023, 3, 22): "blue"}

def test_window_marker_outside_window(codec, absday):
    marker = WindowMarker(absday(2023, 6, 1), absday(2023, 6, 30))
    mark_date_pattern(codec, 2, 1, 7840, mark=marker)
    assert marker.marks == {}

def test_window_marker_wildcard_month_covers_leap(codec, backend, absday):
    first, last = absday(2023, 1, 1), absday(2023, 12, 31)
    marker = WindowMarker(first, last)
    mark_date_pattern(codec, 0, 1, 7840, mark=marker)

    assert absday(2023, 2, 20) in marker.marks
    assert absday(2023, 3, 22) in marker.marks
    for a in marker.marks:
        assert codec.pack(a).day == 1
        assert codec.pack(a).year == 7840

    starts = [backend.to_absolute(calchina.ChineseDate(78, 40, m, 1)) for m in backend.months(78, 40)]
    assert len(marker.marks) == len([a for a in starts if first <= a <= last])

def test_window_marker_every_year(codec, absday):
    marker = WindowMarker(absday(2020, 1, 1), absday(2024, 12, 31))
    mark_date_pattern(codec, 1, 1, 0, mark=marker)
    assert absday(2024, 2, 10) in marker.marks
    assert absday(2023, 1, 22) in marker.marks
    assert all(codec.pack(a).month == 1 for a in marker.marks)

def test_window_marker_skips_invalid_dates(absday):
    marker = WindowMarker(absday(2023, 1, 1), absday(2023, 12, 31))
    to_abs = Mock(side_effect=InvalidChineseDateError("no such day"))
    marker(2, 30, 7840, Mock(), to_abs, None)
    assert marker.marks == {}
    to_abs.assert_called_once_with(DiaryDate(2, 30, 7840))

def test_window_marker_rejects_empty_window():
    with pytest.raises(ValueError):
        WindowMarker(10, 9)

def test_calendar_mark_pattern_needs_routine():
    cal = calchina.make_diary_calendar()
    with pytest.raises(BackendUnavailableError):
        cal.mark_pattern(1, 1, 7841)

def test_calendar_mark_pattern_per_call_routine(absday):
    cal = calchina.make_diary_calendar()
    marker = WindowMarker(absday(2024, 1, 1), absday(2024, 12, 31))
    cal.mark_pattern(1, 1, 7841, "green", mark=marker)
    assert marker.marks == {absday(2024, 2, 10): "green"}

def test_window_marker_wildcard_across_table_edge(codec, absday):
    # the window starts before lunar year 1900 (new year 1900-01-31)
    marker = WindowMarker(absday(1899, 12, 1), absday(1900, 12, 31))
    mark_date_pattern(codec, 0, 1, 0, "red", mark=marker)
    assert absday(1900, 1, 31) in marker.marks
    assert min(marker.marks) == absday(1900, 1, 31)
    assert all(codec.pack(a).day == 1 for a in marker.marks)

def test_cli_mark_across_table_edge(capsys):
    from calchina.cli import main
    assert main(["mark", "1", "1", "0", "--start", "1899-12-01", "--end", "1900-12-31"]) == 0
    assert capsys.readouterr().out.split()[0] == "1900-01-31"
