# tests/test_render.py

import pytest

import tricalendar
from tricalendar.core.errors import UnknownCalendarError
from tricalendar.render.numerals import to_bengali_number


def test_bengali_numerals():
    assert to_bengali_number(1431) == "১৪৩১"
    assert to_bengali_number(0) == "০"
    assert to_bengali_number("12-3") == "১২-৩"


def test_english_text_view():
    out = tricalendar.render_view("english", 2026, 10, today=(2026, 10, 19))
    lines = out.splitlines()
    assert lines[0].startswith("October 2026")
    assert lines[1].split() == ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]
    assert "19*" in out
    assert "(30)" in out  # September padding


def test_bengali_and_hijri_headers_use_bengali_script():
    out = tricalendar.render_view("bengali", 2024, 12, ref=(2024, 12, 17))
    assert out.splitlines()[0].startswith("পৌষ ১৪৩১")
    assert out.splitlines()[1].split()[0] == "রবি"

    out = tricalendar.render_view("hijri", 2025, 3, ref=(2025, 3, 1))
    assert out.splitlines()[0].startswith("রমজান ১৪৪৬ হিজরি")


def test_unified_text_summary():
    out = tricalendar.render_view("unified", 2024, 4, today=(2024, 4, 20))
    assert "বাংলা: চৈত্র - বৈশাখ (১৪৩১)" in out
    assert "হিজরি)" in out
    # three label rows per week: Gregorian, Bengali, Hijri
    grid_lines = out.splitlines()[3:3 + 18]
    assert len(grid_lines) == 18


def test_all_view_contains_three_calendars():
    out = tricalendar.render_view("all", 2026, 10)
    assert "October 2026" in out
    assert "হিজরি" in out
    assert out.count("\nSun ") == 1
    assert out.count("\nরবি ") == 2  # Bengali and Hijri views share the Bengali weekday header


def test_html_unified():
    out = tricalendar.render_view("unified", 2026, 10, today=(2026, 10, 19), fmt="html")
    assert out.count('class="day-cell today"') == 1
    assert 'class="day-cell other-month"' in out
    assert out.count('class="day-header"') == 7
    assert '<div class="date-bengali">' in out
    assert "বাংলা:" in out


def test_html_bengali_cells():
    out = tricalendar.render_view("bengali", 2026, 10, fmt="html")
    assert out.count("day-cell") == 42
    assert 'class="day-header bengali-text"' in out


def test_html_month_indicator():
    out = tricalendar.render_view("unified", 2025, 3, fmt="html")
    assert 'month-indicator arabic-month" title="রমজান"' in out


@pytest.mark.parametrize("kwargs", [
    {"view": "weekly"},
    {"view": "unified", "fmt": "pdf"},
])
def test_unknown_view_or_format(kwargs):
    view = kwargs.pop("view")
    with pytest.raises(UnknownCalendarError):
        tricalendar.render_view(view, 2026, 10, **kwargs)


def test_invalid_month():
    with pytest.raises(tricalendar.InvalidDateError):
        tricalendar.render_view("english", 2026, 13)
