"""Tests for the report card text layout."""

from datetime import datetime

from srms.core.record import Record
from srms.core.report_format import REPORT_HEADER, render_report, report_filename
from srms.core.subjects import SubjectConfiguration


GENERATED_AT = datetime(2026, 3, 14, 9, 26, 53)


def test_report_filename_derives_from_roll():
    assert report_filename(42) == "report_roll_42.txt"


def test_render_report_layout():
    record = Record.create(10, "ann lee", [90, 80, 70])
    text = render_report(record, SubjectConfiguration(("Math", "Physics", "Chemistry")), GENERATED_AT)
    assert text.splitlines() == [
        REPORT_HEADER,
        "Roll Number: 10",
        "Name: Ann Lee",
        "Math         : 90.00",
        "Physics      : 80.00",
        "Chemistry    : 70.00",
        "Total       : 240.00",
        "Percentage  : 80.00",
        "Grade       : B",
        "Generated on: Sat Mar 14 09:26:53 2026",
    ]
    assert text.endswith("\n")


def test_render_report_labels_extra_marks_by_position():
    record = Record.create(1, "x", [10, 20, 30])
    text = render_report(record, SubjectConfiguration(("Math",)), GENERATED_AT)
    assert "Subject2     : 20.00" in text
    assert "Subject3     : 30.00" in text


def test_render_report_only_lists_record_marks():
    record = Record.create(1, "x", [55])
    text = render_report(record, SubjectConfiguration(("Math", "Physics")), GENERATED_AT)
    assert "Physics" not in text
