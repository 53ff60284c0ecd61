"""Tests for ReportGenerator file output."""

from datetime import datetime

import pytest

from srms.core.errors import RecordNotFoundError
from srms.core.subjects import SubjectConfiguration
from srms.services.report_generator import ReportGenerator


@pytest.fixture
def generator(seeded_store, tmp_path):
    return ReportGenerator(
        seeded_store,
        SubjectConfiguration(("Math", "Physics", "Chemistry")),
        tmp_path / "reports",
        clock=lambda: datetime(2026, 1, 2, 3, 4, 5),
    )


def test_generate_writes_named_report(generator, tmp_path):
    path = generator.generate(3)
    assert path == tmp_path / "reports" / "report_roll_3.txt"
    text = path.read_text()
    assert "Roll Number: 3" in text
    assert "Name: Carol White" in text
    assert "Chemistry    : 93.00" in text
    assert "Grade       : A" in text
    assert text.rstrip().endswith("Fri Jan  2 03:04:05 2026")


def test_generate_overwrites_previous_report(generator):
    path = generator.report_path(1)
    path.parent.mkdir(parents=True)
    path.write_text("stale report " * 100)
    generator.generate(1)
    assert "stale" not in path.read_text()


def test_generate_missing_roll_writes_nothing(generator, tmp_path):
    with pytest.raises(RecordNotFoundError):
        generator.generate(99)
    assert not (tmp_path / "reports" / "report_roll_99.txt").exists()
