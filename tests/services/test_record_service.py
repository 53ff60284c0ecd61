"""Record Service: tests for validation against the subject list and store orchestration.

Tests cover:
    - add_student enforces mark count == subject count before writing
    - update_student keeps unspecified marks and resizes to the current subject list
    - list_students pages (1-based) and the empty-store case
    - search / ranking / analytics read fresh snapshots
"""

import pytest

from srms.core.domain_types import Grade, SortKey
from srms.core.errors import (
    DuplicateKeyError, InvalidInputError, RecordNotFoundError,
)
from srms.core.subjects import SubjectConfiguration
from srms.services.record_service import RecordService


THREE = SubjectConfiguration(("Math", "Physics", "Chemistry"))


@pytest.fixture
def service(store):
    return RecordService(store, THREE)


# ─── add_student ────────────────────────────────────────────────

def test_add_student_scenario(service, store):
    record = service.add_student(10, "ann lee", [90, 80, 70])
    assert record.name == "Ann Lee"
    assert store.load_all() == [record]
    assert (record.total, record.percentage, record.grade) == (240.0, 80.0, Grade.B)


def test_add_student_wrong_mark_count_writes_nothing(service, store):
    with pytest.raises(InvalidInputError) as exc:
        service.add_student(1, "x", [90, 80])
    assert exc.value.field == "marks"
    assert not store.data_path.exists()


def test_add_student_duplicate(service):
    service.add_student(1, "x", [1, 2, 3])
    with pytest.raises(DuplicateKeyError):
        service.add_student(1, "y", [4, 5, 6])


# ─── update_student ─────────────────────────────────────────────

def test_update_keeps_unspecified_marks(service):
    service.add_student(1, "x", [10, 20, 30])
    updated = service.update_student(1, marks=[None, 50, None])
    assert updated.marks == (10.0, 50.0, 30.0)
    assert updated.total == 90.0


def test_update_name_only_keeps_marks(service):
    service.add_student(1, "x", [10, 20, 30])
    updated = service.update_student(1, name="new name")
    assert updated.name == "New Name"
    assert updated.marks == (10.0, 20.0, 30.0)


def test_update_rejects_wrong_mark_count_before_touching_store(service, store):
    service.add_student(1, "x", [10, 20, 30])
    before = store.data_path.read_bytes()
    with pytest.raises(InvalidInputError):
        service.update_student(1, marks=[1])
    assert store.data_path.read_bytes() == before


def test_update_after_subject_list_grew(store):
    RecordService(store, SubjectConfiguration(("Math",))).add_student(1, "x", [80])
    grown = RecordService(store, THREE)
    updated = grown.update_student(1, marks=[None, 70, 60])
    assert updated.marks == (80.0, 70.0, 60.0)
    assert updated.percentage == 70.0


def test_update_missing_roll(service):
    service.add_student(1, "x", [1, 2, 3])
    with pytest.raises(RecordNotFoundError):
        service.update_student(2, name="y")


# ─── list_students ──────────────────────────────────────────────

def test_list_students_empty_store_has_zero_pages(service):
    page = service.list_students(SortKey.ROLL, 1, 5)
    assert (page.records, page.page, page.pages, page.total) == ([], 0, 0, 0)


def test_list_students_sorted_pages(service):
    for roll in (7, 3, 9, 1, 5, 2):
        service.add_student(roll, f"s{roll}", [50, 50, 50])
    first = service.list_students(SortKey.ROLL, 1, 4)
    second = service.list_students(SortKey.ROLL, 2, 4)
    assert [r.roll_number for r in first.records] == [1, 2, 3, 5]
    assert [r.roll_number for r in second.records] == [7, 9]
    assert (second.page, second.pages, second.total) == (2, 2, 6)


def test_list_students_page_out_of_range(service):
    service.add_student(1, "x", [1, 2, 3])
    with pytest.raises(InvalidInputError) as exc:
        service.list_students(SortKey.NONE, 2, 5)
    assert exc.value.field == "page"


# ─── search / ranking / analytics ───────────────────────────────

def test_search_combines_filters(service):
    service.add_student(1, "ann lee", [95, 95, 95])
    service.add_student(2, "ann marie", [50, 50, 50])
    service.add_student(3, "bob", [95, 95, 95])
    assert [r.roll_number for r in service.search(name="ann")] == [1, 2]
    assert [r.roll_number for r in service.search(grade="a")] == [1, 3]
    assert [r.roll_number for r in service.search(name="ann", grade="A")] == [1]


def test_search_requires_a_filter(service):
    with pytest.raises(InvalidInputError):
        service.search()


def test_ranking_and_analytics(service):
    service.add_student(1, "a", [60, 60, 60])
    service.add_student(2, "b", [90, 90, 90])
    assert [r.record.roll_number for r in service.ranking()] == [2, 1]
    stats = service.analytics()
    assert stats.class_size == 2
    assert stats.class_average == 75.0
    assert stats.highest.roll_number == 2
