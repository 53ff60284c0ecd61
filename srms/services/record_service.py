"""Record Service: validates requests against the subject configuration and drives the store.

Invariants:
    - New records carry exactly subjects.count marks
    - Mark changes are positional over the current subject list; None keeps the old value
    - Validation happens before the store is touched, never mid-rewrite
    - Listing/search/analytics work on a fresh load_all() snapshot that is never written back
"""

import logging
from dataclasses import dataclass
from typing import Sequence

from srms.core.analytics import ClassAnalytics, compute_class_analytics
from srms.core.domain_types import SortKey
from srms.core.errors import InvalidInputError
from srms.core.ordering import RankedRecord, paginate, rank_records, sort_records
from srms.core.record import Record, merge_marks
from srms.core.repository_protocols import RecordRepository
from srms.core.search import parse_grade, search_by_grade, search_by_name
from srms.core.subjects import SubjectConfiguration

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RecordPage:
    records: list[Record]
    page: int
    pages: int
    total: int


class RecordService:

    def __init__(self, store: RecordRepository, subjects: SubjectConfiguration):
        self._store = store
        self._subjects = subjects

    @property
    def subjects(self) -> SubjectConfiguration:
        return self._subjects

    # ─── Mutations ──────────────────────────────────────────────────

    def add_student(self, roll_number: int, name: str, marks: Sequence[float]) -> Record:
        self._check_mark_count(marks)
        record = Record.create(roll_number, name, marks)
        self._store.append(record)
        return record

    def update_student(
        self,
        roll_number: int,
        name: str | None = None,
        marks: Sequence[float | None] | None = None,
    ) -> Record:
        if marks is not None:
            self._check_mark_count(marks)

        def mutate(record: Record) -> Record:
            new_marks = merge_marks(record.marks, marks) if marks is not None else None
            return record.with_changes(name=name, marks=new_marks)

        return self._store.update(roll_number, mutate)

    def delete_student(self, roll_number: int) -> Record:
        return self._store.delete(roll_number)

    # ─── Queries ────────────────────────────────────────────────────

    def get_student(self, roll_number: int) -> Record:
        return self._store.find(roll_number)

    def list_students(self, sort: SortKey, page: int, page_size: int) -> RecordPage:
        """One page (1-based) of the sorted store. An empty store has zero pages."""
        ordered = sort_records(self._store.load_all(), sort)
        pages = paginate(ordered, page_size)
        if not pages:
            return RecordPage(records=[], page=0, pages=0, total=0)
        if not 1 <= page <= len(pages):
            raise InvalidInputError(
                f"page {page} out of range 1-{len(pages)}", "page",
            )
        return RecordPage(
            records=pages[page - 1], page=page, pages=len(pages), total=len(ordered),
        )

    def search(self, name: str | None = None, grade: str | None = None) -> list[Record]:
        if name is None and grade is None:
            raise InvalidInputError("give a name or a grade to search for", "query")
        matches = self._store.load_all()
        if name is not None:
            matches = search_by_name(matches, name)
        if grade is not None:
            matches = search_by_grade(matches, parse_grade(grade))
        return matches

    def ranking(self) -> list[RankedRecord]:
        return rank_records(self._store.load_all())

    def analytics(self) -> ClassAnalytics:
        return compute_class_analytics(self._store.load_all(), self._subjects)

    def _check_mark_count(self, marks: Sequence) -> None:
        if len(marks) != self._subjects.count:
            raise InvalidInputError(
                f"expected {self._subjects.count} marks "
                f"({', '.join(self._subjects.names)}), got {len(marks)}",
                "marks",
            )
