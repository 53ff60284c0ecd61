"""Student Record: immutable value object whose derived fields always match its marks.

Invariants:
    - total / percentage / grade are only ever produced by grading.recalculate
    - len(marks) is the subject count in effect when the record was written (1..MAX_SUBJECTS)
    - name is title-cased, never blank, and fits MAX_NAME_BYTES of UTF-8
    - roll_number fits int32
    - every mark and the total are finite

Design Decisions:
    - frozen dataclass: mutation goes through with_changes(), which recomputes
    - marks stored as a tuple sized to the record's own subject count
"""

import math
from dataclasses import dataclass, replace
from typing import Sequence

from srms.core.domain_types import (
    DEFAULT_NAME, MAX_NAME_BYTES, MAX_SUBJECTS, ROLL_MAX, ROLL_MIN, Grade,
)
from srms.core.errors import InvalidInputError
from srms.core.grading import recalculate, to_title_case


def truncate_utf8(text: str, max_bytes: int) -> str:
    """Cut text to at most max_bytes of UTF-8 without splitting a character."""
    raw = text.encode("utf-8")
    if len(raw) <= max_bytes:
        return text
    return raw[:max_bytes].decode("utf-8", errors="ignore")


def normalize_name(name: str) -> str:
    name = name.strip()
    if not name:
        name = DEFAULT_NAME
    return truncate_utf8(to_title_case(name), MAX_NAME_BYTES)


def validate_roll_number(roll_number: int) -> int:
    if not ROLL_MIN <= roll_number <= ROLL_MAX:
        raise InvalidInputError(
            f"roll number {roll_number} is outside the 32-bit range",
            "roll_number",
        )
    return roll_number


def validate_marks(marks: Sequence[float]) -> tuple[float, ...]:
    if not 1 <= len(marks) <= MAX_SUBJECTS:
        raise InvalidInputError(
            f"a record holds 1-{MAX_SUBJECTS} marks, got {len(marks)}",
            "marks",
        )
    values = tuple(float(m) for m in marks)
    if not all(math.isfinite(m) for m in values) or not math.isfinite(sum(values)):
        raise InvalidInputError("marks must be finite numbers with a finite total", "marks")
    return values


def merge_marks(
    current: Sequence[float], changes: Sequence[float | None],
) -> tuple[float, ...]:
    """Overlay positional changes on current marks; None keeps the old value.

    The result has len(changes) slots. A kept slot the current marks do not
    have (the subject list grew since the last write) becomes 0.0.
    """
    merged = []
    for i, change in enumerate(changes):
        if change is not None:
            merged.append(float(change))
        elif i < len(current):
            merged.append(current[i])
        else:
            merged.append(0.0)
    return validate_marks(merged)


@dataclass(frozen=True)
class Record:
    """One student's result row."""

    roll_number: int
    name: str
    marks: tuple[float, ...]
    total: float
    percentage: float
    grade: Grade

    @property
    def subject_count(self) -> int:
        return len(self.marks)

    @classmethod
    def create(cls, roll_number: int, name: str, marks: Sequence[float]) -> "Record":
        """Build a record from raw input, normalizing the name and deriving totals."""
        roll_number = validate_roll_number(roll_number)
        marks = validate_marks(marks)
        derived = recalculate(marks, len(marks))
        return cls(
            roll_number=roll_number,
            name=normalize_name(name),
            marks=marks,
            total=derived.total,
            percentage=derived.percentage,
            grade=derived.grade,
        )

    def with_changes(
        self, name: str | None = None, marks: Sequence[float] | None = None,
    ) -> "Record":
        """Return a copy with a new name and/or marks, derived fields recomputed."""
        new_name = normalize_name(name) if name is not None and name.strip() else self.name
        new_marks = validate_marks(marks) if marks is not None else self.marks
        return replace(self, name=new_name, marks=new_marks).recompute()

    def recompute(self) -> "Record":
        """Re-derive total, percentage and grade from the record's own marks."""
        derived = recalculate(self.marks, self.subject_count)
        return replace(
            self,
            total=derived.total,
            percentage=derived.percentage,
            grade=derived.grade,
        )
