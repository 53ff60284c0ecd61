"""Derived Fields: total, percentage and grade computed from raw marks.

Invariants:
    - recalculate is PURE: same marks and subject count, same result
    - percentage = total / subject_count (float division)
    - GRADE_THRESHOLDS is the single source of truth for grade cutoffs
    - subject_count < 1 is a precondition violation, never a silent zero
"""

from dataclasses import dataclass
from typing import Sequence

from srms.core.domain_types import Grade
from srms.core.errors import InvalidInputError


GRADE_THRESHOLDS: tuple[tuple[float, Grade], ...] = (
    (90.0, Grade.A),
    (75.0, Grade.B),
    (60.0, Grade.C),
    (40.0, Grade.D),
)


@dataclass(frozen=True)
class DerivedFields:
    total: float
    percentage: float
    grade: Grade


def grade_for_percentage(percentage: float) -> Grade:
    """Map a percentage onto the A-F scale (lower bounds inclusive)."""
    for cutoff, grade in GRADE_THRESHOLDS:
        if percentage >= cutoff:
            return grade
    return Grade.F


def recalculate(marks: Sequence[float], subject_count: int) -> DerivedFields:
    """Recompute total, percentage and grade. Pure, no IO."""
    if subject_count < 1:
        raise InvalidInputError(
            f"subject count must be at least 1, got {subject_count}",
            "subject_count",
        )
    total = float(sum(marks[:subject_count]))
    percentage = total / subject_count
    return DerivedFields(total, percentage, grade_for_percentage(percentage))


def to_title_case(text: str) -> str:
    """Upper-case the first letter after whitespace, lower-case the rest.

    Unlike str.title(), apostrophes and hyphens do not start a new word:
    "o'neil" becomes "O'neil".
    """
    out = []
    cap_next = True
    for ch in text:
        if ch.isspace():
            cap_next = True
            out.append(ch)
        elif cap_next:
            out.append(ch.upper())
            cap_next = False
        else:
            out.append(ch.lower())
    return "".join(out)
