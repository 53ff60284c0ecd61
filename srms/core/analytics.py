"""Class Analytics: class-wide and per-subject statistics from a snapshot.

Invariants:
    - Single pass over the snapshot, in scan order
    - Uses the stored percentage / grade / marks as-is; nothing is recomputed
    - Ties resolve to the first occurrence in scan order (strict comparisons)
    - Never raises on an empty snapshot: class_size 0, class_average None, no toppers
    - grade_distribution always holds every grade A-F, zero when absent

Design Decisions:
    - Pure function, not a store method: the store owns files, analytics owns statistics
"""

from dataclasses import dataclass, field
from typing import Sequence

from srms.core.domain_types import Grade
from srms.core.record import Record
from srms.core.subjects import SubjectConfiguration


@dataclass(frozen=True)
class SubjectTopper:
    subject: str
    record: Record
    mark: float


@dataclass
class ClassAnalytics:
    class_size: int = 0
    class_average: float | None = None
    highest: Record | None = None
    lowest: Record | None = None
    subject_toppers: list[SubjectTopper] = field(default_factory=list)
    grade_distribution: dict[Grade, int] = field(
        default_factory=lambda: {g: 0 for g in Grade},
    )


def compute_class_analytics(
    snapshot: Sequence[Record], subjects: SubjectConfiguration,
) -> ClassAnalytics:
    """Aggregate class statistics. Pure, no IO."""
    result = ClassAnalytics()
    percentage_sum = 0.0
    best_marks: list[float | None] = [None] * subjects.count
    best_holders: list[Record | None] = [None] * subjects.count

    for record in snapshot:
        result.class_size += 1
        percentage_sum += record.percentage
        if result.highest is None or record.percentage > result.highest.percentage:
            result.highest = record
        if result.lowest is None or record.percentage < result.lowest.percentage:
            result.lowest = record
        # records written under a smaller subject count have no mark for later slots
        for j, mark in enumerate(record.marks[:subjects.count]):
            if best_marks[j] is None or mark > best_marks[j]:
                best_marks[j] = mark
                best_holders[j] = record
        result.grade_distribution[record.grade] += 1

    if result.class_size:
        result.class_average = percentage_sum / result.class_size
    result.subject_toppers = [
        SubjectTopper(subjects.label(j), holder, best_marks[j])
        for j, holder in enumerate(best_holders)
        if holder is not None
    ]
    return result
