"""Ordering: sort, paginate and rank an in-memory snapshot of the store.

Invariants:
    - All functions are PURE: the input snapshot is never mutated or written back
    - Sorting is stable; percentage ties keep their original relative order
    - Zero records yield zero pages (not an error)
"""

from dataclasses import dataclass
from typing import Sequence

from srms.core.domain_types import SortKey
from srms.core.errors import InvalidInputError
from srms.core.record import Record


_SORT_KEYS = {
    SortKey.ROLL: lambda r: r.roll_number,
    SortKey.NAME: lambda r: r.name.casefold(),
    SortKey.PERCENTAGE: lambda r: -r.percentage,
}


@dataclass(frozen=True)
class RankedRecord:
    rank: int
    record: Record


def sort_records(snapshot: Sequence[Record], key: SortKey) -> list[Record]:
    """Return a new list ordered by `key`. SortKey.NONE keeps on-disk order."""
    if key is SortKey.NONE:
        return list(snapshot)
    return sorted(snapshot, key=_SORT_KEYS[key])


def page_count(total: int, page_size: int) -> int:
    _check_page_size(page_size)
    return (total + page_size - 1) // page_size


def paginate(records: Sequence[Record], page_size: int) -> list[list[Record]]:
    """Split into consecutive pages of at most `page_size` records."""
    _check_page_size(page_size)
    return [
        list(records[start:start + page_size])
        for start in range(0, len(records), page_size)
    ]


def rank_records(snapshot: Sequence[Record]) -> list[RankedRecord]:
    """Rank by percentage, best first. Rank 1 is the class topper."""
    ordered = sort_records(snapshot, SortKey.PERCENTAGE)
    return [RankedRecord(i + 1, r) for i, r in enumerate(ordered)]


def _check_page_size(page_size: int) -> None:
    if page_size < 1:
        raise InvalidInputError(
            f"page size must be at least 1, got {page_size}", "page_size",
        )
