"""Record search over a snapshot. Pure, no IO."""

from typing import Sequence

from srms.core.domain_types import Grade
from srms.core.errors import InvalidInputError
from srms.core.record import Record


def parse_grade(letter: str) -> Grade:
    """Accept a grade letter in either case."""
    try:
        return Grade(letter.strip().upper())
    except ValueError:
        raise InvalidInputError(
            f"grade must be one of A/B/C/D/F, got {letter!r}", "grade",
        )


def search_by_name(snapshot: Sequence[Record], query: str) -> list[Record]:
    """Case-insensitive substring match on the name, in snapshot order."""
    needle = query.casefold()
    return [r for r in snapshot if needle in r.name.casefold()]


def search_by_grade(snapshot: Sequence[Record], grade: Grade | str) -> list[Record]:
    if not isinstance(grade, Grade):
        grade = parse_grade(grade)
    return [r for r in snapshot if r.grade is grade]
