"""Subject Configuration: ordered subject names applied to records at write time.

Invariants:
    - 1 <= count <= MAX_SUBJECTS
    - Names are title-cased; blank names become "Subject<n>"
    - Immutable: reconfiguration builds a new value, collaborators are rebuilt with it
"""

from dataclasses import dataclass
from typing import Sequence

from srms.core.domain_types import MAX_SUBJECT_NAME_LEN, MAX_SUBJECTS
from srms.core.errors import InvalidInputError
from srms.core.grading import to_title_case


DEFAULT_SUBJECTS: tuple[str, ...] = ("Math", "Physics", "Chemistry")


def placeholder_name(index: int) -> str:
    """Name used for position `index` (0-based) when none is configured."""
    return f"Subject{index + 1}"


@dataclass(frozen=True)
class SubjectConfiguration:
    names: tuple[str, ...] = DEFAULT_SUBJECTS

    def __post_init__(self):
        if not 1 <= len(self.names) <= MAX_SUBJECTS:
            raise InvalidInputError(
                f"subject count must be 1-{MAX_SUBJECTS}, got {len(self.names)}",
                "subjects",
            )

    @classmethod
    def from_names(cls, names: Sequence[str]) -> "SubjectConfiguration":
        """Normalize user-supplied names into a configuration."""
        cleaned = []
        for i, raw in enumerate(names):
            name = raw.strip()[:MAX_SUBJECT_NAME_LEN]
            cleaned.append(to_title_case(name) if name else placeholder_name(i))
        return cls(tuple(cleaned))

    @property
    def count(self) -> int:
        return len(self.names)

    def label(self, index: int) -> str:
        if index < len(self.names):
            return self.names[index]
        return placeholder_name(index)
