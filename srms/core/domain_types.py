"""Domain Types: rich types and limits shared across the codebase.

Invariants:
    - RollNumber fits a signed 32-bit integer (it is stored as int32 on disk)
    - A record holds between 1 and MAX_SUBJECTS marks
    - All valid states encoded as Enums; no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

RollNumber = NewType("RollNumber", int)


# ─── Limits ──────────────────────────────────────────────────────

MAX_SUBJECTS: int = 10
MAX_NAME_LEN: int = 100          # bytes reserved for the name on disk
MAX_NAME_BYTES: int = MAX_NAME_LEN - 1
MAX_SUBJECT_NAME_LEN: int = 49
ROLL_MIN: int = -(2 ** 31)
ROLL_MAX: int = 2 ** 31 - 1
DEFAULT_NAME: str = "Unnamed Student"


# ─── Enums ───────────────────────────────────────────────────────

class Grade(str, Enum):
    """Letter grade derived from percentage. Order is best to worst."""
    A = "A"
    B = "B"
    C = "C"
    D = "D"
    F = "F"


class SortKey(str, Enum):
    """Orderings offered when listing the store."""
    ROLL = "roll"
    NAME = "name"
    PERCENTAGE = "percentage"
    NONE = "none"
