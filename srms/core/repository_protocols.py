"""Boundary Protocols: contracts between core and shell.

Invariants:
    - Core NEVER imports from infrastructure/services/api; dependency arrows point inward
    - Record file IO is reached only through RecordRepository
    - Implementations are provided by the shell via constructor injection

Design Decisions:
    - Protocol over ABC: structural subtyping, tests can pass in-memory fakes
    - Synchronous: every operation runs to completion before the next begins
"""

from pathlib import Path
from typing import Callable, Protocol

from srms.core.record import Record


RecordMutator = Callable[[Record], Record]


class RecordRepository(Protocol):
    """Contract for record persistence. Implemented by infrastructure.record_store."""
    def exists(self, roll_number: int) -> bool: ...
    def find(self, roll_number: int) -> Record: ...
    def append(self, record: Record) -> None: ...
    def load_all(self) -> list[Record]: ...
    def update(self, roll_number: int, mutator: RecordMutator) -> Record: ...
    def delete(self, roll_number: int) -> Record: ...
    def backup(self) -> Path: ...
    def restore(self) -> Path: ...
