"""Record Store: sequential fixed-width record file with rewrite-via-temp-file mutation.

Invariants:
    - roll_number is unique; append checks exists() before any byte is written
    - update/delete never modify the store in place: every block is streamed into
      <data>.tmp, the temp file is fsynced, then os.replace() swaps it in
    - Blocks that are not targeted are copied byte-for-byte
    - A scan that matches nothing still completes the rewrite, then raises RecordNotFoundError
    - If anything fails before the swap, the temp file is removed and the store is untouched
    - Every OSError surfaces as StoreIOError; file handles never outlive a method call
    - A trailing partial block is ignored, never treated as corruption

Design Decisions:
    - Linear scan only: no index, no header, no checksum
    - The swap is not crash-atomic with respect to a crash between fsync and
      os.replace; recovery is re-running the rename by hand
"""

import logging
import os
import shutil
from pathlib import Path
from typing import Callable

from srms.core.errors import (
    DuplicateKeyError, ErrorContext, InvalidInputError, RecordNotFoundError,
    StoreIOError,
)
from srms.core.record import Record
from srms.core.record_codec import (
    decode_record, decode_roll_number, encode_record, iter_blocks,
)
from srms.core.repository_protocols import RecordMutator

logger = logging.getLogger(__name__)


class RecordStore:
    """File-backed RecordRepository."""

    def __init__(self, data_path: Path | str, backup_path: Path | str):
        self.data_path = Path(data_path)
        self.backup_path = Path(backup_path)
        self.temp_path = self.data_path.with_name(self.data_path.name + ".tmp")

    # ─── Reads ──────────────────────────────────────────────────────

    def exists(self, roll_number: int) -> bool:
        """Full linear scan; True on the first matching block."""
        try:
            if not self.data_path.exists():
                return False
            with self.data_path.open("rb") as fh:
                for _, block in iter_blocks(fh):
                    if decode_roll_number(block) == roll_number:
                        return True
        except OSError as e:
            raise self._io_error(e, "scan", roll_number)
        return False

    def find(self, roll_number: int) -> Record:
        """First record carrying roll_number."""
        try:
            if self.data_path.exists():
                with self.data_path.open("rb") as fh:
                    for offset, block in iter_blocks(fh):
                        if decode_roll_number(block) == roll_number:
                            return decode_record(block, offset)
        except OSError as e:
            raise self._io_error(e, "find", roll_number)
        raise RecordNotFoundError(roll_number)

    def load_all(self) -> list[Record]:
        """Every record in on-disk order. Absent or empty file gives []."""
        try:
            if not self.data_path.exists():
                return []
            with self.data_path.open("rb") as fh:
                return [decode_record(block, offset) for offset, block in iter_blocks(fh)]
        except OSError as e:
            raise self._io_error(e, "load")

    # ─── Writes ─────────────────────────────────────────────────────

    def append(self, record: Record) -> None:
        if self.exists(record.roll_number):
            logger.warning(
                f"Rejected duplicate roll {record.roll_number}",
                extra={"roll_number": record.roll_number, "operation": "append"},
            )
            raise DuplicateKeyError(record.roll_number)
        block = encode_record(record)
        try:
            self.data_path.parent.mkdir(parents=True, exist_ok=True)
            with self.data_path.open("ab") as fh:
                fh.write(block)
        except OSError as e:
            raise self._io_error(e, "append", record.roll_number)
        logger.info(
            f"Appended roll {record.roll_number}",
            extra={"roll_number": record.roll_number, "operation": "append"},
        )

    def update(self, roll_number: int, mutator: RecordMutator) -> Record:
        """Rewrite the store with the matching record replaced by mutator(record)."""

        def transform(record: Record) -> Record:
            changed = mutator(record)
            if changed.roll_number != roll_number:
                raise InvalidInputError(
                    "an update cannot change the roll number", "roll_number",
                )
            return changed.recompute()

        _, updated = self._rewrite(roll_number, "update", transform)
        return updated

    def delete(self, roll_number: int) -> Record:
        """Rewrite the store without the matching record; returns what was removed."""
        removed, _ = self._rewrite(roll_number, "delete", lambda record: None)
        return removed

    def _rewrite(
        self,
        roll_number: int,
        operation: str,
        transform: Callable[[Record], Record | None],
    ) -> tuple[Record, Record | None]:
        if not self.data_path.exists():
            raise RecordNotFoundError(roll_number)

        try:
            matched = self._stream_into_temp(roll_number, transform)
            os.replace(self.temp_path, self.data_path)
        except OSError as e:
            self._discard_temp()
            raise self._io_error(e, operation, roll_number)
        except BaseException:
            self._discard_temp()
            raise

        if matched is None:
            logger.info(
                f"Roll {roll_number} not found during {operation}; store rewritten unchanged",
                extra={"roll_number": roll_number, "operation": operation},
            )
            raise RecordNotFoundError(roll_number, ErrorContext(operation=operation))
        logger.info(
            f"Rewrote store for {operation} of roll {roll_number}",
            extra={"roll_number": roll_number, "operation": operation},
        )
        return matched

    def _stream_into_temp(
        self, roll_number: int, transform: Callable[[Record], Record | None],
    ) -> tuple[Record, Record | None] | None:
        matched = None
        with self.data_path.open("rb") as src, self.temp_path.open("wb") as tmp:
            for offset, block in iter_blocks(src):
                if decode_roll_number(block) != roll_number:
                    tmp.write(block)
                    continue
                original = decode_record(block, offset)
                replacement = transform(original)
                if matched is None:
                    matched = (original, replacement)
                if replacement is not None:
                    tmp.write(encode_record(replacement))
            tmp.flush()
            os.fsync(tmp.fileno())
        return matched

    # ─── Backup / Restore ───────────────────────────────────────────

    def backup(self) -> Path:
        """Copy the store byte-for-byte over the backup file."""
        if not self.data_path.exists():
            raise StoreIOError("no data to back up", "backup")
        try:
            self.backup_path.parent.mkdir(parents=True, exist_ok=True)
            shutil.copyfile(self.data_path, self.backup_path)
        except OSError as e:
            raise self._io_error(e, "backup")
        logger.info(f"Backup saved to {self.backup_path}", extra={"operation": "backup"})
        return self.backup_path

    def restore(self) -> Path:
        """Replace the store with the backup's bytes."""
        if not self.backup_path.exists():
            raise StoreIOError("backup not found", "restore")
        try:
            self.data_path.parent.mkdir(parents=True, exist_ok=True)
            shutil.copyfile(self.backup_path, self.temp_path)
            os.replace(self.temp_path, self.data_path)
        except OSError as e:
            self._discard_temp()
            raise self._io_error(e, "restore")
        logger.info(f"Store restored from {self.backup_path}", extra={"operation": "restore"})
        return self.data_path

    # ─── Helpers ────────────────────────────────────────────────────

    def _discard_temp(self) -> None:
        try:
            self.temp_path.unlink(missing_ok=True)
        except OSError as e:
            logger.error(f"Could not remove temp file {self.temp_path}: {e}")

    def _io_error(
        self, exc: OSError, operation: str, roll_number: int | None = None,
    ) -> StoreIOError:
        logger.error(
            f"Store {operation} failed: {exc}",
            extra={"roll_number": roll_number, "operation": operation, "path": str(self.data_path)},
        )
        return StoreIOError(
            str(exc), operation,
            ErrorContext(roll_number=roll_number, path=str(self.data_path)),
        )
