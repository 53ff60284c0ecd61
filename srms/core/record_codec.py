"""Record Codec: fixed-width binary layout of one student record.

Layout (little-endian, no padding, RECORD_SIZE bytes):
    int32    roll_number
    100s     name (UTF-8, NUL padded, at most MAX_NAME_BYTES used)
    uint8    subject_count (marks in use, 1..MAX_SUBJECTS)
    10 x f64 marks (slots past subject_count are zero)
    f64      total
    f64      percentage
    1s       grade letter

Invariants:
    - Every encoded block is exactly RECORD_SIZE bytes whatever the subject count
    - A short block (truncated tail) decodes to None: end of stream, not a record
    - A full block with an impossible subject count or grade raises CorruptRecordError
"""

import logging
import struct
from typing import BinaryIO, Iterator

from srms.core.domain_types import MAX_NAME_BYTES, MAX_NAME_LEN, MAX_SUBJECTS, Grade
from srms.core.errors import CorruptRecordError, InvalidInputError
from srms.core.record import Record, truncate_utf8, validate_roll_number

logger = logging.getLogger(__name__)

_STRUCT = struct.Struct(f"<i{MAX_NAME_LEN}sB{MAX_SUBJECTS}dddc")
RECORD_SIZE: int = _STRUCT.size  # 202
_GRADES = {g.value.encode("ascii"): g for g in Grade}


def encode_record(record: Record) -> bytes:
    """Pack a record into its fixed-width block."""
    validate_roll_number(record.roll_number)
    name = truncate_utf8(record.name, MAX_NAME_BYTES).encode("utf-8")
    padded_marks = list(record.marks) + [0.0] * (MAX_SUBJECTS - len(record.marks))
    try:
        return _STRUCT.pack(
            record.roll_number,
            name,
            record.subject_count,
            *padded_marks,
            record.total,
            record.percentage,
            record.grade.value.encode("ascii"),
        )
    except struct.error as e:
        raise InvalidInputError(f"record cannot be encoded: {e}", "record") from e


def decode_record(block: bytes, offset: int = 0) -> Record | None:
    """Unpack one block. Returns None for a truncated block."""
    if len(block) < RECORD_SIZE:
        return None
    fields = _STRUCT.unpack(block[:RECORD_SIZE])
    roll_number, raw_name, count = fields[0], fields[1], fields[2]
    marks = fields[3:3 + MAX_SUBJECTS]
    total, percentage, raw_grade = fields[3 + MAX_SUBJECTS:]

    if not 1 <= count <= MAX_SUBJECTS:
        raise CorruptRecordError(f"subject count {count} out of range", offset)
    grade = _GRADES.get(raw_grade)
    if grade is None:
        raise CorruptRecordError(f"unknown grade byte {raw_grade!r}", offset)

    return Record(
        roll_number=roll_number,
        name=raw_name.split(b"\x00", 1)[0].decode("utf-8", errors="ignore"),
        marks=tuple(marks[:count]),
        total=total,
        percentage=percentage,
        grade=grade,
    )


def decode_roll_number(block: bytes) -> int:
    """Read only the key of a full block (cheap path for existence scans)."""
    return int.from_bytes(block[:4], "little", signed=True)


def iter_blocks(stream: BinaryIO) -> Iterator[tuple[int, bytes]]:
    """Yield (offset, block) for each full-width block; stop at a short remainder."""
    offset = 0
    while True:
        block = stream.read(RECORD_SIZE)
        if len(block) < RECORD_SIZE:
            if block:
                logger.debug(
                    f"Ignoring {len(block)} trailing bytes at offset {offset}",
                )
            return
        yield offset, block
        offset += RECORD_SIZE
