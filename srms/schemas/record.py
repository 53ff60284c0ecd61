"""Record Schemas: Pydantic models with field-level validation for the API boundary.

Invariants:
    - roll_number fits int32 and is non-negative
    - Every mark is a finite non-negative number; null in an update keeps the stored mark
    - Names are not length-checked here; the record model truncates them
    - Mark count against the subject list is checked by the service, not here

Design Decisions:
    - from_record() classmethods keep core dataclasses free of pydantic
"""

from typing import Annotated

from pydantic import BaseModel, Field, field_validator

from srms.core.analytics import ClassAnalytics
from srms.core.domain_types import MAX_SUBJECTS, ROLL_MAX, Grade
from srms.core.ordering import RankedRecord
from srms.core.record import Record


Mark = Annotated[float, Field(ge=0, allow_inf_nan=False)]


class RecordCreate(BaseModel):
    """New student: roll, name, one mark per configured subject."""
    roll_number: int = Field(ge=0, le=ROLL_MAX)
    name: str = ""
    marks: list[Mark] = Field(min_length=1, max_length=MAX_SUBJECTS)

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        return v.strip()


class RecordUpdate(BaseModel):
    """Partial update: omitted or blank name keeps the stored name."""
    name: str | None = None
    marks: list[Mark | None] | None = Field(None, min_length=1, max_length=MAX_SUBJECTS)


class RecordResponse(BaseModel):
    roll_number: int
    name: str
    marks: list[float]
    total: float
    percentage: float
    grade: Grade

    @classmethod
    def from_record(cls, record: Record) -> "RecordResponse":
        return cls(
            roll_number=record.roll_number,
            name=record.name,
            marks=list(record.marks),
            total=record.total,
            percentage=record.percentage,
            grade=record.grade,
        )


class RecordPageResponse(BaseModel):
    records: list[RecordResponse]
    page: int
    pages: int
    total: int


class RankedRecordResponse(BaseModel):
    rank: int
    record: RecordResponse

    @classmethod
    def from_ranked(cls, ranked: RankedRecord) -> "RankedRecordResponse":
        return cls(rank=ranked.rank, record=RecordResponse.from_record(ranked.record))


class SubjectTopperResponse(BaseModel):
    subject: str
    roll_number: int
    name: str
    mark: float


class AnalyticsResponse(BaseModel):
    class_size: int
    class_average: float | None
    highest: RecordResponse | None
    lowest: RecordResponse | None
    subject_toppers: list[SubjectTopperResponse]
    grade_distribution: dict[Grade, int]

    @classmethod
    def from_analytics(cls, stats: ClassAnalytics) -> "AnalyticsResponse":
        return cls(
            class_size=stats.class_size,
            class_average=stats.class_average,
            highest=RecordResponse.from_record(stats.highest) if stats.highest else None,
            lowest=RecordResponse.from_record(stats.lowest) if stats.lowest else None,
            subject_toppers=[
                SubjectTopperResponse(
                    subject=t.subject,
                    roll_number=t.record.roll_number,
                    name=t.record.name,
                    mark=t.mark,
                )
                for t in stats.subject_toppers
            ],
            grade_distribution=stats.grade_distribution,
        )
