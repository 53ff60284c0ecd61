"""Subject Schemas: configuration read/replace payloads."""

from pydantic import BaseModel, Field

from srms.core.domain_types import MAX_SUBJECT_NAME_LEN, MAX_SUBJECTS


class SubjectsUpdate(BaseModel):
    """Blank names are allowed and become Subject<n>."""
    names: list[str] = Field(min_length=1, max_length=MAX_SUBJECTS)


class SubjectsResponse(BaseModel):
    count: int
    names: list[str]
    max_subjects: int = MAX_SUBJECTS
    max_name_length: int = MAX_SUBJECT_NAME_LEN
