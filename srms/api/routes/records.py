"""Record Routes: add, list, search, rank, read, update and delete student records.

Invariants:
    - Input is validated by Pydantic before reaching the handler
    - Static paths (/search, /ranking) are declared before /{roll_number}
    - Listing with an empty store returns pages=0 and an empty list, not an error
"""

from fastapi import APIRouter, Depends, Query, status

from srms.core.domain_types import SortKey
from srms.schemas.record import (
    RankedRecordResponse, RecordCreate, RecordPageResponse, RecordResponse,
    RecordUpdate,
)
from srms.services.context import ResultsContext, get_context

router = APIRouter(prefix="/api/v1/records", tags=["records"])


@router.post(
    "", response_model=RecordResponse, status_code=status.HTTP_201_CREATED,
)
async def create_record(
    body: RecordCreate, ctx: ResultsContext = Depends(get_context),
):
    """Add a student. 409 if the roll number already exists."""
    record = ctx.records.add_student(body.roll_number, body.name, body.marks)
    return RecordResponse.from_record(record)


@router.get("", response_model=RecordPageResponse)
async def list_records(
    sort: SortKey = Query(SortKey.NONE),
    page: int = Query(1, ge=1),
    page_size: int | None = Query(None, ge=1, le=100),
    ctx: ResultsContext = Depends(get_context),
):
    """One page of the store in the requested order."""
    result = ctx.records.list_students(
        sort, page, page_size or ctx.settings.records_per_page,
    )
    return RecordPageResponse(
        records=[RecordResponse.from_record(r) for r in result.records],
        page=result.page,
        pages=result.pages,
        total=result.total,
    )


@router.get("/search", response_model=list[RecordResponse])
async def search_records(
    name: str | None = Query(None, min_length=1, max_length=200),
    grade: str | None = Query(None, min_length=1, max_length=1),
    ctx: ResultsContext = Depends(get_context),
):
    """Name substring (case-insensitive) and/or grade letter."""
    return [RecordResponse.from_record(r) for r in ctx.records.search(name, grade)]


@router.get("/ranking", response_model=list[RankedRecordResponse])
async def ranking(ctx: ResultsContext = Depends(get_context)):
    """Whole class by percentage, best first."""
    return [RankedRecordResponse.from_ranked(r) for r in ctx.records.ranking()]


@router.get("/{roll_number}", response_model=RecordResponse)
async def get_record(roll_number: int, ctx: ResultsContext = Depends(get_context)):
    return RecordResponse.from_record(ctx.records.get_student(roll_number))


@router.patch("/{roll_number}", response_model=RecordResponse)
async def update_record(
    roll_number: int,
    body: RecordUpdate,
    ctx: ResultsContext = Depends(get_context),
):
    """Change name and/or marks; derived fields are recomputed by the store."""
    record = ctx.records.update_student(roll_number, body.name, body.marks)
    return RecordResponse.from_record(record)


@router.delete("/{roll_number}", response_model=RecordResponse)
async def delete_record(roll_number: int, ctx: ResultsContext = Depends(get_context)):
    """Remove a student; returns the removed record."""
    return RecordResponse.from_record(ctx.records.delete_student(roll_number))
