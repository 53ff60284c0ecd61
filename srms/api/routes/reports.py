"""Report & Analytics Routes: report card files and class statistics."""

from fastapi import APIRouter, Depends, status

from srms.schemas.record import AnalyticsResponse
from srms.services.context import ResultsContext, get_context

router = APIRouter(prefix="/api/v1", tags=["reports"])


@router.post("/reports/{roll_number}", status_code=status.HTTP_201_CREATED)
async def generate_report(roll_number: int, ctx: ResultsContext = Depends(get_context)):
    """Write reports/report_roll_<roll>.txt, replacing any earlier report."""
    path = ctx.reports.generate(roll_number)
    return {"roll_number": roll_number, "path": str(path)}


@router.get("/analytics", response_model=AnalyticsResponse)
async def class_analytics(ctx: ResultsContext = Depends(get_context)):
    """Class size, average, toppers and grade distribution. An empty store has size 0."""
    return AnalyticsResponse.from_analytics(ctx.records.analytics())
