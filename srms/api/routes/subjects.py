"""Subject Routes: read and replace the subject configuration.

Invariants:
    - PUT persists to the subjects file before the new configuration takes effect
    - Existing records keep the marks they were written with; only later writes use the new list
"""

from fastapi import APIRouter, Depends

from srms.core.subjects import SubjectConfiguration
from srms.schemas.subjects import SubjectsResponse, SubjectsUpdate
from srms.services.context import ResultsContext, get_context

router = APIRouter(prefix="/api/v1/subjects", tags=["subjects"])


def _to_response(config: SubjectConfiguration) -> SubjectsResponse:
    return SubjectsResponse(count=config.count, names=list(config.names))


@router.get("", response_model=SubjectsResponse)
async def get_subjects(ctx: ResultsContext = Depends(get_context)):
    return _to_response(ctx.subjects)


@router.put("", response_model=SubjectsResponse)
async def replace_subjects(
    body: SubjectsUpdate, ctx: ResultsContext = Depends(get_context),
):
    return _to_response(ctx.reconfigure_subjects(body.names))
