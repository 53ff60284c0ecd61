"""Store Maintenance Routes: byte-for-byte backup and restore of the record file.

Invariants:
    - Both operations overwrite their destination unconditionally
    - A missing source file is reported as 503 IO_FAILURE, nothing is written
"""

from fastapi import APIRouter, Depends

from srms.services.context import ResultsContext, get_context

router = APIRouter(prefix="/api/v1/store", tags=["store"])


@router.post("/backup")
async def backup_store(ctx: ResultsContext = Depends(get_context)):
    return {"status": "ok", "path": str(ctx.store.backup())}


@router.post("/restore")
async def restore_store(ctx: ResultsContext = Depends(get_context)):
    return {"status": "ok", "path": str(ctx.store.restore())}
