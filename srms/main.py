"""Student Result Store API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map SrmsError -> structured JSON responses
    - Logging and the results context are initialized on startup via the lifespan

Run with: uvicorn srms.main:app
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from srms.api.error_handlers import register_error_handlers
from srms.api.routes import health, records, reports, store, subjects
from srms.config import get_settings
from srms.infrastructure.observability import setup_logging
from srms.services.context import init_context

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    ctx = init_context(settings)
    logger.info(
        f"Student result store started: {settings.data_file} "
        f"({ctx.subjects.count} subjects)",
    )
    yield
    logger.info("Student result store shutting down")


app = FastAPI(
    title="Student Result Store API", version="1.0.0", lifespan=lifespan,
)

app.include_router(health.router)
app.include_router(records.router)
app.include_router(reports.router)
app.include_router(store.router)
app.include_router(subjects.router)

register_error_handlers(app)
