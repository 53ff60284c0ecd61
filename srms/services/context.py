"""Results Context: process-wide wiring of settings, subject configuration, store and services.

Invariants:
    - The subject configuration is loaded once at startup and replaced only by
      reconfigure_subjects(), which persists it before swapping it in
    - Collaborators that depend on the configuration receive it in their constructor
      and are rebuilt on reconfiguration
    - get_context() fails loudly if init_context() has not run

Design Decisions:
    - Module-level singleton initialized from the FastAPI lifespan, overridden in tests
      through app.dependency_overrides
"""

import logging
from dataclasses import dataclass, field
from typing import Sequence

from srms.config import Settings
from srms.core.subjects import SubjectConfiguration
from srms.infrastructure.record_store import RecordStore
from srms.infrastructure.subject_config_store import load_subjects, save_subjects
from srms.services.record_service import RecordService
from srms.services.report_generator import ReportGenerator

logger = logging.getLogger(__name__)


@dataclass
class ResultsContext:
    settings: Settings
    store: RecordStore
    subjects: SubjectConfiguration
    records: RecordService = field(init=False)
    reports: ReportGenerator = field(init=False)

    def __post_init__(self):
        self._wire()

    def _wire(self) -> None:
        self.records = RecordService(self.store, self.subjects)
        self.reports = ReportGenerator(
            self.store, self.subjects, self.settings.reports_dir,
        )

    def reconfigure_subjects(self, names: Sequence[str]) -> SubjectConfiguration:
        config = SubjectConfiguration.from_names(names)
        save_subjects(self.settings.subjects_file, config)
        self.subjects = config
        self._wire()
        logger.info(f"Subjects reconfigured: {', '.join(config.names)}")
        return config


def build_context(settings: Settings) -> ResultsContext:
    return ResultsContext(
        settings=settings,
        store=RecordStore(settings.data_file, settings.backup_file),
        subjects=load_subjects(settings.subjects_file),
    )


_context: ResultsContext | None = None


def init_context(settings: Settings) -> ResultsContext:
    global _context
    _context = build_context(settings)
    return _context


def get_context() -> ResultsContext:
    """FastAPI dependency returning the process-wide context."""
    if _context is None:
        raise RuntimeError("ResultsContext not initialized; call init_context() first")
    return _context
