"""Report Generator: writes one student's report card to reports/report_roll_<roll>.txt.

Invariants:
    - Lookup is a first-match full scan; absent roll raises RecordNotFoundError, no file written
    - Any previous report for the same roll is overwritten
    - Subject names come from the configuration passed to the constructor
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Callable

from srms.core.errors import ErrorContext, StoreIOError
from srms.core.report_format import render_report, report_filename
from srms.core.repository_protocols import RecordRepository
from srms.core.subjects import SubjectConfiguration

logger = logging.getLogger(__name__)


class ReportGenerator:

    def __init__(
        self,
        store: RecordRepository,
        subjects: SubjectConfiguration,
        reports_dir: Path | str,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self._store = store
        self._subjects = subjects
        self._reports_dir = Path(reports_dir)
        self._clock = clock

    def report_path(self, roll_number: int) -> Path:
        return self._reports_dir / report_filename(roll_number)

    def generate(self, roll_number: int) -> Path:
        record = self._store.find(roll_number)
        text = render_report(record, self._subjects, self._clock())
        path = self.report_path(roll_number)
        try:
            self._reports_dir.mkdir(parents=True, exist_ok=True)
            path.write_text(text, encoding="utf-8")
        except OSError as e:
            logger.error(
                f"Cannot create report file {path}: {e}",
                extra={"roll_number": roll_number, "operation": "report"},
            )
            raise StoreIOError(
                str(e), "report",
                ErrorContext(roll_number=roll_number, path=str(path)),
            )
        logger.info(
            f"Report generated: {path}",
            extra={"roll_number": roll_number, "operation": "report"},
        )
        return path
