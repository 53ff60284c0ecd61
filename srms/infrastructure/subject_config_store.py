"""Subject Configuration File: load/save the subject list as plain text.

File format:
    <count>
    <name 1>
    ...
    <name count>

Invariants:
    - Missing file -> default configuration (Math, Physics, Chemistry)
    - Unparseable count -> 3; count clamped to 1..MAX_SUBJECTS
    - Missing name lines -> "Subject<n>"
    - Written only on explicit reconfiguration
"""

import logging
from pathlib import Path

from srms.core.domain_types import MAX_SUBJECTS
from srms.core.errors import ErrorContext, StoreIOError
from srms.core.subjects import DEFAULT_SUBJECTS, SubjectConfiguration, placeholder_name

logger = logging.getLogger(__name__)


def parse_subjects(text: str) -> SubjectConfiguration:
    lines = text.splitlines()
    try:
        count = int(lines[0].strip())
    except (IndexError, ValueError):
        count = len(DEFAULT_SUBJECTS)
    count = max(1, min(count, MAX_SUBJECTS))
    names = [
        lines[i + 1] if i + 1 < len(lines) else placeholder_name(i)
        for i in range(count)
    ]
    return SubjectConfiguration.from_names(names)


def format_subjects(config: SubjectConfiguration) -> str:
    return "".join(f"{line}\n" for line in (str(config.count), *config.names))


def load_subjects(path: Path | str) -> SubjectConfiguration:
    path = Path(path)
    if not path.exists():
        logger.info(f"No subjects file at {path}; using defaults")
        return SubjectConfiguration()
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise StoreIOError(str(e), "load_subjects", ErrorContext(path=str(path)))
    return parse_subjects(text)


def save_subjects(path: Path | str, config: SubjectConfiguration) -> None:
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(format_subjects(config), encoding="utf-8")
    except OSError as e:
        logger.error(f"Error writing subjects file {path}: {e}")
        raise StoreIOError(str(e), "save_subjects", ErrorContext(path=str(path)))
    logger.info(f"Saved {config.count} subjects to {path}")
