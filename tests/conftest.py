"""Root conftest: shared test configuration and fixtures."""

import os

import pytest

from srms.core.record import Record
from srms.infrastructure.record_store import RecordStore

# Ensure tests never pick up a real store in the working directory
os.environ.setdefault("SRMS_DATA_FILE", "/nonexistent/srms-test/student.dat")
os.environ.setdefault("SRMS_LOG_FORMAT", "text")


@pytest.fixture
def store(tmp_path):
    """Empty store in a per-test directory."""
    return RecordStore(tmp_path / "student.dat", tmp_path / "student_backup.dat")


@pytest.fixture
def seeded_store(store):
    """Store holding rolls 1, 2, 3 in that on-disk order."""
    store.append(Record.create(1, "alice smith", [90, 80, 70]))
    store.append(Record.create(2, "bob jones", [50, 60, 70]))
    store.append(Record.create(3, "carol white", [100, 95, 93]))
    return store
