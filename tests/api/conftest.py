"""API test fixtures: per-test results context + FastAPI test client.

Invariants:
    - Every test gets its own store, backup, subjects file and reports dir under tmp_path
    - get_context dependency overridden to return the test context
"""

import pytest
from httpx import ASGITransport, AsyncClient

from srms.config import Settings
from srms.main import app
from srms.services.context import build_context, get_context


@pytest.fixture
def test_context(tmp_path):
    settings = Settings(
        data_file=tmp_path / "student.dat",
        backup_file=tmp_path / "student_backup.dat",
        subjects_file=tmp_path / "subjects.cfg",
        reports_dir=tmp_path / "reports",
        records_per_page=5,
    )
    return build_context(settings)


@pytest.fixture
async def client(test_context):
    """FastAPI test client with the results context overridden."""
    app.dependency_overrides[get_context] = lambda: test_context

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
async def seeded_client(client):
    """Client whose store holds rolls 1, 2, 3."""
    for roll, name, marks in (
        (1, "alice smith", [90, 80, 70]),
        (2, "bob jones", [50, 60, 70]),
        (3, "carol white", [100, 95, 93]),
    ):
        res = await client.post(
            "/api/v1/records",
            json={"roll_number": roll, "name": name, "marks": marks},
        )
        assert res.status_code == 201
    return client
