"""
Pytest Configuration and Shared Fixtures

Shared fixtures used across unit and integration test suites.

Fixtures:
    - sqlite_settings: Settings pointing at a per-test SQLite file (aiosqlite)
    - database: Database handle with schema created (async)
    - application_row: Factory for APP_JOB_APPLICATIONS rows
    - hr_caller / staff_caller: Resolved callers with and without the HR role
    - fake_transport / make_transport: Recording mail transport with scriptable failures
    - app / client: FastAPI app on SQLite with an in-memory session store
    - hr_headers / staff_headers: Bearer tokens for HR and non-HR callers
    - seed: Synchronous row insertion for API tests

Architecture Notes:
    - SQLite uses NullPool, so a Database can be shared between the pytest
      event loop and the TestClient's loop
    - No Redis, SMTP server or Celery broker is needed by any test
"""

import asyncio
import logging
import threading
import uuid
from datetime import datetime, timedelta, timezone
from typing import Any, Generator, Optional

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from hr_tracker.api.main import create_app
from hr_tracker.application.models import Caller, NotificationRequest
from hr_tracker.domain.applications.status import ApplicationStatus
from hr_tracker.infrastructure.persistence.database.connection import Database
from hr_tracker.infrastructure.persistence.database.tables import job_applications
from hr_tracker.shared.config import Settings

# Configure logger for tests
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

BASE_TIME = datetime(2025, 1, 1, 9, 0, tzinfo=timezone.utc)


# ============================================================================
# SETTINGS / DATABASE FIXTURES
# ============================================================================


@pytest.fixture
def sqlite_settings(tmp_path) -> Settings:
    """Settings with a throwaway SQLite database file."""
    return Settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'hr_tracker.db'}",
        mail_from_address="hr@example.org",
        mail_from_name="HR Office",
        organization_name="Example University",
    )


@pytest_asyncio.fixture
async def database(sqlite_settings):
    """
    Database handle with the schema created.

    Disposed after the test.
    """
    db = Database.from_settings(sqlite_settings)
    await db.create_schema()
    yield db
    await db.dispose()


@pytest.fixture
def application_row():
    """
    Factory for job application rows.

    created_at increases with every call so "newest first" ordering is
    deterministic.
    """
    counter = {"n": 0}

    def make(
        job_id: uuid.UUID,
        status: ApplicationStatus = ApplicationStatus.PENDING,
        is_active: bool = True,
        score: Optional[float] = None,
        **overrides: Any,
    ) -> dict[str, Any]:
        counter["n"] += 1
        created = BASE_TIME + timedelta(minutes=counter["n"])
        row = {
            "id": uuid.uuid4(),
            "job_id": job_id,
            "applicant_id": uuid.uuid4(),
            "status": status,
            "score": score,
            "is_active": is_active,
            "created_at": created,
            "updated_at": created,
        }
        row.update(overrides)
        return row

    return make


async def insert_rows(db: Database, rows: list[dict[str, Any]]) -> None:
    async with db.transaction() as conn:
        await conn.execute(job_applications.insert(), rows)


@pytest.fixture
def seed_rows():
    """Async helper inserting rows through the Database handle."""
    return insert_rows


# ============================================================================
# CALLER FIXTURES
# ============================================================================


@pytest.fixture
def hr_caller() -> Caller:
    return Caller(id="hr-1", role="HR")


@pytest.fixture
def staff_caller() -> Caller:
    return Caller(id="staff-7", role="STAFF")


# ============================================================================
# MAIL FIXTURES
# ============================================================================


class FakeTransport:
    """
    Thread-safe recording transport.

    Addresses listed in fail_for raise RuntimeError instead of being sent.
    """

    def __init__(self, fail_for: Optional[set[str]] = None) -> None:
        self.fail_for = set(fail_for or ())
        self.sent: list[NotificationRequest] = []
        self._lock = threading.Lock()

    def send(self, request: NotificationRequest) -> str:
        if request.to in self.fail_for:
            raise RuntimeError(f"mailbox unavailable: {request.to}")
        with self._lock:
            self.sent.append(request)
            return f"<msg-{len(self.sent)}@example.org>"


@pytest.fixture
def fake_transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def make_transport():
    """Factory for transports that fail for the given addresses."""
    return FakeTransport


@pytest.fixture
def recipient_payload():
    """Factory for raw notification dicts as sent in request bodies."""

    def make(to: str = "ada@example.org", status: str = "shortlisted", **overrides: Any) -> dict:
        payload = {
            "to": to,
            "jobTitle": "Lecturer in Statistics",
            "applicantName": "Ada Banda",
            "status": status,
        }
        payload.update(overrides)
        return payload

    return make


# ============================================================================
# FASTAPI FIXTURES
# ============================================================================

HR_TOKEN = "hr-token"
STAFF_TOKEN = "staff-token"


class FakeSessionStore:
    """Token -> Caller lookup held in a dict."""

    def __init__(self, sessions: dict[str, Caller]) -> None:
        self.sessions = sessions

    def resolve(self, token: str) -> Optional[Caller]:
        return self.sessions.get(token)


@pytest.fixture
def session_store(hr_caller, staff_caller):
    return FakeSessionStore({HR_TOKEN: hr_caller, STAFF_TOKEN: staff_caller})


@pytest.fixture
def api_database(sqlite_settings):
    """Database with schema, usable from plain sync code and the TestClient loop."""
    db = Database.from_settings(sqlite_settings)
    asyncio.run(db.create_schema())
    yield db
    asyncio.run(db.dispose())


@pytest.fixture
def app(sqlite_settings, api_database, session_store, fake_transport):
    return create_app(
        settings=sqlite_settings,
        database=api_database,
        session_store=session_store,
        email_transport=fake_transport,
    )


@pytest.fixture
def client(app) -> Generator[TestClient, None, None]:
    """
    FastAPI TestClient for testing endpoints.

    Unexpected server errors come back as 500 responses instead of being
    re-raised into the test.
    """
    with TestClient(app, raise_server_exceptions=False) as test_client:
        logger.info("FastAPI TestClient created")
        yield test_client


@pytest.fixture
def hr_headers() -> dict[str, str]:
    return {"Authorization": f"Bearer {HR_TOKEN}"}


@pytest.fixture
def staff_headers() -> dict[str, str]:
    return {"Authorization": f"Bearer {STAFF_TOKEN}"}


@pytest.fixture
def seed(api_database):
    """Insert rows synchronously (outside the TestClient event loop)."""

    def insert(rows: list[dict[str, Any]]) -> list[dict[str, Any]]:
        asyncio.run(insert_rows(api_database, rows))
        return rows

    return insert
