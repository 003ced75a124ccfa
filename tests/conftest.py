"""Pytest configuration and fixtures."""

import sys
import uuid
import pytest
import pytest_asyncio
from pathlib import Path
from httpx import AsyncClient, ASGITransport

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from app.api.deps import Collaborators, HeaderAuthContext
from app.core.config import Settings
from app.core.database import build_engine, build_session_factory
from app.models.enums import EmailVerificationResponse
from app.schemas.iv import FailedJourneyStatus
from app.services.session_store import SessionStore
from main import create_app

from factories import AUTH_HEADERS, FIXED_UUID


class FakeEmailVerificationService:
    """Records calls and returns a configurable response."""

    def __init__(self):
        self.response = EmailVerificationResponse.VERIFICATION_REQUESTED
        self.error = None
        self.calls = []

    async def verify_email(self, email, correlation_id, name):
        self.calls.append((email, correlation_id, name))
        if self.error is not None:
            raise self.error
        return self.response


class FakeIvService:
    def __init__(self):
        self.result = "FailedIV"
        self.error = None
        self.calls = []

    async def get_failed_journey_status(self, journey_id):
        self.calls.append(journey_id)
        if self.error is not None:
            raise self.error
        return FailedJourneyStatus.from_result(self.result)


class FixedUUIDGenerator:
    def __init__(self, value: uuid.UUID):
        self.value = value

    def next_id(self) -> uuid.UUID:
        return self.value


@pytest.fixture
def test_settings(tmp_path):
    """Settings pointing at a throwaway SQLite database."""
    return Settings(DATABASE_URL=f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")


@pytest_asyncio.fixture
async def session_store(test_settings):
    engine = build_engine(test_settings.DATABASE_URL)
    store = SessionStore(build_session_factory(engine), ttl_seconds=test_settings.SESSION_TTL_SECONDS)
    await store.init_schema()
    yield store
    await engine.dispose()


@pytest.fixture
def email_service():
    return FakeEmailVerificationService()


@pytest.fixture
def iv_service():
    return FakeIvService()


@pytest.fixture
def collaborators(test_settings, session_store, email_service, iv_service):
    return Collaborators(
        settings=test_settings,
        session_store=session_store,
        auth_context=HeaderAuthContext(test_settings.AUTH_USER_HEADER),
        email_verification_service=email_service,
        iv_service=iv_service,
        uuid_generator=FixedUUIDGenerator(FIXED_UUID),
    )


@pytest_asyncio.fixture
async def client(collaborators):
    """HTTP client for an app wired to the test collaborators, sending auth headers."""
    app = create_app(collaborators)
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
        headers=AUTH_HEADERS,
    ) as client:
        yield client
