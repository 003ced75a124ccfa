"""Test identity verification callbacks and pages."""

import uuid
from urllib.parse import parse_qs, urlparse

import pytest

from app.core.errors import IvServiceError
from app.schemas.session import SessionData
from factories import SESSION_KEY, session_with, subscription_ready


@pytest.mark.asyncio
async def test_success_with_no_session_redirects_to_start(client, session_store):
    response = await client.get("/iv/success")

    assert response.status_code == 303
    assert response.headers["location"] == "/start"
    assert await session_store.get(SESSION_KEY) is None


@pytest.mark.asyncio
async def test_success_clears_session(client, session_store):
    await session_store.store(SESSION_KEY, session_with(subscription_ready()))

    response = await client.get("/iv/success")

    assert response.status_code == 303
    assert response.headers["location"] == "/start"
    assert await session_store.get(SESSION_KEY) == SessionData.empty()


@pytest.mark.asyncio
async def test_retry_redirects_to_iv(client, test_settings):
    response = await client.get("/iv/retry")

    assert response.status_code == 303
    location = urlparse(response.headers["location"])
    assert f"{location.scheme}://{location.netloc}{location.path}" == test_settings.IV_UPLIFT_URL

    query = parse_qs(location.query)
    assert query["origin"] == [test_settings.IV_ORIGIN]
    assert query["confidenceLevel"] == [str(test_settings.IV_CONFIDENCE_LEVEL)]
    assert query["completionURL"] == [f"{test_settings.SELF_BASE_URL}/iv/success"]
    assert query["failureURL"] == [f"{test_settings.SELF_BASE_URL}/iv/failure"]


@pytest.mark.asyncio
@pytest.mark.parametrize("result,page", [
    ("Incomplete", "technical-issue"),
    ("FailedMatching", "failed-matching"),
    ("FailedIV", "failed-iv"),
    ("InsufficientEvidence", "insufficient-evidence"),
    ("LockedOut", "locked-out"),
    ("UserAborted", "user-aborted"),
    ("Timeout", "time-out"),
    ("TechnicalIssue", "technical-issue"),
    ("PreconditionFailed", "precondition-failed"),
    ("SomethingNew", "technical-issue"),
])
async def test_failure_callback_routes_by_status(client, iv_service, result, page):
    iv_service.result = result
    journey_id = uuid.uuid4()

    response = await client.get("/iv/failure", params={"journeyId": str(journey_id)})

    assert response.status_code == 303
    assert response.headers["location"] == f"/iv/{page}"
    assert iv_service.calls == [journey_id]


@pytest.mark.asyncio
async def test_failure_callback_when_iv_cannot_be_checked(client, iv_service):
    iv_service.error = IvServiceError("timeout")

    response = await client.get("/iv/failure", params={"journeyId": str(uuid.uuid4())})

    assert response.status_code == 303
    assert response.headers["location"] == "/iv/technical-issue"


@pytest.mark.asyncio
@pytest.mark.parametrize("page", [
    "failed-matching",
    "failed-iv",
    "insufficient-evidence",
    "locked-out",
    "user-aborted",
    "time-out",
    "technical-issue",
    "precondition-failed",
])
async def test_failure_pages(client, page):
    response = await client.get(f"/iv/{page}")

    assert response.status_code == 200
    assert response.json() == {"page": page, "retry_link": "/iv/retry"}
