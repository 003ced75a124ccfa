"""
Identity verification API endpoints
"""
import logging
import uuid
from fastapi import APIRouter, Depends, Query

from app.api.deps import (
    START_URL,
    Collaborators,
    RequestWithSessionData,
    authenticated_with_session,
    get_collaborators,
    see_other,
)
from app.core.errors import IvServiceError, SessionStoreError, error_result
from app.models.enums import IvErrorStatus
from app.schemas.iv import IvPage
from app.schemas.session import SessionData
from app.services.iv_service import iv_uplift_url

logger = logging.getLogger(__name__)

router = APIRouter()

# Page shown for each failure reason reported by IV
FAILURE_PAGES = {
    IvErrorStatus.INCOMPLETE: "technical-issue",
    IvErrorStatus.FAILED_MATCHING: "failed-matching",
    IvErrorStatus.FAILED_IV: "failed-iv",
    IvErrorStatus.INSUFFICIENT_EVIDENCE: "insufficient-evidence",
    IvErrorStatus.LOCKED_OUT: "locked-out",
    IvErrorStatus.USER_ABORTED: "user-aborted",
    IvErrorStatus.TIMEOUT: "time-out",
    IvErrorStatus.TECHNICAL_ISSUE: "technical-issue",
    IvErrorStatus.PRECONDITION_FAILED: "precondition-failed",
}

TECHNICAL_ISSUE_URL = "/iv/technical-issue"


@router.get("/success")
async def iv_success_callback(
    request_data: RequestWithSessionData = Depends(authenticated_with_session),
    collaborators: Collaborators = Depends(get_collaborators),
):
    """
    Clear the session after a successful uplift so the journey starts afresh.
    """
    if request_data.session_data is None or request_data.session_data.is_empty:
        return see_other(START_URL)

    try:
        await collaborators.session_store.update(
            request_data.session_key, lambda _: SessionData.empty()
        )
    except SessionStoreError as e:
        logger.warning("Could not clear session after IV success: %s", e)
        return error_result()

    return see_other(START_URL)


@router.get("/retry")
async def retry(
    request_data: RequestWithSessionData = Depends(authenticated_with_session),
    collaborators: Collaborators = Depends(get_collaborators),
):
    """Send the user back into IV."""
    settings = collaborators.settings
    return see_other(
        iv_uplift_url(
            uplift_url=settings.IV_UPLIFT_URL,
            origin=settings.IV_ORIGIN,
            confidence_level=settings.IV_CONFIDENCE_LEVEL,
            self_base_url=settings.SELF_BASE_URL,
        )
    )


@router.get("/failure")
async def iv_failure_callback(
    journey_id: uuid.UUID = Query(..., alias="journeyId"),
    request_data: RequestWithSessionData = Depends(authenticated_with_session),
    collaborators: Collaborators = Depends(get_collaborators),
):
    """
    Route the user to the page explaining why IV failed.

    Args:
        journey_id: IV journey id passed on the failure callback

    Returns:
        Redirect to the failure page; technical issue if IV could not be
        asked or returned a status we don't recognise
    """
    try:
        failed_status = await collaborators.iv_service.get_failed_journey_status(journey_id)
    except IvServiceError as e:
        logger.warning("Could not check IV journey error status: %s", e)
        return see_other(TECHNICAL_ISSUE_URL)

    if failed_status.status == IvErrorStatus.UNKNOWN:
        logger.warning("Received unknown error response status from IV: %s", failed_status.raw_value)
        return see_other(TECHNICAL_ISSUE_URL)

    return see_other(f"/iv/{FAILURE_PAGES[failed_status.status]}")


@router.get("/failed-matching", response_model=IvPage)
async def get_failed_matching(
    request_data: RequestWithSessionData = Depends(authenticated_with_session),
):
    return IvPage(page="failed-matching")


@router.get("/failed-iv", response_model=IvPage)
async def get_failed_iv(
    request_data: RequestWithSessionData = Depends(authenticated_with_session),
):
    return IvPage(page="failed-iv")


@router.get("/insufficient-evidence", response_model=IvPage)
async def get_insufficient_evidence(
    request_data: RequestWithSessionData = Depends(authenticated_with_session),
):
    return IvPage(page="insufficient-evidence")


@router.get("/locked-out", response_model=IvPage)
async def get_locked_out(
    request_data: RequestWithSessionData = Depends(authenticated_with_session),
):
    return IvPage(page="locked-out")


@router.get("/user-aborted", response_model=IvPage)
async def get_user_aborted(
    request_data: RequestWithSessionData = Depends(authenticated_with_session),
):
    return IvPage(page="user-aborted")


@router.get("/time-out", response_model=IvPage)
async def get_timed_out(
    request_data: RequestWithSessionData = Depends(authenticated_with_session),
):
    return IvPage(page="time-out")


@router.get("/technical-issue", response_model=IvPage)
async def get_technical_issue(
    request_data: RequestWithSessionData = Depends(authenticated_with_session),
):
    return IvPage(page="technical-issue")


@router.get("/precondition-failed", response_model=IvPage)
async def get_precondition_failed(
    request_data: RequestWithSessionData = Depends(authenticated_with_session),
):
    return IvPage(page="precondition-failed")
