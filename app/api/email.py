"""
Email verification API endpoints
"""
import logging
import uuid
from typing import Optional
from fastapi import APIRouter, Depends, Form
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from app.api.deps import (
    CHECK_YOUR_DETAILS_URL,
    START_URL,
    Collaborators,
    RequestWithSessionData,
    authenticated_with_session,
    get_collaborators,
    see_other,
)
from app.core.errors import EmailVerificationError, SessionStoreError, error_result
from app.models.enums import EmailVerificationResponse
from app.schemas.email import CheckYourInboxPage, EmailSubmission, EmailVerifiedPage, EnterEmailPage
from app.schemas.session import (
    EmailToBeVerified,
    SubscriptionMissingData,
    SubscriptionReady,
    SubscriptionStatus,
)

logger = logging.getLogger(__name__)

router = APIRouter()

ENTER_EMAIL_URL = "/email/enter"
CHANGE_EMAIL_URL = "/email/change"
CHECK_YOUR_INBOX_URL = "/email/check-your-inbox"
EMAIL_VERIFIED_URL = "/email/verified"


def verify_email_url(correlation_id: uuid.UUID) -> str:
    return f"/email/verify/{correlation_id}"


def subscription_status(request_data: RequestWithSessionData) -> Optional[SubscriptionStatus]:
    """The journey status if the email pages are available to the user, else None."""
    journey = request_data.journey_status
    if isinstance(journey, (SubscriptionMissingData, SubscriptionReady)):
        return journey
    return None


def _enter_email_page(
    request_data: RequestWithSessionData,
    back_link: Optional[str],
):
    status = subscription_status(request_data)
    if status is None:
        return see_other(START_URL)

    pending = request_data.session_data.email_to_be_verified
    return EnterEmailPage(
        email=pending.email if pending else None,
        is_amend_journey=isinstance(status, SubscriptionReady),
        back_link=back_link,
    )


async def _submit_email(
    request_data: RequestWithSessionData,
    collaborators: Collaborators,
    email_value: str,
    back_link: Optional[str],
):
    status = subscription_status(request_data)
    if status is None:
        return see_other(START_URL)

    try:
        submission = EmailSubmission(email=email_value)
    except ValidationError:
        error_key = "error.required" if not email_value.strip() else "error.invalid"
        page = EnterEmailPage(
            email=email_value,
            is_amend_journey=isinstance(status, SubscriptionReady),
            back_link=back_link,
            errors={"email": error_key},
        )
        return JSONResponse(status_code=400, content=page.model_dump())

    email = str(submission.email)
    pending = request_data.session_data.email_to_be_verified
    if pending is not None and pending.email == email:
        email_to_be_verified = pending
    else:
        email_to_be_verified = EmailToBeVerified(
            email=email,
            id=collaborators.uuid_generator.next_id(),
            verified=False,
        )

    try:
        await collaborators.session_store.update(
            request_data.session_key,
            lambda s: s.model_copy(update={"email_to_be_verified": email_to_be_verified}),
        )
        result = await collaborators.email_verification_service.verify_email(
            email, email_to_be_verified.id, status.name
        )
    except (SessionStoreError, EmailVerificationError) as e:
        logger.warning("Could not verify email: %s", e)
        return error_result()

    if result == EmailVerificationResponse.ALREADY_VERIFIED:
        return see_other(verify_email_url(email_to_be_verified.id))
    return see_other(CHECK_YOUR_INBOX_URL)


@router.get("/enter")
async def enter_email(
    request_data: RequestWithSessionData = Depends(authenticated_with_session),
):
    """Display the enter email page."""
    return _enter_email_page(request_data, back_link=None)


@router.get("/change")
async def change_email(
    request_data: RequestWithSessionData = Depends(authenticated_with_session),
):
    """Display the change email page, linking back to check your details."""
    return _enter_email_page(request_data, back_link=CHECK_YOUR_DETAILS_URL)


@router.post("/enter")
async def enter_email_submit(
    email: str = Form(""),
    request_data: RequestWithSessionData = Depends(authenticated_with_session),
    collaborators: Collaborators = Depends(get_collaborators),
):
    """
    Store the submitted email and request a verification email for it.

    Returns:
        Redirect to the verify link if the address is already verified,
        otherwise to the check your inbox page

    Raises:
        400: If the email is missing or invalid
    """
    return await _submit_email(request_data, collaborators, email, back_link=None)


@router.post("/change")
async def change_email_submit(
    email: str = Form(""),
    request_data: RequestWithSessionData = Depends(authenticated_with_session),
    collaborators: Collaborators = Depends(get_collaborators),
):
    """Same as enter email, on the change email journey."""
    return await _submit_email(request_data, collaborators, email, back_link=CHECK_YOUR_DETAILS_URL)


@router.get("/check-your-inbox")
async def check_your_inbox(
    request_data: RequestWithSessionData = Depends(authenticated_with_session),
):
    """Tell the user a verification email has been sent."""
    status = subscription_status(request_data)
    if status is None:
        return see_other(START_URL)

    pending = request_data.session_data.email_to_be_verified
    if pending is None:
        return see_other(CHECK_YOUR_DETAILS_URL)

    back_link = CHANGE_EMAIL_URL if isinstance(status, SubscriptionReady) else ENTER_EMAIL_URL
    return CheckYourInboxPage(email=pending.email, back_link=back_link)


@router.get("/verify/{correlation_id}")
async def verify_email(
    correlation_id: uuid.UUID,
    request_data: RequestWithSessionData = Depends(authenticated_with_session),
    collaborators: Collaborators = Depends(get_collaborators),
):
    """
    Handle the link in the verification email.

    The id in the link must match the one stored when the email was
    submitted. On a match the email is written into the subscription data
    and marked as verified.
    """
    status = subscription_status(request_data)
    if status is None:
        return see_other(START_URL)

    pending = request_data.session_data.email_to_be_verified
    if pending is None:
        return see_other(CHECK_YOUR_DETAILS_URL)

    if pending.id != correlation_id:
        logger.warning(
            "Received verify email request where id sent (%s) did not match the id in session (%s)",
            correlation_id,
            pending.id,
        )
        return error_result()

    if pending.verified:
        return see_other(EMAIL_VERIFIED_URL)

    def mark_verified(session_data):
        return session_data.model_copy(update={
            "journey_status": status.with_email(pending.email),
            "email_to_be_verified": pending.model_copy(update={"verified": True}),
        })

    try:
        await collaborators.session_store.update(request_data.session_key, mark_verified)
    except SessionStoreError as e:
        logger.warning("Could not store email verified result: %s", e)
        return error_result()

    return see_other(EMAIL_VERIFIED_URL)


@router.get("/verified")
async def email_verified(
    request_data: RequestWithSessionData = Depends(authenticated_with_session),
):
    """Confirm the email has been verified."""
    status = subscription_status(request_data)
    if status is None:
        return see_other(START_URL)

    pending = request_data.session_data.email_to_be_verified
    if pending is None:
        return see_other(CHECK_YOUR_DETAILS_URL)

    if not pending.verified:
        logger.warning("Email verified endpoint called but email was not verified")
        return error_result()

    continue_link = CHECK_YOUR_DETAILS_URL if isinstance(status, SubscriptionReady) else START_URL
    return EmailVerifiedPage(email=pending.email, continue_link=continue_link)
