"""
Start page endpoint
"""
from fastapi import APIRouter, Depends

from app.api.deps import CHECK_YOUR_DETAILS_URL, RequestWithSessionData, authenticated_with_session, see_other
from app.schemas.session import FillingOutReturn, SubscriptionMissingData, SubscriptionReady

router = APIRouter()


@router.get("/start")
async def start(
    request_data: RequestWithSessionData = Depends(authenticated_with_session),
):
    """
    Send the user to wherever their journey is up to.

    - Filling out a return: the task list
    - Subscription data missing an email: enter email
    - Subscription ready: check your details
    - Otherwise: the start page
    """
    journey = request_data.journey_status

    if isinstance(journey, FillingOutReturn):
        return see_other("/returns/task-list")
    if isinstance(journey, SubscriptionMissingData) and journey.business_partner_record.email_address is None:
        return see_other("/email/enter")
    if isinstance(journey, SubscriptionReady):
        return see_other(CHECK_YOUR_DETAILS_URL)

    return {"page": "start", "gg_cred_id": request_data.principal.gg_cred_id}
