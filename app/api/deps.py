"""
Request dependencies: collaborators, authentication and session data
"""
from dataclasses import dataclass
from typing import Optional
from fastapi import Depends, Request
from fastapi.responses import RedirectResponse

from app.core.config import Settings
from app.core.errors import UnauthenticatedError
from app.schemas.session import SessionData
from app.services.email_verification_service import EmailVerificationService
from app.services.iv_service import IvService
from app.services.session_store import SessionStore
from app.utils.ids import UUIDGenerator


@dataclass(frozen=True)
class Principal:
    """The authenticated user, identified by their Government Gateway credential id."""
    gg_cred_id: str


class HeaderAuthContext:
    """
    Resolves the principal from a header set by the authentication layer
    in front of this service.
    """

    def __init__(self, header_name: str):
        self.header_name = header_name

    def resolve(self, request: Request) -> Optional[Principal]:
        value = request.headers.get(self.header_name, "").strip()
        return Principal(gg_cred_id=value) if value else None


@dataclass
class Collaborators:
    """Everything the route handlers talk to, built once in create_app()."""
    settings: Settings
    session_store: SessionStore
    auth_context: HeaderAuthContext
    email_verification_service: EmailVerificationService
    iv_service: IvService
    uuid_generator: UUIDGenerator


@dataclass
class RequestWithSessionData:
    principal: Principal
    session_key: str
    session_data: Optional[SessionData]

    @property
    def journey_status(self):
        return self.session_data.journey_status if self.session_data else None


def get_collaborators(request: Request) -> Collaborators:
    return request.app.state.collaborators


async def authenticated_with_session(
    request: Request,
    collaborators: Collaborators = Depends(get_collaborators),
) -> RequestWithSessionData:
    """
    Resolve the principal and load their session data.

    Raises:
        UnauthenticatedError: If there is no principal or no session key
        SessionStoreError: If the session data could not be read
    """
    principal = collaborators.auth_context.resolve(request)
    if principal is None:
        raise UnauthenticatedError("No authenticated user found on request")

    settings = collaborators.settings
    session_key = (
        request.headers.get(settings.SESSION_ID_HEADER)
        or request.cookies.get(settings.SESSION_COOKIE_NAME)
    )
    if not session_key:
        raise UnauthenticatedError("No session id found on request")

    session_data = await collaborators.session_store.get(session_key)
    return RequestWithSessionData(
        principal=principal,
        session_key=session_key,
        session_data=session_data,
    )


def see_other(url: str) -> RedirectResponse:
    return RedirectResponse(url=url, status_code=303)


START_URL = "/start"
CHECK_YOUR_DETAILS_URL = "/subscription/check-your-details"
