"""
Capital Gains Tax on Property Disposals - frontend service
FastAPI application entry point
"""
import logging
from typing import Optional
from fastapi import FastAPI, Request
from app.core.config import Settings, settings
from app.core.database import AsyncSessionLocal
from app.core.errors import SessionStoreError, UnauthenticatedError, error_result
from app.api import email, iv, returns, start
from app.api.deps import Collaborators, HeaderAuthContext, see_other
from app.services.email_verification_service import EmailVerificationService
from app.services.iv_service import IvService
from app.services.session_store import SessionStore
from app.utils.ids import UUIDGenerator

logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


def build_collaborators(config: Settings, session_factory=AsyncSessionLocal) -> Collaborators:
    """Construct the collaborators used by the route handlers"""
    return Collaborators(
        settings=config,
        session_store=SessionStore(session_factory, ttl_seconds=config.SESSION_TTL_SECONDS),
        auth_context=HeaderAuthContext(config.AUTH_USER_HEADER),
        email_verification_service=EmailVerificationService(
            base_url=config.EMAIL_VERIFICATION_URL,
            template_id=config.EMAIL_VERIFICATION_TEMPLATE_ID,
            link_expiry=config.EMAIL_LINK_EXPIRY,
            self_base_url=config.SELF_BASE_URL,
            timeout=config.HTTP_TIMEOUT_SECONDS,
        ),
        iv_service=IvService(base_url=config.IV_URL, timeout=config.HTTP_TIMEOUT_SECONDS),
        uuid_generator=UUIDGenerator(),
    )


def create_app(collaborators: Optional[Collaborators] = None) -> FastAPI:
    """Create the FastAPI app wired to the given collaborators"""
    collaborators = collaborators or build_collaborators(settings)

    app = FastAPI(
        title=collaborators.settings.PROJECT_NAME,
        description="Report and pay Capital Gains Tax on UK property",
        version=collaborators.settings.VERSION,
    )
    app.state.collaborators = collaborators

    @app.exception_handler(UnauthenticatedError)
    async def unauthenticated_handler(request: Request, exc: UnauthenticatedError):
        return see_other(collaborators.settings.SIGN_IN_URL)

    @app.exception_handler(SessionStoreError)
    async def session_store_error_handler(request: Request, exc: SessionStoreError):
        logger.warning("Could not get session data: %s", exc)
        return error_result()

    # Include routers
    app.include_router(start.router, tags=["start"])
    app.include_router(returns.router, prefix="/returns", tags=["returns"])
    app.include_router(email.router, prefix="/email", tags=["email"])
    app.include_router(iv.router, prefix="/iv", tags=["iv"])

    @app.on_event("startup")
    async def startup_event():
        """Initialize database on startup"""
        await collaborators.session_store.init_schema()

    @app.get("/health")
    async def health():
        """Health check endpoint"""
        return {
            "status": "healthy",
            "service": collaborators.settings.PROJECT_NAME,
            "version": collaborators.settings.VERSION,
        }

    return app


app = create_app()
