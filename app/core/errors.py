"""
Error types and the generic technical-error page
"""
from fastapi.responses import JSONResponse


class CgtFrontendError(Exception):
    """Base class for errors raised by collaborators of the frontend."""


class SessionStoreError(CgtFrontendError):
    """Session data could not be read or written."""


class EmailVerificationError(CgtFrontendError):
    """The email verification backend call failed."""


class IvServiceError(CgtFrontendError):
    """The identity verification backend call failed."""


class UnauthenticatedError(CgtFrontendError):
    """No principal could be resolved for the request."""


class SectionCannotStartError(CgtFrontendError):
    """A section was written to while it does not apply or its prerequisites are incomplete."""


def error_result() -> JSONResponse:
    """Generic technical-error page."""
    return JSONResponse(
        status_code=500,
        content={
            "page": "error",
            "title": "global.error.InternalServerError500.title",
            "heading": "global.error.InternalServerError500.heading",
            "message": "global.error.InternalServerError500.message",
        },
    )
