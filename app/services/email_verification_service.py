"""Client for the email verification backend."""

import logging
import uuid
from typing import Optional

import httpx

from app.core.errors import EmailVerificationError
from app.models.enums import EmailVerificationResponse
from app.schemas.session import Name

logger = logging.getLogger(__name__)


class EmailVerificationService:
    """Requests verification emails containing a link back to this service."""

    VERIFICATION_REQUESTS_PATH = "/email-verification/verification-requests"

    def __init__(
        self,
        base_url: str,
        template_id: str,
        link_expiry: str,
        self_base_url: str,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url
        self.template_id = template_id
        self.link_expiry = link_expiry
        self.self_base_url = self_base_url
        self.timeout = timeout
        self._transport = transport

    def continue_url(self, correlation_id: uuid.UUID) -> str:
        return f"{self.self_base_url}/email/verify/{correlation_id}"

    async def verify_email(
        self, email: str, correlation_id: uuid.UUID, name: Name
    ) -> EmailVerificationResponse:
        """Ask the backend to send a verification email.

        Args:
            email: Address to verify
            correlation_id: Id embedded in the verification link
            name: Name used to address the user in the email

        Returns:
            ALREADY_VERIFIED if the backend already knows the address is
            verified, otherwise VERIFICATION_REQUESTED

        Raises:
            EmailVerificationError: On transport failure or an unexpected status
        """
        body = {
            "email": email,
            "templateId": self.template_id,
            "templateParameters": {"name": name.full_name},
            "linkExpiryDuration": self.link_expiry,
            "continueUrl": self.continue_url(correlation_id),
        }

        try:
            async with httpx.AsyncClient(
                base_url=self.base_url,
                timeout=httpx.Timeout(self.timeout),
                transport=self._transport,
            ) as client:
                response = await client.post(self.VERIFICATION_REQUESTS_PATH, json=body)
        except httpx.HTTPError as e:
            raise EmailVerificationError(f"Could not call email verification service: {e}") from e

        if response.status_code == 201:
            logger.info("Email verification requested for id %s", correlation_id)
            return EmailVerificationResponse.VERIFICATION_REQUESTED
        if response.status_code == 409:
            return EmailVerificationResponse.ALREADY_VERIFIED

        raise EmailVerificationError(
            f"Call to verify email came back with status {response.status_code}"
        )
