"""Client for the identity verification backend."""

import uuid
from typing import Optional
from urllib.parse import urlencode

import httpx

from app.core.errors import IvServiceError
from app.schemas.iv import FailedJourneyStatus


class IvService:
    """Looks up why an identity verification journey failed."""

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url
        self.timeout = timeout
        self._transport = transport

    async def get_failed_journey_status(self, journey_id: uuid.UUID) -> FailedJourneyStatus:
        """
        Fetch the failure status of an IV journey.

        Args:
            journey_id: Journey id IV passed back on the failure callback

        Returns:
            FailedJourneyStatus; unrecognised statuses map to UNKNOWN

        Raises:
            IvServiceError: On transport failure, a non-200 status or a
                response without a result
        """
        try:
            async with httpx.AsyncClient(
                base_url=self.base_url,
                timeout=httpx.Timeout(self.timeout),
                transport=self._transport,
            ) as client:
                response = await client.get(f"/mdtp/journey/journeyId/{journey_id}")
        except httpx.HTTPError as e:
            raise IvServiceError(f"Could not call IV: {e}") from e

        if response.status_code != 200:
            raise IvServiceError(f"Call to IV came back with status {response.status_code}")

        try:
            result = response.json()["result"]
        except (ValueError, KeyError, TypeError) as e:
            raise IvServiceError("Could not find result in IV response") from e

        return FailedJourneyStatus.from_result(str(result))


def iv_uplift_url(
    uplift_url: str,
    origin: str,
    confidence_level: int,
    self_base_url: str,
) -> str:
    """URL sending the user into the IV uplift journey, with our callbacks."""
    query = urlencode({
        "origin": origin,
        "confidenceLevel": confidence_level,
        "completionURL": f"{self_base_url}/iv/success",
        "failureURL": f"{self_base_url}/iv/failure",
    })
    return f"{uplift_url}?{query}"
