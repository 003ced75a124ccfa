"""
Identity verification Pydantic schemas
"""
from pydantic import BaseModel, Field
from app.models.enums import IvErrorStatus


class FailedJourneyStatus(BaseModel):
    """Failure status of an IV journey, keeping the raw value for unrecognised statuses"""
    status: IvErrorStatus
    raw_value: str = Field(..., description="Status string as returned by IV")

    @classmethod
    def from_result(cls, value: str) -> "FailedJourneyStatus":
        try:
            status = IvErrorStatus(value)
        except ValueError:
            status = IvErrorStatus.UNKNOWN
        return cls(status=status, raw_value=value)


class IvPage(BaseModel):
    """Schema for the IV outcome pages"""
    page: str
    retry_link: str = "/iv/retry"
