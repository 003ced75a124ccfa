"""
Database and domain models package
"""
from app.models.enums import (
    TaskListStatus,
    AssetType,
    IndividualUserType,
    DisposalMethod,
    AcquisitionMethod,
    IvErrorStatus,
    EmailVerificationResponse,
)
from app.models.session_record import SessionRecord

__all__ = [
    "TaskListStatus",
    "AssetType",
    "IndividualUserType",
    "DisposalMethod",
    "AcquisitionMethod",
    "IvErrorStatus",
    "EmailVerificationResponse",
    "SessionRecord",
]
