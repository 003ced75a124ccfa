"""
Enum definitions for domain and database models
"""
import enum


class TaskListStatus(str, enum.Enum):
    """Display status of a task-list section"""
    CANNOT_START = "CannotStart"   # Prerequisite sections are not complete
    TO_DO = "ToDo"                 # Reachable, nothing entered yet
    IN_PROGRESS = "InProgress"     # Reachable, some answers entered
    COMPLETE = "Complete"          # Reachable, all answers entered


class AssetType(str, enum.Enum):
    """Type of property disposed of"""
    RESIDENTIAL = "residential"
    NON_RESIDENTIAL = "non-residential"
    INDIRECT_RESIDENTIAL = "indirect-residential"
    INDIRECT_NON_RESIDENTIAL = "indirect-non-residential"
    MIXED_USE = "mixed-use"


class IndividualUserType(str, enum.Enum):
    """Who the return is being completed for"""
    SELF = "self"
    TRUST = "trust"
    CAPACITOR = "capacitor"
    PERSONAL_REPRESENTATIVE = "personal-representative"


class DisposalMethod(str, enum.Enum):
    """How the property was disposed of"""
    SOLD = "sold"
    GIFTED = "gifted"
    OTHER = "other"


class AcquisitionMethod(str, enum.Enum):
    """How the property was acquired"""
    BOUGHT = "bought"
    INHERITED = "inherited"
    GIFTED = "gifted"
    OTHER = "other"


class IvErrorStatus(str, enum.Enum):
    """Failure reasons reported by identity verification"""
    INCOMPLETE = "Incomplete"
    FAILED_MATCHING = "FailedMatching"
    FAILED_IV = "FailedIV"
    INSUFFICIENT_EVIDENCE = "InsufficientEvidence"
    LOCKED_OUT = "LockedOut"
    USER_ABORTED = "UserAborted"
    TIMEOUT = "Timeout"
    TECHNICAL_ISSUE = "TechnicalIssue"
    PRECONDITION_FAILED = "PreconditionFailed"
    UNKNOWN = "Unknown"            # Any value we don't recognise


class EmailVerificationResponse(str, enum.Enum):
    """Outcome of requesting an email verification"""
    ALREADY_VERIFIED = "already-verified"
    VERIFICATION_REQUESTED = "verification-requested"
