"""
Pydantic schemas for session data, draft returns and page payloads
"""
from app.schemas.answers import (
    Country,
    UK,
    IncompleteTriageAnswers,
    CompleteTriageAnswers,
    UkAddress,
    IncompleteDisposalDetailsAnswers,
    CompleteDisposalDetailsAnswers,
    IncompleteAcquisitionDetailsAnswers,
    CompleteAcquisitionDetailsAnswers,
    InitialGainOrLossAnswers,
    IncompleteReliefDetailsAnswers,
    CompleteReliefDetailsAnswers,
    IncompleteExemptionAndLossesAnswers,
    CompleteExemptionAndLossesAnswers,
    IncompleteYearToDateLiabilityAnswers,
    CompleteYearToDateLiabilityAnswers,
)
from app.schemas.draft_return import DraftReturn, SECTION_ANSWER_TYPES
from app.schemas.session import (
    Name,
    BusinessPartnerRecord,
    SubscriptionDetails,
    SubscribedDetails,
    SubscriptionMissingData,
    SubscriptionReady,
    FillingOutReturn,
    EmailToBeVerified,
    SessionData,
)
from app.schemas.task_list import RenderedSection, RenderedSectionResponse, TaskListResponse
from app.schemas.email import EmailSubmission, EnterEmailPage, CheckYourInboxPage, EmailVerifiedPage
from app.schemas.iv import FailedJourneyStatus, IvPage

__all__ = [
    "Country",
    "UK",
    "IncompleteTriageAnswers",
    "CompleteTriageAnswers",
    "UkAddress",
    "IncompleteDisposalDetailsAnswers",
    "CompleteDisposalDetailsAnswers",
    "IncompleteAcquisitionDetailsAnswers",
    "CompleteAcquisitionDetailsAnswers",
    "InitialGainOrLossAnswers",
    "IncompleteReliefDetailsAnswers",
    "CompleteReliefDetailsAnswers",
    "IncompleteExemptionAndLossesAnswers",
    "CompleteExemptionAndLossesAnswers",
    "IncompleteYearToDateLiabilityAnswers",
    "CompleteYearToDateLiabilityAnswers",
    "DraftReturn",
    "SECTION_ANSWER_TYPES",
    "Name",
    "BusinessPartnerRecord",
    "SubscriptionDetails",
    "SubscribedDetails",
    "SubscriptionMissingData",
    "SubscriptionReady",
    "FillingOutReturn",
    "EmailToBeVerified",
    "SessionData",
    "RenderedSection",
    "RenderedSectionResponse",
    "TaskListResponse",
    "EmailSubmission",
    "EnterEmailPage",
    "CheckYourInboxPage",
    "EmailVerifiedPage",
    "FailedJourneyStatus",
    "IvPage",
]
