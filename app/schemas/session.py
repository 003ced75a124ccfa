"""
Session data schemas
"""
import uuid
from typing import Annotated, Literal, Optional, Union
from pydantic import BaseModel, ConfigDict, Field

from app.schemas.draft_return import DraftReturn


class Name(BaseModel):
    model_config = ConfigDict(frozen=True)

    first_name: str
    last_name: str

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


class BusinessPartnerRecord(BaseModel):
    """Details held by ETMP for the user, which may be missing an email address."""
    model_config = ConfigDict(frozen=True)

    name: Name
    email_address: Optional[str] = None
    sap_number: str


class SubscriptionDetails(BaseModel):
    """Everything needed to subscribe the user."""
    model_config = ConfigDict(frozen=True)

    forename: str
    surname: str
    email_address: str
    sap_number: str


class SubscribedDetails(BaseModel):
    model_config = ConfigDict(frozen=True)

    cgt_reference: str
    name: Name
    email_address: str


class SubscriptionMissingData(BaseModel):
    """The business partner record lacks data (e.g. an email) needed to subscribe."""
    model_config = ConfigDict(frozen=True)

    type: Literal["subscription-missing-data"] = "subscription-missing-data"
    gg_cred_id: str
    business_partner_record: BusinessPartnerRecord

    @property
    def name(self) -> Name:
        return self.business_partner_record.name

    def with_email(self, email: str) -> "SubscriptionMissingData":
        record = self.business_partner_record.model_copy(update={"email_address": email})
        return self.model_copy(update={"business_partner_record": record})


class SubscriptionReady(BaseModel):
    """All subscription details are known and awaiting confirmation."""
    model_config = ConfigDict(frozen=True)

    type: Literal["subscription-ready"] = "subscription-ready"
    gg_cred_id: str
    subscription_details: SubscriptionDetails

    @property
    def name(self) -> Name:
        return Name(
            first_name=self.subscription_details.forename,
            last_name=self.subscription_details.surname,
        )

    def with_email(self, email: str) -> "SubscriptionReady":
        details = self.subscription_details.model_copy(update={"email_address": email})
        return self.model_copy(update={"subscription_details": details})


class FillingOutReturn(BaseModel):
    """A subscribed user working through a draft return."""
    model_config = ConfigDict(frozen=True)

    type: Literal["filling-out-return"] = "filling-out-return"
    gg_cred_id: str
    subscribed_details: SubscribedDetails
    draft_return: DraftReturn

    def with_draft_return(self, draft_return: DraftReturn) -> "FillingOutReturn":
        return self.model_copy(update={"draft_return": draft_return})


JourneyStatus = Annotated[
    Union[SubscriptionMissingData, SubscriptionReady, FillingOutReturn],
    Field(discriminator="type"),
]

# Journey statuses for which the email verification pages are available
SubscriptionStatus = Union[SubscriptionMissingData, SubscriptionReady]


class EmailToBeVerified(BaseModel):
    """An email address awaiting confirmation through a verification link."""
    model_config = ConfigDict(frozen=True)

    email: str
    id: uuid.UUID
    verified: bool = False


class SessionData(BaseModel):
    """Everything kept in the session between requests."""
    model_config = ConfigDict(frozen=True)

    journey_status: Optional[JourneyStatus] = None
    email_to_be_verified: Optional[EmailToBeVerified] = None

    @classmethod
    def empty(cls) -> "SessionData":
        return cls()

    @property
    def is_empty(self) -> bool:
        return self == SessionData.empty()
