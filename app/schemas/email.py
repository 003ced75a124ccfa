"""
Email verification Pydantic schemas
"""
from typing import Optional
from pydantic import BaseModel, EmailStr, Field


class EmailSubmission(BaseModel):
    """Schema for the enter/change email form"""
    email: EmailStr = Field(..., max_length=132, description="Email address to verify")


class EnterEmailPage(BaseModel):
    """Schema for the enter email page"""
    page: str = "enter-email"
    email: Optional[str] = None
    is_amend_journey: bool = Field(..., description="True if the subscription details are already complete")
    back_link: Optional[str] = None
    errors: dict = Field(default_factory=dict)


class CheckYourInboxPage(BaseModel):
    page: str = "check-your-inbox"
    email: str
    back_link: str


class EmailVerifiedPage(BaseModel):
    page: str = "email-verified"
    email: str
    continue_link: str
