"""
Draft return schema
"""
import uuid
from datetime import date
from typing import Any, Dict, Optional
from pydantic import BaseModel, ConfigDict, Field

from app.models.enums import AssetType
from app.schemas.answers import (
    AcquisitionDetailsAnswers,
    Country,
    DisposalDetailsAnswers,
    ExemptionAndLossesAnswers,
    InitialGainOrLossAnswers,
    ReliefDetailsAnswers,
    TriageAnswers,
    UkAddress,
    YearToDateLiabilityAnswers,
)


class DraftReturn(BaseModel):
    """
    A single-disposal return in progress.

    Every section is optional: ``None`` means the section has not been started.
    Answers for a section are kept when an earlier section is changed, so a
    section completed before an upstream edit shows as complete again once
    the upstream section is completed.
    """
    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=lambda: str(uuid.uuid4()), description="Draft return UUID")
    triage_answers: Optional[TriageAnswers] = None
    property_address: Optional[UkAddress] = None
    disposal_details_answers: Optional[DisposalDetailsAnswers] = None
    acquisition_details_answers: Optional[AcquisitionDetailsAnswers] = None
    initial_gain_or_loss: Optional[InitialGainOrLossAnswers] = None
    relief_details_answers: Optional[ReliefDetailsAnswers] = None
    exemption_and_losses_answers: Optional[ExemptionAndLossesAnswers] = None
    year_to_date_liability_answers: Optional[YearToDateLiabilityAnswers] = None

    @property
    def country_of_residence(self) -> Optional[Country]:
        return self.triage_answers.country_of_residence if self.triage_answers else None

    @property
    def asset_type(self) -> Optional[AssetType]:
        return self.triage_answers.asset_type if self.triage_answers else None

    @property
    def acquisition_date(self) -> Optional[date]:
        if self.acquisition_details_answers is None:
            return None
        return self.acquisition_details_answers.acquisition_date

    def with_answers(self, field_name: str, answers: Any) -> "DraftReturn":
        """Copy of this draft return with one section's answers replaced."""
        if field_name not in SECTION_ANSWER_TYPES:
            raise ValueError(f"Unknown draft return section: {field_name}")
        return self.model_copy(update={field_name: answers})


# Field name on DraftReturn -> type accepted when storing that section's answers
SECTION_ANSWER_TYPES: Dict[str, Any] = {
    "triage_answers": TriageAnswers,
    "property_address": UkAddress,
    "disposal_details_answers": DisposalDetailsAnswers,
    "acquisition_details_answers": AcquisitionDetailsAnswers,
    "initial_gain_or_loss": InitialGainOrLossAnswers,
    "relief_details_answers": ReliefDetailsAnswers,
    "exemption_and_losses_answers": ExemptionAndLossesAnswers,
    "year_to_date_liability_answers": YearToDateLiabilityAnswers,
}
