"""
Section answer schemas for a draft return.

Each section of the return is either not started (held as ``None`` on the
draft return), incomplete (any field may be unset) or complete (every
required field set). The two variants are told apart by their ``type`` field
so that session data round-trips through JSON without ambiguity.

Amounts are held in pence.
"""

from datetime import date
from typing import Annotated, Literal, Optional, Union
from pydantic import BaseModel, ConfigDict, Field

from app.models.enums import AcquisitionMethod, AssetType, DisposalMethod, IndividualUserType


class SectionAnswers(BaseModel):
    """Common behaviour for all section answers."""
    model_config = ConfigDict(frozen=True)

    type: str

    @property
    def is_complete(self) -> bool:
        return self.type == "complete"


class Country(BaseModel):
    """Country as an ISO 3166 alpha-2 code with an optional display name."""
    model_config = ConfigDict(frozen=True)

    code: str = Field(..., min_length=2, max_length=2, description="ISO country code, e.g. GB")
    name: Optional[str] = None

    @property
    def is_uk(self) -> bool:
        return self.code.upper() == "GB"


UK = Country(code="GB", name="United Kingdom")


# ============================================================================
# TRIAGE
# ============================================================================

class IncompleteTriageAnswers(SectionAnswers):
    type: Literal["incomplete"] = "incomplete"
    individual_user_type: Optional[IndividualUserType] = None
    disposal_method: Optional[DisposalMethod] = None
    country_of_residence: Optional[Country] = None
    asset_type: Optional[AssetType] = None
    disposal_date: Optional[date] = None
    completion_date: Optional[date] = None


class CompleteTriageAnswers(SectionAnswers):
    type: Literal["complete"] = "complete"
    individual_user_type: IndividualUserType
    disposal_method: DisposalMethod
    country_of_residence: Country
    asset_type: AssetType
    disposal_date: date
    completion_date: date


TriageAnswers = Annotated[
    Union[IncompleteTriageAnswers, CompleteTriageAnswers],
    Field(discriminator="type"),
]


# ============================================================================
# PROPERTY ADDRESS
# ============================================================================

class UkAddress(SectionAnswers):
    """Address of the property disposed of. Only ever stored once entered in full."""
    type: Literal["complete"] = "complete"
    line1: str = Field(..., min_length=1)
    line2: Optional[str] = None
    town: Optional[str] = None
    county: Optional[str] = None
    postcode: str = Field(..., min_length=1)


# ============================================================================
# DISPOSAL DETAILS
# ============================================================================

class IncompleteDisposalDetailsAnswers(SectionAnswers):
    type: Literal["incomplete"] = "incomplete"
    shares_of_property_sold: Optional[float] = Field(None, gt=0, le=100)
    disposal_price: Optional[int] = Field(None, ge=0)
    disposal_fees: Optional[int] = Field(None, ge=0)


class CompleteDisposalDetailsAnswers(SectionAnswers):
    type: Literal["complete"] = "complete"
    shares_of_property_sold: float = Field(..., gt=0, le=100, description="Percentage of the property sold")
    disposal_price: int = Field(..., ge=0)
    disposal_fees: int = Field(..., ge=0)


DisposalDetailsAnswers = Annotated[
    Union[IncompleteDisposalDetailsAnswers, CompleteDisposalDetailsAnswers],
    Field(discriminator="type"),
]


# ============================================================================
# ACQUISITION DETAILS
# ============================================================================

class IncompleteAcquisitionDetailsAnswers(SectionAnswers):
    type: Literal["incomplete"] = "incomplete"
    acquisition_method: Optional[AcquisitionMethod] = None
    acquisition_date: Optional[date] = None
    acquisition_price: Optional[int] = Field(None, ge=0)
    rebased_acquisition_price: Optional[int] = Field(None, ge=0)
    improvement_costs: Optional[int] = Field(None, ge=0)
    acquisition_fees: Optional[int] = Field(None, ge=0)


class CompleteAcquisitionDetailsAnswers(SectionAnswers):
    type: Literal["complete"] = "complete"
    acquisition_method: AcquisitionMethod
    acquisition_date: date
    acquisition_price: int = Field(..., ge=0)
    rebased_acquisition_price: Optional[int] = Field(None, ge=0)
    improvement_costs: int = Field(..., ge=0)
    acquisition_fees: int = Field(..., ge=0)


AcquisitionDetailsAnswers = Annotated[
    Union[IncompleteAcquisitionDetailsAnswers, CompleteAcquisitionDetailsAnswers],
    Field(discriminator="type"),
]


# ============================================================================
# INITIAL GAIN OR LOSS
# ============================================================================

class InitialGainOrLossAnswers(SectionAnswers):
    """Gain (positive) or loss (negative) on the property up to 5 April 2015."""
    type: Literal["complete"] = "complete"
    amount: int


# ============================================================================
# RELIEF DETAILS
# ============================================================================

class IncompleteReliefDetailsAnswers(SectionAnswers):
    type: Literal["incomplete"] = "incomplete"
    private_residents_relief: Optional[int] = Field(None, ge=0)
    lettings_relief: Optional[int] = Field(None, ge=0)
    other_reliefs: Optional[int] = Field(None, ge=0)


class CompleteReliefDetailsAnswers(SectionAnswers):
    type: Literal["complete"] = "complete"
    private_residents_relief: int = Field(..., ge=0)
    lettings_relief: int = Field(..., ge=0)
    other_reliefs: Optional[int] = Field(None, ge=0)


ReliefDetailsAnswers = Annotated[
    Union[IncompleteReliefDetailsAnswers, CompleteReliefDetailsAnswers],
    Field(discriminator="type"),
]


# ============================================================================
# EXEMPTIONS AND LOSSES
# ============================================================================

class IncompleteExemptionAndLossesAnswers(SectionAnswers):
    type: Literal["incomplete"] = "incomplete"
    in_year_losses: Optional[int] = Field(None, ge=0)
    previous_years_losses: Optional[int] = Field(None, ge=0)
    annual_exempt_amount: Optional[int] = Field(None, ge=0)


class CompleteExemptionAndLossesAnswers(SectionAnswers):
    type: Literal["complete"] = "complete"
    in_year_losses: int = Field(..., ge=0)
    previous_years_losses: int = Field(..., ge=0)
    annual_exempt_amount: int = Field(..., ge=0)


ExemptionAndLossesAnswers = Annotated[
    Union[IncompleteExemptionAndLossesAnswers, CompleteExemptionAndLossesAnswers],
    Field(discriminator="type"),
]


# ============================================================================
# YEAR TO DATE LIABILITY
# ============================================================================

class IncompleteYearToDateLiabilityAnswers(SectionAnswers):
    type: Literal["incomplete"] = "incomplete"
    estimated_income: Optional[int] = Field(None, ge=0)
    personal_allowance: Optional[int] = Field(None, ge=0)
    has_estimated_details: Optional[bool] = None
    tax_due: Optional[int] = Field(None, ge=0)


class CompleteYearToDateLiabilityAnswers(SectionAnswers):
    type: Literal["complete"] = "complete"
    estimated_income: int = Field(..., ge=0)
    personal_allowance: Optional[int] = Field(None, ge=0)
    has_estimated_details: bool
    tax_due: int = Field(..., ge=0)


YearToDateLiabilityAnswers = Annotated[
    Union[IncompleteYearToDateLiabilityAnswers, CompleteYearToDateLiabilityAnswers],
    Field(discriminator="type"),
]
