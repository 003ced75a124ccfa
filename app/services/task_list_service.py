"""Task list status derivation."""

from dataclasses import dataclass
from datetime import date
from typing import Callable, List, Optional, Tuple

from app.models.enums import AssetType, TaskListStatus
from app.schemas.draft_return import DraftReturn
from app.schemas.task_list import RenderedSection, RenderedSectionResponse, TaskListResponse

# Initial gain or loss is only asked for properties acquired before this date
INITIAL_GAIN_OR_LOSS_CUT_OFF = date(2015, 4, 1)

INITIAL_GAIN_OR_LOSS_ASSET_TYPES = frozenset({AssetType.RESIDENTIAL, AssetType.INDIRECT_RESIDENTIAL})

SAVE_AND_COME_BACK_LATER_LINK = "/returns/confirm-draft-return"


@dataclass(frozen=True)
class SectionDescriptor:
    """Static description of one task-list section.

    ``prerequisites`` names the DraftReturn fields whose answers must all be
    complete before the section can be started. ``is_applicable`` is only set
    for sections which are not relevant to every return.
    """
    id: str
    label_key: str
    link: str
    answers_field: str
    prerequisites: Tuple[str, ...] = ()
    is_applicable: Optional[Callable[[DraftReturn], bool]] = None

    def applies_to(self, draft_return: DraftReturn) -> bool:
        return self.is_applicable is None or self.is_applicable(draft_return)

    def can_start(self, draft_return: DraftReturn) -> bool:
        return all(is_section_complete(draft_return, field) for field in self.prerequisites)


def is_section_complete(draft_return: DraftReturn, answers_field: str) -> bool:
    answers = getattr(draft_return, answers_field)
    return answers is not None and answers.is_complete


def requires_initial_gain_or_loss(draft_return: DraftReturn) -> bool:
    """Check if the initial gain or loss section applies to a draft return.

    It applies to non-UK residents disposing of (directly or indirectly held)
    residential property acquired before 1 April 2015. Any of those answers
    missing means the section does not apply yet.
    """
    country = draft_return.country_of_residence
    asset_type = draft_return.asset_type
    acquisition_date = draft_return.acquisition_date
    if country is None or asset_type is None or acquisition_date is None:
        return False

    return (
        not country.is_uk
        and asset_type in INITIAL_GAIN_OR_LOSS_ASSET_TYPES
        and acquisition_date < INITIAL_GAIN_OR_LOSS_CUT_OFF
    )


_TRIAGE = "triage_answers"
_PROPERTY_ADDRESS = "property_address"
_DISPOSAL_DETAILS = "disposal_details_answers"
_ACQUISITION_DETAILS = "acquisition_details_answers"
_RELIEF_DETAILS = "relief_details_answers"
_EXEMPTIONS_AND_LOSSES = "exemption_and_losses_answers"

# In the order they appear on the task list
SECTIONS: Tuple[SectionDescriptor, ...] = (
    SectionDescriptor(
        id="canTheyUseOurService",
        label_key="task-list.triage.link",
        link="/returns/triage/check-your-answers",
        answers_field=_TRIAGE,
    ),
    SectionDescriptor(
        id="propertyAddress",
        label_key="task-list.enter-property-address.link",
        link="/returns/property-address/check-your-answers",
        answers_field=_PROPERTY_ADDRESS,
        prerequisites=(_TRIAGE,),
    ),
    SectionDescriptor(
        id="disposalDetails",
        label_key="task-list.disposals-details.link",
        link="/returns/disposal-details/check-your-answers",
        answers_field=_DISPOSAL_DETAILS,
        prerequisites=(_TRIAGE, _PROPERTY_ADDRESS),
    ),
    SectionDescriptor(
        id="acquisitionDetails",
        label_key="task-list.acquisition-details.link",
        link="/returns/acquisition-details/check-your-answers",
        answers_field=_ACQUISITION_DETAILS,
        prerequisites=(_TRIAGE, _PROPERTY_ADDRESS),
    ),
    SectionDescriptor(
        id="initialGainOrLoss",
        label_key="task-list.enter-initial-gain-or-loss.link",
        link="/returns/initial-gain-or-loss",
        answers_field="initial_gain_or_loss",
        prerequisites=(_TRIAGE, _PROPERTY_ADDRESS, _DISPOSAL_DETAILS, _ACQUISITION_DETAILS),
        is_applicable=requires_initial_gain_or_loss,
    ),
    SectionDescriptor(
        id="reliefDetails",
        label_key="task-list.relief-details.link",
        link="/returns/relief-details/check-your-answers",
        answers_field=_RELIEF_DETAILS,
        prerequisites=(_TRIAGE, _PROPERTY_ADDRESS, _DISPOSAL_DETAILS, _ACQUISITION_DETAILS),
    ),
    SectionDescriptor(
        id="exemptionsAndLosses",
        label_key="task-list.exemptions-and-losses.link",
        link="/returns/exemptions-and-losses/check-your-answers",
        answers_field=_EXEMPTIONS_AND_LOSSES,
        prerequisites=(_TRIAGE, _PROPERTY_ADDRESS, _DISPOSAL_DETAILS, _ACQUISITION_DETAILS, _RELIEF_DETAILS),
    ),
    SectionDescriptor(
        id="enterCgtLiability",
        label_key="task-list.enter-cgt-liability.link",
        link="/returns/year-to-date-liability/check-your-answers",
        answers_field="year_to_date_liability_answers",
        prerequisites=(
            _TRIAGE,
            _PROPERTY_ADDRESS,
            _DISPOSAL_DETAILS,
            _ACQUISITION_DETAILS,
            _RELIEF_DETAILS,
            _EXEMPTIONS_AND_LOSSES,
        ),
    ),
)


def find_section(section_id: str) -> Optional[SectionDescriptor]:
    """Look up a section by its task-list id."""
    return next((section for section in SECTIONS if section.id == section_id), None)


def section_status(draft_return: DraftReturn, section: SectionDescriptor) -> TaskListStatus:
    """Status of a single section, ignoring whether it applies to the return.

    Args:
        draft_return: Current draft return snapshot
        section: Section to derive the status of

    Returns:
        CannotStart if any prerequisite is not complete, otherwise ToDo,
        InProgress or Complete according to the section's own answers
    """
    if not section.can_start(draft_return):
        return TaskListStatus.CANNOT_START

    answers = getattr(draft_return, section.answers_field)
    if answers is None:
        return TaskListStatus.TO_DO
    if answers.is_complete:
        return TaskListStatus.COMPLETE
    return TaskListStatus.IN_PROGRESS


def compute_sections(draft_return: DraftReturn) -> List[RenderedSection]:
    """Compute the ordered task-list sections for a draft return.

    Sections which do not apply to the return are left out. Sections which
    cannot be started yet carry no link.

    Args:
        draft_return: Current draft return snapshot

    Returns:
        List of rendered sections in task-list order
    """
    rendered = []
    for section in SECTIONS:
        if not section.applies_to(draft_return):
            continue

        status = section_status(draft_return, section)
        rendered.append(
            RenderedSection(
                id=section.id,
                label_key=section.label_key,
                link=None if status == TaskListStatus.CANNOT_START else section.link,
                status=status,
            )
        )
    return rendered


def get_task_list(draft_return: DraftReturn) -> TaskListResponse:
    """Build the task list page for a draft return."""
    sections = compute_sections(draft_return)
    return TaskListResponse(
        draft_return_id=draft_return.id,
        incomplete_triage=not is_section_complete(draft_return, _TRIAGE),
        sections=[
            RenderedSectionResponse(
                id=section.id,
                label_key=section.label_key,
                link=section.link,
                status=section.status,
                status_label_key=section.status_label_key,
            )
            for section in sections
        ],
        save_and_come_back_later=SAVE_AND_COME_BACK_LATER_LINK,
    )
