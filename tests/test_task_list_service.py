"""Test task list status derivation."""

from datetime import date

import pytest

from app.models.enums import AssetType, TaskListStatus
from app.schemas.answers import UK
from app.services.task_list_service import (
    SECTIONS,
    compute_sections,
    find_section,
    get_task_list,
    requires_initial_gain_or_loss,
)
from factories import (
    TURKEY,
    complete_acquisition_details,
    complete_disposal_details,
    complete_exemption_and_losses,
    complete_relief_details,
    complete_triage,
    complete_year_to_date_liability,
    draft_return,
    draft_return_up_to_reliefs,
    fully_complete_draft_return,
    incomplete_acquisition_details,
    incomplete_disposal_details,
    incomplete_exemption_and_losses,
    incomplete_relief_details,
    incomplete_triage,
    incomplete_year_to_date_liability,
    initial_gain_or_loss,
    uk_address,
)


def statuses(draft):
    return {section.id: section.status for section in compute_sections(draft)}


def section(draft, section_id):
    return next(s for s in compute_sections(draft) if s.id == section_id)


def test_empty_draft_return():
    """Only triage can be started on a brand new return."""
    sections = compute_sections(draft_return())

    assert [s.id for s in sections] == [
        "canTheyUseOurService",
        "propertyAddress",
        "disposalDetails",
        "acquisitionDetails",
        "reliefDetails",
        "exemptionsAndLosses",
        "enterCgtLiability",
    ]
    assert sections[0].status == TaskListStatus.TO_DO
    assert sections[0].link == "/returns/triage/check-your-answers"
    for s in sections[1:]:
        assert s.status == TaskListStatus.CANNOT_START
        assert s.link is None


def test_triage_in_progress():
    result = statuses(draft_return(triage_answers=incomplete_triage()))

    assert result["canTheyUseOurService"] == TaskListStatus.IN_PROGRESS
    assert result["propertyAddress"] == TaskListStatus.CANNOT_START
    assert get_task_list(draft_return(triage_answers=incomplete_triage())).incomplete_triage is True


def test_triage_complete_only():
    result = statuses(draft_return(triage_answers=complete_triage()))

    assert result["canTheyUseOurService"] == TaskListStatus.COMPLETE
    assert result["propertyAddress"] == TaskListStatus.TO_DO
    assert result["disposalDetails"] == TaskListStatus.CANNOT_START
    assert result["acquisitionDetails"] == TaskListStatus.CANNOT_START
    assert result["reliefDetails"] == TaskListStatus.CANNOT_START


def test_property_address_complete_opens_disposal_and_acquisition():
    result = statuses(draft_return(triage_answers=complete_triage(), property_address=uk_address()))

    assert result["propertyAddress"] == TaskListStatus.COMPLETE
    assert result["disposalDetails"] == TaskListStatus.TO_DO
    assert result["acquisitionDetails"] == TaskListStatus.TO_DO
    assert result["reliefDetails"] == TaskListStatus.CANNOT_START


@pytest.mark.parametrize("field,section_id,incomplete,complete", [
    ("disposal_details_answers", "disposalDetails", incomplete_disposal_details, complete_disposal_details),
    ("acquisition_details_answers", "acquisitionDetails", incomplete_acquisition_details, complete_acquisition_details),
])
def test_disposal_and_acquisition_statuses(field, section_id, incomplete, complete):
    base = dict(triage_answers=complete_triage(), property_address=uk_address())

    assert statuses(draft_return(**base))[section_id] == TaskListStatus.TO_DO
    assert statuses(draft_return(**base, **{field: incomplete()}))[section_id] == TaskListStatus.IN_PROGRESS
    assert statuses(draft_return(**base, **{field: complete()}))[section_id] == TaskListStatus.COMPLETE


def test_reliefs_to_do_once_earlier_sections_complete():
    result = statuses(draft_return_up_to_reliefs())

    assert result["reliefDetails"] == TaskListStatus.TO_DO
    assert result["exemptionsAndLosses"] == TaskListStatus.CANNOT_START
    assert result["enterCgtLiability"] == TaskListStatus.CANNOT_START


@pytest.mark.parametrize("missing", [
    {"property_address": None},
    {"disposal_details_answers": None},
    {"disposal_details_answers": incomplete_disposal_details()},
    {"acquisition_details_answers": None},
    {"acquisition_details_answers": incomplete_acquisition_details()},
])
def test_reliefs_cannot_start_until_earlier_sections_complete(missing):
    draft = draft_return_up_to_reliefs(**missing)

    assert section(draft, "reliefDetails").status == TaskListStatus.CANNOT_START
    assert section(draft, "reliefDetails").link is None


def test_relief_statuses():
    assert statuses(
        draft_return_up_to_reliefs(relief_details_answers=incomplete_relief_details())
    )["reliefDetails"] == TaskListStatus.IN_PROGRESS
    assert statuses(
        draft_return_up_to_reliefs(relief_details_answers=complete_relief_details())
    )["reliefDetails"] == TaskListStatus.COMPLETE


def test_exemptions_and_losses_statuses():
    def status_of(**sections):
        return statuses(draft_return_up_to_reliefs(**sections))["exemptionsAndLosses"]

    assert status_of(relief_details_answers=incomplete_relief_details()) == TaskListStatus.CANNOT_START
    assert status_of(relief_details_answers=complete_relief_details()) == TaskListStatus.TO_DO
    assert status_of(
        relief_details_answers=complete_relief_details(),
        exemption_and_losses_answers=incomplete_exemption_and_losses(),
    ) == TaskListStatus.IN_PROGRESS
    assert status_of(
        relief_details_answers=complete_relief_details(),
        exemption_and_losses_answers=complete_exemption_and_losses(),
    ) == TaskListStatus.COMPLETE


def test_year_to_date_liability_statuses():
    def status_of(**sections):
        return statuses(fully_complete_draft_return(**sections))["enterCgtLiability"]

    assert status_of(
        exemption_and_losses_answers=None, year_to_date_liability_answers=None
    ) == TaskListStatus.CANNOT_START
    assert status_of(
        exemption_and_losses_answers=incomplete_exemption_and_losses(), year_to_date_liability_answers=None
    ) == TaskListStatus.CANNOT_START
    assert status_of(year_to_date_liability_answers=None) == TaskListStatus.TO_DO
    assert status_of(year_to_date_liability_answers=incomplete_year_to_date_liability()) == TaskListStatus.IN_PROGRESS
    assert status_of(year_to_date_liability_answers=complete_year_to_date_liability()) == TaskListStatus.COMPLETE


def test_complete_answers_behind_unmet_prerequisite_show_cannot_start():
    draft = fully_complete_draft_return(disposal_details_answers=incomplete_disposal_details())
    result = statuses(draft)

    assert result["disposalDetails"] == TaskListStatus.IN_PROGRESS
    for section_id in ("reliefDetails", "exemptionsAndLosses", "enterCgtLiability"):
        assert result[section_id] == TaskListStatus.CANNOT_START


def test_reopened_upstream_section_keeps_downstream_answers():
    completed = fully_complete_draft_return()
    reopened = completed.with_answers("triage_answers", incomplete_triage())

    assert reopened.relief_details_answers == completed.relief_details_answers
    assert all(
        status == TaskListStatus.CANNOT_START
        for section_id, status in statuses(reopened).items()
        if section_id != "canTheyUseOurService"
    )

    recompleted = reopened.with_answers("triage_answers", complete_triage())
    assert set(statuses(recompleted).values()) == {TaskListStatus.COMPLETE}


def test_links_only_on_startable_sections():
    for s in compute_sections(draft_return_up_to_reliefs()):
        if s.status == TaskListStatus.CANNOT_START:
            assert s.link is None
        else:
            assert s.link == find_section(s.id).link


def test_compute_sections_is_deterministic():
    draft = draft_return_up_to_reliefs(relief_details_answers=incomplete_relief_details())

    assert compute_sections(draft) == compute_sections(draft)
    assert compute_sections(draft) == compute_sections(draft.model_copy())


def test_status_label_keys():
    task_list = get_task_list(draft_return())

    assert task_list.sections[0].status_label_key == "task-list.ToDo"
    assert task_list.sections[1].status_label_key == "task-list.CannotStart"
    assert task_list.save_and_come_back_later == "/returns/confirm-draft-return"


# ============================================================================
# INITIAL GAIN OR LOSS
# ============================================================================

def initial_gain_or_loss_draft(country=TURKEY, asset_type=AssetType.RESIDENTIAL,
                               acquisition_date=date(2014, 10, 1), **sections):
    return draft_return_up_to_reliefs(
        triage_answers=complete_triage(country=country, asset_type=asset_type),
        acquisition_details_answers=complete_acquisition_details(acquisition_date=acquisition_date),
        **sections,
    )


def test_initial_gain_or_loss_to_do_for_non_resident_with_early_residential_acquisition():
    draft = initial_gain_or_loss_draft()
    ids = [s.id for s in compute_sections(draft)]

    assert ids.index("initialGainOrLoss") == ids.index("acquisitionDetails") + 1
    s = section(draft, "initialGainOrLoss")
    assert s.status == TaskListStatus.TO_DO
    assert s.label_key == "task-list.enter-initial-gain-or-loss.link"
    assert s.link == "/returns/initial-gain-or-loss"


def test_initial_gain_or_loss_complete_once_entered():
    draft = initial_gain_or_loss_draft(initial_gain_or_loss=initial_gain_or_loss(0))

    assert section(draft, "initialGainOrLoss").status == TaskListStatus.COMPLETE


@pytest.mark.parametrize("country,asset_type,acquisition_date", [
    (UK, AssetType.RESIDENTIAL, date(2014, 10, 1)),
    (TURKEY, AssetType.NON_RESIDENTIAL, date(2014, 10, 1)),
    (TURKEY, AssetType.RESIDENTIAL, date(2020, 10, 1)),
    (TURKEY, AssetType.RESIDENTIAL, date(2015, 4, 1)),
    (TURKEY, AssetType.MIXED_USE, date(2014, 10, 1)),
])
def test_initial_gain_or_loss_not_shown(country, asset_type, acquisition_date):
    draft = initial_gain_or_loss_draft(country, asset_type, acquisition_date)

    assert "initialGainOrLoss" not in statuses(draft)
    assert requires_initial_gain_or_loss(draft) is False


def test_initial_gain_or_loss_applies_to_indirect_residential_disposals():
    draft = initial_gain_or_loss_draft(asset_type=AssetType.INDIRECT_RESIDENTIAL)

    assert requires_initial_gain_or_loss(draft) is True


def test_initial_gain_or_loss_uses_incomplete_answers_for_applicability():
    draft = draft_return(
        triage_answers=incomplete_triage(country_of_residence=TURKEY, asset_type=AssetType.RESIDENTIAL),
        acquisition_details_answers=incomplete_acquisition_details(acquisition_date=date(2010, 1, 1)),
    )

    assert section(draft, "initialGainOrLoss").status == TaskListStatus.CANNOT_START


def test_initial_gain_or_loss_needs_acquisition_date():
    draft = draft_return(triage_answers=complete_triage(country=TURKEY))

    assert requires_initial_gain_or_loss(draft) is False


def test_find_section():
    assert find_section("reliefDetails").answers_field == "relief_details_answers"
    assert find_section("nope") is None
    assert len({s.id for s in SECTIONS}) == len(SECTIONS)
