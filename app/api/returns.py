"""
Returns API endpoints: task list and section answers
"""
import logging
from typing import Any, Dict
from fastapi import APIRouter, Body, Depends, HTTPException
from fastapi.exceptions import RequestValidationError
from pydantic import TypeAdapter, ValidationError

from app.api.deps import (
    START_URL,
    Collaborators,
    RequestWithSessionData,
    authenticated_with_session,
    get_collaborators,
    see_other,
)
from app.core.errors import SectionCannotStartError, SessionStoreError, error_result
from app.models.enums import TaskListStatus
from app.schemas.draft_return import SECTION_ANSWER_TYPES, DraftReturn
from app.schemas.session import FillingOutReturn
from app.schemas.task_list import TaskListResponse
from app.services.task_list_service import (
    SectionDescriptor,
    find_section,
    get_task_list,
    section_status,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def _can_write(draft_return: DraftReturn, section: SectionDescriptor) -> bool:
    return (
        section.applies_to(draft_return)
        and section_status(draft_return, section) != TaskListStatus.CANNOT_START
    )


def _cannot_start(section_id: str) -> HTTPException:
    return HTTPException(
        status_code=409,
        detail=f"Section {section_id} cannot be started yet"
    )


@router.get("/task-list", response_model=TaskListResponse)
async def task_list(
    request_data: RequestWithSessionData = Depends(authenticated_with_session),
):
    """
    Display the task list for the draft return in the session.

    Returns:
        TaskListResponse with every applicable section and its status, or a
        redirect to the start page if the user is not filling out a return
    """
    journey = request_data.journey_status
    if not isinstance(journey, FillingOutReturn):
        return see_other(START_URL)

    return get_task_list(journey.draft_return)


@router.put("/sections/{section_id}", response_model=TaskListResponse)
async def update_section(
    section_id: str,
    answers: Dict[str, Any] = Body(...),
    request_data: RequestWithSessionData = Depends(authenticated_with_session),
    collaborators: Collaborators = Depends(get_collaborators),
):
    """
    Store the answers for one section of the draft return.

    Args:
        section_id: Task list id of the section (e.g. disposalDetails)
        answers: Incomplete or complete answers for the section

    Returns:
        TaskListResponse recomputed from the updated draft return

    Raises:
        HTTPException 404: If the section does not exist
        HTTPException 409: If the section cannot be started or does not apply
        HTTPException 422: If the answers are not valid for the section
    """
    journey = request_data.journey_status
    if not isinstance(journey, FillingOutReturn):
        return see_other(START_URL)

    section = find_section(section_id)
    if section is None:
        raise HTTPException(
            status_code=404,
            detail=f"Section {section_id} not found"
        )

    if not _can_write(journey.draft_return, section):
        raise _cannot_start(section_id)

    try:
        validated = TypeAdapter(SECTION_ANSWER_TYPES[section.answers_field]).validate_python(answers)
    except ValidationError as e:
        raise RequestValidationError(e.errors())

    def store_answers(draft_return: DraftReturn) -> DraftReturn:
        # The stored draft may have changed since the request was read
        if not _can_write(draft_return, section):
            raise SectionCannotStartError(f"Section {section_id} cannot be started")
        return draft_return.with_answers(section.answers_field, validated)

    try:
        session_data = await collaborators.session_store.update_draft_return(
            request_data.session_key, store_answers
        )
    except SectionCannotStartError:
        raise _cannot_start(section_id)
    except SessionStoreError as e:
        logger.warning("Could not update answers for section %s: %s", section_id, e)
        return error_result()

    return get_task_list(session_data.journey_status.draft_return)
