"""
Task list Pydantic schemas
"""
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field
from app.models.enums import TaskListStatus


class RenderedSection(BaseModel):
    """Schema for one section of the task list"""
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Stable section identifier, used as the list item id")
    label_key: str = Field(..., description="Message key of the section link text")
    link: Optional[str] = Field(None, description="Section URL; absent when the section cannot be started")
    status: TaskListStatus

    @property
    def status_label_key(self) -> str:
        return f"task-list.{self.status.value}"


class RenderedSectionResponse(BaseModel):
    """Schema for a section as rendered on the task list page"""
    id: str
    label_key: str
    link: Optional[str] = None
    status: TaskListStatus
    status_label_key: str = Field(..., description="Message key of the status badge")


class TaskListResponse(BaseModel):
    """Schema for the task list page"""
    page: str = "task-list"
    title_key: str = "service.title"
    draft_return_id: str
    incomplete_triage: bool = Field(..., description="True if the triage answers are not complete")
    sections: List[RenderedSectionResponse]
    save_and_come_back_later: str = Field(..., description="Link to confirm the draft return has been saved")
