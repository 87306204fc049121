import uuid
from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, field_validator

from helpdesk.models.ticket import TicketPriority, TicketStatus


def _utc(dt: datetime) -> datetime:
    # SQLite hands timestamps back without tzinfo
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


class CommentRead(BaseModel):
    id: uuid.UUID
    author: str
    content: str
    timestamp: datetime
    is_internal: bool = False

    @field_validator("timestamp")
    @classmethod
    def _aware_timestamp(cls, v: datetime) -> datetime:
        return _utc(v)


class TicketRead(BaseModel):
    id: uuid.UUID
    title: str
    description: str
    priority: TicketPriority
    category: str
    status: TicketStatus
    submitted_by: str
    assigned_to: Optional[str] = None
    created_at: datetime
    updated_at: datetime
    comments: list[CommentRead] = []

    @field_validator("created_at", "updated_at")
    @classmethod
    def _aware_dates(cls, v: datetime) -> datetime:
        return _utc(v)


class TicketDraft(BaseModel):
    """What the submission form hands to the creation collaborator."""

    title: str
    description: str
    priority: TicketPriority = TicketPriority.medium
    category: str
    submitted_by: str


class TicketCreate(BaseModel):
    # blanks are accepted here so the form can reject them with its own message
    title: str = ""
    description: str = ""
    category: str = ""
    priority: TicketPriority = TicketPriority.medium


class CommentCreate(BaseModel):
    content: str = ""
    is_internal: bool = False


class StatusUpdate(BaseModel):
    status: TicketStatus


class AssignRequest(BaseModel):
    assignee: str
