import uuid
from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from sqlmodel import Field, SQLModel


class TicketStatus(str, Enum):
    open = "open"
    in_progress = "in-progress"
    resolved = "resolved"
    closed = "closed"


class TicketPriority(str, Enum):
    low = "low"
    medium = "medium"
    high = "high"
    urgent = "urgent"


class Ticket(SQLModel, table=True):
    __tablename__ = "tickets"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True, index=True)

    title: str
    description: str
    priority: TicketPriority = Field(default=TicketPriority.medium, index=True)
    category: str = Field(index=True)
    status: TicketStatus = Field(default=TicketStatus.open, index=True)

    submitted_by: str = Field(index=True)  # creator e-mail, drives client visibility
    assigned_to: Optional[str] = Field(default=None, index=True)  # set once, never cleared

    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc), index=True)
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc), index=True)
