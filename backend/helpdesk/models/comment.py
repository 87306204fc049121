import uuid
from datetime import datetime, timezone

from sqlmodel import Field, SQLModel


class Comment(SQLModel, table=True):
    __tablename__ = "ticket_comments"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True, index=True)
    ticket_id: uuid.UUID = Field(foreign_key="tickets.id", index=True)
    position: int = Field(default=0, index=True)  # append order within the ticket

    author: str = Field(index=True)
    content: str
    is_internal: bool = Field(default=False, index=True)  # staff-only when true

    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc), index=True)
