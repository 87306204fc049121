"""Storage interface the helpdesk components depend on.

The components never touch storage directly; every mutation is a call on a
``TicketRepository``. Implementations own the store-side invariants: status
forced to ``open`` on creation, append-only comments, a single assignment
per ticket, and ``updated_at`` advancing on every mutation.
"""

import uuid
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Optional

from helpdesk.models.ticket import TicketStatus
from helpdesk.schemas.ticket import TicketDraft, TicketRead


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TicketRepository(ABC):
    @abstractmethod
    def list_tickets(self) -> list[TicketRead]:
        """All tickets, in creation order, with their comments."""

    @abstractmethod
    def get_ticket(self, ticket_id: uuid.UUID) -> Optional[TicketRead]:
        """One ticket with its comments, or None."""

    @abstractmethod
    def create_ticket(self, draft: TicketDraft) -> TicketRead:
        """Store a new open ticket built from ``draft``."""

    @abstractmethod
    def append_comment(
        self,
        ticket_id: uuid.UUID,
        author: str,
        content: str,
        is_internal: bool,
    ) -> TicketRead:
        """Append a comment; raises TicketNotFound."""

    @abstractmethod
    def set_status(self, ticket_id: uuid.UUID, status: TicketStatus) -> TicketRead:
        """Move the ticket to ``status``; raises TicketNotFound."""

    @abstractmethod
    def set_assignee(self, ticket_id: uuid.UUID, assignee: str) -> TicketRead:
        """Assign the ticket; raises TicketNotFound or AlreadyAssigned."""
