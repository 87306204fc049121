import uuid
from typing import Optional

from helpdesk.core.errors import AlreadyAssigned, TicketNotFound
from helpdesk.models.ticket import TicketStatus
from helpdesk.repositories.base import TicketRepository, utcnow
from helpdesk.schemas.ticket import CommentRead, TicketDraft, TicketRead


class InMemoryTicketRepository(TicketRepository):
    """Dict-backed store, for tests and local experiments."""

    def __init__(self, tickets: Optional[list[TicketRead]] = None):
        self._tickets: dict[uuid.UUID, TicketRead] = {}
        for t in tickets or []:
            self._tickets[t.id] = t.model_copy(deep=True)

    def _require(self, ticket_id: uuid.UUID) -> TicketRead:
        ticket = self._tickets.get(ticket_id)
        if ticket is None:
            raise TicketNotFound()
        return ticket

    def _replace(self, ticket: TicketRead, **changes) -> TicketRead:
        changes.setdefault("updated_at", utcnow())
        updated = ticket.model_copy(update=changes)
        self._tickets[ticket.id] = updated
        return updated.model_copy(deep=True)

    def list_tickets(self) -> list[TicketRead]:
        # dicts keep insertion order
        return [t.model_copy(deep=True) for t in self._tickets.values()]

    def get_ticket(self, ticket_id: uuid.UUID) -> Optional[TicketRead]:
        ticket = self._tickets.get(ticket_id)
        return ticket.model_copy(deep=True) if ticket else None

    def create_ticket(self, draft: TicketDraft) -> TicketRead:
        now = utcnow()
        ticket = TicketRead(
            id=uuid.uuid4(),
            title=draft.title,
            description=draft.description,
            priority=draft.priority,
            category=draft.category,
            status=TicketStatus.open,
            submitted_by=draft.submitted_by,
            created_at=now,
            updated_at=now,
            comments=[],
        )
        self._tickets[ticket.id] = ticket
        return ticket.model_copy(deep=True)

    def append_comment(
        self,
        ticket_id: uuid.UUID,
        author: str,
        content: str,
        is_internal: bool,
    ) -> TicketRead:
        ticket = self._require(ticket_id)
        comment = CommentRead(
            id=uuid.uuid4(),
            author=author,
            content=content,
            timestamp=utcnow(),
            is_internal=is_internal,
        )
        return self._replace(
            ticket,
            comments=[*ticket.comments, comment],
            updated_at=comment.timestamp,
        )

    def set_status(self, ticket_id: uuid.UUID, status: TicketStatus) -> TicketRead:
        return self._replace(self._require(ticket_id), status=status)

    def set_assignee(self, ticket_id: uuid.UUID, assignee: str) -> TicketRead:
        ticket = self._require(ticket_id)
        if ticket.assigned_to:
            raise AlreadyAssigned()
        return self._replace(ticket, assigned_to=assignee)
