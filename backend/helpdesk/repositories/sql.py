import logging
import uuid
from typing import Optional

from sqlalchemy import func
from sqlmodel import Session, select

from helpdesk.core.errors import AlreadyAssigned, TicketNotFound
from helpdesk.models.comment import Comment
from helpdesk.models.ticket import Ticket, TicketStatus
from helpdesk.repositories.base import TicketRepository, utcnow
from helpdesk.schemas.ticket import CommentRead, TicketDraft, TicketRead

logger = logging.getLogger(__name__)


def _to_read(ticket: Ticket, comments: list[Comment]) -> TicketRead:
    return TicketRead(
        **ticket.model_dump(),
        comments=[CommentRead(**c.model_dump()) for c in comments],
    )


class SqlTicketRepository(TicketRepository):
    def __init__(self, session: Session):
        self.session = session

    def _require(self, ticket_id: uuid.UUID) -> Ticket:
        ticket = self.session.get(Ticket, ticket_id)
        if not ticket:
            raise TicketNotFound()
        return ticket

    def _comments(self, ticket_id: uuid.UUID) -> list[Comment]:
        return list(
            self.session.exec(
                select(Comment).where(Comment.ticket_id == ticket_id).order_by(Comment.position)
            ).all()
        )

    def _read(self, ticket: Ticket) -> TicketRead:
        return _to_read(ticket, self._comments(ticket.id))

    def list_tickets(self) -> list[TicketRead]:
        tickets = self.session.exec(select(Ticket).order_by(Ticket.created_at)).all()
        comments = self.session.exec(select(Comment).order_by(Comment.position)).all()

        by_ticket: dict[uuid.UUID, list[Comment]] = {}
        for c in comments:
            by_ticket.setdefault(c.ticket_id, []).append(c)

        return [_to_read(t, by_ticket.get(t.id, [])) for t in tickets]

    def get_ticket(self, ticket_id: uuid.UUID) -> Optional[TicketRead]:
        ticket = self.session.get(Ticket, ticket_id)
        if not ticket:
            return None
        return self._read(ticket)

    def create_ticket(self, draft: TicketDraft) -> TicketRead:
        now = utcnow()
        ticket = Ticket(
            title=draft.title,
            description=draft.description,
            priority=draft.priority,
            category=draft.category,
            status=TicketStatus.open,
            submitted_by=draft.submitted_by,
            created_at=now,
            updated_at=now,
        )
        self.session.add(ticket)
        self.session.commit()
        self.session.refresh(ticket)
        logger.info("ticket %s created by %s", ticket.id, ticket.submitted_by)
        return _to_read(ticket, [])

    def append_comment(
        self,
        ticket_id: uuid.UUID,
        author: str,
        content: str,
        is_internal: bool,
    ) -> TicketRead:
        ticket = self._require(ticket_id)
        position = self.session.exec(
            select(func.count(Comment.id)).where(Comment.ticket_id == ticket_id)
        ).one()

        now = utcnow()
        comment = Comment(
            ticket_id=ticket_id,
            position=position,
            author=author,
            content=content,
            is_internal=is_internal,
            timestamp=now,
        )
        ticket.updated_at = now
        self.session.add(comment)
        self.session.add(ticket)
        self.session.commit()
        self.session.refresh(ticket)
        logger.info("comment added to ticket %s by %s (internal=%s)", ticket_id, author, is_internal)
        return self._read(ticket)

    def set_status(self, ticket_id: uuid.UUID, status: TicketStatus) -> TicketRead:
        ticket = self._require(ticket_id)
        previous = ticket.status
        ticket.status = status
        ticket.updated_at = utcnow()
        self.session.add(ticket)
        self.session.commit()
        self.session.refresh(ticket)
        logger.info("ticket %s status %s -> %s", ticket_id, previous.value, status.value)
        return self._read(ticket)

    def set_assignee(self, ticket_id: uuid.UUID, assignee: str) -> TicketRead:
        ticket = self._require(ticket_id)
        if ticket.assigned_to:
            raise AlreadyAssigned()
        ticket.assigned_to = assignee
        ticket.updated_at = utcnow()
        self.session.add(ticket)
        self.session.commit()
        self.session.refresh(ticket)
        logger.info("ticket %s assigned to %s", ticket_id, assignee)
        return self._read(ticket)
