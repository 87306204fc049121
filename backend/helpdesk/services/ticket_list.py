"""Filterable ticket list.

Filtering is a stable selection over the collection it is given: ownership
first (clients only keep their own tickets), then the free-text search over
title and description, then status, then priority. Each step only drops
tickets, so the result is the same whichever order the last three run in.
"""

import uuid
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Optional

from helpdesk.core.actors import Actor
from helpdesk.core.errors import TicketNotFound, ValidationFailed
from helpdesk.models.ticket import TicketPriority, TicketStatus
from helpdesk.schemas.ticket import TicketRead
from helpdesk.services.controls import AssignCallback, StaffActions, StatusCallback, noop, staff_controls
from helpdesk.services.directory import Directory

ALL = "all"

SelectCallback = Callable[[TicketRead], Any]


def _choice(enum_cls, value, name: str):
    if value in (None, "", ALL):
        return None
    try:
        return enum_cls(value)
    except ValueError:
        raise ValidationFailed(f"Unknown {name} filter: {value}") from None


@dataclass(frozen=True)
class TicketFilters:
    search: str = ""
    status: Optional[TicketStatus] = None
    priority: Optional[TicketPriority] = None

    @classmethod
    def from_query(cls, search: Optional[str] = "", status=ALL, priority=ALL) -> "TicketFilters":
        return cls(
            search=search or "",
            status=_choice(TicketStatus, status, "status"),
            priority=_choice(TicketPriority, priority, "priority"),
        )

    def matches_search(self, ticket: TicketRead) -> bool:
        if not self.search:
            return True
        term = self.search.lower()
        return term in ticket.title.lower() or term in ticket.description.lower()

    def matches_status(self, ticket: TicketRead) -> bool:
        return self.status is None or ticket.status == self.status

    def matches_priority(self, ticket: TicketRead) -> bool:
        return self.priority is None or ticket.priority == self.priority


def filter_tickets(
    tickets: Iterable[TicketRead],
    actor: Actor,
    filters: Optional[TicketFilters] = None,
) -> list[TicketRead]:
    filters = filters or TicketFilters()
    return [
        t
        for t in tickets
        if actor.can_view_ticket(t)
        and filters.matches_search(t)
        and filters.matches_status(t)
        and filters.matches_priority(t)
    ]


class TicketList(StaffActions):
    def __init__(
        self,
        tickets: Iterable[TicketRead],
        actor: Actor,
        directory: Directory,
        filters: Optional[TicketFilters] = None,
        on_ticket_select: Optional[SelectCallback] = None,
        on_status_update: Optional[StatusCallback] = None,
        on_assign_ticket: Optional[AssignCallback] = None,
    ):
        super().__init__(on_status_update=on_status_update, on_assign_ticket=on_assign_ticket)
        self.tickets = list(tickets)
        self.actor = actor
        self.directory = directory
        self.filters = filters or TicketFilters()
        self.on_ticket_select = on_ticket_select or noop

    def visible(self) -> list[TicketRead]:
        return filter_tickets(self.tickets, self.actor, self.filters)

    def _find(self, ticket_id: uuid.UUID) -> TicketRead:
        for t in self.visible():
            if t.id == ticket_id:
                return t
        raise TicketNotFound()

    def select(self, ticket_id: uuid.UUID) -> TicketRead:
        ticket = self._find(ticket_id)
        self.on_ticket_select(ticket)
        return ticket

    def change_status(self, ticket_id: uuid.UUID, status) -> None:
        self._change_status(self._find(ticket_id), status)

    def assign(self, ticket_id: uuid.UUID, assignee: str) -> None:
        self._assign(self._find(ticket_id), assignee)

    def empty_message(self) -> str:
        if self.actor.is_staff:
            return "No tickets match the current filters."
        return "You have not submitted any tickets yet."

    def render(self) -> dict[str, Any]:
        entries = []
        for t in self.visible():
            entry = t.model_dump(mode="json", exclude={"comments"})
            entry["comment_count"] = len(self.actor.visible_comments(t))
            entry["controls"] = staff_controls(t, self.actor, self.directory)
            entries.append(entry)

        return {
            "count": len(entries),
            "filters": {
                "search": self.filters.search,
                "status": self.filters.status.value if self.filters.status else ALL,
                "priority": self.filters.priority.value if self.filters.priority else ALL,
            },
            "tickets": entries,
            "empty_message": None if entries else self.empty_message(),
        }
