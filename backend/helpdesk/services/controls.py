"""Staff controls shared by the ticket list and the ticket detail view.

Both views offer IT staff a status selector (all four states, always
enabled) and, while a ticket is unassigned, an assignee selector filled from
the staff roster. Clients get neither, and the actions re-check the actor
before any callback fires.
"""

import logging
import uuid
from typing import Any, Callable, Optional

from helpdesk.core.actors import Actor
from helpdesk.core.errors import AlreadyAssigned, PermissionDenied, ValidationFailed
from helpdesk.models.ticket import TicketStatus
from helpdesk.schemas.ticket import TicketRead
from helpdesk.services.directory import Directory, status_label

logger = logging.getLogger(__name__)

StatusCallback = Callable[[uuid.UUID, TicketStatus], Any]
AssignCallback = Callable[[uuid.UUID, str], Any]


def noop(*args, **kwargs) -> None:
    return None


def staff_controls(ticket: TicketRead, actor: Actor, directory: Directory) -> Optional[dict[str, Any]]:
    if not (actor.can_change_status() or actor.can_assign()):
        return None

    controls: dict[str, Any] = {"status": None, "assignee": None}
    if actor.can_change_status():
        controls["status"] = {
            "value": ticket.status.value,
            "options": [{"value": s.value, "label": status_label(s)} for s in TicketStatus],
        }
    if actor.can_assign() and not ticket.assigned_to:
        controls["assignee"] = {"options": directory.staff_options()}
    return controls


class StaffActions:
    actor: Actor
    directory: Directory

    def __init__(
        self,
        on_status_update: Optional[StatusCallback] = None,
        on_assign_ticket: Optional[AssignCallback] = None,
    ):
        self.on_status_update = on_status_update or noop
        self.on_assign_ticket = on_assign_ticket or noop

    def _change_status(self, ticket: TicketRead, status) -> None:
        if not self.actor.can_change_status():
            raise PermissionDenied("Only IT staff can change a ticket's status")
        try:
            status = TicketStatus(status)
        except ValueError:
            raise ValidationFailed(f"Unknown status: {status}") from None

        logger.debug("%s sets ticket %s to %s", self.actor.email, ticket.id, status.value)
        self.on_status_update(ticket.id, status)

    def _assign(self, ticket: TicketRead, assignee: str) -> None:
        if not self.actor.can_assign():
            raise PermissionDenied("Only IT staff can assign tickets")
        if ticket.assigned_to:
            raise AlreadyAssigned()
        if not self.directory.is_staff(assignee):
            raise ValidationFailed(f"{assignee} is not on the IT staff roster")

        logger.debug("%s assigns ticket %s to %s", self.actor.email, ticket.id, assignee)
        self.on_assign_ticket(ticket.id, assignee)
