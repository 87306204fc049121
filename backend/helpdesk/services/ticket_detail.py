import logging
from typing import Any, Callable, Optional

from helpdesk.core.actors import Actor
from helpdesk.core.errors import PermissionDenied, TicketNotFound
from helpdesk.schemas.ticket import TicketRead
from helpdesk.services.controls import AssignCallback, StaffActions, StatusCallback, noop, staff_controls
from helpdesk.services.directory import Directory

logger = logging.getLogger(__name__)

CommentCallback = Callable[..., Any]
BackCallback = Callable[[], Any]

EMPTY_COMMENT = "Comment cannot be empty."


class CommentComposer:
    def __init__(self, allow_internal: bool):
        self.allow_internal = allow_internal
        self.clear()

    def clear(self) -> None:
        self.content = ""
        self.is_internal = False
        self.error: Optional[str] = None


class TicketDetail(StaffActions):
    """One ticket as a given actor sees it, plus the comment composer."""

    def __init__(
        self,
        ticket: TicketRead,
        actor: Actor,
        directory: Directory,
        on_add_comment: Optional[CommentCallback] = None,
        on_status_update: Optional[StatusCallback] = None,
        on_assign_ticket: Optional[AssignCallback] = None,
        on_back: Optional[BackCallback] = None,
    ):
        if not actor.can_view_ticket(ticket):
            raise TicketNotFound()

        super().__init__(on_status_update=on_status_update, on_assign_ticket=on_assign_ticket)
        self.ticket = ticket
        self.actor = actor
        self.directory = directory
        self.on_add_comment = on_add_comment or noop
        self.on_back = on_back or noop
        self.composer = CommentComposer(allow_internal=actor.can_write_internal_comments())

    def visible_comments(self):
        return self.actor.visible_comments(self.ticket)

    def submit_comment(self) -> bool:
        """Send the composed comment; False leaves the message in ``composer.error``."""
        content = self.composer.content.strip()
        if not content:
            self.composer.error = EMPTY_COMMENT
            return False
        if self.composer.is_internal and not self.composer.allow_internal:
            raise PermissionDenied("Only IT staff can write internal comments")

        logger.debug("%s comments on ticket %s", self.actor.email, self.ticket.id)
        self.on_add_comment(self.ticket.id, content, self.composer.is_internal)
        self.composer.clear()
        return True

    def change_status(self, status) -> None:
        self._change_status(self.ticket, status)

    def assign(self, assignee: str) -> None:
        self._assign(self.ticket, assignee)

    def back(self) -> None:
        self.on_back()

    def render(self) -> dict[str, Any]:
        comments = []
        for c in self.visible_comments():
            item = c.model_dump(mode="json")
            # the internal badge is a staff-only cue
            item["badge"] = "internal" if c.is_internal and self.actor.is_staff else None
            comments.append(item)

        escalation = None
        if not self.actor.is_staff:
            escalation = {
                "title": "Need urgent help?",
                "message": "If your issue is urgent, contact the IT team directly.",
                "contact": self.directory.escalation_contact,
            }

        return {
            "ticket": self.ticket.model_dump(mode="json", exclude={"comments"}),
            "comments": comments,
            "comment_count": len(comments),
            "composer": {"allow_internal": self.composer.allow_internal},
            "controls": staff_controls(self.ticket, self.actor, self.directory),
            "escalation": escalation,
        }
