import logging
from typing import Any, Callable

from helpdesk.models.ticket import TicketPriority
from helpdesk.schemas.ticket import TicketDraft
from helpdesk.services.directory import Directory

logger = logging.getLogger(__name__)

SubmitCallback = Callable[[TicketDraft], Any]


class TicketForm:
    """New-ticket form for the signed-in user."""

    def __init__(self, user_email: str, directory: Directory):
        self.user_email = user_email
        self.directory = directory
        self.reset()

    def reset(self) -> None:
        self.title = ""
        self.description = ""
        self.category = ""
        self.priority = TicketPriority.medium

    def can_submit(self) -> bool:
        return bool(
            self.title.strip()
            and self.description.strip()
            and self.category
            and self.directory.is_category(self.category)
        )

    def submit(self, on_submit: SubmitCallback) -> bool:
        if not self.can_submit():
            return False

        draft = TicketDraft(
            title=self.title.strip(),
            description=self.description.strip(),
            priority=TicketPriority(self.priority),
            category=self.category,
            submitted_by=self.user_email,
        )
        logger.debug("submitting ticket draft for %s (%s)", draft.submitted_by, draft.category)
        on_submit(draft)
        self.reset()
        return True
