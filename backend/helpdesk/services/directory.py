from dataclasses import dataclass
from typing import Optional

from helpdesk.core.config import Settings, settings as default_settings
from helpdesk.models.ticket import TicketStatus


@dataclass(frozen=True)
class Directory:
    """Lookup data the forms and views offer as choices."""

    categories: tuple[str, ...]
    staff_roster: tuple[str, ...]
    escalation_contact: str

    @classmethod
    def from_settings(cls, s: Optional[Settings] = None) -> "Directory":
        s = s or default_settings
        return cls(
            categories=tuple(s.ticket_categories),
            staff_roster=tuple(s.staff_roster),
            escalation_contact=s.escalation_contact,
        )

    def is_category(self, category: str) -> bool:
        return category in self.categories

    def is_staff(self, email: str) -> bool:
        return email in self.staff_roster

    def staff_options(self) -> list[dict[str, str]]:
        return [{"value": email, "label": staff_label(email)} for email in self.staff_roster]


def staff_label(email: str) -> str:
    return email.split("@")[0]


def status_label(status: TicketStatus) -> str:
    return status.value.replace("-", " ")
