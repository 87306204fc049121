"""Acting users and what each kind of user is allowed to see and do.

There are exactly two kinds of actor: clients, who file tickets and follow
their own, and IT staff (role ``it-executive``), who see every ticket and
every comment and drive status and assignment. Components ask the actor
instead of comparing role strings.
"""

from abc import ABC, abstractmethod
from enum import Enum


class Role(str, Enum):
    client = "client"
    it_executive = "it-executive"


class Actor(ABC):
    role: Role

    def __init__(self, email: str):
        self.email = email

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.email!r})"

    def __eq__(self, other) -> bool:
        return type(self) is type(other) and self.email == other.email

    def __hash__(self) -> int:
        return hash((self.role, self.email))

    @property
    def is_staff(self) -> bool:
        return self.role is Role.it_executive

    @abstractmethod
    def can_view_ticket(self, ticket) -> bool:
        ...

    @abstractmethod
    def can_see_internal_comments(self) -> bool:
        ...

    @abstractmethod
    def can_write_internal_comments(self) -> bool:
        ...

    @abstractmethod
    def can_change_status(self) -> bool:
        ...

    @abstractmethod
    def can_assign(self) -> bool:
        ...

    def can_see_comment(self, comment) -> bool:
        return self.can_see_internal_comments() or not comment.is_internal

    def visible_comments(self, ticket) -> list:
        return [c for c in ticket.comments if self.can_see_comment(c)]


class Client(Actor):
    role = Role.client

    def can_view_ticket(self, ticket) -> bool:
        return ticket.submitted_by == self.email

    def can_see_internal_comments(self) -> bool:
        return False

    def can_write_internal_comments(self) -> bool:
        return False

    def can_change_status(self) -> bool:
        return False

    def can_assign(self) -> bool:
        return False


class Staff(Actor):
    role = Role.it_executive

    def can_view_ticket(self, ticket) -> bool:
        return True

    def can_see_internal_comments(self) -> bool:
        return True

    def can_write_internal_comments(self) -> bool:
        return True

    def can_change_status(self) -> bool:
        return True

    def can_assign(self) -> bool:
        return True


_ACTORS = {Role.client: Client, Role.it_executive: Staff}


def actor_for(email: str, role) -> Actor:
    """Build the actor for ``role`` (a ``Role`` or its string value)."""
    try:
        role = Role(role)
    except ValueError:
        raise ValueError(f"Unknown role: {role}") from None
    return _ACTORS[role](email)
