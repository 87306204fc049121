from helpdesk.repositories.base import TicketRepository
from helpdesk.repositories.memory import InMemoryTicketRepository
from helpdesk.repositories.sql import SqlTicketRepository

__all__ = ["TicketRepository", "InMemoryTicketRepository", "SqlTicketRepository"]
