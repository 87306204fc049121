from helpdesk.models.ticket import Ticket, TicketPriority, TicketStatus
from helpdesk.models.comment import Comment

__all__ = ["Ticket", "TicketStatus", "TicketPriority", "Comment"]
