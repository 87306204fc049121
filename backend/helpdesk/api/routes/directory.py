from fastapi import APIRouter, Depends

from helpdesk.api.deps import get_directory
from helpdesk.models.ticket import TicketPriority, TicketStatus
from helpdesk.services.directory import Directory, status_label

router = APIRouter(prefix="/directory", tags=["directory"])


@router.get("")
def read_directory(directory: Directory = Depends(get_directory)):
    return {
        "categories": list(directory.categories),
        "priorities": [p.value for p in TicketPriority],
        "default_priority": TicketPriority.medium.value,
        "statuses": [{"value": s.value, "label": status_label(s)} for s in TicketStatus],
        "staff": directory.staff_options(),
        "escalation_contact": directory.escalation_contact,
    }
