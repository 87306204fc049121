from fastapi import APIRouter, Depends

from helpdesk.api.deps import get_actor, get_repository
from helpdesk.core.actors import Actor
from helpdesk.repositories.base import TicketRepository
from helpdesk.services.ticket_list import filter_tickets

router = APIRouter(prefix="/stats", tags=["stats"])


@router.get("")
def stats(
    actor: Actor = Depends(get_actor),
    repo: TicketRepository = Depends(get_repository),
):
    tickets = filter_tickets(repo.list_tickets(), actor)

    by_status: dict[str, int] = {}
    by_priority: dict[str, int] = {}
    by_category: dict[str, int] = {}
    unassigned = 0

    for t in tickets:
        by_status[t.status.value] = by_status.get(t.status.value, 0) + 1
        by_priority[t.priority.value] = by_priority.get(t.priority.value, 0) + 1
        by_category[t.category] = by_category.get(t.category, 0) + 1
        if not t.assigned_to:
            unassigned += 1

    # last 10 tickets
    latest = sorted(tickets, key=lambda t: t.created_at, reverse=True)[:10]

    return {
        "totals": {
            "tickets": len(tickets),
            "unassigned": unassigned,
        },
        "by_status": by_status,
        "by_priority": by_priority,
        "by_category": by_category,
        "latest_tickets": [t.model_dump(mode="json", exclude={"comments"}) for t in latest],
    }
