import uuid
from typing import Optional

from fastapi import APIRouter, Depends, Query

from helpdesk.api.deps import get_actor, get_directory, get_repository
from helpdesk.core.actors import Actor
from helpdesk.core.errors import TicketNotFound, ValidationFailed
from helpdesk.metrics.prometheus import (
    ticket_assignments_total,
    ticket_comments_total,
    ticket_status_updates_total,
    tickets_created_total,
    time_to_resolve_seconds,
)
from helpdesk.models.ticket import TicketStatus
from helpdesk.repositories.base import TicketRepository
from helpdesk.schemas.ticket import (
    AssignRequest,
    CommentCreate,
    StatusUpdate,
    TicketCreate,
    TicketDraft,
    TicketRead,
)
from helpdesk.services.directory import Directory
from helpdesk.services.ticket_detail import TicketDetail
from helpdesk.services.ticket_form import TicketForm
from helpdesk.services.ticket_list import ALL, TicketFilters, TicketList

router = APIRouter(prefix="/tickets", tags=["tickets"])


def _visible_ticket(repo: TicketRepository, actor: Actor, ticket_id: uuid.UUID) -> TicketRead:
    ticket = repo.get_ticket(ticket_id)
    # other clients' tickets look exactly like missing ones
    if not ticket or not actor.can_view_ticket(ticket):
        raise TicketNotFound()
    return ticket


def _detail(repo: TicketRepository, actor: Actor, directory: Directory, ticket: TicketRead) -> TicketDetail:
    def add_comment(ticket_id: uuid.UUID, content: str, is_internal: bool) -> None:
        repo.append_comment(ticket_id, actor.email, content, is_internal)
        ticket_comments_total.labels(visibility="internal" if is_internal else "public").inc()

    def update_status(ticket_id: uuid.UUID, status: TicketStatus) -> None:
        previous = ticket.status
        updated = repo.set_status(ticket_id, status)
        ticket_status_updates_total.labels(status=status.value).inc()
        if status is TicketStatus.resolved and previous is not TicketStatus.resolved:
            dt = (updated.updated_at - updated.created_at).total_seconds()
            time_to_resolve_seconds.labels(priority=updated.priority.value).observe(max(0.0, dt))

    def assign(ticket_id: uuid.UUID, assignee: str) -> None:
        repo.set_assignee(ticket_id, assignee)
        ticket_assignments_total.labels(assignee=assignee).inc()

    return TicketDetail(
        ticket,
        actor,
        directory,
        on_add_comment=add_comment,
        on_status_update=update_status,
        on_assign_ticket=assign,
    )


def _render(repo: TicketRepository, actor: Actor, directory: Directory, ticket_id: uuid.UUID) -> dict:
    return _detail(repo, actor, directory, _visible_ticket(repo, actor, ticket_id)).render()


@router.get("")
def list_tickets(
    actor: Actor = Depends(get_actor),
    repo: TicketRepository = Depends(get_repository),
    directory: Directory = Depends(get_directory),
    q: Optional[str] = Query(default=""),
    status: str = Query(default=ALL),
    priority: str = Query(default=ALL),
):
    filters = TicketFilters.from_query(search=q, status=status, priority=priority)
    return TicketList(repo.list_tickets(), actor, directory, filters=filters).render()


@router.post("", status_code=201)
def create_ticket(
    body: TicketCreate,
    actor: Actor = Depends(get_actor),
    repo: TicketRepository = Depends(get_repository),
    directory: Directory = Depends(get_directory),
):
    form = TicketForm(user_email=actor.email, directory=directory)
    form.title = body.title
    form.description = body.description
    form.category = body.category
    form.priority = body.priority

    created: list[TicketRead] = []

    def on_submit(draft: TicketDraft) -> None:
        created.append(repo.create_ticket(draft))

    if not form.submit(on_submit):
        raise ValidationFailed("Title, description and a known category are required")

    ticket = created[0]
    tickets_created_total.labels(category=ticket.category, priority=ticket.priority.value).inc()
    return ticket.model_dump(mode="json")


@router.get("/{ticket_id}")
def get_ticket(
    ticket_id: uuid.UUID,
    actor: Actor = Depends(get_actor),
    repo: TicketRepository = Depends(get_repository),
    directory: Directory = Depends(get_directory),
):
    return _render(repo, actor, directory, ticket_id)


@router.post("/{ticket_id}/comments", status_code=201)
def add_comment(
    ticket_id: uuid.UUID,
    body: CommentCreate,
    actor: Actor = Depends(get_actor),
    repo: TicketRepository = Depends(get_repository),
    directory: Directory = Depends(get_directory),
):
    detail = _detail(repo, actor, directory, _visible_ticket(repo, actor, ticket_id))
    detail.composer.content = body.content
    detail.composer.is_internal = body.is_internal
    if not detail.submit_comment():
        raise ValidationFailed(detail.composer.error)
    return _render(repo, actor, directory, ticket_id)


@router.post("/{ticket_id}/status")
def update_status(
    ticket_id: uuid.UUID,
    body: StatusUpdate,
    actor: Actor = Depends(get_actor),
    repo: TicketRepository = Depends(get_repository),
    directory: Directory = Depends(get_directory),
):
    detail = _detail(repo, actor, directory, _visible_ticket(repo, actor, ticket_id))
    detail.change_status(body.status)
    return _render(repo, actor, directory, ticket_id)


@router.post("/{ticket_id}/assign")
def assign_ticket(
    ticket_id: uuid.UUID,
    body: AssignRequest,
    actor: Actor = Depends(get_actor),
    repo: TicketRepository = Depends(get_repository),
    directory: Directory = Depends(get_directory),
):
    detail = _detail(repo, actor, directory, _visible_ticket(repo, actor, ticket_id))
    detail.assign(body.assignee)
    return _render(repo, actor, directory, ticket_id)
