import uuid

import pytest
from sqlmodel import Session

from helpdesk.core.errors import AlreadyAssigned, TicketNotFound
from helpdesk.models.ticket import TicketPriority, TicketStatus
from helpdesk.repositories.memory import InMemoryTicketRepository
from helpdesk.repositories.sql import SqlTicketRepository
from helpdesk.schemas.ticket import TicketDraft


@pytest.fixture(params=["memory", "sql"])
def store(request, engine):
    if request.param == "memory":
        yield InMemoryTicketRepository()
        return
    with Session(engine) as session:
        yield SqlTicketRepository(session)


def _draft(title="Monitor flickers", submitted_by="a@x.com"):
    return TicketDraft(
        title=title,
        description="Flickers when the laptop is docked",
        priority=TicketPriority.high,
        category="Hardware",
        submitted_by=submitted_by,
    )


def test_create_forces_open_status(store):
    t = store.create_ticket(_draft())

    assert t.status is TicketStatus.open
    assert t.comments == []
    assert t.assigned_to is None
    assert t.created_at == t.updated_at
    assert t.created_at.tzinfo is not None
    assert store.get_ticket(t.id) == t


def test_list_keeps_creation_order(store):
    titles = ["first", "second", "third"]
    for title in titles:
        store.create_ticket(_draft(title=title))
    assert [t.title for t in store.list_tickets()] == titles


def test_comments_are_appended_in_order(store):
    t = store.create_ticket(_draft())
    store.append_comment(t.id, "a@x.com", "one", False)
    store.append_comment(t.id, "it@x.com", "two", True)
    t = store.append_comment(t.id, "a@x.com", "three", False)

    assert [c.content for c in t.comments] == ["one", "two", "three"]
    assert [c.is_internal for c in t.comments] == [False, True, False]
    assert [c.content for c in store.list_tickets()[0].comments] == ["one", "two", "three"]


def test_mutations_advance_updated_at(store):
    t = store.create_ticket(_draft())

    commented = store.append_comment(t.id, "a@x.com", "hello", False)
    assert commented.updated_at >= t.updated_at
    assert commented.updated_at == commented.comments[-1].timestamp

    moved = store.set_status(t.id, TicketStatus.in_progress)
    assert moved.status is TicketStatus.in_progress
    assert moved.updated_at >= commented.updated_at

    assigned = store.set_assignee(t.id, "jane.smith@company.com")
    assert assigned.assigned_to == "jane.smith@company.com"
    assert assigned.updated_at >= moved.updated_at
    assert assigned.created_at == t.created_at


def test_assignment_happens_once(store):
    t = store.create_ticket(_draft())
    store.set_assignee(t.id, "jane.smith@company.com")

    with pytest.raises(AlreadyAssigned):
        store.set_assignee(t.id, "john.doe@company.com")
    assert store.get_ticket(t.id).assigned_to == "jane.smith@company.com"


def test_unknown_ticket(store):
    missing = uuid.uuid4()
    assert store.get_ticket(missing) is None
    with pytest.raises(TicketNotFound):
        store.set_status(missing, TicketStatus.closed)
    with pytest.raises(TicketNotFound):
        store.append_comment(missing, "a@x.com", "hi", False)
    with pytest.raises(TicketNotFound):
        store.set_assignee(missing, "jane.smith@company.com")


def test_returned_records_are_copies(store):
    created = store.create_ticket(_draft())
    t = store.append_comment(created.id, "a@x.com", "hi", False)
    t.comments.clear()
    assert len(store.get_ticket(t.id).comments) == 1
