import pytest

from helpdesk.models.ticket import TicketPriority, TicketStatus
from helpdesk.services.ticket_form import TicketForm


def _filled(directory, **fields):
    form = TicketForm(user_email="a@x.com", directory=directory)
    form.title = fields.get("title", "  VPN drops  ")
    form.description = fields.get("description", " Disconnects every 10 minutes ")
    form.category = fields.get("category", "Software")
    form.priority = fields.get("priority", TicketPriority.high)
    return form


def test_priority_defaults_to_medium(directory):
    assert TicketForm(user_email="a@x.com", directory=directory).priority is TicketPriority.medium


@pytest.mark.parametrize(
    "fields",
    [
        {"title": ""},
        {"title": "   "},
        {"description": ""},
        {"description": "\n\t"},
        {"category": ""},
        {"category": "Plumbing"},
    ],
)
def test_incomplete_forms_are_not_dispatched(directory, fields):
    form = _filled(directory, **fields)
    drafts = []

    assert not form.can_submit()
    assert form.submit(drafts.append) is False
    assert drafts == []
    # nothing is reset on a rejected submit
    assert form.category == fields.get("category", "Software")


def test_submit_forwards_trimmed_draft_and_resets(directory):
    form = _filled(directory)
    drafts = []

    assert form.submit(drafts.append) is True

    assert len(drafts) == 1
    draft = drafts[0]
    assert draft.title == "VPN drops"
    assert draft.description == "Disconnects every 10 minutes"
    assert draft.category == "Software"
    assert draft.priority is TicketPriority.high
    assert draft.submitted_by == "a@x.com"

    assert form.title == ""
    assert form.description == ""
    assert form.category == ""
    assert form.priority is TicketPriority.medium


def test_created_ticket_starts_open_without_comments(directory, repo):
    form = _filled(directory)
    created = []

    form.submit(lambda draft: created.append(repo.create_ticket(draft)))

    ticket = created[0]
    assert ticket.status is TicketStatus.open
    assert ticket.comments == []
    assert ticket.assigned_to is None
    assert ticket.created_at == ticket.updated_at
