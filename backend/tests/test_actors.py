import pytest

from helpdesk.core.actors import Actor, Client, Role, Staff, actor_for


def test_actor_for_builds_the_right_variant():
    assert isinstance(actor_for("a@x.com", "client"), Client)
    assert isinstance(actor_for("it@x.com", "it-executive"), Staff)
    assert isinstance(actor_for("it@x.com", Role.it_executive), Staff)


def test_actor_for_rejects_unknown_roles():
    with pytest.raises(ValueError):
        actor_for("a@x.com", "admin")


def test_client_only_sees_own_tickets(make_ticket):
    mine = make_ticket(submitted_by="a@x.com")
    theirs = make_ticket(submitted_by="b@x.com")
    client = Client("a@x.com")

    assert client.can_view_ticket(mine)
    assert not client.can_view_ticket(theirs)


def test_staff_sees_every_ticket(make_ticket):
    staff = Staff("it@x.com")
    assert staff.can_view_ticket(make_ticket(submitted_by="a@x.com"))
    assert staff.can_view_ticket(make_ticket(submitted_by="b@x.com"))


def test_comment_visibility_by_role(repo, make_ticket):
    t = make_ticket()
    repo.append_comment(t.id, "it@x.com", "checked the PSU", is_internal=True)
    t = repo.append_comment(t.id, "it@x.com", "we are on it", is_internal=False)

    assert [c.content for c in Client("a@x.com").visible_comments(t)] == ["we are on it"]
    assert len(Staff("it@x.com").visible_comments(t)) == 2


def test_capabilities():
    client, staff = Client("a@x.com"), Staff("it@x.com")

    assert not client.can_change_status()
    assert not client.can_assign()
    assert not client.can_see_internal_comments()
    assert not client.can_write_internal_comments()
    assert not client.is_staff

    assert staff.can_change_status()
    assert staff.can_assign()
    assert staff.can_see_internal_comments()
    assert staff.can_write_internal_comments()
    assert staff.is_staff


def test_actor_variant_must_implement_every_capability():
    class Guest(Actor):
        role = Role.client

        def can_view_ticket(self, ticket) -> bool:
            return False

    with pytest.raises(TypeError):
        Guest("g@x.com")
