import asyncio

import pytest

from helpdesk.core.actors import Role
from helpdesk.services.auth_form import MISSING_FIELDS, PASSWORD_MISMATCH, AuthForm, AuthMode


def _register_form(**fields):
    form = AuthForm(mode=AuthMode.register, latency_seconds=0)
    form.name = fields.get("name", "Ana Souza")
    form.email = fields.get("email", "ana@x.com")
    form.password = fields.get("password", "secret1")
    form.confirm_password = fields.get("confirm_password", "secret1")
    return form


def _submit(form):
    calls = []
    ok = asyncio.run(form.submit(lambda email, role: calls.append((email, role))))
    return ok, calls


def test_login_requires_email_and_password():
    form = AuthForm(latency_seconds=0)
    form.email = "ana@x.com"

    ok, calls = _submit(form)

    assert not ok
    assert calls == []
    assert form.error == MISSING_FIELDS


def test_login_hands_email_and_default_role_to_callback():
    form = AuthForm(latency_seconds=0)
    form.email = "ana@x.com"
    form.password = "x"

    ok, calls = _submit(form)

    assert ok
    assert calls == [("ana@x.com", Role.client)]
    assert form.error is None
    assert form.pending is False


def test_login_with_staff_role():
    form = AuthForm(latency_seconds=0)
    form.email = "it@x.com"
    form.password = "whatever"
    form.select_role("it-executive")

    ok, calls = _submit(form)

    assert ok
    assert calls == [("it@x.com", Role.it_executive)]


@pytest.mark.parametrize("missing", ["name", "email", "password", "confirm_password"])
def test_register_requires_every_field(missing):
    form = _register_form(**{missing: ""})
    ok, calls = _submit(form)
    assert not ok
    assert calls == []
    assert form.error == MISSING_FIELDS


def test_register_rejects_mismatched_passwords():
    form = _register_form(password="secret1", confirm_password="secret2")
    ok, _ = _submit(form)
    assert not ok
    assert form.error == PASSWORD_MISMATCH


def test_register_rejects_short_passwords_even_when_they_match():
    form = _register_form(password="abc12", confirm_password="abc12")
    ok, calls = _submit(form)
    assert not ok
    assert calls == []
    assert "6 characters" in form.error


def test_register_accepts_valid_input():
    ok, calls = _submit(_register_form())
    assert ok
    assert calls == [("ana@x.com", Role.client)]


def test_toggle_mode_clears_registration_fields_but_keeps_email():
    form = _register_form()
    form.error = "stale"

    assert form.toggle_mode() is AuthMode.login
    assert form.email == "ana@x.com"
    assert form.name == ""
    assert form.password == ""
    assert form.confirm_password == ""
    assert form.error is None

    assert form.toggle_mode() is AuthMode.register


def test_form_is_pending_while_waiting():
    form = AuthForm(latency_seconds=0)
    form.email = "ana@x.com"
    form.password = "x"
    seen = []

    asyncio.run(form.submit(lambda email, role: seen.append(form.pending)))

    assert seen == [True]
    assert form.pending is False


def test_pending_is_reset_when_the_callback_fails():
    form = AuthForm(latency_seconds=0)
    form.email = "ana@x.com"
    form.password = "x"

    def boom(email, role):
        raise RuntimeError("session store down")

    with pytest.raises(RuntimeError):
        asyncio.run(form.submit(boom))
    assert form.pending is False
