import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, Session, create_engine

from helpdesk.core.config import settings
from helpdesk.db import session as session_mod
from helpdesk.db.session import get_session
from helpdesk.main import app
from helpdesk.models.ticket import TicketPriority
from helpdesk.repositories.memory import InMemoryTicketRepository
from helpdesk.schemas.ticket import TicketDraft
from helpdesk.services.directory import Directory


@pytest.fixture()
def engine():
    # one shared in-memory connection, whatever thread the app runs in
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    return engine


@pytest.fixture()
def client(engine, monkeypatch):
    def override_get_session():
        with Session(engine) as s:
            yield s

    app.dependency_overrides[get_session] = override_get_session
    monkeypatch.setattr(session_mod, "engine", engine, raising=False)

    # no simulated login latency in tests
    monkeypatch.setattr(settings, "auth_latency_seconds", 0.0)

    with TestClient(app) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture()
def directory():
    return Directory(
        categories=("Hardware", "Software", "Printer"),
        staff_roster=("alice@it.example", "bob@it.example"),
        escalation_contact="help@it.example",
    )


@pytest.fixture()
def repo():
    return InMemoryTicketRepository()


@pytest.fixture()
def make_ticket(repo):
    def _make(
        title="Laptop will not boot",
        description="Black screen after the logo",
        submitted_by="a@x.com",
        category="Hardware",
        priority=TicketPriority.medium,
    ):
        return repo.create_ticket(
            TicketDraft(
                title=title,
                description=description,
                priority=priority,
                category=category,
                submitted_by=submitted_by,
            )
        )

    return _make
