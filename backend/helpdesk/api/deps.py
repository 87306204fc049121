from typing import Optional

from fastapi import Depends, Header, HTTPException
from sqlmodel import Session

from helpdesk.core.actors import Actor, actor_for
from helpdesk.db.session import get_session
from helpdesk.repositories.base import TicketRepository
from helpdesk.repositories.sql import SqlTicketRepository
from helpdesk.services.directory import Directory


def get_actor(
    x_user_email: Optional[str] = Header(default=None),
    x_user_role: Optional[str] = Header(default=None),
) -> Actor:
    # the session collaborator in front of this API sets both headers after login
    if not x_user_email or not x_user_role:
        raise HTTPException(status_code=401, detail="Missing user identity")
    try:
        return actor_for(x_user_email, x_user_role)
    except ValueError:
        raise HTTPException(status_code=401, detail="Unknown user role")


def get_repository(session: Session = Depends(get_session)) -> TicketRepository:
    return SqlTicketRepository(session)


def get_directory() -> Directory:
    return Directory.from_settings()
