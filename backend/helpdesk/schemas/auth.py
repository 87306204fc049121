from pydantic import BaseModel

from helpdesk.core.actors import Role


class LoginRequest(BaseModel):
    email: str = ""
    password: str = ""
    role: Role = Role.client


class RegisterRequest(BaseModel):
    name: str = ""
    email: str = ""
    password: str = ""
    confirm_password: str = ""
    role: Role = Role.client


class SessionGrant(BaseModel):
    email: str
    role: Role
    mode: str
