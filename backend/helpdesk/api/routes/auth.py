from fastapi import APIRouter

from helpdesk.core.actors import Role
from helpdesk.core.config import settings
from helpdesk.core.errors import ValidationFailed
from helpdesk.metrics.prometheus import auth_submissions_total
from helpdesk.schemas.auth import LoginRequest, RegisterRequest, SessionGrant
from helpdesk.services.auth_form import AuthForm, AuthMode

router = APIRouter(prefix="/auth", tags=["auth"])


async def _submit(form: AuthForm) -> SessionGrant:
    granted: list[SessionGrant] = []

    def on_login(email: str, role: Role) -> None:
        granted.append(SessionGrant(email=email, role=role, mode=form.mode.value))

    ok = await form.submit(on_login)
    auth_submissions_total.labels(
        mode=form.mode.value,
        role=form.role.value,
        outcome="accepted" if ok else "rejected",
    ).inc()
    if not ok:
        raise ValidationFailed(form.error)
    return granted[0]


def _form(mode: AuthMode) -> AuthForm:
    return AuthForm(
        mode=mode,
        latency_seconds=settings.auth_latency_seconds,
        min_password_length=settings.min_password_length,
    )


@router.post("/login", response_model=SessionGrant)
async def login(body: LoginRequest):
    form = _form(AuthMode.login)
    form.email = body.email
    form.password = body.password
    form.select_role(body.role)
    return await _submit(form)


@router.post("/register", response_model=SessionGrant)
async def register(body: RegisterRequest):
    form = _form(AuthMode.register)
    form.name = body.name
    form.email = body.email
    form.password = body.password
    form.confirm_password = body.confirm_password
    form.select_role(body.role)
    return await _submit(form)
