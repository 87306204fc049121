"""Login / registration form.

The form only gathers and checks input; it never verifies credentials.
On a valid submission it waits out a simulated round trip and hands
``(email, role)`` to the session collaborator.
"""

import asyncio
import logging
from enum import Enum
from typing import Any, Callable, Optional

from helpdesk.core.actors import Role

logger = logging.getLogger(__name__)

LoginCallback = Callable[[str, Role], Any]

MISSING_FIELDS = "Please fill in all fields."
PASSWORD_MISMATCH = "Passwords do not match."


class AuthMode(str, Enum):
    login = "login"
    register = "register"


class AuthForm:
    def __init__(
        self,
        mode: AuthMode = AuthMode.login,
        latency_seconds: float = 1.0,
        min_password_length: int = 6,
    ):
        self.mode = AuthMode(mode)
        self.latency_seconds = latency_seconds
        self.min_password_length = min_password_length

        self.name = ""
        self.email = ""
        self.password = ""
        self.confirm_password = ""
        self.role = Role.client

        self.pending = False
        self.error: Optional[str] = None

    @property
    def registering(self) -> bool:
        return self.mode is AuthMode.register

    def toggle_mode(self) -> AuthMode:
        self.mode = AuthMode.login if self.registering else AuthMode.register
        # the e-mail survives the switch, everything else starts over
        self.name = ""
        self.password = ""
        self.confirm_password = ""
        self.error = None
        return self.mode

    def select_role(self, role) -> None:
        self.role = Role(role)

    def validate(self) -> Optional[str]:
        """Return the message to show the user, or None when the input is usable."""
        if self.registering:
            if not (self.name and self.email and self.password and self.confirm_password):
                return MISSING_FIELDS
            if self.password != self.confirm_password:
                return PASSWORD_MISMATCH
            if len(self.password) < self.min_password_length:
                return f"Password must be at least {self.min_password_length} characters."
            return None

        if not (self.email and self.password):
            return MISSING_FIELDS
        return None

    async def submit(self, on_login: LoginCallback) -> bool:
        self.error = self.validate()
        if self.error:
            logger.debug("%s rejected: %s", self.mode.value, self.error)
            return False

        self.pending = True
        try:
            await asyncio.sleep(self.latency_seconds)
            logger.info("%s accepted for %s as %s", self.mode.value, self.email, self.role.value)
            on_login(self.email, self.role)
        finally:
            self.pending = False
        return True
