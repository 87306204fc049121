"""Domain errors raised by the components and repositories.

Each error carries the HTTP status the API answers with, so routes can let
them propagate and a single handler in ``helpdesk.main`` renders them.
"""


class HelpdeskError(Exception):
    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationFailed(HelpdeskError, ValueError):
    status_code = 422


class PermissionDenied(HelpdeskError):
    status_code = 403


class TicketNotFound(HelpdeskError, LookupError):
    status_code = 404

    def __init__(self, message: str = "Ticket not found"):
        super().__init__(message)


class AlreadyAssigned(HelpdeskError):
    status_code = 409

    def __init__(self, message: str = "Ticket is already assigned"):
        super().__init__(message)
