"""Domain exceptions raised by services and caught by routers.

Services raise these to signal business-rule violations.
Exception handlers in main.py translate them into the standard
error envelope: {"error": {"code": "...", "message": "...", "fields": {...}}}.
"""


class DomainError(Exception):
    """Base class for all domain exceptions."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class NotFoundError(DomainError):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity: str, identifier: object) -> None:
        self.entity = entity
        self.identifier = identifier
        super().__init__(f"{entity} with id {identifier} not found")


class ConflictError(DomainError):
    """Raised when an operation conflicts with existing state."""


class InvalidTransitionError(ConflictError):
    """Raised when a booking wizard event is not allowed from its current step."""


class MissingInformationError(DomainError):
    """Raised when navigation state is missing or does not resolve against the catalog."""


class AuthenticationError(DomainError):
    """Raised for bad credentials or a missing/expired session."""


class StepValidationError(DomainError):
    """Raised when a form fails validation. Carries one message per failing field."""

    def __init__(self, message: str, fields: dict[str, str]) -> None:
        self.fields = fields
        super().__init__(message)
