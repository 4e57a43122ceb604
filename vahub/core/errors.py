"""Domain errors raised by the workflow engine and repositories.

Routers translate these into HTTP responses; see ``http_status_for``.
"""

from fastapi import status


class MarketplaceError(Exception):
    """Base class for expected, user-reportable failures."""

    http_status = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationFailed(MarketplaceError):
    """A required field is missing or malformed."""


class DuplicateEmail(MarketplaceError):
    def __init__(self, email: str | None = None):
        super().__init__("Email already exists")
        self.email = email


class ConstraintViolation(MarketplaceError):
    """A relational rule was broken (duplicate application, job not open...)."""


class NotFoundError(MarketplaceError):
    http_status = status.HTTP_404_NOT_FOUND

    def __init__(self, entity: str, entity_id: str | None = None):
        super().__init__(f"{entity} not found")
        self.entity = entity
        self.entity_id = entity_id


class InvalidTransition(MarketplaceError):
    http_status = status.HTTP_409_CONFLICT

    def __init__(self, entity: str, current: str | None, target: str, message: str | None = None):
        super().__init__(message or f"Cannot move {entity} from {current} to {target}")
        self.entity = entity
        self.current = current
        self.target = target


def http_status_for(exc: MarketplaceError) -> int:
    return getattr(exc, "http_status", status.HTTP_400_BAD_REQUEST)
