"""Custom exception types for label loading, drafts and entity persistence."""

from __future__ import annotations

from typing import Mapping


class EscrowError(Exception):
    """Base exception for Escrow Central failures."""


class StepValidationError(EscrowError):
    """Raised when the active step has field-level violations."""

    def __init__(self, field_errors: Mapping[str, str], *, step_key: str | None = None) -> None:
        self.field_errors = dict(field_errors)
        self.step_key = step_key
        fields = ", ".join(sorted(self.field_errors))
        super().__init__(f"Please resolve the highlighted errors before continuing ({fields}).")


class NotFoundError(EscrowError):
    """Raised when an entity ID has no stored record."""

    def __init__(self, entity: str, entity_id: str) -> None:
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} not found")


class NetworkError(EscrowError):
    """Raised when a request never produced an HTTP response."""


class ServerError(EscrowError):
    """Raised for non-2xx responses other than 401 and 404."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message)


class AuthExpiredError(EscrowError):
    """Raised when the backend rejects the session token."""

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or "Your session has expired. Please sign in again.")


class LabelFetchError(EscrowError):
    """Raised when a label domain could not be fetched."""

    def __init__(self, domain: str, message: str | None = None) -> None:
        self.domain = domain
        super().__init__(message or f"Failed to fetch {domain} labels")


class InvalidPayloadError(EscrowError):
    """Raised when a request body cannot be stored (e.g. non-numeric amounts)."""

    def __init__(self, message: str, *, field: str | None = None) -> None:
        self.field = field
        super().__init__(message)


RETRYABLE_ERRORS: tuple[type[EscrowError], ...] = (NetworkError, ServerError)


__all__ = [
    "AuthExpiredError",
    "EscrowError",
    "InvalidPayloadError",
    "LabelFetchError",
    "NetworkError",
    "NotFoundError",
    "RETRYABLE_ERRORS",
    "ServerError",
    "StepValidationError",
]
