"""Core package for Escrow Central errors."""

from .errors import (
    AuthExpiredError,
    EscrowError,
    InvalidPayloadError,
    LabelFetchError,
    NetworkError,
    NotFoundError,
    ServerError,
    StepValidationError,
)

__all__ = [
    "AuthExpiredError",
    "EscrowError",
    "InvalidPayloadError",
    "LabelFetchError",
    "NetworkError",
    "NotFoundError",
    "ServerError",
    "StepValidationError",
]
