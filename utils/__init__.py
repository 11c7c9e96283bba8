"""Utility helpers for Escrow Central."""

from __future__ import annotations

from .logging_context import configure_logging, log_context
from .retry import REQUEST_RETRY_EXCEPTIONS, retry_with_backoff

__all__ = ["REQUEST_RETRY_EXCEPTIONS", "configure_logging", "log_context", "retry_with_backoff"]
