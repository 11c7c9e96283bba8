"""Context-aware logging: every record carries the session, entity and wizard step.

The values live in :mod:`contextvars` so they follow ``asyncio`` tasks and the
worker threads started through ``asyncio.to_thread``.
"""

from __future__ import annotations

import contextvars
import logging
from contextlib import contextmanager
from typing import Iterator

LOG_FORMAT = (
    "%(asctime)s %(levelname)s [session=%(session_id)s entity=%(entity_id)s "
    "step=%(wizard_step)s] %(name)s: %(message)s"
)

_UNSET = "-"
_CONTEXT: dict[str, contextvars.ContextVar[str]] = {
    name: contextvars.ContextVar(f"escrow_{name}", default=_UNSET)
    for name in ("session_id", "entity_id", "wizard_step")
}
_factory_installed = False


def _as_field(value: object | None) -> str:
    text = "" if value is None else str(value).strip()
    return text or _UNSET


def current_context() -> dict[str, str]:
    """Return the context fields bound for the running task or thread."""

    return {name: var.get() for name, var in _CONTEXT.items()}


class ContextFilter(logging.Filter):
    """Fill in context fields for records created before the factory was installed."""

    def filter(self, record: logging.LogRecord) -> bool:  # noqa: D401 - logging protocol
        for name, value in current_context().items():
            if not hasattr(record, name):
                setattr(record, name, value)
        return True


def _install_record_factory() -> None:
    global _factory_installed
    if _factory_installed:
        return
    previous = logging.getLogRecordFactory()

    def _factory(*args: object, **kwargs: object) -> logging.LogRecord:
        record = previous(*args, **kwargs)
        record.__dict__.update(current_context())
        return record

    logging.setLogRecordFactory(_factory)
    _factory_installed = True


def _resolve_level(level: int | str) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).strip().upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def configure_logging(*, level: int | str = logging.INFO) -> None:
    """Install the context-aware format on the root logger.

    Safe to call repeatedly: handlers that already carry a formatter keep it
    and the record factory is only wrapped once.
    """

    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=_resolve_level(level), format=LOG_FORMAT)
    for handler in root.handlers:
        if handler.formatter is None:
            handler.setFormatter(logging.Formatter(LOG_FORMAT))
        if not any(isinstance(flt, ContextFilter) for flt in handler.filters):
            handler.addFilter(ContextFilter())
    _install_record_factory()


def set_session_id(session_id: str | None) -> None:
    """Bind the Streamlit session for every following record of this context."""

    configure_logging()
    _CONTEXT["session_id"].set(_as_field(session_id))


def set_entity_id(entity_id: str | int | None) -> None:
    _CONTEXT["entity_id"].set(_as_field(entity_id))


@contextmanager
def log_context(
    *,
    session_id: str | None = None,
    wizard_step: str | None = None,
    entity_id: str | int | None = None,
) -> Iterator[None]:
    """Temporarily bind context fields; ``None`` leaves a field unchanged."""

    overrides = {"session_id": session_id, "wizard_step": wizard_step, "entity_id": entity_id}
    tokens = [
        (_CONTEXT[name], _CONTEXT[name].set(_as_field(value)))
        for name, value in overrides.items()
        if value is not None
    ]
    try:
        yield
    finally:
        for var, token in reversed(tokens):
            var.reset(token)


__all__ = [
    "ContextFilter",
    "LOG_FORMAT",
    "configure_logging",
    "current_context",
    "log_context",
    "set_entity_id",
    "set_session_id",
]
