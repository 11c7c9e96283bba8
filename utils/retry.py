"""Exponential backoff for calls against the label and entity backends."""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, Mapping, ParamSpec, TypeVar

import backoff
import requests

logger = logging.getLogger(__name__)

T = TypeVar("T")
P = ParamSpec("P")

# Transport-level failures only; HTTP status codes are mapped by the callers.
REQUEST_RETRY_EXCEPTIONS: tuple[type[Exception], ...] = (
    requests.ConnectionError,
    requests.Timeout,
)


def _never_give_up(_: Exception) -> bool:
    return False


def _log_backoff(details: Mapping[str, Any]) -> None:
    target = details.get("target")
    logger.info(
        "Retrying %s in %.2fs after attempt %s",
        getattr(target, "__name__", "request"),
        details.get("wait", 0.0),
        details.get("tries"),
    )


def _log_giveup(details: Mapping[str, Any]) -> None:
    logger.warning("Giving up after %s attempts (%.2fs)", details.get("tries"), details.get("elapsed", 0.0))


def retry_with_backoff(
    *,
    exceptions: Iterable[type[Exception]] = REQUEST_RETRY_EXCEPTIONS,
    max_tries: int = 3,
    max_time: float | None = None,
    giveup: Callable[[Exception], bool] | None = None,
    jitter: Any = backoff.full_jitter,
) -> Callable[[Callable[P, T]], Callable[P, T]]:
    """Return a decorator retrying ``exceptions`` with exponential backoff.

    Args:
        exceptions: Exception types that trigger another attempt.
        max_tries: Total attempts including the first one.
        max_time: Optional ceiling in seconds across all attempts.
        giveup: Predicate that stops retrying early for a raised exception.
        jitter: ``backoff`` jitter function; ``None`` gives deterministic waits.
    """

    retry_on = tuple(exceptions)

    def decorator(func: Callable[P, T]) -> Callable[P, T]:
        return backoff.on_exception(
            backoff.expo,
            retry_on,
            max_tries=max_tries,
            max_time=max_time,
            giveup=giveup or _never_give_up,
            jitter=jitter,
            on_backoff=_log_backoff,
            on_giveup=_log_giveup,
            logger=None,
        )(func)

    return decorator


__all__ = ["REQUEST_RETRY_EXCEPTIONS", "retry_with_backoff"]
