"""Explicit application bootstrap: load labels once, then flag the session ready."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Iterable, MutableMapping, cast

import streamlit as st

import config
from constants.keys import StateKeys
from labels.store import LabelCacheStore
from utils.logging_context import configure_logging

logger = logging.getLogger(__name__)


def _session(session_state: MutableMapping[str, Any] | None) -> MutableMapping[str, Any]:
    return cast(MutableMapping[str, Any], session_state if session_state is not None else st.session_state)


def is_app_ready(session_state: MutableMapping[str, Any] | None = None) -> bool:
    """Return ``True`` once :func:`bootstrap_app` has completed for the session."""

    return bool(_session(session_state).get(StateKeys.APP_READY))


def get_label_store(session_state: MutableMapping[str, Any] | None = None) -> LabelCacheStore | None:
    store = _session(session_state).get(StateKeys.LABEL_STORE)
    return store if isinstance(store, LabelCacheStore) else None


async def bootstrap_app(
    session_state: MutableMapping[str, Any] | None = None,
    store: LabelCacheStore | None = None,
    *,
    domains: Iterable[str] | None = None,
    load_labels: bool | None = None,
) -> LabelCacheStore:
    """Prepare the session before the first render.

    Label load failures do not block readiness: resolvers fall back to the
    static tables and the error is kept under ``StateKeys.APP_BOOTSTRAP_ERROR``.
    """

    state = _session(session_state)
    existing = get_label_store(state)
    if existing is not None and is_app_ready(state):
        return existing

    configure_logging(level=config.LOG_LEVEL)
    label_store = store or existing or LabelCacheStore()
    state[StateKeys.LABEL_STORE] = label_store
    state.setdefault(StateKeys.LANG, config.DEFAULT_LANGUAGE)

    should_load = config.LOAD_LABELS_ON_STARTUP if load_labels is None else load_labels
    if should_load:
        await label_store.load_labels(domains)
    state[StateKeys.APP_BOOTSTRAP_ERROR] = label_store.error
    if label_store.error:
        logger.warning("App bootstrapped with label errors: %s", label_store.error)
    state[StateKeys.APP_READY] = True
    return label_store


def ensure_app_ready(session_state: MutableMapping[str, Any] | None = None) -> LabelCacheStore:
    """Synchronous entry point for Streamlit scripts."""

    state = _session(session_state)
    existing = get_label_store(state)
    if existing is not None and is_app_ready(state):
        return existing
    return asyncio.run(bootstrap_app(state))


def reset_app_state(session_state: MutableMapping[str, Any] | None = None) -> None:
    state = _session(session_state)
    for key in (StateKeys.APP_READY, StateKeys.APP_BOOTSTRAP_ERROR, StateKeys.LABEL_STORE):
        state.pop(key, None)


__all__ = [
    "bootstrap_app",
    "ensure_app_ready",
    "get_label_store",
    "is_app_ready",
    "reset_app_state",
]
