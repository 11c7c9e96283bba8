"""Central configuration for Escrow Central.

Values are resolved from Streamlit secrets first and environment variables
second. A local ``.env`` file is loaded on import so development setups can
keep endpoints and tokens out of the shell profile.

Set ``LABELS_API_BASE_URL`` to point the label catalogue at a backend and
``ESCROW_API_BASE_URL`` for the entity CRUD endpoints used by the wizards.
"""

from __future__ import annotations

import logging
import os
import warnings
from typing import Mapping

import streamlit as st
from dotenv import load_dotenv

load_dotenv()


logger = logging.getLogger(__name__)

_TRUTHY_ENV_VALUES: tuple[str, ...] = ("1", "true", "yes", "y", "on")
_FALSY_ENV_VALUES: tuple[str, ...] = ("0", "false", "no", "n", "off")


def _coerce_secret_value(value: object) -> str:
    """Return ``value`` as a trimmed string without raising on unexpected types."""

    if value is None:
        return ""
    if isinstance(value, str):
        return value.strip()
    if isinstance(value, (bytes, bytearray)):
        try:
            return value.decode("utf-8").strip()
        except UnicodeDecodeError:
            return ""
    return str(value).strip()


def get_setting(name: str, default: str = "") -> str:
    """Return ``name`` from Streamlit secrets, the ``escrow`` section or the environment."""

    try:
        direct_secret = st.secrets[name]
    except Exception:
        direct_secret = None
    value = _coerce_secret_value(direct_secret)
    if value:
        return value

    try:
        section = st.secrets["escrow"]
    except Exception:
        section = None
    if isinstance(section, Mapping):
        section_value = _coerce_secret_value(section.get(name))
        if section_value:
            return section_value

    env_value = _coerce_secret_value(os.getenv(name))
    if env_value:
        return env_value
    return default


def _normalise_timeout(value: object | None, *, default: float = 30.0) -> float:
    """Return a positive timeout value in seconds."""

    if value is None:
        return default
    candidate = value
    if isinstance(candidate, str):
        stripped = candidate.strip()
        if not stripped:
            return default
        try:
            candidate = float(stripped)
        except ValueError:
            warnings.warn(
                "Unsupported REQUEST_TIMEOUT '%s'; falling back to %.1f seconds." % (candidate, default),
                RuntimeWarning,
            )
            return default
    if isinstance(candidate, (int, float)) and not isinstance(candidate, bool):
        timeout = float(candidate)
        if timeout > 0:
            return timeout
    warnings.warn(
        "REQUEST_TIMEOUT must be a positive number; falling back to %.1f seconds." % default,
        RuntimeWarning,
    )
    return default


def _normalise_bool(value: object | None, *, default: bool = False) -> bool:
    """Return ``value`` converted to ``bool`` where possible."""

    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return bool(value)
    if isinstance(value, str):
        candidate = value.strip().lower()
        if not candidate:
            return default
        if candidate in _TRUTHY_ENV_VALUES:
            return True
        if candidate in _FALSY_ENV_VALUES:
            return False
    warnings.warn(
        "Unsupported boolean value %r; falling back to %s." % (value, default),
        RuntimeWarning,
    )
    return default


def _normalise_positive_int(value: object | None, *, default: int) -> int:
    """Return ``value`` as a positive integer or ``default``."""

    if isinstance(value, str):
        value = value.strip() or None
    if value is None:
        return default
    try:
        parsed = int(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        warnings.warn("Unsupported integer value %r; falling back to %d." % (value, default), RuntimeWarning)
        return default
    return parsed if parsed > 0 else default


def _normalise_language(value: str | None, *, default: str = "EN") -> str:
    candidate = (value or "").strip().upper()
    return candidate or default


def _split_origins(value: str) -> list[str]:
    return [origin.strip() for origin in value.split(",") if origin.strip()]


ESCROW_ENV = get_setting("ESCROW_ENV", "development")
DEFAULT_LANGUAGE = _normalise_language(get_setting("DEFAULT_LANGUAGE"))
LABELS_API_BASE_URL = get_setting("LABELS_API_BASE_URL", "http://localhost:8080/api/v1").rstrip("/")
ESCROW_API_BASE_URL = get_setting("ESCROW_API_BASE_URL", "http://localhost:8000/api").rstrip("/")
REQUEST_TIMEOUT = _normalise_timeout(get_setting("REQUEST_TIMEOUT") or None)
LABEL_RETRY_ATTEMPTS = _normalise_positive_int(get_setting("LABEL_RETRY_ATTEMPTS") or None, default=3)
LOG_LEVEL = get_setting("LOG_LEVEL", "INFO").upper()
CORS_ORIGINS = _split_origins(get_setting("CORS_ORIGINS", "http://localhost:8501,http://localhost:3000"))
LOAD_LABELS_ON_STARTUP = _normalise_bool(get_setting("LOAD_LABELS_ON_STARTUP") or None, default=True)

# Label catalogue endpoints, relative to ``LABELS_API_BASE_URL``.
LABEL_DOMAIN_PATHS: dict[str, str] = {
    "budget": "/app-language-translation/budget",
    "master_budget": "/app-language-translation/budget-master",
    "capital_partner": "/app-language-translation/owner-registry",
}

_missing_token_logged = False


def get_api_token() -> str:
    """Return the bearer token used for label and entity requests."""

    global _missing_token_logged

    token = get_setting("ESCROW_API_TOKEN")
    if token:
        _missing_token_logged = False
        return token
    if not _missing_token_logged:
        logger.info("ESCROW_API_TOKEN not configured; requests are sent without an Authorization header.")
        _missing_token_logged = True
    return ""


__all__ = [
    "CORS_ORIGINS",
    "DEFAULT_LANGUAGE",
    "ESCROW_API_BASE_URL",
    "ESCROW_ENV",
    "LABELS_API_BASE_URL",
    "LABEL_DOMAIN_PATHS",
    "LABEL_RETRY_ATTEMPTS",
    "LOAD_LABELS_ON_STARTUP",
    "LOG_LEVEL",
    "REQUEST_TIMEOUT",
    "get_api_token",
    "get_setting",
]
