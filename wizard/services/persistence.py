"""Draft persistence contract and the HTTP client backing it."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Protocol

import requests

import config
from core.errors import AuthExpiredError, NetworkError, NotFoundError, ServerError
from utils.retry import retry_with_backoff

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SavedRecord:
    """Outcome of a create call: server-assigned id plus the stored record."""

    id: str
    reference_code: str | None = None
    data: Mapping[str, Any] = field(default_factory=dict)


class DraftPersistence(Protocol):
    """Blocking persistence calls; the stepper runs them off the event loop."""

    def create(self, payload: Mapping[str, Any]) -> SavedRecord: ...

    def update(self, entity_id: str, payload: Mapping[str, Any]) -> Mapping[str, Any]: ...

    def fetch(self, entity_id: str) -> Mapping[str, Any]: ...


class EntityApiClient:
    """``DraftPersistence`` implementation for one CRUD resource.

    ``resource_path`` is appended to ``base_url``; e.g. ``/budgets/master``
    below ``http://host/api``. Any object with a ``requests``-compatible
    ``request(method, url, json=, headers=, timeout=)`` can act as session.
    """

    def __init__(
        self,
        resource_path: str,
        *,
        entity_name: str = "Record",
        base_url: str | None = None,
        session: Any = None,
        timeout: float | None = None,
        token_provider: Callable[[], str] | None = None,
        max_tries: int = 3,
    ) -> None:
        root = base_url if base_url is not None else config.ESCROW_API_BASE_URL
        self.url = f"{root.rstrip('/')}/{resource_path.strip('/')}"
        self.entity_name = entity_name
        self.timeout = timeout if timeout is not None else config.REQUEST_TIMEOUT
        self.max_tries = max_tries
        self._session = session if session is not None else requests.Session()
        self._token_provider = token_provider or config.get_api_token

    def _headers(self) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        token = self._token_provider()
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    def _send(self, method: str, url: str, payload: Mapping[str, Any] | None) -> Any:
        return self._session.request(
            method,
            url,
            json=dict(payload) if payload is not None else None,
            headers=self._headers(),
            timeout=self.timeout,
        )

    def _request(
        self,
        method: str,
        url: str,
        payload: Mapping[str, Any] | None = None,
        *,
        entity_id: str | None = None,
    ) -> Any:
        send = self._send
        if method == "GET":
            send = retry_with_backoff(max_tries=self.max_tries)(send)
        try:
            response = send(method, url, payload)
        except requests.RequestException as error:
            logger.warning("%s %s failed", method, url, exc_info=error)
            raise NetworkError(f"Could not reach the server ({error.__class__.__name__})") from error

        status = response.status_code
        if status == 401:
            raise AuthExpiredError()
        if status == 404:
            raise NotFoundError(self.entity_name, entity_id or "")
        try:
            body = response.json()
        except ValueError:
            body = None
        if status >= 400:
            message = body.get("message") if isinstance(body, Mapping) else None
            logger.warning("%s %s returned HTTP %s", method, url, status)
            raise ServerError(message or f"Request failed with HTTP {status}", status_code=status)
        return body

    def create(self, payload: Mapping[str, Any]) -> SavedRecord:
        body = self._request("POST", self.url, payload)
        if not isinstance(body, Mapping) or not body.get("id"):
            raise ServerError(f"Create {self.entity_name} returned no id")
        data = body.get("data")
        return SavedRecord(
            id=str(body["id"]),
            reference_code=body.get("referenceCode"),
            data=data if isinstance(data, Mapping) else {},
        )

    def update(self, entity_id: str, payload: Mapping[str, Any]) -> Mapping[str, Any]:
        body = self._request("PUT", f"{self.url}/{entity_id}", payload, entity_id=entity_id)
        return self._unwrap(body)

    def fetch(self, entity_id: str) -> Mapping[str, Any]:
        body = self._request("GET", f"{self.url}/{entity_id}", entity_id=entity_id)
        return self._unwrap(body)

    def list(self) -> list[Mapping[str, Any]]:
        body = self._request("GET", self.url)
        records = body.get("budgets") if isinstance(body, Mapping) else None
        return list(records) if isinstance(records, list) else []

    def delete(self, entity_id: str) -> None:
        self._request("DELETE", f"{self.url}/{entity_id}", entity_id=entity_id)

    def form_options(self) -> Mapping[str, Any]:
        body = self._request("GET", f"{self.url}/form-options")
        options = body.get("options") if isinstance(body, Mapping) else None
        return options if isinstance(options, Mapping) else {}

    @staticmethod
    def _unwrap(body: Any) -> Mapping[str, Any]:
        if isinstance(body, Mapping):
            record = body.get("budget")
            if isinstance(record, Mapping):
                return record
        raise ServerError("Unexpected response shape")


def budget_client(**kwargs: Any) -> EntityApiClient:
    return EntityApiClient("budgets/management-firm", entity_name="Budget", **kwargs)


def master_budget_client(**kwargs: Any) -> EntityApiClient:
    return EntityApiClient("budgets/master", entity_name="Master Budget", **kwargs)


__all__ = [
    "DraftPersistence",
    "EntityApiClient",
    "SavedRecord",
    "budget_client",
    "master_budget_client",
]
