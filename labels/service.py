"""HTTP client for the label catalogue endpoints."""

from __future__ import annotations

import logging
from typing import Any, Callable, Mapping

import requests

import config
from core.errors import AuthExpiredError, LabelFetchError
from labels.models import LabelItem
from utils.retry import retry_with_backoff

logger = logging.getLogger(__name__)

_HEADERS = {"Accept": "application/json", "User-Agent": "EscrowCentral/1.0"}


class LabelsService:
    """Fetch, create and update catalogue labels per domain.

    ``domain_paths`` maps a label domain (``"budget"``, ``"capital_partner"``,
    ...) to its endpoint path below ``base_url``.
    """

    def __init__(
        self,
        *,
        base_url: str | None = None,
        domain_paths: Mapping[str, str] | None = None,
        token_provider: Callable[[], str] | None = None,
        timeout: float | None = None,
        max_tries: int | None = None,
        session: Any = None,
    ) -> None:
        self.base_url = (base_url if base_url is not None else config.LABELS_API_BASE_URL).rstrip("/")
        self.domain_paths = dict(domain_paths if domain_paths is not None else config.LABEL_DOMAIN_PATHS)
        self._token_provider = token_provider or config.get_api_token
        self.timeout = timeout if timeout is not None else config.REQUEST_TIMEOUT
        self.max_tries = max_tries if max_tries is not None else config.LABEL_RETRY_ATTEMPTS
        self._session = session if session is not None else requests

    @property
    def domains(self) -> tuple[str, ...]:
        return tuple(self.domain_paths)

    def _url_for(self, domain: str, suffix: str = "") -> str:
        try:
            path = self.domain_paths[domain]
        except KeyError:
            raise LabelFetchError(domain, f"Unknown label domain '{domain}'") from None
        return f"{self.base_url}{path}{suffix}"

    def _headers(self) -> dict[str, str]:
        headers = dict(_HEADERS)
        token = self._token_provider()
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    def _send(self, method: str, url: str, payload: Mapping[str, Any] | None = None) -> Any:
        @retry_with_backoff(max_tries=self.max_tries)
        def _call() -> Any:
            return self._session.request(
                method,
                url,
                json=payload,
                headers=self._headers(),
                timeout=self.timeout,
            )

        return _call()

    def _request(self, domain: str, method: str, url: str, payload: Mapping[str, Any] | None = None) -> Any:
        try:
            response = self._send(method, url, payload)
        except requests.RequestException as error:
            logger.warning("Label request %s %s failed", method, url, exc_info=error)
            raise LabelFetchError(domain) from error
        if response.status_code == 401:
            raise AuthExpiredError()
        if response.status_code >= 400:
            logger.warning("Label request %s %s returned HTTP %s", method, url, response.status_code)
            raise LabelFetchError(domain, f"Failed to fetch {domain} labels (HTTP {response.status_code})")
        try:
            return response.json()
        except ValueError as error:
            raise LabelFetchError(domain, f"Invalid label payload for {domain}") from error

    def fetch_labels(self, domain: str) -> list[LabelItem]:
        """Return the raw catalogue items for ``domain``."""

        payload = self._request(domain, "GET", self._url_for(domain))
        if isinstance(payload, Mapping):
            payload = payload.get("content", payload.get("labels", []))
        if not isinstance(payload, list):
            raise LabelFetchError(domain, f"Invalid label payload for {domain}")
        items: list[LabelItem] = []
        for raw in payload:
            try:
                items.append(LabelItem.model_validate(raw))
            except ValueError:
                logger.debug("Ignoring malformed %s label item: %r", domain, raw)
        logger.info("Fetched %d %s labels", len(items), domain)
        return items

    def create_label(self, domain: str, config_id: str, value: str, language_code: str = "EN") -> LabelItem:
        """Create a new catalogue entry and return it as stored by the backend."""

        body = {
            "configId": config_id,
            "configValue": value,
            "appLanguageCode": {"languageCode": language_code},
            "enabled": True,
        }
        payload = self._request(domain, "POST", self._url_for(domain), body)
        return LabelItem.model_validate(payload)

    def update_label(self, domain: str, label_id: int, value: str) -> LabelItem:
        """Change the value of an existing catalogue entry."""

        payload = self._request(domain, "PUT", self._url_for(domain, f"/{label_id}"), {"configValue": value})
        return LabelItem.model_validate(payload)


__all__ = ["LabelsService"]
