from __future__ import annotations

from typing import Any

import pytest
import requests

from core.errors import AuthExpiredError, LabelFetchError
from labels.service import LabelsService


class _Response:
    def __init__(self, status_code: int, payload: Any = None) -> None:
        self.status_code = status_code
        self._payload = payload

    def json(self) -> Any:
        if isinstance(self._payload, Exception):
            raise self._payload
        return self._payload


class _Session:
    def __init__(self, *outcomes: Any) -> None:
        self.outcomes = list(outcomes)
        self.calls: list[dict[str, Any]] = []

    def request(self, method: str, url: str, **kwargs: Any) -> _Response:
        self.calls.append({"method": method, "url": url, **kwargs})
        outcome = self.outcomes.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


def _service(session: _Session, token: str = "") -> LabelsService:
    return LabelsService(
        base_url="https://labels.example/api/v1/",
        domain_paths={"budget": "/app-language-translation/budget"},
        token_provider=lambda: token,
        timeout=5.0,
        max_tries=2,
        session=session,
    )


def test_fetch_labels_sends_bearer_token_and_timeout() -> None:
    session = _Session(
        _Response(
            200,
            [
                {"id": 1, "configId": "CDL_A", "configValue": "Alpha", "appLanguageCode": {"languageCode": "EN"}},
                {"configId": "CDL_BROKEN"},
            ],
        )
    )

    items = _service(session, token="secret").fetch_labels("budget")

    assert [item.config_id for item in items] == ["CDL_A"]
    call = session.calls[0]
    assert call["method"] == "GET"
    assert call["url"] == "https://labels.example/api/v1/app-language-translation/budget"
    assert call["headers"]["Authorization"] == "Bearer secret"
    assert call["timeout"] == 5.0


def test_fetch_labels_without_token_omits_authorization_header() -> None:
    session = _Session(_Response(200, []))

    assert _service(session).fetch_labels("budget") == []
    assert "Authorization" not in session.calls[0]["headers"]


def test_paginated_payload_is_unwrapped() -> None:
    payload = {"content": [{"configId": "CDL_A", "configValue": "Alpha", "appLanguageCode": {"languageCode": "EN"}}]}

    items = _service(_Session(_Response(200, payload))).fetch_labels("budget")

    assert items[0].config_value == "Alpha"


def test_unauthorized_response_raises_auth_expired() -> None:
    with pytest.raises(AuthExpiredError):
        _service(_Session(_Response(401, {}))).fetch_labels("budget")


def test_server_error_raises_label_fetch_error() -> None:
    with pytest.raises(LabelFetchError) as excinfo:
        _service(_Session(_Response(503, {}))).fetch_labels("budget")

    assert excinfo.value.domain == "budget"
    assert "HTTP 503" in str(excinfo.value)


def test_connection_errors_are_retried_then_reported() -> None:
    session = _Session(requests.ConnectionError("down"), requests.ConnectionError("still down"))

    with pytest.raises(LabelFetchError):
        _service(session).fetch_labels("budget")

    assert len(session.calls) == 2


def test_transient_failure_recovers_on_retry() -> None:
    session = _Session(requests.Timeout("slow"), _Response(200, []))

    assert _service(session).fetch_labels("budget") == []
    assert len(session.calls) == 2


def test_unknown_domain_is_rejected_without_request() -> None:
    session = _Session()

    with pytest.raises(LabelFetchError):
        _service(session).fetch_labels("payments")

    assert session.calls == []


def test_invalid_json_raises_label_fetch_error() -> None:
    with pytest.raises(LabelFetchError):
        _service(_Session(_Response(200, ValueError("bad json")))).fetch_labels("budget")


def test_create_and_update_label_requests() -> None:
    stored = {"id": 12, "configId": "CDL_NEW", "configValue": "New", "appLanguageCode": {"languageCode": "AR"}}
    session = _Session(_Response(201, stored), _Response(200, {**stored, "configValue": "Renamed"}))
    service = _service(session)

    created = service.create_label("budget", "CDL_NEW", "New", "AR")
    updated = service.update_label("budget", 12, "Renamed")

    assert created.id == 12
    assert updated.config_value == "Renamed"
    assert session.calls[0]["method"] == "POST"
    assert session.calls[0]["json"]["appLanguageCode"] == {"languageCode": "AR"}
    assert session.calls[1]["method"] == "PUT"
    assert session.calls[1]["url"].endswith("/app-language-translation/budget/12")
    assert session.calls[1]["json"] == {"configValue": "Renamed"}
