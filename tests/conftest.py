from collections.abc import Iterator, MutableMapping, Sequence
from pathlib import Path
import sys
from dataclasses import dataclass
from typing import Dict, List

import streamlit as st

import pytest


ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import config


@dataclass
class _SessionDict(dict[str, object]):
    """Lightweight replacement for ``st.session_state`` during tests."""

    def clear(self) -> None:  # type: ignore[override]
        super().clear()


class _QueryParamStore(MutableMapping[str, List[str]]):
    """In-memory stand-in for Streamlit's query param proxy."""

    def __init__(self, initial: Dict[str, object] | None = None) -> None:
        self._data: Dict[str, List[str]] = {}
        for key, value in (initial or {}).items():
            self[key] = value

    def __getitem__(self, key: str) -> List[str]:
        return self._data[key]

    def __setitem__(self, key: str, value: object) -> None:
        if isinstance(value, str):
            normalized = [value]
        elif isinstance(value, Sequence):
            normalized = [str(item) for item in value]
        else:
            normalized = [str(value)]
        self._data[key] = normalized

    def __delitem__(self, key: str) -> None:
        del self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def get_all(self, key: str) -> List[str]:
        return list(self._data.get(key, []))


@pytest.fixture(autouse=True)
def _stub_streamlit_session_state(monkeypatch: pytest.MonkeyPatch) -> None:
    """Replace Streamlit's runtime-bound session state with a plain dictionary."""

    session_state = _SessionDict()
    monkeypatch.setattr(st, "session_state", session_state, raising=False)
    yield


@pytest.fixture(autouse=True)
def query_params(monkeypatch: pytest.MonkeyPatch) -> _QueryParamStore:
    """Provide an isolated query-param store for navigation tests."""

    store = _QueryParamStore()
    monkeypatch.setattr(st, "query_params", store, raising=False)
    return store


@pytest.fixture(autouse=True)
def _isolate_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep real secrets and tokens out of the tests."""

    monkeypatch.setattr(st, "secrets", {}, raising=False)
    monkeypatch.delenv("ESCROW_API_TOKEN", raising=False)
    monkeypatch.setattr(config, "_missing_token_logged", False, raising=False)
    yield


@pytest.fixture()
def make_query_params():
    return _QueryParamStore
