"""Record storage behind the CRUD routes."""

from __future__ import annotations

import copy
import threading
from typing import Any, Mapping, Protocol

Record = dict[str, Any]


class Repository(Protocol):
    """Minimal keyed storage used by the route handlers."""

    def get(self, record_id: str) -> Record | None: ...

    def list(self) -> list[Record]: ...

    def put(self, record_id: str, record: Mapping[str, Any]) -> Record: ...

    def delete(self, record_id: str) -> bool: ...


class InMemoryRepository:
    """Insertion-ordered in-process store returning defensive copies."""

    def __init__(self) -> None:
        self._records: dict[str, Record] = {}
        self._lock = threading.Lock()

    def get(self, record_id: str) -> Record | None:
        with self._lock:
            record = self._records.get(record_id)
            return copy.deepcopy(record) if record is not None else None

    def list(self) -> list[Record]:
        with self._lock:
            return [copy.deepcopy(record) for record in self._records.values()]

    def put(self, record_id: str, record: Mapping[str, Any]) -> Record:
        stored = copy.deepcopy(dict(record))
        with self._lock:
            self._records[record_id] = stored
        return copy.deepcopy(stored)

    def delete(self, record_id: str) -> bool:
        with self._lock:
            return self._records.pop(record_id, None) is not None

    def __len__(self) -> int:
        return len(self._records)


__all__ = ["InMemoryRepository", "Record", "Repository"]
