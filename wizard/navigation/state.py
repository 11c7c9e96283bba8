"""Stepper and draft state kept in a namespaced session-state slot."""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, Mapping, MutableMapping

from wizard.navigation.keys import WizardSessionKeys

logger = logging.getLogger(__name__)


class DraftStatus(str, Enum):
    DRAFT = "draft"
    SUBMITTED = "submitted"
    ABANDONED = "abandoned"


@dataclass
class StepperState:
    """Position and mode of a wizard run.

    ``current_step_index`` always stays inside ``[0, total_steps)`` and the
    editing mode is only valid for a persisted record.
    """

    total_steps: int
    current_step_index: int = 0
    is_view_mode: bool = False
    is_editing_mode: bool = False
    entity_id: str | None = None
    status: DraftStatus = DraftStatus.DRAFT
    completed_steps: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.total_steps < 1:
            raise ValueError("A wizard needs at least one step")
        if not 0 <= self.current_step_index < self.total_steps:
            raise ValueError(f"Step index {self.current_step_index} outside [0, {self.total_steps})")
        if self.is_editing_mode and not self.entity_id:
            raise ValueError("Editing mode requires an entity id")
        self.status = DraftStatus(self.status)

    @property
    def is_terminal(self) -> bool:
        return self.status is not DraftStatus.DRAFT

    @property
    def is_last_step(self) -> bool:
        return self.current_step_index == self.total_steps - 1

    def clamp(self, index: int) -> int:
        return max(0, min(index, self.total_steps - 1))

    def mark_completed(self, step_key: str) -> None:
        if step_key not in self.completed_steps:
            self.completed_steps.append(step_key)

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["status"] = self.status.value
        return data

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "StepperState":
        completed = data.get("completed_steps")
        return cls(
            total_steps=int(data["total_steps"]),
            current_step_index=int(data.get("current_step_index", 0)),
            is_view_mode=bool(data.get("is_view_mode", False)),
            is_editing_mode=bool(data.get("is_editing_mode", False)),
            entity_id=data.get("entity_id") or None,
            status=DraftStatus(data.get("status", DraftStatus.DRAFT.value)),
            completed_steps=[step for step in completed if isinstance(step, str)]
            if isinstance(completed, list)
            else [],
        )


class DraftStore:
    """Read and write one wizard's state inside a session-state mapping."""

    def __init__(self, keys: WizardSessionKeys, session_state: MutableMapping[str, Any]) -> None:
        self.keys = keys
        self._session_state = session_state

    def load_state(self, total_steps: int) -> StepperState | None:
        raw = self._session_state.get(self.keys.stepper_state)
        if not isinstance(raw, Mapping):
            return None
        try:
            state = StepperState.from_mapping(raw)
        except (KeyError, TypeError, ValueError) as error:
            logger.warning("Discarding invalid stepper state for %s: %s", self.keys.wizard_id, error)
            return None
        if state.total_steps != total_steps:
            logger.info("Step count changed for %s; starting a fresh run", self.keys.wizard_id)
            return None
        return state

    def save_state(self, state: StepperState) -> None:
        self._session_state[self.keys.stepper_state] = state.to_dict()

    @property
    def values(self) -> dict[str, Any]:
        raw = self._session_state.get(self.keys.draft_values)
        if isinstance(raw, dict):
            return raw
        values: dict[str, Any] = dict(raw) if isinstance(raw, Mapping) else {}
        self._session_state[self.keys.draft_values] = values
        return values

    def merge_values(self, updates: Mapping[str, Any]) -> dict[str, Any]:
        values = self.values
        values.update(updates)
        return values

    def replace_values(self, values: Mapping[str, Any]) -> None:
        self._session_state[self.keys.draft_values] = dict(values)

    @property
    def field_errors(self) -> dict[str, str]:
        raw = self._session_state.get(self.keys.field_errors)
        return dict(raw) if isinstance(raw, Mapping) else {}

    @field_errors.setter
    def field_errors(self, errors: Mapping[str, str]) -> None:
        self._session_state[self.keys.field_errors] = dict(errors)

    @property
    def error(self) -> str | None:
        raw = self._session_state.get(self.keys.last_error)
        return raw if isinstance(raw, str) and raw else None

    @error.setter
    def error(self, message: str | None) -> None:
        self._session_state[self.keys.last_error] = message

    def clear(self) -> None:
        for key in self.keys.all_keys():
            self._session_state.pop(key, None)


__all__ = ["DraftStatus", "DraftStore", "StepperState"]
