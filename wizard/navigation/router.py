from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Any, Collection, Mapping, MutableMapping, cast

import streamlit as st

from constants.keys import QueryParamKeys
from core.errors import RETRYABLE_ERRORS, EscrowError, NotFoundError, StepValidationError
from utils.logging_context import log_context
from wizard.navigation.keys import WizardSessionKeys
from wizard.navigation.state import DraftStatus, DraftStore, StepperState
from wizard.services.persistence import DraftPersistence
from wizard_pages import WizardDefinition, WizardPage
from wizard_pages.base import LabelResolver

logger = logging.getLogger(__name__)

_TRUTHY = {"1", "true", "yes"}


def _first_param(query_params: Mapping[str, object], key: str) -> str | None:
    get_all = getattr(query_params, "get_all", None)
    if callable(get_all):
        values = list(get_all(key))
        raw: object = values[0] if values else None
    else:
        raw = query_params.get(key)
        if isinstance(raw, (list, tuple)):
            raw = raw[0] if raw else None
    if raw is None:
        return None
    text = str(raw).strip()
    return text or None


@dataclass(frozen=True)
class ResumeContext:
    """Where a wizard run starts: entity, 1-based step and mode."""

    entity_id: str | None = None
    step: int | None = None
    view_mode: bool = False
    editing: bool = False

    @classmethod
    def from_query_params(
        cls,
        query_params: Mapping[str, object],
        *,
        entity_id: str | None = None,
    ) -> "ResumeContext":
        """Build a resume context from ``mode=view``, ``editing=true`` and ``step=<n>``."""

        raw_step = _first_param(query_params, QueryParamKeys.STEP)
        step: int | None = None
        if raw_step is not None:
            try:
                step = int(raw_step)
            except ValueError:
                logger.debug("Ignoring non-numeric step parameter %r", raw_step)
        mode = (_first_param(query_params, QueryParamKeys.MODE) or "").lower()
        editing = (_first_param(query_params, QueryParamKeys.EDITING) or "").lower() in _TRUTHY
        resolved_id = entity_id or _first_param(query_params, QueryParamKeys.ID)
        return cls(entity_id=resolved_id, step=step, view_mode=mode == "view", editing=editing)

    def initial_index(self, total_steps: int) -> int:
        if self.step is None:
            return 0
        return max(0, min(self.step - 1, total_steps - 1))


@dataclass(frozen=True)
class TransitionResult:
    """Outcome of a controller operation."""

    accepted: bool
    step_index: int
    field_errors: Mapping[str, str] = field(default_factory=dict)
    error: str | None = None
    retryable: bool = False


@dataclass(frozen=True)
class PageProgressSnapshot:
    """Represents the completion ratio for a single wizard page."""

    page: WizardPage
    section_index: int
    total_fields: int
    missing_fields: int
    completion_ratio: float


class StepperController:
    """Drive one entity wizard: validation, draft merging, persistence and resume.

    State lives in ``session_state`` below the wizard's namespace so a
    Streamlit rerun picks up where the previous script run stopped. A fresh
    run starts at ``Draft(0)`` or at the step requested by ``resume``.
    """

    def __init__(
        self,
        wizard: WizardDefinition,
        persistence: DraftPersistence,
        *,
        resume: ResumeContext | None = None,
        session_state: MutableMapping[str, Any] | None = None,
        query_params: MutableMapping[str, Any] | None = None,
    ) -> None:
        self.wizard = wizard
        self._persistence = persistence
        self._query_params = cast(
            MutableMapping[str, Any], query_params if query_params is not None else st.query_params
        )
        self._session_state = cast(
            MutableMapping[str, Any], session_state if session_state is not None else st.session_state
        )
        self._keys = WizardSessionKeys(wizard_id=wizard.wizard_id)
        self._store = DraftStore(self._keys, self._session_state)
        self._in_flight = False
        self._resume = resume if resume is not None else ResumeContext.from_query_params(self._query_params)

        state = self._store.load_state(wizard.total_steps)
        stale_reason = self._stale_reason(state, self._resume) if state is not None else None
        if stale_reason:
            logger.info("Starting a fresh %s run: %s", wizard.wizard_id, stale_reason)
            self._store.clear()
            state = None
        if state is None:
            state = self._initial_state(self._resume)
            self._store.save_state(state)
            self._store.replace_values(wizard.initial_values())
        self._state = state

    @staticmethod
    def _stale_reason(state: StepperState, resume: ResumeContext) -> str | None:
        """Return why a stored run no longer matches ``resume``, or ``None`` to keep it."""

        if state.is_terminal:
            return f"previous run is {state.status.value}"
        if (resume.entity_id or None) != state.entity_id:
            return f"record {resume.entity_id or 'new'} requested, stored run is for {state.entity_id or 'new'}"
        if resume.view_mode != state.is_view_mode:
            return "view mode changed"
        if (resume.editing and bool(resume.entity_id)) != state.is_editing_mode:
            return "editing mode changed"
        return None

    def _discard(self) -> None:
        """Drop the session slot once the run is terminal; the instance keeps its final state."""

        self._store.clear()
        self._query_params.pop(QueryParamKeys.ID, None)
        self._query_params.pop(QueryParamKeys.STEP, None)

    def _initial_state(self, resume: ResumeContext) -> StepperState:
        return StepperState(
            total_steps=self.wizard.total_steps,
            current_step_index=resume.initial_index(self.wizard.total_steps),
            is_view_mode=resume.view_mode,
            is_editing_mode=resume.editing and bool(resume.entity_id),
            entity_id=resume.entity_id,
        )

    @property
    def state(self) -> StepperState:
        return self._state

    @property
    def pages(self) -> tuple[WizardPage, ...]:
        return self.wizard.pages

    @property
    def current_page(self) -> WizardPage:
        return self.wizard.pages[self._state.current_step_index]

    @property
    def values(self) -> Mapping[str, Any]:
        return dict(self._store.values)

    @property
    def field_errors(self) -> dict[str, str]:
        return self._store.field_errors

    @property
    def error(self) -> str | None:
        return self._store.error

    @property
    def is_busy(self) -> bool:
        return self._in_flight

    def _result(self, accepted: bool, *, error: str | None = None, retryable: bool = False) -> TransitionResult:
        return TransitionResult(
            accepted=accepted,
            step_index=self._state.current_step_index,
            field_errors=self._store.field_errors,
            error=error,
            retryable=retryable,
        )

    def _failed(self, error: EscrowError) -> TransitionResult:
        self._store.error = str(error)
        return self._result(False, error=str(error), retryable=isinstance(error, RETRYABLE_ERRORS))

    def _reject(self, message: str) -> TransitionResult:
        logger.info("Rejected transition on %s: %s", self.wizard.wizard_id, message)
        return self._result(False, error=message)

    def _commit(self) -> None:
        self._store.save_state(self._state)
        self._sync_query_params()

    def _sync_query_params(self) -> None:
        self._query_params[QueryParamKeys.STEP] = str(self._state.current_step_index + 1)
        if self._state.entity_id:
            self._query_params[QueryParamKeys.ID] = self._state.entity_id

    def _move_to(self, index: int) -> None:
        self._state.current_step_index = self._state.clamp(index)
        self._commit()

    def _log_context(self) -> Any:
        return log_context(wizard_step=self.current_page.key, entity_id=self._state.entity_id)

    async def _persist(self, payload: Mapping[str, Any]) -> bool:
        """Create or update the record; return ``False`` when the run was abandoned meanwhile."""

        entity_id = self._state.entity_id
        self._in_flight = True
        try:
            if entity_id:
                await asyncio.to_thread(self._persistence.update, entity_id, payload)
            else:
                saved = await asyncio.to_thread(self._persistence.create, payload)
        except EscrowError as error:
            if self._state.status is not DraftStatus.ABANDONED:
                raise
            logger.info("Ignoring failed save of abandoned %s draft: %s", self.wizard.wizard_id, error)
            return False
        finally:
            self._in_flight = False
        if self._state.status is DraftStatus.ABANDONED:
            logger.info("Discarding persistence result for abandoned %s draft", self.wizard.wizard_id)
            return False
        if not entity_id:
            self._state.entity_id = saved.id
            logger.info("Created %s %s", self.wizard.entity_name, saved.id)
        return True

    async def next(self, values: Mapping[str, Any] | None = None) -> TransitionResult:
        """Validate the current step, persist when required and advance."""

        if self._in_flight:
            return self._reject("A save is already in progress")
        if self._state.is_terminal:
            return self._reject(f"Wizard is {self._state.status.value}")
        page = self.current_page
        if self._state.is_view_mode:
            self._move_to(self._state.current_step_index + 1)
            return self._result(True)
        if page.requires_saved_id and not self._state.entity_id:
            return self._reject(f"Please save the {self.wizard.entity_name.lower()} details first")

        try:
            page.check({**self._store.values, **(values or {})})
        except StepValidationError as error:
            logger.debug("Step %s has invalid fields: %s", error.step_key, ", ".join(error.field_errors))
            self._store.field_errors = error.field_errors
            return self._result(False)
        self._store.field_errors = {}
        self._store.merge_values(values or {})

        if page.persists:
            with self._log_context():
                try:
                    if not await self._persist(self.wizard.to_payload(self._store.values)):
                        return self._reject("Wizard was abandoned")
                except EscrowError as error:
                    logger.warning("Saving step %s failed: %s", page.key, error)
                    return self._failed(error)
        self._store.error = None
        self._state.mark_completed(page.key)
        self._move_to(self._state.current_step_index + 1)
        return self._result(True)

    def back(self) -> TransitionResult:
        if self._state.is_terminal:
            return self._reject(f"Wizard is {self._state.status.value}")
        if self._state.current_step_index == 0:
            return self._result(False)
        self._store.field_errors = {}
        self._move_to(self._state.current_step_index - 1)
        return self._result(True)

    def can_jump_to(self, index: int) -> bool:
        state = self._state
        if state.is_terminal or not 0 <= index < state.total_steps:
            return False
        if not (state.is_view_mode or state.is_editing_mode) or not state.entity_id:
            return False
        values = self._store.values
        return all(not page.validate(values) for page in self.wizard.pages[:index])

    def jump_to_step(self, index: int) -> TransitionResult:
        """Jump to the 0-based ``index`` of a persisted record being viewed or edited."""

        if not self.can_jump_to(index):
            return self._reject(f"Cannot jump to step {index + 1}")
        self._store.field_errors = {}
        self._move_to(index)
        return self._result(True)

    def validate_all(self) -> dict[str, str]:
        values = self._store.values
        errors: dict[str, str] = {}
        for page in self.wizard.pages:
            for name, message in page.validate(values).items():
                errors.setdefault(name, message)
        return errors

    async def submit(self, values: Mapping[str, Any] | None = None) -> TransitionResult:
        """Validate every step and persist the full record from the last step."""

        if self._in_flight:
            return self._reject("A save is already in progress")
        if self._state.is_terminal:
            return self._reject(f"Wizard is {self._state.status.value}")
        if self._state.is_view_mode:
            return self._reject("Read-only records cannot be submitted")
        if not self._state.is_last_step:
            return self._reject("Submit is only available on the last step")

        if values:
            self._store.merge_values(values)
        errors = self.validate_all()
        self._store.field_errors = errors
        if errors:
            return self._result(False)

        with self._log_context():
            try:
                if not await self._persist(self.wizard.to_payload(self._store.values)):
                    return self._reject("Wizard was abandoned")
            except EscrowError as error:
                logger.warning("Submitting %s failed: %s", self.wizard.wizard_id, error)
                return self._failed(error)
            logger.info("Submitted %s %s", self.wizard.entity_name, self._state.entity_id)
        self._state.mark_completed(self.current_page.key)
        self._state.status = DraftStatus.SUBMITTED
        self._discard()
        return self._result(True)

    def abandon(self) -> TransitionResult:
        if self._state.is_terminal:
            return self._reject(f"Wizard is {self._state.status.value}")
        self._state.status = DraftStatus.ABANDONED
        self._discard()
        return self._result(True)

    def update_fields(self, values: Mapping[str, Any]) -> TransitionResult:
        """Merge ``values`` into the draft without validating them."""

        if self._state.is_view_mode:
            return self._reject("Record is read-only")
        if self._state.is_terminal:
            return self._reject(f"Wizard is {self._state.status.value}")
        self._store.merge_values(values)
        return self._result(True)

    async def restore(self) -> bool:
        """Seed the draft from the stored record of the resumed entity."""

        entity_id = self._state.entity_id
        if not entity_id:
            return False
        with log_context(entity_id=entity_id):
            try:
                record = await asyncio.to_thread(self._persistence.fetch, entity_id)
            except NotFoundError as error:
                logger.warning("Cannot resume %s: %s", entity_id, error)
                self._store.error = str(error)
                return False
            except EscrowError as error:
                logger.warning("Loading %s failed: %s", entity_id, error)
                self._store.error = str(error)
                return False
        self._store.replace_values(self.wizard.from_record(record))
        self._store.error = None
        return True

    def reset(self) -> TransitionResult:
        """Start a fresh run at ``Draft(0)`` with default values."""

        self._in_flight = False
        self._store.clear()
        self._state = StepperState(total_steps=self.wizard.total_steps)
        self._store.replace_values(self.wizard.initial_values())
        self._store.save_state(self._state)
        self._query_params.pop(QueryParamKeys.ID, None)
        self._sync_query_params()
        return self._result(True)

    def _jump_for_edit(self, index: int | None, what: str) -> TransitionResult:
        if self._state.is_terminal:
            return self._reject(f"Wizard is {self._state.status.value}")
        if not self._state.entity_id:
            return self._reject(f"No {self.wizard.entity_name.lower()} ID found to {what}")
        if index is None:
            return self._reject(f"This wizard has no step to {what}")
        self._store.field_errors = {}
        self._move_to(index)
        return self._result(True)

    def edit(self) -> TransitionResult:
        """Return to the first step of a saved record."""

        return self._jump_for_edit(0, "edit")

    def edit_documents(self) -> TransitionResult:
        return self._jump_for_edit(
            self.wizard.first_index(lambda page: page.requires_saved_id),
            "manage documents",
        )

    def step_labels(self, resolve: LabelResolver) -> list[str]:
        return [page.label_for(resolve) for page in self.wizard.pages]

    def review_summary(self, resolve: LabelResolver) -> list[tuple[str, dict[str, Any]]]:
        """Group the draft values shown on the review step under their step label.

        Pages without ``summary_fields`` list every field they collect; pages
        that collect nothing are left out.
        """

        values = self._store.values
        summary: list[tuple[str, dict[str, Any]]] = []
        for page in self.wizard.pages:
            names = page.summary_fields or page.field_names
            if names:
                summary.append((page.label_for(resolve), {name: values.get(name, "") for name in names}))
        return summary

    def build_progress_snapshots(self) -> list[PageProgressSnapshot]:
        """Return per-page completion stats for diagnostics and tests."""

        values = self._store.values
        completed_steps = set(self._state.completed_steps)
        snapshots: list[PageProgressSnapshot] = []
        for index, page in enumerate(self.wizard.pages):
            total = len(page.fields)
            missing = len(page.validate(values))
            snapshots.append(
                PageProgressSnapshot(
                    page=page,
                    section_index=index,
                    total_fields=total,
                    missing_fields=missing,
                    completion_ratio=self._calculate_completion_ratio(
                        total=total,
                        missing=missing,
                        page_key=page.key,
                        completed_steps=completed_steps,
                    ),
                )
            )
        return snapshots

    @staticmethod
    def _calculate_completion_ratio(
        *,
        total: int,
        missing: int,
        page_key: str,
        completed_steps: Collection[str],
    ) -> float:
        if total == 0:
            return 1.0 if page_key in completed_steps else 0.0
        ratio = 1.0 - (missing / total)
        return max(0.0, min(1.0, ratio))


__all__ = [
    "PageProgressSnapshot",
    "ResumeContext",
    "StepperController",
    "TransitionResult",
]
