from __future__ import annotations

import pytest

from wizard.navigation.keys import WizardSessionKeys
from wizard.navigation.state import DraftStatus, DraftStore, StepperState


def test_session_keys_are_namespaced_per_wizard() -> None:
    budget = WizardSessionKeys("management_firm_budget")
    master = WizardSessionKeys("master_budget")

    assert budget.stepper_state == "wiz:management_firm_budget:stepper_state"
    assert set(budget.all_keys()).isdisjoint(master.all_keys())


@pytest.mark.parametrize(
    "kwargs",
    [
        {"total_steps": 0},
        {"total_steps": 3, "current_step_index": 3},
        {"total_steps": 3, "current_step_index": -1},
        {"total_steps": 3, "is_editing_mode": True},
    ],
)
def test_invalid_states_are_rejected(kwargs: dict) -> None:
    with pytest.raises(ValueError):
        StepperState(**kwargs)


def test_state_round_trips_through_session_mapping() -> None:
    state = StepperState(total_steps=3, current_step_index=1, is_editing_mode=True, entity_id="abc")
    state.mark_completed("details")
    state.mark_completed("details")

    restored = StepperState.from_mapping(state.to_dict())

    assert restored == state
    assert restored.completed_steps == ["details"]
    assert state.to_dict()["status"] == "draft"


def test_clamp_and_terminal_flags() -> None:
    state = StepperState(total_steps=3)

    assert state.clamp(-4) == 0
    assert state.clamp(10) == 2
    assert not state.is_terminal
    state.status = DraftStatus.SUBMITTED
    assert state.is_terminal


def test_draft_store_discards_corrupt_or_mismatched_state() -> None:
    session: dict = {}
    store = DraftStore(WizardSessionKeys("budget"), session)

    assert store.load_state(3) is None
    session[store.keys.stepper_state] = {"total_steps": 3, "current_step_index": 7}
    assert store.load_state(3) is None
    store.save_state(StepperState(total_steps=5))
    assert store.load_state(3) is None
    assert store.load_state(5) == StepperState(total_steps=5)


def test_draft_store_values_errors_and_clear() -> None:
    session: dict = {}
    store = DraftStore(WizardSessionKeys("budget"), session)

    store.merge_values({"serviceName": "Guarding"})
    store.merge_values({"totalCost": "100"})
    store.field_errors = {"vatAmount": "Required field"}
    store.error = "Server unavailable"

    assert store.values == {"serviceName": "Guarding", "totalCost": "100"}
    assert store.field_errors == {"vatAmount": "Required field"}
    assert store.error == "Server unavailable"

    session["unrelated"] = True
    store.clear()
    assert session == {"unrelated": True}
    assert store.error is None
