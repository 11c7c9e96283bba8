from __future__ import annotations

from dataclasses import dataclass

from constants.keys import StateKeys


@dataclass(frozen=True)
class WizardSessionKeys:
    """Namespaced session-state keys for one wizard's stepper and draft."""

    wizard_id: str

    @property
    def prefix(self) -> str:
        return f"{StateKeys.WIZARD_PREFIX}:{self.wizard_id}:"

    def namespace(self, key: str) -> str:
        return f"{self.prefix}{key}"

    @property
    def stepper_state(self) -> str:
        return self.namespace("stepper_state")

    @property
    def draft_values(self) -> str:
        return self.namespace("draft_values")

    @property
    def field_errors(self) -> str:
        return self.namespace("field_errors")

    @property
    def last_error(self) -> str:
        return self.namespace("last_error")

    def all_keys(self) -> tuple[str, ...]:
        return (self.stepper_state, self.draft_values, self.field_errors, self.last_error)
