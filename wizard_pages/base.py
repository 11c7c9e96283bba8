from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Tuple

from core.errors import StepValidationError
from wizard.validation import FieldRule, validate_step

LabelResolver = Callable[[str, str | None], str]
PayloadMapper = Callable[[Mapping[str, Any]], dict[str, Any]]


@dataclass(frozen=True)
class WizardPage:
    """Static metadata describing an individual wizard step.

    Pages carry the label config id (resolved through the label catalogue with
    ``fallback_label`` as the last resort), the validation rules for their
    fields and whether leaving the step writes the draft to the backend.
    Steps flagged ``requires_saved_id`` (document uploads) are only usable once
    the record exists server-side.
    """

    key: str
    label_config_id: str
    fallback_label: str
    fields: Tuple[FieldRule, ...] = ()
    persists: bool = False
    requires_saved_id: bool = False
    summary_fields: Tuple[str, ...] = ()

    @property
    def field_names(self) -> Tuple[str, ...]:
        return tuple(rule.name for rule in self.fields)

    @property
    def required_fields(self) -> Tuple[str, ...]:
        return tuple(rule.name for rule in self.fields if rule.required)

    def label_for(self, resolve: LabelResolver) -> str:
        """Return the step label through ``resolve(config_id, fallback)``."""

        return resolve(self.label_config_id, self.fallback_label)

    def validate(self, values: Mapping[str, object]) -> dict[str, str]:
        return validate_step(self.fields, values)

    def check(self, values: Mapping[str, object]) -> None:
        """Raise :class:`StepValidationError` when any field of this step is invalid."""

        errors = self.validate(values)
        if errors:
            raise StepValidationError(errors, step_key=self.key)


@dataclass(frozen=True)
class WizardDefinition:
    """Ordered steps plus the draft shape of one entity wizard."""

    wizard_id: str
    label_domain: str
    entity_name: str
    pages: Tuple[WizardPage, ...]
    defaults: Mapping[str, Any] = field(default_factory=dict)
    to_payload: PayloadMapper = dict
    from_record: PayloadMapper = dict

    def __post_init__(self) -> None:
        if not self.pages:
            raise ValueError(f"Wizard '{self.wizard_id}' needs at least one page")

    @property
    def total_steps(self) -> int:
        return len(self.pages)

    @property
    def step_keys(self) -> Tuple[str, ...]:
        return tuple(page.key for page in self.pages)

    def index_of(self, key: str) -> int:
        return self.step_keys.index(key)

    def first_index(self, predicate: Callable[[WizardPage], bool]) -> int | None:
        for index, page in enumerate(self.pages):
            if predicate(page):
                return index
        return None

    def initial_values(self) -> dict[str, Any]:
        return dict(self.defaults)


__all__ = ["LabelResolver", "PayloadMapper", "WizardDefinition", "WizardPage"]
