from __future__ import annotations

from typing import Any, Mapping

from labels.mappings import MasterBudgetLabelIds
from wizard.validation import FieldRule

from .base import WizardDefinition, WizardPage

_ALPHANUMERIC_FIELDS: tuple[str, ...] = (
    "chargeType",
    "groupName",
    "categoryName",
    "categorySubName",
    "categorySubToSubName",
    "serviceName",
)
_FREE_TEXT_FIELDS: tuple[str, ...] = (
    "categoryCode",
    "categorySubCode",
    "categorySubToSubCode",
    "serviceCode",
    "provisionalBudgetCode",
)

DETAILS_RULES: tuple[FieldRule, ...] = (
    FieldRule("chargeTypeId", kind="integer", max_digits=10),
    *(FieldRule(name, kind="alphanumeric", max_length=50) for name in _ALPHANUMERIC_FIELDS),
    *(FieldRule(name, max_length=50) for name in _FREE_TEXT_FIELDS),
    FieldRule("groupNameId", required=False, max_length=50),
)

DEFAULT_VALUES: Mapping[str, Any] = {
    "chargeTypeId": "",
    **{name: "" for name in _ALPHANUMERIC_FIELDS},
    **{name: "" for name in _FREE_TEXT_FIELDS},
}


def to_payload(values: Mapping[str, Any]) -> dict[str, Any]:
    payload: dict[str, Any] = {name: values.get(name) or "" for name in (*_ALPHANUMERIC_FIELDS, *_FREE_TEXT_FIELDS)}
    raw_id = str(values.get("chargeTypeId") or "").strip()
    try:
        payload["chargeTypeId"] = int(float(raw_id)) if raw_id else 0
    except ValueError:
        payload["chargeTypeId"] = 0
    return payload


def from_record(record: Mapping[str, Any]) -> dict[str, Any]:
    values = dict(DEFAULT_VALUES)
    for name in values:
        raw = record.get(name)
        if raw is not None:
            values[name] = str(raw) if name == "chargeTypeId" else raw
    values["documents"] = list(record.get("documents") or [])
    return values


PAGES: tuple[WizardPage, ...] = (
    WizardPage(
        key="details",
        label_config_id=MasterBudgetLabelIds.STEP_DETAILS,
        fallback_label="Master Budget Details",
        fields=DETAILS_RULES,
        persists=True,
        summary_fields=("chargeType", "groupName", "serviceName"),
    ),
    WizardPage(
        key="documents",
        label_config_id=MasterBudgetLabelIds.STEP_DOCUMENTS,
        fallback_label="Documents",
        requires_saved_id=True,
    ),
    WizardPage(
        key="review",
        label_config_id=MasterBudgetLabelIds.STEP_REVIEW,
        fallback_label="Review",
    ),
)

WIZARD = WizardDefinition(
    wizard_id="master_budget",
    label_domain="master_budget",
    entity_name="Master Budget",
    pages=PAGES,
    defaults=DEFAULT_VALUES,
    to_payload=to_payload,
    from_record=from_record,
)
