from __future__ import annotations

from datetime import date, datetime
from typing import Any, Mapping

from labels.mappings import BudgetLabelIds
from wizard.validation import FieldRule, parse_currency, parse_date

from .base import WizardDefinition, WizardPage

_TEXT_FIELDS: tuple[str, ...] = (
    "managementFirmGroupId",
    "managementFirmGroupName",
    "managementFirmGroupLocalName",
    "masterCommunityName",
    "masterCommunityLocalName",
    "managementCompanyId",
    "managementCompanyName",
    "managementCompanyLocalName",
    "serviceChargeGroupId",
    "serviceChargeGroupName",
    "serviceChargeGroupLocalName",
    "budgetPeriodCode",
    "budgetPeriodTitle",
    "categoryCode",
    "categoryName",
    "categoryLocalName",
    "subCategoryCode",
    "subCategoryName",
    "subCategoryLocalName",
    "serviceCode",
    "serviceName",
    "serviceLocalName",
)
_DATE_FIELDS: tuple[str, ...] = ("budgetPeriodFrom", "budgetPeriodTo")
_CURRENCY_FIELDS: tuple[str, ...] = ("totalCost", "vatAmount")

DETAILS_RULES: tuple[FieldRule, ...] = (
    *(FieldRule(name) for name in _TEXT_FIELDS[:8]),
    FieldRule("managementFirmManagerEmail", kind="email"),
    *(FieldRule(name) for name in _TEXT_FIELDS[8:]),
    *(FieldRule(name, kind="date") for name in _DATE_FIELDS),
    *(FieldRule(name, kind="currency") for name in _CURRENCY_FIELDS),
)

DEFAULT_VALUES: Mapping[str, Any] = {
    **{name: "" for name in _TEXT_FIELDS},
    "managementFirmManagerEmail": "",
    "budgetPeriodFrom": None,
    "budgetPeriodTo": None,
    "totalCost": "",
    "vatAmount": "",
}


def _iso_or_none(value: object) -> str | None:
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    parsed = parse_date(value)
    return parsed.isoformat() if parsed is not None else None


def to_payload(values: Mapping[str, Any]) -> dict[str, Any]:
    """Map draft values to the request body of the budgets endpoint."""

    payload: dict[str, Any] = {name: values.get(name) or "" for name in _TEXT_FIELDS}
    payload["managementFirmManagerEmail"] = values.get("managementFirmManagerEmail") or ""
    for name in _DATE_FIELDS:
        payload[name] = _iso_or_none(values.get(name))
    for name in _CURRENCY_FIELDS:
        payload[name] = parse_currency(values.get(name)) or 0
    return payload


def from_record(record: Mapping[str, Any]) -> dict[str, Any]:
    """Seed draft values from a stored budget record."""

    values = dict(DEFAULT_VALUES)
    for name in values:
        raw = record.get(name)
        if raw is None:
            continue
        values[name] = str(raw) if name in _CURRENCY_FIELDS else raw
    values["documents"] = list(record.get("documents") or [])
    return values


PAGES: tuple[WizardPage, ...] = (
    WizardPage(
        key="details",
        label_config_id=BudgetLabelIds.STEP_DETAILS,
        fallback_label="Budget Details",
        fields=DETAILS_RULES,
        persists=True,
        summary_fields=("managementFirmGroupName", "budgetPeriodTitle", "totalCost", "vatAmount"),
    ),
    WizardPage(
        key="documents",
        label_config_id=BudgetLabelIds.STEP_DOCUMENTS,
        fallback_label="Documents",
        requires_saved_id=True,
    ),
    WizardPage(
        key="review",
        label_config_id=BudgetLabelIds.STEP_REVIEW,
        fallback_label="Review",
    ),
)

WIZARD = WizardDefinition(
    wizard_id="management_firm_budget",
    label_domain="budget",
    entity_name="Budget",
    pages=PAGES,
    defaults=DEFAULT_VALUES,
    to_payload=to_payload,
    from_record=from_record,
)
