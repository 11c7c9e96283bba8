from __future__ import annotations

from typing import Any, Mapping

from labels.mappings import CapitalPartnerLabelIds
from wizard.validation import FieldRule, parse_currency

from .base import WizardDefinition, WizardPage

BASIC_RULES: tuple[FieldRule, ...] = (
    FieldRule("investorType"),
    FieldRule("investorFirstName", max_length=50),
    FieldRule("investorLastName", max_length=50),
    FieldRule("ownershipPercentage", kind="currency"),
    FieldRule("investorEmailAddress", kind="email"),
    FieldRule("investorContactNo", required=False, max_length=20),
)

UNIT_RULES: tuple[FieldRule, ...] = (
    FieldRule("unitNo", kind="alphanumeric", max_length=50),
    FieldRule("salePrice", kind="currency"),
    FieldRule("grossSalePrice", kind="currency"),
)

JOINT_OWNER_RULES: tuple[FieldRule, ...] = (
    FieldRule("jointOwner2Name", required=False, max_length=50),
    FieldRule("jointOwner2Email", kind="email", required=False),
)

_NUMERIC_FIELDS: tuple[str, ...] = ("ownershipPercentage", "salePrice", "grossSalePrice")

DEFAULT_VALUES: Mapping[str, Any] = {
    rule.name: "" for rule in (*BASIC_RULES, *UNIT_RULES, *JOINT_OWNER_RULES)
}


def to_payload(values: Mapping[str, Any]) -> dict[str, Any]:
    payload: dict[str, Any] = {name: values.get(name) or "" for name in DEFAULT_VALUES}
    for name in _NUMERIC_FIELDS:
        payload[name] = parse_currency(values.get(name)) or 0
    return payload


def from_record(record: Mapping[str, Any]) -> dict[str, Any]:
    values = dict(DEFAULT_VALUES)
    for name in values:
        raw = record.get(name)
        if raw is not None:
            values[name] = str(raw) if name in _NUMERIC_FIELDS else raw
    return values


PAGES: tuple[WizardPage, ...] = (
    WizardPage(
        key="basic",
        label_config_id=CapitalPartnerLabelIds.STEP_BASIC,
        fallback_label="Basic Details",
        fields=BASIC_RULES,
        persists=True,
        summary_fields=("investorFirstName", "investorLastName", "investorEmailAddress"),
    ),
    WizardPage(
        key="documents",
        label_config_id=CapitalPartnerLabelIds.STEP_DOCUMENTS,
        fallback_label="Documents",
        requires_saved_id=True,
    ),
    WizardPage(
        key="unit",
        label_config_id=CapitalPartnerLabelIds.STEP_UNIT,
        fallback_label="Unit Details",
        fields=UNIT_RULES,
        persists=True,
        summary_fields=("unitNo", "salePrice"),
    ),
    WizardPage(
        key="joint_owners",
        label_config_id=CapitalPartnerLabelIds.STEP_JOINT_OWNERS,
        fallback_label="Joint Owner Details",
        fields=JOINT_OWNER_RULES,
        persists=True,
    ),
    WizardPage(
        key="review",
        label_config_id=CapitalPartnerLabelIds.STEP_REVIEW,
        fallback_label="Review",
    ),
)

WIZARD = WizardDefinition(
    wizard_id="capital_partner",
    label_domain="capital_partner",
    entity_name="Capital Partner",
    pages=PAGES,
    defaults=DEFAULT_VALUES,
    to_payload=to_payload,
    from_record=from_record,
)
