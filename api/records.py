"""Payload normalisation, numeric coercion and reference codes for stored records."""

from __future__ import annotations

import math
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Mapping

from pydantic import ValidationError

from api.form_options import MANAGEMENT_FIRM_FORM_OPTIONS, MASTER_BUDGET_FORM_OPTIONS
from api.schemas import ManagementFirmBudgetRecord, MasterBudgetRecord, RecordBase
from core.errors import InvalidPayloadError

_IMMUTABLE_FIELDS: tuple[str, ...] = ("id", "createdAt")
# Collections are always reset on create; documents are attached separately.
_SERVER_COLLECTIONS: tuple[str, ...] = ("documents", "budgetMasterData")


@dataclass(frozen=True)
class EntitySpec:
    """Describe one CRUD resource and how its records are shaped."""

    key: str
    path: str
    entity_name: str
    reference_prefix: str
    record_model: type[RecordBase]
    numeric_fields: tuple[str, ...]
    form_options: Mapping[str, Any] = field(default_factory=dict)

    @property
    def nullable_fields(self) -> frozenset[str]:
        return frozenset(
            name
            for name, info in self.record_model.model_fields.items()
            if not info.is_required() and info.default is None
        )


def utc_now() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def generate_id() -> str:
    return str(uuid.uuid4())


def build_reference(prefix: str, record_id: str) -> str:
    """Return ``PREFIX-`` followed by the first eight id characters, uppercased."""

    return f"{prefix}-{record_id[:8].upper()}"


def coerce_number(name: str, value: object) -> int | float:
    """Convert ``value`` to a number, stripping thousands separators.

    Blank input counts as ``0``; anything else that is not numeric raises
    :class:`InvalidPayloadError`.
    """

    if value is None:
        return 0
    if isinstance(value, bool):
        raise InvalidPayloadError(f"{name} must be a number", field=name)
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        candidate = value.replace(",", "").replace(" ", "").strip()
        if not candidate:
            return 0
        try:
            number = float(candidate)
        except ValueError:
            raise InvalidPayloadError(f"{name} must be a number", field=name) from None
    else:
        raise InvalidPayloadError(f"{name} must be a number", field=name)
    if math.isnan(number) or math.isinf(number):
        raise InvalidPayloadError(f"{name} must be a number", field=name)
    return int(number) if number.is_integer() else number


def _validated(spec: EntitySpec, data: Mapping[str, Any]) -> dict[str, Any]:
    try:
        return spec.record_model.model_validate(data).model_dump()
    except ValidationError as error:
        first = error.errors()[0]
        location = ".".join(str(part) for part in first.get("loc", ()))
        raise InvalidPayloadError(f"Invalid value for {location}", field=location or None) from error


def normalize_payload(
    spec: EntitySpec,
    payload: Mapping[str, Any],
    record_id: str,
    *,
    now: str | None = None,
) -> dict[str, Any]:
    """Build a complete record from a partial create payload."""

    timestamp = now or utc_now()
    nullable = spec.nullable_fields
    data: dict[str, Any] = {
        name: value
        for name, value in payload.items()
        if name in spec.record_model.model_fields
        and name not in _SERVER_COLLECTIONS
        and name not in _IMMUTABLE_FIELDS
        and name != "updatedAt"
        and (value is not None or name in nullable)
    }
    for name in spec.numeric_fields:
        data[name] = coerce_number(name, payload.get(name))
    data.update(id=record_id, createdAt=timestamp, updatedAt=timestamp)
    return _validated(spec, data)


def merge_update(
    spec: EntitySpec,
    existing: Mapping[str, Any],
    body: Mapping[str, Any],
    *,
    now: str | None = None,
) -> dict[str, Any]:
    """Shallow-merge ``body`` onto ``existing`` with explicit numeric coercion."""

    merged: dict[str, Any] = {**existing, **body}
    for name in spec.nullable_fields:
        if body.get(name) is None and name in existing:
            merged[name] = existing[name]
    for name in spec.numeric_fields:
        value = body.get(name)
        merged[name] = coerce_number(name, value if value is not None else existing.get(name))
    for name in _IMMUTABLE_FIELDS:
        merged[name] = existing.get(name)
    merged["updatedAt"] = now or utc_now()
    return merged


def created_response(spec: EntitySpec, record: Mapping[str, Any]) -> dict[str, Any]:
    record_id = str(record["id"])
    return {
        "id": record_id,
        "referenceCode": build_reference(spec.reference_prefix, record_id),
        "data": dict(record),
    }


MANAGEMENT_FIRM_BUDGET = EntitySpec(
    key="management_firm_budget",
    path="/budgets/management-firm",
    entity_name="Budget",
    reference_prefix="BUD",
    record_model=ManagementFirmBudgetRecord,
    numeric_fields=("totalCost", "vatAmount"),
    form_options=MANAGEMENT_FIRM_FORM_OPTIONS,
)

MASTER_BUDGET = EntitySpec(
    key="master_budget",
    path="/budgets/master",
    entity_name="Master Budget",
    reference_prefix="MBUD",
    record_model=MasterBudgetRecord,
    numeric_fields=("chargeTypeId",),
    form_options=MASTER_BUDGET_FORM_OPTIONS,
)

ENTITY_SPECS: tuple[EntitySpec, ...] = (MANAGEMENT_FIRM_BUDGET, MASTER_BUDGET)


__all__ = [
    "ENTITY_SPECS",
    "EntitySpec",
    "MANAGEMENT_FIRM_BUDGET",
    "MASTER_BUDGET",
    "build_reference",
    "coerce_number",
    "created_response",
    "generate_id",
    "merge_update",
    "normalize_payload",
    "utc_now",
]
