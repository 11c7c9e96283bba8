"""Step-local field validation for the entity wizards."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from datetime import date, datetime
from typing import Final, Iterable, Mapping

from pydantic import EmailStr, ValidationError
from pydantic.type_adapter import TypeAdapter

_EMAIL_ADAPTER: Final[TypeAdapter[EmailStr]] = TypeAdapter(EmailStr)
_ALPHANUMERIC_RE: Final[re.Pattern[str]] = re.compile(r"^[a-zA-Z0-9\s]*$")

REQUIRED_MESSAGE: Final[str] = "Required field"
EMAIL_MESSAGE: Final[str] = "Enter a valid email address"
NUMBER_MESSAGE: Final[str] = "Enter a valid number"
DATE_MESSAGE: Final[str] = "Enter a valid date"
ALPHANUMERIC_MESSAGE: Final[str] = "Only alphanumeric characters and spaces are allowed"

FIELD_KINDS: Final[frozenset[str]] = frozenset({"text", "email", "currency", "integer", "alphanumeric", "date"})


@dataclass(frozen=True)
class FieldRule:
    """Validation rule for a single draft field.

    ``kind`` selects the format check: ``text`` (no format), ``email``,
    ``currency`` (number with optional thousands separators), ``integer``
    (non-negative, at most ``max_digits`` digits), ``alphanumeric`` and
    ``date`` (``date``/``datetime`` objects or ISO strings).
    """

    name: str
    kind: str = "text"
    required: bool = True
    max_length: int | None = None
    max_digits: int | None = None

    def __post_init__(self) -> None:
        if self.kind not in FIELD_KINDS:
            raise ValueError(f"Unknown field kind '{self.kind}' for {self.name}")


def is_value_present(value: object | None) -> bool:
    """Return ``True`` when ``value`` counts as filled in.

    Numbers (including ``0``) and booleans always count as present.
    """

    if value is None:
        return False
    if isinstance(value, str):
        return bool(value.strip())
    if isinstance(value, (list, tuple, set, frozenset)):
        return any(is_value_present(item) for item in value)
    if isinstance(value, Mapping):
        return any(is_value_present(item) for item in value.values())
    return True


def parse_currency(value: object | None) -> float | None:
    """Parse ``value`` as a number, accepting thousands separators.

    Returns ``None`` for blank or non-numeric input.
    """

    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        candidate = value.replace(",", "").replace(" ", "").strip()
        if not candidate:
            return None
        try:
            number = float(candidate)
        except ValueError:
            return None
    else:
        return None
    if math.isnan(number) or math.isinf(number):
        return None
    return number


def parse_date(value: object | None) -> date | None:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        return None
    candidate = value.strip()
    try:
        return datetime.fromisoformat(candidate.replace("Z", "+00:00")).date()
    except ValueError:
        pass
    try:
        return date.fromisoformat(candidate)
    except ValueError:
        return None


def _integer_error(value: object, max_digits: int) -> str | None:
    message = f"Enter a valid number (max {max_digits} digits, no decimals)"
    if isinstance(value, bool):
        return message
    text = str(value).strip()
    if len(text) > max_digits:
        return message
    try:
        number = float(text)
    except ValueError:
        return message
    if math.isnan(number) or math.isinf(number) or not number.is_integer() or number < 0:
        return message
    return None


def validate_field(rule: FieldRule, value: object | None) -> str | None:
    """Return the first error message for ``value`` under ``rule`` or ``None``."""

    if not is_value_present(value):
        return REQUIRED_MESSAGE if rule.required else None

    if rule.kind == "email":
        candidate = str(value).strip()
        try:
            _EMAIL_ADAPTER.validate_python(candidate)
        except (ValidationError, TypeError):
            return EMAIL_MESSAGE
        return None
    if rule.kind == "currency":
        return NUMBER_MESSAGE if parse_currency(value) is None else None
    if rule.kind == "integer":
        return _integer_error(value, rule.max_digits or 10)
    if rule.kind == "date":
        return DATE_MESSAGE if parse_date(value) is None else None

    text = str(value)
    if rule.max_length is not None and len(text) > rule.max_length:
        return f"Maximum {rule.max_length} characters allowed"
    if rule.kind == "alphanumeric" and not _ALPHANUMERIC_RE.match(text):
        return ALPHANUMERIC_MESSAGE
    return None


def validate_step(rules: Iterable[FieldRule], values: Mapping[str, object]) -> dict[str, str]:
    """Validate several fields at once, keeping the first error per field."""

    errors: dict[str, str] = {}
    for rule in rules:
        if rule.name in errors:
            continue
        message = validate_field(rule, values.get(rule.name))
        if message:
            errors[rule.name] = message
    return errors


__all__ = [
    "ALPHANUMERIC_MESSAGE",
    "DATE_MESSAGE",
    "EMAIL_MESSAGE",
    "FieldRule",
    "NUMBER_MESSAGE",
    "REQUIRED_MESSAGE",
    "is_value_present",
    "parse_currency",
    "parse_date",
    "validate_field",
    "validate_step",
]
