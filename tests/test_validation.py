from __future__ import annotations

from datetime import date, datetime

import pytest

from wizard.validation import (
    ALPHANUMERIC_MESSAGE,
    DATE_MESSAGE,
    EMAIL_MESSAGE,
    NUMBER_MESSAGE,
    REQUIRED_MESSAGE,
    FieldRule,
    is_value_present,
    parse_currency,
    parse_date,
    validate_field,
    validate_step,
)


@pytest.mark.parametrize("value", [None, "", "   ", [], ["", None], {}])
def test_missing_values_are_required(value: object) -> None:
    assert validate_field(FieldRule("name"), value) == REQUIRED_MESSAGE


def test_optional_field_accepts_blank() -> None:
    assert validate_field(FieldRule("contact", required=False), "") is None


def test_numbers_count_as_present() -> None:
    assert is_value_present(0)
    assert is_value_present(0.0)
    assert validate_field(FieldRule("total", kind="currency"), 0) is None


@pytest.mark.parametrize("value", ["manager@escrowcentral.ae", " finance.team@escrowcentral.ae "])
def test_valid_email(value: str) -> None:
    assert validate_field(FieldRule("email", kind="email"), value) is None


@pytest.mark.parametrize("value", ["manager", "manager@", "@escrowcentral.ae", "two words@escrowcentral.ae"])
def test_invalid_email(value: str) -> None:
    assert validate_field(FieldRule("email", kind="email"), value) == EMAIL_MESSAGE


@pytest.mark.parametrize(
    ("value", "expected"),
    [("1,250,000.50", 1250000.5), (" 150 ", 150.0), (42, 42.0), ("abc", None), ("", None), ("nan", None), (True, None)],
)
def test_parse_currency(value: object, expected: float | None) -> None:
    assert parse_currency(value) == expected


def test_currency_rule_rejects_text() -> None:
    assert validate_field(FieldRule("totalCost", kind="currency"), "ten") == NUMBER_MESSAGE


@pytest.mark.parametrize("value", ["12", 12, "0000000001"])
def test_integer_rule_accepts_whole_numbers(value: object) -> None:
    assert validate_field(FieldRule("chargeTypeId", kind="integer", max_digits=10), value) is None


@pytest.mark.parametrize("value", ["12.5", "-3", "abc", "12345678901"])
def test_integer_rule_rejects_decimals_signs_and_long_values(value: object) -> None:
    message = validate_field(FieldRule("chargeTypeId", kind="integer", max_digits=10), value)
    assert message == "Enter a valid number (max 10 digits, no decimals)"


def test_date_rule() -> None:
    rule = FieldRule("budgetPeriodFrom", kind="date")

    assert validate_field(rule, date(2025, 1, 1)) is None
    assert validate_field(rule, "2025-01-01") is None
    assert validate_field(rule, "01/01/2025") == DATE_MESSAGE
    assert parse_date(datetime(2025, 3, 4, 10, 30)) == date(2025, 3, 4)
    assert parse_date("2025-03-04T10:30:00Z") == date(2025, 3, 4)


def test_max_length_and_alphanumeric() -> None:
    rule = FieldRule("chargeType", kind="alphanumeric", max_length=5)

    assert validate_field(rule, "Abc 1") is None
    assert validate_field(rule, "Too long") == "Maximum 5 characters allowed"
    assert validate_field(rule, "A-b") == ALPHANUMERIC_MESSAGE


def test_unknown_kind_is_rejected() -> None:
    with pytest.raises(ValueError):
        FieldRule("field", kind="phone")


def test_validate_step_collects_one_error_per_field() -> None:
    rules = (
        FieldRule("name"),
        FieldRule("name", kind="alphanumeric"),
        FieldRule("email", kind="email"),
        FieldRule("note", required=False),
    )

    errors = validate_step(rules, {"email": "not-an-email"})

    assert errors == {"name": REQUIRED_MESSAGE, "email": EMAIL_MESSAGE}
