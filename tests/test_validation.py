"""Tests for field-level product validation."""

import pytest

from utils.validation import validate_product, violations_from_errors

VALID = {"name": "Widget", "description": "A simple widget", "price": 9.99, "quantity": 5}


def test_valid_payload_has_no_violations():
    assert validate_product(VALID) == []


@pytest.mark.parametrize(
    "field,value",
    [
        ("name", "ab"),
        ("name", "x" * 31),
        ("name", "     "),
        ("description", "short"),
        ("description", "         "),
        ("price", 0),
        ("price", -5.0),
        ("quantity", 0),
        ("quantity", -1),
    ],
)
def test_constraint_violations_name_the_field(field, value):
    violations = validate_product({**VALID, field: value})

    assert [v.field for v in violations] == [field]


def test_missing_fields_are_all_reported():
    violations = validate_product({})

    assert {v.field for v in violations} == {"name", "description", "price", "quantity"}


def test_blank_message_strips_pydantic_prefix():
    violations = validate_product({**VALID, "name": "    "})

    assert violations[0].message == "must not be blank"


def test_violations_from_request_errors_drop_location_prefix():
    errors = [
        {"loc": ("body", "price"), "msg": "Input should be greater than 0"},
        {"loc": ("query", "page"), "msg": "Input should be greater than or equal to 0"},
        {"loc": ("body",), "msg": "Field required"},
    ]

    violations = violations_from_errors(errors)

    assert [v.field for v in violations] == ["price", "page", "body"]
    assert violations[0].message == "Input should be greater than 0"


@pytest.mark.parametrize("price", [float("inf"), float("nan")])
def test_price_must_be_finite(price):
    violations = validate_product({**VALID, "price": price})

    assert [v.field for v in violations] == ["price"]
