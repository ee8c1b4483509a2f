"""Tests for field value validation (Name, Phone, Email, Address, Tag)."""

import pytest

from addressbook.domain import Address, Email, Name, Phone, Tag, ValidationError


@pytest.mark.parametrize(
    "field_type, raw",
    [
        (Name, "Adam Brown"),
        (Name, "Person 1"),
        (Name, "Mary-Jane O'Neil"),
        (Name, "J. R. Smith"),
        (Phone, "111111"),
        (Email, "adam@gmail.com"),
        (Email, "1@email"),
        (Address, "311, Clementi Ave 2, #02-25"),
        (Tag, "owesMoney"),
    ],
)
def test_valid_value_survives_reconstruction(field_type, raw) -> None:
    value = field_type(raw)
    assert value.value == raw
    assert field_type(str(value)) == value


@pytest.mark.parametrize(
    "field_type, raw",
    [
        (Name, ""),
        (Name, "   "),
        (Name, "[]\\[;]"),
        (Name, "-Bob"),
        (Name, "Bob_Smith"),
        (Phone, "not_numbers"),
        (Phone, "12 34"),
        (Phone, "+6512345"),
        (Email, "notAnEmail"),
        (Email, "a@b@c"),
        (Address, "   "),
        (Tag, "invalid_-[.tag"),
        (Tag, "two words"),
    ],
)
def test_invalid_value_raises_with_constraint_message(field_type, raw) -> None:
    with pytest.raises(ValidationError) as exc_info:
        field_type(raw)
    assert str(exc_info.value) == field_type.MESSAGE_CONSTRAINTS


def test_surrounding_whitespace_stripped() -> None:
    assert Name("  Adam Brown ").value == "Adam Brown"
    assert Phone(" 123 ").value == "123"


def test_values_are_immutable() -> None:
    name = Name("Adam")
    with pytest.raises(AttributeError):
        name.value = "Eve"


def test_privacy_does_not_affect_equality() -> None:
    assert Phone("123", is_private=True) == Phone("123")
    assert hash(Email("a@b", is_private=True)) == hash(Email("a@b"))
    assert Address("x", is_private=True).is_private


def test_different_field_types_are_not_equal() -> None:
    assert Phone("1") != Tag("1")
