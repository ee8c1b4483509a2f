"""Validated field values of a Person. Immutable once constructed."""

import re
from dataclasses import dataclass, field
from typing import ClassVar

from addressbook.domain.errors import ValidationError


@dataclass(frozen=True)
class _FieldValue:
    value: str
    PATTERN: ClassVar[re.Pattern[str]]
    MESSAGE_CONSTRAINTS: ClassVar[str]

    def __post_init__(self):
        value = (self.value or "").strip()
        if not self.is_valid(value):
            raise ValidationError(self.MESSAGE_CONSTRAINTS)
        object.__setattr__(self, "value", value)

    @classmethod
    def is_valid(cls, test: str) -> bool:
        return cls.PATTERN.fullmatch(test) is not None

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class _PrivacyField(_FieldValue):
    # Privacy only affects rendering; equality is on the value alone.
    is_private: bool = field(default=False, compare=False)


@dataclass(frozen=True)
class Name(_FieldValue):
    PATTERN = re.compile(r"[^\W_](?:[^\W_]|[ '.\-])*")
    MESSAGE_CONSTRAINTS = (
        "Person names should be spaces or alphanumeric characters, "
        "optionally with hyphens, apostrophes and periods"
    )

    def words(self) -> list[str]:
        """Whitespace-delimited tokens of the name, used by keyword search."""
        return self.value.split()


@dataclass(frozen=True)
class Phone(_PrivacyField):
    PATTERN = re.compile(r"\d+", re.ASCII)
    MESSAGE_CONSTRAINTS = "Person phone numbers should only contain numbers"


@dataclass(frozen=True)
class Email(_PrivacyField):
    PATTERN = re.compile(r"[\w.]+@[\w.]+")
    MESSAGE_CONSTRAINTS = (
        "Person emails should be 2 alphanumeric/period strings separated by '@'"
    )


@dataclass(frozen=True)
class Address(_PrivacyField):
    PATTERN = re.compile(r".+", re.DOTALL)
    MESSAGE_CONSTRAINTS = "Person addresses can be in any format"


@dataclass(frozen=True)
class Tag(_FieldValue):
    PATTERN = re.compile(r"[^\W_]+")
    MESSAGE_CONSTRAINTS = "Tags names should be alphanumeric"
