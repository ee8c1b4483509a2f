"""Domain layer: field values, Person and AddressBook. No dependencies on outer layers."""

from addressbook.domain.address_book import AddressBook
from addressbook.domain.errors import (
    AddressBookError,
    DuplicatePersonError,
    PersonNotFoundError,
    ValidationError,
)
from addressbook.domain.fields import Address, Email, Name, Phone, Tag
from addressbook.domain.person import Person

__all__ = [
    "Address",
    "AddressBook",
    "AddressBookError",
    "DuplicatePersonError",
    "Email",
    "Name",
    "Person",
    "PersonNotFoundError",
    "Phone",
    "Tag",
    "ValidationError",
]
