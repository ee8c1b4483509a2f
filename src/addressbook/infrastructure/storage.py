"""YAML file implementation of AddressBookStorage.

File layout:

    persons:
      - name: John Doe
        phone: {value: "98765432", private: false}
        email: {value: johnd@gmail.com, private: false}
        address: {value: "311, Clementi Ave 2", private: true}
        tags: [friends, owesMoney]

Every save overwrites the whole file. Order of persons is the address book's order.
"""

import logging
from pathlib import Path

import yaml

from addressbook.application.errors import InvalidStorageFilePathError, StorageError
from addressbook.domain import (
    Address,
    AddressBook,
    DuplicatePersonError,
    Email,
    Name,
    Person,
    Phone,
    Tag,
)

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_FILEPATH = "addressbook.yaml"
_VALID_SUFFIXES = (".yaml", ".yml")


def _private_field_to_dict(field) -> dict:
    return {"value": field.value, "private": field.is_private}


def _person_to_dict(person: Person) -> dict:
    return {
        "name": person.name.value,
        "phone": _private_field_to_dict(person.phone),
        "email": _private_field_to_dict(person.email),
        "address": _private_field_to_dict(person.address),
        "tags": sorted(tag.value for tag in person.tags),
    }


def _require_str(value, what: str) -> str:
    if not isinstance(value, str):
        raise ValueError(f"{what} must be a string, got {value!r}")
    return value


def _private_field_from_dict(field_type: type, data) -> object:
    what = field_type.__name__.lower()
    if not isinstance(data, dict) or "value" not in data:
        raise ValueError(f"{what} must be a mapping with 'value'")
    is_private = data.get("private", False)
    if not isinstance(is_private, bool):
        raise ValueError(f"{what} 'private' must be true or false, got {is_private!r}")
    return field_type(_require_str(data["value"], what), is_private=is_private)


def _person_from_dict(data) -> Person:
    if not isinstance(data, dict):
        raise ValueError("Each person must be a mapping")
    for key in ("name", "phone", "email", "address"):
        if key not in data:
            raise ValueError(f"Person is missing '{key}'")
    tags = data.get("tags") or []
    if not isinstance(tags, list):
        raise ValueError("Person 'tags' must be a list")
    return Person(
        Name(_require_str(data["name"], "name")),
        _private_field_from_dict(Phone, data["phone"]),
        _private_field_from_dict(Email, data["email"]),
        _private_field_from_dict(Address, data["address"]),
        {Tag(_require_str(t, "tag")) for t in tags},
    )


class YamlStorageFile:
    """Stores the address book as a YAML document at path."""

    def __init__(self, path: str | Path = DEFAULT_STORAGE_FILEPATH) -> None:
        self.path = Path(path)
        if self.path.suffix.lower() not in _VALID_SUFFIXES:
            raise InvalidStorageFilePathError(
                f"Storage file should end with {' or '.join(_VALID_SUFFIXES)}: {self.path}"
            )

    def load(self) -> AddressBook:
        """Read the file. A missing file is an empty address book."""
        if not self.path.exists():
            logger.info("No storage file at %s; starting with an empty address book", self.path)
            return AddressBook.empty()
        try:
            raw = self.path.read_text(encoding="utf-8")
            document = yaml.safe_load(raw)
        except (OSError, yaml.YAMLError) as e:
            raise StorageError(f"Error reading from file: {self.path}") from e
        try:
            book = _address_book_from_document(document)
        except (ValueError, DuplicatePersonError) as e:
            # ValidationError is a ValueError: a stored field no longer passes its rule.
            raise StorageError(f"File contains illegal data values: {self.path} ({e})") from e
        logger.debug("Loaded %d persons from %s", len(book), self.path)
        return book

    def save(self, address_book: AddressBook) -> None:
        """Overwrite the file with the whole address book."""
        document = {"persons": [_person_to_dict(p) for p in address_book]}
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(
                yaml.safe_dump(document, sort_keys=False, allow_unicode=True),
                encoding="utf-8",
            )
        except OSError as e:
            raise StorageError(f"Error writing to file: {self.path}") from e
        logger.debug("Saved %d persons to %s", len(address_book), self.path)


def _address_book_from_document(document) -> AddressBook:
    if document is None:
        return AddressBook.empty()
    if not isinstance(document, dict):
        raise ValueError("Address book document must be a mapping")
    persons = document.get("persons") or []
    if not isinstance(persons, list):
        raise ValueError("'persons' must be a list")
    return AddressBook(_person_from_dict(p) for p in persons)
