"""
Address book core: clean-architecture layout.

- domain: field values (Name, Phone, Email, Address, Tag), Person, AddressBook. No outer dependencies.
- application: commands, Parser, Logic (executor), CommandResult, storage port.
- infrastructure: adapters (YamlStorageFile, InMemoryStorage) and Settings.
"""

from addressbook.application import (
    AddressBookStorage,
    CommandResult,
    Logic,
    Parser,
    StorageError,
)
from addressbook.domain import (
    Address,
    AddressBook,
    Email,
    Name,
    Person,
    Phone,
    Tag,
    ValidationError,
)
from addressbook.infrastructure import InMemoryStorage, Settings, YamlStorageFile

__all__ = [
    "Address",
    "AddressBook",
    "AddressBookStorage",
    "CommandResult",
    "Email",
    "InMemoryStorage",
    "Logic",
    "Name",
    "Parser",
    "Person",
    "Phone",
    "Settings",
    "StorageError",
    "Tag",
    "ValidationError",
    "YamlStorageFile",
]
