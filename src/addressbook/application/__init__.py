"""Application layer: commands, parser, Logic and ports. Depends only on domain."""

from addressbook.application.commands import (
    MESSAGE_ALL_USAGES,
    AddCommand,
    ClearCommand,
    Command,
    DeleteCommand,
    ExitCommand,
    FindCommand,
    HelpCommand,
    IncorrectCommand,
    ListCommand,
    ViewAllCommand,
    ViewCommand,
)
from addressbook.application.errors import (
    InvalidStorageFilePathError,
    PersonIndexOutOfRangeError,
    StorageError,
)
from addressbook.application.logic import Logic
from addressbook.application.parser import Parser
from addressbook.application.ports import AddressBookStorage
from addressbook.application.results import CommandResult

__all__ = [
    "MESSAGE_ALL_USAGES",
    "AddCommand",
    "AddressBookStorage",
    "ClearCommand",
    "Command",
    "CommandResult",
    "DeleteCommand",
    "ExitCommand",
    "FindCommand",
    "HelpCommand",
    "IncorrectCommand",
    "InvalidStorageFilePathError",
    "ListCommand",
    "Logic",
    "Parser",
    "PersonIndexOutOfRangeError",
    "StorageError",
    "ViewAllCommand",
    "ViewCommand",
]
