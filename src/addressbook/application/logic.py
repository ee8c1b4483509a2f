"""Logic: parses and executes user commands against the address book, then persists."""

import logging
from collections.abc import Sequence

from addressbook.application.commands import Command
from addressbook.application.errors import PersonIndexOutOfRangeError, StorageError
from addressbook.application.parser import Parser
from addressbook.application.ports import AddressBookStorage
from addressbook.application.results import CommandResult
from addressbook.domain import (
    AddressBook,
    DuplicatePersonError,
    Person,
    PersonNotFoundError,
)

logger = logging.getLogger(__name__)


class Logic:
    """Owns the address book, the last shown list and the storage handle.

    The last shown list is replaced only by commands that produce a list; index-based
    commands resolve against it. Every successful mutating command is saved before returning.
    """

    def __init__(
        self,
        storage: AddressBookStorage,
        address_book: AddressBook | None = None,
        *,
        parser: Parser | None = None,
    ) -> None:
        self._storage = storage
        self._address_book = address_book if address_book is not None else storage.load()
        self._parser = parser or Parser()
        self._last_shown_list: tuple[Person, ...] = ()

    @property
    def address_book(self) -> AddressBook:
        return self._address_book

    def get_last_shown_list(self) -> tuple[Person, ...]:
        return self._last_shown_list

    def set_last_shown_list(self, persons: Sequence[Person]) -> None:
        self._last_shown_list = tuple(persons)

    def parse(self, user_input: str) -> Command:
        return self._parser.parse_command(user_input)

    def execute(self, user_input: str) -> CommandResult:
        """Parse and run one line of input.

        Raises StorageError if the result could not be saved; the in-memory
        address book is then rolled back to its state before the command.
        """
        return self.execute_command(self.parse(user_input))

    def execute_command(self, command: Command) -> CommandResult:
        logger.debug("Executing %s", type(command).__name__)
        snapshot = self._address_book.copy() if command.MUTATES else None
        try:
            result = command.execute(self._address_book, self._last_shown_list)
        except (DuplicatePersonError, PersonIndexOutOfRangeError, PersonNotFoundError) as e:
            return CommandResult(str(e))

        if snapshot is not None:
            try:
                self._storage.save(self._address_book)
            except StorageError:
                logger.error("Could not save address book; reverting %s", type(command).__name__)
                self._address_book.restore(snapshot)
                raise

        if result.has_relevant_persons:
            self._last_shown_list = result.relevant_persons
        return result
