"""Commands produced by the parser and run by Logic.

Each command runs against the address book and the last shown list it is given.
Expected failures (duplicates, bad indices, stale list entries) are raised as
domain errors and turned into a CommandResult by Logic.
"""

from collections.abc import Iterable, Sequence

from addressbook.application.errors import PersonIndexOutOfRangeError
from addressbook.application.messages import (
    MESSAGE_INVALID_PERSON_DISPLAYED_INDEX,
    MESSAGE_PERSON_NOT_IN_ADDRESSBOOK,
    persons_listed_overview,
)
from addressbook.application.results import CommandResult
from addressbook.domain import AddressBook, Person, PersonNotFoundError


class Command:
    """Base command. Subclasses set COMMAND_WORD and MESSAGE_USAGE and implement execute."""

    COMMAND_WORD = ""
    MESSAGE_USAGE = ""
    # Whether a successful run changes the address book and must be saved.
    MUTATES = False

    def execute(self, address_book: AddressBook, last_shown_list: Sequence[Person]) -> CommandResult:
        raise NotImplementedError

    def __eq__(self, other: object) -> bool:
        return type(other) is type(self) and vars(other) == vars(self)

    def __hash__(self) -> int:
        # Command state is immutable values (ints, strings, Person, frozenset).
        return hash((type(self), tuple(sorted(vars(self).items()))))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({vars(self)!r})"


class IncorrectCommand(Command):
    """A line that could not be parsed. Carries the feedback to show instead."""

    def __init__(self, feedback_to_user: str) -> None:
        self.feedback_to_user = feedback_to_user

    def execute(self, address_book, last_shown_list):
        return CommandResult(self.feedback_to_user)


class TargetedCommand(Command):
    """A command that refers to one person by its 1-based index in the last shown list."""

    def __init__(self, target_index: int) -> None:
        self.target_index = target_index

    def target_person(self, address_book: AddressBook, last_shown_list: Sequence[Person]) -> Person:
        """Resolve the index. The person must still be in the address book."""
        if not 1 <= self.target_index <= len(last_shown_list):
            raise PersonIndexOutOfRangeError(MESSAGE_INVALID_PERSON_DISPLAYED_INDEX)
        person = last_shown_list[self.target_index - 1]
        if not address_book.contains(person):
            raise PersonNotFoundError(MESSAGE_PERSON_NOT_IN_ADDRESSBOOK)
        return person


class AddCommand(Command):
    COMMAND_WORD = "add"
    MESSAGE_USAGE = (
        "add: Adds a person to the address book. "
        "Contact details can be marked private by prepending 'p' to the prefix.\n"
        "\tParameters: NAME [p]p/PHONE [p]e/EMAIL [p]a/ADDRESS  [t/TAG]...\n"
        "\tExample: add John Doe p/98765432 e/johnd@gmail.com a/311, Clementi Ave 2, #02-25 "
        "t/friends t/owesMoney"
    )
    MESSAGE_SUCCESS = "New person added: {}"
    MUTATES = True

    def __init__(self, to_add: Person) -> None:
        self.to_add = to_add

    def execute(self, address_book, last_shown_list):
        address_book.add_person(self.to_add)
        return CommandResult(self.MESSAGE_SUCCESS.format(self.to_add))


class DeleteCommand(TargetedCommand):
    COMMAND_WORD = "delete"
    MESSAGE_USAGE = (
        "delete: Deletes the person identified by the index number used in the last person listing.\n"
        "\tParameters: INDEX\n"
        "\tExample: delete 1"
    )
    MESSAGE_DELETE_PERSON_SUCCESS = "Deleted Person: {}"
    MUTATES = True

    def execute(self, address_book, last_shown_list):
        target = self.target_person(address_book, last_shown_list)
        address_book.remove_person(target)
        return CommandResult(self.MESSAGE_DELETE_PERSON_SUCCESS.format(target))


class ViewCommand(TargetedCommand):
    COMMAND_WORD = "view"
    MESSAGE_USAGE = (
        "view: Shows the non-private details of the person identified by the index number "
        "in the last shown person listing.\n"
        "\tParameters: INDEX\n"
        "\tExample: view 1"
    )
    MESSAGE_VIEW_PERSON_DETAILS = "Viewing person: {}"

    def execute(self, address_book, last_shown_list):
        target = self.target_person(address_book, last_shown_list)
        return CommandResult(self.MESSAGE_VIEW_PERSON_DETAILS.format(target.as_text_hide_private()))


class ViewAllCommand(TargetedCommand):
    COMMAND_WORD = "viewall"
    MESSAGE_USAGE = (
        "viewall: Shows all details of the person identified by the index number "
        "in the last shown person listing, private details included.\n"
        "\tParameters: INDEX\n"
        "\tExample: viewall 1"
    )
    MESSAGE_VIEW_PERSON_DETAILS = "Viewing person: {}"

    def execute(self, address_book, last_shown_list):
        target = self.target_person(address_book, last_shown_list)
        return CommandResult(self.MESSAGE_VIEW_PERSON_DETAILS.format(target.as_text()))


class ListCommand(Command):
    COMMAND_WORD = "list"
    MESSAGE_USAGE = (
        "list: Displays all persons in the address book as a list with index numbers.\n"
        "\tExample: list"
    )

    def execute(self, address_book, last_shown_list):
        persons = address_book.all_persons()
        return CommandResult.with_persons(persons_listed_overview(len(persons)), persons)


class FindCommand(Command):
    COMMAND_WORD = "find"
    MESSAGE_USAGE = (
        "find: Finds all persons whose names contain any of the specified keywords "
        "(case-sensitive) and displays them as a list with index numbers.\n"
        "\tParameters: KEYWORD [MORE_KEYWORDS]...\n"
        "\tExample: find alice bob charlie"
    )

    def __init__(self, keywords: Iterable[str]) -> None:
        self.keywords = frozenset(keywords)

    def execute(self, address_book, last_shown_list):
        found = [
            person
            for person in address_book.all_persons()
            if not self.keywords.isdisjoint(person.name.words())
        ]
        return CommandResult.with_persons(persons_listed_overview(len(found)), found)


class ClearCommand(Command):
    COMMAND_WORD = "clear"
    MESSAGE_USAGE = "clear: Clears address book permanently.\n\tExample: clear"
    MESSAGE_SUCCESS = "Address book has been cleared!"
    MUTATES = True

    def execute(self, address_book, last_shown_list):
        address_book.clear()
        return CommandResult(self.MESSAGE_SUCCESS)


class ExitCommand(Command):
    COMMAND_WORD = "exit"
    MESSAGE_USAGE = "exit: Exits the program.\n\tExample: exit"
    MESSAGE_EXIT_ACKNOWLEDGEMENT = "Exiting Address Book as requested ..."

    def execute(self, address_book, last_shown_list):
        return CommandResult(self.MESSAGE_EXIT_ACKNOWLEDGEMENT)

    @staticmethod
    def is_exit(command: Command) -> bool:
        return isinstance(command, ExitCommand)


class HelpCommand(Command):
    COMMAND_WORD = "help"
    MESSAGE_USAGE = "help: Shows program usage instructions.\n\tExample: help"

    def execute(self, address_book, last_shown_list):
        return CommandResult(MESSAGE_ALL_USAGES)


MESSAGE_ALL_USAGES = "\n".join(
    cmd.MESSAGE_USAGE
    for cmd in (
        AddCommand,
        DeleteCommand,
        ClearCommand,
        FindCommand,
        ListCommand,
        ViewCommand,
        ViewAllCommand,
        HelpCommand,
        ExitCommand,
    )
)
