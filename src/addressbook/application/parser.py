"""Parses one line of user input into a Command."""

import logging
import re

from addressbook.application.commands import (
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
from addressbook.application.messages import invalid_command_format
from addressbook.domain import Address, Email, Name, Person, Phone, Tag, ValidationError

logger = logging.getLogger(__name__)

BASIC_COMMAND_FORMAT = re.compile(r"(?P<command_word>\S+)(?P<arguments>.*)", re.DOTALL)

# Name first, then phone, email and address in this order; tags trail.
# A leading extra "p" on a prefix (pp/, pe/, pa/) marks that field private.
PERSON_DATA_ARGS_FORMAT = re.compile(
    r"(?P<name>[^/]+)"
    r" (?P<is_phone_private>p?)p/(?P<phone>[^/]+)"
    r" (?P<is_email_private>p?)e/(?P<email>[^/]+)"
    r" (?P<is_address_private>p?)a/(?P<address>[^/]+)"
    r"(?P<tag_arguments>(?: t/[^/]+)*)"
)
TAG_PREFIX = " t/"

PERSON_INDEX_ARGS_FORMAT = re.compile(r"[+-]?\d+", re.ASCII)
KEYWORDS_ARGS_FORMAT = re.compile(r"(?P<keywords>\S+(?:\s+\S+)*)")


class Parser:
    """Maps raw input to commands. Never touches the address book."""

    def parse_command(self, user_input: str) -> Command:
        matcher = BASIC_COMMAND_FORMAT.fullmatch((user_input or "").strip())
        if matcher is None:
            return IncorrectCommand(invalid_command_format(HelpCommand.MESSAGE_USAGE))

        command_word = matcher.group("command_word")
        arguments = matcher.group("arguments")
        logger.debug("Parsing command word %r", command_word)

        if command_word == AddCommand.COMMAND_WORD:
            return self._prepare_add(arguments)
        if command_word == DeleteCommand.COMMAND_WORD:
            return self._prepare_indexed(arguments, DeleteCommand)
        if command_word == ClearCommand.COMMAND_WORD:
            return ClearCommand()
        if command_word == FindCommand.COMMAND_WORD:
            return self._prepare_find(arguments)
        if command_word == ListCommand.COMMAND_WORD:
            return ListCommand()
        if command_word == ViewCommand.COMMAND_WORD:
            return self._prepare_indexed(arguments, ViewCommand)
        if command_word == ViewAllCommand.COMMAND_WORD:
            return self._prepare_indexed(arguments, ViewAllCommand)
        if command_word == ExitCommand.COMMAND_WORD:
            return ExitCommand()
        if command_word == HelpCommand.COMMAND_WORD:
            return HelpCommand()
        return IncorrectCommand(invalid_command_format(HelpCommand.MESSAGE_USAGE))

    def _prepare_add(self, args: str) -> Command:
        matcher = PERSON_DATA_ARGS_FORMAT.fullmatch(args.strip())
        if matcher is None:
            return IncorrectCommand(invalid_command_format(AddCommand.MESSAGE_USAGE))
        try:
            person = Person(
                Name(matcher.group("name")),
                Phone(matcher.group("phone"), is_private=bool(matcher.group("is_phone_private"))),
                Email(matcher.group("email"), is_private=bool(matcher.group("is_email_private"))),
                Address(matcher.group("address"), is_private=bool(matcher.group("is_address_private"))),
                _tags_from_args(matcher.group("tag_arguments")),
            )
        except ValidationError as e:
            return IncorrectCommand(str(e))
        return AddCommand(person)

    def _prepare_indexed(self, args: str, command_type: type) -> Command:
        index = _parse_index(args)
        if index is None:
            return IncorrectCommand(invalid_command_format(command_type.MESSAGE_USAGE))
        return command_type(index)

    def _prepare_find(self, args: str) -> Command:
        matcher = KEYWORDS_ARGS_FORMAT.fullmatch(args.strip())
        if matcher is None:
            return IncorrectCommand(invalid_command_format(FindCommand.MESSAGE_USAGE))
        return FindCommand(matcher.group("keywords").split())


def _parse_index(args: str) -> int | None:
    """Return the single integer argument, or None if args is not exactly one integer."""
    stripped = args.strip()
    if not PERSON_INDEX_ARGS_FORMAT.fullmatch(stripped):
        return None
    return int(stripped)


def _tags_from_args(tag_arguments: str) -> set[Tag]:
    if not tag_arguments:
        return set()
    # Drop the first prefix so splitting leaves only tag values.
    raw_tags = tag_arguments.replace(TAG_PREFIX, "", 1).split(TAG_PREFIX)
    return {Tag(raw) for raw in raw_tags}
