"""Tests for the interactive shell loop. No terminal; lines and output are in-memory."""

import io

from addressbook.application import ExitCommand, Logic, StorageError
from addressbook.application.messages import MESSAGE_GOODBYE
from addressbook.domain import AddressBook
from addressbook.infrastructure import InMemoryStorage, YamlStorageFile
from shell.__main__ import run

from helpers import add_command_for, generate_person


def test_run_until_exit(tmp_path) -> None:
    storage = YamlStorageFile(tmp_path / "book.yaml")
    logic = Logic(storage)
    out = io.StringIO()
    lines = [add_command_for(generate_person(1)), "list", "exit", "clear"]

    code = run(logic, lines, out)

    text = out.getvalue()
    assert code == 0
    assert "New person added: Person 1" in text
    assert "\t1. Person 1 Phone: 1" in text
    assert "1 persons listed!" in text
    assert ExitCommand.MESSAGE_EXIT_ACKNOWLEDGEMENT in text
    assert text.rstrip().endswith(MESSAGE_GOODBYE)
    # Lines after exit are not run.
    assert storage.load() == AddressBook([generate_person(1)])


def test_run_stops_at_end_of_input() -> None:
    out = io.StringIO()
    assert run(Logic(InMemoryStorage()), ["help"], out) == 0
    assert MESSAGE_GOODBYE in out.getvalue()


class _FailingStorage(InMemoryStorage):
    def save(self, address_book):
        raise StorageError("Error writing to file: book.yaml")


def test_run_storage_error_exits_non_zero() -> None:
    out = io.StringIO()
    code = run(Logic(_FailingStorage()), ["clear", "list"], out)
    assert code == 1
    assert "Error writing to file: book.yaml" in out.getvalue()
    assert "persons listed" not in out.getvalue()
