"""
Interactive address book shell: reads one command per line from stdin.
Run: python -m shell (from repo root, with .env or env vars set).
"""

import logging
import sys
from collections.abc import Iterable
from typing import TextIO

from addressbook.application import CommandResult, ExitCommand, Logic, StorageError
from addressbook.application.messages import (
    MESSAGE_GOODBYE,
    MESSAGE_USING_STORAGE_FILE,
    MESSAGE_WELCOME,
)
from addressbook.domain import Person
from addressbook.infrastructure import Settings, YamlStorageFile, load_env_file

logger = logging.getLogger(__name__)

PROMPT = "Enter command: "
DIVIDER = "==================================================="


def format_person_list(persons: Iterable[Person]) -> str:
    """Number persons from 1, the index used by view/viewall/delete."""
    return "\n".join(
        f"\t{i}. {person.as_text_hide_private()}" for i, person in enumerate(persons, start=1)
    )


def format_result(result: CommandResult) -> str:
    if result.has_relevant_persons and result.relevant_persons:
        return f"{format_person_list(result.relevant_persons)}\n{result.feedback_to_user}"
    return result.feedback_to_user


def run(logic: Logic, lines: Iterable[str], out: TextIO) -> int:
    """Execute lines until exit or end of input. Returns the process exit code."""
    print(DIVIDER, file=out)
    print(MESSAGE_WELCOME, file=out)
    print(DIVIDER, file=out)
    for line in lines:
        command = logic.parse(line)
        try:
            result = logic.execute_command(command)
        except StorageError as e:
            logger.error("%s", e)
            print(str(e), file=out)
            return 1
        print(format_result(result), file=out)
        print(DIVIDER, file=out)
        if ExitCommand.is_exit(command):
            break
    print(MESSAGE_GOODBYE, file=out)
    return 0


def _stdin_lines() -> Iterable[str]:
    while True:
        try:
            yield input(PROMPT)
        except EOFError:
            return


def main() -> None:
    load_env_file()
    try:
        settings = Settings.from_env()
    except ValueError as e:
        raise SystemExit(str(e))
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=settings.log_level,
    )
    try:
        storage = YamlStorageFile(settings.storage_file)
        logic = Logic(storage)
    except StorageError as e:
        logger.error("Could not start address book: %s", e)
        raise SystemExit(1)
    print(MESSAGE_USING_STORAGE_FILE.format(storage.path))
    sys.exit(run(logic, _stdin_lines(), sys.stdout))


if __name__ == "__main__":
    main()
