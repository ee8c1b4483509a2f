"""Result returned to the caller after executing a command."""

from collections.abc import Iterable
from dataclasses import dataclass

from addressbook.domain import Person


@dataclass(frozen=True)
class CommandResult:
    """
    Feedback for the user plus, for list-producing commands only, the persons shown.
    relevant_persons is None when the command produces no list; an empty tuple is an empty match.
    """

    feedback_to_user: str
    relevant_persons: tuple[Person, ...] | None = None

    @classmethod
    def with_persons(cls, feedback_to_user: str, persons: Iterable[Person]) -> "CommandResult":
        return cls(feedback_to_user=feedback_to_user, relevant_persons=tuple(persons))

    @property
    def has_relevant_persons(self) -> bool:
        return self.relevant_persons is not None
