"""AddressBook: insertion-ordered collection of unique persons."""

from collections.abc import Iterable, Iterator

from addressbook.domain.errors import DuplicatePersonError, PersonNotFoundError
from addressbook.domain.person import Person


class AddressBook:
    """Stores persons in insertion order. No two persons may be the same (name, phone, email, address)."""

    def __init__(self, persons: Iterable[Person] = ()) -> None:
        self._persons: list[Person] = []
        for person in persons:
            self.add_person(person)

    @classmethod
    def empty(cls) -> "AddressBook":
        return cls()

    def add_person(self, person: Person) -> None:
        """Append person. Raises DuplicatePersonError if the same person is already stored."""
        if self.contains(person):
            raise DuplicatePersonError("This person already exists in the address book")
        self._persons.append(person)

    def remove_person(self, person: Person) -> None:
        """Remove the stored person equal to person. Raises PersonNotFoundError if absent."""
        for i, stored in enumerate(self._persons):
            if stored.is_same_state_as(person):
                del self._persons[i]
                return
        raise PersonNotFoundError("Person could not be found in address book")

    def contains(self, person: Person) -> bool:
        return any(stored.is_same_state_as(person) for stored in self._persons)

    def clear(self) -> None:
        self._persons.clear()

    def all_persons(self) -> list[Person]:
        """Return all persons in insertion order (a new list)."""
        return list(self._persons)

    def copy(self) -> "AddressBook":
        # Persons are immutable, so a shallow copy is independent.
        book = AddressBook()
        book._persons = list(self._persons)
        return book

    def restore(self, snapshot: "AddressBook") -> None:
        """Replace contents with those of snapshot, keeping this object's identity."""
        self._persons = list(snapshot._persons)

    def __contains__(self, person: object) -> bool:
        return isinstance(person, Person) and self.contains(person)

    def __iter__(self) -> Iterator[Person]:
        return iter(list(self._persons))

    def __len__(self) -> int:
        return len(self._persons)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AddressBook):
            return NotImplemented
        return self._persons == other._persons

    def __repr__(self) -> str:
        return f"AddressBook({self._persons!r})"
