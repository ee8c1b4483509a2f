"""Test data builders shared by the test modules."""

from addressbook.domain import Address, AddressBook, Email, Name, Person, Phone, Tag


def adam() -> Person:
    return Person(
        Name("Adam Brown"),
        Phone("111111"),
        Email("adam@gmail.com"),
        Address("111, alpha street"),
        {Tag("tag1"), Tag("tag2")},
    )


def generate_person(seed: int) -> Person:
    """Same seed gives a person with the same state; different seeds give different persons."""
    return Person(
        Name(f"Person {seed}"),
        Phone(str(abs(seed))),
        Email(f"{seed}@email"),
        Address(f"House of {seed}"),
        {Tag(f"tag{abs(seed)}"), Tag(f"tag{abs(seed + 1)}")},
    )


def generate_persons(count: int) -> list[Person]:
    return [generate_person(i) for i in range(1, count + 1)]


def person_with_name(name: str) -> Person:
    return Person(
        Name(name),
        Phone("1"),
        Email("1@email"),
        Address("House of 1"),
        {Tag("tag")},
    )


def address_book_of(persons: list[Person]) -> AddressBook:
    return AddressBook(persons)


def add_command_for(person: Person) -> str:
    parts = ["add", person.name.value]
    parts.append(("pp/" if person.phone.is_private else "p/") + person.phone.value)
    parts.append(("pe/" if person.email.is_private else "e/") + person.email.value)
    parts.append(("pa/" if person.address.is_private else "a/") + person.address.value)
    parts.extend("t/" + tag.value for tag in sorted(person.tags, key=lambda t: t.value))
    return " ".join(parts)
