"""Tests for AddressBook: uniqueness, order, removal and clearing."""

import pytest

from addressbook.domain import AddressBook, DuplicatePersonError, Person, PersonNotFoundError, Tag

from helpers import adam, generate_person, generate_persons


def test_empty() -> None:
    book = AddressBook.empty()
    assert len(book) == 0
    assert book.all_persons() == []


def test_add_keeps_insertion_order() -> None:
    persons = [generate_person(3), generate_person(1), generate_person(2)]
    book = AddressBook(persons)
    assert book.all_persons() == persons
    assert list(book) == persons


def test_add_duplicate_rejected_regardless_of_tags() -> None:
    book = AddressBook([adam()])
    p = adam()
    with pytest.raises(DuplicatePersonError):
        book.add_person(Person(p.name, p.phone, p.email, p.address, {Tag("other")}))
    assert len(book) == 1


def test_remove_person() -> None:
    p1, p2, p3 = generate_persons(3)
    book = AddressBook([p1, p2, p3])
    book.remove_person(p2)
    assert book.all_persons() == [p1, p3]
    assert p2 not in book


def test_remove_absent_raises() -> None:
    book = AddressBook([generate_person(1)])
    with pytest.raises(PersonNotFoundError):
        book.remove_person(generate_person(2))
    assert len(book) == 1


def test_clear() -> None:
    book = AddressBook(generate_persons(3))
    book.clear()
    assert len(book) == 0


def test_all_persons_is_a_copy() -> None:
    book = AddressBook(generate_persons(2))
    listed = book.all_persons()
    listed.clear()
    assert len(book) == 2


def test_copy_and_restore_are_independent() -> None:
    book = AddressBook(generate_persons(2))
    snapshot = book.copy()
    book.clear()
    assert len(snapshot) == 2
    book.restore(snapshot)
    assert book == AddressBook(generate_persons(2))


def test_equality_depends_on_order() -> None:
    p1, p2 = generate_persons(2)
    assert AddressBook([p1, p2]) == AddressBook([p1, p2])
    assert AddressBook([p1, p2]) != AddressBook([p2, p1])
