"""In-memory implementation of AddressBookStorage (no file)."""

from addressbook.domain import AddressBook


class InMemoryStorage:
    """Keeps a copy of the last saved address book. Order preserved."""

    def __init__(self, address_book: AddressBook | None = None) -> None:
        self._saved = address_book.copy() if address_book is not None else AddressBook.empty()
        self.save_count = 0

    def load(self) -> AddressBook:
        return self._saved.copy()

    def save(self, address_book: AddressBook) -> None:
        self._saved = address_book.copy()
        self.save_count += 1
