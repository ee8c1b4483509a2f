"""Application ports (interfaces). Implemented by infrastructure adapters."""

from typing import Protocol

from addressbook.domain import AddressBook


class AddressBookStorage(Protocol):
    """Loads and saves the whole address book. Both raise StorageError on failure."""

    def load(self) -> AddressBook:
        """Return the stored address book, or an empty one if nothing is stored yet."""
        ...

    def save(self, address_book: AddressBook) -> None:
        """Overwrite storage with the full contents of address_book, keeping order."""
        ...
