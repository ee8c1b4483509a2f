"""Application errors: displayed-index resolution and storage failures."""

from addressbook.domain.errors import AddressBookError


class PersonIndexOutOfRangeError(AddressBookError, IndexError):
    """The index does not point into the last shown list."""


class StorageError(AddressBookError):
    """Reading or writing the address book file failed. Fatal for the current command."""


class InvalidStorageFilePathError(StorageError):
    """The storage path has an unsupported extension."""
