"""Domain errors raised by value objects and the address book model."""


class AddressBookError(Exception):
    """Base class for errors raised by the address book core."""


class ValidationError(AddressBookError, ValueError):
    """A field value does not match its format rule. Message is the field's constraint."""


class DuplicatePersonError(AddressBookError):
    """A person with the same name, phone, email and address already exists."""


class PersonNotFoundError(AddressBookError):
    """The person is not (or no longer) in the address book."""
