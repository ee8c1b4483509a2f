"""Person: a contact record aggregating validated field values and tags."""

from collections.abc import Iterable

from addressbook.domain.fields import Address, Email, Name, Phone, Tag


class Person:
    """
    A contact in the address book. Field values are validated on construction.
    Two persons are the same when name, phone, email and address match; tags are ignored.
    """

    __slots__ = ("_name", "_phone", "_email", "_address", "_tags")

    def __init__(
        self,
        name: Name,
        phone: Phone,
        email: Email,
        address: Address,
        tags: Iterable[Tag] = (),
    ) -> None:
        self._name = name
        self._phone = phone
        self._email = email
        self._address = address
        self._tags = frozenset(tags)

    @property
    def name(self) -> Name:
        return self._name

    @property
    def phone(self) -> Phone:
        return self._phone

    @property
    def email(self) -> Email:
        return self._email

    @property
    def address(self) -> Address:
        return self._address

    @property
    def tags(self) -> set[Tag]:
        """A copy of the tags; changing it does not affect this person."""
        return set(self._tags)

    def is_same_state_as(self, other: object) -> bool:
        if other is self:
            return True
        if not isinstance(other, Person):
            return False
        return (
            other.name == self.name
            and other.phone == self.phone
            and other.email == self.email
            and other.address == self.address
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Person):
            return NotImplemented
        return self.is_same_state_as(other)

    def __hash__(self) -> int:
        return hash((self._name, self._phone, self._email, self._address))

    def _tags_text(self) -> str:
        return "".join(f"[{t.value}]" for t in sorted(self._tags, key=lambda t: t.value))

    def as_text(self) -> str:
        """Format every field, private ones included."""
        return (
            f"{self.name} Phone: {self.phone} Email: {self.email} "
            f"Address: {self.address} Tags: {self._tags_text()}"
        )

    def as_text_hide_private(self) -> str:
        """Format the person, leaving out fields marked private."""
        parts = [str(self.name)]
        if not self.phone.is_private:
            parts.append(f"Phone: {self.phone}")
        if not self.email.is_private:
            parts.append(f"Email: {self.email}")
        if not self.address.is_private:
            parts.append(f"Address: {self.address}")
        parts.append(f"Tags: {self._tags_text()}")
        return " ".join(parts)

    def __str__(self) -> str:
        return self.as_text()

    def __repr__(self) -> str:
        return f"Person({self.as_text()!r})"
