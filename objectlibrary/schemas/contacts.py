"""Contacts app models."""

from enum import Enum
from typing import Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field

from objectlibrary.helpers import compact_lowercased

NO_NAME = "No Name"


class InputField(str, Enum):
    """Attributes a user can edit on a Contact. Values are the UI labels."""

    FIRST_NAME = "First Name"
    LAST_NAME = "Last Name"
    PHONE = "Phone"
    EMAIL = "Email"
    STREET = "Street"
    APARTMENT = "Apartment"
    CITY = "City"
    STATE = "State"
    ZIPCODE = "Zipcode"
    EMERGENCY = "Emergency Contact"


NAME_FIELDS = (InputField.FIRST_NAME, InputField.LAST_NAME)
CONTACT_FIELDS = (InputField.PHONE, InputField.EMAIL)
ADDRESS_FIELDS = (
    InputField.STREET,
    InputField.APARTMENT,
    InputField.CITY,
    InputField.STATE,
    InputField.ZIPCODE,
)
GROUP_FIELDS = (InputField.EMERGENCY,)
SECTIONS = (NAME_FIELDS, CONTACT_FIELDS, ADDRESS_FIELDS, GROUP_FIELDS)


class Address(BaseModel):
    model_config = ConfigDict(frozen=True)

    street: Optional[str] = None
    apartment: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zipcode: Optional[str] = None

    @classmethod
    def create(
        cls,
        street: Optional[str] = None,
        apartment: Optional[str] = None,
        city: Optional[str] = None,
        state: Optional[str] = None,
        zipcode: Optional[str] = None,
    ) -> Optional["Address"]:
        """Return None instead of an Address when every attribute is missing."""
        if all(v is None for v in (street, apartment, city, state, zipcode)):
            return None
        return cls(street=street, apartment=apartment, city=city, state=state, zipcode=zipcode)

    @property
    def searchable_strings(self) -> list[str]:
        return compact_lowercased(
            [self.street, self.apartment, self.city, self.state, self.zipcode]
        )


class Contact(BaseModel):
    """
    An immutable contact. Edits go through copy_with(), which returns a new
    Contact keeping the same id.
    """

    model_config = ConfigDict(frozen=True)

    id: UUID = Field(default_factory=uuid4)
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    address: Optional[Address] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    is_emergency_contact: bool = False

    @classmethod
    def instance(cls) -> "Contact":
        """A new empty contact with a fresh id."""
        return cls()

    @property
    def is_empty(self) -> bool:
        # is_emergency_contact alone does not make a contact non-empty
        return all(
            v is None
            for v in (self.first_name, self.last_name, self.address, self.phone, self.email)
        )

    @property
    def searchable_strings(self) -> list[str]:
        """Lowercased values matched by the contacts list search bar."""
        if self.is_empty:
            return []
        strings = compact_lowercased([self.first_name, self.last_name, self.phone, self.email])
        if self.address is not None:
            strings += self.address.searchable_strings
        return strings

    @property
    def display_text(self) -> str:
        if self.is_empty:
            return ""
        if self.first_name is not None:
            return f"{self.first_name} {self.last_name or ''}".strip()
        return self.last_name or self.phone or self.email or NO_NAME

    @property
    def collation_string(self) -> str:
        """Sort key for the contacts list: last name then first name."""
        if self.is_empty:
            return ""
        last_first = (
            f"{self.last_name}{self.first_name or ''}" if self.last_name is not None else None
        )
        display_text = self.display_text
        if display_text == NO_NAME:
            return last_first or ""
        return last_first or display_text

    def value(self, field: InputField) -> Optional[str]:
        """The stored value for field, as the string the edit form shows."""
        address = self.address
        if field is InputField.FIRST_NAME:
            return self.first_name
        if field is InputField.LAST_NAME:
            return self.last_name
        if field is InputField.PHONE:
            return self.phone
        if field is InputField.EMAIL:
            return self.email
        if field is InputField.STREET:
            return address.street if address else None
        if field is InputField.APARTMENT:
            return address.apartment if address else None
        if field is InputField.CITY:
            return address.city if address else None
        if field is InputField.STATE:
            return address.state if address else None
        if field is InputField.ZIPCODE:
            return address.zipcode if address else None
        return "true" if self.is_emergency_contact else "false"

    def copy_with(self, value: str, field: InputField) -> "Contact":
        """
        Return a copy with field set to value. An empty string clears the field.
        For EMERGENCY, only "true"/"false" change the flag; anything else keeps it.
        """
        new_value = value or None
        current = self.address or Address()

        def pick(target: InputField, old: Optional[str]) -> Optional[str]:
            return new_value if field is target else old

        address = Address.create(
            street=pick(InputField.STREET, current.street),
            apartment=pick(InputField.APARTMENT, current.apartment),
            city=pick(InputField.CITY, current.city),
            state=pick(InputField.STATE, current.state),
            zipcode=pick(InputField.ZIPCODE, current.zipcode),
        )

        is_emergency_contact = self.is_emergency_contact
        if field is InputField.EMERGENCY:
            is_emergency_contact = {"true": True, "false": False}.get(
                value, self.is_emergency_contact
            )

        return Contact(
            id=self.id,
            first_name=pick(InputField.FIRST_NAME, self.first_name),
            last_name=pick(InputField.LAST_NAME, self.last_name),
            address=address,
            phone=pick(InputField.PHONE, self.phone),
            email=pick(InputField.EMAIL, self.email),
            is_emergency_contact=is_emergency_contact,
        )
