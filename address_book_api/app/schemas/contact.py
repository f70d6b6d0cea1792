"""
Pydantic models for contact data.

``Contact`` is the validated record stored in an address book,
``ContactUpdate`` is the partial patch accepted by
``AddressBook.update_by_name`` and ``ContactRead`` is the shape
returned by the API.  All three share one set of field rules so a
value that cannot be constructed can never be patched in either.

pydantic reports problems with its own ``ValidationError``; the
``create`` helpers translate the first reported problem into
:class:`~address_book_api.app.core.errors.ValidationError` naming the
offending field.
"""

from __future__ import annotations

import re
from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator
from pydantic import ValidationError as PydanticValidationError

from ..core.errors import ValidationError


NAME_PATTERN = re.compile(r"[A-Z][A-Za-z]{2,}")
ADDRESS_PATTERN = re.compile(r".{4,}", re.DOTALL)
STATE_PATTERN = re.compile(r"[A-Za-z]{4,}")
ZIP_PATTERN = re.compile(r"[0-9]{5,6}")
PHONE_PATTERN = re.compile(r"[0-9]{10}")
EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[A-Za-z]{2,}")

REQUEST_LOCATIONS = ("body", "query", "path")

FIELD_RULES: Dict[str, Tuple[re.Pattern, str]] = {
    "first_name": (NAME_PATTERN, "must start with an uppercase letter followed by at least 2 letters"),
    "last_name": (NAME_PATTERN, "must start with an uppercase letter followed by at least 2 letters"),
    "address": (ADDRESS_PATTERN, "must be at least 4 characters long"),
    "city": (ADDRESS_PATTERN, "must be at least 4 characters long"),
    "state": (STATE_PATTERN, "must contain only letters and be at least 4 characters long"),
    "zip": (ZIP_PATTERN, "must be 5 or 6 digits"),
    "phone": (PHONE_PATTERN, "must be exactly 10 digits"),
    "email": (EMAIL_PATTERN, "must be a valid email address like name@domain.tld"),
}


def check_field(field: str, value: Any) -> str:
    """Validate ``value`` against the rule for ``field``.

    Raises ``ValueError`` with the rule text when the value does not
    match; pydantic wraps it into its own error which ``create``
    translates back.
    """
    if not isinstance(value, str):
        raise ValueError("must be a string")
    pattern, rule = FIELD_RULES[field]
    if not pattern.fullmatch(value):
        raise ValueError(rule)
    return value


def translate_error(exc: Any) -> ValidationError:
    """Convert the first reported error into our ``ValidationError``.

    Accepts anything with pydantic's ``errors()`` shape, which
    includes FastAPI's ``RequestValidationError``.
    """
    errors = exc.errors()
    if not errors:
        return ValidationError("contact", str(exc))
    first = errors[0]
    # Requests report ("body", field) or ("query", name); models report (field,).
    loc = [part for part in first.get("loc", ()) if part not in REQUEST_LOCATIONS]
    field = str(loc[0]) if loc else "contact"
    ctx_error = (first.get("ctx") or {}).get("error")
    message = str(ctx_error) if ctx_error is not None else first.get("msg", "invalid value")
    return ValidationError(field, message)


class Contact(BaseModel):
    """A validated contact record.

    Fields may be reassigned after construction; every assignment is
    validated with the same rules as construction.
    """

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    first_name: str = Field(..., examples=["John"])
    last_name: str = Field(..., examples=["Doe"])
    address: str = Field(..., examples=["123 Main Street"])
    city: str = Field(..., examples=["New York"])
    state: str = Field(..., examples=["NewYork"])
    zip: str = Field(..., examples=["10001"])
    phone: str = Field(..., examples=["1234567890"])
    email: str = Field(..., examples=["john.doe@example.com"])

    @field_validator("*", mode="before")
    @classmethod
    def validate_rule(cls, value: Any, info: ValidationInfo) -> str:
        return check_field(info.field_name, value)

    @classmethod
    def create(cls, **fields: Any) -> "Contact":
        """Construct a contact, raising our ``ValidationError`` on failure."""
        try:
            return cls(**fields)
        except PydanticValidationError as exc:
            raise translate_error(exc) from exc

    @property
    def name_key(self) -> Tuple[str, str]:
        """Uniqueness key within an address book."""
        return (self.first_name, self.last_name)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def matches_name(self, name: str) -> bool:
        """Case-insensitive match against first, last or full name."""
        wanted = name.strip().lower()
        return wanted in (
            self.first_name.lower(),
            self.last_name.lower(),
            self.full_name.lower(),
        )

    def merged(self, patch: "ContactUpdate") -> "Contact":
        """Return a new contact with ``patch`` applied.

        The merged field set is validated as a whole; ``self`` is not
        modified.
        """
        fields = self.model_dump()
        fields.update(patch.changes())
        return Contact.create(**fields)

    def render(self) -> str:
        """Return all fields as one line in a fixed order."""
        return (
            f"{self.first_name} {self.last_name}, {self.address}, {self.city}, "
            f"{self.state}, {self.zip}, {self.phone}, {self.email}"
        )

    def __str__(self) -> str:
        return self.render()


class ContactUpdate(BaseModel):
    """Schema for updating an existing contact.

    All fields are optional; only provided values will be updated.
    Provided values must satisfy the same rules as on creation.
    """

    model_config = ConfigDict(extra="forbid")

    first_name: Optional[str] = None
    last_name: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None

    @field_validator("*", mode="before")
    @classmethod
    def validate_rule(cls, value: Any, info: ValidationInfo) -> Optional[str]:
        if value is None:
            return None
        return check_field(info.field_name, value)

    @classmethod
    def create(cls, **fields: Any) -> "ContactUpdate":
        try:
            return cls(**fields)
        except PydanticValidationError as exc:
            raise translate_error(exc) from exc

    def changes(self) -> Dict[str, str]:
        """Fields that were actually provided."""
        return self.model_dump(exclude_none=True)


class ContactRead(BaseModel):
    """Schema for reading a contact from the API."""

    first_name: str
    last_name: str
    address: str
    city: str
    state: str
    zip: str
    phone: str
    email: str
    display: str

    @classmethod
    def from_contact(cls, contact: Contact) -> "ContactRead":
        return cls(**contact.model_dump(), display=contact.render())
