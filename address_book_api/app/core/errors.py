"""
Error types raised by the address book core.

Every error carries a machine readable ``kind``, a human readable
``message`` and, for validation failures, the offending ``field``.
``to_dict`` produces the structured value the HTTP layer returns and
the demonstration script prints.
"""

from typing import Any, Dict, Optional


class AddressBookError(Exception):
    """Base class for all address book errors."""

    kind: str = "address_book_error"

    def __init__(self, message: str, field: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.field = field

    def to_dict(self) -> Dict[str, Any]:
        return {"error": self.kind, "message": self.message, "field": self.field}


class ValidationError(AddressBookError):
    """A contact field (or book name) violates its rule."""

    kind = "validation_error"

    def __init__(self, field: str, message: str) -> None:
        super().__init__(f"{field}: {message}", field=field)


class DuplicateContactError(AddressBookError):
    """A contact with the same first and last name already exists."""

    kind = "duplicate_contact"


class DuplicateNameError(AddressBookError):
    """An address book with the same name already exists."""

    kind = "duplicate_name"


class NotFoundError(AddressBookError):
    """No contact or address book matched the lookup key."""

    kind = "not_found"
