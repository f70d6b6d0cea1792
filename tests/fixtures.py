"""
Contact builders shared by the test modules.
"""

from address_book_api.app.schemas.contact import Contact


def contact_fields(**overrides):
    """A valid set of contact fields, with optional overrides."""
    fields = {
        "first_name": "John",
        "last_name": "Doe",
        "address": "123 Street",
        "city": "New York",
        "state": "NewYork",
        "zip": "10001",
        "phone": "1234567890",
        "email": "john.doe@example.com",
    }
    fields.update(overrides)
    return fields


def make_contact(**overrides) -> Contact:
    return Contact.create(**contact_fields(**overrides))
