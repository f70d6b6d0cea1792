"""
Service layer.

The services hold the address book state in memory and enforce the
uniqueness and lookup rules.  They are plain synchronous classes
usable without the HTTP layer.
"""

from .address_book import AddressBook
from .address_book_system import AddressBookSystem

__all__ = ["AddressBook", "AddressBookSystem"]
