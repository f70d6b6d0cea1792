"""
Business logic for a collection of address books.

``AddressBookSystem`` owns uniquely-named ``AddressBook`` instances in
creation order.  The objects themselves are not thread-safe; callers
that share one system between threads (the HTTP layer) hold
``system.lock`` around every operation.
"""

import logging
import threading
from typing import List, Optional

from ..core.errors import DuplicateNameError, NotFoundError, ValidationError
from ..schemas.contact import Contact
from .address_book import AddressBook

logger = logging.getLogger(__name__)


class AddressBookSystem:
    """An owned collection of uniquely-named address books."""

    def __init__(self) -> None:
        self._books: List[AddressBook] = []
        self.lock = threading.RLock()

    def __len__(self) -> int:
        return len(self._books)

    def create_address_book(self, name: str) -> AddressBook:
        """Create, register and return an empty address book."""
        if not isinstance(name, str) or not name.strip():
            raise ValidationError("name", "address book name must not be blank")
        if self.get_address_book(name) is not None:
            logger.warning("Rejected duplicate address book %s", name)
            raise DuplicateNameError(f"Address book '{name}' already exists")
        book = AddressBook(name)
        self._books.append(book)
        logger.info("Created address book %s", name)
        return book

    def get_address_book(self, name: str) -> Optional[AddressBook]:
        """Return the book called ``name`` or ``None``."""
        for book in self._books:
            if book.name == name:
                return book
        return None

    def list_address_books(self) -> List[AddressBook]:
        return list(self._books)

    def remove_address_book(self, name: str) -> AddressBook:
        book = self.get_address_book(name)
        if book is None:
            raise NotFoundError(f"Address book '{name}' not found")
        self._books.remove(book)
        logger.info("Removed address book %s (%s contacts)", name, len(book))
        return book

    def search_by_city(self, city: str) -> List[Contact]:
        """Contacts in ``city`` across all books, in book order."""
        return [contact for book in self._books for contact in book.filter_by_city(city)]

    def search_by_state(self, state: str) -> List[Contact]:
        return [contact for book in self._books for contact in book.filter_by_state(state)]
