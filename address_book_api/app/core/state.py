"""
Application state shared by the API routes.

Each FastAPI application owns exactly one ``AddressBookSystem``,
stored on ``app.state.system``.  ``get_system`` is the dependency
routes use to reach it, and ``get_book`` resolves a book name from the
URL path or raises ``NotFoundError``.
"""

import logging
from typing import Iterable

from fastapi import Request

from .errors import NotFoundError
from ..services.address_book import AddressBook
from ..services.address_book_system import AddressBookSystem

logger = logging.getLogger(__name__)


def build_system(default_books: Iterable[str] = ()) -> AddressBookSystem:
    """Create a system pre-populated with empty books."""
    system = AddressBookSystem()
    for name in default_books:
        system.create_address_book(name)
    if len(system):
        logger.info("Initialised %s default address books", len(system))
    return system


def get_system(request: Request) -> AddressBookSystem:
    """FastAPI dependency returning the application's system."""
    return request.app.state.system


def get_book(system: AddressBookSystem, name: str) -> AddressBook:
    book = system.get_address_book(name)
    if book is None:
        raise NotFoundError(f"Address book '{name}' not found")
    return book
