"""
Address book endpoints for API v1.

These routes create, list and delete the books of the application's
``AddressBookSystem``.  Every handler holds the system lock while it
touches shared state.
"""

from typing import List

from fastapi import APIRouter, Depends, status

from address_book_api.app.core.state import get_book, get_system
from address_book_api.app.schemas.address_book import AddressBookCreate, AddressBookRead
from address_book_api.app.services.address_book import AddressBook
from address_book_api.app.services.address_book_system import AddressBookSystem

router = APIRouter()


def _to_read(book: AddressBook) -> AddressBookRead:
    return AddressBookRead(name=book.name, contact_count=len(book))


@router.post("", response_model=AddressBookRead, status_code=status.HTTP_201_CREATED)
async def create_address_book(
    book_in: AddressBookCreate,
    system: AddressBookSystem = Depends(get_system),
) -> AddressBookRead:
    """Create a new, empty address book.

    Returns HTTP 409 if a book with the same name already exists.
    """
    with system.lock:
        book = system.create_address_book(book_in.name)
        return _to_read(book)


@router.get("", response_model=List[AddressBookRead])
async def list_address_books(
    system: AddressBookSystem = Depends(get_system),
) -> List[AddressBookRead]:
    """Return all address books in creation order."""
    with system.lock:
        return [_to_read(book) for book in system.list_address_books()]


@router.get("/{book}", response_model=AddressBookRead)
async def get_address_book(
    book: str,
    system: AddressBookSystem = Depends(get_system),
) -> AddressBookRead:
    """Retrieve a single address book summary.

    Returns HTTP 404 if the book does not exist.
    """
    with system.lock:
        return _to_read(get_book(system, book))


@router.delete("/{book}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_address_book(
    book: str,
    system: AddressBookSystem = Depends(get_system),
) -> None:
    """Delete an address book and every contact in it."""
    with system.lock:
        system.remove_address_book(book)
    return None
