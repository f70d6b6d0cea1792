"""
Contact endpoints for API v1.

All routes live under ``/address-books/{book}/contacts`` and operate on
the contacts of one book.  Contacts have no surrogate key, so single
contacts are addressed by name (first, last or "First Last",
case-insensitive) or by email.  Core errors propagate to the
application's exception handler, which turns them into structured
JSON responses.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from address_book_api.app.core.state import get_book, get_system
from address_book_api.app.schemas.address_book import ContactCount
from address_book_api.app.schemas.contact import Contact, ContactRead, ContactUpdate
from address_book_api.app.services.address_book_system import AddressBookSystem

router = APIRouter()


def _exactly_one(first: Optional[str], second: Optional[str], names: str) -> None:
    if (first is None) == (second is None):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Provide exactly one of {names}",
        )


@router.post("", response_model=ContactRead, status_code=status.HTTP_201_CREATED)
async def add_contact(
    book: str,
    contact_in: Contact,
    system: AddressBookSystem = Depends(get_system),
) -> ContactRead:
    """Add a contact to a book.

    Returns HTTP 409 if a contact with the same first and last name is
    already in the book.
    """
    with system.lock:
        contact = get_book(system, book).add_contact(contact_in)
        return ContactRead.from_contact(contact)


@router.get("", response_model=List[ContactRead])
async def list_contacts(
    book: str,
    city: Optional[str] = Query(None),
    state: Optional[str] = Query(None),
    sort_by: Optional[str] = Query(None, description="first_name, last_name, city, state or zip"),
    system: AddressBookSystem = Depends(get_system),
) -> List[ContactRead]:
    """List contacts, optionally filtered by city and/or state.

    When ``sort_by`` is given the book itself is re-sorted before the
    filters are applied.
    """
    with system.lock:
        address_book = get_book(system, book)
        if sort_by is not None:
            try:
                address_book.sort_by(sort_by)
            except ValueError as e:
                raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
        contacts = address_book.filter_contacts(city=city, state=state)
        return [ContactRead.from_contact(c) for c in contacts]


@router.get("/count", response_model=ContactCount)
async def count_contacts(
    book: str,
    city: Optional[str] = Query(None),
    state: Optional[str] = Query(None),
    system: AddressBookSystem = Depends(get_system),
) -> ContactCount:
    """Count contacts in a city or in a state."""
    _exactly_one(city, state, "'city' or 'state'")
    with system.lock:
        address_book = get_book(system, book)
        if city is not None:
            return ContactCount(count=address_book.count_by_city(city))
        return ContactCount(count=address_book.count_by_state(state))


@router.get("/lookup", response_model=ContactRead)
async def lookup_contact(
    book: str,
    name: Optional[str] = Query(None),
    email: Optional[str] = Query(None),
    system: AddressBookSystem = Depends(get_system),
) -> ContactRead:
    """Find one contact by name or by email.

    Returns HTTP 404 if nothing matches.
    """
    _exactly_one(name, email, "'name' or 'email'")
    with system.lock:
        address_book = get_book(system, book)
        if name is not None:
            contact = address_book.find_by_name(name)
        else:
            contact = address_book.find_by_email(email)
        if contact is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Contact not found")
        return ContactRead.from_contact(contact)


@router.post("/sort", response_model=List[ContactRead])
async def sort_contacts(
    book: str,
    field: str = Query("first_name"),
    system: AddressBookSystem = Depends(get_system),
) -> List[ContactRead]:
    """Sort the book in place and return the new order."""
    with system.lock:
        try:
            contacts = get_book(system, book).sort_by(field)
        except ValueError as e:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
        return [ContactRead.from_contact(c) for c in contacts]


@router.put("/{name}", response_model=ContactRead)
async def update_contact(
    book: str,
    name: str,
    patch: ContactUpdate,
    system: AddressBookSystem = Depends(get_system),
) -> ContactRead:
    """Update the first contact matching ``name``.

    Only fields present in the body change.  Returns HTTP 404 if no
    contact matches and HTTP 422 if the patched contact would be
    invalid.
    """
    with system.lock:
        contact = get_book(system, book).update_by_name(name, patch)
        return ContactRead.from_contact(contact)


@router.put("/by-email/{email}", response_model=ContactRead)
async def update_contact_by_email(
    book: str,
    email: str,
    patch: ContactUpdate,
    system: AddressBookSystem = Depends(get_system),
) -> ContactRead:
    """Update the contact with the given email.

    Same rules as updating by name.
    """
    with system.lock:
        contact = get_book(system, book).update_by_email(email, patch)
        return ContactRead.from_contact(contact)


@router.delete("/by-email/{email}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_contact_by_email(
    book: str,
    email: str,
    system: AddressBookSystem = Depends(get_system),
) -> None:
    """Delete the contact with the given email."""
    with system.lock:
        get_book(system, book).remove_by_email(email)
    return None


@router.delete("/{name}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_contact(
    book: str,
    name: str,
    system: AddressBookSystem = Depends(get_system),
) -> None:
    """Delete the first contact matching ``name``."""
    with system.lock:
        get_book(system, book).remove_contact(name)
    return None
