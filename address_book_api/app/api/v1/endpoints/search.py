"""
Cross-book search endpoint for API v1.

Mounted at ``/search`` rather than under ``/address-books`` so that
no book name can shadow it.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from address_book_api.app.core.state import get_system
from address_book_api.app.schemas.contact import ContactRead
from address_book_api.app.services.address_book_system import AddressBookSystem

router = APIRouter()


@router.get("", response_model=List[ContactRead])
async def search_contacts(
    city: Optional[str] = Query(None),
    state: Optional[str] = Query(None),
    system: AddressBookSystem = Depends(get_system),
) -> List[ContactRead]:
    """Find contacts by city or by state across every address book.

    Exactly one of ``city`` and ``state`` must be given.
    """
    if (city is None) == (state is None):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Provide exactly one of 'city' or 'state'",
        )
    with system.lock:
        if city is not None:
            contacts = system.search_by_city(city)
        else:
            contacts = system.search_by_state(state)
        return [ContactRead.from_contact(c) for c in contacts]
