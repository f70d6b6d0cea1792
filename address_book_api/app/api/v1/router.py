"""
Top‑level router for version 1 of the API.

Aggregates the address book, contact and search routers.  Contact
routes are nested under a book, so the book name is part of their prefix.
"""

from fastapi import APIRouter

from .endpoints import address_books, contacts, search

router = APIRouter()

router.include_router(address_books.router, prefix="/address-books", tags=["address-books"])
router.include_router(contacts.router, prefix="/address-books/{book}/contacts", tags=["contacts"])
router.include_router(search.router, prefix="/search", tags=["search"])
