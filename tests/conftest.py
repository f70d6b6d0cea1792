"""
Shared fixtures for the address book tests.
"""

import pytest
from fastapi.testclient import TestClient

from address_book_api.app.main import create_app
from address_book_api.app.services.address_book import AddressBook
from address_book_api.app.services.address_book_system import AddressBookSystem

from .fixtures import make_contact


@pytest.fixture
def book() -> AddressBook:
    return AddressBook("Work")


@pytest.fixture
def populated_book(book) -> AddressBook:
    """Book holding John Doe (New York), Jane Roe (Boston), Amy Poe (new york)."""
    book.add_contact(make_contact())
    book.add_contact(make_contact(
        first_name="Jane", last_name="Roe", city="Boston", state="Massachusetts",
        email="jane.roe@example.com",
    ))
    book.add_contact(make_contact(
        first_name="Amy", last_name="Poe", city="new york", email="amy.poe@example.com",
    ))
    return book


@pytest.fixture
def system() -> AddressBookSystem:
    return AddressBookSystem()


@pytest.fixture
def client(system) -> TestClient:
    return TestClient(create_app(system))
