"""Command line demonstration of the address book core.

Builds its own ``AddressBookSystem``, creates a "Work" book, adds a
contact, updates the phone number, sorts, deletes the contact and
prints each step.  Any address book error is reported with its kind
and message and the script exits with status 1.

Usage:
    python demo.py [--log-level DEBUG]
"""
import argparse
import json
import logging
import sys

from address_book_api.app.core.errors import AddressBookError
from address_book_api.app.core.logging_config import setup_logging
from address_book_api.app.schemas.contact import Contact, ContactUpdate
from address_book_api.app.services.address_book_system import AddressBookSystem

logger = logging.getLogger("demo")


def run_demo() -> None:
    system = AddressBookSystem()
    book = system.create_address_book("Work")

    john = Contact.create(
        first_name="John",
        last_name="Doe",
        address="123 Street",
        city="New York",
        state="NewYork",
        zip="10001",
        phone="1234567890",
        email="john.doe@example.com",
    )
    jane = Contact.create(
        first_name="Jane",
        last_name="Smith",
        address="456 Avenue",
        city="Boston",
        state="Massachusetts",
        zip="02108",
        phone="9876543210",
        email="jane.smith@example.com",
    )
    book.add_contact(john)
    book.add_contact(jane)
    print("Contacts:")
    for contact in book.list_contacts():
        print(f"  {contact}")

    book.update_by_name("John", ContactUpdate.create(phone="5555555555"))
    print(f"Updated: {book.find_by_name('John')}")

    print("Sorted by first name:")
    for contact in book.sort_by_first_name():
        print(f"  {contact}")

    print(f"Contacts in New York: {book.count_by_city('new york')}")

    book.remove_contact("John")
    book.remove_by_email("jane.smith@example.com")
    print(f"Contacts after delete: {book.list_contacts()}")


def main() -> int:
    parser = argparse.ArgumentParser(description="Address book demonstration")
    parser.add_argument("--log-level", default="WARNING", help="Logging level (default: WARNING)")
    args = parser.parse_args()
    setup_logging(args.log_level)

    try:
        run_demo()
    except AddressBookError as e:
        logger.error("Demo failed: %s", e.message)
        print(json.dumps(e.to_dict()), file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
