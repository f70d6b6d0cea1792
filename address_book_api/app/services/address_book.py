"""
Business logic for a single address book.

An ``AddressBook`` owns an insertion-ordered list of contacts in which
no two contacts share both first and last name.  Lookups (``find_*``)
return ``None`` when nothing matches and filters return an empty
list; removals and updates raise ``NotFoundError`` instead.  Every
contact the book stores or hands out is a copy, so callers can never
change a stored contact except through ``update_by_name`` or
``update_by_email``, which enforce the uniqueness rule.
"""

import logging
from typing import Callable, List, Optional

from ..core.errors import DuplicateContactError, NotFoundError
from ..schemas.contact import Contact, ContactUpdate

logger = logging.getLogger(__name__)

SORTABLE_FIELDS = ("first_name", "last_name", "city", "state", "zip")


class AddressBook:
    """A named collection of unique contacts."""

    def __init__(self, name: str) -> None:
        self.name = name
        self._contacts: List[Contact] = []

    def __len__(self) -> int:
        return len(self._contacts)

    def __repr__(self) -> str:
        return f"AddressBook(name={self.name!r}, contacts={len(self._contacts)})"

    def _first(self, predicate: Callable[[Contact], bool]) -> Optional[Contact]:
        for contact in self._contacts:
            if predicate(contact):
                return contact
        return None

    def _by_name(self, name: str) -> Optional[Contact]:
        return self._first(lambda c: c.matches_name(name))

    def _by_email(self, email: str) -> Optional[Contact]:
        wanted = email.strip().lower()
        return self._first(lambda c: c.email.lower() == wanted)

    def _detach(self, contact: Contact) -> None:
        self._contacts = [c for c in self._contacts if c is not contact]
        logger.info("Removed contact %s from %s", contact.full_name, self.name)

    def _apply_patch(self, contact: Contact, patch: ContactUpdate) -> Contact:
        updated = contact.merged(patch)
        clash = self._first(lambda c: c is not contact and c.name_key == updated.name_key)
        if clash is not None:
            raise DuplicateContactError(
                f"Contact {updated.full_name} already exists in address book '{self.name}'"
            )
        changes = patch.changes()
        for field, value in changes.items():
            setattr(contact, field, value)
        logger.info("Updated contact %s in %s: %s", contact.full_name, self.name, sorted(changes))
        return contact.model_copy()

    def add_contact(self, contact: Contact) -> Contact:
        """Store a copy of ``contact`` unless its name pair is already present.

        Returns the stored copy; later changes to the caller's object do
        not reach the book.
        """
        if self._first(lambda c: c.name_key == contact.name_key) is not None:
            logger.warning("Rejected duplicate contact %s in %s", contact.full_name, self.name)
            raise DuplicateContactError(
                f"Contact {contact.full_name} already exists in address book '{self.name}'"
            )
        stored = contact.model_copy()
        self._contacts.append(stored)
        logger.info("Added contact %s to %s", stored.full_name, self.name)
        return stored.model_copy()

    def remove_contact(self, name: str) -> Contact:
        """Remove the first contact matching ``name`` and return it."""
        contact = self._by_name(name)
        if contact is None:
            raise NotFoundError(f"No contact named '{name}' in address book '{self.name}'")
        self._detach(contact)
        return contact

    def remove_by_email(self, email: str) -> Contact:
        """Remove the first contact with ``email`` and return it."""
        contact = self._by_email(email)
        if contact is None:
            raise NotFoundError(f"No contact with email '{email}' in address book '{self.name}'")
        self._detach(contact)
        return contact

    def find_by_email(self, email: str) -> Optional[Contact]:
        contact = self._by_email(email)
        return contact.model_copy() if contact is not None else None

    def find_by_name(self, name: str) -> Optional[Contact]:
        """First contact whose first, last or full name equals ``name``.

        Comparison is case-insensitive.
        """
        contact = self._by_name(name)
        return contact.model_copy() if contact is not None else None

    def update_by_name(self, name: str, patch: ContactUpdate) -> Contact:
        """Apply ``patch`` to the first contact matching ``name``.

        The patched contact is validated as a whole before anything is
        written, so a rejected patch leaves the contact untouched.  A
        rename onto another contact's name pair is rejected with
        ``DuplicateContactError``.
        """
        contact = self._by_name(name)
        if contact is None:
            raise NotFoundError(f"No contact named '{name}' in address book '{self.name}'")
        return self._apply_patch(contact, patch)

    def update_by_email(self, email: str, patch: ContactUpdate) -> Contact:
        """Apply ``patch`` to the first contact with ``email``."""
        contact = self._by_email(email)
        if contact is None:
            raise NotFoundError(f"No contact with email '{email}' in address book '{self.name}'")
        return self._apply_patch(contact, patch)

    def list_contacts(self) -> List[Contact]:
        return [c.model_copy() for c in self._contacts]

    def filter_contacts(self, city: Optional[str] = None, state: Optional[str] = None) -> List[Contact]:
        """Contacts matching every given criterion, case-insensitively."""
        matches = self._contacts
        if city is not None:
            matches = [c for c in matches if c.city.lower() == city.lower()]
        if state is not None:
            matches = [c for c in matches if c.state.lower() == state.lower()]
        return [c.model_copy() for c in matches]

    def filter_by_city(self, city: str) -> List[Contact]:
        return self.filter_contacts(city=city)

    def filter_by_state(self, state: str) -> List[Contact]:
        return self.filter_contacts(state=state)

    def count_by_city(self, city: str) -> int:
        return len(self.filter_by_city(city))

    def count_by_state(self, state: str) -> int:
        return len(self.filter_by_state(state))

    def sort_by(self, field: str) -> List[Contact]:
        """Sort contacts in place by ``field`` and return a copy.

        The sort is stable and case-sensitive.  Only the fields in
        ``SORTABLE_FIELDS`` are accepted.
        """
        if field not in SORTABLE_FIELDS:
            raise ValueError(
                f"Cannot sort by '{field}'. Allowed: {', '.join(SORTABLE_FIELDS)}"
            )
        self._contacts.sort(key=lambda c: getattr(c, field))
        logger.debug("Sorted %s by %s", self.name, field)
        return self.list_contacts()

    def sort_by_first_name(self) -> List[Contact]:
        return self.sort_by("first_name")
