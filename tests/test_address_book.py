"""
AddressBook operations: uniqueness, lookup, update, filter and sort.
"""

import pytest

from address_book_api.app.core.errors import DuplicateContactError, NotFoundError, ValidationError
from address_book_api.app.schemas.contact import ContactUpdate
from address_book_api.app.services.address_book import AddressBook

from .fixtures import make_contact


class TestAddContact:

    def test_appends_in_insertion_order(self, populated_book):
        names = [c.first_name for c in populated_book.list_contacts()]
        assert names == ["John", "Jane", "Amy"]
        assert len(populated_book) == 3

    def test_duplicate_name_pair_rejected(self, book):
        book.add_contact(make_contact())
        with pytest.raises(DuplicateContactError):
            book.add_contact(make_contact(email="other@example.com", phone="9999999999"))
        assert len(book) == 1

    def test_same_email_different_name_allowed(self, book):
        book.add_contact(make_contact())
        book.add_contact(make_contact(first_name="Johnny"))
        assert len(book) == 2

    def test_same_first_name_different_last_name_allowed(self, book):
        book.add_contact(make_contact())
        book.add_contact(make_contact(last_name="Smith"))
        assert len(book) == 2


class TestLookup:

    def test_find_by_first_name_case_insensitive(self, populated_book):
        assert populated_book.find_by_name("jane").last_name == "Roe"

    def test_find_by_last_name(self, populated_book):
        assert populated_book.find_by_name("POE").first_name == "Amy"

    def test_find_by_full_name(self, populated_book):
        assert populated_book.find_by_name("john doe").first_name == "John"

    def test_find_by_name_absent(self, populated_book):
        assert populated_book.find_by_name("Nobody") is None

    def test_find_by_email(self, populated_book):
        assert populated_book.find_by_email("JANE.ROE@example.com").first_name == "Jane"

    def test_find_by_email_absent(self, populated_book):
        assert populated_book.find_by_email("ghost@example.com") is None

    def test_list_is_a_copy(self, populated_book):
        contacts = populated_book.list_contacts()
        contacts.clear()
        assert len(populated_book) == 3


class TestRemove:

    def test_remove_by_name(self, populated_book):
        removed = populated_book.remove_contact("Jane")
        assert removed.last_name == "Roe"
        assert [c.first_name for c in populated_book.list_contacts()] == ["John", "Amy"]

    def test_remove_only_first_match(self, book):
        book.add_contact(make_contact())
        book.add_contact(make_contact(last_name="Smith"))
        book.remove_contact("John")
        assert [c.last_name for c in book.list_contacts()] == ["Smith"]

    def test_remove_absent_name(self, populated_book):
        with pytest.raises(NotFoundError):
            populated_book.remove_contact("Nobody")
        assert len(populated_book) == 3

    def test_remove_by_email(self, populated_book):
        populated_book.remove_by_email("amy.poe@example.com")
        assert populated_book.find_by_name("Amy") is None

    def test_remove_absent_email(self, populated_book):
        with pytest.raises(NotFoundError):
            populated_book.remove_by_email("ghost@example.com")
        assert len(populated_book) == 3


class TestUpdateByName:

    def test_only_patched_fields_change(self, populated_book):
        before = populated_book.find_by_name("John").model_dump()
        updated = populated_book.update_by_name("John", ContactUpdate.create(phone="5555555555"))
        after = updated.model_dump()
        assert after["phone"] == "5555555555"
        del before["phone"], after["phone"]
        assert before == after

    def test_update_keeps_position(self, populated_book):
        populated_book.update_by_name("John", ContactUpdate.create(city="Chicago"))
        first = populated_book.list_contacts()[0]
        assert (first.first_name, first.city) == ("John", "Chicago")

    def test_earlier_lookup_result_is_not_updated(self, populated_book):
        before = populated_book.find_by_name("John")
        populated_book.update_by_name("John", ContactUpdate.create(city="Chicago"))
        assert before.city == "New York"

    def test_absent_name(self, populated_book):
        before = [c.model_dump() for c in populated_book.list_contacts()]
        with pytest.raises(NotFoundError):
            populated_book.update_by_name("Nobody", ContactUpdate.create(phone="5555555555"))
        assert [c.model_dump() for c in populated_book.list_contacts()] == before

    def test_invalid_patch_rejected_and_contact_unchanged(self, populated_book):
        # model_construct skips the patch's own checks.
        with pytest.raises(ValidationError):
            populated_book.update_by_name("John", ContactUpdate.model_construct(phone="5555555555", zip="1"))
        contact = populated_book.find_by_name("John")
        assert contact.phone == "1234567890"
        assert contact.zip == "10001"

    def test_rename_onto_existing_pair_rejected(self, populated_book):
        patch = ContactUpdate.create(first_name="Jane", last_name="Roe")
        with pytest.raises(DuplicateContactError):
            populated_book.update_by_name("John", patch)
        assert populated_book.find_by_name("John Doe") is not None

    def test_rename(self, populated_book):
        populated_book.update_by_name("John", ContactUpdate.create(first_name="Jonathan"))
        assert populated_book.find_by_name("John") is None
        assert populated_book.find_by_name("Jonathan Doe").email == "john.doe@example.com"


class TestUpdateByEmail:

    def test_update_by_email(self, populated_book):
        updated = populated_book.update_by_email("JANE.ROE@example.com", ContactUpdate.create(phone="5555555555"))
        assert updated.first_name == "Jane"
        assert populated_book.find_by_name("Jane").phone == "5555555555"
        assert populated_book.find_by_name("John").phone == "1234567890"

    def test_absent_email(self, populated_book):
        with pytest.raises(NotFoundError):
            populated_book.update_by_email("ghost@example.com", ContactUpdate.create(phone="5555555555"))

    def test_rename_onto_existing_pair_rejected(self, populated_book):
        patch = ContactUpdate.create(first_name="Amy", last_name="Poe")
        with pytest.raises(DuplicateContactError):
            populated_book.update_by_email("john.doe@example.com", patch)
        assert populated_book.find_by_name("John Doe") is not None

    def test_invalid_patch_rejected(self, populated_book):
        with pytest.raises(ValidationError):
            populated_book.update_by_email(
                "john.doe@example.com", ContactUpdate.model_construct(city="Chicago", phone="1")
            )
        assert populated_book.find_by_name("John").city == "New York"


class TestOwnership:

    def test_shared_contact_renamed_in_one_book_only(self):
        work, home = AddressBook("Work"), AddressBook("Home")
        john = make_contact()
        work.add_contact(john)
        home.add_contact(john)
        home.add_contact(make_contact(first_name="Jane", last_name="Roe"))

        work.update_by_name("John", ContactUpdate.create(first_name="Jane", last_name="Roe"))

        assert [c.name_key for c in home.list_contacts()] == [("John", "Doe"), ("Jane", "Roe")]
        assert [c.name_key for c in work.list_contacts()] == [("Jane", "Roe")]

    def test_caller_object_changes_do_not_reach_book(self, book):
        john = make_contact()
        book.add_contact(john)
        john.phone = "5555555555"
        assert book.find_by_name("John").phone == "1234567890"

    def test_listed_contacts_are_copies(self, populated_book):
        listed = populated_book.list_contacts()[0]
        listed.first_name, listed.last_name = "Jane", "Roe"
        keys = [c.name_key for c in populated_book.list_contacts()]
        assert keys == [("John", "Doe"), ("Jane", "Roe"), ("Amy", "Poe")]

    def test_found_and_filtered_contacts_are_copies(self, populated_book):
        populated_book.find_by_email("john.doe@example.com").city = "Chicago"
        populated_book.filter_by_city("Boston")[0].city = "Chicago"
        populated_book.sort_by_first_name()[0].city = "Chicago"
        assert populated_book.count_by_city("Chicago") == 0


class TestFilterAndCount:

    def test_filter_by_city_case_insensitive(self, populated_book):
        upper = populated_book.filter_by_city("New York")
        lower = populated_book.filter_by_city("new york")
        assert upper == lower
        assert [c.first_name for c in upper] == ["John", "Amy"]

    def test_filter_by_state(self, populated_book):
        assert [c.first_name for c in populated_book.filter_by_state("MASSACHUSETTS")] == ["Jane"]

    def test_filter_no_match(self, populated_book):
        assert populated_book.filter_by_city("Paris") == []

    def test_filter_by_city_and_state(self, populated_book):
        matches = populated_book.filter_contacts(city="NEW YORK", state="newyork")
        assert [c.first_name for c in matches] == ["John", "Amy"]
        assert populated_book.filter_contacts(city="Boston", state="NewYork") == []

    def test_counts(self, populated_book):
        assert populated_book.count_by_city("NEW YORK") == 2
        assert populated_book.count_by_state("newyork") == 2
        assert populated_book.count_by_state("Texas") == 0


class TestSort:

    def test_sort_by_first_name(self, populated_book):
        sorted_contacts = populated_book.sort_by_first_name()
        assert [c.first_name for c in sorted_contacts] == ["Amy", "Jane", "John"]
        assert [c.first_name for c in populated_book.list_contacts()] == ["Amy", "Jane", "John"]

    def test_sort_is_idempotent(self, populated_book):
        first = [c.first_name for c in populated_book.sort_by_first_name()]
        second = [c.first_name for c in populated_book.sort_by_first_name()]
        assert first == second == ["Amy", "Jane", "John"]

    def test_sort_is_stable(self, book):
        book.add_contact(make_contact(last_name="Zed"))
        book.add_contact(make_contact(last_name="Abe"))
        book.sort_by_first_name()
        assert [c.last_name for c in book.list_contacts()] == ["Zed", "Abe"]

    def test_sort_is_case_sensitive(self, book):
        book.add_contact(make_contact(first_name="Bob"))
        book.add_contact(make_contact(first_name="BOB"))
        book.sort_by_first_name()
        assert [c.first_name for c in book.list_contacts()] == ["BOB", "Bob"]

    def test_sort_by_other_field(self, populated_book):
        populated_book.sort_by("city")
        assert [c.city for c in populated_book.list_contacts()] == ["Boston", "New York", "new york"]

    def test_sort_by_unknown_field(self, populated_book):
        with pytest.raises(ValueError):
            populated_book.sort_by("phone")
