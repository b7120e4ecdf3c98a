"""
Contact creation rule for batches attached to a new address book.
"""
from typing import List, Sequence, Set

from app.core.exceptions import DuplicateContact
from app.model.address_book import AddressBook
from app.model.contact import Contact
from app.schema.contact import ContactRequest
import logging

logger = logging.getLogger(__name__)


class ContactCreationService:
    """Validates a batch of contact requests and attaches them to an address book."""

    def add_contacts_to_address_book(
        self, address_book: AddressBook, contacts: Sequence[ContactRequest]
    ) -> List[Contact]:
        """
        Attach one Contact per request to the address book's collection.

        Only duplicates inside the batch are checked, not contacts already stored.
        Nothing is attached when a duplicate is found.

        Raises:
            DuplicateContact: a phone number appears twice in the batch
        """
        if not contacts:
            return []

        logger.info(f"Adding {len(contacts)} contacts to address book: {address_book.name}")
        self._validate_no_duplicate_phone_numbers(contacts)

        created = []
        for request in contacts:
            contact = Contact(name=request.name, phone_number=request.phone_number)
            address_book.contacts.append(contact)
            created.append(contact)
        return created

    def _validate_no_duplicate_phone_numbers(self, contacts: Sequence[ContactRequest]) -> None:
        seen: Set[str] = set()
        for request in contacts:
            if request.phone_number in seen:
                raise DuplicateContact(
                    request.phone_number,
                    message=f"Duplicate phone number in request: {request.phone_number}",
                )
            seen.add(request.phone_number)
