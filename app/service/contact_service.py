"""
Contact service: contacts within an address book and the cross-book unique view.
"""
from typing import List, Sequence

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.exceptions import DuplicateContact, NotFound
from app.core.pagination import (
    MAX_PAGE_SIZE,
    PageRequest,
    sanitize_page_request,
    to_paged_response,
)
from app.crud import address_book_crud, contact_crud
from app.model.address_book import AddressBook
from app.model.contact import Contact
from app.schema.common import PagedResponse
from app.schema.contact import ContactResponse, to_contact_response
import logging

logger = logging.getLogger(__name__)


class ContactService:
    """Contact lifecycle. Phone numbers are unique per address book."""

    def __init__(self, db: Session):
        self.db = db

    def add(self, address_book_id: int, name: str, phone_number: str) -> ContactResponse:
        """
        Add a contact to an address book.

        Raises:
            NotFound: the address book does not exist
            DuplicateContact: the phone number is already used in this address book
        """
        logger.info(f"Adding contact to address book: {address_book_id}")
        address_book = self._find_address_book(address_book_id)
        self._validate_unique_phone_number(phone_number, address_book_id)

        contact = Contact(name=name, phone_number=phone_number, address_book=address_book)
        try:
            contact = contact_crud.save(self.db, db_obj=contact)
        except IntegrityError:
            raise DuplicateContact(phone_number)
        return to_contact_response(contact)

    def get_by_id(self, address_book_id: int, contact_id: int) -> ContactResponse:
        logger.info(f"Fetching contact {contact_id} from address book {address_book_id}")
        return to_contact_response(self._find_contact(address_book_id, contact_id))

    def list_all(self, address_book_id: int) -> List[ContactResponse]:
        """Unpaginated listing, silently capped at MAX_PAGE_SIZE contacts."""
        logger.warning("Using non-paginated list_all - consider using the paginated version")
        self._find_address_book(address_book_id)
        page = contact_crud.list_by_address_book(
            self.db,
            address_book_id=address_book_id,
            page_request=PageRequest(page=0, size=MAX_PAGE_SIZE),
        )
        return [to_contact_response(c) for c in page.content]

    def list_all_paged(
        self, address_book_id: int, page_request: PageRequest
    ) -> PagedResponse[ContactResponse]:
        logger.info(
            f"Fetching contacts for address book: {address_book_id} - "
            f"page: {page_request.page}, size: {page_request.size}"
        )
        self._find_address_book(address_book_id)
        page = contact_crud.list_by_address_book(
            self.db,
            address_book_id=address_book_id,
            page_request=sanitize_page_request(page_request),
        )
        return to_paged_response(page, to_contact_response)

    def update(
        self, address_book_id: int, contact_id: int, name: str, phone_number: str
    ) -> ContactResponse:
        """Overwrite name and phone number. Uniqueness is re-checked only when the phone number changes."""
        logger.info(f"Updating contact {contact_id} in address book {address_book_id}")
        contact = self._find_contact(address_book_id, contact_id)

        if contact.phone_number != phone_number:
            self._validate_unique_phone_number(phone_number, address_book_id)

        try:
            contact = contact_crud.update(
                self.db,
                db_obj=contact,
                obj_in={"name": name, "phone_number": phone_number},
            )
        except IntegrityError:
            raise DuplicateContact(phone_number)
        return to_contact_response(contact)

    def remove(self, address_book_id: int, contact_id: int) -> None:
        logger.info(f"Removing contact {contact_id} from address book {address_book_id}")
        contact = self._find_contact(address_book_id, contact_id)
        contact_crud.remove(self.db, db_obj=contact)

    def remove_bulk(self, address_book_id: int, contact_ids: Sequence[int]) -> int:
        """Delete the given contacts. Ids missing or owned by another address book are ignored."""
        contact_ids = list(contact_ids or [])
        logger.info(f"Removing {len(contact_ids)} contacts from address book {address_book_id}")
        self._find_address_book(address_book_id)
        if not contact_ids:
            return 0

        count = contact_crud.delete_by_ids_and_address_book(
            self.db, ids=contact_ids, address_book_id=address_book_id
        )
        logger.info(f"Deleted {count} contacts from address book {address_book_id}")
        return count

    def remove_all(self, address_book_id: int) -> int:
        logger.info(f"Removing all contacts from address book {address_book_id}")
        self._find_address_book(address_book_id)
        count = contact_crud.delete_by_address_book(self.db, address_book_id=address_book_id)
        logger.info(f"Deleted {count} contacts from address book {address_book_id}")
        return count

    def unique_across_all_address_books(self) -> List[ContactResponse]:
        """One contact per distinct phone number (lowest id), capped at MAX_PAGE_SIZE."""
        logger.warning("Using non-paginated unique contacts - consider using the paginated version")
        page = contact_crud.list_unique_paginated(
            self.db, page_request=PageRequest(page=0, size=MAX_PAGE_SIZE)
        )
        return [to_contact_response(c) for c in page.content]

    def unique_across_all_address_books_paged(
        self, page_request: PageRequest
    ) -> PagedResponse[ContactResponse]:
        logger.info(f"Fetching unique contacts - page: {page_request.page}, size: {page_request.size}")
        page = contact_crud.list_unique_paginated(
            self.db, page_request=sanitize_page_request(page_request)
        )
        return to_paged_response(page, to_contact_response)

    def count(self, address_book_id: int) -> int:
        self._find_address_book(address_book_id)
        return contact_crud.count_by_address_book(self.db, address_book_id=address_book_id)

    def unique_count(self) -> int:
        return contact_crud.count_distinct_phone_numbers(self.db)

    def _validate_unique_phone_number(self, phone_number: str, address_book_id: int) -> None:
        if contact_crud.exists_by_phone_and_address_book(
            self.db, phone_number=phone_number, address_book_id=address_book_id
        ):
            raise DuplicateContact(phone_number)

    def _find_contact(self, address_book_id: int, contact_id: int) -> Contact:
        contact = contact_crud.get_by_id_and_address_book(
            self.db, contact_id=contact_id, address_book_id=address_book_id
        )
        if not contact:
            raise NotFound("Contact", message=f"Contact not found with id: {contact_id}")
        return contact

    def _find_address_book(self, address_book_id: int) -> AddressBook:
        address_book = address_book_crud.get(self.db, address_book_id)
        if not address_book:
            raise NotFound(
                "Address book", message=f"Address book not found with id: {address_book_id}"
            )
        return address_book
