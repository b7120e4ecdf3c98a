"""
Address book service.
"""
from typing import List, Optional, Sequence

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.exceptions import DuplicateAddressBook, NotFound
from app.core.pagination import PageRequest, sanitize_page_request, to_paged_response
from app.crud import address_book_crud
from app.model.address_book import AddressBook
from app.schema.address_book import AddressBookResponse, to_address_book_response
from app.schema.common import PagedResponse
from app.schema.contact import ContactRequest
from app.service.contact_creation_service import ContactCreationService
import logging

logger = logging.getLogger(__name__)


class AddressBookService:
    """Address book lifecycle. Names are unique on create."""

    def __init__(self, db: Session, contact_creation: Optional[ContactCreationService] = None):
        self.db = db
        self.contact_creation = contact_creation or ContactCreationService()

    def create(
        self,
        name: str,
        description: Optional[str] = None,
        contacts: Optional[Sequence[ContactRequest]] = None,
    ) -> AddressBookResponse:
        """
        Create an address book, optionally with an initial batch of contacts.

        The contact batch is validated before anything is written, so a bad
        batch aborts the whole creation.

        Raises:
            DuplicateAddressBook: an address book with this name exists
            DuplicateContact: the batch repeats a phone number
        """
        name = name.strip()
        logger.info(f"Creating address book: {name}, contacts: {len(contacts or [])}")
        self._validate_unique_name(name)

        address_book = AddressBook(name=name, description=description)
        if contacts:
            self.contact_creation.add_contacts_to_address_book(address_book, contacts)

        try:
            address_book = address_book_crud.save(self.db, db_obj=address_book)
        except IntegrityError:
            # Lost a race against a concurrent create with the same name
            raise DuplicateAddressBook(name)
        return to_address_book_response(address_book)

    def get_by_id(self, address_book_id: int) -> AddressBookResponse:
        logger.info(f"Fetching address book by id: {address_book_id}")
        return to_address_book_response(self._find_by_id(address_book_id))

    def get_by_name(self, name: str) -> AddressBookResponse:
        logger.info(f"Fetching address book by exact name: {name}")
        address_book = address_book_crud.get_by_name(self.db, name)
        if not address_book:
            raise NotFound("Address book", message=f"Address book not found with name {name}")
        return to_address_book_response(address_book)

    def search_by_name(self, name: str, page_request: PageRequest) -> PagedResponse[AddressBookResponse]:
        """Case-insensitive partial match on name. No match is an empty page."""
        logger.info(f"Searching address books by name containing: {name}")
        page = address_book_crud.search_by_name(
            self.db, name=name, page_request=sanitize_page_request(page_request)
        )
        return to_paged_response(page, to_address_book_response)

    def list_all(self) -> List[AddressBookResponse]:
        logger.info("Fetching all address books")
        return [to_address_book_response(ab) for ab in address_book_crud.list_all(self.db)]

    def list_all_paged(self, page_request: PageRequest) -> PagedResponse[AddressBookResponse]:
        logger.info(f"Fetching address books - page: {page_request.page}, size: {page_request.size}")
        page = address_book_crud.list_paginated(
            self.db, page_request=sanitize_page_request(page_request)
        )
        return to_paged_response(page, to_address_book_response)

    def update(self, address_book_id: int, name: str, description: Optional[str]) -> AddressBookResponse:
        """
        Overwrite name and description.

        Name uniqueness is only checked on create; renaming onto another
        address book's name fails at the database unique index instead.
        """
        logger.info(f"Updating address book: {address_book_id}")
        address_book = self._find_by_id(address_book_id)
        address_book = address_book_crud.update(
            self.db,
            db_obj=address_book,
            obj_in={
                "name": name.strip(),
                "description": description.strip() if description is not None else None,
            },
        )
        return to_address_book_response(address_book)

    def delete(self, address_book_id: int) -> None:
        """Delete an address book and, by cascade, all of its contacts."""
        logger.info(f"Delete address book: {address_book_id}")
        address_book = self._find_by_id(address_book_id)
        address_book_crud.remove(self.db, db_obj=address_book)

    def _validate_unique_name(self, name: str) -> None:
        if address_book_crud.exists_by_name(self.db, name):
            raise DuplicateAddressBook(name)

    def _find_by_id(self, address_book_id: int) -> AddressBook:
        logger.debug(f"Fetching the address book with id {address_book_id}")
        address_book = address_book_crud.get(self.db, address_book_id)
        if not address_book:
            raise NotFound(
                "Address book", message=f"Address book not found with id: {address_book_id}"
            )
        return address_book
