"""
Address book schemas.
"""
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from app.model.address_book import AddressBook
from app.schema.contact import ContactRequest, ContactResponse, to_contact_response


class AddressBookRequest(BaseModel):
    """Body for creating (v1/v2) or updating an address book. Contacts are only used by v2 create."""
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=2, max_length=100, description="Name must be between 2 and 100 characters")
    description: Optional[str] = Field(None, max_length=200, description="Description cannot exceed 200 characters")
    contacts: Optional[List[ContactRequest]] = None


class AddressBookResponse(BaseModel):
    """Full address book including its contacts."""
    id: int
    name: str
    description: Optional[str] = None
    contact_count: int
    contacts: List[ContactResponse] = []
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


def to_address_book_response(address_book: AddressBook) -> AddressBookResponse:
    contacts = list(address_book.contacts)
    return AddressBookResponse(
        id=address_book.id,
        name=address_book.name,
        description=address_book.description,
        contact_count=len(contacts),
        contacts=[to_contact_response(c) for c in contacts],
        created_at=address_book.created_at,
        updated_at=address_book.updated_at,
    )
