"""
Contact schemas.
"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from app.model.contact import Contact

PHONE_NUMBER_PATTERN = r"^\+?[0-9\s\-()]{6,20}$"


class ContactRequest(BaseModel):
    """Body for adding or updating a contact."""
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=1, description="Contact name is required")
    phone_number: str = Field(
        ...,
        pattern=PHONE_NUMBER_PATTERN,
        description=(
            "6-20 characters: digits, spaces, hyphens, parentheses "
            "and an optional leading plus sign (+)."
        ),
    )


class ContactResponse(BaseModel):
    """Contact for list/detail."""
    id: int
    name: str
    phone_number: str
    address_book_id: int
    address_book_name: Optional[str] = None
    created_at: Optional[datetime] = None


def to_contact_response(contact: Contact) -> ContactResponse:
    address_book = contact.address_book
    return ContactResponse(
        id=contact.id,
        name=contact.name,
        phone_number=contact.phone_number,
        address_book_id=contact.address_book_id,
        address_book_name=address_book.name if address_book is not None else None,
        created_at=contact.created_at,
    )
