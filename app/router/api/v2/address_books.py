"""
Address books API v2: create an address book together with its contacts.
"""
from fastapi import APIRouter, Depends, status

from app.core.dependencies import get_address_book_service
from app.schema.address_book import AddressBookRequest, AddressBookResponse
from app.schema.common import ApiResponse
from app.service.address_book_service import AddressBookService

router = APIRouter()


@router.post(
    "",
    response_model=ApiResponse[AddressBookResponse],
    status_code=status.HTTP_201_CREATED,
)
async def create_address_book_with_contacts(
    request: AddressBookRequest,
    service: AddressBookService = Depends(get_address_book_service),
):
    """
    Create a new address book with optional contacts.
    A repeated phone number in the contacts list rejects the whole request (409).
    """
    address_book = service.create(request.name, request.description, request.contacts)
    return ApiResponse.ok(address_book, "Address book created successfully with contacts")
