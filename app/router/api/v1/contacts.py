"""
Contacts API: contacts scoped to one address book.
"""
from typing import List

from fastapi import APIRouter, Depends, Query, status

from app.core.dependencies import get_contact_service, get_page_request
from app.core.pagination import PageRequest
from app.schema.common import ApiResponse, BulkDeleteResponse, CountResponse, DeletedCountResponse, PagedResponse
from app.schema.contact import ContactRequest, ContactResponse
from app.service.contact_service import ContactService

router = APIRouter()


@router.post(
    "",
    response_model=ApiResponse[ContactResponse],
    status_code=status.HTTP_201_CREATED,
)
async def add_contact(
    address_book_id: int,
    request: ContactRequest,
    service: ContactService = Depends(get_contact_service),
):
    """Add a contact. The phone number must be unique within the address book."""
    contact = service.add(address_book_id, request.name, request.phone_number)
    return ApiResponse.ok(contact, "Contact added successfully")


@router.get("", response_model=ApiResponse[PagedResponse[ContactResponse]])
async def list_contacts(
    address_book_id: int,
    page_request: PageRequest = Depends(get_page_request),
    service: ContactService = Depends(get_contact_service),
):
    """Get contacts of an address book (paginated)."""
    paged = service.list_all_paged(address_book_id, page_request)
    return ApiResponse.ok(paged, "Contacts retrieved successfully")


@router.get("/all", response_model=ApiResponse[List[ContactResponse]])
async def list_all_contacts(
    address_book_id: int,
    service: ContactService = Depends(get_contact_service),
):
    """Get contacts of an address book without pagination (first 100 only)."""
    return ApiResponse.ok(service.list_all(address_book_id), "Contacts retrieved successfully")


@router.get("/count", response_model=ApiResponse[CountResponse])
async def count_contacts(
    address_book_id: int,
    service: ContactService = Depends(get_contact_service),
):
    count = service.count(address_book_id)
    return ApiResponse.ok(CountResponse(count=count), "Contact count retrieved successfully")


@router.delete("/bulk", response_model=ApiResponse[BulkDeleteResponse])
async def remove_contacts(
    address_book_id: int,
    ids: List[int] = Query(..., description="Contact ids to delete, e.g. ?ids=1&ids=2"),
    service: ContactService = Depends(get_contact_service),
):
    """Remove several contacts. Unknown ids are ignored; see deleted_count."""
    deleted = service.remove_bulk(address_book_id, ids)
    result = BulkDeleteResponse(requested_count=len(ids), deleted_count=deleted)
    return ApiResponse.ok(result, "Contacts deleted successfully")


@router.get("/{contact_id}", response_model=ApiResponse[ContactResponse])
async def get_contact(
    address_book_id: int,
    contact_id: int,
    service: ContactService = Depends(get_contact_service),
):
    """Get a single contact (must belong to the address book)."""
    return ApiResponse.ok(service.get_by_id(address_book_id, contact_id), "Contact retrieved successfully")


@router.put("/{contact_id}", response_model=ApiResponse[ContactResponse])
async def update_contact(
    address_book_id: int,
    contact_id: int,
    request: ContactRequest,
    service: ContactService = Depends(get_contact_service),
):
    contact = service.update(address_book_id, contact_id, request.name, request.phone_number)
    return ApiResponse.ok(contact, "Contact updated successfully")


@router.delete("/{contact_id}", response_model=ApiResponse)
async def remove_contact(
    address_book_id: int,
    contact_id: int,
    service: ContactService = Depends(get_contact_service),
):
    service.remove(address_book_id, contact_id)
    return ApiResponse.ok(None, "Contact deleted successfully")


@router.delete("", response_model=ApiResponse[DeletedCountResponse])
async def remove_all_contacts(
    address_book_id: int,
    service: ContactService = Depends(get_contact_service),
):
    """Remove every contact of an address book."""
    deleted = service.remove_all(address_book_id)
    return ApiResponse.ok(DeletedCountResponse(deleted_count=deleted), "All contacts deleted successfully")
