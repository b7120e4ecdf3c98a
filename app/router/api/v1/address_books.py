"""
Address books API: create, read, search, update and delete address books.
"""
from typing import List

from fastapi import APIRouter, Depends, Query, status

from app.core.dependencies import get_address_book_service, get_page_request, get_search_page_request
from app.core.pagination import PageRequest
from app.schema.address_book import AddressBookRequest, AddressBookResponse
from app.schema.common import ApiResponse, PagedResponse
from app.service.address_book_service import AddressBookService

router = APIRouter()


@router.post(
    "",
    response_model=ApiResponse[AddressBookResponse],
    status_code=status.HTTP_201_CREATED,
)
async def create_address_book(
    request: AddressBookRequest,
    service: AddressBookService = Depends(get_address_book_service),
):
    """Create a new address book. Contacts in the body are ignored here; use v2 to include them."""
    address_book = service.create(request.name, request.description)
    return ApiResponse.ok(address_book, "Address book created successfully")


@router.get("", response_model=ApiResponse[PagedResponse[AddressBookResponse]])
async def list_address_books(
    page_request: PageRequest = Depends(get_page_request),
    service: AddressBookService = Depends(get_address_book_service),
):
    """Get all address books (paginated). Query params: page, size (max 100), sort_by, sort_dir."""
    paged = service.list_all_paged(page_request)
    return ApiResponse.ok(paged, "Address books retrieved successfully")


@router.get("/all", response_model=ApiResponse[List[AddressBookResponse]])
async def list_all_address_books(
    service: AddressBookService = Depends(get_address_book_service),
):
    """Get all address books without pagination."""
    return ApiResponse.ok(service.list_all(), "Address books retrieved successfully")


@router.get("/search", response_model=ApiResponse[PagedResponse[AddressBookResponse]])
async def search_address_books(
    name: str = Query(..., description="Name to search for (partial match)"),
    page_request: PageRequest = Depends(get_search_page_request),
    service: AddressBookService = Depends(get_address_book_service),
):
    """Search address books by partial name (case-insensitive)."""
    paged = service.search_by_name(name, page_request)
    return ApiResponse.ok(paged, "Search results retrieved successfully")


@router.get("/name/{name}", response_model=ApiResponse[AddressBookResponse])
async def get_address_book_by_name(
    name: str,
    service: AddressBookService = Depends(get_address_book_service),
):
    """Get an address book by exact name."""
    return ApiResponse.ok(service.get_by_name(name), "Address book retrieved successfully")


@router.get("/{address_book_id}", response_model=ApiResponse[AddressBookResponse])
async def get_address_book(
    address_book_id: int,
    service: AddressBookService = Depends(get_address_book_service),
):
    return ApiResponse.ok(service.get_by_id(address_book_id), "Address book retrieved successfully")


@router.put("/{address_book_id}", response_model=ApiResponse[AddressBookResponse])
async def update_address_book(
    address_book_id: int,
    request: AddressBookRequest,
    service: AddressBookService = Depends(get_address_book_service),
):
    """Update name and description of an address book."""
    address_book = service.update(address_book_id, request.name, request.description)
    return ApiResponse.ok(address_book, "Address book updated successfully")


@router.delete("/{address_book_id}", response_model=ApiResponse)
async def delete_address_book(
    address_book_id: int,
    service: AddressBookService = Depends(get_address_book_service),
):
    """Delete an address book together with all of its contacts."""
    service.delete(address_book_id)
    return ApiResponse.ok(None, "Address book deleted successfully")
