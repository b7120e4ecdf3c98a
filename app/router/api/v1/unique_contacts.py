"""
Unique contacts API: one contact per distinct phone number across all address books.
"""
from typing import List

from fastapi import APIRouter, Depends

from app.core.dependencies import get_contact_service, get_page_request
from app.core.pagination import PageRequest
from app.schema.common import ApiResponse, CountResponse, PagedResponse
from app.schema.contact import ContactResponse
from app.service.contact_service import ContactService

router = APIRouter()


@router.get("/unique", response_model=ApiResponse[PagedResponse[ContactResponse]])
async def list_unique_contacts(
    page_request: PageRequest = Depends(get_page_request),
    service: ContactService = Depends(get_contact_service),
):
    """Unique contacts (lowest id per phone number), paginated."""
    paged = service.unique_across_all_address_books_paged(page_request)
    return ApiResponse.ok(paged, "Unique contacts retrieved successfully")


@router.get("/unique/all", response_model=ApiResponse[List[ContactResponse]])
async def list_all_unique_contacts(
    service: ContactService = Depends(get_contact_service),
):
    """Unique contacts without pagination (first 100 only)."""
    return ApiResponse.ok(
        service.unique_across_all_address_books(), "Unique contacts retrieved successfully"
    )


@router.get("/unique/count", response_model=ApiResponse[CountResponse])
async def count_unique_contacts(
    service: ContactService = Depends(get_contact_service),
):
    count = service.unique_count()
    return ApiResponse.ok(CountResponse(count=count), "Unique contact count retrieved successfully")
