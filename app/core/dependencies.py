"""
FastAPI dependencies: per-request services and page requests.
"""
from fastapi import Depends, Query
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.pagination import DEFAULT_PAGE_SIZE, SORT_ASC, PageRequest
from app.service.address_book_service import AddressBookService
from app.service.contact_service import ContactService


def get_address_book_service(db: Session = Depends(get_db)) -> AddressBookService:
    return AddressBookService(db)


def get_contact_service(db: Session = Depends(get_db)) -> ContactService:
    return ContactService(db)


def get_page_request(
    page: int = Query(0, ge=0, description="Page number (0-based)"),
    size: int = Query(DEFAULT_PAGE_SIZE, description="Page size (max 100)"),
    sort_by: str = Query("id", description="Sort field"),
    sort_dir: str = Query(SORT_ASC, description="Sort direction (asc/desc)"),
) -> PageRequest:
    """
    Build a PageRequest from query parameters.
    Size is not bounded here; services sanitize it.
    """
    return PageRequest(page=page, size=size, sort_by=sort_by, sort_dir=sort_dir)


def get_search_page_request(
    page: int = Query(0, ge=0, description="Page number (0-based)"),
    size: int = Query(DEFAULT_PAGE_SIZE, description="Page size (max 100)"),
    sort_by: str = Query("name", description="Sort field"),
    sort_dir: str = Query(SORT_ASC, description="Sort direction (asc/desc)"),
) -> PageRequest:
    """Same as get_page_request, sorted by name by default."""
    return PageRequest(page=page, size=size, sort_by=sort_by, sort_dir=sort_dir)
