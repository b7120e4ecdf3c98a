"""
API Router - all endpoints.
"""
from fastapi import APIRouter
from app.router.api.v1 import address_books, contacts, unique_contacts
from app.router.api.v2 import address_books as address_books_v2

api_router = APIRouter(prefix="/api")

api_router.include_router(
    address_books.router,
    prefix="/v1/addressbooks",
    tags=["Address Books"],
)

api_router.include_router(
    contacts.router,
    prefix="/v1/addressbooks/{address_book_id}/contacts",
    tags=["Contacts"],
)

api_router.include_router(
    unique_contacts.router,
    prefix="/v1/contacts",
    tags=["Contacts"],
)

api_router.include_router(
    address_books_v2.router,
    prefix="/v2/addressbooks",
    tags=["Address Books V2"],
)
