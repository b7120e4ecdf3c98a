from app.crud.address_book_crud import address_book_crud
from app.crud.contact_crud import contact_crud

__all__ = [
    "address_book_crud",
    "contact_crud",
]
