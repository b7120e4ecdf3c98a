"""
Address book CRUD operations.
"""
from typing import List, Optional

from sqlalchemy.orm import Session

from app.core.pagination import Page, PageRequest
from app.crud.base import CRUDBase
from app.model.address_book import AddressBook


def _escape_like(value: str) -> str:
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class CRUDAddressBook(CRUDBase[AddressBook]):
    """Address book CRUD."""

    def get_by_name(self, db: Session, name: str) -> Optional[AddressBook]:
        """Exact, case-sensitive name match."""
        return self.get_by_field(db, "name", name)

    def exists_by_name(self, db: Session, name: str) -> bool:
        return (
            db.query(self.model.id).filter(self.model.name == name).first() is not None
        )

    def list_all(self, db: Session) -> List[AddressBook]:
        return self.get_multi(db)

    def list_paginated(self, db: Session, *, page_request: PageRequest) -> Page[AddressBook]:
        return self.paginate(db.query(self.model), page_request)

    def search_by_name(
        self, db: Session, *, name: str, page_request: PageRequest
    ) -> Page[AddressBook]:
        """Case-insensitive substring match on the name. `%`, `_` and `\\` match literally."""
        term = f"%{_escape_like(name or '')}%"
        base = db.query(self.model).filter(self.model.name.ilike(term, escape="\\"))
        return self.paginate(base, page_request)


address_book_crud = CRUDAddressBook(AddressBook)
