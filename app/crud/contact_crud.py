"""
Contact CRUD operations.
"""
from typing import List, Optional, Sequence

from sqlalchemy import distinct, func, select
from sqlalchemy.orm import Session

from app.core.pagination import Page, PageRequest
from app.crud.base import CRUDBase
from app.model.contact import Contact


class CRUDContact(CRUDBase[Contact]):
    """Contact CRUD. Most lookups are scoped to one address book."""

    def get_by_id_and_address_book(
        self, db: Session, *, contact_id: int, address_book_id: int
    ) -> Optional[Contact]:
        """Get a contact by id only if it belongs to the address book."""
        return (
            db.query(self.model)
            .filter(self.model.id == contact_id, self.model.address_book_id == address_book_id)
            .first()
        )

    def exists_by_phone_and_address_book(
        self, db: Session, *, phone_number: str, address_book_id: int
    ) -> bool:
        return (
            db.query(self.model.id)
            .filter(
                self.model.phone_number == phone_number,
                self.model.address_book_id == address_book_id,
            )
            .first()
            is not None
        )

    def list_by_address_book(
        self, db: Session, *, address_book_id: int, page_request: PageRequest
    ) -> Page[Contact]:
        base = db.query(self.model).filter(self.model.address_book_id == address_book_id)
        return self.paginate(base, page_request)

    def list_by_ids_and_address_book(
        self, db: Session, *, ids: Sequence[int], address_book_id: int
    ) -> List[Contact]:
        if not ids:
            return []
        return (
            db.query(self.model)
            .filter(self.model.id.in_(ids), self.model.address_book_id == address_book_id)
            .all()
        )

    def count_by_address_book(self, db: Session, *, address_book_id: int) -> int:
        return (
            db.query(func.count(self.model.id))
            .filter(self.model.address_book_id == address_book_id)
            .scalar()
            or 0
        )

    def delete_by_address_book(self, db: Session, *, address_book_id: int) -> int:
        """Delete every contact of the address book. Returns the number of rows deleted."""
        deleted = (
            db.query(self.model)
            .filter(self.model.address_book_id == address_book_id)
            .delete(synchronize_session=False)
        )
        db.commit()
        db.expire_all()
        return deleted

    def delete_by_ids_and_address_book(
        self, db: Session, *, ids: Sequence[int], address_book_id: int
    ) -> int:
        """Delete the listed contacts that belong to the address book; other ids are ignored."""
        contacts = self.list_by_ids_and_address_book(db, ids=ids, address_book_id=address_book_id)
        for contact in contacts:
            db.delete(contact)
        db.commit()
        return len(contacts)

    def list_unique_paginated(self, db: Session, *, page_request: PageRequest) -> Page[Contact]:
        """One contact per distinct phone number across all address books, lowest id wins."""
        lowest_ids = select(func.min(self.model.id)).group_by(self.model.phone_number)
        base = db.query(self.model).filter(self.model.id.in_(lowest_ids))
        return self.paginate(base, page_request)

    def count_distinct_phone_numbers(self, db: Session) -> int:
        return db.query(func.count(distinct(self.model.phone_number))).scalar() or 0


contact_crud = CRUDContact(Contact)
