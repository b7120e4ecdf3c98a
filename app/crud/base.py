"""
Generic CRUD base shared by the entity-specific CRUD classes.
"""
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Query, Session

from app.core.database import Base
from app.core.pagination import Page, PageRequest

ModelType = TypeVar("ModelType", bound=Base)


class CRUDBase(Generic[ModelType]):
    """Get, list, paginate, save and delete for one model. Writes commit the session."""

    def __init__(self, model: Type[ModelType]):
        self.model = model

    def get(self, db: Session, id: Any) -> Optional[ModelType]:
        return db.query(self.model).filter(self.model.id == id).first()

    def get_by_field(self, db: Session, field: str, value: Any) -> Optional[ModelType]:
        return db.query(self.model).filter(getattr(self.model, field) == value).first()

    def get_multi(self, db: Session, *, skip: int = 0, limit: Optional[int] = None) -> List[ModelType]:
        query = db.query(self.model).order_by(self.model.id).offset(skip)
        if limit is not None:
            query = query.limit(limit)
        return query.all()

    def update(self, db: Session, *, db_obj: ModelType, obj_in: Dict[str, Any]) -> ModelType:
        for field, value in obj_in.items():
            setattr(db_obj, field, value)
        return self.save(db, db_obj=db_obj)

    def save(self, db: Session, *, db_obj: ModelType) -> ModelType:
        """Insert or update. Rolls back and re-raises on any database error."""
        db.add(db_obj)
        try:
            db.commit()
        except SQLAlchemyError:
            db.rollback()
            raise
        db.refresh(db_obj)
        return db_obj

    def remove(self, db: Session, *, db_obj: ModelType) -> None:
        db.delete(db_obj)
        try:
            db.commit()
        except SQLAlchemyError:
            db.rollback()
            raise

    def paginate(self, query: Query, page_request: PageRequest) -> Page[ModelType]:
        """Count, sort and slice a query. Unknown sort fields fall back to id."""
        total = query.with_entities(func.count(self.model.id)).scalar() or 0
        column = self.model.__table__.columns.get(page_request.sort_by)
        if column is None:
            column = self.model.__table__.columns["id"]
        order = [column.desc() if page_request.descending else column.asc()]
        if column.name != "id":
            order.append(self.model.id.asc())
        items = (
            query.order_by(*order)
            .offset(page_request.offset)
            .limit(page_request.size)
            .all()
        )
        return Page(
            content=items,
            number=page_request.page,
            size=page_request.size,
            total_elements=total,
        )
