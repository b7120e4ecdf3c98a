"""
AddressBook model.
An address book owns its contacts; deleting it deletes them.
"""
from sqlalchemy import Column, DateTime, Index, Integer, String
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from app.core.database import Base


class AddressBook(Base):
    __tablename__ = "address_books"
    __table_args__ = (
        Index("idx_address_book_created_at", "created_at"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    # Unique index backs the name pre-check in AddressBookService.create
    name = Column(String(100), unique=True, index=True, nullable=False)
    description = Column(String(500), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    contacts = relationship(
        "Contact",
        back_populates="address_book",
        cascade="all, delete-orphan",
        order_by="Contact.id",
    )
