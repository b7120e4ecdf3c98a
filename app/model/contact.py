"""
Contact model.
Belongs to exactly one address book; phone number is unique per address book.
"""
from sqlalchemy import Column, DateTime, ForeignKey, Index, Integer, String, UniqueConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from app.core.database import Base


class Contact(Base):
    """Equality is ORM identity (primary key), not phone number."""

    __tablename__ = "contacts"
    __table_args__ = (
        UniqueConstraint("phone_number", "address_book_id", name="uq_contact_phone_address_book"),
        Index("idx_contact_name", "name"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String, nullable=False)
    phone_number = Column(String, nullable=False, index=True)
    address_book_id = Column(
        Integer, ForeignKey("address_books.id", ondelete="CASCADE"), nullable=False, index=True
    )
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    address_book = relationship("AddressBook", back_populates="contacts")
