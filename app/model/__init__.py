from app.model.address_book import AddressBook
from app.model.contact import Contact

__all__ = ["AddressBook", "Contact"]
