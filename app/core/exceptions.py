"""
Application exceptions raised by services and rendered by the handlers in app.core.handlers.
"""
from typing import Optional

from fastapi import HTTPException, status


class AppException(HTTPException):
    """Base for business-rule failures. `detail` carries the client-facing message."""

    def __init__(self, status_code: int, message: str):
        super().__init__(status_code=status_code, detail=message)
        self.message = message


class NotFound(AppException):
    def __init__(self, resource: str = "Resource", message: Optional[str] = None):
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            message=message or f"{resource} not found",
        )
        self.resource = resource


class DuplicateAddressBook(AppException):
    def __init__(self, name: str):
        super().__init__(
            status_code=status.HTTP_409_CONFLICT,
            message=f"Address book with name '{name}' already exists",
        )
        self.name = name


class DuplicateContact(AppException):
    """Phone number collision, inside a batch or against an existing contact of the same address book."""

    def __init__(self, phone_number: str, message: Optional[str] = None):
        super().__init__(
            status_code=status.HTTP_409_CONFLICT,
            message=message
            or f"Contact with phone number {phone_number} already exists in this address book",
        )
        self.phone_number = phone_number
