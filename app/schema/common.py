"""
Shared response schemas: the API envelope and paged results.
"""
from datetime import datetime, timezone
from typing import Dict, Generic, List, Optional, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class PagedResponse(BaseModel, Generic[T]):
    """A page of results plus its position within the whole collection."""
    content: List[T]
    page: int = Field(..., description="Current page (0-based).")
    size: int = Field(..., description="Page size.")
    total_elements: int = Field(..., description="Total number of matching elements.")
    total_pages: int = Field(..., description="Total pages (ceil(total_elements / size)).")
    first: bool
    last: bool
    empty: bool


class ApiResponse(BaseModel, Generic[T]):
    """Envelope used by every endpoint, for both success and error cases."""
    success: bool
    message: str
    response: Optional[T] = None
    timestamp: datetime = Field(default_factory=_utcnow)
    path: Optional[str] = None
    # Validation errors only: field -> message
    errors: Optional[Dict[str, str]] = None

    @classmethod
    def ok(cls, response: Optional[T], message: str) -> "ApiResponse[T]":
        return cls(success=True, message=message, response=response)

    @classmethod
    def error(
        cls, message: str, path: Optional[str] = None, errors: Optional[Dict[str, str]] = None
    ) -> "ApiResponse[T]":
        return cls(success=False, message=message, path=path, errors=errors)


class DeletedCountResponse(BaseModel):
    deleted_count: int


class BulkDeleteResponse(BaseModel):
    requested_count: int
    deleted_count: int


class CountResponse(BaseModel):
    count: int
