"""
Pagination helpers: page requests, store pages and their conversion to PagedResponse.
"""
import math
from dataclasses import dataclass, replace
from typing import Callable, Generic, List, TypeVar

from app.schema.common import PagedResponse

MAX_PAGE_SIZE = 100
DEFAULT_PAGE_SIZE = 20

SORT_ASC = "asc"
SORT_DESC = "desc"

E = TypeVar("E")
R = TypeVar("R")


@dataclass(frozen=True)
class PageRequest:
    """0-based page index, page size and sort order."""
    page: int = 0
    size: int = DEFAULT_PAGE_SIZE
    sort_by: str = "id"
    sort_dir: str = SORT_ASC

    @property
    def offset(self) -> int:
        return self.page * self.size

    @property
    def descending(self) -> bool:
        return self.sort_dir.lower() == SORT_DESC


@dataclass
class Page(Generic[E]):
    """A slice of a store query plus the total element count."""
    content: List[E]
    number: int
    size: int
    total_elements: int

    @property
    def total_pages(self) -> int:
        if self.size <= 0:
            return 1
        return math.ceil(self.total_elements / self.size)

    @property
    def is_first(self) -> bool:
        return self.number == 0

    @property
    def is_last(self) -> bool:
        return self.number + 1 >= self.total_pages

    @property
    def is_empty(self) -> bool:
        return not self.content


def sanitize_page_request(page_request: PageRequest) -> PageRequest:
    """Replace an out-of-range page size (<= 0 or > MAX_PAGE_SIZE) with DEFAULT_PAGE_SIZE."""
    if page_request.size <= 0 or page_request.size > MAX_PAGE_SIZE:
        return replace(page_request, size=DEFAULT_PAGE_SIZE)
    return page_request


def to_paged_response(page: Page[E], map_fn: Callable[[E], R]) -> PagedResponse[R]:
    return PagedResponse(
        content=[map_fn(item) for item in page.content],
        page=page.number,
        size=page.size,
        total_elements=page.total_elements,
        total_pages=page.total_pages,
        first=page.is_first,
        last=page.is_last,
        empty=page.is_empty,
    )
