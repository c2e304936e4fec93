"""Paged Results — one count and one page fetch over the same filter.

Invariants:
    - count_matching and fetch_page receive the identical filter object
    - A page never holds more than page_size items
    - total_pages == ceil(total_count / page_size), computed from the true total
      even when the requested page is past the end (that page is just empty)
    - Empty sort order falls back to DEFAULT_ORDER (name ascending)

Design Decisions:
    - PagedStore Protocol: the producer is storage-agnostic; the SQLAlchemy
      repository and test fakes both satisfy it
    - Metadata travels out-of-band (X-Pagination header), so MetaData renders its
      own header value instead of being part of the response body
"""

import json
import math
from dataclasses import dataclass, field
from typing import Generic, Protocol, Sequence, TypeVar
from uuid import UUID

from company_api.core.request_parameters import RequestParameters
from company_api.core.sorting import SortField

T = TypeVar("T")
F = TypeVar("F", contravariant=True)

DEFAULT_ORDER = (SortField("name"),)


@dataclass(frozen=True)
class EmployeeFilter:
    """Predicate for employees of one company."""
    company_id: UUID
    min_age: int
    max_age: int
    search_term: str | None = None

    @property
    def normalized_search_term(self) -> str | None:
        if self.search_term is None or not self.search_term.strip():
            return None
        return self.search_term.strip().lower()


@dataclass(frozen=True)
class MetaData:
    current_page: int
    page_size: int
    total_count: int

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_count / self.page_size)

    @property
    def has_previous(self) -> bool:
        return self.current_page > 1

    @property
    def has_next(self) -> bool:
        return self.current_page < self.total_pages

    def to_dict(self) -> dict:
        return {
            "currentPage": self.current_page,
            "pageSize": self.page_size,
            "totalCount": self.total_count,
            "totalPages": self.total_pages,
        }

    def to_header(self) -> str:
        """JSON value for the X-Pagination response header."""
        return json.dumps(self.to_dict())


@dataclass
class PagedList(Generic[T]):
    items: list[T]
    meta_data: MetaData = field(repr=False)


class PagedStore(Protocol[F]):
    """Storage contract for paged reads — implemented by repositories."""
    async def count_matching(self, query_filter: F) -> int: ...
    async def fetch_page(
        self, query_filter: F, skip: int, take: int, order: Sequence[SortField],
    ) -> list: ...


async def fetch_paged(
    store: PagedStore,
    query_filter,
    parameters: RequestParameters,
    order: Sequence[SortField] = (),
) -> PagedList:
    """Count the filtered set and fetch the requested page of it."""
    total_count = await store.count_matching(query_filter)
    items = await store.fetch_page(
        query_filter,
        skip=parameters.skip,
        take=parameters.page_size,
        order=list(order) or list(DEFAULT_ORDER),
    )
    return PagedList(
        items=list(items),
        meta_data=MetaData(
            current_page=parameters.page_number,
            page_size=parameters.page_size,
            total_count=total_count,
        ),
    )
