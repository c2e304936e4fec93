"""Request Parameters — paging, sorting, shaping and filter inputs for collection reads.

Invariants:
    - page_number >= 1 (smaller values become 1)
    - 1 <= page_size <= MAX_PAGE_SIZE (out-of-range values are clamped, never rejected)
    - skip == (page_number - 1) * page_size
    - EmployeeParameters.valid_age_range is max_age > min_age

Design Decisions:
    - Clamp instead of reject: a read endpoint degrades gracefully and the store
      never sees an unbounded scan
    - Pydantic model over dataclass: "before" validators coerce query-string input
"""

from pydantic import BaseModel, field_validator

MAX_PAGE_SIZE = 50
DEFAULT_PAGE_SIZE = 10
MAX_AGE = 2**31 - 1


class RequestParameters(BaseModel):
    """Paging, sorting and shaping shared by every collection endpoint."""

    page_number: int = 1
    page_size: int = DEFAULT_PAGE_SIZE
    order_by: str | None = None
    fields: str | None = None

    @field_validator("page_number")
    @classmethod
    def floor_page_number(cls, v: int) -> int:
        return max(v, 1)

    @field_validator("page_size")
    @classmethod
    def clamp_page_size(cls, v: int) -> int:
        return min(max(v, 1), MAX_PAGE_SIZE)

    @property
    def skip(self) -> int:
        return (self.page_number - 1) * self.page_size


class EmployeeParameters(RequestParameters):
    """Employee collection query: age range and name search on top of paging."""

    order_by: str | None = "name"
    min_age: int = 0
    max_age: int = MAX_AGE
    search_term: str | None = None

    @property
    def valid_age_range(self) -> bool:
        return self.max_age > self.min_age
