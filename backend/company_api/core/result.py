"""Tagged Results — success/error values for lookups that are expected to miss.

Invariants:
    - Every ApiBaseResponse is exactly one of ApiOkResponse or ApiErrorResponse
    - ApiOkResponse carries a result and no error details
    - ApiErrorResponse carries kind, status_code and message and no result
    - status_code is derived from kind, never set independently

Design Decisions:
    - One internal result type for every surface: v1 routes call unwrap() and get
      the same domain exceptions as before, v2 routes render the error directly
    - Frozen dataclasses: a result cannot change tag after construction
"""

from dataclasses import dataclass, field
from typing import Generic, TypeVar

from company_api.core.domain_types import ErrorKind
from company_api.core.errors import (
    BadRequestError,
    CompanyEmployeesError,
    ResourceNotFoundError,
    ValidationFailedError,
)

T = TypeVar("T")


class ApiBaseResponse:
    """Common base for tagged results."""
    success: bool

    def unwrap(self):
        """Return the carried result or raise the matching domain error."""
        raise NotImplementedError


@dataclass(frozen=True)
class ApiOkResponse(ApiBaseResponse, Generic[T]):
    result: T
    success: bool = field(default=True, init=False)

    def unwrap(self) -> T:
        return self.result


@dataclass(frozen=True)
class ApiErrorResponse(ApiBaseResponse):
    kind: ErrorKind
    message: str
    success: bool = field(default=False, init=False)

    @property
    def status_code(self) -> int:
        return self.kind.http_status

    def to_error(self) -> CompanyEmployeesError:
        if self.kind is ErrorKind.NOT_FOUND:
            return ResourceNotFoundError("Resource", "unknown", self.message)
        if self.kind is ErrorKind.UNPROCESSABLE:
            return ValidationFailedError(self.message)
        return BadRequestError(self.message)

    def unwrap(self):
        raise self.to_error()


@dataclass(frozen=True)
class ApiNotFoundResponse(ApiErrorResponse):
    """Not-found result that remembers which resource missed."""
    kind: ErrorKind = field(default=ErrorKind.NOT_FOUND, init=False)
    message: str = field(default="", init=False)
    error: ResourceNotFoundError = field(default=None, repr=False)

    def __post_init__(self):
        if self.error is None:
            raise ValueError("ApiNotFoundResponse requires the not-found error")
        object.__setattr__(self, "message", self.error.message)

    def to_error(self) -> ResourceNotFoundError:
        return self.error


def not_found(error: ResourceNotFoundError) -> ApiNotFoundResponse:
    return ApiNotFoundResponse(error=error)
