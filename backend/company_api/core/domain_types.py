"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - CompanyId, EmployeeId wrap UUIDs — never use bare UUID in service signatures
    - Error kinds encoded as an Enum with their HTTP status — no raw int matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

CompanyId = NewType("CompanyId", UUID)
EmployeeId = NewType("EmployeeId", UUID)


# ─── Enums ───────────────────────────────────────────────────────

class ErrorKind(str, Enum):
    """Expected failure kinds carried by tagged results."""
    NOT_FOUND = "not_found"
    BAD_REQUEST = "bad_request"
    UNPROCESSABLE = "unprocessable"

    @property
    def http_status(self) -> int:
        return _ERROR_KIND_STATUS[self]


_ERROR_KIND_STATUS = {
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.BAD_REQUEST: 400,
    ErrorKind.UNPROCESSABLE: 422,
}


class HttpMethod(str, Enum):
    """Methods advertised in hypermedia links."""
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
