"""Error Hierarchy — typed, categorized exceptions for every API failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Client errors (400-level) are recoverable; infrastructure errors (500-level) are critical
    - to_response() produces the REST error envelope
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with CompanyEmployeesError base: FastAPI global handler catches all
      (ADR: uniform error shape)
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    BAD_REQUEST = "bad_request"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    resource_type: str | None = None
    resource_id: str | None = None
    field: str | None = None
    debug_info: dict[str, Any] | None = None


class CompanyEmployeesError(Exception):
    """Base exception for all API errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "resource_type": self.context.resource_type,
                    "resource_id": self.context.resource_id,
                    "field": self.context.field,
                },
            }
        }


# ─── Not Found (404) ────────────────────────────────────────────

class ResourceNotFoundError(CompanyEmployeesError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, message: str | None = None,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.resource_type = resource_type
        ctx.resource_id = resource_id
        super().__init__(
            message or f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


class CompanyNotFoundError(ResourceNotFoundError):
    """Company id does not resolve."""
    def __init__(self, company_id: object, context: ErrorContext | None = None):
        super().__init__(
            "Company", str(company_id),
            f"The company with id: {company_id} doesn't exist in the database.",
            context,
        )


class EmployeeNotFoundError(ResourceNotFoundError):
    """Employee id does not resolve within its company."""
    def __init__(self, employee_id: object, context: ErrorContext | None = None):
        super().__init__(
            "Employee", str(employee_id),
            f"Employee with id: {employee_id} doesn't exist in the database.",
            context,
        )


# ─── Bad Request (400) ──────────────────────────────────────────

class BadRequestError(CompanyEmployeesError):
    """Client sent a request the API cannot act on."""
    def __init__(
        self, message: str, code: str = "BAD_REQUEST",
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, code, ErrorCategory.BAD_REQUEST,
            ErrorSeverity.ERROR, context, 400,
        )


class CompanyCollectionBadRequestError(BadRequestError):
    """Collection payload missing or empty on bulk create."""
    def __init__(
        self, message: str = "Company collection sent from a client is null.",
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message,
            "COLLECTION_BAD_REQUEST", context,
        )


class IdParametersBadRequestError(BadRequestError):
    """Id list missing or malformed."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Parameter ids is null", "ID_PARAMETERS_BAD_REQUEST", context,
        )


class CollectionCountMismatchError(BadRequestError):
    """Not every requested id resolved to an entity."""
    def __init__(
        self, requested: int, found: int, context: ErrorContext | None = None,
    ):
        super().__init__(
            "Collection count mismatch comparing to ids.",
            "COLLECTION_COUNT_MISMATCH", context,
        )
        self.requested = requested
        self.found = found


class UnknownShapeFieldError(BadRequestError):
    """Shaping requested a field the entity does not have."""
    def __init__(self, field_name: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.field = field_name
        super().__init__(
            f"Field '{field_name}' does not exist on the requested resource.",
            "UNKNOWN_SHAPE_FIELD", ctx,
        )
        self.field_name = field_name


class MaxAgeRangeBadRequestError(BadRequestError):
    """maxAge is not greater than minAge."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Max age can't be less than min age.",
            "MAX_AGE_RANGE_BAD_REQUEST", context,
        )


class MediaTypeBadRequestError(BadRequestError):
    """Accept header missing or not a media type."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(message, "MEDIA_TYPE_BAD_REQUEST", context)


# ─── Validation (422) ───────────────────────────────────────────

class ValidationFailedError(CompanyEmployeesError):
    """Request body parsed but failed model validation."""
    def __init__(
        self, message: str, model_errors: list[dict] | None = None,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 422,
        )
        self.model_errors = model_errors or []

    def to_response(self) -> dict:
        response = super().to_response()
        response["error"]["details"] = self.model_errors
        return response


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(CompanyEmployeesError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
