"""Error Handlers — global exception handlers translating errors to HTTP responses.

Invariants:
    - CompanyEmployeesError → structured JSON with its own http_status
      (not-found 404, bad-request 400, validation 422, database 503)
    - RequestValidationError → 400 when the body is missing entirely, 422 otherwise
    - Exception (catch-all) → 500, never leaks internal details

Design Decisions:
    - Three-layer handler: domain (CompanyEmployeesError), validation (Pydantic), catch-all
    - Validation failures reuse ValidationFailedError so 422 bodies match domain errors
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from company_api.core.errors import (
    BadRequestError, CompanyEmployeesError, ErrorSeverity, ValidationFailedError,
)

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_domain_error_handler(app: FastAPI) -> None:

    @app.exception_handler(CompanyEmployeesError)
    async def domain_error_handler(request: Request, exc: CompanyEmployeesError):
        """Handle all domain/infrastructure errors."""
        log = logger.error if exc.http_status >= 500 else logger.warning
        log(
            f"{type(exc).__name__}: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Missing body → 400; anything else that fails validation → 422."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
            extra={"path": request.url.path},
        )
        error = translate_validation_error(exc)
        return JSONResponse(
            status_code=error.http_status, content=error.to_response(),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": "An unexpected error occurred",
                    "category": "internal",
                    "severity": ErrorSeverity.CRITICAL.value,
                },
            },
        )


def translate_validation_error(
    exc: RequestValidationError,
) -> CompanyEmployeesError:
    """Map a request validation failure onto the domain error taxonomy."""
    errors = exc.errors()
    if any(_is_missing_body(e) for e in errors):
        return BadRequestError("Request body object is null", "NULL_BODY")
    return ValidationFailedError(
        "Invalid request data",
        [
            {
                "field": ".".join(str(loc) for loc in e["loc"]),
                "message": e["msg"],
                "type": e["type"],
            }
            for e in errors
        ],
    )


def _is_missing_body(error: dict) -> bool:
    return error.get("type") == "missing" and tuple(error.get("loc", ())) == ("body",)
