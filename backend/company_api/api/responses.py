"""Result Rendering — turns tagged service results into HTTP responses.

Invariants:
    - process_error renders {"statusCode", "message"} with the carried status code
    - Only error results are rendered here; success values go through response_model

Design Decisions:
    - v1 routes call result.unwrap() and let the global handlers render exceptions;
      v2 routes branch on result.success and call process_error
"""

from fastapi.responses import JSONResponse

from company_api.core.result import ApiBaseResponse, ApiErrorResponse
from company_api.schemas.company import ErrorDetails


def process_error(result: ApiBaseResponse) -> JSONResponse:
    if not isinstance(result, ApiErrorResponse):
        raise TypeError("process_error called with a successful result")
    details = ErrorDetails(status_code=result.status_code, message=result.message)
    return JSONResponse(
        status_code=result.status_code,
        content=details.model_dump(by_alias=True),
    )
