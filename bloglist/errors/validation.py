"""Custom validation error handling for FastAPI."""

from logging import getLogger
from typing import cast

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import ORJSONResponse
from starlette.status import HTTP_400_BAD_REQUEST

from bloglist.configs import file_logger
from bloglist.utils.helpers import host

logger = file_logger(getLogger(__name__))

# Never echo these back to the client
HIDDEN_INPUT_FIELDS = frozenset({"password"})


async def validation_exception_handler(
    request: Request,
    exc: Exception,
) -> ORJSONResponse:
    """
    Handle request validation errors as ``400 Bad Request``.

    Covers missing or empty body fields as well as malformed path
    identifiers.

    Args:
        request: The incoming request.
        exc: The RequestValidationError exception.

    Returns:
        ORJSONResponse with formatted validation errors.
    """
    exec_error = cast(RequestValidationError, exc)

    formatted_errors = []
    for error in exec_error.errors():
        loc = [str(part) for part in error.get("loc", [])]
        field = ".".join(loc[1:])  # Skip 'body' / 'path'
        formatted_error = {
            "field": field,
            "message": error.get("msg", "Invalid value"),
            "type": error.get("type", "validation_error"),
        }
        if "input" in error and field not in HIDDEN_INPUT_FIELDS and loc[:1] != ["body"]:
            formatted_error["input"] = error["input"]
        formatted_errors.append(formatted_error)

    logger.warning(
        f"Validation error for ip: {host(request)} at endpoint {request.url.path}: {formatted_errors}",
    )

    return ORJSONResponse(
        status_code=HTTP_400_BAD_REQUEST,
        content={
            "detail": "Validation failed",
            "errors": formatted_errors,
        },
    )
