"""Error responses for the Mission Control API.

Clients only ever see two kinds of failure, both shaped ``{"error": str}``:

- NotFound (404): an id-addressed resource does not exist. Routes raise
  ``HTTPException`` for these, as they would for any other HTTP status.
- Internal (500): everything else, including request bodies that fail to
  parse and store-level errors such as a foreign key pointing at a missing
  agent. The detail is logged; the client gets "Failed to <action>".
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


def error_response(message: str, status_code: int) -> JSONResponse:
    """Build the JSON error body every failure uses."""
    return JSONResponse({"error": message}, status_code=status_code)


def failure_message(request: Request) -> str:
    """Describe the failed action from the matched route name.

    A route function named ``create_task`` yields "Failed to create task".
    """
    route = request.scope.get("route")
    name = getattr(route, "name", None)
    if not name:
        return "Internal server error"
    return f"Failed to {name.replace('_', ' ')}"


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Render HTTPException (404s and friends) as ``{"error": detail}``."""
    return error_response(str(exc.detail), exc.status_code)


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Malformed input is an Internal failure."""
    message = failure_message(request)
    logger.error(f"{message}: invalid request {exc.errors()}")
    return error_response(message, status.HTTP_500_INTERNAL_SERVER_ERROR)


async def internal_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log any unhandled fault and answer with a generic 500."""
    message = failure_message(request)
    logger.exception(f"{message}: {exc}", exc_info=exc)
    return error_response(message, status.HTTP_500_INTERNAL_SERVER_ERROR)


def register_error_handlers(app: FastAPI) -> None:
    """Install the error handlers on an application."""
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, validation_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(SQLAlchemyError, internal_error_handler)
    app.add_exception_handler(Exception, internal_error_handler)
