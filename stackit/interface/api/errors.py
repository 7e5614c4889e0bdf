"""Exception handlers rendering errors as ``{"kind": ..., "message": ...}``."""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from stackit.domain.error import DomainError, UpstreamFailure

STATUS_BY_KIND: dict[str, int] = {
    "validation_error": status.HTTP_400_BAD_REQUEST,
    "not_found": status.HTTP_404_NOT_FOUND,
    "unauthorized": status.HTTP_401_UNAUTHORIZED,
    "forbidden": status.HTTP_403_FORBIDDEN,
    "upstream_failure": status.HTTP_503_SERVICE_UNAVAILABLE,
}


def error_response(kind: str, message: str) -> JSONResponse:
    """Build the JSON error body for a kind."""
    return JSONResponse(
        status_code=STATUS_BY_KIND.get(kind, status.HTTP_400_BAD_REQUEST),
        content={"kind": kind, "message": message},
    )


async def handle_domain_error(request: Request, exc: DomainError) -> JSONResponse:
    """Render a domain error with the status of its kind."""
    logfire.info(
        "Request failed with domain error",
        kind=exc.kind,
        error=str(exc),
        path=request.url.path,
    )
    return error_response(exc.kind, str(exc))


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Render request schema errors as validation errors (400, not 422)."""
    parts = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"] if part != "body")
        parts.append(f"{location}: {error['msg']}" if location else error["msg"])
    message = "; ".join(parts) or "Invalid request"
    logfire.info("Request schema invalid", error=message, path=request.url.path)
    return error_response("validation_error", message)


async def handle_store_error(request: Request, exc: Exception) -> JSONResponse:
    """Render content store failures (database, network, timeout) as upstream failures."""
    logfire.error(
        "Content store failure",
        error=str(exc),
        error_type=type(exc).__name__,
        path=request.url.path,
    )
    return error_response(
        UpstreamFailure.kind, "The content store is unavailable, try again later"
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install all exception handlers on the application.

    Args:
        app: FastAPI application
    """
    app.add_exception_handler(DomainError, handle_domain_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(SQLAlchemyError, handle_store_error)
    # TimeoutError and ConnectionError are OSError subclasses
    app.add_exception_handler(OSError, handle_store_error)
