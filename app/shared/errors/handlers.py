"""
Centralized error handlers for FastAPI.

Maps employees domain errors to HTTP responses.
No stack traces or internal details are exposed to clients.
All error responses use the ErrorResponse schema.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.domain.employees.errors import (
    DeleteFailedError,
    EmployeeDomainError,
    EmployeeNotFoundError,
    EmptyCollectionError,
    InvalidEmployeeInputError,
    UpstreamUnavailableError,
)

logger = logging.getLogger(__name__)

HTTP_400 = 400
HTTP_404 = 404
HTTP_500 = 500
HTTP_503 = 503


def _error_response(status_code: int, error: str, detail: str | None = None) -> JSONResponse:
    """Build a consistent JSON error response."""
    body: dict[str, str | None] = {"error": error}
    if detail:
        body["detail"] = detail
    return JSONResponse(status_code=status_code, content=body)


def register_error_handlers(app: FastAPI) -> None:
    """Register all domain error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(EmployeeNotFoundError)
    async def handle_employee_not_found(
        _request: Request, exc: EmployeeNotFoundError
    ) -> JSONResponse:
        """Handle unknown employee IDs."""
        logger.warning("Employee not found: %s", exc.employee_id)
        return _error_response(HTTP_404, "Employee not found", exc.message)

    @app.exception_handler(InvalidEmployeeInputError)
    async def handle_invalid_input(
        _request: Request, exc: InvalidEmployeeInputError
    ) -> JSONResponse:
        """Handle rejected create input."""
        logger.warning("Invalid employee input: %d problem(s)", len(exc.problems))
        return _error_response(HTTP_400, "Invalid employee input", exc.message)

    @app.exception_handler(UpstreamUnavailableError)
    async def handle_upstream_unavailable(
        _request: Request, exc: UpstreamUnavailableError
    ) -> JSONResponse:
        """Handle transport failures and upstream server errors."""
        logger.error("Upstream unavailable during %s: %s", exc.operation, exc.reason)
        return _error_response(
            HTTP_503, "Failed to communicate with employee service", exc.message
        )

    @app.exception_handler(EmptyCollectionError)
    async def handle_empty_collection(
        _request: Request, exc: EmptyCollectionError
    ) -> JSONResponse:
        """Handle aggregates requested over no employees."""
        logger.error("Empty collection for aggregate: %s", exc.aggregate)
        return _error_response(HTTP_500, "No employees available", exc.message)

    @app.exception_handler(DeleteFailedError)
    async def handle_delete_failed(
        _request: Request, exc: DeleteFailedError
    ) -> JSONResponse:
        """Handle deletes the upstream did not confirm."""
        logger.error("Delete failed: %s", exc.reason)
        return _error_response(HTTP_500, "Failed to delete employee", exc.message)

    @app.exception_handler(EmployeeDomainError)
    async def handle_employee_domain(
        _request: Request, exc: EmployeeDomainError
    ) -> JSONResponse:
        """Catch-all for unhandled employees domain errors."""
        logger.error("Unhandled employees domain error: %s", exc.message)
        return _error_response(HTTP_500, "Internal server error", exc.message)

    @app.exception_handler(Exception)
    async def handle_unexpected(
        _request: Request, exc: Exception
    ) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return _error_response(HTTP_500, "Internal server error")
