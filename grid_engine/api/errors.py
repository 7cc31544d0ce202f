"""Mapping of grid engine errors onto HTTP responses."""

from __future__ import annotations
import logging
import traceback
from typing import Any, Optional

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.responses import JSONResponse

from grid_engine.errors import (
    ConcurrentModification, GridError, InvalidGridParameters, InvalidMullionEdit, NotFound,
)

logger = logging.getLogger(__name__)


class APIError(Exception):
    """
    Base class for API-specific exceptions.

    Carries the HTTP status code plus structured error details for the
    response body.
    """
    def __init__(
        self,
        status_code: int,
        detail: str,
        internal_code: Optional[str] = None,
        extra: Optional[dict[str, Any]] = None,
    ):
        self.status_code = status_code
        self.detail = detail
        self.internal_code = internal_code
        self.extra = extra or {}
        super().__init__(detail)

    def payload(self) -> dict[str, Any]:
        body: dict[str, Any] = {"detail": self.detail}
        if self.internal_code:
            body["code"] = self.internal_code
        if self.extra:
            body["extra"] = self.extra
        return body

    def to_http_exception(self) -> HTTPException:
        return HTTPException(status_code=self.status_code, detail=self.payload())


class ResourceNotFoundError(APIError):
    """Error raised when a requested resource doesn't exist."""
    def __init__(self, resource_type: str, resource_id: str):
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"{resource_type.capitalize()} with ID '{resource_id}' not found",
            internal_code="resource_not_found",
            extra={"resource_type": resource_type, "resource_id": resource_id},
        )


class ValidationError(APIError):
    """Error raised for input validation failures."""
    def __init__(self, detail: str, errors: Optional[list[str]] = None):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Validation error: {detail}",
            internal_code="validation_error",
            extra={"errors": errors} if errors else None,
        )


class ConflictError(APIError):
    """Error raised when a write raced another write."""
    def __init__(self, detail: str, expected: int, actual: int):
        super().__init__(
            status_code=status.HTTP_409_CONFLICT,
            detail=detail,
            internal_code="concurrent_modification",
            extra={"expected_version": expected, "actual_version": actual},
        )


def to_api_error(exc: GridError) -> APIError:
    """Translate a domain error into its API counterpart."""
    if isinstance(exc, NotFound):
        return ResourceNotFoundError(exc.resource_type, exc.resource_id)
    if isinstance(exc, InvalidGridParameters):
        return ValidationError("invalid grid parameters", exc.errors)
    if isinstance(exc, InvalidMullionEdit):
        return ValidationError(str(exc))
    if isinstance(exc, ConcurrentModification):
        return ConflictError(str(exc), exc.expected, exc.actual)
    return APIError(status.HTTP_400_BAD_REQUEST, str(exc), internal_code="grid_error")


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(GridError)
    async def grid_error_handler(request: Request, exc: GridError) -> JSONResponse:
        api_error = to_api_error(exc)
        logger.info(
            "%s %s -> %d %s", request.method, request.url.path,
            api_error.status_code, api_error.detail,
        )
        return JSONResponse(status_code=api_error.status_code, content={"detail": api_error.payload()})

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error("Unhandled exception: %s\n%s", exc, traceback.format_exc())
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": {
                "detail": f"An unexpected error occurred: {exc}",
                "code": "internal_server_error",
            }},
        )
