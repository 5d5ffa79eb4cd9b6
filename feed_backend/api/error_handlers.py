"""Error Handlers: translate domain error kinds into HTTP responses.

Each FeedError kind keeps its own status code; only unexpected exceptions
become 500, and their details are never sent to the client.
"""

import logging
from typing import Dict, Type

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from ..domain.exceptions import (
    ConflictError,
    FeedError,
    ForbiddenError,
    InvalidCredentialsError,
    NotFoundError,
    StoreError,
    UnauthenticatedError,
    ValidationError,
)

logger = logging.getLogger(__name__)


ERROR_STATUS_CODES: Dict[Type[FeedError], int] = {
    ValidationError: 422,
    ConflictError: status.HTTP_409_CONFLICT,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    UnauthenticatedError: status.HTTP_401_UNAUTHORIZED,
    ForbiddenError: status.HTTP_403_FORBIDDEN,
    InvalidCredentialsError: status.HTTP_401_UNAUTHORIZED,
    StoreError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def status_code_for(exc: FeedError) -> int:
    for error_type in type(exc).__mro__:
        if error_type in ERROR_STATUS_CODES:
            return ERROR_STATUS_CODES[error_type]
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""

    @app.exception_handler(FeedError)
    async def feed_error_handler(request: Request, exc: FeedError):
        status_code = status_code_for(exc)
        if status_code >= 500:
            logger.error(f"{type(exc).__name__} on {request.url.path}: {exc.message}")
        else:
            logger.info(f"{type(exc).__name__} on {request.url.path}: {exc.message}")
        return JSONResponse(
            status_code=status_code,
            content={"message": exc.message, "kind": exc.kind, "data": exc.errors},
        )

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all that never leaks internal details."""
        logger.error(f"Unhandled exception on {request.url.path}: {exc}", exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": "An unexpected error occurred", "kind": "internal", "data": []},
        )
