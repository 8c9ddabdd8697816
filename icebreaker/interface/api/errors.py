"""HTTP mapping of domain and persistence errors."""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from icebreaker.domain.error import ConflictError, NotFoundError, ValidationError
from icebreaker.persistence.error import StorageAccessError


def register_error_handlers(app: FastAPI) -> None:
    """Register exception handlers that turn errors into JSON responses.

    Every error body has the shape `{"detail": "<message>"}`.

    Args:
        app: FastAPI application
    """

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc)}
        )

    @app.exception_handler(ConflictError)
    async def handle_conflict(request: Request, exc: ConflictError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_409_CONFLICT, content={"detail": str(exc)}
        )

    @app.exception_handler(ValidationError)
    async def handle_validation(
        request: Request, exc: ValidationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST, content={"detail": str(exc)}
        )

    @app.exception_handler(StorageAccessError)
    async def handle_storage_access(
        request: Request, exc: StorageAccessError
    ) -> JSONResponse:
        logfire.error(
            "Storage unavailable", path=request.url.path, error=str(exc)
        )
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"detail": "Storage unavailable"},
        )
