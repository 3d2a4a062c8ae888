"""
Exception handlers - turn every failure into an error envelope.

| Exception               | HTTP | code                 |
|-------------------------|------|----------------------|
| MemberNotFoundError     | 404  | MEMBER_NOT_FOUND     |
| BoardNotFoundError      | 404  | BOARD_NOT_FOUND      |
| BoardOperationError     | 400  | BOARD_NOT_REGISTERED / _MODIFIED / _REMOVED |
| DomainValidationError   | 422  | VALIDATION_ERROR     |
| RequestValidationError  | 400  | INVALID_REQUEST      |
| HTTPException           | *    | HTTP_ERROR           |
| Exception               | 500  | INTERNAL_ERROR       |
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from board_backend.domain.exceptions import (
    BoardOperationError,
    DomainValidationError,
    EntityNotFoundError,
)
from board_backend.presentation.envelope import ApiResponse

logger = logging.getLogger(__name__)


def _envelope(status_code: int, code: str, message: str, details=None) -> JSONResponse:
    body = ApiResponse.fail(code=code, message=message, details=details)
    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder(body.model_dump()),
    )


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(EntityNotFoundError)
    async def not_found_handler(request: Request, exc: EntityNotFoundError):
        logger.info(f"[NOT FOUND] {request.method} {request.url.path}: {exc.message}")
        return _envelope(status.HTTP_404_NOT_FOUND, exc.code, exc.message)

    @app.exception_handler(BoardOperationError)
    async def board_operation_handler(request: Request, exc: BoardOperationError):
        # Cause was already logged by the handler that raised this
        logger.warning(f"[BOARD ERROR] {request.method} {request.url.path}: {exc.code}")
        return _envelope(status.HTTP_400_BAD_REQUEST, exc.code, exc.message)

    @app.exception_handler(DomainValidationError)
    async def domain_validation_handler(request: Request, exc: DomainValidationError):
        return _envelope(
            status.HTTP_422_UNPROCESSABLE_ENTITY, exc.code, exc.message
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ):
        errors = exc.errors()
        logger.info(f"[VALIDATION ERROR] {request.url.path}: {errors}")
        return _envelope(
            status.HTTP_400_BAD_REQUEST,
            "INVALID_REQUEST",
            "Validation error",
            details=errors,
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return _envelope(exc.status_code, "HTTP_ERROR", str(exc.detail))

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.exception(f"[GLOBAL ERROR] {type(exc).__name__}: {exc}")
        return _envelope(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "INTERNAL_ERROR",
            "Internal server error",
        )
