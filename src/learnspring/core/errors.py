"""Error handling utilities and the base application exception."""
from __future__ import annotations

import logging

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel

logger = logging.getLogger(__name__)


class AppError(Exception):
    """Base application error."""

    def __init__(
        self,
        message: str,
        *,
        code: str = "app_error",
        http_status: int = status.HTTP_400_BAD_REQUEST,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.http_status = http_status

    def to_dict(self) -> dict[str, str]:
        return {"error": self.code, "message": self.message}


class ErrorResponse(BaseModel):
    error: str
    message: str


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    logger.warning("%s %s failed: %s (%s)", request.method, request.url.path, exc.message, exc.code)
    body = ErrorResponse(**exc.to_dict())
    return JSONResponse(status_code=exc.http_status, content=body.model_dump())


async def validation_error_handler(_: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "error": "validation_error",
            "message": "Invalid request payload",
            "details": exc.errors(),
        },
    )
