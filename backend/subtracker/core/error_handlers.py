"""Render service errors as plain-text responses.

The body is always the raw error message. Status codes collapse to 500
unless ``strict_error_status`` is enabled, in which case each error kind
keeps its own code (decode 400, not found 404, storage 500).
"""

import logging
from collections.abc import Sequence
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse

from subtracker.core.exceptions import DecodeError, SubscriptionServiceError

logger = logging.getLogger(__name__)


def format_validation_errors(errors: Sequence[Any]) -> str:
    """Flatten pydantic error dicts into one line of text."""
    parts = []
    for error in errors:
        location = ".".join(str(part) for part in error.get("loc", ()))
        message = error.get("msg", "invalid value")
        parts.append(f"{location}: {message}" if location else message)
    return "; ".join(parts) or "invalid request"


def register_error_handlers(app: FastAPI, strict_status: bool = False) -> None:
    """Install handlers for the service error taxonomy on ``app``."""

    def _respond(exc: SubscriptionServiceError) -> PlainTextResponse:
        status_code = exc.status_code if strict_status else status.HTTP_500_INTERNAL_SERVER_ERROR
        return PlainTextResponse(str(exc), status_code=status_code)

    @app.exception_handler(SubscriptionServiceError)
    async def _service_error(request: Request, exc: SubscriptionServiceError) -> PlainTextResponse:
        logger.warning("%s %s failed: %s", request.method, request.url.path, exc)
        return _respond(exc)

    @app.exception_handler(RequestValidationError)
    async def _validation_error(request: Request, exc: RequestValidationError) -> PlainTextResponse:
        error = DecodeError(format_validation_errors(exc.errors()))
        logger.warning("%s %s could not be decoded: %s", request.method, request.url.path, error)
        return _respond(error)
