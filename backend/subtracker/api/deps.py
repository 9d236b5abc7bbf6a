"""Shared API dependencies — single import point for all routers."""

from collections.abc import Awaitable, Callable
from typing import TypeVar

from fastapi import Request
from pydantic import BaseModel, ValidationError

from subtracker.core.error_handlers import format_validation_errors
from subtracker.core.exceptions import DecodeError
from subtracker.services.subscription_store import SubscriptionStore

ModelT = TypeVar("ModelT", bound=BaseModel)


def get_subscription_store(request: Request) -> SubscriptionStore:
    """Return the store built at startup.

    Tests swap it out through ``app.dependency_overrides``.
    """
    return request.app.state.store


def json_body(model: type[ModelT]) -> Callable[[Request], Awaitable[ModelT]]:
    """Build a dependency that decodes the raw request body as JSON into ``model``.

    The body is parsed whatever ``Content-Type`` the client sent, so a bare
    ``curl -d '{...}'`` works the same as an ``application/json`` request.
    """

    async def _decode(request: Request) -> ModelT:
        raw = await request.body()
        try:
            return model.model_validate_json(raw)
        except ValidationError as exc:
            raise DecodeError(format_validation_errors(exc.errors())) from exc

    return _decode


__all__ = [
    "get_subscription_store",
    "json_body",
]
