"""Async SQLAlchemy engine factory and declarative base."""

from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from subtracker.config import Settings


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""

    pass


def create_engine(settings: Settings) -> AsyncEngine:
    """Build the pooled engine shared by every request.

    The pool is the only state shared across requests; AsyncEngine hands out
    one connection per checkout, so concurrent requests never share a cursor.
    """
    url = settings.async_database_url
    kwargs: dict = {"echo": settings.debug, "pool_pre_ping": True}
    if not url.startswith("sqlite"):
        kwargs.update(pool_size=settings.db_pool_size, max_overflow=settings.db_max_overflow)
    return create_async_engine(url, **kwargs)
