"""Subscription Tracker — FastAPI application entry point."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI

from subtracker.api.deps import get_subscription_store
from subtracker.api.subscriptions import router as subscriptions_router
from subtracker.config import Settings, settings as default_settings
from subtracker.core.error_handlers import register_error_handlers
from subtracker.database import create_engine
from subtracker.services.subscription_store import SubscriptionStore

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> None:
    """Configure the root logger so all subtracker.* loggers write to stderr."""
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def create_app(settings: Settings | None = None, store: SubscriptionStore | None = None) -> FastAPI:
    """Build the application.

    When ``store`` is given it is used as-is and the lifespan leaves the
    database alone; otherwise the lifespan connects, pings, creates the table
    and disposes the engine on shutdown. Any failure there aborts startup.
    """
    settings = settings or default_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        """Application lifespan handler for startup and shutdown events."""
        if store is not None:
            yield
            return

        logger.info("Connecting to database...")
        engine = create_engine(settings)
        owned_store = SubscriptionStore(engine)
        try:
            await owned_store.ping()
            await owned_store.init_schema()
            logger.info("Connected to database")
            app.state.store = owned_store
            yield
        finally:
            # Shutdown — dispose engine connections
            await engine.dispose()

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="CRUD service for tracking users' paid subscriptions.",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    if store is not None:
        app.state.store = store

    register_error_handlers(app, strict_status=settings.strict_error_status)

    # Routers
    app.include_router(subscriptions_router)

    @app.get("/health", tags=["health"])
    async def health_check(
        subscription_store: SubscriptionStore = Depends(get_subscription_store),
    ) -> dict[str, str]:
        """Health check endpoint; fails when the database is unreachable."""
        await subscription_store.ping()
        return {"status": "healthy", "service": settings.app_name}

    return app


configure_logging(default_settings.log_level)
app = create_app()
