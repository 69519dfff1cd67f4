"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from food_rescue.api.analysis import router as analysis_router
from food_rescue.api.donations import router as donations_router
from food_rescue.app_logging import configure_logging
from food_rescue.containers import AppContainer


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        app.state.container.prepare_resources()
        logger.info(
            "Food rescue API started in %s environment",
            app.state.container.settings.environment,
        )
        yield
        await app.state.container.close_resources()

    app = FastAPI(title="Food Rescue", lifespan=lifespan)
    app.state.container = container

    app.include_router(donations_router)
    app.include_router(analysis_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
