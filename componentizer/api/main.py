import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from componentizer.api.deps import get_settings
from componentizer.api.routes import preview
from componentizer.rules.loader import load_config

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Load the config on startup so a broken file fails fast."""
    settings = get_settings()
    load_config(settings.config_path)
    logger.info("Config loaded from %s", settings.config_path)
    yield


def create_app() -> FastAPI:
    app = FastAPI(
        title="Componentizer API",
        version="0.1.0",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )
    app.include_router(preview.router, prefix="/api/components", tags=["Preview"])
    return app
