"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from pydantic import ValidationError

from .config import settings
from .api.router import api_router
from .services.library import asset_library

# Configure logging for our modules
logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(name)s: %(message)s")
logging.getLogger("asset_search").setLevel(logging.DEBUG)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.library_file is not None:
        try:
            asset_library.load_file(settings.library_file)
        except (OSError, ValueError, ValidationError) as e:
            logger.error(f"Could not load asset library from {settings.library_file}: {e}")
    yield


def create_app() -> FastAPI:
    app = FastAPI(
        title="asset-search",
        version="0.1.0",
        description="Filter and relevance ranking for media asset libraries",
        lifespan=lifespan,
    )

    app.include_router(api_router, prefix="/api")

    return app
