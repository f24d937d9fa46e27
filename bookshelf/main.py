#!/usr/bin/env python3
"""
Application entry point
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from bookshelf.config import Settings, get_settings
from bookshelf.core.errors import register_exception_handlers
from bookshelf.core.logging import setup_logging
from bookshelf.database import Store, seed_sample_data
from bookshelf.routes.api_routes import build_api_router
from bookshelf.services.open_library import OpenLibraryClient

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[Store] = None,
    search_client: Optional[OpenLibraryClient] = None,
) -> FastAPI:
    """Build the API with its own store, so each instance is isolated"""
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Application starting...")
        if settings.SEED_SAMPLE_DATA:
            await seed_sample_data(app.state.store)
        yield
        logger.info("Application shutting down...")

    app = FastAPI(
        title=settings.APP_NAME,
        description="Personal book tracking API",
        version=settings.APP_VERSION,
        debug=settings.DEBUG,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.store = store or Store()
    app.state.search_client = search_client or OpenLibraryClient(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)
    app.include_router(build_api_router(settings.API_V1_PREFIX))

    @app.get("/health")
    async def health_check():
        """Health check"""
        return {"status": "healthy", "version": settings.APP_VERSION}

    return app


app = create_app()


def run_server(host: Optional[str] = None, port: Optional[int] = None):
    """Run the server"""
    settings = get_settings()
    setup_logging(settings)
    uvicorn.run(app, host=host or settings.HOST, port=port or settings.PORT)


if __name__ == "__main__":
    run_server()
