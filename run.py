#!/usr/bin/env python3
"""
Startup script - Bookshelf API
Usage: python run.py
"""
import logging

import uvicorn

from bookshelf.config import get_settings
from bookshelf.core.logging import setup_logging

if __name__ == "__main__":
    settings = get_settings()
    setup_logging(settings)

    logging.info("=" * 60)
    logging.info(f"Starting {settings.APP_NAME} v{settings.APP_VERSION}")
    logging.info(f"API docs: http://{settings.HOST}:{settings.PORT}/docs")
    logging.info("=" * 60)

    uvicorn.run(
        "bookshelf.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        reload_dirs=["bookshelf"],
        log_level=settings.LOG_LEVEL.lower(),
    )
