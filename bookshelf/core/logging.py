"""
Logging configuration
"""
import logging
import sys
from typing import Optional

from bookshelf.config import Settings, get_settings


def setup_logging(settings: Optional[Settings] = None):
    """Configure root logging once, level taken from settings"""
    settings = settings or get_settings()
    log_level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler(sys.stdout)]
    )

    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.error").setLevel(logging.INFO)
    logging.getLogger("bookshelf").setLevel(log_level)

    logging.getLogger(__name__).info(f"Logging configured at {settings.LOG_LEVEL} level")
