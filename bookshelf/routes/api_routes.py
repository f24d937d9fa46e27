"""
Versioned API router
"""
from fastapi import APIRouter

from .book_routes import book_router
from .series_routes import series_router


def build_api_router(prefix: str) -> APIRouter:
    api_router = APIRouter(prefix=prefix)
    api_router.include_router(book_router)
    api_router.include_router(series_router)
    return api_router
