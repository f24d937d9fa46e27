"""
Request-scoped dependencies and parameter parsing shared by the routers
"""
import re
from typing import Optional

from fastapi import Request

from bookshelf.database import Store
from bookshelf.services.book_service import BookService
from bookshelf.services.open_library import OpenLibraryClient
from bookshelf.services.series_service import SeriesService

LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def parse_int(raw: Optional[str]) -> Optional[int]:
    """Read the leading integer of a string ("12abc" -> 12), None if there is none"""
    if raw is None:
        return None
    match = LEADING_INT.match(raw)
    return int(match.group(1)) if match else None


def get_store(request: Request) -> Store:
    return request.app.state.store


def get_book_service(request: Request) -> BookService:
    store = get_store(request)
    return BookService(store.books, clock=store.clock)


def get_series_service(request: Request) -> SeriesService:
    store = get_store(request)
    return SeriesService(store.series, store.books, clock=store.clock)


def get_search_client(request: Request) -> OpenLibraryClient:
    return request.app.state.search_client
