"""
Book data access layer
"""
from datetime import datetime
from typing import List, Optional

from bookshelf.models.book import Book
from .base_repository import InMemoryRepository


class BookRepository(InMemoryRepository[Book]):
    """Book repository"""

    def __init__(self, start_id: int = 1):
        super().__init__(Book, start_id)

    async def find(
        self,
        series_id: Optional[int] = None,
        status: Optional[str] = None,
        publication_year: Optional[int] = None,
    ) -> List[Book]:
        """Books matching every given equality filter; None means no filter"""
        books = await self.get_all()
        if series_id is not None:
            books = [b for b in books if b.series_id == series_id]
        if status is not None:
            books = [b for b in books if b.status.value == status]
        if publication_year is not None:
            books = [b for b in books if b.publication_year == publication_year]
        return books

    async def get_by_series_id(self, series_id: int) -> List[Book]:
        return [b for b in await self.get_all() if b.series_id == series_id]

    async def detach_series(self, series_id: int, now: datetime) -> List[Book]:
        """Clear series_id on every book in the series and stamp updated_at"""
        detached = await self.get_by_series_id(series_id)
        for book in detached:
            book.series_id = None
            book.updated_at = now
        return detached
