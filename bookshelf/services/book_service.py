"""
Book business service layer
"""
import logging
from typing import Any, Dict, List, Mapping, Optional

from bookshelf.exceptions import BookNotFoundError, ValidationFailedError
from bookshelf.models.book import Book, ReadingStatus
from bookshelf.models.patch import book_patch
from bookshelf.models.timestamps import Clock, MonotonicClock, format_timestamp
from bookshelf.repositories.book_repository import BookRepository
from .validation import validate_book

logger = logging.getLogger(__name__)


class BookService:
    """Book service"""

    def __init__(self, book_repository: BookRepository, clock: Optional[Clock] = None):
        self.book_repository = book_repository
        self.clock = clock or MonotonicClock()

    async def list_books(
        self,
        series_id: Optional[int] = None,
        status: Optional[str] = None,
        publication_year: Optional[int] = None,
    ) -> List[Book]:
        """List books, optionally narrowed by equality filters"""
        return await self.book_repository.find(
            series_id=series_id, status=status, publication_year=publication_year
        )

    async def get_book(self, book_id: Optional[int]) -> Book:
        book = await self.book_repository.get_by_id(book_id)
        if not book:
            raise BookNotFoundError(f"Book with id {book_id} not found")
        return book

    async def create_book(self, book_data: Mapping[str, Any]) -> Book:
        """Validate and store a new book"""
        existing = await self.book_repository.get_all()
        errors = validate_book(book_data, existing_books=existing)
        if errors:
            raise ValidationFailedError(errors)

        changes = book_patch(book_data).changes
        now = self.clock()
        record: Dict[str, Any] = {
            name: value for name, value in changes.items() if value is not None
        }
        record.setdefault("status", ReadingStatus.PLANNING)
        record.setdefault("date_added", format_timestamp(now))
        record["created_at"] = now
        record["updated_at"] = now

        book = await self.book_repository.create(record)
        logger.info(f"Created book {book.id}: {book.title}")
        return book

    async def update_book(self, book_id: Optional[int], update_data: Mapping[str, Any]) -> Book:
        """Apply a partial update; the stored id always wins over the payload's"""
        book = await self.get_book(book_id)
        existing = await self.book_repository.get_all()
        errors = validate_book(update_data, is_update=True, current_id=book.id, existing_books=existing)
        if errors:
            raise ValidationFailedError(errors)

        patch = book_patch(update_data)
        patch.apply_to(book)
        book.updated_at = self.clock()
        await self.book_repository.update(book)
        logger.info(f"Updated book {book.id}: {sorted(patch.changes)}")
        return book

    async def delete_book(self, book_id: Optional[int]) -> None:
        success = await self.book_repository.delete(book_id)
        if not success:
            raise BookNotFoundError(f"Book with id {book_id} not found")
        logger.info(f"Deleted book {book_id}")
