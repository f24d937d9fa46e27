"""
Series business service layer
"""
import logging
from typing import Any, List, Mapping, Optional

from bookshelf.exceptions import SeriesNotFoundError, ValidationFailedError
from bookshelf.models.book import Book
from bookshelf.models.patch import series_patch
from bookshelf.models.series import Series
from bookshelf.models.timestamps import Clock, MonotonicClock
from bookshelf.repositories.book_repository import BookRepository
from bookshelf.repositories.series_repository import SeriesRepository
from .validation import validate_series

logger = logging.getLogger(__name__)


class SeriesService:
    """Series service"""

    def __init__(
        self,
        series_repository: SeriesRepository,
        book_repository: BookRepository,
        clock: Optional[Clock] = None,
    ):
        self.series_repository = series_repository
        self.book_repository = book_repository
        self.clock = clock or MonotonicClock()

    async def list_series(self) -> List[Series]:
        return await self.series_repository.get_all()

    async def get_series(self, series_id: Optional[int]) -> Series:
        series = await self.series_repository.get_by_id(series_id)
        if not series:
            raise SeriesNotFoundError(f"Series with id {series_id} not found")
        return series

    async def create_series(self, series_data: Mapping[str, Any]) -> Series:
        errors = validate_series(series_data)
        if errors:
            raise ValidationFailedError(errors)

        now = self.clock()
        series = await self.series_repository.create({
            "name": series_data["name"],
            "description": series_data.get("description"),
            "created_at": now,
            "updated_at": now,
        })
        logger.info(f"Created series {series.id}: {series.name}")
        return series

    async def update_series(self, series_id: Optional[int], update_data: Mapping[str, Any]) -> Series:
        series = await self.get_series(series_id)
        errors = validate_series(update_data, is_update=True)
        if errors:
            raise ValidationFailedError(errors)

        series_patch(update_data).apply_to(series)
        series.updated_at = self.clock()
        await self.series_repository.update(series)
        logger.info(f"Updated series {series.id}")
        return series

    async def delete_series(self, series_id: Optional[int]) -> None:
        """Delete a series, detaching its books first"""
        series = await self.get_series(series_id)
        detached = await self.book_repository.detach_series(series.id, self.clock())
        await self.series_repository.delete(series.id)
        logger.info(f"Deleted series {series.id}, detached {len(detached)} book(s)")

    async def list_books_in_series(self, series_id: Optional[int]) -> List[Book]:
        series = await self.get_series(series_id)
        return await self.book_repository.get_by_series_id(series.id)
