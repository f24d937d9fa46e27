"""
Series data access layer
"""
from typing import Optional

from bookshelf.models.series import Series
from .base_repository import InMemoryRepository


class SeriesRepository(InMemoryRepository[Series]):
    """Series repository"""

    def __init__(self, start_id: int = 1):
        super().__init__(Series, start_id)

    async def get_by_name(self, name: str) -> Optional[Series]:
        return next((s for s in await self.get_all() if s.name == name), None)
