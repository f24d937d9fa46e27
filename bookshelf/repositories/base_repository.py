"""
In-memory record store shared by the book and series repositories
"""
from typing import Any, Callable, Dict, Generic, List, Optional, TypeVar

T = TypeVar("T")


class InMemoryRepository(Generic[T]):
    """Process-local store keyed by integer id.

    Ids come from a counter that only ever moves forward, so a deleted id is
    never handed out again.
    """

    def __init__(self, factory: Callable[..., T], start_id: int = 1):
        self._factory = factory
        self._records: Dict[int, T] = {}
        self._next_id = start_id

    def next_id(self) -> int:
        record_id = self._next_id
        self._next_id += 1
        return record_id

    async def create(self, data: Dict[str, Any]) -> T:
        """Build a record with the next id and store it"""
        record = self._factory(id=self.next_id(), **data)
        self._records[record.id] = record
        return record

    async def insert(self, record: T) -> T:
        """Store a record that already carries its id"""
        self._records[record.id] = record
        if record.id >= self._next_id:
            self._next_id = record.id + 1
        return record

    async def get_by_id(self, record_id: Optional[int]) -> Optional[T]:
        if record_id is None:
            return None
        return self._records.get(record_id)

    async def get_all(self) -> List[T]:
        return [self._records[key] for key in sorted(self._records)]

    async def update(self, record: T) -> Optional[T]:
        if record.id not in self._records:
            return None
        self._records[record.id] = record
        return record

    async def delete(self, record_id: Optional[int]) -> bool:
        if record_id is None or record_id not in self._records:
            return False
        del self._records[record_id]
        return True

    async def count(self) -> int:
        return len(self._records)
