"""
Store setup
"""
import logging
from dataclasses import dataclass, field

from bookshelf.models.book import Book, BookType, ReadingStatus
from bookshelf.models.series import Series
from bookshelf.models.timestamps import MonotonicClock, parse_timestamp
from bookshelf.repositories.book_repository import BookRepository
from bookshelf.repositories.series_repository import SeriesRepository

logger = logging.getLogger(__name__)


@dataclass
class Store:
    """Repositories and clock shared by one application instance"""
    books: BookRepository = field(default_factory=BookRepository)
    series: SeriesRepository = field(default_factory=SeriesRepository)
    clock: MonotonicClock = field(default_factory=MonotonicClock)


def sample_series() -> Series:
    return Series(
        id=1,
        name="The Stormlight Archive",
        description="Epic fantasy by Brandon Sanderson",
        created_at=parse_timestamp("2025-01-10T08:00:00Z"),
        updated_at=parse_timestamp("2025-01-10T08:00:00Z"),
    )


def sample_book() -> Book:
    return Book(
        id=1,
        title="The Way of Kings",
        author="Brandon Sanderson",
        isbn_10="0765326353",
        isbn_13="9780765326355",
        publication_year=2010,
        publisher="Tor Books",
        page_count=1007,
        description="First novel in the Stormlight Archive series.",
        cover_image_url="https://covers.openlibrary.org/b/id/8739161-L.jpg",
        open_library_id="OL24364428M",
        series_id=1,
        status=ReadingStatus.FINISHED,
        rating=5,
        comments="Amazing world-building and magic system.",
        book_type=BookType.HARDCOVER,
        date_added="2025-01-15T10:00:00Z",
        date_started="2025-01-16T09:00:00Z",
        date_finished="2025-01-25T22:30:00Z",
        created_at=parse_timestamp("2025-01-15T10:00:00Z"),
        updated_at=parse_timestamp("2025-01-25T22:30:00Z"),
    )


async def seed_sample_data(store: Store) -> None:
    """Load the demo series and book into an empty store"""
    if await store.series.get_by_name(sample_series().name) is None:
        await store.series.insert(sample_series())
    if await store.books.count() == 0:
        await store.books.insert(sample_book())
    logger.info("Sample data loaded")
