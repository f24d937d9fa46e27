"""
Book model
"""
from dataclasses import dataclass, field, fields
from datetime import datetime
from enum import Enum
from typing import Optional, Dict, Any

from .timestamps import format_timestamp, utcnow


class ReadingStatus(str, Enum):
    """Shelf a book sits on"""
    PLANNING = "planning"
    READING = "reading"
    FINISHED = "finished"
    ON_HOLD = "on_hold"
    DROPPED = "dropped"

    @classmethod
    def values(cls):
        return [member.value for member in cls]


class BookType(str, Enum):
    """Physical or digital format of a book"""
    HARDCOVER = "hardcover"
    PAPERBACK = "paperback"
    KINDLE = "kindle"
    AUDIOBOOK = "audiobook"

    @classmethod
    def values(cls):
        return [member.value for member in cls]


# Server-stamped fields, rendered through format_timestamp. The date_* fields
# keep the text the client sent.
TIMESTAMP_FIELDS = ("created_at", "updated_at")


@dataclass
class Book:
    """Book model"""
    id: int
    title: str
    author: str
    isbn_10: Optional[str] = None
    isbn_13: Optional[str] = None
    publication_year: Optional[int] = None
    publisher: Optional[str] = None
    page_count: Optional[int] = None
    description: Optional[str] = None
    cover_image_url: Optional[str] = None
    open_library_id: Optional[str] = None
    series_id: Optional[int] = None
    status: ReadingStatus = ReadingStatus.PLANNING
    rating: Optional[int] = None
    comments: Optional[str] = None
    book_type: Optional[BookType] = None
    date_added: Optional[str] = None
    date_started: Optional[str] = None
    date_finished: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __post_init__(self):
        if self.created_at is None:
            self.created_at = utcnow()
        if self.updated_at is None:
            self.updated_at = self.created_at
        if self.date_added is None:
            self.date_added = format_timestamp(self.created_at)

    def to_dict(self) -> Dict[str, Any]:
        data = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if f.name in TIMESTAMP_FIELDS:
                value = format_timestamp(value)
            elif isinstance(value, Enum):
                value = value.value
            data[f.name] = value
        return data

    def __repr__(self):
        return f"Book(id={self.id}, title='{self.title}')"


# Payload keys a client may set on a book
BOOK_WRITABLE_FIELDS = tuple(
    f.name for f in fields(Book) if f.name not in ("id", "created_at", "updated_at")
)
