"""
Field validation for book and series payloads

Both validators are pure: they read the candidate (and, for ISBN uniqueness,
the books already stored) and return an ErrorMap, or None when the candidate
is acceptable. On update only the keys present in the candidate are checked.
"""
import re
from datetime import date, datetime
from typing import Any, Iterable, List, Mapping, Optional

from bookshelf.exceptions import ErrorMap
from bookshelf.models.book import Book, BookType, ReadingStatus
from bookshelf.models.timestamps import parse_timestamp

MAX_NAME_LENGTH = 255
MAX_DESCRIPTION_LENGTH = 1000
MIN_PUBLICATION_YEAR = 1450
MIN_RATING = 1
MAX_RATING = 10

ISBN_10_PATTERN = re.compile(r"^\d{10}$")
ISBN_13_PATTERN = re.compile(r"^\d{13}$")

OPTIONAL_TEXT_FIELDS = ("publisher", "description", "comments", "cover_image_url", "open_library_id")
DATE_FIELDS = ("date_added", "date_started", "date_finished")

BLANK = "can't be blank"
TOO_LONG = f"must be {MAX_NAME_LENGTH} characters or less"
TAKEN = "has already been taken"


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _add(errors: ErrorMap, field: str, message: str) -> None:
    errors.setdefault(field, []).append(message)


def _check_required_text(errors: ErrorMap, data: Mapping[str, Any], field: str, is_update: bool) -> None:
    if is_update and field not in data:
        return
    value = data.get(field)
    if not value or not isinstance(value, str):
        _add(errors, field, BLANK)
    elif len(value) > MAX_NAME_LENGTH:
        _add(errors, field, TOO_LONG)


def _check_isbn(
    errors: ErrorMap,
    data: Mapping[str, Any],
    field: str,
    pattern,
    digits: int,
    existing_books: List[Book],
    current_id: Optional[int],
) -> None:
    value = data.get(field)
    if value is None:
        return
    if not isinstance(value, str) or not pattern.match(value):
        _add(errors, field, f"must be {digits} digits")
        return
    for book in existing_books:
        if getattr(book, field) == value and book.id != current_id:
            _add(errors, field, TAKEN)
            return


def _resolve_date(data: Mapping[str, Any], field: str, stored: Optional[Book]) -> Optional[datetime]:
    """Candidate date if sent and parseable, else the stored one"""
    if field in data:
        value = data[field]
        if value is None:
            return None
        try:
            return parse_timestamp(value)
        except (TypeError, ValueError):
            return None
    value = getattr(stored, field) if stored is not None else None
    return parse_timestamp(value) if value is not None else None


def validate_book(
    data: Mapping[str, Any],
    is_update: bool = False,
    current_id: Optional[int] = None,
    existing_books: Iterable[Book] = (),
    current_year: Optional[int] = None,
) -> Optional[ErrorMap]:
    """Validate a book payload.

    Args:
        data: raw payload
        is_update: partial-update mode, absent keys are not checked
        current_id: id of the book being updated, excluded from ISBN uniqueness
        existing_books: books already stored
        current_year: upper bound for publication_year, defaults to this year

    Returns:
        ErrorMap, or None when valid
    """
    errors: ErrorMap = {}
    books = list(existing_books)
    year = current_year or date.today().year

    _check_required_text(errors, data, "title", is_update)
    _check_required_text(errors, data, "author", is_update)

    _check_isbn(errors, data, "isbn_10", ISBN_10_PATTERN, 10, books, current_id)
    _check_isbn(errors, data, "isbn_13", ISBN_13_PATTERN, 13, books, current_id)

    if "publication_year" in data:
        publication_year = data["publication_year"]
        if not _is_int(publication_year) or not MIN_PUBLICATION_YEAR <= publication_year <= year:
            _add(errors, "publication_year", f"must be an integer between {MIN_PUBLICATION_YEAR} and {year}")

    if "page_count" in data:
        page_count = data["page_count"]
        if not _is_int(page_count) or page_count <= 0:
            _add(errors, "page_count", "must be a positive integer")

    if "status" in data and data["status"] not in ReadingStatus.values():
        _add(errors, "status", f"must be one of: {', '.join(ReadingStatus.values())}")

    rating = data.get("rating")
    if rating is not None:
        if not _is_int(rating) or not MIN_RATING <= rating <= MAX_RATING:
            _add(errors, "rating", f"must be an integer between {MIN_RATING} and {MAX_RATING}")

    book_type = data.get("book_type")
    if book_type is not None and book_type not in BookType.values():
        _add(errors, "book_type", f"must be one of: {', '.join(BookType.values())}")

    series_id = data.get("series_id")
    if series_id is not None and not _is_int(series_id):
        _add(errors, "series_id", "must be an integer")

    for field in OPTIONAL_TEXT_FIELDS:
        value = data.get(field)
        if value is not None and not isinstance(value, str):
            _add(errors, field, "must be a string")

    if "date_added" in data and data["date_added"] is None:
        _add(errors, "date_added", BLANK)
    for field in DATE_FIELDS:
        value = data.get(field)
        if value is None:
            continue
        try:
            parse_timestamp(value)
        except (TypeError, ValueError):
            _add(errors, field, "must be a valid ISO-8601 date")

    stored = next((b for b in books if b.id == current_id), None) if is_update else None
    started = _resolve_date(data, "date_started", stored)
    finished = _resolve_date(data, "date_finished", stored)
    if started and finished and started > finished:
        _add(errors, "date_started", "must be before or equal to date_finished")

    return errors or None


def validate_series(data: Mapping[str, Any], is_update: bool = False) -> Optional[ErrorMap]:
    """Validate a series payload, returns ErrorMap or None"""
    errors: ErrorMap = {}

    _check_required_text(errors, data, "name", is_update)

    description = data.get("description")
    if description is not None:
        if not isinstance(description, str):
            _add(errors, "description", "must be a string")
        elif len(description) > MAX_DESCRIPTION_LENGTH:
            _add(errors, "description", f"must be {MAX_DESCRIPTION_LENGTH} characters or less")

    return errors or None
