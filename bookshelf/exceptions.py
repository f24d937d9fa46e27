"""
Business exceptions
"""
from typing import Dict, List, Optional

ErrorMap = Dict[str, List[str]]


class BookshelfException(Exception):
    """Base exception"""
    pass


class RecordNotFoundError(BookshelfException):
    """Referenced record does not exist"""
    title = "Record not found"


class BookNotFoundError(RecordNotFoundError):
    """Book not found"""
    title = "Book not found"


class SeriesNotFoundError(RecordNotFoundError):
    """Series not found"""
    title = "Series not found"


class ValidationFailedError(BookshelfException):
    """Payload failed field validation"""

    def __init__(self, errors: ErrorMap):
        super().__init__(f"Validation failed: {', '.join(sorted(errors))}")
        self.errors = errors


class BadRequestError(ValidationFailedError):
    """Request is missing required input or is malformed"""
    pass


class UpstreamServiceError(BookshelfException):
    """External search provider failed or returned a non-success status"""

    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.status = status
