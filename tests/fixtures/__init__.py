"""
Test fixtures package
"""
from .sample_data import (
    BASE_TIME,
    SAMPLE_BOOKS,
    SAMPLE_SERIES,
    OPEN_LIBRARY_SEARCH_RESPONSE,
    SteppingClock,
)

__all__ = [
    "BASE_TIME",
    "SAMPLE_BOOKS",
    "SAMPLE_SERIES",
    "OPEN_LIBRARY_SEARCH_RESPONSE",
    "SteppingClock",
]
