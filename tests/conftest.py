"""
pytest configuration: shared fixtures and markers
"""
import copy
from typing import Generator
from unittest.mock import AsyncMock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from bookshelf.config import Settings
from bookshelf.database import Store
from bookshelf.main import create_app
from bookshelf.repositories.book_repository import BookRepository
from bookshelf.repositories.series_repository import SeriesRepository
from bookshelf.services.book_service import BookService
from bookshelf.services.open_library import OpenLibraryClient
from bookshelf.services.series_service import SeriesService
from tests.fixtures.sample_data import SAMPLE_BOOKS, SAMPLE_SERIES, SteppingClock


@pytest.fixture
def clock() -> SteppingClock:
    return SteppingClock()


@pytest.fixture
def store(clock) -> Store:
    """Empty, isolated store per test"""
    return Store(books=BookRepository(), series=SeriesRepository(), clock=clock)


@pytest.fixture
def book_service(store) -> BookService:
    return BookService(store.books, clock=store.clock)


@pytest.fixture
def series_service(store) -> SeriesService:
    return SeriesService(store.series, store.books, clock=store.clock)


@pytest.fixture
def test_settings() -> Settings:
    return Settings(SEED_SAMPLE_DATA=False)


@pytest.fixture
def mock_search_client() -> AsyncMock:
    return AsyncMock(spec=OpenLibraryClient)


@pytest.fixture
def app(test_settings, store, mock_search_client) -> FastAPI:
    return create_app(settings=test_settings, store=store, search_client=mock_search_client)


@pytest.fixture
def client(app) -> Generator[TestClient, None, None]:
    """FastAPI test client bound to an isolated store"""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def sample_book_data():
    return copy.deepcopy(SAMPLE_BOOKS[0])


@pytest.fixture
def sample_series_data():
    return copy.deepcopy(SAMPLE_SERIES[0])


def pytest_configure(config):
    """Register markers"""
    config.addinivalue_line("markers", "unit: unit tests")
    config.addinivalue_line("markers", "integration: integration tests")
    config.addinivalue_line("markers", "e2e: end-to-end tests")
