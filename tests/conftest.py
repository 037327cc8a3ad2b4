"""
Pytest configuration and shared fixtures.
"""

import pytest
from fastapi.testclient import TestClient

from books_api.config import APIConfig
from books_api.main import create_app
from books_api.store import BookStore


@pytest.fixture
def api_config():
    """Create API configuration for testing."""
    return APIConfig(debug=False, log_level="DEBUG", log_format="console")


@pytest.fixture
def store():
    """Create a freshly seeded book store."""
    return BookStore()


@pytest.fixture
def empty_store():
    """Create a book store without seed data."""
    return BookStore(seed=())


@pytest.fixture
def app(store, api_config):
    """Create an application bound to the test store."""
    return create_app(store=store, api_config=api_config)


@pytest.fixture
def client(app):
    """Create test client."""
    return TestClient(app)


@pytest.fixture
def seed_books():
    """Books every fresh store starts with."""
    return [
        {"id": 1, "title": "The Great Gatsby", "author": "F. Scott Fitzgerald"},
        {"id": 2, "title": "To Kill a Mockingbird", "author": "Harper Lee"},
    ]
