"""
Component Test Mocks

Shared mock implementations for component testing.
These mocks replace real I/O dependencies (database, HTTP).
"""

from .mongo_mock import MockMongoCollection, MockMongoDatabase
from .http_mock import MockHttpTransport

# Service-specific mocks should be in tests/component/{service}/conftest.py

__all__ = [
    'MockMongoCollection',
    'MockMongoDatabase',
    'MockHttpTransport',
]
