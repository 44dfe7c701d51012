"""
Component Test Layer Configuration

Structure:
    tests/component/
    ├── signup/      Signup service components
    └── mocks/       Mock implementations

Usage:
    pytest tests/component -v
    pytest tests/component/signup -v
"""
import os
import sys

import pytest

# Set testing environment BEFORE any imports
os.environ["ENV"] = "testing"
os.environ["ENVIRONMENT"] = "testing"

# Add project root
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

from tests.component.mocks import (
    MockHttpTransport,
    MockMongoDatabase,
)


# =============================================================================
# Pytest Configuration
# =============================================================================

def pytest_configure(config):
    """Configure custom markers"""
    config.addinivalue_line(
        "markers", "component: marks tests as component tests"
    )


# =============================================================================
# Database Mocks
# =============================================================================

@pytest.fixture
def mock_db() -> MockMongoDatabase:
    """Mock MongoDB client"""
    return MockMongoDatabase()


# =============================================================================
# HTTP Mocks
# =============================================================================

@pytest.fixture
def mock_http() -> MockHttpTransport:
    """Scripted HTTP transport"""
    return MockHttpTransport()
