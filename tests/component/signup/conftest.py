"""
Component Test Fixtures for Signup Service

Provides fixtures for component testing with mocked dependencies.
Uses FastAPI TestClient for API testing.
"""

import asyncio
import os
import sys
from typing import Any, Dict, List, Optional

import pytest

# Add project root to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "../../.."))

from microservices.signup_service.protocols import DataStoreError
from tests.contracts.signup.data_contract import (
    Campaign,
    Page,
    ResolvedPageView,
    SubmissionResult,
    User,
    SignupTestDataFactory,
)


# ====================
# Mock Repository
# ====================


class MockSignupRepository:
    """Mock repository for component testing"""

    def __init__(self):
        self.campaigns: List[Campaign] = []
        self.pages: List[Page] = []
        self.users: Dict[str, User] = {}
        self.signups: Dict[tuple, Dict[str, Any]] = {}
        self.calls: List[tuple] = []
        self._should_raise: Optional[Exception] = None

    async def initialize(self):
        pass

    async def close(self):
        pass

    async def health_check(self) -> bool:
        return True

    def _record(self, *call):
        self.calls.append(call)
        if self._should_raise:
            raise self._should_raise

    async def find_campaign_by_domain(self, domain: str) -> Optional[Campaign]:
        self._record("find_campaign_by_domain", domain)
        for campaign in self.campaigns:
            if domain in campaign.domains:
                return campaign
        return None

    async def find_page(self, code: str, campaign_id: str) -> Optional[Page]:
        self._record("find_page", code, campaign_id)
        for page in self.pages:
            if page.code == code and page.campaign == campaign_id:
                return page
        return None

    async def find_user(self, user_id: str) -> Optional[User]:
        self._record("find_user", user_id)
        return self.users.get(user_id)

    async def upsert_signup(self, campaign_id: str, code: str, values: Dict[str, Any]) -> None:
        self._record("upsert_signup", campaign_id, code)
        key = (campaign_id, code, values["email"])
        self.signups.setdefault(key, {}).update(values)

    # Test helper methods

    def add_campaign(self, campaign: Campaign) -> Campaign:
        self.campaigns.append(campaign)
        return campaign

    def add_user(self, user: User) -> User:
        self.users[user.id] = user
        return user

    def add_page(self, page: Page) -> Page:
        self.pages.append(page)
        return page

    def set_error(self, error: Exception):
        self._should_raise = error

    def call_names(self) -> List[str]:
        return [call[0] for call in self.calls]


# ====================
# Mock Submitter
# ====================


class MockSignupSubmitter:
    """Scripted stand-in for SignupClient"""

    def __init__(self):
        self.submissions: List[Dict[str, Any]] = []
        self._results: List[SubmissionResult] = []
        self._should_raise: Optional[Exception] = None
        self.gate: Optional[asyncio.Event] = None

    async def submit_signup(self, values: Dict[str, Any], code: str) -> SubmissionResult:
        self.submissions.append({"values": dict(values), "code": code})
        if self.gate is not None:
            await self.gate.wait()
        if self._should_raise:
            raise self._should_raise
        if self._results:
            return self._results.pop(0)
        return SubmissionResult(success=True, status_code=200)

    def queue_result(self, result: SubmissionResult):
        self._results.append(result)

    def set_error(self, error: Exception):
        self._should_raise = error

    def hold(self) -> asyncio.Event:
        """Block submissions until the returned event is set"""
        self.gate = asyncio.Event()
        return self.gate


# ====================
# Fixtures
# ====================


@pytest.fixture
def factory():
    """Test data factory"""
    return SignupTestDataFactory


@pytest.fixture
def mock_repository():
    """Empty mock repository"""
    return MockSignupRepository()


@pytest.fixture
def seeded_repository(mock_repository, factory):
    """Repository with the Team Markey campaign, Ed, and Ed's page"""
    campaign = mock_repository.add_campaign(factory.make_campaign())
    user = mock_repository.add_user(factory.make_user(campaign=campaign.id))
    mock_repository.add_page(
        factory.make_page(campaign=campaign.id, created_by=user.id, code="ed")
    )
    return mock_repository


@pytest.fixture
def campaign(seeded_repository) -> Campaign:
    return seeded_repository.campaigns[0]


@pytest.fixture
def creator(seeded_repository) -> User:
    return next(iter(seeded_repository.users.values()))


@pytest.fixture
def resolved_view(factory) -> ResolvedPageView:
    return factory.make_resolved_view()


@pytest.fixture
def mock_submitter():
    return MockSignupSubmitter()


@pytest.fixture
def data_store_error():
    return DataStoreError("connection refused")
