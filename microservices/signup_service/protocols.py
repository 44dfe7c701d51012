"""
Signup Service Protocols

Defines interfaces for dependency injection and testing.
Following the protocol-based architecture pattern.
"""

from typing import Any, Dict, Optional, Protocol

from .models import (
    Campaign,
    Page,
    PageResolution,
    SubmissionResult,
    User,
)


# ====================
# Repository Protocol
# ====================


class SignupRepositoryProtocol(Protocol):
    """Protocol for signup data repository"""

    async def initialize(self) -> None:
        """Initialize repository connection"""
        ...

    async def close(self) -> None:
        """Close repository connection"""
        ...

    async def health_check(self) -> bool:
        """Check repository health"""
        ...

    async def find_campaign_by_domain(self, domain: str) -> Optional[Campaign]:
        """Get the campaign serving a domain"""
        ...

    async def find_page(self, code: str, campaign_id: str) -> Optional[Page]:
        """Get page by (normalized code, campaign id)"""
        ...

    async def find_user(self, user_id: str) -> Optional[User]:
        """Get user by ID"""
        ...

    async def upsert_signup(
        self, campaign_id: str, code: str, values: Dict[str, Any]
    ) -> None:
        """Merge submitted values into the signup keyed by (campaign, code, email)"""
        ...


# ====================
# Resolver Protocol
# ====================


class PageResolverProtocol(Protocol):
    """Protocol for the page read path"""

    async def resolve(self, code: str, campaign: Campaign) -> PageResolution:
        """Resolve a route code to a page view"""
        ...


# ====================
# Client Protocols
# ====================


class SignupSubmitterProtocol(Protocol):
    """Protocol for posting signup steps to the API"""

    async def submit_signup(
        self, values: Dict[str, Any], code: str
    ) -> SubmissionResult:
        """Submit accumulated form values for a page"""
        ...


# ====================
# Custom Exceptions
# ====================


class SignupServiceError(Exception):
    """Base exception for signup service errors"""
    pass


class CampaignNotFoundError(SignupServiceError):
    """Raised when no campaign serves the requested domain"""

    def __init__(self, message: str, domain: Optional[str] = None):
        super().__init__(message)
        self.domain = domain


class PageNotFoundError(SignupServiceError):
    """Raised when no page matches a code within a campaign"""

    def __init__(self, message: str, code: Optional[str] = None):
        super().__init__(message)
        self.code = code


class CreatorNotFoundError(SignupServiceError):
    """Raised when a page references a user that does not exist"""

    def __init__(self, message: str, user_id: Optional[str] = None):
        super().__init__(message)
        self.user_id = user_id


class DataStoreError(SignupServiceError):
    """Raised when a data store operation fails"""
    pass


class FormConfigurationError(SignupServiceError):
    """Raised when step definitions are malformed"""
    pass


class InvalidFormStateError(SignupServiceError):
    """Raised when the form cannot accept an operation in its current state"""

    def __init__(self, message: str, current_state: Optional[Any] = None):
        super().__init__(message)
        self.current_state = current_state


class SubmissionInFlightError(InvalidFormStateError):
    """Raised when a step is submitted while its previous submission is outstanding"""
    pass


class SubmissionError(SignupServiceError):
    """Raised by step handlers when a submission fails"""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


__all__ = [
    "SignupRepositoryProtocol",
    "PageResolverProtocol",
    "SignupSubmitterProtocol",
    "SignupServiceError",
    "CampaignNotFoundError",
    "PageNotFoundError",
    "CreatorNotFoundError",
    "DataStoreError",
    "FormConfigurationError",
    "InvalidFormStateError",
    "SubmissionInFlightError",
    "SubmissionError",
]
