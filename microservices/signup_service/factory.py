"""
Signup Service Factory

Factory for creating signup service instances with proper dependency injection.
"""

import logging
from typing import Optional

from core.config import SignupConfig, get_settings
from core.mongo_client import MongoClientWrapper

from .page_resolver import PageResolver
from .signup_repository import SignupRepository
from .signup_service import SignupService

logger = logging.getLogger(__name__)


class SignupServiceFactory:
    """Factory for creating signup service components"""

    def __init__(self, config: Optional[SignupConfig] = None):
        self.config = config or get_settings()
        self._repository: Optional[SignupRepository] = None
        self._resolver: Optional[PageResolver] = None
        self._service: Optional[SignupService] = None

    async def initialize(self) -> None:
        """Initialize all components"""
        logger.info("Initializing Signup Service components...")

        db = MongoClientWrapper(
            service_name=self.config.service_name,
            url=self.config.infra.mongodb_url,
            database=self.config.infra.mongodb_database,
            timeout_ms=self.config.infra.mongodb_timeout_ms,
        )
        self._repository = SignupRepository(db)
        await self._repository.initialize()

        self._resolver = PageResolver(self._repository)
        self._service = SignupService(
            repository=self._repository,
            resolver=self._resolver,
        )

        logger.info("Signup Service components initialized")

    async def close(self) -> None:
        """Close all components"""
        logger.info("Closing Signup Service components...")

        if self._repository:
            await self._repository.close()

        logger.info("Signup Service components closed")

    @property
    def repository(self) -> SignupRepository:
        """Get signup repository"""
        if not self._repository:
            raise RuntimeError("Factory not initialized. Call initialize() first.")
        return self._repository

    @property
    def resolver(self) -> PageResolver:
        """Get page resolver"""
        if not self._resolver:
            raise RuntimeError("Factory not initialized. Call initialize() first.")
        return self._resolver

    @property
    def service(self) -> SignupService:
        """Get signup service"""
        if not self._service:
            raise RuntimeError("Factory not initialized. Call initialize() first.")
        return self._service


__all__ = [
    "SignupServiceFactory",
]
