#!/usr/bin/env python3
"""Logging configuration"""
import logging
import os
from dataclasses import dataclass


@dataclass
class LoggingConfig:
    """Logging configuration"""
    log_level: str = "INFO"
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    # Service identity for logging
    service_name: str = "signup_service"
    environment: str = "development"

    @classmethod
    def from_env(cls) -> 'LoggingConfig':
        """Load logging config from environment variables"""
        env = os.getenv("ENV") or os.getenv("ENVIRONMENT", "development")
        return cls(
            log_level=os.getenv("LOG_LEVEL", "DEBUG" if env == "development" else "INFO"),
            log_format=os.getenv("LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s"),
            service_name=os.getenv("SERVICE_NAME", "signup_service"),
            environment=env,
        )

    @property
    def level(self) -> int:
        """Numeric level, falling back to INFO for unknown names"""
        value = logging.getLevelName(self.log_level.upper())
        return value if isinstance(value, int) else logging.INFO
