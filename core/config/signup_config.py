#!/usr/bin/env python3
"""Signup service main configuration

Combines the infrastructure and logging sub-configs with the settings
of the signup funnel itself.
"""
import os
from dataclasses import dataclass, field

from .infra_config import InfraConfig
from .logging_config import LoggingConfig


def _int(val: str, default: int) -> int:
    try:
        return int(val) if val else default
    except ValueError:
        return default


def _float(val: str, default: float) -> float:
    try:
        return float(val) if val else default
    except ValueError:
        return default


@dataclass
class SignupConfig:
    """Signup funnel configuration"""
    service_name: str = "signup_service"
    service_port: int = 8250
    environment: str = "development"

    # Where step submissions are posted
    signup_api_url: str = "http://localhost:8250"
    signup_api_timeout: float = 30.0

    infra: InfraConfig = field(default_factory=InfraConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_env(cls) -> 'SignupConfig':
        """Load signup configuration from environment variables"""
        port = _int(os.getenv("SERVICE_PORT", "8250"), 8250)
        return cls(
            service_name=os.getenv("SERVICE_NAME", "signup_service"),
            service_port=port,
            environment=os.getenv("ENV") or os.getenv("ENVIRONMENT", "development"),
            signup_api_url=os.getenv("SIGNUP_API_URL", f"http://localhost:{port}"),
            signup_api_timeout=_float(os.getenv("SIGNUP_API_TIMEOUT", "30"), 30.0),
            infra=InfraConfig.from_env(),
            logging=LoggingConfig.from_env(),
        )
