#!/usr/bin/env python3
"""Infrastructure services configuration

Document store endpoint used by the signup funnel.
"""
import os
from dataclasses import dataclass


def _int(val: str, default: int) -> int:
    try:
        return int(val) if val else default
    except ValueError:
        return default


@dataclass
class InfraConfig:
    """Infrastructure service endpoints"""

    # ===========================================
    # MongoDB (native driver - port 27017)
    # ===========================================
    mongodb_url: str = "mongodb://localhost:27017"
    mongodb_database: str = "signup"
    mongodb_timeout_ms: int = 5000

    @classmethod
    def from_env(cls) -> 'InfraConfig':
        """Load infrastructure config from environment"""
        return cls(
            mongodb_url=os.getenv("MONGODB_URL", "mongodb://localhost:27017"),
            mongodb_database=os.getenv("MONGODB_DATABASE", "signup"),
            mongodb_timeout_ms=_int(os.getenv("MONGODB_TIMEOUT_MS", "5000"), 5000),
        )
