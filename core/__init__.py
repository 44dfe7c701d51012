#!/usr/bin/env python3
"""
Core Module for the Signup Funnel

Shared infrastructure components used by the signup service.

COMPONENTS:
    - config/: Dataclass configuration loaded from environment files
    - mongo_client.py: Async MongoDB client wrapper

USAGE:
    from core.config import get_settings
    from core.mongo_client import get_mongo_client

    settings = get_settings()
    db = get_mongo_client("signup_service")
"""

__version__ = "1.0.0"
