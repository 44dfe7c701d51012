"""
Signup Service Data Repository

Data access layer - MongoDB (Async)
"""

import logging
import time
from typing import Any, Dict, Optional

from bson import ObjectId
from bson.errors import InvalidId
from pymongo.errors import PyMongoError

from core.mongo_client import MongoClientWrapper, get_mongo_client
from .models import Campaign, Page, User
from .protocols import DataStoreError

logger = logging.getLogger(__name__)

# Page resolution reads only the creator's first name
CREATOR_PROJECTION = {"_id": 1, "firstName": 1}


def _now_ms() -> int:
    return int(time.time() * 1000)


class SignupRepository:
    """Signup service data repository - MongoDB (Async)"""

    def __init__(self, db: Optional[MongoClientWrapper] = None):
        self.db = db or get_mongo_client("signup_service")

        # Collection names
        self.campaigns_collection = "campaigns"
        self.pages_collection = "pages"
        self.users_collection = "users"
        self.signups_collection = "signups"

    async def initialize(self):
        """Initialize database connection"""
        logger.info("Signup repository initialized with MongoDB")

    async def close(self):
        """Close database connection"""
        await self.db.close()
        logger.info("Signup repository database connection closed")

    async def health_check(self) -> bool:
        """Check repository health"""
        return await self.db.health_check()

    # ====================
    # Read path
    # ====================

    async def find_campaign_by_domain(self, domain: str) -> Optional[Campaign]:
        """Get the campaign whose domains include ``domain``"""
        try:
            document = await self.db.collection(self.campaigns_collection).find_one(
                {"domains": domain}
            )
        except PyMongoError as e:
            logger.error(f"Error finding campaign for domain {domain}: {e}")
            raise DataStoreError(f"Failed to load campaign for {domain}") from e
        return Campaign.from_document(document)

    async def find_page(self, code: str, campaign_id: str) -> Optional[Page]:
        """Get page by (normalized code, campaign id)"""
        try:
            document = await self.db.collection(self.pages_collection).find_one(
                {"code": code, "campaign": campaign_id}
            )
        except PyMongoError as e:
            logger.error(f"Error finding page {code} in campaign {campaign_id}: {e}")
            raise DataStoreError(f"Failed to load page {code}") from e
        return Page.from_document(document)

    async def find_user(self, user_id: str) -> Optional[User]:
        """Get a page creator by ID; an unparseable ID matches no user"""
        try:
            object_id = ObjectId(user_id)
        except (InvalidId, TypeError):
            logger.warning(f"Invalid user id: {user_id!r}")
            return None

        try:
            document = await self.db.collection(self.users_collection).find_one(
                {"_id": object_id}, CREATOR_PROJECTION
            )
        except PyMongoError as e:
            logger.error(f"Error finding user {user_id}: {e}")
            raise DataStoreError(f"Failed to load user {user_id}") from e
        return User.from_document(document)

    # ====================
    # Write path
    # ====================

    async def upsert_signup(
        self, campaign_id: str, code: str, values: Dict[str, Any]
    ) -> None:
        """Merge submitted values into the signup keyed by (campaign, code, email)"""
        email = values["email"]
        now = _now_ms()
        fields = {k: v for k, v in values.items() if k != "email"}

        try:
            await self.db.collection(self.signups_collection).update_one(
                {"campaign": campaign_id, "page": code, "email": email},
                {
                    "$set": {**fields, "lastUpdatedAt": now},
                    "$setOnInsert": {"createdAt": now},
                },
                upsert=True,
            )
        except PyMongoError as e:
            logger.error(f"Error saving signup for page {code}: {e}")
            raise DataStoreError(f"Failed to save signup for page {code}") from e
