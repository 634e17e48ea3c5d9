"""
MongoDB database connection and operations using Motor (async driver).
"""

from datetime import datetime, timezone
from typing import Optional

from loguru import logger
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo import ASCENDING, DESCENDING, IndexModel

from .config import Settings, get_settings
from .models import Job, ProfileUpdate, User


class UserNotFoundError(LookupError):
    """Raised when a user record does not exist."""


class JobNotFoundError(LookupError):
    """Raised when a job record does not exist."""


class Database:
    """Async MongoDB database wrapper."""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        self._client: Optional[AsyncIOMotorClient] = None
        self._db: Optional[AsyncIOMotorDatabase] = None

    async def connect(self) -> None:
        """Establish database connection."""
        if self._client is not None:
            return

        logger.info(f"Connecting to MongoDB: {self.settings.mongodb_database}")
        self._client = AsyncIOMotorClient(self.settings.mongodb_uri)
        self._db = self._client[self.settings.mongodb_database]

        # Verify connection
        await self._client.admin.command("ping")
        logger.info("MongoDB connection established")

    async def disconnect(self) -> None:
        """Close database connection."""
        if self._client:
            self._client.close()
            self._client = None
            self._db = None
            logger.info("MongoDB connection closed")

    @property
    def db(self) -> AsyncIOMotorDatabase:
        """Get database instance."""
        if self._db is None:
            raise RuntimeError("Database not connected. Call connect() first.")
        return self._db

    # -------------------------------------------------------------------------
    # Users Collection
    # -------------------------------------------------------------------------

    async def get_user(self, user_id: str) -> User:
        """Get user by ID."""
        doc = await self.db.users.find_one({"_id": user_id}, {"password_hash": 0})
        if doc is None:
            raise UserNotFoundError(f"user not found: {user_id}")
        return User(id=str(doc.pop("_id")), **doc)

    async def update_user(self, user_id: str, update: ProfileUpdate) -> bool:
        """
        Apply a partial profile update.

        Returns:
            True if the user matched, False when the update was empty
        """
        fields = update.to_update_fields()
        if not fields:
            logger.debug(f"Empty profile update for user {user_id}, skipping")
            return False

        fields["updated_at"] = datetime.now(timezone.utc)
        result = await self.db.users.update_one({"_id": user_id}, {"$set": fields})
        if result.matched_count == 0:
            raise UserNotFoundError(f"user not found: {user_id}")
        return True

    # -------------------------------------------------------------------------
    # Jobs Collection
    # -------------------------------------------------------------------------

    async def get_job(self, job_id: str) -> Job:
        """Get job by ID."""
        doc = await self.db.jobs.find_one({"_id": job_id})
        if doc is None:
            raise JobNotFoundError(f"job not found: {job_id}")
        return Job(id=str(doc.pop("_id")), **doc)

    # -------------------------------------------------------------------------
    # Index Setup
    # -------------------------------------------------------------------------

    async def ensure_indexes(self) -> None:
        """Create database indexes."""
        await self.db.users.create_indexes(
            [IndexModel([("email", ASCENDING)], unique=True)]
        )
        await self.db.jobs.create_indexes(
            [
                IndexModel([("created_at", DESCENDING)]),
                IndexModel([("user_id", ASCENDING)]),
            ]
        )
        logger.info("Database indexes created")

