"""
Tests for Database user/job helpers against a mocked Motor database.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from shared.database import Database, JobNotFoundError, UserNotFoundError
from shared.models import ProfileUpdate


@pytest.fixture
def db(settings) -> Database:
    database = Database(settings)
    database._db = MagicMock()
    return database


@pytest.mark.asyncio
async def test_update_user_sets_only_given_fields(db):
    db._db.users.update_one = AsyncMock(return_value=MagicMock(matched_count=1))

    assert await db.update_user("u1", ProfileUpdate(skills=["go"])) is True

    query, update = db._db.users.update_one.await_args.args
    assert query == {"_id": "u1"}
    assert update["$set"]["skills"] == ["go"]
    assert set(update["$set"]) == {"skills", "updated_at"}


@pytest.mark.asyncio
async def test_update_user_empty_update_is_noop(db):
    db._db.users.update_one = AsyncMock()

    assert await db.update_user("u1", ProfileUpdate()) is False
    db._db.users.update_one.assert_not_awaited()


@pytest.mark.asyncio
async def test_update_user_unknown_user(db):
    db._db.users.update_one = AsyncMock(return_value=MagicMock(matched_count=0))

    with pytest.raises(UserNotFoundError):
        await db.update_user("nobody", ProfileUpdate(bio="x"))


@pytest.mark.asyncio
async def test_get_user(db):
    db._db.users.find_one = AsyncMock(
        return_value={"_id": "u1", "name": "Ada", "email": "ada@example.com", "skills": ["go"]}
    )

    user = await db.get_user("u1")
    assert user.id == "u1"
    assert user.skills == ["go"]


@pytest.mark.asyncio
async def test_get_job_missing(db):
    db._db.jobs.find_one = AsyncMock(return_value=None)

    with pytest.raises(JobNotFoundError):
        await db.get_job("j404")


def test_db_requires_connect(settings):
    with pytest.raises(RuntimeError):
        Database(settings).db


@pytest.mark.asyncio
async def test_ensure_indexes(db):
    db._db.users.create_indexes = AsyncMock()
    db._db.jobs.create_indexes = AsyncMock()

    await db.ensure_indexes()

    (user_indexes,) = db._db.users.create_indexes.await_args.args
    assert user_indexes[0].document["unique"] is True
    db._db.jobs.create_indexes.assert_awaited_once()
