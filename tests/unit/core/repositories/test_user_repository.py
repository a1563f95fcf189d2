import uuid

import pytest
from sqlalchemy.exc import IntegrityError

from notekeeper.core.repositories.user_repository import UserRepository


@pytest.mark.asyncio
async def test_create_and_lookup(test_session):
    repo = UserRepository(test_session)
    user = await repo.create_user({"name": "Jane", "email": "jane@example.com", "password_hash": "h"})

    assert isinstance(user.id, uuid.UUID)
    assert (await repo.get_by_id(user.id)).email == "jane@example.com"
    assert (await repo.get_by_email("JANE@example.com")).id == user.id
    assert await repo.get_by_id(uuid.uuid4()) is None
    assert await repo.get_by_email("nobody@example.com") is None


@pytest.mark.asyncio
async def test_is_email_taken(test_session, test_user):
    repo = UserRepository(test_session)
    assert await repo.is_email_taken(test_user.email) is True
    assert await repo.is_email_taken(test_user.email.upper()) is True
    assert await repo.is_email_taken("free@example.com") is False


@pytest.mark.asyncio
async def test_duplicate_email_violates_unique_constraint(test_session, test_user):
    repo = UserRepository(test_session)
    with pytest.raises(IntegrityError):
        await repo.create_user({"name": "Copy", "email": test_user.email, "password_hash": "h"})
    await test_session.rollback()
