"""Shared pytest fixtures configured to use SQLite in-memory for tests."""

import logging
from uuid import uuid4

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from notekeeper.config import Settings
from notekeeper.core.models import BaseModel, Note, User
from notekeeper.database import get_db_session
from notekeeper.main import create_app
from notekeeper.security import PasswordHasher, TokenService

# Silence extremely verbose DEBUG logs from aiosqlite to keep test output readable
logging.getLogger("aiosqlite").setLevel(logging.WARNING)

TEST_PASSWORD = "TestPassword123!"


@pytest.fixture
def test_settings():
    """Settings for testing: SQLite in-memory DB, cheapest allowed bcrypt cost."""
    return Settings(
        _env_file=None,
        database_url="sqlite+aiosqlite:///:memory:",
        secret_key="test-secret-key-0123456789",
        debug=True,
        password_hash_rounds=10,
        create_tables_on_startup=False,
    )


@pytest.fixture
def hasher(test_settings):
    return PasswordHasher(test_settings.password_hash_rounds)


@pytest.fixture
def token_service(test_settings):
    return TokenService(test_settings)


@pytest.fixture
async def test_engine(test_settings):
    """Fresh in-memory database per test."""
    engine = create_async_engine(
        test_settings.database_url,
        echo=False,
        poolclass=StaticPool,  # keep the same memory DB across connections
        connect_args={"check_same_thread": False},
    )

    # SQLite only enforces ON DELETE CASCADE with foreign keys switched on
    @event.listens_for(engine.sync_engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record):  # noqa: ANN001
        cursor = dbapi_connection.cursor()
        try:
            cursor.execute("PRAGMA foreign_keys=ON")
        finally:
            cursor.close()

    async with engine.begin() as conn:
        await conn.run_sync(BaseModel.metadata.create_all)

    try:
        yield engine
    finally:
        await engine.dispose()


@pytest.fixture
async def test_session(test_engine):
    """Database session shared by fixtures and the app under test."""
    session_factory = async_sessionmaker(test_engine, expire_on_commit=False)
    async with session_factory() as session:
        try:
            yield session
        finally:
            await session.rollback()


@pytest.fixture
def test_app(test_settings, test_session):
    """App wired to the test session."""
    app = create_app(test_settings)

    async def _override_get_db():
        yield test_session

    app.dependency_overrides[get_db_session] = _override_get_db
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
async def async_client(test_app):
    """Async HTTP client talking to the app in-process."""
    async with AsyncClient(transport=ASGITransport(app=test_app), base_url="http://test") as ac:
        yield ac


async def _create_user(session, hasher, name: str) -> User:
    user = User(
        name=name,
        email=f"{name.lower()}_{uuid4().hex[:8]}@example.com",
        password_hash=hasher.hash(TEST_PASSWORD),
    )
    session.add(user)
    await session.commit()
    await session.refresh(user)
    return user


@pytest.fixture
async def test_user(test_session, hasher):
    """Create a test user in the database."""
    return await _create_user(test_session, hasher, "Alice")


@pytest.fixture
async def other_user(test_session, hasher):
    """A second user, used to prove owner isolation."""
    return await _create_user(test_session, hasher, "Bob")


@pytest.fixture
def auth_headers(test_user, token_service):
    """Authentication headers with a valid JWT for ``test_user``."""
    return {"Authorization": f"Bearer {token_service.issue(test_user.id)}"}


@pytest.fixture
def other_headers(other_user, token_service):
    return {"Authorization": f"Bearer {token_service.issue(other_user.id)}"}


@pytest.fixture
def make_note(test_session):
    """Factory inserting a note directly, optionally with a fixed creation time."""

    async def _make_note(owner, title="Test Note", content="This is a test note content",
                         created_at=None, is_favorite=False):
        note = Note(
            title=title,
            content=content,
            owner_id=owner.id,
            is_favorite=is_favorite,
        )
        if created_at is not None:
            note.created_at = created_at
            note.updated_at = created_at
        test_session.add(note)
        await test_session.commit()
        await test_session.refresh(note)
        return note

    return _make_note
