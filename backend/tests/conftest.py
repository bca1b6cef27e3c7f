"""Shared pytest fixtures configured to use SQLite in-memory for tests."""

import logging
import os
import tempfile
from uuid import uuid4

# Settings are read at import time: point logs and uploads at scratch dirs
# and tell the app lifespan to skip real DB init before importing the app.
os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="notesapi-logs-"))
os.environ.setdefault("STORAGE_DIR", tempfile.mkdtemp(prefix="notesapi-storage-"))
os.environ["NOTESAPI_SKIP_LIFESPAN_DB"] = "1"

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy import event  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from notesapi.config import Settings, get_settings  # noqa: E402
from notesapi.core import models  # noqa: E402,F401
from notesapi.core.models.base import BaseModel  # noqa: E402
from notesapi.core.models.user import User  # noqa: E402
from notesapi.database import get_db_session  # noqa: E402
from notesapi.main import app  # noqa: E402
from notesapi.security import TokenService, hash_password  # noqa: E402

# Silence extremely verbose DEBUG logs from aiosqlite to keep test output readable
logging.getLogger("aiosqlite").setLevel(logging.WARNING)


@pytest.fixture
def test_settings(tmp_path):
    """Settings for testing using SQLite in-memory DB and a temp storage dir."""
    return Settings(
        database_url="sqlite+aiosqlite:///:memory:",
        jwt_secret="test-secret-key",
        debug=True,
        storage_dir=str(tmp_path / "storage"),
        log_dir=str(tmp_path / "logs"),
    )


@pytest.fixture
def token_service(test_settings):
    return TokenService.from_settings(test_settings)


@pytest.fixture
async def test_engine(test_settings):
    """Fresh in-memory SQLite engine per test."""
    engine = create_async_engine(
        test_settings.database_url,
        echo=False,
        poolclass=StaticPool,  # keep the same memory DB across connections
        connect_args={"check_same_thread": False},
    )

    # SQLite only enforces ON DELETE CASCADE with this pragma
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
    """Database session bound to the per-test engine."""
    session_maker = async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)
    async with session_maker() as session:
        try:
            yield session
        finally:
            await session.rollback()


@pytest.fixture
def test_app(test_session, test_settings):
    """FastAPI app with the DB session and settings overridden."""

    async def _override_get_db():
        yield test_session

    app.dependency_overrides[get_db_session] = _override_get_db
    app.dependency_overrides[get_settings] = lambda: test_settings
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
async def async_client(test_app):
    """Async HTTP client talking to the app in-process."""
    async with AsyncClient(transport=ASGITransport(app=test_app), base_url="http://test") as ac:
        yield ac


@pytest.fixture
def test_user_data():
    """Sample user data for testing."""
    return {
        "email": f"user_{uuid4().hex[:8]}@example.com",
        "password": "secret1",
        "name": "Test User",
    }


@pytest.fixture
async def test_user(test_session, test_user_data):
    """Create a test user in the database."""
    user = User(
        email=test_user_data["email"],
        name=test_user_data["name"],
        password_hash=hash_password(test_user_data["password"]),
    )
    test_session.add(user)
    await test_session.commit()
    await test_session.refresh(user)
    return user


@pytest.fixture
def auth_headers(test_user, token_service):
    """Authorization header carrying a valid token for ``test_user``."""
    return {"Authorization": f"Bearer {token_service.issue(test_user.id)}"}


@pytest.fixture
async def other_user(test_session):
    user = User(email="other@example.com", name="Other", password_hash=hash_password("secret2"))
    test_session.add(user)
    await test_session.commit()
    await test_session.refresh(user)
    return user


@pytest.fixture
def other_auth_headers(other_user, token_service):
    return {"Authorization": f"Bearer {token_service.issue(other_user.id)}"}
