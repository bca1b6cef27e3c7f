import os
import sys
from pathlib import Path
from urllib.parse import quote_plus

from alembic import context
from dotenv import load_dotenv
from sqlalchemy import engine_from_config, pool
from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

# ensure backend/src is on sys.path so we can import the app metadata
backend_root = Path(__file__).resolve().parents[1]
src_path = str(backend_root / "src")
if src_path not in sys.path:
    sys.path.insert(0, src_path)

# existing environment variables win over .env
load_dotenv(dotenv_path=backend_root / ".env", override=False)

# Import all models so they are registered with the metadata
from notesapi.core.models import Attachment, BaseModel, Category, Note, User  # noqa: E402,F401

target_metadata = BaseModel.metadata


def _database_url() -> str | None:
    """Full URL from alembic.ini or DATABASE_URL, else built from DB_* variables."""
    cfg = context.config.get_section(context.config.config_ini_section) or {}
    url = cfg.get("sqlalchemy.url") or os.environ.get("DATABASE_URL")
    if url:
        return url

    pwd = os.environ.get("DB_PASSWORD")
    if not pwd:
        return None

    host = os.environ.get("DB_HOST", "localhost")
    port = os.environ.get("DB_PORT", "5432")
    db = os.environ.get("DB_NAME", "notes")
    user = os.environ.get("DB_USER", "notes")
    return f"postgresql+asyncpg://{quote_plus(user)}:{quote_plus(pwd)}@{host}:{port}/{db}"


def do_run_migrations(connection: Connection) -> None:
    """Run migrations with a bound connection (sync)."""
    context.configure(connection=connection, target_metadata=target_metadata, compare_type=True)
    with context.begin_transaction():
        context.run_migrations()


async def run_async_migrations(url: str) -> None:
    """Run migrations for an async engine."""
    connectable: AsyncEngine = create_async_engine(url, poolclass=pool.NullPool)

    async with connectable.connect() as connection:
        await connection.run_sync(do_run_migrations)
    await connectable.dispose()


def run_migrations_online() -> None:
    url = _database_url()
    if not url:
        raise RuntimeError("No database URL available for Alembic (set DATABASE_URL or DB_* env vars)")

    # async drivers (asyncpg, aiosqlite)
    if "+asyncpg" in url or "+aiosqlite" in url:
        import asyncio

        asyncio.run(run_async_migrations(url))
        return

    connectable = engine_from_config(
        {"sqlalchemy.url": url},
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )
    with connectable.connect() as connection:
        do_run_migrations(connection)


def run_migrations_offline() -> None:
    url = _database_url()
    if not url:
        raise RuntimeError("No database URL available for Alembic offline mode")

    context.configure(
        url=url,
        target_metadata=target_metadata,
        literal_binds=True,
        compare_type=True,
    )
    with context.begin_transaction():
        context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
