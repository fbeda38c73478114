import asyncio
import os
import sys
from logging.config import fileConfig

from alembic import context
from sqlalchemy import pool
from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import create_async_engine

# ───────────────────────────────────────────────
# 📁 Project root on sys.path (alembic runs from the repo root or alembic/)
# ───────────────────────────────────────────────
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from moviecatalog.db.base import Base  # users, movies, comments, to_watch_items
from moviecatalog.core.config import settings

config = context.config

# `alembic -x db_url=...` beats the configured DSN (one-off runs against another DB)
DB_URL = context.get_x_argument(as_dictionary=True).get("db_url") or settings.ASYNC_DATABASE_URL
config.set_main_option("sqlalchemy.url", DB_URL.replace("%", "%%"))

if config.config_file_name:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata


def _configure(**kwargs) -> None:
    context.configure(
        target_metadata=target_metadata,
        compare_type=True,
        # sqlite cannot ALTER constraints in place
        render_as_batch=DB_URL.startswith("sqlite"),
        **kwargs,
    )


# ───────────────────────────────────────────────
# 📴 Offline: emit SQL only
# ───────────────────────────────────────────────
def run_migrations_offline() -> None:
    _configure(url=DB_URL, literal_binds=True, dialect_opts={"paramstyle": "named"})
    with context.begin_transaction():
        context.run_migrations()


# ───────────────────────────────────────────────
# 🌐 Online: async engine, sync migration body
# ───────────────────────────────────────────────
def _migrate(connection: Connection) -> None:
    _configure(connection=connection)
    with context.begin_transaction():
        context.run_migrations()


async def run_migrations_online() -> None:
    engine = create_async_engine(DB_URL, poolclass=pool.NullPool)
    try:
        async with engine.connect() as connection:
            await connection.run_sync(_migrate)
    finally:
        await engine.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    asyncio.run(run_migrations_online())
