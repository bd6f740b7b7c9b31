# pylint: skip-file
# ruff: noqa
"""
Alembic environment for the Chatterbox schema.

alembic.ini carries no URL: settings.DATABASE_URL is injected below, so
`alembic upgrade head` migrates whatever database the app is configured
for (asyncpg in production, aiosqlite locally).

    alembic upgrade head               # online, through an async engine
    alembic upgrade head --sql > x.sql # offline, emits SQL only
"""

import asyncio
from logging.config import fileConfig

from sqlalchemy import pool
from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import async_engine_from_config

from alembic import context

from chatterbox.config.settings import settings
from chatterbox.shared.models.base import Base

# Importing the models fills Base.metadata for autogenerate.
from chatterbox.shared.models import Message, Passport, User  # noqa: F401

config = context.config
config.set_main_option("sqlalchemy.url", settings.DATABASE_URL)

if config.config_file_name is not None:
    fileConfig(config.config_file_name, disable_existing_loggers=False)

target_metadata = Base.metadata


def _configure(**kwargs) -> None:
    context.configure(target_metadata=target_metadata, compare_type=True, **kwargs)
    with context.begin_transaction():
        context.run_migrations()


def run_offline() -> None:
    _configure(
        url=config.get_main_option("sqlalchemy.url"),
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )


def _run_on(connection: Connection) -> None:
    # SQLite cannot ALTER most columns in place
    _configure(
        connection=connection,
        render_as_batch=connection.dialect.name == "sqlite",
    )


async def run_online() -> None:
    engine = async_engine_from_config(
        config.get_section(config.config_ini_section, {}),
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )
    try:
        async with engine.connect() as connection:
            await connection.run_sync(_run_on)
    finally:
        await engine.dispose()


if context.is_offline_mode():
    run_offline()
else:
    asyncio.run(run_online())
