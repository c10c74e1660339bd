"""
Alembic environment for the grind schema.

The URL always comes from ``grind.core.config.settings`` so migrations hit
the same database as the API.  SQLite runs in batch mode because it cannot
ALTER constraints in place.
"""

from logging.config import fileConfig

from alembic import context
from sqlalchemy import engine_from_config, pool
from sqlmodel import SQLModel

from grind.core.config import settings
# Registers every table on SQLModel.metadata
import grind.db.base  # noqa: F401

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

config.set_main_option("sqlalchemy.url", settings.database_url)


def _configure(**kwargs) -> None:
    context.configure(target_metadata=SQLModel.metadata, render_as_batch=settings.is_sqlite, compare_type=True,
                      **kwargs)


def run_migrations_offline() -> None:
    """Emit SQL to the script output without a live connection."""
    _configure(url=settings.database_url, literal_binds=True, dialect_opts={"paramstyle": "named"})
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    connectable = engine_from_config(config.get_section(config.config_ini_section, {}), prefix="sqlalchemy.",
                                     poolclass=pool.NullPool)
    with connectable.connect() as connection:
        _configure(connection=connection)
        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
