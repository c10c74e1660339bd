"""
Database initialization.

Creates all tables directly from the SQLModel metadata.  Production
databases are migrated with Alembic instead.
"""

from sqlmodel import SQLModel

from grind.core.logging_config import get_logger
from grind.db.session import engine

logger = get_logger(__name__)


def init_db() -> None:
    """Create every table registered in :mod:`grind.db.base`."""

    # Import all models so SQLModel.metadata has them
    import grind.db.base  # noqa: F401

    logger.info("Creating database tables")
    SQLModel.metadata.create_all(engine)
    logger.info("Tables created", extra={"ctx_tables": sorted(SQLModel.metadata.tables)})


if __name__ == "__main__":
    init_db()
