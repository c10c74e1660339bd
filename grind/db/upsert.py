"""
Dialect-aware INSERT for conflict-resolving writes.

Both supported backends (PostgreSQL in production, SQLite for local runs
and tests) implement ``INSERT ... ON CONFLICT``; the statement class has
to come from the matching dialect module.
"""

from sqlalchemy.dialects import postgresql, sqlite
from sqlmodel import Session


def dialect_insert(session: Session, model):
    """Return a dialect-specific ``Insert`` for ``model``'s table."""
    dialect = session.get_bind().dialect.name
    table = model.__table__
    if dialect == "postgresql":
        return postgresql.insert(table)
    if dialect == "sqlite":
        return sqlite.insert(table)
    raise NotImplementedError(f"ON CONFLICT writes are not supported on '{dialect}'")
