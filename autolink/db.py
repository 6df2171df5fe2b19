"""
Database
--------

Creates the async engine and session factory used by the
:class:`~autolink.store.database.DatabaseRentalProvider`.
"""

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from autolink.models import Base


def create_engine(database_uri: str) -> AsyncEngine:
    """
    Creates an engine for the given url.

    In-memory sqlite databases only live as long as their connection,
    so they share a single one.
    """
    url = make_url(database_uri)
    if url.get_backend_name() == "sqlite" and url.database in (None, "", ":memory:"):
        return create_async_engine(url, poolclass=StaticPool)
    return create_async_engine(url)


def create_sessions(engine: AsyncEngine) -> async_sessionmaker:
    return async_sessionmaker(engine, expire_on_commit=False)


async def create_tables(engine: AsyncEngine):
    """Generates the schema for any table that does not yet exist."""
    async with engine.begin() as connection:
        await connection.run_sync(Base.metadata.create_all)
