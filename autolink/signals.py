"""
Signals
-------

Defines the signals that the aiohttp server uses
to set up and tear down its database.

Each signal must accept an the ``app`` argument.
"""

from aiohttp.abc import Application

from autolink import logger
from autolink.db import create_tables


async def initialize_database(app: Application):
    """Generates the schema for our database."""
    logger.info("Initializing database tables")
    await create_tables(app['database_engine'])


async def close_database_connections(app: Application):
    """Closes the open database connections."""
    await app['database_engine'].dispose()


def register_signals(app, init_database=True):
    """Registers all the signals at the appropriate hooks."""
    if init_database:
        app.on_startup.append(initialize_database)
        app.on_cleanup.append(close_database_connections)
