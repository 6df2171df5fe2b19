"""
App
-----
"""

from typing import Optional

import sentry_sdk
from aiohttp import web
from sentry_sdk.integrations.aiohttp import AioHttpIntegration

from autolink import logger
from autolink.config import api_root, server_mode, sentry_dsn
from autolink.db import create_engine, create_sessions
from autolink.middleware import error_middleware
from autolink.service import ReportService
from autolink.signals import register_signals
from autolink.store import RentalProvider, DatabaseRentalProvider, MemoryRentalProvider
from autolink.version import __version__, name
from autolink.views import register_views


def build_app(db_uri: Optional[str] = None, provider: Optional[RentalProvider] = None):
    """
    Sets up the app.

    :param db_uri: The database to read rentals from. When missing, rentals are kept in memory.
    :param provider: Overrides the rental provider picked from the ``db_uri``.
    """
    app = web.Application(middlewares=[error_middleware])
    if db_uri is not None:
        app['database_engine'] = create_engine(db_uri)

    if provider is None:
        if db_uri is not None:
            provider = DatabaseRentalProvider(create_sessions(app['database_engine']))
        else:
            provider = MemoryRentalProvider()

    app['report_service'] = ReportService(provider)
    logger.info("Using %s for rental data", type(provider).__name__)

    # set up the database lifecycle
    register_signals(app, init_database=db_uri is not None)

    register_views(app, api_root)

    # set up sentry exception tracking
    if server_mode != "development" and sentry_dsn is not None:
        logger.info("Starting Sentry Logging")
        sentry_sdk.init(
            dsn=sentry_dsn,
            environment=server_mode,
            release=f"{name}@{__version__}",
            integrations=[AioHttpIntegration()],
        )

    return app
