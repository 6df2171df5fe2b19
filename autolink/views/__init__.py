"""
.. autoclasstree:: autolink.views

This package contains the server API for the rental reports.

API Conventions
---------------

Every route is a read-only GET returning JSON. Successful responses
are the serialized report itself, while system errors are returned
as JSend_ formatted errors with a 500 status.

.. _JSend: https://github.com/omniti-labs/jsend
"""

from aiohttp.abc import Application

from autolink import logger
from .reports import SalesReportView, StatisticsView

views = [
    SalesReportView, StatisticsView
]


def register_views(app: Application, base: str):
    """
    Registers all the API views onto the given router at a specific root url.

    :param app: The app to register the views to.
    :param base: The base URL.
    """
    for view in views:
        logger.info("Registered %s at %s", view.__name__, base + view.url)
        view.register_route(app, base)
