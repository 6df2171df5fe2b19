"""
The entry point for the CLI tool
"""

import uvloop
from aiohttp import web

from autolink import logger
from autolink.app import build_app
from autolink.config import database_url
from autolink.version import __version__, name


def run():
    """Runs the app on a uvloop event loop."""
    logger.info(f'Starting {name} %s!', __version__)
    web.run_app(build_app(database_url), loop=uvloop.new_event_loop())


if __name__ == '__main__':
    run()
