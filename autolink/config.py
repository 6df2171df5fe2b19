import os

server_mode = os.getenv("SERVER_MODE", "development")
"""The operational mode of the server."""

database_url = os.getenv("DATABASE_URL")
"""The SQLAlchemy async database url. When unset, rentals are kept in memory."""

sentry_dsn = os.getenv("SENTRY_DSN")
"""The sentry DSN used for exception tracking outside of development."""

api_root = "/api"
"""The base url for the api."""
