from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """The declarative base shared by all tables."""
