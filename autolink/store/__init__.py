"""
Handles access to the rental data the reports are built from.
Currently has two implementations: in-memory and
SQLAlchemy-backed databases.
"""

from .database import DatabaseRentalProvider
from .memory import MemoryRentalProvider
from .models import Rental, Vehicle
from .provider import RentalProvider
