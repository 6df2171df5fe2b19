"""
This module hosts the abstract base class for all rental providers.
This class is used to define the "contract" that all storage backends
must adhere to in order to be used by the report service.
"""

from abc import ABC, abstractmethod
from typing import List

from .models import Rental


class RentalProvider(ABC):
    """The abstract provider interface."""

    @abstractmethod
    async def get_all_rentals(self) -> List[Rental]:
        """Gets every rental in the system."""

    @abstractmethod
    async def get_total_vehicles(self) -> int:
        """Gets the number of vehicles in the fleet."""
