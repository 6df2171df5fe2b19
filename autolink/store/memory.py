"""
Provides a simple in-memory implementation of the rental provider,
for development and testing purposes.
"""

from datetime import date
from decimal import Decimal
from typing import List, Union

from .models import Rental, Vehicle
from .provider import RentalProvider


class MemoryRentalProvider(RentalProvider):
    """
    Emulates a database by keeping the fleet and its rentals in memory.
    """

    def __init__(self):
        self.vehicles: List[Vehicle] = []
        self.rentals: List[Rental] = []

    def add_vehicle(self, category: str, model: str) -> Vehicle:
        vehicle = Vehicle(category, model)
        self.vehicles.append(vehicle)
        return vehicle

    def add_rental(self, vehicle: Vehicle, price: Union[Decimal, int, str], begin_date: date) -> Rental:
        """
        Records a rental of the given vehicle.

        :raises ValueError: If the vehicle is not part of this fleet.
        """
        if vehicle not in self.vehicles:
            raise ValueError(f"Vehicle {vehicle} is not part of the fleet.")

        rental = Rental(Decimal(price), begin_date, vehicle)
        self.rentals.append(rental)
        return rental

    async def get_all_rentals(self) -> List[Rental]:
        return list(self.rentals)

    async def get_total_vehicles(self) -> int:
        return len(self.vehicles)
