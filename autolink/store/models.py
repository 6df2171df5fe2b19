"""
Snapshots
---------

The immutable records handed out by a :class:`~autolink.store.provider.RentalProvider`.
The report service only ever reads these.
"""

from datetime import date
from decimal import Decimal

from attr import dataclass


@dataclass(frozen=True)
class Vehicle:
    category: str
    model: str

    def __str__(self):
        return f"[{self.category}] {self.model}"


@dataclass(frozen=True)
class Rental:
    price: Decimal
    """The price of the rental."""

    begin_date: date
    vehicle: Vehicle
