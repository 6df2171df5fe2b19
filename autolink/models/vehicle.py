"""
Vehicle
-------------------------

Represents a vehicle in the rental fleet. The category and model
are free-form labels maintained by the vehicle catalog.
"""

from typing import List

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base


class Vehicle(Base):
    __tablename__ = "vehicle"

    id: Mapped[int] = mapped_column(primary_key=True)
    category: Mapped[str] = mapped_column(String(64))
    model: Mapped[str] = mapped_column(String(128))

    rentals: Mapped[List["Rental"]] = relationship(back_populates="vehicle")

    def __str__(self):
        return f"[{self.category}] {self.model}"
