"""
Rental
---------------------------
"""

from datetime import date
from decimal import Decimal

from sqlalchemy import ForeignKey, Numeric
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base


class Rental(Base):
    __tablename__ = "rental"

    id: Mapped[int] = mapped_column(primary_key=True)
    vehicle_id: Mapped[int] = mapped_column(ForeignKey("vehicle.id"))
    vehicle: Mapped["Vehicle"] = relationship(back_populates="rentals")

    price: Mapped[Decimal] = mapped_column(Numeric(12, 2))
    """The price charged for the rental."""

    begin_date: Mapped[date]
