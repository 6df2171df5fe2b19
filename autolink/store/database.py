"""
Reads the rentals out of the database through the SQLAlchemy
models and hands them out as immutable snapshots.
"""

from typing import List

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import async_sessionmaker
from sqlalchemy.orm import selectinload

from autolink import models
from .models import Rental, Vehicle
from .provider import RentalProvider


class DatabaseRentalProvider(RentalProvider):

    def __init__(self, sessions: async_sessionmaker):
        self._sessions = sessions

    async def get_all_rentals(self) -> List[Rental]:
        query = select(models.Rental).options(selectinload(models.Rental.vehicle)).order_by(models.Rental.id)

        async with self._sessions() as session:
            rentals = (await session.scalars(query)).all()

        return [
            Rental(rental.price, rental.begin_date, Vehicle(rental.vehicle.category, rental.vehicle.model))
            for rental in rentals
        ]

    async def get_total_vehicles(self) -> int:
        async with self._sessions() as session:
            return await session.scalar(select(func.count()).select_from(models.Vehicle))
