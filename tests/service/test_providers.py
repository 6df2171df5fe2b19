from datetime import date
from decimal import Decimal

import pytest

from autolink import models
from autolink.store import DatabaseRentalProvider, Rental, Vehicle


class TestMemoryRentalProvider:

    async def test_get_all_rentals(self, provider, random_vehicle_factory):
        """Assert that the provider hands out the rentals in the order they were added."""
        vehicle = random_vehicle_factory("SUV", "Compass")
        first = provider.add_rental(vehicle, "120.50", date(2024, 3, 1))
        second = provider.add_rental(vehicle, 80, date(2024, 3, 2))

        assert await provider.get_all_rentals() == [first, second]
        assert first.price == Decimal("120.50")

    async def test_get_total_vehicles(self, provider, random_vehicle_factory):
        for _ in range(3):
            random_vehicle_factory()
        assert await provider.get_total_vehicles() == 3

    async def test_rentals_are_a_copy(self, provider, random_rental_factory):
        """Assert that modifying the returned rentals does not modify the provider."""
        random_rental_factory()
        rentals = await provider.get_all_rentals()
        rentals.clear()
        assert len(await provider.get_all_rentals()) == 1

    def test_add_rental_unknown_vehicle(self, provider):
        """Assert that a rental can only be added for a vehicle in the fleet."""
        with pytest.raises(ValueError):
            provider.add_rental(Vehicle("SUV", "Compass"), 100, date(2024, 1, 1))


class TestDatabaseRentalProvider:

    async def test_get_all_rentals(self, database):
        """Assert that the rentals are read from the database as snapshots, with their vehicle."""
        async with database() as session:
            vehicle = models.Vehicle(category="SUV", model="Compass")
            session.add_all([
                models.Rental(vehicle=vehicle, price=Decimal("100.00"), begin_date=date(2024, 1, 10)),
                models.Rental(vehicle=vehicle, price=Decimal("200.00"), begin_date=date(2024, 2, 3)),
            ])
            await session.commit()

        rentals = await DatabaseRentalProvider(database).get_all_rentals()

        assert rentals == [
            Rental(Decimal("100.00"), date(2024, 1, 10), Vehicle("SUV", "Compass")),
            Rental(Decimal("200.00"), date(2024, 2, 3), Vehicle("SUV", "Compass")),
        ]

    async def test_get_total_vehicles(self, database):
        async with database() as session:
            session.add_all([
                models.Vehicle(category="SUV", model="Compass"),
                models.Vehicle(category="Sedan", model="Corolla"),
            ])
            await session.commit()

        assert await DatabaseRentalProvider(database).get_total_vehicles() == 2

    async def test_empty_database(self, database):
        provider = DatabaseRentalProvider(database)
        assert await provider.get_all_rentals() == []
        assert await provider.get_total_vehicles() == 0
