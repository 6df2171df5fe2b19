from datetime import date

import pytest
from aiohttp.test_utils import TestClient
from faker import Faker

from autolink.app import build_app
from autolink.db import create_engine, create_sessions, create_tables
from autolink.service import ReportService
from autolink.store import MemoryRentalProvider, RentalProvider

pytest_plugins = 'aiohttp.pytest_plugin'

fake = Faker()

CATEGORIES = ["SUV", "Sedan", "Hatch", "Pickup", "Van"]


class FailingRentalProvider(RentalProvider):
    """A provider whose backing service is unavailable."""

    async def get_all_rentals(self):
        raise ConnectionError("Rental service unavailable.")

    async def get_total_vehicles(self):
        raise ConnectionError("Rental service unavailable.")


class UncountableFleetProvider(MemoryRentalProvider):
    """A provider that lists its rentals but cannot count its fleet."""

    async def get_total_vehicles(self):
        raise ConnectionError("Vehicle catalog unavailable.")


@pytest.fixture
def provider() -> MemoryRentalProvider:
    return MemoryRentalProvider()


@pytest.fixture
def failing_provider() -> RentalProvider:
    return FailingRentalProvider()


@pytest.fixture
def uncountable_provider() -> RentalProvider:
    return UncountableFleetProvider()


@pytest.fixture
def report_service(provider) -> ReportService:
    return ReportService(provider)


@pytest.fixture
def random_vehicle_factory(provider):
    def create_vehicle(category=None, model=None):
        return provider.add_vehicle(
            category if category is not None else fake.random_element(CATEGORIES),
            model if model is not None else fake.unique.word().title()
        )

    return create_vehicle


@pytest.fixture
def random_rental_factory(provider, random_vehicle_factory):
    def create_rental(vehicle=None, price=None, begin_date: date = None):
        return provider.add_rental(
            vehicle if vehicle is not None else random_vehicle_factory(),
            price if price is not None else fake.pydecimal(left_digits=3, right_digits=2, positive=True),
            begin_date if begin_date is not None else fake.date_between(start_date="-2y", end_date="today")
        )

    return create_rental


@pytest.fixture
def random_fleet(random_vehicle_factory, random_rental_factory):
    """Creates ten vehicles with between zero and four rentals each."""
    vehicles = [random_vehicle_factory() for _ in range(10)]
    for vehicle in vehicles:
        for _ in range(fake.random_int(0, 4)):
            random_rental_factory(vehicle)
    return vehicles


@pytest.fixture
async def client(aiohttp_client, provider) -> TestClient:
    return await aiohttp_client(build_app(provider=provider))


@pytest.fixture
def database_url():
    return "sqlite+aiosqlite://"


@pytest.fixture
async def database(loop, database_url):
    """Creates an empty database, yielding its session factory."""
    engine = create_engine(database_url)
    await create_tables(engine)
    yield create_sessions(engine)
    await engine.dispose()
