"""
Reports
-------

Builds the sales report and fleet statistics out of the rentals
supplied by a :class:`~autolink.store.provider.RentalProvider`.

Responsibilities
================

- summing the revenue of all rentals
- counting rentals per vehicle category and per month
- ranking the most rented vehicle models
- calculating the fleet utilization rate

Groupings are emitted in the order their keys are first seen in the
provider's data, and the popularity ranking is a stable sort, so models
with equal counts keep that same order.
"""

from collections import Counter
from decimal import Decimal
from typing import Iterable, List, Sequence

from attr import dataclass

from autolink import logger
from autolink.store import RentalProvider
from autolink.store.models import Rental

POPULAR_VEHICLES_LIMIT = 5


class ConfigurationError(Exception):
    """Raised when the report service is composed without a provider."""


class EmptyFleetError(ZeroDivisionError):
    """Raised when the utilization rate is requested for a fleet with no vehicles."""

    def __init__(self, rental_count: int):
        super().__init__(f"Cannot calculate utilization of {rental_count} rentals over an empty fleet.")
        self.rental_count = rental_count


@dataclass(frozen=True)
class CategoryCount:
    category: str
    count: int


@dataclass(frozen=True)
class PeriodCount:
    month: int
    """The calendar month, from 1 to 12."""

    count: int


@dataclass(frozen=True)
class PopularVehicle:
    model: str
    rentals_count: int


@dataclass(frozen=True)
class SalesReport:
    total_revenue: Decimal
    rentals_by_category: List[CategoryCount]
    rentals_by_period: List[PeriodCount]


@dataclass(frozen=True)
class Statistics:
    popular_vehicles: List[PopularVehicle]
    utilization_rate: Decimal
    """The rentals as a percentage of the fleet size."""


def total_revenue(rentals: Iterable[Rental]) -> Decimal:
    return sum((rental.price for rental in rentals), Decimal(0))


def count_by_category(rentals: Iterable[Rental]) -> List[CategoryCount]:
    counts = Counter(rental.vehicle.category for rental in rentals)
    return [CategoryCount(category, count) for category, count in counts.items()]


def count_by_month(rentals: Iterable[Rental]) -> List[PeriodCount]:
    """Counts the rentals per calendar month, merging the same month across years."""
    counts = Counter(rental.begin_date.month for rental in rentals)
    return [PeriodCount(month, count) for month, count in counts.items()]


def popular_vehicles(rentals: Iterable[Rental], limit: int = POPULAR_VEHICLES_LIMIT) -> List[PopularVehicle]:
    """
    Ranks the vehicle models by how often they were rented.

    :param rentals: The rentals to rank.
    :param limit: The maximum number of models to return.
    :return: The most rented models first.
    """
    counts = Counter(rental.vehicle.model for rental in rentals)
    ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)
    return [PopularVehicle(model, count) for model, count in ranked[:limit]]


def utilization_rate(rental_count: int, total_vehicles: int) -> Decimal:
    """
    Gets the rentals as a percentage of the fleet size.

    :raises EmptyFleetError: If there are no vehicles in the fleet.
    """
    if total_vehicles == 0:
        raise EmptyFleetError(rental_count)

    return Decimal(rental_count) / Decimal(total_vehicles) * 100


class ReportService:
    """
    Computes the read-only reports. Holds no state apart from the provider,
    so a single instance is shared between all requests.
    """

    def __init__(self, provider: RentalProvider):
        if provider is None:
            raise ConfigurationError("A rental provider is required to build reports.")
        self._provider = provider

    async def get_sales_report(self) -> SalesReport:
        rentals = await self._provider.get_all_rentals()
        logger.debug("Building sales report from %s rentals", len(rentals))

        return SalesReport(
            total_revenue=total_revenue(rentals),
            rentals_by_category=count_by_category(rentals),
            rentals_by_period=count_by_month(rentals),
        )

    async def get_statistics(self) -> Statistics:
        """
        Gets the most popular vehicles and the utilization rate.

        :raises EmptyFleetError: If the provider reports no vehicles.
        """
        rentals: Sequence[Rental] = await self._provider.get_all_rentals()
        total_vehicles = await self._provider.get_total_vehicles()
        logger.debug("Building statistics from %s rentals over %s vehicles", len(rentals), total_vehicles)

        return Statistics(
            popular_vehicles=popular_vehicles(rentals),
            utilization_rate=utilization_rate(len(rentals), total_vehicles),
        )
