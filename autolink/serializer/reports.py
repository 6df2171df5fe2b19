"""
Report Serializers
------------------

Defines the serializers for the sales report and fleet statistics.
Keys are exposed in camelCase to match the rest of the rental API.
"""

from marshmallow import Schema
from marshmallow.fields import Float, Integer, String
from marshmallow.validate import Length, Range

from autolink.service.reports import POPULAR_VEHICLES_LIMIT
from .fields import Many


class CategoryCountSchema(Schema):
    category = String(required=True)
    count = Integer(required=True)


class PeriodCountSchema(Schema):
    month = Integer(required=True, validate=Range(1, 12))
    count = Integer(required=True)


class SalesReportSchema(Schema):
    """The schema corresponding to the :class:`~autolink.service.reports.SalesReport`."""

    total_revenue = Float(required=True, data_key="totalRevenue")
    rentals_by_category = Many(CategoryCountSchema(), required=True, data_key="rentalsByCategory")
    rentals_by_period = Many(PeriodCountSchema(), required=True, data_key="rentalsByPeriod")


class PopularVehicleSchema(Schema):
    model = String(required=True)
    rentals_count = Integer(required=True, data_key="rentalsCount")


class StatisticsSchema(Schema):
    """The schema corresponding to the :class:`~autolink.service.reports.Statistics`."""

    popular_vehicles = Many(
        PopularVehicleSchema(), required=True, data_key="popularVehicles",
        validate=Length(max=POPULAR_VEHICLES_LIMIT)
    )
    utilization_rate = Float(required=True, data_key="utilizationRate")
