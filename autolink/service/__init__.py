"""
.. autoclasstree:: autolink.service

The service layer for the system. Acts as the internal API.
Each interface (the REST API, the CLI) should use the
service layer to implement their logic.
"""

from .reports import (
    ReportService, ConfigurationError, EmptyFleetError,
    SalesReport, Statistics, CategoryCount, PeriodCount, PopularVehicle
)
