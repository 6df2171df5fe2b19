"""
Report Views
---------------------------

Read-only views over the rental reports. Neither view
accepts parameters; both aggregate every rental known
to the configured provider.
"""

from autolink.serializer import returns, SalesReportSchema, StatisticsSchema
from autolink.views.base import BaseView


class SalesReportView(BaseView):
    url = "/relatorios/vendas"
    name = "sales_report"

    @returns(SalesReportSchema())
    async def get(self):
        """
        Gets the sales report, including the total revenue,
        rentals by category and rentals by period.
        """
        return await self.report_service.get_sales_report()


class StatisticsView(BaseView):
    url = "/relatorios/estatisticas"
    name = "statistics"

    @returns(StatisticsSchema())
    async def get(self):
        """
        Gets the five most rented vehicle models, and the
        rentals as a percentage of the fleet size.
        """
        return await self.report_service.get_statistics()
