"""
.. autoclasstree:: autolink.serializer

The serializer package houses all the schemas for the output of the system.
The serializers are used to generate and validate any raw data (such as JSON)
going out of the system.
"""

from .fields import EnumField, Many
from .jsend import JSendSchema, JSendStatus
from .decorators import returns
from .reports import SalesReportSchema, StatisticsSchema
