"""
Decorators
----------

This module defines a decorator that reduces the boilerplate
when handling JSON output. It is used on the routes of the
system to gracefully serialize the data coming out of the app.

.. note:: Annotating a route with ``@returns(None)`` is purely
    for clarity and has no effect.
"""

from functools import wraps
from http import HTTPStatus
from typing import Optional

from aiohttp import web
from aiohttp.web_urldispatcher import View
from marshmallow import Schema, ValidationError

from autolink import logger
from autolink.serializer.jsend import JSendSchema, JSendStatus


def returns(schema: Optional[Schema] = None, return_code: HTTPStatus = HTTPStatus.OK):
    """
    A decorator that dumps the data returned from the
    route through the given :class:`~marshmallow.Schema`.

    As long as this decorator is applied to the route,
    it is possible to return plain python objects.

    .. code:: python

        @returns(SalesReportSchema())
        async def get(self):
            return await self.report_service.get_sales_report()

    :param schema: The schema that the output data must conform to
    :param return_code: The code to return
    """

    # if no schema is defined, pass through
    if schema is None:
        return lambda x: x

    if not isinstance(schema, Schema):
        raise TypeError(f"Expected a marshmallow schema, got {type(schema)} instead.")

    def decorator(original_function):

        @wraps(original_function)
        async def new_func(self: View, **kwargs):
            response_data = await original_function(self, **kwargs)

            try:
                return web.json_response(schema.dump(response_data), status=return_code)
            except (ValidationError, KeyError) as err:
                logger.error("Could not serialize response for %s: %s", self.request.rel_url, err)
                response_schema = JSendSchema()
                response_data = response_schema.dump({
                    "status": JSendStatus.ERROR,
                    "data": err.messages if isinstance(err, ValidationError) else {"errors": err.args},
                    "message": "We tried to send you data back, but it came out wrong.",
                })
                return web.json_response(response_data, status=HTTPStatus.INTERNAL_SERVER_ERROR)

        return new_func

    return decorator
