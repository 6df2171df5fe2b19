"""
Middleware
----------
"""

from http import HTTPStatus

from aiohttp import web
from aiohttp.abc import Request
from aiohttp.web_middlewares import middleware

from autolink import logger
from autolink.serializer import JSendStatus, JSendSchema
from autolink.service import EmptyFleetError

response_schema = JSendSchema()


@middleware
async def error_middleware(request: Request, handler):
    """
    Turns any unhandled exception raised while handling a request
    into a JSend error with a 500 status. HTTP exceptions raised
    by aiohttp itself are passed through untouched.
    """

    try:
        return await handler(request)
    except web.HTTPException:
        raise
    except EmptyFleetError as error:
        logger.error("Could not handle %s %s: %s", request.method, request.rel_url, error)
        message = "The fleet has no vehicles, so the utilization rate is undefined."
    except Exception:
        logger.exception("Unhandled error on %s %s", request.method, request.rel_url)
        message = "An internal error occurred while building the report."

    return web.json_response(response_schema.dump({
        "status": JSendStatus.ERROR,
        "message": message,
    }), status=HTTPStatus.INTERNAL_SERVER_ERROR)
