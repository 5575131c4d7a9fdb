"""Request-scoped logging for the Orders API."""

from fastapi import Request

from orders.utils.logging import get_logger, request_context

logger = get_logger(__name__)


async def request_logging_middleware(request: Request, call_next):
    """Bind method and path to every log line emitted while serving a request."""
    with request_context(method=request.method, path=request.url.path):
        response = await call_next(request)
        logger.info("Request served", status_code=response.status_code)
    return response
