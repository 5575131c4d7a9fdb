"""HTTP error mapping for the Orders API.

Protean's handlers cover validation (400) and missing records (404).
Concurrent updates to the same order are detected through aggregate
versions; the losing write is answered with 409 so the client can reload
and resend.
"""

import structlog
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from protean.exceptions import ExpectedVersionError
from protean.integrations.fastapi import register_exception_handlers

logger = structlog.get_logger(__name__)


async def _version_conflict(request: Request, exc: ExpectedVersionError) -> JSONResponse:
    logger.warning("Concurrent update rejected", path=request.url.path, detail=str(exc))
    return JSONResponse(
        status_code=409,
        content={"error": {"_entity": ["Order was changed by another request, reload and retry"]}},
    )


def register_error_handlers(app: FastAPI) -> None:
    register_exception_handlers(app)
    app.add_exception_handler(ExpectedVersionError, _version_conflict)
