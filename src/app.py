"""Orders FastAPI application.

Serves the orders domain synchronously over HTTP. Every request runs
inside the orders domain context.

Usage:
    uvicorn src.app:app --host 0.0.0.0 --port 8080 --reload
"""

import os

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# The domain is initialized at module level so uvicorn workers share it.
# PROTEAN_ENV selects the configuration overlay from orders/domain.toml.
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from orders.api.errors import register_error_handlers
from orders.api.middleware import request_logging_middleware
from orders.domain import orders

orders.init()


def _cors_origins() -> list[str]:
    """Allowed CORS origins from CORS_ORIGINS (comma-separated)."""
    raw = os.getenv("CORS_ORIGINS", "http://localhost:3000")
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(
    title="Orders API",
    description="E-commerce order management: create, read, update, delete and list orders per user",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)


@app.middleware("http")
async def domain_context_middleware(request: Request, call_next):
    """Push the orders domain context for each request."""
    with orders.domain_context():
        response = await call_next(request)
    return response


app.middleware("http")(request_logging_middleware)


# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------
from orders.api.routes import account_router, order_router  # noqa: E402

app.include_router(order_router)
app.include_router(account_router)


# ---------------------------------------------------------------------------
# Health / root
# ---------------------------------------------------------------------------
@app.get("/health")
async def health():
    return JSONResponse(content={"status": "ok", "domain": orders.name})
