"""Integration tests for API error mapping and request-scoped logging."""

import pytest
import structlog
from fastapi import FastAPI
from fastapi.testclient import TestClient
from orders.api.errors import register_error_handlers
from orders.api.middleware import request_logging_middleware
from orders.utils.logging import request_context
from protean.exceptions import ExpectedVersionError


@pytest.fixture()
def client():
    app = FastAPI()
    register_error_handlers(app)
    app.middleware("http")(request_logging_middleware)

    @app.put("/conflict")
    async def conflict():
        raise ExpectedVersionError("Wrong expected version: 0")

    @app.get("/log-context")
    async def log_context():
        return structlog.contextvars.get_contextvars()

    return TestClient(app)


class TestVersionConflict:
    def test_returns_409(self, client):
        response = client.put("/conflict")
        assert response.status_code == 409
        assert "_entity" in response.json()["error"]


class TestRequestLogging:
    def test_request_values_are_bound_while_serving(self, client):
        response = client.get("/log-context")
        assert response.json() == {"method": "GET", "path": "/log-context"}

    def test_request_context_binds_and_clears(self):
        with request_context(order_id="ord-1"):
            assert structlog.contextvars.get_contextvars() == {"order_id": "ord-1"}
        assert structlog.contextvars.get_contextvars() == {}

    def test_request_context_drops_stale_values(self):
        structlog.contextvars.bind_contextvars(leftover="x")
        with request_context(path="/orders"):
            assert structlog.contextvars.get_contextvars() == {"path": "/orders"}
