"""Tests for load test error-body parsing."""

import json

from loadtests.helpers.response import extract_error_detail


class _Response:
    def __init__(self, body=None, text=None):
        self._body = body
        self.text = text if text is not None else json.dumps(body)

    def json(self):
        if self._body is None:
            raise ValueError("not JSON")
        return self._body


class TestExtractErrorDetail:
    def test_domain_error_with_correlation_id(self):
        response = _Response({"error": {"user": ["User u-1 does not exist"]}, "correlation_id": "c-42"})
        assert extract_error_detail(response) == "user: User u-1 does not exist [correlation_id=c-42]"

    def test_domain_error_without_correlation_id(self):
        response = _Response({"error": {"status": ["bad value", "not allowed"]}})
        assert extract_error_detail(response) == "status: bad value; not allowed"

    def test_plain_string_error(self):
        assert extract_error_detail(_Response({"error": "Order not found"})) == "Order not found"

    def test_request_validation_error(self):
        response = _Response({"detail": [{"loc": ["body", "email"], "msg": "Field required"}]})
        assert extract_error_detail(response) == "email: Field required"

    def test_non_json_body(self):
        assert extract_error_detail(_Response(text="Internal Server Error")) == "Internal Server Error"

    def test_empty_body(self):
        assert extract_error_detail(_Response(text="")) == "(empty response body)"
