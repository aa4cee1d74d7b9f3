"""
Tests for the request logging middleware and log formatting
"""

import json
import logging

from blog.middleware.logging import REQUEST_ID_HEADER, RequestIdFilter, StructuredFormatter, get_request_id
from blog.config import settings


class TestStructuredFormatter:
    def test_formats_json_with_extras(self):
        record = logging.LogRecord("blog.test", logging.WARNING, __file__, 1, "hello %s", ("world",), None)
        record.request_id = "abc"
        record.status_code = 404

        payload = json.loads(StructuredFormatter().format(record))

        assert payload["message"] == "hello world"
        assert payload["level"] == "WARNING"
        assert payload["request_id"] == "abc"
        assert payload["status_code"] == 404
        assert "method" not in payload

    def test_request_id_filter_outside_request(self):
        record = logging.LogRecord("blog.test", logging.INFO, __file__, 1, "x", (), None)
        assert RequestIdFilter().filter(record)
        assert record.request_id == ""
        assert get_request_id() == ""


class TestRequestIdMiddleware:
    async def test_generates_request_id(self, client):
        response = await client.get(f"{settings.api_prefix}/categories")
        assert response.headers[REQUEST_ID_HEADER]

    async def test_echoes_incoming_request_id(self, client):
        response = await client.get(f"{settings.api_prefix}/categories", headers={REQUEST_ID_HEADER: "req-123"})
        assert response.headers[REQUEST_ID_HEADER] == "req-123"

    async def test_access_log(self, client, caplog):
        with caplog.at_level(logging.INFO, logger="blog.access"):
            await client.get(f"{settings.api_prefix}/categories")

        records = [r for r in caplog.records if r.name == "blog.access"]
        assert records
        assert records[0].status_code == 200
        assert records[0].path == f"{settings.api_prefix}/categories"


class TestHealth:
    async def test_health(self, client):
        response = await client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "ok", "version": settings.app_version}
