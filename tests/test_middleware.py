"""
Recordbook — Middleware Tests
==============================

Test Strategy:
    ✅ Every response carries an X-Request-ID (generated or echoed)
    ✅ The request ID is stamped onto log records
    ✅ One access line per request naming action, slug, status and redirect
    ✅ Failures log at ERROR, health checks are not logged
"""

import logging

import pytest

from recordbook.middleware.access import RequestIDFilter, record_action, request_id_var


def _access_lines(caplog):
    return [r for r in caplog.records if r.name == "recordbook.access"]


class TestRequestID:

    @pytest.mark.asyncio
    async def test_generated_header(self, test_client):
        response = await test_client.get("/new/")
        assert len(response.headers["x-request-id"]) == 8

    @pytest.mark.asyncio
    async def test_client_request_id_is_echoed(self, test_client):
        response = await test_client.get("/new/", headers={"X-Request-ID": "abc123"})
        assert response.headers["x-request-id"] == "abc123"

    @pytest.mark.asyncio
    async def test_error_responses_carry_request_id(self, test_client):
        response = await test_client.get("/show/missing", headers={"X-Request-ID": "err-1"})
        assert response.status_code == 500
        assert response.headers["x-request-id"] == "err-1"

    def test_filter_stamps_current_id(self):
        record = logging.LogRecord("recordbook", logging.INFO, __file__, 1, "msg", None, None)
        token = request_id_var.set("f00d")
        try:
            assert RequestIDFilter().filter(record) is True
        finally:
            request_id_var.reset(token)
        assert record.request_id == "f00d"

    def test_filter_outside_request(self):
        record = logging.LogRecord("recordbook", logging.INFO, __file__, 1, "msg", None, None)
        RequestIDFilter().filter(record)
        assert record.request_id == "-"


class TestAccessLog:

    def test_record_action(self):
        assert record_action("/show/hello-world") == "show"
        assert record_action("/create/") == "create"
        assert record_action("/") == "index"
        assert record_action("/favicon.ico") == "index"

    @pytest.mark.asyncio
    async def test_show_line_names_slug(self, test_client, store, sample_record, caplog):
        await store.save(sample_record)
        caplog.set_level(logging.INFO, logger="recordbook.access")

        await test_client.get("/show/hello-world")

        lines = _access_lines(caplog)
        assert len(lines) == 1
        assert lines[0].levelno == logging.INFO
        assert lines[0].getMessage().startswith("GET /show/hello-world show slug=hello-world 200 ")

    @pytest.mark.asyncio
    async def test_create_line_names_redirect(self, test_client, caplog):
        caplog.set_level(logging.INFO, logger="recordbook.access")

        await test_client.post("/create/", data={"title": "Hello World!", "content": "body"})

        message = _access_lines(caplog)[0].getMessage()
        assert message.startswith("POST /create/ create 302 -> /show/hello-world ")

    @pytest.mark.asyncio
    async def test_failure_logs_error(self, test_client, caplog):
        caplog.set_level(logging.INFO, logger="recordbook.access")

        await test_client.get("/edit/ghost")

        lines = _access_lines(caplog)
        assert lines[0].levelno == logging.ERROR
        assert "edit slug=ghost 500" in lines[0].getMessage()

    @pytest.mark.asyncio
    async def test_health_is_quiet(self, test_client, caplog):
        caplog.set_level(logging.INFO, logger="recordbook.access")

        await test_client.get("/health")

        assert _access_lines(caplog) == []
