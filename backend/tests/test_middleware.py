"""
Notes API — Request ID & Logging Middleware Tests
===================================================

What we test:
    ✅ Client X-Request-ID is echoed back
    ✅ A short ID is generated when the client sends none
    ✅ Preflight responses carry the request ID too
    ✅ Access log level follows the response status
    ✅ Preflight lines are tagged
    ✅ /health is not logged
"""

import logging

import pytest

ACCESS_LOGGER = "notes_api.access"


def access_records(caplog):
    return [r for r in caplog.records if r.name == ACCESS_LOGGER]


class TestRequestID:

    @pytest.mark.asyncio
    async def test_client_id_is_echoed(self, test_client):
        response = await test_client.get("/", headers={"X-Request-ID": "abc-123"})
        assert response.headers["x-request-id"] == "abc-123"

    @pytest.mark.asyncio
    async def test_id_is_generated(self, test_client):
        first = await test_client.get("/")
        second = await test_client.get("/")
        assert len(first.headers["x-request-id"]) == 8
        assert first.headers["x-request-id"] != second.headers["x-request-id"]

    @pytest.mark.asyncio
    async def test_preflight_carries_id(self, test_client):
        response = await test_client.options("/notes", headers={"X-Request-ID": "pre-1"})
        assert response.headers["x-request-id"] == "pre-1"


class TestRequestLogging:

    @pytest.mark.asyncio
    async def test_success_logged_at_info(self, test_client, caplog):
        caplog.set_level(logging.INFO, logger=ACCESS_LOGGER)
        await test_client.post("/notes", headers={"X-Request-ID": "log-1"})

        records = access_records(caplog)
        assert len(records) == 1
        record = records[0]
        assert record.levelno == logging.INFO
        assert record.method == "POST"
        assert record.path == "/notes"
        assert record.status == 200
        assert record.request_id == "log-1"
        assert "POST /notes 200" in record.getMessage()
        assert record.preflight is False
        assert "(preflight)" not in record.getMessage()

    @pytest.mark.asyncio
    async def test_client_error_logged_at_warning(self, test_client, caplog):
        caplog.set_level(logging.INFO, logger=ACCESS_LOGGER)
        await test_client.get("/missing")

        records = access_records(caplog)
        assert [r.levelno for r in records] == [logging.WARNING]
        assert records[0].status == 404

    @pytest.mark.asyncio
    async def test_preflight_logged(self, test_client, caplog):
        caplog.set_level(logging.INFO, logger=ACCESS_LOGGER)
        await test_client.options("/notes")

        records = access_records(caplog)
        assert len(records) == 1
        assert records[0].method == "OPTIONS"
        assert records[0].status == 200
        assert records[0].preflight is True
        assert "(preflight)" in records[0].getMessage()

    @pytest.mark.asyncio
    async def test_health_not_logged(self, test_client, caplog):
        caplog.set_level(logging.INFO, logger=ACCESS_LOGGER)
        await test_client.get("/health")
        assert access_records(caplog) == []
