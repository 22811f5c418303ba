"""Tests for LoggingTransport."""

import logging

import httpx
import pytest
from fakes import BASE_URL, json_handler

from deezerapi.infrastructure.integrations.context import Context
from deezerapi.infrastructure.integrations.deezer_client import with_request_logging
from deezerapi.infrastructure.integrations.logging_transport import LoggingTransport

LOGGER_NAME = "deezerapi.infrastructure.integrations.logging_transport"


class TestLoggingTransport:
    @pytest.mark.asyncio
    async def test_logs_successful_exchange(self, caplog: pytest.LogCaptureFixture) -> None:
        transport = LoggingTransport(httpx.MockTransport(json_handler("{}")))
        caplog.set_level(logging.INFO, logger=LOGGER_NAME)

        async with httpx.AsyncClient(transport=transport) as http:
            response = await http.get(BASE_URL + "album/1")

        assert response.status_code == 200
        [record] = [r for r in caplog.records if r.name == LOGGER_NAME]
        message = record.getMessage()
        assert "method=GET host=api.test error=None status_code=200" in message
        assert "took=" in message
        assert record.http_status == 200
        assert record.http_error is None

    @pytest.mark.asyncio
    async def test_logs_and_reraises_failure(self, caplog: pytest.LogCaptureFixture) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        transport = LoggingTransport(httpx.MockTransport(handler))
        caplog.set_level(logging.INFO, logger=LOGGER_NAME)

        async with httpx.AsyncClient(transport=transport) as http:
            with pytest.raises(httpx.ConnectError):
                await http.get(BASE_URL + "artist/27")

        [record] = [r for r in caplog.records if r.name == LOGGER_NAME]
        assert "error=connection refused status_code=0" in record.getMessage()
        assert record.http_status == 0

    @pytest.mark.asyncio
    async def test_does_not_alter_response(self) -> None:
        transport = LoggingTransport(
            httpx.MockTransport(json_handler('{"id": 3}', status_code=201))
        )

        async with httpx.AsyncClient(transport=transport) as http:
            response = await http.get(BASE_URL)

        assert response.status_code == 201
        assert response.json() == {"id": 3}

    @pytest.mark.asyncio
    async def test_custom_logger(self, mocker) -> None:
        log = mocker.Mock(spec=logging.Logger)
        transport = LoggingTransport(httpx.MockTransport(json_handler("{}")), log=log)

        async with httpx.AsyncClient(transport=transport) as http:
            await http.get(BASE_URL)

        log.info.assert_called_once()
        assert log.info.call_args.args[1] == "GET"

    @pytest.mark.asyncio
    async def test_aclose_closes_wrapped_transport(self, mocker) -> None:
        inner = mocker.AsyncMock(spec=httpx.AsyncBaseTransport)

        await LoggingTransport(inner).aclose()

        inner.aclose.assert_awaited_once()


class TestClientRequestLogging:
    @pytest.mark.asyncio
    async def test_client_option_logs_each_call(
        self, make_client, caplog: pytest.LogCaptureFixture
    ) -> None:
        client = make_client(json_handler('{"id": 44132881}'), with_request_logging())
        caplog.set_level(logging.INFO, logger=LOGGER_NAME)

        await client.albums.get(Context.background(), "44132881")
        await client.artists.get(Context.background(), "27")

        records = [r for r in caplog.records if r.name == LOGGER_NAME]
        assert len(records) == 2
        assert all(r.http_host == "api.test" for r in records)
