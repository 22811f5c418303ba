"""Tests for domain exceptions."""

import httpx
import pytest

from deezerapi.domain.exceptions import (
    APIError,
    ApplicationError,
    BodyReadError,
    ContextCancelledError,
    DeadlineExceededError,
    DecodeError,
    DeezerException,
    ErrorResponse,
    HTTPStatusError,
    MalformedURLError,
    TransportError,
)


@pytest.fixture
def response() -> httpx.Response:
    request = httpx.Request("GET", "https://api.deezer.com/album/0")
    return httpx.Response(200, content=b"{}", request=request)


class TestMessages:
    def test_malformed_url(self):
        error = MalformedURLError("\n", "invalid control character in URL")
        assert str(error) == "parse '\\n': invalid control character in URL"
        assert error.message == str(error)

    def test_context_errors(self):
        assert str(ContextCancelledError()) == "context canceled"
        assert str(DeadlineExceededError()) == "context deadline exceeded"

    def test_transport_error(self):
        request = httpx.Request("GET", "https://api.deezer.com/album/1")
        cause = httpx.ConnectError("refused")

        error = TransportError(request, cause)

        assert str(error) == "GET https://api.deezer.com/album/1: refused"
        assert error.cause is cause

    def test_body_read_error(self, response):
        error = BodyReadError(response, httpx.ReadError("reset"))
        assert str(error) == "GET https://api.deezer.com/album/0: 200 reading body: reset"


class TestErrorResponse:
    def test_str_with_message(self, response):
        error = ApplicationError(
            response,
            message="no data",
            api_error=APIError(type="DataException", message="no data", code=800),
        )

        assert str(error) == "GET https://api.deezer.com/album/0: 200 no data"
        assert error.status_code == 200
        assert error.api_error.code == 800

    def test_str_with_carrier(self, response):
        error = DecodeError(response, message="decoding Album", carrier=ValueError("bad"))
        assert str(error) == "GET https://api.deezer.com/album/0: 200 decoding Album bad"
        assert error.api_response is None

    def test_hierarchy(self, response):
        for cls in (HTTPStatusError, ApplicationError, DecodeError):
            error = cls(response)
            assert isinstance(error, ErrorResponse)
            assert isinstance(error, DeezerException)

    def test_api_error_ignores_unknown_keys(self):
        api_error = APIError.model_validate({"type": "QuotaException", "code": 4, "extra": 1})
        assert api_error == APIError(type="QuotaException", code=4)
