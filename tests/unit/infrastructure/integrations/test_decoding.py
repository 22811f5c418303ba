"""Tests for decode targets and the decoder."""

import io
from typing import Any

import pytest
from fakes import make_response
from pydantic import ValidationError

from deezerapi.domain.entities import Album, Artist
from deezerapi.domain.exceptions import DecodeError, ErrorResponse
from deezerapi.infrastructure.integrations.decoding import JSONTarget, RawTarget, decode
from deezerapi.infrastructure.integrations.response import Response


def wrap(body: bytes, status_code: int = 200) -> Response:
    return Response(make_response(status_code, body))


class TestRawTarget:
    """Raw bytes are copied through without JSON interpretation."""

    def test_copies_bytes_verbatim(self) -> None:
        sink = io.BytesIO()
        body = b'{"id": 44132881}'

        result = decode(wrap(body), RawTarget(sink))

        assert result is sink
        assert sink.getvalue() == body

    def test_invalid_json_is_fine(self) -> None:
        sink = io.BytesIO()
        decode(wrap(b'{"broken": '), RawTarget(sink))
        assert sink.getvalue() == b'{"broken": '

    def test_empty_body_writes_nothing(self) -> None:
        sink = io.BytesIO()
        decode(wrap(b""), RawTarget(sink))
        assert sink.getvalue() == b""


class TestJSONTarget:
    """Structured decoding into pydantic-validated types."""

    def test_decodes_record(self) -> None:
        album = decode(wrap(b'{"id": 44132881, "title": "Discovery"}'), JSONTarget(Album))
        assert album == Album(id=44132881, title="Discovery")

    @pytest.mark.parametrize("body", [b"", b"  ", b"\n\t"])
    def test_empty_body_is_zero_value(self, body: bytes) -> None:
        assert decode(wrap(body), JSONTarget(Album)) == Album()

    @pytest.mark.parametrize("body", [b"null", b" null\n"])
    def test_null_body_is_zero_value(self, body: bytes) -> None:
        assert decode(wrap(body), JSONTarget(Album)) == Album()

    def test_plain_container_type(self) -> None:
        value = decode(wrap(b'{"a": 1}'), JSONTarget(dict[str, Any]))
        assert value == {"a": 1}

    def test_empty_body_plain_container(self) -> None:
        assert decode(wrap(b""), JSONTarget(list)) == []

    def test_malformed_json(self) -> None:
        response = wrap(b'{"key": "value"')

        with pytest.raises(DecodeError) as exc_info:
            decode(response, JSONTarget(Artist))

        err = exc_info.value
        assert isinstance(err, ErrorResponse)
        assert isinstance(err.carrier, ValidationError)
        assert err.__cause__ is err.carrier
        assert err.api_response is response
        assert err.response is response.http
        assert "Artist" in err.message

    def test_type_mismatch(self) -> None:
        with pytest.raises(DecodeError):
            decode(wrap(b'{"id": "not-a-number"}'), JSONTarget(Album))

    def test_array_into_record(self) -> None:
        with pytest.raises(DecodeError):
            decode(wrap(b"[1, 2]"), JSONTarget(Album))


def test_no_target_ignores_body() -> None:
    assert decode(wrap(b"anything at all"), None) is None
