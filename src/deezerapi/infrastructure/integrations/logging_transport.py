"""httpx transport wrapper that logs every exchange.

Purely observational: it never touches the request or response, it just
records method, host, error, status and latency, then hands the result (or
the exception) straight back.
"""

from __future__ import annotations

import logging
import time

import httpx

logger = logging.getLogger(__name__)


class LoggingTransport(httpx.AsyncBaseTransport):
    """Log one line per request sent through the wrapped transport.

    Usage:
        transport = LoggingTransport(httpx.AsyncHTTPTransport())
        client = DeezerClient(None, with_transport(transport))
    """

    def __init__(
        self,
        transport: httpx.AsyncBaseTransport | None = None,
        log: logging.Logger | None = None,
    ) -> None:
        self._transport = transport or httpx.AsyncHTTPTransport()
        self._log = log or logger

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        started = time.perf_counter()
        response: httpx.Response | None = None
        error: BaseException | None = None
        try:
            response = await self._transport.handle_async_request(request)
            return response
        except BaseException as e:
            error = e
            raise
        finally:
            took = time.perf_counter() - started
            status_code = response.status_code if response is not None else 0
            self._log.info(
                "method=%s host=%s error=%s status_code=%d took=%.3fs",
                request.method,
                request.url.host,
                error,
                status_code,
                took,
                extra={
                    "http_method": request.method,
                    "http_host": request.url.host,
                    "http_error": repr(error) if error is not None else None,
                    "http_status": status_code,
                    "took_seconds": round(took, 6),
                },
            )

    async def aclose(self) -> None:
        await self._transport.aclose()


__all__ = ["LoggingTransport"]
