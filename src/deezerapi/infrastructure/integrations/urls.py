"""Strict URL parsing and relative resolution.

urllib.parse is very forgiving: it happily splits "\\n" or ":" into something.
We want those rejected BEFORE a request is built, so parse_url() adds the
checks urlsplit skips.
"""

from __future__ import annotations

import re
from urllib.parse import SplitResult, urljoin, urlsplit

from deezerapi.domain.exceptions import MalformedURLError

_CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f]")


def parse_url(raw: str) -> SplitResult:
    """Split ``raw`` into URL components or raise MalformedURLError.

    Rejects ASCII control characters, a missing scheme (leading ``:``), a
    colon in the first segment of a relative reference and an authority
    whose port is not a number.
    """
    if _CONTROL_CHARS.search(raw):
        raise MalformedURLError(raw, "invalid control character in URL")
    if raw.startswith(":"):
        raise MalformedURLError(raw, "missing protocol scheme")

    try:
        parts = urlsplit(raw)
        # Accessing .port validates it ("host:abc" raises ValueError).
        parts.port
    except ValueError as e:
        raise MalformedURLError(raw, str(e)) from e

    if not parts.scheme and not parts.netloc:
        first_segment = parts.path.split("/", 1)[0]
        if ":" in first_segment:
            raise MalformedURLError(
                raw, "first path segment in URL cannot contain colon"
            )
    return parts


def resolve_reference(base_url: str, reference: str) -> str:
    """Resolve ``reference`` against ``base_url`` (RFC 3986 semantics).

    Both sides are validated with parse_url() first.
    """
    parse_url(base_url)
    parse_url(reference)
    return urljoin(base_url, reference)


__all__ = ["parse_url", "resolve_reference"]
