"""Pagination options and their query-string encoding."""

from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import parse_qs, urlencode

from deezerapi.infrastructure.integrations.urls import parse_url


@dataclass(frozen=True)
class ListOptions:
    """Deezer list paging: ``index`` is the offset, ``limit`` the page size.

    Zero means "let Deezer pick", so zero fields are left out of the query.
    """

    index: int = 0
    limit: int = 0

    def to_params(self) -> dict[str, list[str]]:
        params: dict[str, list[str]] = {}
        if self.index:
            params["index"] = [str(self.index)]
        if self.limit:
            params["limit"] = [str(self.limit)]
        return params


def apply_options(path: str, options: ListOptions | None) -> str:
    """Merge ``options`` into the query string of ``path``.

    Existing parameters survive; same-named ones are replaced by the options.
    The query is re-encoded with keys sorted so the same inputs always give
    the same URL.

    Raises:
        MalformedURLError: If ``path`` does not parse as a URL
    """
    parts = parse_url(path)
    values = parse_qs(parts.query, keep_blank_values=True)
    if options is not None:
        values.update(options.to_params())

    query = urlencode(sorted(values.items()), doseq=True)
    return parts._replace(query=query).geturl()


__all__ = ["ListOptions", "apply_options"]
