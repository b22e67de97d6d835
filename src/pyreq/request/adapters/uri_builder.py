"""Endpoint to absolute URI composition."""

from __future__ import annotations


class BaseUrlUriBuilder:
    """Prefixes endpoints with a configured base URL.

    Endpoints that are already absolute pass through untouched. Anything
    after the endpoint path (a query string, for instance) is kept
    verbatim and is never re-escaped.
    """

    def __init__(self, base_url: str = "") -> None:
        self._base_url = base_url.rstrip("/")

    def build_uri(self, endpoint: str) -> str:
        if endpoint.startswith(("http://", "https://")) or not self._base_url:
            return endpoint
        if not endpoint.startswith("/"):
            endpoint = "/" + endpoint
        return self._base_url + endpoint
