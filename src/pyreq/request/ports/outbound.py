"""Outbound ports: the collaborators a request depends on but does not implement."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Protocol, TypeVar, runtime_checkable

from pyreq.request.types import TransportResponse

T = TypeVar("T")


@runtime_checkable
class TransportPort(Protocol):
    """Sends one request and returns the fully read response.

    Non-success statuses raise ``TransportException`` carrying the
    response; failures without any response raise it with ``response=None``.
    """

    async def send(
        self,
        method: str,
        url: str,
        headers: Mapping[str, str],
        content: bytes | None,
    ) -> TransportResponse: ...


@runtime_checkable
class DeserializerPort(Protocol):
    """Turns response text into ``target``; raises ``DeserializationException``.

    An empty body yields ``None`` rather than an error.
    """

    def deserialize(self, text: str, target: type[T]) -> T | None: ...


@runtime_checkable
class ConnectivityPort(Protocol):
    """Read-only network availability check, safe to call concurrently.

    May block; the executor calls it from a worker thread.
    """

    def is_connected(self) -> bool: ...


@runtime_checkable
class MimeTypePort(Protocol):
    def mime_type_of(self, file_name: str) -> str: ...


@runtime_checkable
class UriBuilderPort(Protocol):
    def build_uri(self, endpoint: str) -> str: ...
