"""Fake collaborators shared by the request tests."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import pytest

from pyreq.kernel.exceptions import DeserializationException, TransportException
from pyreq.request.adapters.mimetypes_lookup import MimetypesLookup
from pyreq.request.adapters.pydantic_deserializer import PydanticDeserializer
from pyreq.request.adapters.uri_builder import BaseUrlUriBuilder
from pyreq.request.collaborators import Collaborators
from pyreq.request.types import TransportResponse


class FakeTransport:
    """Records each send and replays a canned response or error."""

    def __init__(self) -> None:
        self.calls: list[dict[str, Any]] = []
        self.response = TransportResponse(status_code=200, headers={"content-type": "application/json"}, text="{}")
        self.error: Exception | None = None

    def respond(self, status_code: int, text: str = "{}", headers: Mapping[str, str] | None = None) -> None:
        response = TransportResponse(status_code=status_code, headers=headers or {}, text=text)
        if 200 <= status_code < 300:
            self.response = response
        else:
            self.error = TransportException(f"HTTP {status_code}", response=response)

    def fail(self, error: Exception) -> None:
        self.error = error

    async def send(
        self,
        method: str,
        url: str,
        headers: Mapping[str, str],
        content: bytes | None,
    ) -> TransportResponse:
        self.calls.append({"method": method, "url": url, "headers": dict(headers), "content": content})
        if self.error is not None:
            raise self.error
        return self.response


class FakeConnectivity:
    def __init__(self, connected: bool = True) -> None:
        self.connected = connected
        self.checks = 0

    def is_connected(self) -> bool:
        self.checks += 1
        return self.connected


class BrokenDeserializer:
    def deserialize(self, text: str, target: type) -> Any:
        raise DeserializationException(f"cannot decode {text!r}")


class HookRecorder:
    """Collects (hook, args) pairs in firing order."""

    def __init__(self) -> None:
        self.events: list[tuple[str, tuple[Any, ...]]] = []

    def __call__(self, name: str):
        def handler(*args: Any) -> None:
            self.events.append((name, args))

        return handler

    @property
    def names(self) -> list[str]:
        return [name for name, _ in self.events]

    def trace(self, request: Any) -> Any:
        """Register a recording handler for every hook of *request*."""
        return (
            request.on_request_started(self("started"))
            .on_request_completed(self("completed"))
            .on_no_internet_connection(self("no-connectivity"))
            .on_success(self("success"))
            .on_error(self("error"))
            .on_unknown_error(self("unknown-error"))
            .on_json_error(self("json-error"))
            .on_header_result(self("header-result"))
            .on_http_error(self("http-error"))
            .on_bad_request_error(self("bad-request"))
            .on_unauthorize(self("unauthorized"))
            .on_not_found(self("not-found"))
            .on_time_out(self("timeout"))
            .on_internal_server_error(self("internal-server-error"))
            .on_auth_token_error(self("auth-token-error"))
        )


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def connectivity() -> FakeConnectivity:
    return FakeConnectivity()


@pytest.fixture
def collaborators(transport: FakeTransport, connectivity: FakeConnectivity) -> Collaborators:
    return Collaborators(
        transport=transport,
        deserializer=PydanticDeserializer(),
        connectivity=connectivity,
        mime_types=MimetypesLookup(),
        uri_builder=BaseUrlUriBuilder(""),
    )


@pytest.fixture
def recorder() -> HookRecorder:
    return HookRecorder()


@pytest.fixture
def broken_deserializer() -> BrokenDeserializer:
    return BrokenDeserializer()
