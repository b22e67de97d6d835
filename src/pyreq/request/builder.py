# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Fluent request builder."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any, Generic, TypeVar

from pyreq.request.collaborators import Collaborators
from pyreq.request.dispatcher import HandlerSet
from pyreq.request.executor import RequestExecutor
from pyreq.request.types import FileAttachment, FileObject, Hook, HttpMethod, RequestConfig

T = TypeVar("T")


class Request(Generic[T]):
    """Configures and starts one HTTP request whose JSON response becomes a ``T``.

    Every setter returns the same instance, so a request reads as one
    chain; nothing is validated until the request runs:

        feed = await (Request(Feed)
            .method("GET")
            .endpoint("/api/v1/feed")
            .json_body("?page=2")
            .auth_token(session_cookie)
            .on_success(render)
            .on_not_found(show_empty_state)
            .start())

    Failures never raise out of :meth:`start`; they fire the matching
    ``on_*`` hooks and ``start`` returns ``None``.

    Without explicit *collaborators* the defaults are wired from
    ``pyreq.yaml``/``pyreq.toml`` in the working directory, here in the
    constructor, so a broken config file raises before any hook exists.
    """

    def __init__(self, response_type: type[T], collaborators: Collaborators | None = None) -> None:
        self._response_type = response_type
        self._collaborators = collaborators if collaborators is not None else Collaborators.from_working_directory()
        self._handlers = HandlerSet()
        self._method: str = HttpMethod.GET
        self._endpoint: str = ""
        self._body: str | None = None
        self._body_field_name: str | None = None
        self._auth_token: str | None = None
        self._file: FileAttachment | None = None

    # -- configuration -------------------------------------------------------

    def method(self, http_method: str) -> Request[T]:
        """Set the HTTP method: ``"GET"``, ``"POST"``, ``"PUT"`` or ``"DELETE"``."""
        self._method = http_method
        return self

    def endpoint(self, endpoint: str) -> Request[T]:
        """Set the endpoint, e.g. ``"/api/v1/feed"``, resolved by the URI builder."""
        self._endpoint = endpoint
        return self

    def auth_token(self, token: str) -> Request[T]:
        """Set the value sent as the ``Cookie`` header."""
        self._auth_token = token
        return self

    def json_body(self, payload: str, field_name: str | None = None) -> Request[T]:
        """Set the raw body text.

        For GET it is the query string appended to the endpoint; otherwise
        it is the JSON payload of POST and PUT. ``field_name`` is kept on
        the request config but does not change how the body is encoded.
        """
        self._body = payload
        self._body_field_name = field_name
        return self

    def file(self, file: FileObject, field_name: str) -> Request[T]:
        """Attach a file, sent as a multipart part named *field_name*."""
        self._file = FileAttachment(file=file, field_name=field_name)
        return self

    # -- lifecycle hooks -----------------------------------------------------

    def on_no_internet_connection(self, handler: Callable[[], Any]) -> Request[T]:
        """Fired when the device is offline; no request is sent."""
        return self._on(Hook.NO_CONNECTIVITY, handler)

    def on_request_started(self, handler: Callable[[], Any]) -> Request[T]:
        """Fired first, always."""
        return self._on(Hook.REQUEST_STARTED, handler)

    def on_request_completed(self, handler: Callable[[], Any]) -> Request[T]:
        """Fired last, always."""
        return self._on(Hook.REQUEST_COMPLETED, handler)

    def on_success(self, handler: Callable[[T], Any]) -> Request[T]:
        """Fired with the decoded response model."""
        return self._on(Hook.SUCCESS, handler)

    def on_error(self, handler: Callable[[Exception], Any]) -> Request[T]:
        """Fired with the cause of every failure."""
        return self._on(Hook.ERROR, handler)

    def on_unknown_error(self, handler: Callable[[Exception], Any]) -> Request[T]:
        """Fired when the transport got no response or an unexpected error occurred."""
        return self._on(Hook.UNKNOWN_ERROR, handler)

    def on_json_error(self, handler: Callable[[Exception], Any]) -> Request[T]:
        return self._on(Hook.JSON_ERROR, handler)

    def on_header_result(self, handler: Callable[[Mapping[str, str]], Any]) -> Request[T]:
        """Fired with the response headers (``Set-Cookie`` etc.) before the body is read."""
        return self._on(Hook.HEADER_RESULT, handler)

    def on_http_error(self, handler: Callable[[int], Any]) -> Request[T]:
        """Fired with the status code of any non-success response."""
        return self._on(Hook.HTTP_ERROR, handler)

    def on_bad_request_error(self, handler: Callable[[], Any]) -> Request[T]:
        return self._on(Hook.BAD_REQUEST, handler)

    def on_unauthorize(self, handler: Callable[[], Any]) -> Request[T]:
        return self._on(Hook.UNAUTHORIZED, handler)

    def on_not_found(self, handler: Callable[[], Any]) -> Request[T]:
        return self._on(Hook.NOT_FOUND, handler)

    def on_time_out(self, handler: Callable[[], Any]) -> Request[T]:
        """Fired for a 408 response. Transport timeouts count as unknown errors."""
        return self._on(Hook.TIMEOUT, handler)

    def on_internal_server_error(self, handler: Callable[[], Any]) -> Request[T]:
        return self._on(Hook.INTERNAL_SERVER_ERROR, handler)

    def on_auth_token_error(self, handler: Callable[[], Any]) -> Request[T]:
        """Registered for API compatibility; no outcome currently fires it."""
        return self._on(Hook.AUTH_TOKEN_ERROR, handler)

    def _on(self, hook: Hook, handler: Callable[..., Any]) -> Request[T]:
        self._handlers.register(hook, handler)
        return self

    # -- execution -----------------------------------------------------------

    def build(self) -> RequestConfig:
        """Freeze the current configuration."""
        return RequestConfig(
            method=self._method,
            endpoint=self._endpoint,
            body=self._body,
            body_field_name=self._body_field_name,
            auth_token=self._auth_token,
            file=self._file,
        )

    async def start(self) -> T | None:
        """Run the request; returns the decoded model, or ``None`` on failure."""
        executor: RequestExecutor[T] = RequestExecutor(self._response_type, self._collaborators)
        return await executor.execute(self.build(), self._handlers.snapshot())
