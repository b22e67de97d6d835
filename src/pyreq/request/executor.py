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
"""Drives a single request from connectivity check to outcome dispatch."""

from __future__ import annotations

import asyncio
from collections.abc import Mapping
from typing import Generic, TypeVar

import structlog

from pyreq.kernel.exceptions import NoConnectivityException, TransportException
from pyreq.request.classifier import ErrorClassifier
from pyreq.request.collaborators import Collaborators
from pyreq.request.dispatcher import Handler, LifecycleDispatcher
from pyreq.request.multipart import MultipartEncoder
from pyreq.request.types import Hook, HttpMethod, Outcome, RequestConfig, Success

T = TypeVar("T")

logger = structlog.get_logger("pyreq.request")

# Sent on every request, byte for byte.
DEFAULT_HEADERS: dict[str, str] = {
    "Accept": "application/json",
    "Content-Type": "application/json; charset=UTF-8",
    "Pragma": "no-cache",
    "Accept-Encoding": "gzip, deflate, sdch",
    "Accept-Language": "es-419,es;q=0.8",
    "Upgrade-Insecure-Requests": "1",
    "Cache-Control": "no-cache",
}

_BODY_METHODS = (HttpMethod.POST, HttpMethod.PUT)


def target_endpoint(config: RequestConfig) -> str:
    """Endpoint with the GET query string appended verbatim."""
    if config.method == HttpMethod.GET and config.body:
        return config.endpoint + config.body
    return config.endpoint


def build_headers(config: RequestConfig) -> dict[str, str]:
    headers = dict(DEFAULT_HEADERS)
    if config.auth_token:
        headers["Cookie"] = config.auth_token
    return headers


class RequestExecutor(Generic[T]):
    """Runs one RequestConfig against the collaborators.

    Linear flow: started -> connectivity check -> URL and body assembly
    -> transport call -> response handling -> completed. Every failure
    is classified and reported through hooks; ``execute`` never raises
    for transport, HTTP, decoding or connectivity failures and returns
    ``None`` instead of a result.
    """

    def __init__(
        self,
        response_type: type[T],
        collaborators: Collaborators,
        classifier: ErrorClassifier | None = None,
    ) -> None:
        self._response_type = response_type
        self._collaborators = collaborators
        self._classifier = classifier or ErrorClassifier()
        self._encoder = MultipartEncoder(collaborators.mime_types)

    async def execute(self, config: RequestConfig, handlers: Mapping[Hook, Handler]) -> T | None:
        outcome = await self.run(config, handlers)
        return outcome.value if isinstance(outcome, Success) else None

    async def run(self, config: RequestConfig, handlers: Mapping[Hook, Handler]) -> Outcome:
        """Execute and return the dispatched outcome."""
        dispatcher: LifecycleDispatcher[T] = LifecycleDispatcher(handlers)
        logger.info("request_hitting", method=config.method, endpoint=config.endpoint)
        logger.debug("request_body", body=config.body)
        dispatcher.started()

        try:
            # the probe may block on a socket, keep it off the event loop
            if not await asyncio.to_thread(self._collaborators.connectivity.is_connected):
                raise NoConnectivityException("No internet connection")
            outcome: Outcome = Success(await self._perform(config, dispatcher))
            dispatcher.dispatch(outcome)
            return outcome
        except Exception as exc:
            # a request-completed handler failing after success is a caller bug
            if dispatcher.completed:
                raise
            return self._fail(dispatcher, exc)

    async def _perform(self, config: RequestConfig, dispatcher: LifecycleDispatcher[T]) -> T | None:
        url = self._collaborators.uri_builder.build_uri(target_endpoint(config))
        headers = build_headers(config)

        content = b""
        if config.method in _BODY_METHODS and config.body:
            content += config.body.encode("utf-8")
        if config.file is not None:
            multipart = self._encoder.encode(config.file.file, config.file.field_name)
            headers["Content-Type"] = multipart.content_type
            content += multipart.content

        logger.debug("request_content_type", content_type=headers["Content-Type"])
        response = await self._collaborators.transport.send(config.method, url, headers, content or None)
        logger.debug("response_received", status_code=response.status_code, length=len(response.text))

        dispatcher.header_result(response.headers)
        logger.debug("json_response", body=response.text)
        return self._collaborators.deserializer.deserialize(response.text, self._response_type)

    def _fail(self, dispatcher: LifecycleDispatcher[T], exc: Exception) -> Outcome:
        if isinstance(exc, TransportException) and exc.response is not None:
            logger.warning("server_side_error", status_code=exc.response.status_code, body=exc.response.text)

        outcome = self._classifier.classify(exc)
        logger.info("request_failed", outcome=type(outcome).__name__, error=str(exc))
        dispatcher.dispatch(outcome)
        return outcome
