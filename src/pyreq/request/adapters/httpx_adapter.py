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
"""httpx-based transport adapter."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import timedelta

import httpx

from pyreq.kernel.exceptions import TransportException
from pyreq.request.types import TransportResponse


class HttpxTransportAdapter:
    """TransportPort backed by httpx.AsyncClient.

    A fresh client is opened for every send and closed once the body has
    been read, so no connections outlive a request.
    """

    def __init__(
        self,
        timeout: timedelta = timedelta(seconds=30),
        follow_redirects: bool = True,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._timeout = timeout
        self._follow_redirects = follow_redirects
        self._transport = transport

    async def send(
        self,
        method: str,
        url: str,
        headers: Mapping[str, str],
        content: bytes | None,
    ) -> TransportResponse:
        try:
            async with httpx.AsyncClient(
                timeout=self._timeout.total_seconds(),
                follow_redirects=self._follow_redirects,
                transport=self._transport,
            ) as client:
                response = await client.request(method, url, headers=dict(headers), content=content)
        except httpx.RequestError as exc:
            raise TransportException(f"{type(exc).__name__}: {exc}", code="TRANSPORT_NO_RESPONSE") from exc

        result = TransportResponse(
            status_code=response.status_code,
            headers=response.headers,
            text=response.text,
        )
        if not response.is_success:
            raise TransportException(
                f"HTTP {response.status_code} for {method} {url}",
                response=result,
                code="TRANSPORT_HTTP_STATUS",
            )
        return result
