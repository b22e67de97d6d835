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
"""Exception hierarchy for PyReq.

Every failure a request can run into is raised as a PyReqException
subclass by the collaborator adapters, so the error classifier only has
to understand this hierarchy and never a third-party library's errors.

Categories:
- InfrastructureException: transport and connectivity failures
- DeserializationException: a response body that cannot become the result type
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pyreq.request.types import TransportResponse


# =============================================================================
# Base Exception
# =============================================================================


class PyReqException(Exception):
    """Base exception for all PyReq errors.

    Args:
        message: Human-readable error description.
        code: Machine-readable error code (e.g. "TRANSPORT_001").
        context: Arbitrary key-value pairs for error context and debugging.
    """

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.context: dict = context if context is not None else {}


# =============================================================================
# Infrastructure Exceptions
# =============================================================================


class InfrastructureException(PyReqException):
    """Network and transport level failures."""


class TransportException(InfrastructureException):
    """The transport failed to deliver the request or rejected the response.

    ``response`` is set when the server answered with a non-success
    status; it is ``None`` when no response was received at all
    (DNS failure, refused connection, transport timeout, ...).
    """

    def __init__(
        self,
        message: str,
        response: TransportResponse | None = None,
        code: str | None = None,
        context: dict | None = None,
    ) -> None:
        super().__init__(message, code=code, context=context)
        self.response = response

    @property
    def status_code(self) -> int | None:
        return self.response.status_code if self.response is not None else None


class NoConnectivityException(InfrastructureException):
    """The device reported no network connectivity before the request."""


# =============================================================================
# Serialization Exceptions
# =============================================================================


class DeserializationException(PyReqException):
    """The response body could not be decoded into the requested type."""
