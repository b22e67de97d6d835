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
"""Value types shared by the request builder, executor and dispatcher."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from typing import BinaryIO, Generic, TypeVar

T = TypeVar("T")


class HttpMethod(StrEnum):
    """HTTP methods the executor knows how to assemble a body for."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


class Hook(StrEnum):
    """Lifecycle points a handler can be registered for."""

    REQUEST_STARTED = "request-started"
    REQUEST_COMPLETED = "request-completed"
    NO_CONNECTIVITY = "no-connectivity"
    SUCCESS = "success"
    ERROR = "error"
    UNKNOWN_ERROR = "unknown-error"
    JSON_ERROR = "json-error"
    HEADER_RESULT = "header-result"
    HTTP_ERROR = "http-error"
    BAD_REQUEST = "bad-request"
    UNAUTHORIZED = "unauthorized"
    NOT_FOUND = "not-found"
    TIMEOUT = "timeout"
    INTERNAL_SERVER_ERROR = "internal-server-error"
    AUTH_TOKEN_ERROR = "auth-token-error"


class HttpErrorCategory(StrEnum):
    """Named sub-cases of an HTTP status failure."""

    BAD_REQUEST = "BAD_REQUEST"
    UNAUTHORIZED = "UNAUTHORIZED"
    NOT_FOUND = "NOT_FOUND"
    TIMEOUT = "TIMEOUT"
    INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"
    OTHER = "OTHER"


@dataclass
class FileObject:
    """A byte source plus the path it was read from.

    The path only feeds the file name and MIME type of the multipart
    part; the bytes always come from ``source``.
    """

    path: str
    source: BinaryIO


@dataclass(frozen=True)
class FileAttachment:
    file: FileObject
    field_name: str


@dataclass(frozen=True)
class RequestConfig:
    """Frozen description of one request, produced when it is started."""

    method: str = HttpMethod.GET
    endpoint: str = ""
    body: str | None = None
    body_field_name: str | None = None
    auth_token: str | None = None
    file: FileAttachment | None = None


@dataclass(frozen=True)
class TransportResponse:
    """A fully read response as handed back by a transport adapter."""

    status_code: int
    headers: Mapping[str, str] = field(default_factory=dict)
    text: str = ""


# =============================================================================
# Outcome variants
# =============================================================================


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T


@dataclass(frozen=True)
class HttpFailure:
    status_code: int
    category: HttpErrorCategory
    cause: Exception


@dataclass(frozen=True)
class TransportFailure:
    cause: Exception


@dataclass(frozen=True)
class DeserializationFailure:
    cause: Exception


@dataclass(frozen=True)
class NoConnectivity:
    cause: Exception


Outcome = Success[T] | HttpFailure | TransportFailure | DeserializationFailure | NoConnectivity
"""Result of exactly one execution; failures carry the exception that caused them."""
