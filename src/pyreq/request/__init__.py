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
"""PyReq Request — fluent HTTP request builder with lifecycle hooks."""

from pyreq.request.builder import Request
from pyreq.request.classifier import ErrorClassifier
from pyreq.request.collaborators import Collaborators
from pyreq.request.dispatcher import HandlerSet, LifecycleDispatcher
from pyreq.request.executor import DEFAULT_HEADERS, RequestExecutor
from pyreq.request.multipart import MultipartBody, MultipartEncoder
from pyreq.request.settings import ConnectivitySettings, RequestSettings
from pyreq.request.types import (
    DeserializationFailure,
    FileAttachment,
    FileObject,
    Hook,
    HttpErrorCategory,
    HttpFailure,
    HttpMethod,
    NoConnectivity,
    Outcome,
    RequestConfig,
    Success,
    TransportFailure,
    TransportResponse,
)

__all__ = [
    "DEFAULT_HEADERS",
    "Collaborators",
    "ConnectivitySettings",
    "DeserializationFailure",
    "ErrorClassifier",
    "FileAttachment",
    "FileObject",
    "HandlerSet",
    "Hook",
    "HttpErrorCategory",
    "HttpFailure",
    "HttpMethod",
    "LifecycleDispatcher",
    "MultipartBody",
    "MultipartEncoder",
    "NoConnectivity",
    "Outcome",
    "Request",
    "RequestConfig",
    "RequestExecutor",
    "RequestSettings",
    "Success",
    "TransportFailure",
    "TransportResponse",
]
