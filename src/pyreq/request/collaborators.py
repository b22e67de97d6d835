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
"""Bundle of the external services a request runs against."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from pathlib import Path

from pyreq.core.config import Config
from pyreq.request.adapters.connectivity import SocketConnectivityProbe, StaticConnectivity
from pyreq.request.adapters.httpx_adapter import HttpxTransportAdapter
from pyreq.request.adapters.mimetypes_lookup import MimetypesLookup
from pyreq.request.adapters.pydantic_deserializer import PydanticDeserializer
from pyreq.request.adapters.uri_builder import BaseUrlUriBuilder
from pyreq.request.ports.outbound import (
    ConnectivityPort,
    DeserializerPort,
    MimeTypePort,
    TransportPort,
    UriBuilderPort,
)
from pyreq.request.settings import ConnectivitySettings, RequestSettings


@dataclass(frozen=True)
class Collaborators:
    """The ports a RequestExecutor needs, wired to concrete adapters."""

    transport: TransportPort
    deserializer: DeserializerPort
    connectivity: ConnectivityPort
    mime_types: MimeTypePort
    uri_builder: UriBuilderPort

    @classmethod
    def from_config(cls, config: Config) -> Collaborators:
        """Wire the default adapters from ``pyreq.request`` and ``pyreq.connectivity``."""
        request_settings = config.bind(RequestSettings)
        connectivity_settings = config.bind(ConnectivitySettings)

        connectivity: ConnectivityPort
        if connectivity_settings.enabled:
            connectivity = SocketConnectivityProbe(
                host=connectivity_settings.probe_host,
                port=connectivity_settings.probe_port,
                timeout=connectivity_settings.timeout_seconds,
            )
        else:
            connectivity = StaticConnectivity(connected=True)

        return cls(
            transport=HttpxTransportAdapter(
                timeout=timedelta(seconds=request_settings.timeout_seconds),
                follow_redirects=request_settings.follow_redirects,
            ),
            deserializer=PydanticDeserializer(),
            connectivity=connectivity,
            mime_types=MimetypesLookup(),
            uri_builder=BaseUrlUriBuilder(request_settings.base_url),
        )

    @classmethod
    def from_working_directory(cls, base_dir: str | Path | None = None) -> Collaborators:
        """Load ``pyreq.yaml``/``pyreq.toml`` from *base_dir* (default: cwd)."""
        return cls.from_config(Config.from_sources(base_dir if base_dir is not None else Path.cwd()))
