"""Tests for the default collaborator adapters."""

from __future__ import annotations

import socket
from datetime import datetime

import pytest
from pydantic import BaseModel

from pyreq.core.config import Config
from pyreq.kernel.exceptions import DeserializationException
from pyreq.request.adapters.connectivity import SocketConnectivityProbe, StaticConnectivity
from pyreq.request.adapters.httpx_adapter import HttpxTransportAdapter
from pyreq.request.adapters.mimetypes_lookup import MimetypesLookup
from pyreq.request.adapters.pydantic_deserializer import PydanticDeserializer
from pyreq.request.adapters.uri_builder import BaseUrlUriBuilder
from pyreq.request.collaborators import Collaborators
from pyreq.request.ports.outbound import (
    ConnectivityPort,
    DeserializerPort,
    MimeTypePort,
    TransportPort,
    UriBuilderPort,
)


class Post(BaseModel):
    id: int
    published: bool
    created_at: datetime


class TestPortConformance:
    def test_adapters_implement_ports(self):
        assert isinstance(HttpxTransportAdapter(), TransportPort)
        assert isinstance(PydanticDeserializer(), DeserializerPort)
        assert isinstance(SocketConnectivityProbe(), ConnectivityPort)
        assert isinstance(StaticConnectivity(), ConnectivityPort)
        assert isinstance(MimetypesLookup(), MimeTypePort)
        assert isinstance(BaseUrlUriBuilder(), UriBuilderPort)


class TestPydanticDeserializer:
    def test_decodes_model_with_lenient_bool_and_dates(self):
        post = PydanticDeserializer().deserialize(
            '{"id": 1, "published": "true", "created_at": "2024-03-01T10:00:00"}', Post
        )
        assert post.published is True
        assert post.created_at == datetime(2024, 3, 1, 10, 0, 0)

    def test_decodes_plain_containers(self):
        assert PydanticDeserializer().deserialize("[1, 2, 3]", list[int]) == [1, 2, 3]

    def test_invalid_json_raises(self):
        with pytest.raises(DeserializationException) as exc_info:
            PydanticDeserializer().deserialize("<html>", Post)
        assert exc_info.value.code == "DESERIALIZATION_FAILED"

    @pytest.mark.parametrize("text", ["", "  \r\n"])
    def test_empty_body_decodes_to_none(self, text):
        assert PydanticDeserializer().deserialize(text, Post) is None

    def test_wrong_shape_raises(self):
        with pytest.raises(DeserializationException):
            PydanticDeserializer().deserialize('{"id": "abc"}', Post)


class TestUriBuilder:
    def test_prefixes_base_url(self):
        assert BaseUrlUriBuilder("https://api.example.com/").build_uri("/feed?id=5") == (
            "https://api.example.com/feed?id=5"
        )

    def test_adds_missing_slash(self):
        assert BaseUrlUriBuilder("https://api.example.com").build_uri("feed") == "https://api.example.com/feed"

    def test_absolute_endpoint_passes_through(self):
        assert BaseUrlUriBuilder("https://a.example").build_uri("https://b.example/x") == "https://b.example/x"

    def test_no_base_url(self):
        assert BaseUrlUriBuilder("").build_uri("/feed") == "/feed"


class TestConnectivity:
    def test_static(self):
        assert StaticConnectivity().is_connected() is True
        assert StaticConnectivity(connected=False).is_connected() is False

    def test_probe_reports_offline_on_socket_error(self, monkeypatch):
        def refuse(*args, **kwargs):
            raise OSError("network unreachable")

        monkeypatch.setattr(socket, "create_connection", refuse)
        assert SocketConnectivityProbe().is_connected() is False

    def test_probe_reports_online_when_connect_succeeds(self, monkeypatch):
        seen = {}

        class FakeSocket:
            def __enter__(self):
                return self

            def __exit__(self, *exc):
                return False

        def connect(address, timeout):
            seen["address"] = address
            seen["timeout"] = timeout
            return FakeSocket()

        monkeypatch.setattr(socket, "create_connection", connect)
        assert SocketConnectivityProbe(host="1.1.1.1", port=443, timeout=0.5).is_connected() is True
        assert seen == {"address": ("1.1.1.1", 443), "timeout": 0.5}


class TestCollaboratorsFromConfig:
    def test_defaults(self):
        collaborators = Collaborators.from_config(Config.from_sources("/nonexistent"))
        assert isinstance(collaborators.transport, HttpxTransportAdapter)
        assert isinstance(collaborators.connectivity, SocketConnectivityProbe)
        assert collaborators.uri_builder.build_uri("/x") == "/x"

    def test_base_url_and_disabled_probe(self):
        config = Config(
            {
                "pyreq": {
                    "request": {"base_url": "https://api.example.com"},
                    "connectivity": {"enabled": False},
                }
            }
        )
        collaborators = Collaborators.from_config(config)
        assert isinstance(collaborators.connectivity, StaticConnectivity)
        assert collaborators.uri_builder.build_uri("/feed") == "https://api.example.com/feed"

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("PYREQ_REQUEST_BASE_URL", "https://env.example.com")
        collaborators = Collaborators.from_config(Config({}))
        assert collaborators.uri_builder.build_uri("/x") == "https://env.example.com/x"
