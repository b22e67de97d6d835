"""Configuration-bound settings for the default collaborators."""

from __future__ import annotations

from dataclasses import dataclass

from pyreq.core.config import config_properties


@config_properties(prefix="pyreq.request")
@dataclass
class RequestSettings:
    base_url: str = ""
    timeout_seconds: float = 30.0
    follow_redirects: bool = True


@config_properties(prefix="pyreq.connectivity")
@dataclass
class ConnectivitySettings:
    """``enabled: false`` replaces the socket probe with an always-online answer."""

    enabled: bool = True
    probe_host: str = "8.8.8.8"
    probe_port: int = 53
    timeout_seconds: float = 1.5
