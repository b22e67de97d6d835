"""Outbound ports consumed by the request executor."""

from pyreq.request.ports.outbound import (
    ConnectivityPort,
    DeserializerPort,
    MimeTypePort,
    TransportPort,
    UriBuilderPort,
)

__all__ = [
    "ConnectivityPort",
    "DeserializerPort",
    "MimeTypePort",
    "TransportPort",
    "UriBuilderPort",
]
