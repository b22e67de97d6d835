"""Default collaborator adapters."""

from pyreq.request.adapters.connectivity import SocketConnectivityProbe, StaticConnectivity
from pyreq.request.adapters.httpx_adapter import HttpxTransportAdapter
from pyreq.request.adapters.mimetypes_lookup import MimetypesLookup
from pyreq.request.adapters.pydantic_deserializer import PydanticDeserializer
from pyreq.request.adapters.uri_builder import BaseUrlUriBuilder

__all__ = [
    "BaseUrlUriBuilder",
    "HttpxTransportAdapter",
    "MimetypesLookup",
    "PydanticDeserializer",
    "SocketConnectivityProbe",
    "StaticConnectivity",
]
