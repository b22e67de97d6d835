"""Tests for ErrorClassifier."""

from __future__ import annotations

import pytest

from pyreq.kernel.exceptions import (
    DeserializationException,
    NoConnectivityException,
    TransportException,
)
from pyreq.request.classifier import ErrorClassifier
from pyreq.request.types import (
    DeserializationFailure,
    HttpErrorCategory,
    HttpFailure,
    NoConnectivity,
    TransportFailure,
    TransportResponse,
)


def http_error(status: int) -> TransportException:
    return TransportException(f"HTTP {status}", response=TransportResponse(status_code=status))


class TestErrorClassifier:
    def test_no_connectivity(self):
        exc = NoConnectivityException("No internet connection")
        assert ErrorClassifier().classify(exc) == NoConnectivity(cause=exc)

    def test_transport_without_response(self):
        exc = TransportException("ConnectError")
        assert ErrorClassifier().classify(exc) == TransportFailure(cause=exc)

    @pytest.mark.parametrize(
        ("status", "category"),
        [
            (400, HttpErrorCategory.BAD_REQUEST),
            (401, HttpErrorCategory.UNAUTHORIZED),
            (404, HttpErrorCategory.NOT_FOUND),
            (408, HttpErrorCategory.TIMEOUT),
            (500, HttpErrorCategory.INTERNAL_SERVER_ERROR),
            (403, HttpErrorCategory.OTHER),
            (502, HttpErrorCategory.OTHER),
        ],
    )
    def test_http_status(self, status, category):
        exc = http_error(status)
        outcome = ErrorClassifier().classify(exc)
        assert outcome == HttpFailure(status_code=status, category=category, cause=exc)

    def test_deserialization(self):
        exc = DeserializationException("bad json")
        assert ErrorClassifier().classify(exc) == DeserializationFailure(cause=exc)

    def test_anything_else_is_transport_failure(self):
        exc = KeyError("x")
        assert ErrorClassifier().classify(exc) == TransportFailure(cause=exc)

    def test_status_code_property(self):
        assert http_error(418).status_code == 418
        assert TransportException("no response").status_code is None
