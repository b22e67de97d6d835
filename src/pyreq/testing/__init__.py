"""PyReq Testing — test doubles for code that builds requests."""

from pyreq.testing.mock_request import MockRequest

__all__ = ["MockRequest"]
