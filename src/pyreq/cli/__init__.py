"""PyReq command line interface."""

from pyreq.cli.main import cli

__all__ = ["cli"]
