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
"""'pyreq send' — run one request and trace its lifecycle hooks."""

from __future__ import annotations

import asyncio
import dataclasses
import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import click

from pyreq.cli.console import console, print_hook
from pyreq.core.config import Config
from pyreq.logging.structlog_adapter import StructlogAdapter
from pyreq.request.adapters.uri_builder import BaseUrlUriBuilder
from pyreq.request.builder import Request
from pyreq.request.collaborators import Collaborators
from pyreq.request.types import FileObject


def _load_config(config_path: Path | None) -> Config:
    if config_path is not None:
        return Config.from_file(config_path)
    return Config.from_sources(Path.cwd())


def _traced_request(request: Request[Any], failures: list[Exception]) -> Request[Any]:
    """Wire every hook to print when it fires."""

    def record_error(exc: Exception) -> None:
        failures.append(exc)
        print_hook("error", str(exc))

    def show_headers(headers: Mapping[str, str]) -> None:
        print_hook("header-result", f"{len(headers)} header(s)")

    return (
        request.on_request_started(lambda: print_hook("request-started"))
        .on_no_internet_connection(lambda: print_hook("no-connectivity"))
        .on_header_result(show_headers)
        .on_success(lambda _: print_hook("success"))
        .on_error(record_error)
        .on_unknown_error(lambda exc: print_hook("unknown-error", type(exc).__name__))
        .on_json_error(lambda exc: print_hook("json-error", str(exc)))
        .on_http_error(lambda status: print_hook("http-error", str(status)))
        .on_bad_request_error(lambda: print_hook("bad-request"))
        .on_unauthorize(lambda: print_hook("unauthorized"))
        .on_not_found(lambda: print_hook("not-found"))
        .on_time_out(lambda: print_hook("timeout"))
        .on_internal_server_error(lambda: print_hook("internal-server-error"))
        .on_request_completed(lambda: print_hook("request-completed"))
    )


@click.command()
@click.argument("method", type=click.Choice(["GET", "POST", "PUT", "DELETE"], case_sensitive=False))
@click.argument("endpoint")
@click.option("--body", default=None, help="JSON body, or the query string for GET (e.g. '?id=5').")
@click.option("--token", default=None, help="Value sent as the Cookie header.")
@click.option(
    "--file",
    "file_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="File to upload as multipart/form-data.",
)
@click.option("--field", default="file", show_default=True, help="Form field name for --file.")
@click.option("--base-url", default=None, help="Overrides pyreq.request.base_url.")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Config file (default: pyreq.yaml / pyreq.toml in the current directory).",
)
@click.option("--verbose", "-v", is_flag=True, help="Log request details at DEBUG level.")
def send_command(
    method: str,
    endpoint: str,
    body: str | None,
    token: str | None,
    file_path: Path | None,
    field: str,
    base_url: str | None,
    config_path: Path | None,
    verbose: bool,
) -> None:
    """Send METHOD ENDPOINT and print each lifecycle hook as it fires."""
    config = _load_config(config_path)
    logging_adapter = StructlogAdapter()
    logging_adapter.configure(config)
    if verbose:
        logging_adapter.set_level("pyreq", "DEBUG")

    collaborators = Collaborators.from_config(config)
    if base_url is not None:
        collaborators = dataclasses.replace(collaborators, uri_builder=BaseUrlUriBuilder(base_url))

    failures: list[Exception] = []
    request: Request[Any] = Request(Any, collaborators).method(method.upper()).endpoint(endpoint)  # type: ignore[arg-type]
    if body is not None:
        request.json_body(body)
    if token is not None:
        request.auth_token(token)
    _traced_request(request, failures)

    console.print(f"\n[info]{method.upper()}[/info] {endpoint}\n")
    if file_path is not None:
        with open(file_path, "rb") as source:
            request.file(FileObject(path=file_path.as_posix(), source=source), field)
            result = asyncio.run(request.start())
    else:
        result = asyncio.run(request.start())

    if failures:
        console.print("\n[error]Request failed[/error]\n")
        raise SystemExit(1)

    console.print("\n[success]Result[/success]")
    console.print_json(json.dumps(result, default=str))
