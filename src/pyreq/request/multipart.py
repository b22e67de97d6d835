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
"""Single-file ``multipart/form-data`` body encoding.

Wire layout of an encoded body::

    --<boundary>\\r\\n
    Content-Disposition: form-data; name="<field>"; filename="<file name>"\\r\\n
    Content-Type: <mime type>\\r\\n
    \\r\\n
    <raw file bytes>\\r\\n--<boundary>--

The whole byte source is read into memory before the body is assembled.
Memory use is therefore bounded by the size of the attached file; large
uploads are expected to go through a streaming client instead.
"""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass
from typing import BinaryIO

import structlog

from pyreq.request.ports.outbound import MimeTypePort
from pyreq.request.types import FileObject

logger = structlog.get_logger("pyreq.multipart")

BOUNDARY_PREFIX = "-" * 27
READ_CHUNK_SIZE = 16 * 1024

# .NET-style ticks: 100ns intervals since 0001-01-01
_EPOCH_TICKS = 621_355_968_000_000_000

_tick_lock = threading.Lock()
_last_tick = 0


def _next_tick() -> int:
    """Current tick count, strictly increasing across calls in this process."""
    global _last_tick
    with _tick_lock:
        tick = _EPOCH_TICKS + time.time_ns() // 100
        if tick <= _last_tick:
            tick = _last_tick + 1
        _last_tick = tick
        return tick


def new_boundary() -> str:
    return f"{BOUNDARY_PREFIX}{_next_tick():x}"


def file_name_of(path: str) -> str:
    """Last ``/``-separated segment of *path*."""
    return path.split("/")[-1]


def read_fully(source: BinaryIO) -> bytes:
    chunks: list[bytes] = []
    while chunk := source.read(READ_CHUNK_SIZE):
        chunks.append(chunk)
    return b"".join(chunks)


@dataclass(frozen=True)
class MultipartBody:
    boundary: str
    content: bytes

    @property
    def content_type(self) -> str:
        return f"multipart/form-data; boundary={self.boundary}"


class MultipartEncoder:
    """Builds the bytes of a one-part multipart body for an attached file."""

    def __init__(self, mime_types: MimeTypePort) -> None:
        self._mime_types = mime_types

    def encode(self, file: FileObject, field_name: str, boundary: str | None = None) -> MultipartBody:
        boundary = boundary or new_boundary()
        file_name = file_name_of(file.path)
        mime_type = self._mime_types.mime_type_of(file_name)

        header = (
            f"--{boundary}\r\n"
            f'Content-Disposition: form-data; name="{field_name}"; filename="{file_name}"\r\n'
            f"Content-Type: {mime_type}\r\n"
            "\r\n"
        )
        logger.debug("multipart_part_header", header=header)

        payload = read_fully(file.source)
        logger.debug("multipart_bytes_read", size=len(payload))

        trailer = f"\r\n--{boundary}--"
        return MultipartBody(
            boundary=boundary,
            content=header.encode("utf-8") + payload + trailer.encode("utf-8"),
        )
