"""MIME type lookup from file names."""

from __future__ import annotations

import mimetypes

DEFAULT_MIME_TYPE = "application/octet-stream"


class MimetypesLookup:
    def mime_type_of(self, file_name: str) -> str:
        mime_type, _ = mimetypes.guess_type(file_name, strict=False)
        return mime_type or DEFAULT_MIME_TYPE
