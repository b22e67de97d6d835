"""JSON deserialization into arbitrary result types via pydantic."""

from __future__ import annotations

from functools import lru_cache
from typing import Any, TypeVar

from pydantic import TypeAdapter, ValidationError

from pyreq.kernel.exceptions import DeserializationException

T = TypeVar("T")


@lru_cache(maxsize=256)
def _adapter_for(target: Any) -> TypeAdapter[Any]:
    return TypeAdapter(target)


class PydanticDeserializer:
    """DeserializerPort using ``TypeAdapter.validate_json``.

    Works for pydantic models, dataclasses, TypedDicts and plain
    containers. Lax mode accepts ``"true"``/``1`` booleans and ISO-8601
    date strings, which is what the servers this talks to send.
    """

    def deserialize(self, text: str, target: type[T]) -> T | None:
        """Decode *text*; an empty body (e.g. a 204 reply) decodes to ``None``."""
        if not text.strip():
            return None
        try:
            return _adapter_for(target).validate_json(text)
        except ValidationError as exc:
            raise DeserializationException(
                f"Cannot decode response as {getattr(target, '__name__', target)!s}: {exc.error_count()} error(s)",
                code="DESERIALIZATION_FAILED",
                context={"errors": exc.errors(include_url=False)},
            ) from exc
