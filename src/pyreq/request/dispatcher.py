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
"""Hook registry and the dispatcher that fires hooks for an outcome."""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping
from types import MappingProxyType
from typing import Any, Generic, TypeVar

from pyreq.request.types import (
    DeserializationFailure,
    Hook,
    HttpErrorCategory,
    HttpFailure,
    NoConnectivity,
    Outcome,
    Success,
    TransportFailure,
)

T = TypeVar("T")

Handler = Callable[..., Any]

CATEGORY_HOOKS: dict[HttpErrorCategory, Hook] = {
    HttpErrorCategory.BAD_REQUEST: Hook.BAD_REQUEST,
    HttpErrorCategory.UNAUTHORIZED: Hook.UNAUTHORIZED,
    HttpErrorCategory.NOT_FOUND: Hook.NOT_FOUND,
    HttpErrorCategory.TIMEOUT: Hook.TIMEOUT,
    HttpErrorCategory.INTERNAL_SERVER_ERROR: Hook.INTERNAL_SERVER_ERROR,
}


class HandlerSet(Mapping[Hook, Handler]):
    """At most one handler per hook; registering again replaces the previous one."""

    def __init__(self) -> None:
        self._handlers: dict[Hook, Handler] = {}

    def register(self, hook: Hook, handler: Handler) -> None:
        self._handlers[hook] = handler

    def snapshot(self) -> Mapping[Hook, Handler]:
        """Read-only copy, unaffected by later registrations."""
        return MappingProxyType(dict(self._handlers))

    def __getitem__(self, hook: Hook) -> Handler:
        return self._handlers[hook]

    def __iter__(self) -> Iterator[Hook]:
        return iter(self._handlers)

    def __len__(self) -> int:
        return len(self._handlers)


class LifecycleDispatcher(Generic[T]):
    """Fires the hooks of one execution in their guaranteed order.

    - ``request-started`` once, before anything else
    - ``header-result`` at most once, before the body is read
    - the success hook or the failure-category hooks for the outcome
    - ``request-completed`` once, last

    Missing handlers are skipped.
    """

    def __init__(self, handlers: Mapping[Hook, Handler]) -> None:
        self._handlers = handlers
        self._started = False
        self._headers_reported = False
        self._completed = False

    @property
    def completed(self) -> bool:
        return self._completed

    def fire(self, hook: Hook, *args: Any) -> None:
        handler = self._handlers.get(hook)
        if handler is not None:
            handler(*args)

    def started(self) -> None:
        if self._started:
            return
        self._started = True
        self.fire(Hook.REQUEST_STARTED)

    def header_result(self, headers: Mapping[str, str]) -> None:
        if self._headers_reported:
            return
        self._headers_reported = True
        self.fire(Hook.HEADER_RESULT, headers)

    def dispatch(self, outcome: Outcome) -> T | None:
        """Fire the hooks for *outcome* and return the caller-facing value.

        Failures yield ``None``. Raises RuntimeError if request-completed
        has already fired for this execution.
        """
        if self._completed:
            raise RuntimeError("request-completed already fired for this execution")

        if isinstance(outcome, Success):
            self.fire(Hook.SUCCESS, outcome.value)
            self._complete()
            return outcome.value

        if isinstance(outcome, HttpFailure):
            self.fire(Hook.ERROR, outcome.cause)
            self.fire(Hook.HTTP_ERROR, outcome.status_code)
            category_hook = CATEGORY_HOOKS.get(outcome.category)
            if category_hook is not None:
                self.fire(category_hook)
        elif isinstance(outcome, TransportFailure):
            self.fire(Hook.UNKNOWN_ERROR, outcome.cause)
            self.fire(Hook.ERROR, outcome.cause)
        elif isinstance(outcome, DeserializationFailure):
            self.fire(Hook.JSON_ERROR, outcome.cause)
            self.fire(Hook.ERROR, outcome.cause)
        elif isinstance(outcome, NoConnectivity):
            self.fire(Hook.ERROR, outcome.cause)
            self.fire(Hook.NO_CONNECTIVITY)
        else:
            raise TypeError(f"Unknown outcome: {outcome!r}")

        self._complete()
        return None

    def _complete(self) -> None:
        self._completed = True
        self.fire(Hook.REQUEST_COMPLETED)
