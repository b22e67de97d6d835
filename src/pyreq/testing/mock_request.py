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
"""MockRequest — a Request that succeeds with a canned result."""

from __future__ import annotations

from typing import TypeVar

from pyreq.core.config import Config
from pyreq.request.builder import Request
from pyreq.request.collaborators import Collaborators
from pyreq.request.dispatcher import LifecycleDispatcher
from pyreq.request.types import Success

T = TypeVar("T")

# built in code so a mock never reads config files from the working directory
_OFFLINE = Collaborators.from_config(Config({"pyreq": {"connectivity": {"enabled": False}}}))


class MockRequest(Request[T]):
    """Drop-in replacement for :class:`Request` that never touches the network.

    Code that builds requests can be handed a MockRequest in tests:

        request = MockRequest(Feed).result(Feed(items=[]))
        feed = await request.on_success(view.render).start()

    ``start()`` fires request-started, success and request-completed, in
    the same order a real successful request does, and returns the result.
    """

    def __init__(self, response_type: type[T], collaborators: Collaborators | None = None) -> None:
        # collaborators are accepted for signature parity and never used
        super().__init__(response_type, collaborators if collaborators is not None else _OFFLINE)
        self._result: T | None = None

    def result(self, result: T) -> MockRequest[T]:
        self._result = result
        return self

    async def start(self) -> T | None:
        dispatcher: LifecycleDispatcher[T] = LifecycleDispatcher(self._handlers.snapshot())
        dispatcher.started()
        return dispatcher.dispatch(Success(self._result))
