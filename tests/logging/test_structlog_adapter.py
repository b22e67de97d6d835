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
"""Tests for StructlogAdapter."""

import logging
from typing import Any

from pyreq.core.config import Config
from pyreq.logging.port import LoggingPort
from pyreq.logging.structlog_adapter import StructlogAdapter


class TestLoggingPort:
    def test_adapter_implements_port(self):
        assert isinstance(StructlogAdapter(), LoggingPort)

    def test_incomplete_class_is_not_port(self):
        class Incomplete:
            def get_logger(self, name: str) -> Any:
                pass

        assert not isinstance(Incomplete(), LoggingPort)


class TestStructlogAdapterConfigure:
    def test_packaged_defaults(self):
        adapter = StructlogAdapter()
        adapter.configure(Config.from_sources("/nonexistent-dir"))
        assert adapter._root_level == "INFO"
        assert adapter._format == "console"
        assert adapter._module_levels == {}

    def test_reads_root_level_and_format(self):
        adapter = StructlogAdapter()
        adapter.configure(Config({"pyreq": {"logging": {"format": "JSON", "level": {"root": "debug"}}}}))
        assert adapter._root_level == "DEBUG"
        assert adapter._format == "json"

    def test_per_logger_levels(self):
        adapter = StructlogAdapter()
        adapter.configure(Config({"pyreq": {"logging": {"level": {"root": "INFO", "pyreq.request": "warning"}}}}))
        assert adapter._module_levels == {"pyreq.request": "WARNING"}
        assert logging.getLogger("pyreq.request").level == logging.WARNING

    def test_env_overrides_root_level(self, monkeypatch):
        monkeypatch.setenv("PYREQ_LOGGING_LEVEL_ROOT", "ERROR")
        adapter = StructlogAdapter()
        adapter.configure(Config({}))
        assert adapter._root_level == "ERROR"


class TestStructlogAdapterLoggers:
    def test_get_logger_is_structured(self):
        adapter = StructlogAdapter()
        adapter.configure(Config({}))
        logger = adapter.get_logger("pyreq.test")
        assert callable(getattr(logger, "info", None))
        assert callable(getattr(logger, "debug", None))

    def test_set_level(self):
        adapter = StructlogAdapter()
        adapter.set_level("pyreq.multipart", "DEBUG")
        assert logging.getLogger("pyreq.multipart").level == logging.DEBUG

    def test_unknown_level_falls_back_to_info(self):
        adapter = StructlogAdapter()
        adapter.set_level("pyreq.connectivity", "chatty")
        assert logging.getLogger("pyreq.connectivity").level == logging.INFO
