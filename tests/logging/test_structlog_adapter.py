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
"""Tests for LogSettings and StructlogAdapter."""

import io
import json
import logging

import pytest
import structlog

from flycors.core.config import Config
from flycors.logging import CORS_LOGGER, WEB_LOGGER, LoggingPort, LogSettings, StructlogAdapter


@pytest.fixture(autouse=True)
def restore_logging():
    yield
    root = logging.getLogger("flycors")
    for handler in list(root.handlers):
        root.removeHandler(handler)
    root.setLevel(logging.NOTSET)
    root.propagate = True
    for name in (CORS_LOGGER, WEB_LOGGER):
        logging.getLogger(name).setLevel(logging.NOTSET)
    structlog.reset_defaults()


class TestLogSettings:
    def test_defaults(self):
        settings = LogSettings()
        assert settings.level == "WARNING"
        assert settings.format == "console"
        assert settings.levels == {}

    def test_from_config_with_per_logger_levels(self):
        config = Config({"flycors": {"logging": {"level": {"root": "info", "flycors.cors": "debug"}, "format": "JSON"}}})

        settings = LogSettings.from_config(config)

        assert settings.level == "INFO"
        assert settings.levels == {"flycors.cors": "DEBUG"}
        assert settings.format == "json"

    def test_from_config_with_single_level(self):
        settings = LogSettings.from_config(Config({"flycors": {"logging": {"level": "error"}}}))
        assert settings.level == "ERROR"
        assert settings.levels == {}

    def test_from_config_unknown_format_falls_back_to_console(self):
        settings = LogSettings.from_config(Config({"flycors": {"logging": {"format": "xml"}}}))
        assert settings.format == "console"

    def test_format_env_override(self, monkeypatch):
        monkeypatch.setenv("FLYCORS_LOGGING_FORMAT", "json")
        assert LogSettings.from_config(Config({})).format == "json"


class TestStructlogAdapter:
    def test_implements_logging_port(self):
        assert isinstance(StructlogAdapter(), LoggingPort)

    def test_per_logger_level_routes_cors_decisions(self):
        stream = io.StringIO()
        StructlogAdapter(stream).configure(LogSettings(level="WARNING", levels={CORS_LOGGER: "DEBUG"}))

        structlog.get_logger(CORS_LOGGER).debug("cors_origin_rejected", origin="http://evil.com")
        structlog.get_logger(WEB_LOGGER).debug("cors_preflight", path="/hello")

        output = stream.getvalue()
        assert "cors_origin_rejected" in output
        assert "http://evil.com" in output
        assert "cors_preflight" not in output

    def test_json_format(self):
        stream = io.StringIO()
        StructlogAdapter(stream).configure(LogSettings(level="INFO", format="json"))

        structlog.get_logger(WEB_LOGGER).info("cors_preflight", path="/hello")

        record = json.loads(stream.getvalue().strip())
        assert record["event"] == "cors_preflight"
        assert record["logger"] == WEB_LOGGER
        assert record["level"] == "info"
        assert record["path"] == "/hello"

    def test_host_root_logger_is_left_alone(self):
        host_handlers = list(logging.getLogger().handlers)

        StructlogAdapter(io.StringIO()).configure(LogSettings())

        assert logging.getLogger().handlers == host_handlers
        assert logging.getLogger("flycors").propagate is False

    def test_reconfigure_replaces_handler(self):
        first, second = io.StringIO(), io.StringIO()
        StructlogAdapter(first).configure(LogSettings(level="INFO"))
        StructlogAdapter(second).configure(LogSettings(level="INFO"))

        structlog.get_logger(CORS_LOGGER).info("cors_policy_reconfigured")

        assert len(logging.getLogger("flycors").handlers) == 1
        assert first.getvalue() == ""
        assert "cors_policy_reconfigured" in second.getvalue()

    def test_reconfigure_resets_per_logger_levels(self):
        adapter = StructlogAdapter(io.StringIO())
        adapter.configure(LogSettings(levels={CORS_LOGGER: "DEBUG"}))
        assert logging.getLogger(CORS_LOGGER).level == logging.DEBUG

        adapter.configure(LogSettings())

        assert logging.getLogger(CORS_LOGGER).level == logging.NOTSET
        assert adapter.settings == LogSettings()
