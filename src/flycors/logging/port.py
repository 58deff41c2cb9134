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
"""Logging settings and the port the CLI configures logging through."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

from flycors.core.config import Config

CORS_LOGGER = "flycors.cors"
WEB_LOGGER = "flycors.web"

LOG_FORMATS = ("console", "json")


@dataclass(frozen=True)
class LogSettings:
    """How flycors log events are filtered and rendered.

    ``level`` applies to every ``flycors.*`` logger; ``levels`` overrides it
    for individual loggers such as ``flycors.cors``.
    """

    level: str = "WARNING"
    format: str = "console"
    levels: Mapping[str, str] = field(default_factory=dict)

    @classmethod
    def from_config(cls, config: Config) -> LogSettings:
        """Read ``flycors.logging``.

        ``level`` is either a single level name or a mapping of ``root``
        plus per-logger levels::

            flycors:
              logging:
                level:
                  root: WARNING
                  flycors.cors: DEBUG
                format: json
        """
        level = config.get_section("flycors.logging.level")
        if level:
            levels = {str(k): str(v).upper() for k, v in level.items() if k != "root"}
            root = str(level.get("root", cls.level)).upper()
        else:
            levels = {}
            root = str(config.get("flycors.logging.level", cls.level)).upper()
        fmt = str(config.get("flycors.logging.format", cls.format)).lower()
        return cls(level=root, format=fmt if fmt in LOG_FORMATS else cls.format, levels=levels)


@runtime_checkable
class LoggingPort(Protocol):
    """Port the CLI hands its logging settings to."""

    def configure(self, settings: LogSettings) -> None: ...
