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
"""StructlogAdapter — renders flycors log events through structlog."""

from __future__ import annotations

import logging
import sys
from typing import IO, Any

import structlog

from flycors.logging.port import CORS_LOGGER, WEB_LOGGER, LogSettings

ROOT_LOGGER = "flycors"


class _StderrHandler(logging.StreamHandler):
    """Writes to whatever ``sys.stderr`` is at emit time."""

    def __init__(self) -> None:
        super().__init__()

    @property
    def stream(self) -> IO[str]:  # type: ignore[override]
        return sys.stderr

    @stream.setter
    def stream(self, value: IO[str]) -> None:
        pass


class StructlogAdapter:
    """Attaches one structlog-formatted handler to the ``flycors`` logger.

    Only the ``flycors.*`` hierarchy is touched: the host's root logger and
    its handlers are left alone, and records do not propagate to it.
    Calling :meth:`configure` again, from any adapter, replaces the handler
    installed by the previous call.
    """

    def __init__(self, stream: IO[str] | None = None) -> None:
        self._stream = stream
        self._levelled: tuple[str, ...] = ()
        self.settings: LogSettings | None = None

    def configure(self, settings: LogSettings) -> None:
        structlog.configure(
            processors=[
                structlog.contextvars.merge_contextvars,
                structlog.stdlib.filter_by_level,
                structlog.stdlib.add_logger_name,
                structlog.stdlib.add_log_level,
                structlog.processors.TimeStamper(fmt="iso"),
                structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
            ],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=False,
        )

        handler: logging.Handler = logging.StreamHandler(self._stream) if self._stream else _StderrHandler()
        handler.setFormatter(
            structlog.stdlib.ProcessorFormatter(
                processors=[
                    structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                    self._renderer(settings.format),
                ],
            )
        )

        handler.set_name(ROOT_LOGGER)

        root = logging.getLogger(ROOT_LOGGER)
        for existing in [h for h in root.handlers if h.get_name() == ROOT_LOGGER]:
            root.removeHandler(existing)
        root.addHandler(handler)
        root.setLevel(_to_level(settings.level))
        root.propagate = False

        for name in (CORS_LOGGER, WEB_LOGGER, *self._levelled):
            logging.getLogger(name).setLevel(logging.NOTSET)
        for name, level in settings.levels.items():
            logging.getLogger(name).setLevel(_to_level(level))

        self._levelled = tuple(settings.levels)
        self.settings = settings

    @staticmethod
    def _renderer(fmt: str) -> Any:
        if fmt == "json":
            return structlog.processors.JSONRenderer()
        return structlog.dev.ConsoleRenderer(colors=False)


def _to_level(name: str) -> int:
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.WARNING
