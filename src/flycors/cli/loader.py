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
"""Configuration loading shared by CLI commands."""

from __future__ import annotations

from pathlib import Path

from rich.markup import escape

from flycors.cli.console import console
from flycors.core.config import Config
from flycors.cors.service import CorsService
from flycors.kernel.exceptions import FlyCorsException


def load_service(config_path: Path, prefix: str, profiles: tuple[str, ...] = ()) -> CorsService:
    """Build a CorsService from *config_path*, exiting with status 1 on bad configuration."""
    try:
        config = Config.from_file(config_path, active_profiles=list(profiles))
        return CorsService.from_config(config, prefix)
    except FlyCorsException as exc:
        console.print(f"[error]✗ {escape(str(exc))}[/error]")
        if exc.code:
            console.print(f"  [dim]code: {exc.code}[/dim]")
        raise SystemExit(1) from None
