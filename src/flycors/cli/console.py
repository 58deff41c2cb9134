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
"""Shared Rich console for CLI output."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.theme import Theme

FLYCORS_THEME = Theme({
    "info": "cyan",
    "success": "bold green",
    "warning": "bold yellow",
    "error": "bold red",
    "flycors": "bold magenta",
    "dim": "dim",
})

console = Console(theme=FLYCORS_THEME)


def _render(value: Any) -> str:
    if isinstance(value, bool):
        return "[success]true[/success]" if value else "[dim]false[/dim]"
    if value is None:
        return "[dim]none[/dim]"
    if isinstance(value, (list, tuple)):
        return escape(", ".join(str(v) for v in value)) if value else "[dim](empty)[/dim]"
    return escape(str(value))


def print_policy_table(policy: Mapping[str, Any]) -> None:
    """Print a normalized policy as a two-column table."""
    table = Table(title="[flycors]CORS Policy[/flycors]", show_header=False, border_style="dim")
    table.add_column("Option", style="info")
    table.add_column("Value")
    for key, value in policy.items():
        table.add_row(key, _render(value))
    console.print(table)


def print_headers_table(title: str, headers: Mapping[str, str]) -> None:
    """Print response headers, or a note when there are none."""
    if not headers:
        console.print(f"[warning]{title}: no headers[/warning]")
        return
    table = Table(title=title, border_style="dim")
    table.add_column("Header", style="info")
    table.add_column("Value")
    for name, value in headers.items():
        table.add_row(escape(name), escape(value))
    console.print(table)
