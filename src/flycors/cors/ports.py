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
"""HTTP ports — the request/response capabilities the CORS engine relies on.

Host frameworks adapt their own request and response objects to these
protocols so that vendor types (e.g. Starlette) stay in the adapter layer.
Header name lookups are case-insensitive in every implementation.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol, runtime_checkable


@runtime_checkable
class RequestView(Protocol):
    """Read-only view of an incoming HTTP request."""

    @property
    def method(self) -> str:
        """The request method, e.g. ``"OPTIONS"``."""
        ...

    def has_header(self, name: str) -> bool:
        """Return ``True`` if the header is present, even with an empty value."""
        ...

    def get_header(self, name: str) -> str | None:
        """Return the header value (repeated values joined by ``", "``) or ``None``."""
        ...


@runtime_checkable
class ResponseBuilder(Protocol):
    """Mutable HTTP response headers plus a status code."""

    status_code: int

    def has_header(self, name: str) -> bool: ...

    def get_header(self, name: str) -> str | None: ...

    def set_header(self, name: str, value: str) -> None:
        """Replace every existing value of *name* with *value*."""
        ...

    def append_header(self, name: str, value: str) -> None:
        """Add *value* without removing existing values of *name*."""
        ...


# Builds an empty response with the given status code.
ResponseFactory = Callable[[int], ResponseBuilder]
