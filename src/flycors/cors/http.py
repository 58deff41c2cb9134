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
"""Framework-free request/response implementations of the HTTP ports.

Used as the default response factory, by the CLI to simulate requests, and
as test doubles.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping


def _header_pairs(headers: Mapping[str, str] | Iterable[tuple[str, str]] | None) -> list[tuple[str, str]]:
    if headers is None:
        return []
    if isinstance(headers, Mapping):
        return [(str(k), str(v)) for k, v in headers.items()]
    return [(str(k), str(v)) for k, v in headers]


class _HeaderList:
    """Ordered, case-insensitive multi-value header storage."""

    def __init__(self, headers: Mapping[str, str] | Iterable[tuple[str, str]] | None = None) -> None:
        self.headers: list[tuple[str, str]] = _header_pairs(headers)

    def has_header(self, name: str) -> bool:
        key = name.lower()
        return any(k.lower() == key for k, _ in self.headers)

    def get_header(self, name: str) -> str | None:
        key = name.lower()
        values = [v for k, v in self.headers if k.lower() == key]
        if not values:
            return None
        return ", ".join(values)

    def to_dict(self) -> dict[str, str]:
        """Combined header values keyed by the first-seen spelling of each name."""
        result: dict[str, str] = {}
        for name, _ in self.headers:
            if not any(existing.lower() == name.lower() for existing in result):
                value = self.get_header(name)
                if value is not None:
                    result[name] = value
        return result


class SimpleRequest(_HeaderList):
    """An in-memory :class:`~flycors.cors.ports.RequestView`."""

    def __init__(
        self,
        method: str = "GET",
        headers: Mapping[str, str] | Iterable[tuple[str, str]] | None = None,
    ) -> None:
        super().__init__(headers)
        self._method = method.upper()

    @property
    def method(self) -> str:
        return self._method

    def __repr__(self) -> str:
        return f"SimpleRequest(method={self._method!r}, headers={self.headers!r})"


class SimpleResponse(_HeaderList):
    """An in-memory :class:`~flycors.cors.ports.ResponseBuilder`."""

    def __init__(
        self,
        status_code: int = 200,
        headers: Mapping[str, str] | Iterable[tuple[str, str]] | None = None,
    ) -> None:
        super().__init__(headers)
        self.status_code = status_code

    def set_header(self, name: str, value: str) -> None:
        key = name.lower()
        self.headers = [(k, v) for k, v in self.headers if k.lower() != key]
        self.headers.append((name, value))

    def append_header(self, name: str, value: str) -> None:
        self.headers.append((name, value))

    def __repr__(self) -> str:
        return f"SimpleResponse(status_code={self.status_code!r}, headers={self.headers!r})"
