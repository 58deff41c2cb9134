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
"""Starlette implementations of the flycors HTTP ports."""

from __future__ import annotations

from starlette.datastructures import Headers, MutableHeaders
from starlette.requests import HTTPConnection
from starlette.responses import Response
from starlette.types import Scope


class StarletteRequestView:
    """Adapts Starlette request headers to :class:`~flycors.cors.ports.RequestView`."""

    __slots__ = ("_headers", "_method")

    def __init__(self, headers: Headers, method: str) -> None:
        self._headers = headers
        self._method = method.upper()

    @classmethod
    def from_request(cls, request: HTTPConnection) -> StarletteRequestView:
        return cls(request.headers, request.scope.get("method", "GET"))

    @classmethod
    def from_scope(cls, scope: Scope) -> StarletteRequestView:
        return cls(Headers(scope=scope), scope.get("method", "GET"))

    @property
    def method(self) -> str:
        return self._method

    def has_header(self, name: str) -> bool:
        return name in self._headers

    def get_header(self, name: str) -> str | None:
        values = self._headers.getlist(name)
        if not values:
            return None
        return ", ".join(values)


class StarletteResponseBuilder:
    """Adapts Starlette ``MutableHeaders`` to :class:`~flycors.cors.ports.ResponseBuilder`.

    Wraps either a :class:`starlette.responses.Response` or the headers of an
    ASGI ``http.response.start`` message.
    """

    def __init__(self, headers: MutableHeaders, status_code: int = 200, response: Response | None = None) -> None:
        self.headers = headers
        self.status_code = status_code
        self.response = response

    @classmethod
    def for_response(cls, response: Response) -> StarletteResponseBuilder:
        return cls(response.headers, response.status_code, response)

    def has_header(self, name: str) -> bool:
        return name in self.headers

    def get_header(self, name: str) -> str | None:
        values = self.headers.getlist(name)
        if not values:
            return None
        return ", ".join(values)

    def set_header(self, name: str, value: str) -> None:
        self.headers[name] = value

    def append_header(self, name: str, value: str) -> None:
        self.headers.append(name, value)


def starlette_response_factory(status_code: int) -> StarletteResponseBuilder:
    """ResponseFactory producing empty Starlette responses."""
    return StarletteResponseBuilder.for_response(Response(status_code=status_code))
