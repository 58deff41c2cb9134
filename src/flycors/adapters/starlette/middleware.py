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
"""CORS middleware for Starlette — pure ASGI."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import structlog
from starlette.datastructures import MutableHeaders
from starlette.responses import Response
from starlette.types import ASGIApp, Receive, Scope, Send

from flycors.adapters.starlette.http import (
    StarletteRequestView,
    StarletteResponseBuilder,
    starlette_response_factory,
)
from flycors.cors import headers as h
from flycors.cors.policy import CorsPolicy
from flycors.cors.service import CorsService

logger = structlog.get_logger("flycors.web")


class CorsMiddleware:
    """Answers preflight requests and adds CORS headers to every other response.

    Preflight requests (``OPTIONS`` with ``Access-Control-Request-Method``)
    are answered with ``204 No Content`` without calling the wrapped app.
    Other requests reach the app and get the actual-request headers on the
    way out; a non-preflight ``OPTIONS`` also varies on
    ``Access-Control-Request-Method``.

    A shared *service* must be built with
    ``response_factory=starlette_response_factory`` so that its preflight
    responses can be sent as-is.

    Uses raw ASGI protocol instead of ``BaseHTTPMiddleware`` so that
    streaming responses are left untouched.

    Usage::

        app = Starlette(
            routes=routes,
            middleware=[Middleware(CorsMiddleware, options={"allowedOrigins": ["*"]})],
        )
    """

    def __init__(
        self,
        app: ASGIApp,
        service: CorsService | None = None,
        options: Mapping[str, Any] | CorsPolicy | None = None,
    ) -> None:
        self.app = app
        self._service = service or CorsService(options, response_factory=starlette_response_factory)

    @property
    def service(self) -> CorsService:
        return self._service

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        cors = self._service
        request = StarletteRequestView.from_scope(scope)

        if cors.is_preflight_request(request):
            builder = cors.handle_preflight_request(request)
            cors.vary_header(builder, h.REQUEST_METHOD)
            response = getattr(builder, "response", None)
            if not isinstance(response, Response):
                raise TypeError(
                    "CorsMiddleware needs a CorsService whose response_factory builds Starlette responses; "
                    "pass response_factory=starlette_response_factory"
                )
            logger.debug(
                "cors_preflight",
                path=scope.get("path"),
                origin=request.get_header(h.ORIGIN),
                request_method=request.get_header(h.REQUEST_METHOD),
                allowed=builder.has_header(h.ALLOW_ORIGIN),
            )
            await response(scope, receive, send)
            return

        async def send_with_cors(message: Any) -> None:
            if message["type"] == "http.response.start":
                builder = StarletteResponseBuilder(MutableHeaders(scope=message), message["status"])
                if request.method == h.PREFLIGHT_METHOD:
                    cors.vary_header(builder, h.REQUEST_METHOD)
                cors.add_actual_request_headers(builder, request)
            await send(message)

        await self.app(scope, receive, send_with_cors)
