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
"""CorsService — classifies requests and writes ``Access-Control-*`` headers."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import structlog

from flycors.core.config import Config
from flycors.cors import headers as h
from flycors.cors.http import SimpleResponse
from flycors.cors.normalizer import normalize_options
from flycors.cors.policy import CorsPolicy
from flycors.cors.ports import RequestView, ResponseBuilder, ResponseFactory

logger = structlog.get_logger("flycors.cors")

DEFAULT_CONFIG_PREFIX = "flycors.cors"


class CorsService:
    """Evaluates a :class:`CorsPolicy` against requests.

    The service keeps no per-request state. Every public operation reads the
    current policy once, so a concurrent :meth:`reconfigure` is observed
    either entirely or not at all.

    Usage::

        cors = CorsService({"allowedOrigins": ["https://app.example.com"]})

        if cors.is_preflight_request(request):
            return cors.handle_preflight_request(request)
        response = handler(request)
        cors.add_actual_request_headers(response, request)
    """

    def __init__(
        self,
        options: Mapping[str, Any] | CorsPolicy | None = None,
        *,
        response_factory: ResponseFactory | None = None,
    ) -> None:
        self._policy = _as_policy(options)
        self._response_factory: ResponseFactory = response_factory or SimpleResponse

    @classmethod
    def from_config(
        cls,
        config: Config,
        prefix: str = DEFAULT_CONFIG_PREFIX,
        *,
        response_factory: ResponseFactory | None = None,
    ) -> CorsService:
        """Build a service from the options stored under *prefix* in *config*."""
        return cls(config.get_section(prefix), response_factory=response_factory)

    @property
    def policy(self) -> CorsPolicy:
        return self._policy

    def reconfigure(self, options: Mapping[str, Any] | CorsPolicy) -> CorsPolicy:
        """Replace the policy; the new one is fully built before it becomes visible.

        If normalization fails the previous policy stays in effect.
        """
        policy = _as_policy(options)
        self._policy = policy
        logger.info("cors_policy_reconfigured", **_summary(policy))
        return policy

    # ------------------------------------------------------------------
    # Request classification
    # ------------------------------------------------------------------

    def is_cors_request(self, request: RequestView) -> bool:
        return request.has_header(h.ORIGIN)

    def is_preflight_request(self, request: RequestView) -> bool:
        return request.method.upper() == h.PREFLIGHT_METHOD and request.has_header(h.REQUEST_METHOD)

    def is_origin_allowed(self, request: RequestView) -> bool:
        return self._origin_allowed(self._policy, request)

    # ------------------------------------------------------------------
    # Response decoration
    # ------------------------------------------------------------------

    def handle_preflight_request(self, request: RequestView) -> ResponseBuilder:
        """Build a ``204 No Content`` preflight response for *request*."""
        response = self._response_factory(h.PREFLIGHT_STATUS)
        return self.add_preflight_request_headers(response, request)

    def add_preflight_request_headers(self, response: ResponseBuilder, request: RequestView) -> ResponseBuilder:
        policy = self._policy
        self._configure_allowed_origin(policy, response, request)

        if response.has_header(h.ALLOW_ORIGIN):
            self._configure_allow_credentials(policy, response)
            self._configure_allowed_methods(policy, response, request)
            self._configure_allowed_headers(policy, response, request)
            self._configure_max_age(policy, response)

        return response

    def add_actual_request_headers(self, response: ResponseBuilder, request: RequestView) -> ResponseBuilder:
        policy = self._policy
        self._configure_allowed_origin(policy, response, request)

        if response.has_header(h.ALLOW_ORIGIN):
            self._configure_allow_credentials(policy, response)
            self._configure_exposed_headers(policy, response)

        return response

    def vary_header(self, response: ResponseBuilder, header: str) -> ResponseBuilder:
        """Add *header* to ``Vary`` unless it is already listed there."""
        current = response.get_header(h.VARY)
        if current is None:
            response.set_header(h.VARY, header)
        elif header not in current.split(", "):
            response.set_header(h.VARY, f"{current}, {header}")
        return response

    # ------------------------------------------------------------------
    # Individual headers
    # ------------------------------------------------------------------

    def _origin_allowed(self, policy: CorsPolicy, request: RequestView) -> bool:
        if policy.allow_all_origins:
            return True
        origin = request.get_header(h.ORIGIN)
        if origin is None:
            return False
        return policy.matches_origin(origin)

    def _configure_allowed_origin(self, policy: CorsPolicy, response: ResponseBuilder, request: RequestView) -> None:
        if policy.allow_all_origins and not policy.supports_credentials:
            # Safe and cacheable: nothing depends on the request.
            response.set_header(h.ALLOW_ORIGIN, "*")
            return

        single_origin = policy.single_origin
        if single_origin is not None:
            response.set_header(h.ALLOW_ORIGIN, single_origin)
            return

        if self.is_cors_request(request) and self._origin_allowed(policy, request):
            response.set_header(h.ALLOW_ORIGIN, request.get_header(h.ORIGIN) or "")
        elif self.is_cors_request(request):
            logger.debug("cors_origin_rejected", origin=request.get_header(h.ORIGIN))

        self.vary_header(response, h.ORIGIN)

    def _configure_allowed_methods(self, policy: CorsPolicy, response: ResponseBuilder, request: RequestView) -> None:
        if policy.allow_all_methods:
            allow_methods = (request.get_header(h.REQUEST_METHOD) or "").upper()
            self.vary_header(response, h.REQUEST_METHOD)
        else:
            allow_methods = ", ".join(policy.allowed_methods)
        response.set_header(h.ALLOW_METHODS, allow_methods)

    def _configure_allowed_headers(self, policy: CorsPolicy, response: ResponseBuilder, request: RequestView) -> None:
        if policy.allow_all_headers:
            allow_headers = request.get_header(h.REQUEST_HEADERS) or ""
            self.vary_header(response, h.REQUEST_HEADERS)
        else:
            allow_headers = ", ".join(policy.allowed_headers)
        response.set_header(h.ALLOW_HEADERS, allow_headers)

    def _configure_allow_credentials(self, policy: CorsPolicy, response: ResponseBuilder) -> None:
        if policy.supports_credentials:
            response.set_header(h.ALLOW_CREDENTIALS, "true")

    def _configure_exposed_headers(self, policy: CorsPolicy, response: ResponseBuilder) -> None:
        if policy.exposed_headers:
            response.set_header(h.EXPOSE_HEADERS, ", ".join(policy.exposed_headers))

    def _configure_max_age(self, policy: CorsPolicy, response: ResponseBuilder) -> None:
        if policy.max_age is not None:
            response.set_header(h.MAX_AGE, str(policy.max_age))


def _as_policy(options: Mapping[str, Any] | CorsPolicy | None) -> CorsPolicy:
    if isinstance(options, CorsPolicy):
        return options
    return normalize_options(options)


def _summary(policy: CorsPolicy) -> dict[str, Any]:
    return {
        "origins": len(policy.allowed_origins),
        "patterns": len(policy.allowed_origin_patterns),
        "allow_all_origins": policy.allow_all_origins,
        "supports_credentials": policy.supports_credentials,
    }
