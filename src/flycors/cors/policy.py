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
"""Canonical CORS policy value object."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class CorsPolicy:
    """Normalized Cross-Origin Resource Sharing policy.

    Built by :func:`flycors.cors.normalizer.normalize_options`; constructing
    one directly skips validation. Collections are de-duplicated tuples in
    configuration order, so joined header values are deterministic and the
    policy can be shared freely between concurrent requests.

    Attributes:
        allowed_origins: Exact-match origins, including any wildcard entries
            as written in the configuration.
        allowed_origin_patterns: Compiled patterns; an origin matching any of
            them is allowed.
        allow_all_origins: ``True`` when ``"*"`` is among the origins.
        allowed_methods: Uppercase method tokens.
        allow_all_methods: ``True`` when ``"*"`` is among the methods.
        allowed_headers: Lowercase header names.
        allow_all_headers: ``True`` when ``"*"`` is among the headers.
        exposed_headers: Headers listed in ``Access-Control-Expose-Headers``.
        supports_credentials: Emit ``Access-Control-Allow-Credentials: true``.
        max_age: Preflight cache lifetime in seconds; ``None`` omits the header.
    """

    allowed_origins: tuple[str, ...] = ()
    allowed_origin_patterns: tuple[re.Pattern[str], ...] = ()
    allow_all_origins: bool = False
    allowed_methods: tuple[str, ...] = ()
    allow_all_methods: bool = False
    allowed_headers: tuple[str, ...] = ()
    allow_all_headers: bool = False
    exposed_headers: tuple[str, ...] = ()
    supports_credentials: bool = False
    max_age: int | None = 0

    @property
    def single_origin(self) -> str | None:
        """The one static origin, when the Allow-Origin value never depends on the request."""
        if self.allow_all_origins or self.allowed_origin_patterns:
            return None
        if len(self.allowed_origins) == 1:
            return self.allowed_origins[0]
        return None

    def matches_origin(self, origin: str) -> bool:
        """Check *origin* against the static origins and the patterns (not the allow-all flag)."""
        if origin in self.allowed_origins:
            return True
        return any(pattern.search(origin) for pattern in self.allowed_origin_patterns)

    def describe(self) -> dict[str, Any]:
        """Plain-data view of the policy, patterns rendered as their source."""
        return {
            "allowed_origins": list(self.allowed_origins),
            "allowed_origin_patterns": [p.pattern for p in self.allowed_origin_patterns],
            "allow_all_origins": self.allow_all_origins,
            "allowed_methods": list(self.allowed_methods),
            "allow_all_methods": self.allow_all_methods,
            "allowed_headers": list(self.allowed_headers),
            "allow_all_headers": self.allow_all_headers,
            "exposed_headers": list(self.exposed_headers),
            "supports_credentials": self.supports_credentials,
            "max_age": self.max_age,
        }
