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
"""Policy normalization — loosely-typed CORS options to a :class:`CorsPolicy`.

Options may be spelled in camelCase (``allowedOrigins``) or snake_case
(``allowed_origins``); camelCase wins when both are given. Unknown keys
are ignored.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from typing import Any

import structlog

from flycors.cors.policy import CorsPolicy
from flycors.kernel.exceptions import InvalidConfigurationException

logger = structlog.get_logger("flycors.cors")

WILDCARD = "*"

# Canonical option name -> accepted input keys, highest precedence first.
OPTION_ALIASES: dict[str, tuple[str, ...]] = {
    "allowed_origins": ("allowedOrigins", "allowed_origins"),
    "allowed_origin_patterns": (
        "allowedOriginPatterns",
        "allowedOriginsPatterns",
        "allowed_origin_patterns",
        "allowed_origins_patterns",
    ),
    "allowed_methods": ("allowedMethods", "allowed_methods"),
    "allowed_headers": ("allowedHeaders", "allowed_headers"),
    "exposed_headers": ("exposedHeaders", "exposed_headers"),
    "supports_credentials": ("supportsCredentials", "supports_credentials"),
    "max_age": ("maxAge", "max_age"),
}

_LIST_OPTIONS = (
    "allowed_origins",
    "allowed_origin_patterns",
    "allowed_methods",
    "allowed_headers",
    "exposed_headers",
)

_DEFAULT_MAX_AGE = 0
_MISSING = object()


def convert_wildcard_to_pattern(origin: str) -> re.Pattern[str]:
    """Compile a wildcard origin such as ``*.example.com`` into an anchored pattern.

    Every ``*`` matches zero or more characters; everything else is literal.
    The match is case-sensitive and spans the whole origin.
    """
    escaped = re.escape(origin).replace(re.escape(WILDCARD), ".*")
    return re.compile(rf"^{escaped}\Z")


def normalize_options(options: Mapping[str, Any] | None = None) -> CorsPolicy:
    """Build a canonical :class:`CorsPolicy` from raw configuration options.

    Raises:
        InvalidConfigurationException: a list option is not list-like, holds a
            non-string entry or an invalid pattern, or ``max_age`` is not an
            integer.
    """
    raw = _resolve_aliases(options or {})

    if raw["exposed_headers"] is False:
        raw["exposed_headers"] = []

    for name in _LIST_OPTIONS:
        _require_string_list(name, raw[name])

    origins = _unique(raw["allowed_origins"])
    methods = _unique(m.upper() for m in raw["allowed_methods"])
    headers = _unique(h.lower() for h in raw["allowed_headers"])

    patterns = [_compile_pattern(p) for p in raw["allowed_origin_patterns"]]
    patterns.extend(
        convert_wildcard_to_pattern(origin)
        for origin in origins
        if WILDCARD in origin and origin != WILDCARD
    )

    policy = CorsPolicy(
        allowed_origins=origins,
        allowed_origin_patterns=tuple(patterns),
        allow_all_origins=WILDCARD in origins,
        allowed_methods=methods,
        allow_all_methods=WILDCARD in methods,
        allowed_headers=headers,
        allow_all_headers=WILDCARD in headers,
        exposed_headers=_unique(raw["exposed_headers"]),
        supports_credentials=_to_bool(raw["supports_credentials"]),
        max_age=_to_max_age(raw["max_age"]),
    )

    if policy.allow_all_origins and policy.supports_credentials:
        logger.warning(
            "cors_wildcard_with_credentials",
            detail="allowed origins contain '*' with credentials; request origins will be echoed",
        )
    logger.debug(
        "cors_policy_normalized",
        origins=len(policy.allowed_origins),
        patterns=len(policy.allowed_origin_patterns),
        allow_all_origins=policy.allow_all_origins,
        allow_all_methods=policy.allow_all_methods,
        allow_all_headers=policy.allow_all_headers,
        supports_credentials=policy.supports_credentials,
        max_age=policy.max_age,
    )
    return policy


def _resolve_aliases(options: Mapping[str, Any]) -> dict[str, Any]:
    resolved: dict[str, Any] = {}
    for name, keys in OPTION_ALIASES.items():
        if name == "max_age":
            # An explicit null max age is meaningful: it disables the header.
            value: Any = _MISSING
            for key in keys:
                if key in options:
                    value = options[key]
                    break
            resolved[name] = _DEFAULT_MAX_AGE if value is _MISSING else value
            continue

        value = None
        for key in keys:
            if options.get(key) is not None:
                value = options[key]
                break
        if value is None:
            value = False if name == "supports_credentials" else []
        resolved[name] = value
    return resolved


def _require_string_list(name: str, value: Any) -> None:
    if not isinstance(value, (list, tuple, set, frozenset)):
        raise InvalidConfigurationException(
            f"CORS option `{name}` should be a list",
            code="CORS_INVALID_OPTION",
            context={"option": name, "type": type(value).__name__},
        )
    for entry in value:
        if not isinstance(entry, str):
            raise InvalidConfigurationException(
                f"CORS option `{name}` should only contain strings, got {entry!r}",
                code="CORS_INVALID_OPTION",
                context={"option": name, "type": type(entry).__name__},
            )


def _compile_pattern(pattern: str) -> re.Pattern[str]:
    try:
        return re.compile(pattern)
    except re.error as exc:
        raise InvalidConfigurationException(
            f"CORS option `allowed_origin_patterns` has an invalid pattern {pattern!r}: {exc}",
            code="CORS_INVALID_OPTION",
            context={"option": "allowed_origin_patterns", "pattern": pattern},
        ) from exc


def _unique(values: Iterable[str]) -> tuple[str, ...]:
    return tuple(dict.fromkeys(values))


def _to_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ("true", "1", "yes")
    return bool(value)


def _to_max_age(value: Any) -> int | None:
    if value is None:
        return None
    if isinstance(value, int):
        return int(value)
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            pass
    raise InvalidConfigurationException(
        f"CORS option `max_age` should be an integer or null, got {value!r}",
        code="CORS_INVALID_OPTION",
        context={"option": "max_age", "type": type(value).__name__},
    )
