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
"""Exception hierarchy for flycors.

All library exceptions inherit from FlyCorsException so callers can catch
one base type at configuration time.

Categories:
- ConfigurationException: problems with the options a policy is built from
"""

from __future__ import annotations


class FlyCorsException(Exception):
    """Base exception for all flycors errors.

    Carries an optional error code and context dict for structured error data.

    Args:
        message: Human-readable error description.
        code: Machine-readable error code (e.g. "CORS_INVALID_OPTION").
        context: Arbitrary key-value pairs for error context and debugging.
    """

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.context: dict = context if context is not None else {}


class ConfigurationException(FlyCorsException):
    """Configuration could not be loaded or interpreted."""


class InvalidConfigurationException(ConfigurationException):
    """A CORS option has the wrong shape (e.g. a string where a list is required).

    Raised only while normalizing options into a policy; request evaluation
    never raises.
    """
