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
"""flycors CORS engine — policy normalization and header decisions.

Framework-agnostic: depends only on the :mod:`flycors.cors.ports` protocols.
"""

from flycors.cors.http import SimpleRequest, SimpleResponse
from flycors.cors.normalizer import OPTION_ALIASES, convert_wildcard_to_pattern, normalize_options
from flycors.cors.policy import CorsPolicy
from flycors.cors.ports import RequestView, ResponseBuilder, ResponseFactory
from flycors.cors.service import CorsService

__all__ = [
    "OPTION_ALIASES",
    "CorsPolicy",
    "CorsService",
    "RequestView",
    "ResponseBuilder",
    "ResponseFactory",
    "SimpleRequest",
    "SimpleResponse",
    "convert_wildcard_to_pattern",
    "normalize_options",
]
