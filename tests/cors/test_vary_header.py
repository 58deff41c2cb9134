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
"""Tests for CorsService.vary_header accumulation."""

from flycors.cors.http import SimpleResponse
from flycors.cors.service import CorsService


class TestVaryHeader:
    def setup_method(self):
        self.cors = CorsService()

    def test_creates_header(self):
        response = self.cors.vary_header(SimpleResponse(), "Origin")
        assert response.get_header("Vary") == "Origin"

    def test_returns_same_response(self):
        response = SimpleResponse()
        assert self.cors.vary_header(response, "Origin") is response

    def test_idempotent(self):
        response = SimpleResponse()
        self.cors.vary_header(response, "Origin")
        self.cors.vary_header(response, "Origin")
        assert response.get_header("Vary") == "Origin"

    def test_accumulates_in_insertion_order(self):
        response = SimpleResponse()
        self.cors.vary_header(response, "Origin")
        self.cors.vary_header(response, "Access-Control-Request-Method")
        assert response.get_header("Vary") == "Origin, Access-Control-Request-Method"

    def test_preserves_existing_value(self):
        response = SimpleResponse(headers={"Vary": "Content-Type"})
        self.cors.vary_header(response, "Origin")
        assert response.get_header("Vary") == "Content-Type, Origin"

    def test_existing_token_in_list_is_not_repeated(self):
        response = SimpleResponse(headers={"Vary": "Accept-Encoding, Origin"})
        self.cors.vary_header(response, "Origin")
        assert response.get_header("Vary") == "Accept-Encoding, Origin"

    def test_token_match_is_case_sensitive(self):
        response = SimpleResponse(headers={"Vary": "origin"})
        self.cors.vary_header(response, "Origin")
        assert response.get_header("Vary") == "origin, Origin"

    def test_repeated_vary_lines_are_combined(self):
        response = SimpleResponse(headers=[("Vary", "Accept"), ("Vary", "Cookie")])
        self.cors.vary_header(response, "Origin")
        assert response.headers == [("Vary", "Accept, Cookie, Origin")]
