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
"""'flycors check' — Simulate a request against a configured policy."""

from __future__ import annotations

from pathlib import Path

import click

from flycors.cli.console import console, print_headers_table
from flycors.cli.loader import load_service
from flycors.cors import headers as h
from flycors.cors.http import SimpleRequest, SimpleResponse
from flycors.cors.service import DEFAULT_CONFIG_PREFIX


@click.command()
@click.argument("config_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--method", "-X", default="GET", show_default=True, help="Request method.")
@click.option("--origin", "-o", default=None, help="Value of the Origin request header.")
@click.option("--request-method", default=None, help="Value of Access-Control-Request-Method.")
@click.option("--request-headers", default=None, help="Value of Access-Control-Request-Headers.")
@click.option("--prefix", default=DEFAULT_CONFIG_PREFIX, show_default=True, help="Config section holding the CORS options.")
@click.option("--profile", "profiles", multiple=True, help="Profile overlay to merge (repeatable).")
def check_command(
    config_file: Path,
    method: str,
    origin: str | None,
    request_method: str | None,
    request_headers: str | None,
    prefix: str,
    profiles: tuple[str, ...],
) -> None:
    """Show the CORS headers CONFIG_FILE produces for a simulated request."""
    service = load_service(config_file, prefix, profiles)

    request_header_pairs: list[tuple[str, str]] = []
    if origin is not None:
        request_header_pairs.append((h.ORIGIN, origin))
    if request_method is not None:
        request_header_pairs.append((h.REQUEST_METHOD, request_method))
    if request_headers is not None:
        request_header_pairs.append((h.REQUEST_HEADERS, request_headers))
    request = SimpleRequest(method, request_header_pairs)

    if service.is_preflight_request(request):
        kind = "preflight"
        response = service.handle_preflight_request(request)
        service.vary_header(response, h.REQUEST_METHOD)
    else:
        kind = "actual"
        response = SimpleResponse()
        if request.method == h.PREFLIGHT_METHOD:
            service.vary_header(response, h.REQUEST_METHOD)
        service.add_actual_request_headers(response, request)

    allowed = service.is_origin_allowed(request)
    verdict = "[success]allowed[/success]" if allowed else "[error]not allowed[/error]"
    console.print(f"\n[flycors]{kind} request[/flycors]  origin {verdict}  status {response.status_code}\n")

    headers = response.to_dict() if isinstance(response, SimpleResponse) else {}
    print_headers_table("Response headers", headers)
