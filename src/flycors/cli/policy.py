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
"""'flycors policy' — Show the normalized policy for a configuration file."""

from __future__ import annotations

from pathlib import Path

import click

from flycors.cli.console import console, print_policy_table
from flycors.cli.loader import load_service
from flycors.cors.service import DEFAULT_CONFIG_PREFIX


@click.command()
@click.argument("config_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--prefix", default=DEFAULT_CONFIG_PREFIX, show_default=True, help="Config section holding the CORS options.")
@click.option("--profile", "profiles", multiple=True, help="Profile overlay to merge (repeatable).")
def policy_command(config_file: Path, prefix: str, profiles: tuple[str, ...]) -> None:
    """Normalize the CORS options in CONFIG_FILE and print the result."""
    service = load_service(config_file, prefix, profiles)
    print_policy_table(service.policy.describe())

    if service.policy.allow_all_origins and service.policy.supports_credentials:
        console.print(
            "[warning]![/warning] '*' origins with credentials: the request Origin is echoed instead of '*'."
        )
