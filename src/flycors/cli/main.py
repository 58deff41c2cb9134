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
"""flycors CLI — inspect and exercise CORS configuration."""

from __future__ import annotations

import click

from flycors.cli.check import check_command
from flycors.cli.policy import policy_command
from flycors.logging.port import CORS_LOGGER, LOG_FORMATS, LoggingPort, LogSettings
from flycors.logging.structlog_adapter import StructlogAdapter


@click.group()
@click.version_option(package_name="flycors")
@click.option(
    "--log-level",
    default="WARNING",
    show_default=True,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Level for every flycors logger.",
)
@click.option("--log-format", default="console", type=click.Choice(LOG_FORMATS), show_default=True)
@click.option("-v", "--verbose", is_flag=True, help=f"Log each CORS decision ({CORS_LOGGER} at DEBUG).")
@click.pass_context
def cli(ctx: click.Context, log_level: str, log_format: str, verbose: bool) -> None:
    """flycors — CORS policy tooling."""
    obj = ctx.ensure_object(dict)
    logging_port: LoggingPort = obj.setdefault("logging", StructlogAdapter())
    levels = {CORS_LOGGER: "DEBUG"} if verbose else {}
    logging_port.configure(LogSettings(level=log_level.upper(), format=log_format, levels=levels))


cli.add_command(policy_command, name="policy")
cli.add_command(check_command, name="check")
