#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""nativepack command-line interface entrypoint."""

from __future__ import annotations

import os
import sys

from attrs import evolve
import click
from provide.foundation import CLIContext, TelemetryConfig, get_hub
from provide.foundation.utils import get_version

from nativepack.commands.build import build_command
from nativepack.config import NativepackRuntimeConfig

# Set up Windows Unicode support early
if sys.platform == "win32":
    if not os.environ.get("PYTHONIOENCODING"):
        os.environ["PYTHONIOENCODING"] = "utf-8"
    if not os.environ.get("PYTHONUTF8"):
        os.environ["PYTHONUTF8"] = "1"

__version__ = get_version("nativepack", caller_file=__file__)


@click.group(context_settings=dict(help_option_names=["-h", "--help"]))
@click.version_option(
    __version__,
    "-V",
    "--version",
    prog_name="nativepack",
    message="%(prog)s version %(version)s",
)
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Turn any website into a desktop app.

    Configure logging via environment variables:
    - NATIVEPACK_LOG_LEVEL: Set log level for nativepack (trace, debug, info, warning, error)
    - NATIVEPACK_SETUP_LOG_LEVEL: Control Foundation's initialization logs
    - NATIVEPACK_PACKAGER_COMMAND: Command that runs the Electron packager
    - PROVIDE_LOG_FILE: Write logs to file
    """
    ctx.ensure_object(dict)

    runtime_config = NativepackRuntimeConfig.from_env()
    cli_ctx = CLIContext.from_env()
    base_telemetry = TelemetryConfig.from_env()

    telemetry_config = evolve(
        base_telemetry,
        service_name="nativepack",
        logging=evolve(
            base_telemetry.logging,
            default_level=runtime_config.log_level,  # type: ignore[arg-type]
        ),
    )

    hub = get_hub()
    hub.initialize_foundation(telemetry_config)

    ctx.obj["cli_context"] = cli_ctx
    ctx.obj["runtime_config"] = runtime_config
    ctx.obj["log"] = cli_ctx.logger


cli.add_command(build_command, name="build")

main = cli

if __name__ == "__main__":
    cli()

# 🌐📦🔚
