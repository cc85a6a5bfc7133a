#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Build command for the nativepack CLI."""

from __future__ import annotations

import click
from provide.foundation.console import perr, pout

from nativepack.build.orchestrator import BuildOrchestrator
from nativepack.config.defaults import TRAY_MODES
from nativepack.console import get_command_logger
from nativepack.exceptions import NativepackError
from nativepack.options.model import BuildRequest

# Get structured logger for this command
log = get_command_logger("build")


@click.command("build")
@click.argument("target_url", required=False)
@click.argument("out", required=False, type=click.Path(file_okay=False, resolve_path=True))
@click.option("--name", "-n", help="App name. Inferred from the URL host when omitted.")
@click.option("--platform", "-p", help="Target platform: linux, win32/windows, darwin/mac/osx, mas.")
@click.option("--arch", "-a", help="Target architecture: x64, ia32, arm64, armv7l, universal.")
@click.option("--icon", "-i", type=click.Path(exists=True, dir_okay=False, resolve_path=True), help="App icon.")
@click.option(
    "--tray",
    type=click.Choice(sorted(TRAY_MODES), case_sensitive=False),
    help="Tray icon mode.",
)
@click.option("--overwrite", is_flag=True, help="Replace an existing output directory.")
@click.option(
    "--upgrade",
    type=click.Path(resolve_path=True),
    help="Rebuild a previously built app, reusing its options.",
)
@click.option("--app-version", help="Version of the app.")
@click.option("--build-version", help="Build version of the app.")
@click.option("--app-copyright", help="Copyright notice embedded in the app metadata.")
@click.option("--electron-version", "-e", help="Electron version to package with.")
@click.option("--width", type=int, help="Initial window width.")
@click.option("--height", type=int, help="Initial window height.")
@click.option("--user-agent", "-u", help="User agent string the app sends.")
@click.option("--single-instance", is_flag=True, help="Allow only one running instance of the app.")
@click.option(
    "--inject",
    multiple=True,
    type=click.Path(exists=True, dir_okay=False, resolve_path=True),
    help="CSS or JS file to inject into every page. Repeatable.",
)
@click.option("--quiet", "-q", is_flag=True, help="Suppress all build output.")
@click.option("--verbose", is_flag=True, help="Let the packaging engine print its own progress.")
@click.pass_context
def build_command(
    ctx: click.Context,
    target_url: str | None,
    out: str | None,
    name: str | None,
    platform: str | None,
    arch: str | None,
    icon: str | None,
    tray: str | None,
    overwrite: bool,
    upgrade: str | None,
    app_version: str | None,
    build_version: str | None,
    app_copyright: str | None,
    electron_version: str | None,
    width: int | None,
    height: int | None,
    user_agent: str | None,
    single_instance: bool,
    inject: tuple[str, ...],
    quiet: bool,
    verbose: bool,
) -> None:
    """Build a desktop app wrapping TARGET_URL into OUT (default: ./output-apps)."""
    request = BuildRequest(
        target_url=target_url,
        name=name,
        platform=platform,
        arch=arch,
        out=out,
        overwrite=overwrite,
        upgrade=upgrade,
        quiet=quiet,
        verbose=verbose,
        icon=icon,
        tray=tray,
        app_copyright=app_copyright,
        app_version=app_version,
        build_version=build_version,
        electron_version=electron_version,
        width=width,
        height=height,
        user_agent=user_agent,
        single_instance=True if single_instance else None,
        inject=inject,
    )
    log.debug("Build command started", target_url=target_url, out=out, upgrade=upgrade)

    obj = ctx.obj or {}
    orchestrator = BuildOrchestrator(runtime_config=obj.get("runtime_config"), log=log)
    try:
        result = orchestrator.build(request)
    except (NativepackError, OSError) as e:
        log.error("Build failed", error=str(e))
        perr(f"❌ Build failed: {e}")
        hint = getattr(e, "hint", None)
        if hint:
            perr(f"   {hint}")
        raise click.Abort() from e

    if quiet:
        return
    for warning in result.warnings:
        perr(f"⚠️  {warning}")
    pout(f"✅ App built to {result.path}")


# 🌐📦🔚
