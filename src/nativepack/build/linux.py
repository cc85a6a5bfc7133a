#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Linux desktop integration: launcher entries and an ``/opt`` install.

Both steps are best-effort. Failures come back as degraded outcomes so the
build itself still succeeds.
"""

from __future__ import annotations

import os
from pathlib import Path
import re
from typing import Any

from provide.foundation import logger
from provide.foundation.file import atomic_write_text
from provide.foundation.file.directory import ensure_dir, safe_rmtree
from provide.foundation.process import run

from nativepack.build.outcome import StepOutcome
from nativepack.config.defaults import (
    DEFAULT_LAUNCHER_PERMS,
    DESKTOP_ENTRY_CATEGORIES,
    DESKTOP_ENTRY_KEYWORDS,
    LINUX_INSTALL_ROOT,
)
from nativepack.exceptions import InstallError, NativepackError
from nativepack.utils.files import copy_tree
from nativepack.utils.platform import is_superuser

MANUAL_INSTALL_HELP = (
    "You can manually copy the app to /opt and the .desktop file to ~/.local/share/applications/"
)


def user_applications_dir() -> Path:
    """Per-user directory desktop environments scan for launchers."""
    data_home = os.environ.get("XDG_DATA_HOME") or str(Path("~/.local/share").expanduser())
    return Path(data_home) / "applications"


def wm_class_name(app_name: str) -> str:
    """Window-manager class the app shell sets: the name without whitespace."""
    return re.sub(r"\s+", "", app_name)


def find_executable_name(app_path: Path, app_name: str) -> str:
    for entry in app_path.iterdir():
        if entry.name == app_name:
            return entry.name
    return app_name


def quote_exec_arg(value: str) -> str:
    """Quote one ``Exec`` argument per the Desktop Entry rules.

    Reserved characters are backslash-escaped inside double quotes, then
    backslashes are doubled again for the string-value layer.
    """
    escaped = re.sub(r'(["`$\\])', r"\\\1", value)
    escaped = escaped.replace("\\", "\\\\").replace("%", "%%")
    return f'"{escaped}"'


def render_desktop_entry(app_name: str, target_url: str, app_root: Path, executable: str) -> str:
    icon_path = app_root / "resources" / "app" / "icon.png"
    return (
        "[Desktop Entry]\n"
        "Version=1.0\n"
        "Type=Application\n"
        f"Name={app_name}\n"
        f"Comment=App for {target_url}\n"
        f"Exec={quote_exec_arg(str(app_root / executable))} %U\n"
        f"Icon={icon_path}\n"
        "Terminal=false\n"
        f"Categories={DESKTOP_ENTRY_CATEGORIES}\n"
        f"StartupWMClass={wm_class_name(app_name)}\n"
        "StartupNotify=true\n"
        "Actions=\n"
        f"Keywords={DESKTOP_ENTRY_KEYWORDS}\n"
        "X-GNOME-UsesNotifications=true\n"
    )


def _write_launcher(path: Path, content: str) -> None:
    atomic_write_text(path, content)
    path.chmod(DEFAULT_LAUNCHER_PERMS)


def create_desktop_launcher(app_path: Path, app_name: str, target_url: str, log: Any = logger) -> StepOutcome:
    """Write ``<name>.desktop`` beside the build directory."""
    try:
        executable = find_executable_name(app_path, app_name)
        desktop_file = app_path.parent / f"{app_name}.desktop"
        _write_launcher(desktop_file, render_desktop_entry(app_name, target_url, app_path, executable))
    except OSError as e:
        log.warning("Failed to create desktop launcher", error=str(e))
        return StepOutcome.degraded(f"Failed to create desktop launcher: {e}")

    log.info(f"Created desktop launcher at {desktop_file}")
    log.info(f'To install it for your user, run: cp "{desktop_file}" {user_applications_dir()}/')
    return StepOutcome.success(desktop_file)


def _sudo(args: list[str], log: Any) -> int:
    log.debug("Running privileged command", command=args)
    result = run(["sudo", *args], check=False, capture_output=True, text=True)
    return result.returncode


def _copy_to_install_root(app_path: Path, opt_path: Path, log: Any) -> None:
    if is_superuser():
        if opt_path.exists():
            safe_rmtree(opt_path)
        copy_tree(app_path, opt_path)
        return

    if _sudo(["rm", "-rf", str(opt_path)], log) != 0:
        log.warning(f"Failed to remove old installation at {opt_path}")
    if _sudo(["cp", "-r", str(app_path), str(opt_path)], log) != 0:
        raise InstallError(f"Failed to copy app to {opt_path}")
    owner = f"{os.getuid()}:{os.getgid()}"
    if _sudo(["chown", "-R", owner, str(opt_path)], log) != 0:
        log.warning(f"Failed to change ownership of {opt_path}", owner=owner)


def install_linux_app(
    app_path: Path,
    app_name: str,
    target_url: str,
    log: Any = logger,
    install_root: Path = LINUX_INSTALL_ROOT,
    desktop_dir: Path | None = None,
) -> StepOutcome:
    """Install the build under ``/opt/<name>`` and register a user launcher.

    Uses ``sudo`` unless already running as root. When ``app_path`` already
    is the install directory (an upgrade of an ``/opt`` install), only the
    launcher is written. Never raises.
    """
    opt_path = install_root / app_name
    desktop_dir = desktop_dir or user_applications_dir()
    desktop_file = desktop_dir / f"{app_name}.desktop"
    log.info(f"Installing {app_name} to {opt_path}...")

    try:
        if app_path.resolve() == opt_path.resolve():
            log.debug("App already lives in the install directory, skipping copy", path=str(opt_path))
        else:
            _copy_to_install_root(app_path, opt_path, log)
        executable = find_executable_name(app_path, app_name)
        ensure_dir(desktop_dir)
        _write_launcher(desktop_file, render_desktop_entry(app_name, target_url, opt_path, executable))
    except (OSError, NativepackError) as e:
        log.warning(f"Failed to install app to {opt_path}", error=str(e))
        log.info(MANUAL_INSTALL_HELP)
        return StepOutcome.degraded(f"Failed to install app to {opt_path}: {e}. {MANUAL_INSTALL_HELP}")

    log.info(f"✅ Installed {app_name} to {opt_path}")
    log.info(f"✅ Desktop launcher installed to {desktop_file}")
    log.info(f"You can now launch {app_name} from your application menu!")
    return StepOutcome.success(opt_path)


def integrate_linux_app(
    app_path: Path,
    app_name: str,
    target_url: str,
    log: Any = logger,
    install_root: Path = LINUX_INSTALL_ROOT,
    desktop_dir: Path | None = None,
) -> list[StepOutcome]:
    """Run both Linux integration steps; each one is independent of the other."""
    return [
        create_desktop_launcher(app_path, app_name, target_url, log),
        install_linux_app(app_path, app_name, target_url, log, install_root=install_root, desktop_dir=desktop_dir),
    ]


# 🌐📦🔚
