#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Host inspection helpers: OS, privileges, toolchains and scratch directories."""

from __future__ import annotations

import os
from pathlib import Path
import shutil
import tempfile

from provide.foundation.platform import get_arch_name, get_os_name

from nativepack.config.defaults import (
    DEFAULT_TEMP_DIR_PERMS,
    PLATFORM_DARWIN,
    PLATFORM_LINUX,
    PLATFORM_WINDOWS,
)

_HOST_PLATFORMS = {
    "darwin": PLATFORM_DARWIN,
    "linux": PLATFORM_LINUX,
    "windows": PLATFORM_WINDOWS,
}


def host_platform() -> str:
    """Return the host OS in packaging-engine vocabulary (darwin, linux, win32)."""
    os_name = get_os_name()
    return _HOST_PLATFORMS.get(os_name, os_name)


def host_arch() -> str:
    """Return the host architecture name as reported by Foundation."""
    return get_arch_name()


def is_windows() -> bool:
    return host_platform() == PLATFORM_WINDOWS


def is_macos() -> bool:
    return host_platform() == PLATFORM_DARWIN


def has_wine() -> bool:
    """Whether Wine is available to compile Windows resources off-Windows."""
    return shutil.which("wine") is not None or shutil.which("wine64") is not None


def is_windows_admin() -> bool:
    """Whether the current process holds administrator rights on Windows."""
    try:
        import ctypes

        return bool(ctypes.windll.shell32.IsUserAnAdmin())  # type: ignore[attr-defined]
    except (AttributeError, OSError):
        return False


def is_superuser() -> bool:
    """Whether the process runs as root on a POSIX host."""
    geteuid = getattr(os, "geteuid", None)
    return geteuid is not None and geteuid() == 0


def get_temp_dir(prefix: str, mode: int = DEFAULT_TEMP_DIR_PERMS, base: str | None = None) -> Path:
    """Create a fresh, uniquely named scratch directory and return it.

    The directory is not removed automatically; callers delete it at known points.
    """
    path = Path(tempfile.mkdtemp(prefix=f"nativepack-{prefix}-", dir=base))
    path.chmod(mode)
    return path


# 🌐📦🔚
