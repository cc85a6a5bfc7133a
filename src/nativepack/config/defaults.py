#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Centralized default values for nativepack."""

from __future__ import annotations

from pathlib import Path

# =================================
# Output defaults
# =================================
DEFAULT_OUTPUT_DIRNAME = "output-apps"
DEFAULT_APP_NAME = "APP"
DEFAULT_APP_VERSION = "1.0.0"
DEFAULT_WIDTH = 1280
DEFAULT_HEIGHT = 800

# =================================
# Packaging engine
# =================================
DEFAULT_PACKAGER_COMMAND = "npx --yes @electron/packager"
DEFAULT_ELECTRON_VERSION: str | None = None

# =================================
# Platforms
# =================================
PLATFORM_DARWIN = "darwin"
PLATFORM_MAS = "mas"
PLATFORM_LINUX = "linux"
PLATFORM_WINDOWS = "win32"

MAC_PLATFORMS = frozenset({PLATFORM_DARWIN, PLATFORM_MAS})
SUPPORTED_PLATFORMS = frozenset({PLATFORM_DARWIN, PLATFORM_MAS, PLATFORM_LINUX, PLATFORM_WINDOWS})
SUPPORTED_ARCHES = frozenset({"ia32", "x64", "armv7l", "arm64", "universal"})

PLATFORM_ALIASES = {
    "mac": PLATFORM_DARWIN,
    "macos": PLATFORM_DARWIN,
    "osx": PLATFORM_DARWIN,
    "windows": PLATFORM_WINDOWS,
    "win": PLATFORM_WINDOWS,
}

ARCH_ALIASES = {
    "x86_64": "x64",
    "amd64": "x64",
    "aarch64": "arm64",
    "i386": "ia32",
    "i686": "ia32",
    "x86": "ia32",
    "armv7": "armv7l",
}

# =================================
# Tray modes
# =================================
TRAY_MODES = frozenset({"true", "false", "start-in-tray"})

# =================================
# Files inside built apps
# =================================
APP_CONFIG_FILE = "nativepack.json"
APP_TEMPLATE_DIR = Path(__file__).parent.parent / "app_template"
TRAY_ICON_FILE = "tray-icon.png"
PREFERRED_ICON_EXTENSIONS = {
    PLATFORM_LINUX: ".png",
    PLATFORM_WINDOWS: ".ico",
    PLATFORM_DARWIN: ".icns",
    PLATFORM_MAS: ".icns",
}

# =================================
# Options Windows resources need Wine for off-Windows
# =================================
OPTIONS_REQUIRING_WINDOWS_FOR_WINDOWS_BUILD = (
    "icon",
    "app_copyright",
    "app_version",
    "build_version",
    "version_string",
    "win32metadata",
)

# =================================
# Linux integration
# =================================
LINUX_INSTALL_ROOT = Path("/opt")
DESKTOP_ENTRY_CATEGORIES = "Network;WebBrowser;"
DESKTOP_ENTRY_KEYWORDS = "messenger;chat;"

# =================================
# File permissions defaults
# =================================
DEFAULT_TEMP_DIR_PERMS = 0o755
DEFAULT_LAUNCHER_PERMS = 0o755


# 🌐📦🔚
