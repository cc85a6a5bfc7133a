#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Icon preparation and placement for the staged app.

The app shell reads its window and tray icons from fixed names inside its
own directory, so the configured icon has to be copied there before
packaging.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from provide.foundation import logger
from provide.foundation.file import safe_copy

from nativepack.config.defaults import MAC_PLATFORMS, PREFERRED_ICON_EXTENSIONS, TRAY_ICON_FILE
from nativepack.options.model import ResolvedConfig
from nativepack.utils.platform import get_temp_dir


def _pick_icon_format(icon_path: Path, platform: str, log: Any) -> Path:
    preferred = PREFERRED_ICON_EXTENSIONS.get(platform)
    if not preferred or icon_path.suffix.lower() == preferred:
        return icon_path

    sibling = icon_path.with_suffix(preferred)
    if sibling.is_file():
        log.debug("Using sibling icon in preferred format", icon=str(sibling), platform=platform)
        return sibling

    log.warning(
        "Icon is not in the preferred format for the target platform, using it as-is",
        icon=str(icon_path),
        platform=platform,
        preferred=preferred,
    )
    return icon_path


def convert_icon_if_necessary(
    config: ResolvedConfig, log: Any = logger, scratch_base: str | None = None
) -> ResolvedConfig:
    """Point the config at an icon the target platform can use.

    For the macOS family the icon is assembled next to a ``tray-icon.png``
    in a scratch directory, where the tray icon copy expects to find it.
    """
    if not config.engine.icon:
        log.debug("No icon specified, skipping icon conversion")
        return config

    platform = config.engine.platform
    icon_path = Path(config.engine.icon)
    chosen = _pick_icon_format(icon_path, platform, log)

    if platform not in MAC_PLATFORMS or config.features.tray == "false":
        return config if chosen == icon_path else config.with_engine(icon=str(chosen))

    if (chosen.parent / TRAY_ICON_FILE).is_file():
        return config.with_engine(icon=str(chosen))

    tray_source = icon_path if icon_path.suffix.lower() == ".png" else icon_path.with_suffix(".png")
    if not tray_source.is_file():
        log.warning("No PNG icon available for the tray, tray icon will be missing", icon=str(icon_path))
        return config.with_engine(icon=str(chosen))

    icon_dir = get_temp_dir("icons", base=scratch_base)
    assembled = icon_dir / f"icon{chosen.suffix}"
    safe_copy(chosen, assembled, overwrite=True)
    safe_copy(tray_source, icon_dir / TRAY_ICON_FILE, overwrite=True)
    log.debug("Assembled macOS icons", icon_dir=str(icon_dir))
    return config.with_engine(icon=str(assembled))


def copy_icons_if_necessary(config: ResolvedConfig, app_path: Path, log: Any = logger) -> None:
    """Copy icon files into the staged app directory.

    macOS only needs the tray icon (always PNG); Windows and Linux get the
    configured icon as ``icon<ext>``.

    Raises:
        FileNotFoundError: If the source icon does not exist.
    """
    log.debug("Copying icons if necessary")
    if not config.engine.icon:
        log.debug("No icon specified in options, aborting")
        return

    icon_path = Path(config.engine.icon)
    if config.engine.platform in MAC_PLATFORMS:
        if config.features.tray == "false":
            log.debug("No copying necessary on macOS, aborting")
            return
        log.debug("Copying icon for tray application")
        source = icon_path.parent / TRAY_ICON_FILE
        destination = app_path / "icon.png"
    else:
        source = icon_path
        destination = app_path / f"icon{icon_path.suffix}"

    if not source.is_file():
        raise FileNotFoundError(f"Icon file not found: {source}")
    log.debug("Copying icon", source=str(source), destination=str(destination))
    safe_copy(source, destination, overwrite=True)


# 🌐📦🔚
