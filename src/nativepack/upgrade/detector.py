#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Locate a previously built app and reuse its saved configuration."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from attrs import evolve
from provide.foundation import logger
from provide.foundation.file.formats import read_json

from nativepack.config.defaults import (
    APP_CONFIG_FILE,
    PLATFORM_DARWIN,
    PLATFORM_LINUX,
    PLATFORM_WINDOWS,
)
from nativepack.options.model import BuildRequest

# Request fields that describe this invocation, never inherited from a prior build
_NOT_INHERITED = frozenset({"out", "overwrite", "upgrade", "upgrade_from", "quiet", "verbose", "inject"})
_ICON_NAMES = ("icon.png", "icon.ico", "icon.icns")
_MAX_ASCENT = 3


@dataclass
class PriorInstall:
    """A previously built app found on disk."""

    root_path: Path
    config_path: Path
    saved_config: dict[str, Any]
    platform: str

    @property
    def app_dir(self) -> Path:
        """Directory holding the staged app sources inside the bundle."""
        return self.config_path.parent


def normalize_upgrade(request: BuildRequest) -> tuple[BuildRequest, bool]:
    """Split a path-valued ``upgrade`` into ``upgrade=True`` plus ``upgrade_from``.

    Returns the (possibly new) request and whether this build is an upgrade.
    """
    if isinstance(request.upgrade, str) and request.upgrade != "":
        return evolve(request, upgrade=True, upgrade_from=request.upgrade), True
    return request, False


def _config_in_root(root: Path) -> tuple[Path, str] | None:
    """Find the saved config of an app whose root directory is ``root``."""
    plain = root / "resources" / "app" / APP_CONFIG_FILE
    if plain.is_file():
        is_windows_build = any(p.suffix.lower() == ".exe" for p in root.iterdir())
        return plain, PLATFORM_WINDOWS if is_windows_build else PLATFORM_LINUX

    for bundle in sorted(root.glob("*.app")):
        bundled = bundle / "Contents" / "Resources" / "app" / APP_CONFIG_FILE
        if bundled.is_file():
            return bundled, PLATFORM_DARWIN
    return None


def _candidate_roots(path: Path) -> list[Path]:
    start = path.parent if path.is_file() else path
    for ancestor in [start, *start.parents]:
        if ancestor.suffix == ".app":
            return [ancestor.parent]
    return [start, *list(start.parents)[:_MAX_ASCENT]]


def find_upgrade_app(upgrade_from: str | Path, log: Any = logger) -> PriorInstall | None:
    """Look for a prior nativepack build at or around ``upgrade_from``.

    Accepts the app root directory, a ``.app`` bundle, any path inside a
    bundle, or the app executable.
    """
    path = Path(upgrade_from).expanduser().absolute()
    if not path.exists():
        log.debug("Upgrade path does not exist", path=str(path))
        return None

    for root in _candidate_roots(path):
        found = _config_in_root(root)
        if found is None:
            continue
        config_path, platform = found
        try:
            saved_config = read_json(config_path)
        except (OSError, ValueError) as e:
            log.warning("Could not read saved app config", path=str(config_path), error=str(e))
            return None
        if not isinstance(saved_config, dict):
            log.warning("Saved app config is not an object", path=str(config_path))
            return None
        log.debug("Found app to upgrade", root=str(root), platform=platform)
        return PriorInstall(
            root_path=root,
            config_path=config_path,
            saved_config=saved_config,
            platform=platform,
        )
    return None


def use_old_app_options(request: BuildRequest, prior: PriorInstall, log: Any = logger) -> BuildRequest:
    """Fill every field the new request left unset from the prior build.

    Explicit values in ``request`` always win.
    """
    inheritable = BuildRequest.field_names() - _NOT_INHERITED
    changes: dict[str, Any] = {}
    for key, value in prior.saved_config.items():
        if key in inheritable and value is not None and getattr(request, key) is None:
            changes[key] = value

    if request.platform is None and "platform" not in changes:
        changes["platform"] = prior.platform

    if not request.inject:
        previous = [prior.app_dir / "inject" / str(n) for n in prior.saved_config.get("inject") or []]
        changes["inject"] = tuple(str(p) for p in previous if p.is_file())

    if request.icon is None:
        for icon_name in _ICON_NAMES:
            icon_path = prior.app_dir / icon_name
            if icon_path.is_file():
                changes["icon"] = str(icon_path)
                break

    log.debug("Merged options from prior build", fields=sorted(changes))
    return evolve(request, **changes)


# 🌐📦🔚
