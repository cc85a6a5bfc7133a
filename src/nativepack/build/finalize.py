#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Move a fresh upgrade build onto the location of the app it replaces."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from provide.foundation import logger
from provide.foundation.file.directory import safe_rmtree

from nativepack.build.outcome import StepOutcome
from nativepack.config.defaults import MAC_PLATFORMS
from nativepack.options.model import ResolvedConfig
from nativepack.utils.files import copy_tree


def _predelete_frameworks(bundle: Path, log: Any) -> str | None:
    """Remove the old bundle's Frameworks before copying over it.

    Copying framework bundles onto existing ones can produce a directory
    that contains a link to itself.
    """
    frameworks = bundle / "Contents" / "Frameworks"
    if not frameworks.exists():
        return None
    try:
        safe_rmtree(frameworks)
    except OSError as e:
        warning = f"Could not pre-delete old frameworks at {frameworks}: {e}"
        log.warning("Encountered an error when attempting to pre-delete old frameworks", error=str(e))
        return warning
    return None


def finalize_upgrade(app_path: Path, destination: Path, config: ResolvedConfig, log: Any = logger) -> StepOutcome:
    """Copy the build at ``app_path`` over ``destination`` and drop the scratch copy.

    Returns an outcome whose ``path`` is the destination. A failed framework
    pre-delete is reported as a warning, not an error.
    """
    overwrite = config.engine.overwrite
    warning = None

    if config.engine.platform in MAC_PLATFORMS:
        bundle_name = f"{config.engine.name}.app"
        warning = _predelete_frameworks(destination / bundle_name, log)
        log.debug("Copying app bundle over previous install", destination=str(destination / bundle_name))
        copy_tree(app_path / bundle_name, destination / bundle_name, overwrite=overwrite)
    else:
        log.debug("Copying app over previous install", destination=str(destination))
        copy_tree(app_path, destination, overwrite=overwrite)

    safe_rmtree(app_path)
    if warning:
        return StepOutcome.degraded(warning, path=destination)
    return StepOutcome.success(destination)


# 🌐📦🔚
