#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Assemble the app template and resolved configuration in a staging directory."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from provide.foundation import logger
from provide.foundation.file import safe_copy
from provide.foundation.file.directory import ensure_dir
from provide.foundation.file.formats import read_json, write_json
from provide.foundation.utils import get_version

from nativepack.config.defaults import APP_CONFIG_FILE, DEFAULT_APP_VERSION
from nativepack.options.model import ResolvedConfig
from nativepack.utils.files import copy_tree


def _package_name(name: str) -> str:
    """npm-style package name: lowercase, dashes for anything else."""
    cleaned = "".join(c if c.isalnum() else "-" for c in name.lower()).strip("-")
    return cleaned or "nativepack-app"


def _update_package_json(dest: Path, config: ResolvedConfig, log: Any) -> None:
    package_json = dest / "package.json"
    if not package_json.is_file():
        log.debug("Template has no package.json, skipping rewrite", dest=str(dest))
        return
    manifest = read_json(package_json)
    manifest["name"] = _package_name(config.features.name)
    manifest["productName"] = config.features.name
    manifest["version"] = config.features.app_version or DEFAULT_APP_VERSION
    write_json(package_json, manifest, indent=2)


def _copy_inject_files(dest: Path, config: ResolvedConfig, log: Any) -> tuple[str, ...]:
    if not config.features.inject:
        return ()
    inject_dir = dest / "inject"
    ensure_dir(inject_dir)
    staged = []
    for source in config.features.inject:
        source_path = Path(source)
        safe_copy(source_path, inject_dir / source_path.name, overwrite=True)
        staged.append(source_path.name)
        log.debug("Staged inject file", source=source)
    return tuple(staged)


def prepare_app(src: Path, dest: Path, config: ResolvedConfig, log: Any = logger) -> None:
    """Copy the app template into ``dest`` and write the app's saved config.

    The saved ``nativepack.json`` is what a later upgrade reads back.

    Raises:
        OSError: If the template cannot be copied or files cannot be written.
    """
    log.debug("Copying app template", src=str(src), dest=str(dest))
    copy_tree(src, dest)

    _update_package_json(dest, config, log)
    inject_names = _copy_inject_files(dest, config, log)

    saved = config.features.to_dict()
    saved["inject"] = list(inject_names)
    saved["nativepack_version"] = get_version("nativepack", caller_file=__file__)
    write_json(dest / APP_CONFIG_FILE, saved, indent=2)
    log.debug("Wrote app config", path=str(dest / APP_CONFIG_FILE))


# 🌐📦🔚
