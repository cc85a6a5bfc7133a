#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Packaging engine interface and the Electron Packager adapter."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
import shlex
from typing import Any, Protocol

from provide.foundation import logger
from provide.foundation.file.directory import ensure_dir
from provide.foundation.process import run

from nativepack.config.defaults import DEFAULT_PACKAGER_COMMAND
from nativepack.exceptions import EngineError
from nativepack.options.model import EngineConfig


class PackagingEngine(Protocol):
    """Turns a staged app directory into one or more platform bundles."""

    def pack(self, engine: EngineConfig) -> list[Path]:
        """Build the app and return the produced paths.

        An empty list means the output already existed and overwrite was off.
        """
        ...


class ElectronPackagerEngine:
    """Runs ``@electron/packager`` as a subprocess."""

    def __init__(self, command: Sequence[str] | None = None, log: Any = logger) -> None:
        self.command = list(command) if command else shlex.split(DEFAULT_PACKAGER_COMMAND)
        self.log = log

    @staticmethod
    def output_path(engine: EngineConfig) -> Path:
        return engine.out / f"{engine.name}-{engine.platform}-{engine.arch}"

    def build_command(self, engine: EngineConfig) -> list[str]:
        argv = [
            *self.command,
            str(engine.dir),
            engine.name,
            f"--platform={engine.platform}",
            f"--arch={engine.arch}",
            f"--out={engine.out}",
        ]
        if engine.overwrite:
            argv.append("--overwrite")
        if engine.quiet:
            argv.append("--quiet")
        if engine.icon:
            argv.append(f"--icon={engine.icon}")
        if engine.electron_version:
            argv.append(f"--electron-version={engine.electron_version}")
        if engine.app_copyright:
            argv.append(f"--app-copyright={engine.app_copyright}")
        if engine.app_version:
            argv.append(f"--app-version={engine.app_version}")
        if engine.build_version:
            argv.append(f"--build-version={engine.build_version}")
        for key, value in (engine.version_string or {}).items():
            argv.append(f"--version-string.{key}={value}")
        for key, value in (engine.win32metadata or {}).items():
            argv.append(f"--win32metadata.{key}={value}")
        return argv

    def pack(self, engine: EngineConfig) -> list[Path]:
        output = self.output_path(engine)
        if output.exists() and not engine.overwrite:
            self.log.warning("Output directory already exists, skipping", output=str(output))
            return []

        ensure_dir(engine.out)
        argv = self.build_command(engine)
        self.log.debug("Running packaging engine", command=argv)
        try:
            result = run(argv, check=False, capture_output=True, text=True)
        except FileNotFoundError as e:
            raise EngineError(
                f"Packaging engine not found: {self.command[0]}",
                hint="Install Node.js (which provides npx) or set NATIVEPACK_PACKAGER_COMMAND",
            ) from e

        if result.returncode != 0:
            stderr = (result.stderr or "").strip()
            raise EngineError(
                f"Packaging engine exited with status {result.returncode}",
                hint=stderr.splitlines()[-1] if stderr else None,
            )
        if not output.exists():
            raise EngineError(f"Packaging engine finished but produced nothing at {output}")
        return [output]


# 🌐📦🔚
