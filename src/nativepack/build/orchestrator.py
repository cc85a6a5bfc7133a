#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Build orchestration: from a build request to a finished app on disk."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Any

from attrs import evolve

from nativepack.build.constraints import trim_unprocessable_options
from nativepack.build.engine import ElectronPackagerEngine, PackagingEngine
from nativepack.build.finalize import finalize_upgrade
from nativepack.build.icons import convert_icon_if_necessary, copy_icons_if_necessary
from nativepack.build.linux import integrate_linux_app
from nativepack.build.outcome import BuildResult, StepOutcome
from nativepack.build.staging import prepare_app
from nativepack.config.defaults import (
    APP_TEMPLATE_DIR,
    DEFAULT_OUTPUT_DIRNAME,
    LINUX_INSTALL_ROOT,
    MAC_PLATFORMS,
    PLATFORM_LINUX,
    PLATFORM_WINDOWS,
)
from nativepack.config.runtime import NativepackRuntimeConfig
from nativepack.console import SilentLogger, get_command_logger
from nativepack.exceptions import (
    DirectoryExistsError,
    InsufficientPrivilegesError,
    UpgradeNotFoundError,
)
from nativepack.options.model import BuildRequest, ResolvedConfig
from nativepack.options.resolver import resolve_options
from nativepack.upgrade.detector import find_upgrade_app, normalize_upgrade, use_old_app_options
from nativepack.utils.platform import get_temp_dir, is_windows, is_windows_admin


def get_app_path(app_paths: Sequence[Path] | Path, log: Any) -> Path:
    """Reduce the engine's result to the single app path.

    Raises:
        DirectoryExistsError: If the engine produced nothing because the
            output already existed and overwriting was not allowed.
    """
    if isinstance(app_paths, Path):
        return app_paths

    if len(app_paths) == 0:
        raise DirectoryExistsError(
            "App path could not be determined: the output directory already exists",
            hint="Pass --overwrite to replace it, or choose another output directory",
        )

    if len(app_paths) > 1:
        log.warning(
            "Warning: This should not be happening, packaged app path contains more than one element",
            app_paths=[str(p) for p in app_paths],
        )
    return app_paths[0]


def get_os_run_help(platform: str) -> str:
    if platform == PLATFORM_WINDOWS:
        return "the contained .exe file."
    if platform == PLATFORM_LINUX:
        return (
            "the contained executable file (prefixing with ./ if necessary)\n"
            "A .desktop launcher file has been created next to the app folder for your convenience."
        )
    if platform in MAC_PLATFORMS:
        return "the app bundle."
    return ""


class BuildOrchestrator:
    """Runs one app build end to end.

    Each stage takes the values produced by earlier stages and returns new
    ones; nothing is shared between builds.
    """

    def __init__(
        self,
        engine: PackagingEngine | None = None,
        runtime_config: NativepackRuntimeConfig | None = None,
        log: Any = None,
        template_dir: Path = APP_TEMPLATE_DIR,
        cwd: Path | None = None,
        linux_install_root: Path = LINUX_INSTALL_ROOT,
        desktop_dir: Path | None = None,
    ) -> None:
        self.runtime_config = runtime_config or NativepackRuntimeConfig.from_env()
        self.log = log or get_command_logger("build")
        self.engine = engine
        self.template_dir = template_dir
        self.cwd = cwd
        self.linux_install_root = linux_install_root
        self.desktop_dir = desktop_dir

    def build(self, request: BuildRequest) -> BuildResult:
        """Build the app described by ``request`` and return where it landed.

        Raises:
            ValidationError: Invalid options.
            UpgradeNotFoundError: ``upgrade`` points at no prior build.
            InsufficientPrivilegesError: The host cannot extract the target's engine archive.
            DirectoryExistsError: The output exists and overwrite is off.
            OSError: Staging or icon copy failed.
        """
        log = SilentLogger() if request.quiet else self.log
        warnings: list[str] = []

        log.info("Processing options...")
        explicit_out = bool(request.out)
        if not explicit_out:
            request = evolve(request, out=str(Path(self.cwd or Path.cwd()) / DEFAULT_OUTPUT_DIRNAME))

        request, relocate = self._apply_upgrade(request, explicit_out, log)
        log.debug("Build request", request=request)

        config = resolve_options(request, template_dir=self.template_dir, log=log)
        self._check_privileges(config)

        log.info("Preparing Electron app...")
        config = self._stage(config, log)

        log.info("Converting icons...")
        config = convert_icon_if_necessary(config, log, scratch_base=self.runtime_config.temp_dir)
        copy_icons_if_necessary(config, config.engine.dir, log)

        config = config.with_engine(quiet=not request.verbose)
        config = trim_unprocessable_options(config, log)

        log.info(
            "Packaging... This will take a few seconds, maybe minutes if the requested Electron isn't cached yet..."
        )
        app_paths = self._engine(log).pack(config.engine)

        log.info("Finalizing build...")
        app_path = get_app_path(app_paths, log)

        if relocate is not None and config.engine.upgrade and config.engine.overwrite:
            outcome = finalize_upgrade(app_path, relocate, config, log)
            app_path = relocate
            warnings.extend(self._warnings([outcome]))

        if config.engine.platform == PLATFORM_LINUX:
            outcomes = integrate_linux_app(
                app_path,
                config.engine.name,
                config.features.target_url,
                log,
                install_root=self.linux_install_root,
                desktop_dir=self.desktop_dir,
            )
            warnings.extend(self._warnings(outcomes))

        log.info(
            f"App built to {app_path}, move to wherever it makes sense for you and run "
            f"{get_os_run_help(config.engine.platform)}"
        )
        return BuildResult(path=app_path, warnings=tuple(warnings))

    def _apply_upgrade(
        self, request: BuildRequest, explicit_out: bool, log: Any
    ) -> tuple[BuildRequest, Path | None]:
        """Merge a prior build's options into the request.

        Returns the request and, when the build must be relocated onto a prior
        install afterwards, that install's root.
        """
        request, upgrading = normalize_upgrade(request)
        if not upgrading:
            return request, None

        log.debug("Attempting to upgrade", upgrade_from=request.upgrade_from)
        prior = find_upgrade_app(str(request.upgrade_from), log)
        if prior is None:
            raise UpgradeNotFoundError(
                f'Could not find an old nativepack app in "{request.upgrade_from}"',
                hint="Point --upgrade at the folder, .app bundle or executable of an app built by nativepack",
            )
        request = use_old_app_options(request, prior, log)

        if not explicit_out and request.overwrite:
            working_out = get_temp_dir("appUpgrade", base=self.runtime_config.temp_dir)
            return evolve(request, out=str(working_out)), prior.root_path
        return request, None

    def _check_privileges(self, config: ResolvedConfig) -> None:
        # The Electron archive for macOS targets contains symlinks, and
        # creating symlinks on Windows requires administrator rights.
        if config.engine.platform in MAC_PLATFORMS and is_windows() and not is_windows_admin():
            raise InsufficientPrivilegesError(
                "Building an app with a target platform of Mac on a Windows machine requires admin privileges",
                hint="Please rerun this command in an admin command prompt",
            )

    def _stage(self, config: ResolvedConfig, log: Any) -> ResolvedConfig:
        staging_dir = get_temp_dir("app", base=self.runtime_config.temp_dir)
        prepare_app(config.engine.dir, staging_dir, config, log)
        return config.with_engine(dir=staging_dir)

    def _engine(self, log: Any) -> PackagingEngine:
        if self.engine is not None:
            return self.engine
        return ElectronPackagerEngine(self.runtime_config.packager_argv(), log)

    @staticmethod
    def _warnings(outcomes: Sequence[StepOutcome]) -> list[str]:
        return [outcome.warning for outcome in outcomes if outcome.warning]


def build_app(request: BuildRequest, engine: PackagingEngine | None = None) -> BuildResult:
    """Build an app with default collaborators.

    Example:
        ```python
        from nativepack import BuildRequest, build_app

        result = build_app(BuildRequest(target_url="https://example.com", name="Example"))
        print(result.path)
        ```
    """
    return BuildOrchestrator(engine=engine).build(request)


# 🌐📦🔚
