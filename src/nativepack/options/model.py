#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Value types that flow through a build.

Every type here is frozen. Stages return new values with ``attrs.evolve``
instead of editing a shared configuration object.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from attrs import asdict, define, evolve, field, fields


def _to_tuple(value: Any) -> tuple[str, ...]:
    if not value:
        return ()
    if isinstance(value, str):
        return (value,)
    return tuple(str(v) for v in value)


@define(frozen=True)
class BuildRequest:
    """User-supplied build parameters, as they arrive from the CLI or API.

    ``None`` means "not given", which matters when a prior install's saved
    configuration is merged in as defaults.
    """

    target_url: str | None = None
    name: str | None = None
    platform: str | None = None
    arch: str | None = None
    out: str | None = None
    overwrite: bool = False
    upgrade: str | bool | None = None
    upgrade_from: str | None = None
    quiet: bool = False
    verbose: bool = False
    icon: str | None = None
    tray: str | None = None
    app_copyright: str | None = None
    app_version: str | None = None
    build_version: str | None = None
    version_string: dict[str, str] | None = None
    win32metadata: dict[str, str] | None = None
    electron_version: str | None = None
    width: int | None = None
    height: int | None = None
    user_agent: str | None = None
    single_instance: bool | None = None
    inject: tuple[str, ...] = field(default=(), converter=_to_tuple)

    @classmethod
    def field_names(cls) -> frozenset[str]:
        return frozenset(f.name for f in fields(cls))


@define(frozen=True)
class EngineConfig:
    """Options handed to the packaging engine."""

    dir: Path
    out: Path
    name: str
    platform: str
    arch: str
    overwrite: bool = False
    quiet: bool = True
    icon: str | None = None
    app_copyright: str | None = None
    app_version: str | None = None
    build_version: str | None = None
    version_string: dict[str, str] | None = None
    win32metadata: dict[str, str] | None = None
    electron_version: str | None = None
    target_url: str | None = None
    upgrade: bool = False
    upgrade_from: str | None = None


@define(frozen=True)
class FeatureConfig:
    """Runtime options of the wrapped app; persisted inside every built bundle."""

    name: str
    target_url: str
    platform: str
    arch: str
    tray: str = "false"
    width: int | None = None
    height: int | None = None
    user_agent: str | None = None
    single_instance: bool = False
    inject: tuple[str, ...] = field(default=(), converter=_to_tuple)
    app_version: str | None = None
    build_version: str | None = None
    app_copyright: str | None = None
    electron_version: str | None = None
    version_string: dict[str, str] | None = None
    win32metadata: dict[str, str] | None = None

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["inject"] = list(self.inject)
        return data


@define(frozen=True)
class ResolvedConfig:
    """Resolved build configuration: engine options plus app features."""

    engine: EngineConfig
    features: FeatureConfig

    def with_engine(self, **changes: Any) -> ResolvedConfig:
        return evolve(self, engine=evolve(self.engine, **changes))


# 🌐📦🔚
