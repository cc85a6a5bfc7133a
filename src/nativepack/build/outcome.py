#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Result values for best-effort steps and whole builds."""

from __future__ import annotations

from pathlib import Path

from attrs import define, field


@define(frozen=True)
class StepOutcome:
    """Outcome of a step that may degrade without failing the build."""

    ok: bool
    path: Path | None = None
    warning: str | None = None

    @classmethod
    def success(cls, path: Path | None = None) -> StepOutcome:
        return cls(ok=True, path=path)

    @classmethod
    def degraded(cls, warning: str, path: Path | None = None) -> StepOutcome:
        return cls(ok=False, path=path, warning=warning)


@define(frozen=True)
class BuildResult:
    """Where the finished app ended up, plus warnings from best-effort steps."""

    path: Path
    warnings: tuple[str, ...] = field(default=())

    def __fspath__(self) -> str:
        return str(self.path)


# 🌐📦🔚
