#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Shared pytest fixtures and helpers for nativepack tests."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from pathlib import Path
import shutil
from typing import Any

import provide.testkit  # noqa: F401 - Installs setproctitle blocker early
from provide.testkit.logger import reset_foundation_setup_for_testing
import pytest

from nativepack.config import NativepackRuntimeConfig
from nativepack.options.model import EngineConfig, FeatureConfig, ResolvedConfig


class FakeEngine:
    """Packaging engine stand-in that lays out a plausible Linux/Windows build."""

    def __init__(self, results: list[Path] | None = None, error: Exception | None = None) -> None:
        self.results = results
        self.error = error
        self.calls: list[EngineConfig] = []

    def pack(self, engine: EngineConfig) -> list[Path]:
        self.calls.append(engine)
        if self.error is not None:
            raise self.error
        if self.results is not None:
            return self.results

        output = engine.out / f"{engine.name}-{engine.platform}-{engine.arch}"
        shutil.copytree(engine.dir, output / "resources" / "app", dirs_exist_ok=True)
        executable = output / engine.name
        executable.write_text("#!/bin/sh\necho app\n")
        executable.chmod(0o755)
        return [output]


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "integration: mark test as integration test (runs the full build pipeline on disk)"
    )


@pytest.fixture(autouse=True)
def reset_foundation_logging() -> Iterator[None]:
    """Reset foundation logging state before each test to avoid conflicts."""
    reset_foundation_setup_for_testing()
    yield
    reset_foundation_setup_for_testing()


@pytest.fixture
def scratch_dir(tmp_path: Path) -> Path:
    """Base directory for the temporary directories a build creates."""
    scratch = tmp_path / "scratch"
    scratch.mkdir()
    return scratch


@pytest.fixture
def runtime_config(scratch_dir: Path) -> NativepackRuntimeConfig:
    return NativepackRuntimeConfig(temp_dir=str(scratch_dir))


@pytest.fixture
def template_dir(tmp_path: Path) -> Path:
    """A small app template with a package.json to rewrite."""
    template = tmp_path / "template"
    template.mkdir()
    (template / "package.json").write_text('{"name": "template", "version": "0.0.0", "main": "main.js"}')
    (template / "main.js").write_text("// shell\n")
    return template


@pytest.fixture
def config_factory(tmp_path: Path) -> Callable[..., ResolvedConfig]:
    """Build ResolvedConfig values without going through option resolution."""

    def make(
        platform: str = "linux",
        name: str = "Foo",
        tray: str = "false",
        **engine_fields: Any,
    ) -> ResolvedConfig:
        engine = EngineConfig(
            dir=engine_fields.pop("dir", tmp_path / "staged"),
            out=engine_fields.pop("out", tmp_path / "out"),
            name=name,
            platform=platform,
            arch=engine_fields.pop("arch", "x64"),
            target_url=engine_fields.pop("target_url", "https://example.com"),
            **engine_fields,
        )
        features = FeatureConfig(
            name=name,
            target_url=engine.target_url or "https://example.com",
            platform=platform,
            arch=engine.arch,
            tray=tray,
        )
        return ResolvedConfig(engine=engine, features=features)

    return make


@pytest.fixture
def fake_engine() -> FakeEngine:
    return FakeEngine()


@pytest.fixture
def engine_factory() -> type[FakeEngine]:
    """The FakeEngine class, for tests that need custom results or errors."""
    return FakeEngine


# 🌐📦🔚
