#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Tests for staging the app template."""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import MagicMock

from attrs import evolve

from nativepack.build.staging import prepare_app
from nativepack.options.model import EngineConfig, FeatureConfig, ResolvedConfig


def _config(tmp_path: Path, inject: tuple[str, ...] = ()) -> ResolvedConfig:
    engine = EngineConfig(dir=tmp_path / "template", out=tmp_path / "out", name="My App", platform="linux", arch="x64")
    features = FeatureConfig(
        name="My App",
        target_url="https://example.com",
        platform="linux",
        arch="x64",
        tray="true",
        width=900,
        inject=inject,
        app_version="3.1.0",
    )
    return ResolvedConfig(engine=engine, features=features)


def test_prepare_app(template_dir: Path, tmp_path: Path) -> None:
    dest = tmp_path / "staged"
    dest.mkdir()

    prepare_app(template_dir, dest, _config(tmp_path), MagicMock())

    assert (dest / "main.js").read_text() == "// shell\n"
    manifest = json.loads((dest / "package.json").read_text())
    assert manifest["name"] == "my-app"
    assert manifest["productName"] == "My App"
    assert manifest["version"] == "3.1.0"
    assert manifest["main"] == "main.js"
    saved = json.loads((dest / "nativepack.json").read_text())
    assert saved["target_url"] == "https://example.com"
    assert saved["tray"] == "true"
    assert saved["width"] == 900
    assert saved["inject"] == []
    assert "nativepack_version" in saved


def test_inject_files_are_copied(template_dir: Path, tmp_path: Path) -> None:
    css = tmp_path / "theme.css"
    css.write_text("body { color: red; }")
    js = tmp_path / "extra.js"
    js.write_text("console.log(1)")
    dest = tmp_path / "staged"

    prepare_app(template_dir, dest, _config(tmp_path, inject=(str(css), str(js))), MagicMock())

    assert (dest / "inject" / "theme.css").read_text() == "body { color: red; }"
    assert (dest / "inject" / "extra.js").is_file()
    saved = json.loads((dest / "nativepack.json").read_text())
    assert saved["inject"] == ["theme.css", "extra.js"]


def test_default_version(template_dir: Path, tmp_path: Path) -> None:
    config = _config(tmp_path)
    config = evolve(config, features=evolve(config.features, app_version=None))
    dest = tmp_path / "staged"

    prepare_app(template_dir, dest, config, MagicMock())

    assert json.loads((dest / "package.json").read_text())["version"] == "1.0.0"


def test_windows_metadata_is_saved(template_dir: Path, tmp_path: Path) -> None:
    config = _config(tmp_path)
    config = evolve(
        config,
        features=evolve(
            config.features,
            version_string={"CompanyName": "Acme"},
            win32metadata={"ProductName": "My App"},
        ),
    )
    dest = tmp_path / "staged"

    prepare_app(template_dir, dest, config, MagicMock())

    saved = json.loads((dest / "nativepack.json").read_text())
    assert saved["version_string"] == {"CompanyName": "Acme"}
    assert saved["win32metadata"] == {"ProductName": "My App"}


def test_bundled_template_is_packaged() -> None:
    from nativepack.config.defaults import APP_TEMPLATE_DIR

    assert (APP_TEMPLATE_DIR / "package.json").is_file()
    assert (APP_TEMPLATE_DIR / "main.js").is_file()


# 🌐📦🔚
