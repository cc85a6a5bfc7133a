#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Tests for moving an upgrade build over the previous install."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from unittest.mock import MagicMock, patch

from nativepack.build.finalize import finalize_upgrade
from nativepack.options.model import ResolvedConfig


def test_linux_upgrade_replaces_files(config_factory: Callable[..., ResolvedConfig], tmp_path: Path) -> None:
    build = tmp_path / "scratch" / "Foo-linux-x64"
    (build / "resources" / "app").mkdir(parents=True)
    (build / "Foo").write_text("new")
    destination = tmp_path / "installed" / "Foo"
    destination.mkdir(parents=True)
    (destination / "Foo").write_text("old")
    (destination / "user-notes.txt").write_text("keep")

    outcome = finalize_upgrade(build, destination, config_factory(overwrite=True), MagicMock())

    assert outcome.ok
    assert outcome.path == destination
    assert (destination / "Foo").read_text() == "new"
    assert (destination / "user-notes.txt").read_text() == "keep"
    assert not build.exists()


def test_without_overwrite_existing_files_stay(
    config_factory: Callable[..., ResolvedConfig], tmp_path: Path
) -> None:
    build = tmp_path / "scratch" / "Foo-linux-x64"
    build.mkdir(parents=True)
    (build / "Foo").write_text("new")
    (build / "extra").write_text("extra")
    destination = tmp_path / "installed"
    destination.mkdir()
    (destination / "Foo").write_text("old")

    finalize_upgrade(build, destination, config_factory(overwrite=False), MagicMock())

    assert (destination / "Foo").read_text() == "old"
    assert (destination / "extra").read_text() == "extra"


def test_mac_upgrade_copies_bundle(config_factory: Callable[..., ResolvedConfig], tmp_path: Path) -> None:
    build = tmp_path / "scratch" / "Foo-darwin-x64"
    new_bundle = build / "Foo.app" / "Contents"
    (new_bundle / "Frameworks" / "Electron Framework.framework").mkdir(parents=True)
    (new_bundle / "Info.plist").write_text("new")
    (build / "LICENSE").write_text("license")
    destination = tmp_path / "Applications"
    old_frameworks = destination / "Foo.app" / "Contents" / "Frameworks"
    (old_frameworks / "Old.framework").mkdir(parents=True)

    outcome = finalize_upgrade(build, destination, config_factory(platform="darwin", overwrite=True), MagicMock())

    assert outcome.ok
    contents = destination / "Foo.app" / "Contents"
    assert (contents / "Info.plist").read_text() == "new"
    assert (contents / "Frameworks" / "Electron Framework.framework").is_dir()
    assert not (old_frameworks / "Old.framework").exists()
    assert not (destination / "LICENSE").exists()
    assert not build.exists()


def test_mac_predelete_failure_is_a_warning(config_factory: Callable[..., ResolvedConfig], tmp_path: Path) -> None:
    build = tmp_path / "scratch" / "Foo-mas-arm64"
    (build / "Foo.app" / "Contents").mkdir(parents=True)
    destination = tmp_path / "Applications"
    (destination / "Foo.app" / "Contents" / "Frameworks").mkdir(parents=True)
    log = MagicMock()

    with patch("nativepack.build.finalize.safe_rmtree", side_effect=[PermissionError("denied"), None]):
        outcome = finalize_upgrade(build, destination, config_factory(platform="mas", overwrite=True), log)

    assert not outcome.ok
    assert outcome.path == destination
    assert "denied" in (outcome.warning or "")
    log.warning.assert_called_once()


# 🌐📦🔚
