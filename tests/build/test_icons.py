#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Tests for icon selection and placement."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from nativepack.build.icons import convert_icon_if_necessary, copy_icons_if_necessary
from nativepack.options.model import ResolvedConfig


@pytest.fixture
def icon_dir(tmp_path: Path) -> Path:
    icons = tmp_path / "icons"
    icons.mkdir()
    (icons / "app.png").write_bytes(b"png")
    (icons / "app.ico").write_bytes(b"ico")
    (icons / "app.icns").write_bytes(b"icns")
    return icons


@pytest.fixture
def staged(tmp_path: Path) -> Path:
    app = tmp_path / "staged"
    app.mkdir()
    return app


class TestConvertIcon:
    def test_no_icon(self, config_factory: Callable[..., ResolvedConfig]) -> None:
        config = config_factory()

        assert convert_icon_if_necessary(config, MagicMock()) is config

    def test_preferred_format_kept(self, config_factory: Callable[..., ResolvedConfig], icon_dir: Path) -> None:
        config = config_factory(platform="linux", icon=str(icon_dir / "app.png"))

        assert convert_icon_if_necessary(config, MagicMock()) is config

    def test_sibling_in_preferred_format(
        self, config_factory: Callable[..., ResolvedConfig], icon_dir: Path
    ) -> None:
        config = config_factory(platform="win32", icon=str(icon_dir / "app.png"))

        converted = convert_icon_if_necessary(config, MagicMock())

        assert converted.engine.icon == str(icon_dir / "app.ico")

    def test_no_sibling_warns(self, config_factory: Callable[..., ResolvedConfig], tmp_path: Path) -> None:
        icon = tmp_path / "only.png"
        icon.write_bytes(b"png")
        log = MagicMock()
        config = config_factory(platform="win32", icon=str(icon))

        converted = convert_icon_if_necessary(config, log)

        assert converted.engine.icon == str(icon)
        log.warning.assert_called_once()

    def test_mac_tray_assembles_icons(
        self, config_factory: Callable[..., ResolvedConfig], icon_dir: Path, scratch_dir: Path
    ) -> None:
        config = config_factory(platform="darwin", tray="true", icon=str(icon_dir / "app.png"))

        converted = convert_icon_if_necessary(config, MagicMock(), scratch_base=str(scratch_dir))

        assembled = Path(converted.engine.icon)
        assert assembled.name == "icon.icns"
        assert assembled.parent.parent == scratch_dir
        assert (assembled.parent / "tray-icon.png").read_bytes() == b"png"

    def test_mac_without_tray(self, config_factory: Callable[..., ResolvedConfig], icon_dir: Path) -> None:
        config = config_factory(platform="darwin", tray="false", icon=str(icon_dir / "app.icns"))

        assert convert_icon_if_necessary(config, MagicMock()) is config


class TestCopyIcons:
    def test_no_icon(self, config_factory: Callable[..., ResolvedConfig], staged: Path) -> None:
        copy_icons_if_necessary(config_factory(), staged, MagicMock())

        assert list(staged.iterdir()) == []

    @pytest.mark.parametrize(("platform", "name"), [("linux", "app.png"), ("win32", "app.ico")])
    def test_copies_icon_with_extension(
        self, config_factory: Callable[..., ResolvedConfig], icon_dir: Path, staged: Path, platform: str, name: str
    ) -> None:
        config = config_factory(platform=platform, icon=str(icon_dir / name))

        copy_icons_if_necessary(config, staged, MagicMock())

        suffix = Path(name).suffix
        assert (staged / f"icon{suffix}").read_bytes() == (icon_dir / name).read_bytes()

    def test_mac_without_tray_copies_nothing(
        self, config_factory: Callable[..., ResolvedConfig], icon_dir: Path, staged: Path
    ) -> None:
        config = config_factory(platform="darwin", tray="false", icon=str(icon_dir / "app.icns"))

        copy_icons_if_necessary(config, staged, MagicMock())

        assert list(staged.iterdir()) == []

    def test_mac_tray_copies_tray_icon(
        self, config_factory: Callable[..., ResolvedConfig], tmp_path: Path, staged: Path
    ) -> None:
        assembled = tmp_path / "assembled"
        assembled.mkdir()
        (assembled / "icon.icns").write_bytes(b"icns")
        (assembled / "tray-icon.png").write_bytes(b"tray")
        config = config_factory(platform="mas", tray="start-in-tray", icon=str(assembled / "icon.icns"))

        copy_icons_if_necessary(config, staged, MagicMock())

        assert (staged / "icon.png").read_bytes() == b"tray"

    def test_missing_source(self, config_factory: Callable[..., ResolvedConfig], tmp_path: Path, staged: Path) -> None:
        config = config_factory(platform="linux", icon=str(tmp_path / "gone.png"))

        with pytest.raises(FileNotFoundError):
            copy_icons_if_necessary(config, staged, MagicMock())


# 🌐📦🔚
