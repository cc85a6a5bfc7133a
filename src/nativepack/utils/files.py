#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Tree copy helper with overwrite control."""

from __future__ import annotations

from pathlib import Path
import shutil


def copy_tree(src: Path, dst: Path, overwrite: bool = True) -> Path:
    """Copy ``src`` onto ``dst``, merging into an existing destination.

    Timestamps and modes are preserved. With ``overwrite`` off, files already
    present at the destination are left alone.
    """

    def _copy(source: str, target: str) -> str:
        if not overwrite and Path(target).exists():
            return target
        return shutil.copy2(source, target)

    shutil.copytree(src, dst, symlinks=True, copy_function=_copy, dirs_exist_ok=True)
    shutil.copystat(src, dst)
    return dst


# 🌐📦🔚
