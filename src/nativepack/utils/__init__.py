#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Host and filesystem utilities."""

from __future__ import annotations

from nativepack.utils.files import copy_tree
from nativepack.utils.platform import (
    get_temp_dir,
    has_wine,
    host_arch,
    host_platform,
    is_macos,
    is_superuser,
    is_windows,
    is_windows_admin,
)

__all__ = [
    "copy_tree",
    "get_temp_dir",
    "has_wine",
    "host_arch",
    "host_platform",
    "is_macos",
    "is_superuser",
    "is_windows",
    "is_windows_admin",
]

# 🌐📦🔚
