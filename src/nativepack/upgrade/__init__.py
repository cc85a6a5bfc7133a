#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Upgrade-in-place support: find prior builds and reuse their options."""

from __future__ import annotations

from nativepack.upgrade.detector import (
    PriorInstall,
    find_upgrade_app,
    normalize_upgrade,
    use_old_app_options,
)

__all__ = [
    "PriorInstall",
    "find_upgrade_app",
    "normalize_upgrade",
    "use_old_app_options",
]

# 🌐📦🔚
