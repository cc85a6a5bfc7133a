#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Command modules for the nativepack CLI."""

from __future__ import annotations

from nativepack.commands.build import build_command

__all__ = [
    "build_command",
]

# 🌐📦🔚
