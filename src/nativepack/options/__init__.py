#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Build request model and option resolution."""

from __future__ import annotations

from nativepack.options.model import BuildRequest, EngineConfig, FeatureConfig, ResolvedConfig
from nativepack.options.resolver import resolve_options

__all__ = [
    "BuildRequest",
    "EngineConfig",
    "FeatureConfig",
    "ResolvedConfig",
    "resolve_options",
]

# 🌐📦🔚
