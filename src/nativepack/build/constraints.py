#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Drop options the host toolchain cannot honor."""

from __future__ import annotations

from typing import Any

from provide.foundation import logger

from nativepack.config.defaults import OPTIONS_REQUIRING_WINDOWS_FOR_WINDOWS_BUILD, PLATFORM_WINDOWS
from nativepack.options.model import ResolvedConfig
from nativepack.utils.platform import has_wine, is_windows


def trim_unprocessable_options(config: ResolvedConfig, log: Any = logger) -> ResolvedConfig:
    """Clear Windows resource options when building for Windows without Wine.

    Setting them would make the packaging engine fail deep inside resource
    editing, so they are removed up front with one warning.
    """
    if config.engine.platform != PLATFORM_WINDOWS or is_windows() or has_wine():
        return config

    present = [key for key in OPTIONS_REQUIRING_WINDOWS_FOR_WINDOWS_BUILD if getattr(config.engine, key)]
    if not present:
        return config

    log.warning(
        f"*Not* setting [{', '.join(present)}], as couldn't find Wine. "
        "Wine is required when packaging a Windows app on non-Windows platforms. "
        "Windows apps built without Wine will lack a correct icon and version metadata; install Wine to keep them.",
        dropped=present,
    )
    return config.with_engine(**{key: None for key in present})


# 🌐📦🔚
