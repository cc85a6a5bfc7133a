#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Logger helpers shared by commands and build stages."""

from __future__ import annotations

from typing import Any

from provide.foundation.logger import get_logger


def get_command_logger(name: str) -> Any:
    """Return a structured logger namespaced under ``nativepack``."""
    return get_logger(f"nativepack.{name}")


class SilentLogger:
    """Logger stand-in that drops every message. Used for quiet builds."""

    def _discard(self, *args: Any, **kwargs: Any) -> None:
        return None

    trace = debug = info = warning = warn = error = exception = critical = _discard


# 🌐📦🔚
