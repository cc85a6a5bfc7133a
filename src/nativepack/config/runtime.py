#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""nativepack runtime configuration for CLI startup."""

from __future__ import annotations

import shlex

from attrs import define
from provide.foundation.config.base import field
from provide.foundation.config.env import RuntimeConfig

from nativepack.config.defaults import DEFAULT_PACKAGER_COMMAND

VALID_LOG_LEVELS = {"TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def parse_log_level(value: str) -> str:
    """Validate and normalize log levels."""
    normalized = value.strip().upper()
    if normalized not in VALID_LOG_LEVELS:
        raise ValueError(f"Invalid log level: {value}")
    return normalized


@define
class NativepackRuntimeConfig(RuntimeConfig):
    """nativepack runtime configuration for CLI startup."""

    log_level: str = field(
        default="WARNING",
        env_var="NATIVEPACK_LOG_LEVEL",
        converter=parse_log_level,
        metadata={"help": "Log level for nativepack operations (TRACE, DEBUG, INFO, WARNING, ERROR, CRITICAL)"},
    )

    setup_log_level: str = field(
        default="WARNING",
        env_var="NATIVEPACK_SETUP_LOG_LEVEL",
        converter=parse_log_level,
        metadata={"help": "Log level for Foundation setup messages during initialization"},
    )

    packager_command: str = field(
        default=DEFAULT_PACKAGER_COMMAND,
        env_var="NATIVEPACK_PACKAGER_COMMAND",
        metadata={"help": "Command used to invoke the Electron packaging engine"},
    )

    temp_dir: str | None = field(
        default=None,
        env_var="NATIVEPACK_TEMP_DIR",
        metadata={"help": "Base directory for staging and upgrade scratch directories"},
    )

    def packager_argv(self) -> list[str]:
        """Split the packager command into argv form."""
        return shlex.split(self.packager_command)


# 🌐📦🔚
