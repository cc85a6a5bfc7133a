#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""nativepack core package exports."""

from __future__ import annotations

from provide.foundation.utils import get_version

from nativepack.build import BuildOrchestrator, BuildResult, build_app
from nativepack.exceptions import (
    DirectoryExistsError,
    EngineError,
    InsufficientPrivilegesError,
    NativepackError,
    UpgradeNotFoundError,
    ValidationError,
)
from nativepack.options import BuildRequest

__version__ = get_version("nativepack", caller_file=__file__)

__all__ = [
    "BuildOrchestrator",
    "BuildRequest",
    "BuildResult",
    "DirectoryExistsError",
    "EngineError",
    "InsufficientPrivilegesError",
    "NativepackError",
    "UpgradeNotFoundError",
    "ValidationError",
    "__version__",
    "build_app",
]

# 🌐📦🔚
