#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""This package contains the build pipeline that turns a build request into
a packaged desktop app, including upgrade-in-place and Linux integration."""

from nativepack.build.engine import ElectronPackagerEngine, PackagingEngine
from nativepack.build.orchestrator import BuildOrchestrator, build_app
from nativepack.build.outcome import BuildResult, StepOutcome

__all__ = [
    "BuildOrchestrator",
    "BuildResult",
    "ElectronPackagerEngine",
    "PackagingEngine",
    "StepOutcome",
    "build_app",
]

# 🌐📦🔚
