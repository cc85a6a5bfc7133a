#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Custom exceptions for nativepack."""

from __future__ import annotations

from provide.foundation.errors import FoundationError


class NativepackError(FoundationError):
    """Base exception for all nativepack errors.

    ``hint`` carries remediation text for errors the user can recover from.
    """

    def __init__(self, message: str, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


class ValidationError(NativepackError):
    """Raised when a build request cannot be resolved into a valid configuration."""

    pass


class InsufficientPrivilegesError(NativepackError):
    """Raised when cross-platform packaging needs administrator rights."""

    pass


class UpgradeNotFoundError(NativepackError):
    """Raised when no previously built app exists at the upgrade path."""

    pass


class DirectoryExistsError(NativepackError):
    """Raised when the packaging engine refused to overwrite an existing output."""

    pass


class EngineError(NativepackError):
    """Raised when the packaging engine process fails."""

    pass


class InstallError(NativepackError):
    """Raised when a privileged install command fails."""

    pass


# 🌐📦🔚
