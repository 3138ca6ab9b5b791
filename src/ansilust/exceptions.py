#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Custom exceptions for ansilust."""

from __future__ import annotations

from provide.foundation.errors import FoundationError


class AnsilustError(FoundationError):
    """Base exception for all ansilust errors."""

    pass


class UnsupportedPlatformError(AnsilustError):
    """Raised when no platform package exists for the host's platform key."""

    def __init__(self, platform_key: str, package_name: str, reason: str | None = None) -> None:
        self.platform_key = platform_key
        self.package_name = package_name
        self.reason = reason
        message = f"ansilust is not available for your platform ({platform_key})"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class CorruptInstallationError(AnsilustError):
    """Raised when a platform package is installed but its binary is unusable."""

    def __init__(self, package_name: str, binary_path: str | None, reason: str) -> None:
        self.package_name = package_name
        self.binary_path = binary_path
        self.reason = reason
        super().__init__(f"{package_name}: {reason}")


class PackagingError(AnsilustError):
    """Raised when a single platform package cannot be written."""

    def __init__(self, package_name: str, message: str) -> None:
        self.package_name = package_name
        super().__init__(f"{package_name}: {message}")


# 🌶️📦🔚
