#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""ansilust: platform dispatch and packaging for the native ansilust binary."""

from __future__ import annotations

from provide.foundation.utils import get_version

from ansilust.exceptions import (
    AnsilustError,
    CorruptInstallationError,
    PackagingError,
    UnsupportedPlatformError,
)
from ansilust.platform import current_platform_key, package_name_for, resolve_platform_key

__version__ = get_version("ansilust", caller_file=__file__)

__all__ = [
    "AnsilustError",
    "CorruptInstallationError",
    "PackagingError",
    "UnsupportedPlatformError",
    "__version__",
    "current_platform_key",
    "package_name_for",
    "resolve_platform_key",
]

# 🌶️📦🔚
