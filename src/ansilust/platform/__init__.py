#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Platform identity: key resolution, libc detection and the package registry."""

from __future__ import annotations

from ansilust.platform.libc import LibcFamily, detect_libc_family
from ansilust.platform.registry import (
    PLATFORM_TO_DIR,
    REGISTRY,
    PackageMetadata,
    PlatformEntry,
    find_entry,
    get_entry,
    get_entry_by_package,
    get_entry_by_target,
    is_supported,
    iter_entries,
    package_name_for,
    supported_platform_keys,
)
from ansilust.platform.resolver import (
    current_platform_key,
    get_host_cpu,
    get_host_os,
    normalize_cpu,
    resolve_platform_key,
)

__all__ = [
    "PLATFORM_TO_DIR",
    "REGISTRY",
    "LibcFamily",
    "PackageMetadata",
    "PlatformEntry",
    "current_platform_key",
    "detect_libc_family",
    "find_entry",
    "get_entry",
    "get_entry_by_package",
    "get_entry_by_target",
    "get_host_cpu",
    "get_host_os",
    "is_supported",
    "iter_entries",
    "normalize_cpu",
    "package_name_for",
    "resolve_platform_key",
    "supported_platform_keys",
]

# 🌶️📦🔚
