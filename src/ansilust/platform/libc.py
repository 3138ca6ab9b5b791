#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Best-effort detection of the Linux C library family."""

from __future__ import annotations

from enum import Enum
import glob
import platform

from provide.foundation import logger
from provide.foundation.errors import FoundationError
from provide.foundation.process import run

MUSL_LOADER_PATTERNS = ["/lib/ld-musl-*.so.1", "/usr/lib/ld-musl-*.so.1"]


class LibcFamily(str, Enum):
    """C library family reported by the libc probe."""

    GNU = "gnu"
    MUSL = "musl"
    UNKNOWN = "unknown"


def detect_libc_family() -> LibcFamily:
    """Classify the running system's C library.

    Never raises: anything the probe cannot classify, or any error while
    probing, is reported as ``LibcFamily.UNKNOWN``.
    """
    try:
        return _probe_libc_ver() or _probe_musl_loader() or _probe_ldd() or LibcFamily.UNKNOWN
    except (OSError, ValueError, FoundationError) as e:
        logger.debug(f"🔍 libc probe failed: {e}")
        return LibcFamily.UNKNOWN


def _probe_libc_ver() -> LibcFamily | None:
    lib, _version = platform.libc_ver()
    if lib == "glibc":
        return LibcFamily.GNU
    if "musl" in lib:
        return LibcFamily.MUSL
    return None


def _probe_musl_loader() -> LibcFamily | None:
    for pattern in MUSL_LOADER_PATTERNS:
        if glob.glob(pattern):
            return LibcFamily.MUSL
    return None


def _probe_ldd() -> LibcFamily | None:
    # musl's ldd prints its banner to stderr and exits 1
    result = run(["ldd", "--version"], capture_output=True, check=False)
    output = f"{result.stdout or ''}{result.stderr or ''}".lower()
    if "musl" in output:
        return LibcFamily.MUSL
    if "glibc" in output or "gnu libc" in output:
        return LibcFamily.GNU
    return None


# 🌶️📦🔚
