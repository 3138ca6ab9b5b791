#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Validation of the packaged binary before it is executed."""

from __future__ import annotations

from pathlib import Path
import stat

from provide.foundation import logger

from ansilust.config.defaults import EXECUTE_BITS
from ansilust.exceptions import CorruptInstallationError


def verify_binary(binary_path: Path, package_name: str, host_os: str) -> Path:
    """Check that the binary is a regular file and executable.

    A binary that lost its execute bits (some archivers strip them) is
    repaired in place instead of failing.

    Raises:
        CorruptInstallationError: If the path is missing or not a regular file
    """
    try:
        st = binary_path.stat()
    except OSError as e:
        raise CorruptInstallationError(package_name, str(binary_path), f"binary not found at {binary_path}") from e

    if not stat.S_ISREG(st.st_mode):
        raise CorruptInstallationError(package_name, str(binary_path), f"{binary_path} is not a regular file")

    if host_os != "win32" and not st.st_mode & EXECUTE_BITS:
        _ensure_executable(binary_path, st.st_mode)

    return binary_path


def _ensure_executable(binary_path: Path, mode: int) -> None:
    """Add owner/group/other execute bits to the binary."""
    new_mode = stat.S_IMODE(mode) | EXECUTE_BITS
    logger.debug(f"🔧 Restoring execute permission on {binary_path} ({oct(new_mode)})")
    try:
        binary_path.chmod(new_mode)
    except OSError as e:
        # Execution reports the failure if the bit really is missing
        logger.warning(f"⚠️ Could not make {binary_path} executable: {e}")


# 🌶️📦🔚
