#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Tests for binary validation and permission repair."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
import stat
import sys
from unittest.mock import patch

import pytest

from ansilust.exceptions import CorruptInstallationError
from ansilust.launcher.binary import verify_binary

posix_only = pytest.mark.skipif(sys.platform == "win32", reason="requires POSIX permission bits")


class TestVerifyBinary:
    """Test verify_binary."""

    def test_missing_binary_is_corrupt(self, tmp_path: Path) -> None:
        missing = tmp_path / "bin" / "ansilust"

        with pytest.raises(CorruptInstallationError) as exc_info:
            verify_binary(missing, "ansilust-linux-x64-gnu", "linux")

        assert exc_info.value.binary_path == str(missing)
        assert exc_info.value.package_name == "ansilust-linux-x64-gnu"

    def test_directory_is_corrupt(self, tmp_path: Path) -> None:
        directory = tmp_path / "ansilust"
        directory.mkdir()

        with pytest.raises(CorruptInstallationError, match="not a regular file"):
            verify_binary(directory, "ansilust-linux-x64-gnu", "linux")

    @posix_only
    def test_executable_left_alone(self, tmp_path: Path, make_script: Callable[..., Path]) -> None:
        binary = make_script(tmp_path / "ansilust", "exit 0", 0o750)

        assert verify_binary(binary, "ansilust-linux-x64-gnu", "linux") == binary
        assert stat.S_IMODE(binary.stat().st_mode) == 0o750

    @posix_only
    def test_missing_execute_bits_repaired(self, tmp_path: Path, make_script: Callable[..., Path]) -> None:
        binary = make_script(tmp_path / "ansilust", "exit 0", 0o644)

        verify_binary(binary, "ansilust-linux-x64-gnu", "linux")

        assert stat.S_IMODE(binary.stat().st_mode) == 0o755

    @posix_only
    def test_windows_skips_repair(self, tmp_path: Path, make_script: Callable[..., Path]) -> None:
        binary = make_script(tmp_path / "ansilust.exe", "exit 0", 0o644)

        verify_binary(binary, "ansilust-win32-x64", "win32")

        assert stat.S_IMODE(binary.stat().st_mode) == 0o644

    @posix_only
    def test_failed_repair_is_not_fatal(self, tmp_path: Path, make_script: Callable[..., Path]) -> None:
        binary = make_script(tmp_path / "ansilust", "exit 0", 0o644)

        with patch.object(Path, "chmod", side_effect=PermissionError("read-only filesystem")):
            assert verify_binary(binary, "ansilust-linux-x64-gnu", "linux") == binary


# 🌶️📦🔚
