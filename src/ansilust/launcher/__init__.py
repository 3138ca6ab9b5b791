#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Runtime launcher for the native ansilust binary."""

from __future__ import annotations

from ansilust.launcher.binary import verify_binary
from ansilust.launcher.locator import InstalledPackage, candidate_roots, find_package, load_bin_path
from ansilust.launcher.main import launch, locate_package, main, run_launcher
from ansilust.launcher.process import (
    ExecResult,
    Exited,
    Signaled,
    SpawnFailed,
    result_from_returncode,
    spawn_and_wait,
)

__all__ = [
    "ExecResult",
    "Exited",
    "InstalledPackage",
    "Signaled",
    "SpawnFailed",
    "candidate_roots",
    "find_package",
    "launch",
    "load_bin_path",
    "locate_package",
    "main",
    "result_from_returncode",
    "run_launcher",
    "spawn_and_wait",
    "verify_binary",
]

# 🌶️📦🔚
