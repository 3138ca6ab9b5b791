#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Where the assembler finds compiled binaries.

Two layouts are supported:

- ``ci``: a matrix build drops one binary per target into
  ``platform-binaries/<build-target>/ansilust``.
- ``local``: a developer build leaves a single host binary at
  ``zig-out/bin/ansilust``. The same file is offered for every target.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from attrs import frozen
from provide.foundation import logger

from ansilust.config.defaults import BINARY_NAME, CI_BINARIES_DIR, LOCAL_BINARY_DIR, WINDOWS_BINARY_NAME
from ansilust.platform.registry import PLATFORM_TO_DIR, PlatformEntry


class SourceMode(str, Enum):
    CI = "ci"
    LOCAL = "local"


@frozen
class BinarySource:
    """Resolves the compiled binary for each registry entry."""

    mode: SourceMode
    binaries_dir: Path
    local_binary: Path

    @classmethod
    def detect(
        cls,
        root_dir: Path,
        binaries_dir: Path | None = None,
        local_binary: Path | None = None,
    ) -> BinarySource:
        """Pick CI mode when the per-platform binaries directory exists."""
        binaries_dir = binaries_dir or root_dir / CI_BINARIES_DIR
        local_binary = local_binary or root_dir.joinpath(*LOCAL_BINARY_DIR, BINARY_NAME)
        mode = SourceMode.CI if binaries_dir.is_dir() else SourceMode.LOCAL
        logger.debug(f"🗂️ Binary source mode: {mode.value}")
        return cls(mode=mode, binaries_dir=binaries_dir, local_binary=local_binary)

    def candidates(self, entry: PlatformEntry) -> list[Path]:
        """Paths that may hold the binary for ``entry``, in preference order."""
        if self.mode is SourceMode.LOCAL:
            return [self.local_binary]

        target_dir = self.binaries_dir / PLATFORM_TO_DIR[entry.build_target]
        paths = [target_dir / BINARY_NAME]
        if entry.os == "win32":
            paths.append(target_dir / WINDOWS_BINARY_NAME)
        return paths

    def find_binary(self, entry: PlatformEntry) -> Path | None:
        """Return the existing source binary for ``entry``, or None if not built."""
        for path in self.candidates(entry):
            if path.is_file():
                return path
        return None


# 🌶️📦🔚
