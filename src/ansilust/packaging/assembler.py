#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Assembly of installable platform packages from compiled binaries."""

from __future__ import annotations

from pathlib import Path

from attrs import define, field
from provide.foundation import logger
from provide.foundation.errors import FoundationError
from provide.foundation.file import atomic_write_text, ensure_dir, safe_copy
from provide.foundation.file.directory import safe_rmtree
from provide.foundation.platform import is_windows

from ansilust.config.defaults import (
    BIN_DIR,
    DEFAULT_EXECUTABLE_PERMS,
    LICENSE_FILE,
    LOADER_STUB_FILE,
    MANIFEST_FILE,
    PACKAGES_DIR,
    README_FILE,
)
from ansilust.exceptions import PackagingError
from ansilust.packaging.sources import BinarySource, SourceMode
from ansilust.packaging.templates import generate_loader_stub, generate_readme, render_manifest
from ansilust.packaging.version import resolve_version
from ansilust.platform.registry import PlatformEntry, iter_entries


@define
class AssemblyReport:
    """Outcome of one assembly run."""

    version: str
    mode: SourceMode
    assembled: list[str] = field(factory=list)
    skipped: list[str] = field(factory=list)
    failed: dict[str, str] = field(factory=dict)

    @property
    def exit_code(self) -> int:
        """Non-zero only if a target with a located binary failed; skips are expected."""
        return 1 if self.failed else 0


class PackageAssembler:
    """Builds one package directory per registry entry."""

    def __init__(
        self,
        root_dir: Path,
        output_dir: Path | None = None,
        binaries_dir: Path | None = None,
        local_binary: Path | None = None,
        version: str | None = None,
    ) -> None:
        """Initialize the assembler.

        Args:
            root_dir: Project root holding LICENSE, the root manifest and build outputs
            output_dir: Where package directories are written (default: root/packages)
            binaries_dir: CI layout directory (default: root/platform-binaries)
            local_binary: Local build output (default: root/zig-out/bin/ansilust)
            version: Version override; falls back to the root manifest
        """
        self.root_dir = root_dir
        self.output_dir = output_dir or root_dir / PACKAGES_DIR
        self.license_file = root_dir / LICENSE_FILE
        self.source = BinarySource.detect(root_dir, binaries_dir, local_binary)
        self.version = resolve_version(root_dir, version)

    def assemble(self) -> AssemblyReport:
        """Assemble every registry entry, isolating per-target failures."""
        report = AssemblyReport(version=self.version, mode=self.source.mode)
        logger.info(f"📦 Assembling ansilust packages (v{self.version}, {self.source.mode.value} mode)")

        if self.source.mode is SourceMode.LOCAL:
            # Every target receives the host binary; only the host's own package is correct
            logger.warning(f"⚠️ Local mode: using {self.source.local_binary} for all targets")

        for entry in iter_entries():
            binary = self.source.find_binary(entry)
            if binary is None:
                logger.info(f"⏭️ Skipping {entry.package_name} (binary not found for {entry.build_target})")
                report.skipped.append(entry.package_name)
                continue

            try:
                self.assemble_target(entry, binary)
            except PackagingError as e:
                logger.error(f"❌ {e}")
                report.failed[entry.package_name] = str(e)
                continue

            logger.info(f"✅ {entry.package_name}")
            report.assembled.append(entry.package_name)

        return report

    def package_dir(self, entry: PlatformEntry) -> Path:
        return self.output_dir / entry.package_name

    def assemble_target(self, entry: PlatformEntry, binary: Path) -> Path:
        """Write the complete package directory for one entry.

        The previous directory is removed first so that files from two
        versions never mix. No rollback happens on failure; the next run
        rewrites the directory.

        Raises:
            PackagingError: If any filesystem step fails
        """
        package_dir = self.package_dir(entry)
        try:
            if package_dir.exists():
                safe_rmtree(package_dir)
            bin_dir = package_dir / BIN_DIR
            ensure_dir(bin_dir)
            self._copy_binary(binary, bin_dir / entry.binary_name)
            atomic_write_text(package_dir / MANIFEST_FILE, render_manifest(entry, self.version))
            atomic_write_text(package_dir / LOADER_STUB_FILE, generate_loader_stub(entry))
            atomic_write_text(package_dir / README_FILE, generate_readme(entry))
            if self.license_file.is_file():
                safe_copy(self.license_file, package_dir / LICENSE_FILE, overwrite=True)
        except (OSError, FoundationError) as e:
            raise PackagingError(entry.package_name, str(e)) from e

        logger.debug(f"📝 Wrote {package_dir}")
        return package_dir

    def _copy_binary(self, source: Path, dest: Path) -> None:
        safe_copy(source, dest, preserve_mode=True, overwrite=True)
        if not is_windows():
            dest.chmod(DEFAULT_EXECUTABLE_PERMS)


# 🌶️📦🔚
