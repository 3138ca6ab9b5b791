#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Locating installed platform packages.

Packages are found by an explicit search of a fixed list of install roots
for a directory named after the package that holds its manifest. A missing
package and a package whose payload is broken are reported as different
errors.
"""

from __future__ import annotations

import importlib.util
from pathlib import Path
from typing import Any

from attrs import frozen
from provide.foundation import logger
from provide.foundation.file.formats import read_json

from ansilust.config.defaults import LOADER_STUB_FILE, MANIFEST_FILE, PACKAGES_DIR
from ansilust.exceptions import CorruptInstallationError, UnsupportedPlatformError


@frozen
class InstalledPackage:
    """A platform package found on disk."""

    name: str
    root: Path
    manifest: dict[str, Any]
    bin_path: Path


def candidate_roots(packages_dir: str | Path | None = None) -> list[Path]:
    """Install roots searched for platform packages, in priority order."""
    install_root = Path(__file__).resolve().parent.parent.parent
    roots = []
    if packages_dir:
        roots.append(Path(packages_dir).expanduser())
    roots.extend(
        [
            install_root,  # Adjacent installs (site-packages)
            install_root / PACKAGES_DIR,  # Sibling packages directory
            Path.cwd() / PACKAGES_DIR,
        ]
    )
    return _remove_duplicates(roots)


def find_package(package_name: str, platform_key: str, roots: list[Path]) -> InstalledPackage:
    """Find and load an installed platform package.

    Args:
        package_name: Package to look for (e.g. "ansilust-linux-x64-gnu")
        platform_key: Platform key the package name was derived from
        roots: Install roots to search

    Returns:
        The installed package with its binary path resolved from the loader stub

    Raises:
        UnsupportedPlatformError: If no root holds the package
        CorruptInstallationError: If the package is present but its stub is unusable
    """
    for root in roots:
        package_dir = root / package_name
        manifest_path = package_dir / MANIFEST_FILE
        if manifest_path.is_file():
            logger.debug(f"📦 Found {package_name} at: {package_dir}")
            return _load_package(package_name, package_dir, manifest_path)
        logger.trace(f"🔍 {package_name} not in {root}")

    raise UnsupportedPlatformError(platform_key, package_name, f'the package "{package_name}" was not found')


def _load_package(package_name: str, package_dir: Path, manifest_path: Path) -> InstalledPackage:
    try:
        manifest = read_json(manifest_path)
    except Exception as e:
        raise CorruptInstallationError(package_name, None, f"unreadable manifest {manifest_path}: {e}") from e
    # read_json logs invalid JSON and returns None instead of raising
    if not isinstance(manifest, dict):
        raise CorruptInstallationError(
            package_name, None, f"unreadable manifest {manifest_path}: not a JSON object"
        )

    bin_path = load_bin_path(package_name, package_dir / LOADER_STUB_FILE)
    return InstalledPackage(name=package_name, root=package_dir, manifest=manifest, bin_path=bin_path)


def load_bin_path(package_name: str, stub_path: Path) -> Path:
    """Execute a package's loader stub and return the binary path it exposes."""
    if not stub_path.is_file():
        raise CorruptInstallationError(package_name, None, f"loader stub missing at {stub_path}")

    module_name = "_ansilust_stub_" + package_name.replace("-", "_")
    spec = importlib.util.spec_from_file_location(module_name, stub_path)
    if spec is None or spec.loader is None:
        raise CorruptInstallationError(package_name, None, f"cannot load loader stub {stub_path}")

    module = importlib.util.module_from_spec(spec)
    try:
        spec.loader.exec_module(module)
    except Exception as e:
        raise CorruptInstallationError(package_name, None, f"loader stub failed: {e}") from e

    bin_path = getattr(module, "bin_path", None)
    if not bin_path:
        raise CorruptInstallationError(package_name, None, f"loader stub {stub_path} defines no bin_path")
    return Path(bin_path)


def _remove_duplicates(paths: list[Path]) -> list[Path]:
    seen = set()
    unique = []
    for path in paths:
        if path not in seen:
            seen.add(path)
            unique.append(path)
    return unique


# 🌶️📦🔚
