#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Static table of supported platform packages.

Both the launcher and the assembler consult this table; a platform that is
not listed here is unsupported.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from attrs import frozen

from ansilust.config.defaults import BINARY_NAME, PACKAGE_PREFIX, WINDOWS_BINARY_NAME
from ansilust.exceptions import UnsupportedPlatformError


def package_name_for(platform_key: str) -> str:
    """Published package name for a platform key."""
    return f"{PACKAGE_PREFIX}{platform_key}"


@frozen
class PackageMetadata:
    """Install-time constraints of one platform package."""

    package_name: str
    os: tuple[str, ...]
    cpu: tuple[str, ...]
    libc: tuple[str, ...] = ()

    def as_constraints(self) -> dict[str, Any]:
        """Manifest fields restricting where the package installs."""
        constraints: dict[str, Any] = {"os": list(self.os), "cpu": list(self.cpu)}
        if self.libc:
            constraints["libc"] = list(self.libc)
        return constraints


@frozen
class PlatformEntry:
    """One supported build target and the package it becomes."""

    build_target: str
    os: str
    cpu: str
    libc: str | None = None
    description: str = ""

    @property
    def platform_key(self) -> str:
        if self.libc:
            return f"{self.os}-{self.cpu}-{self.libc}"
        return f"{self.os}-{self.cpu}"

    @property
    def package_name(self) -> str:
        return package_name_for(self.platform_key)

    @property
    def platform_dir(self) -> str:
        """Subdirectory holding this target's binary in the CI layout."""
        return PLATFORM_TO_DIR[self.build_target]

    @property
    def binary_name(self) -> str:
        """Binary file name inside the package's ``bin/`` directory."""
        return WINDOWS_BINARY_NAME if self.os == "win32" else BINARY_NAME

    @property
    def metadata(self) -> PackageMetadata:
        return PackageMetadata(
            package_name=self.package_name,
            os=(self.os,),
            cpu=(self.cpu,),
            libc=(self.libc,) if self.libc else (),
        )


REGISTRY: tuple[PlatformEntry, ...] = (
    PlatformEntry("x86_64-macos", "darwin", "x64", description="Intel Mac"),
    PlatformEntry("aarch64-macos", "darwin", "arm64", description="Apple Silicon"),
    PlatformEntry("x86_64-linux-gnu", "linux", "x64", "gnu", description="Linux glibc"),
    PlatformEntry("x86_64-linux-musl", "linux", "x64", "musl", description="Linux musl"),
    PlatformEntry("aarch64-linux-gnu", "linux", "aarch64", "gnu", description="ARM64 Linux glibc"),
    PlatformEntry("aarch64-linux-musl", "linux", "aarch64", "musl", description="ARM64 Linux musl"),
    PlatformEntry("arm-linux-gnueabihf", "linux", "arm", "gnu", description="ARMv7 glibc"),
    PlatformEntry("arm-linux-musleabihf", "linux", "arm", "musl", description="ARMv7 musl"),
    PlatformEntry("i386-linux-musl", "linux", "i386", "musl", description="32-bit Linux musl"),
    PlatformEntry("x86_64-windows", "win32", "x64", description="Windows x64"),
)

# CI artifacts are laid out one directory per build target
PLATFORM_TO_DIR: dict[str, str] = {entry.build_target: entry.build_target for entry in REGISTRY}

_BY_KEY = {entry.platform_key: entry for entry in REGISTRY}
_BY_TARGET = {entry.build_target: entry for entry in REGISTRY}
_BY_PACKAGE = {entry.package_name: entry for entry in REGISTRY}


def iter_entries() -> Iterator[PlatformEntry]:
    """Iterate registry entries in registry order."""
    return iter(REGISTRY)


def supported_platform_keys() -> list[str]:
    return [entry.platform_key for entry in REGISTRY]


def is_supported(platform_key: str) -> bool:
    return platform_key in _BY_KEY


def get_entry(platform_key: str) -> PlatformEntry:
    """Look up the registry entry for a platform key.

    Raises:
        UnsupportedPlatformError: If the key is not in the registry
    """
    try:
        return _BY_KEY[platform_key]
    except KeyError:
        raise UnsupportedPlatformError(
            platform_key, package_name_for(platform_key), "not a supported platform"
        ) from None


def get_entry_by_target(build_target: str) -> PlatformEntry:
    try:
        return _BY_TARGET[build_target]
    except KeyError:
        raise UnsupportedPlatformError(build_target, "", f"unknown build target {build_target!r}") from None


def get_entry_by_package(package_name: str) -> PlatformEntry:
    try:
        return _BY_PACKAGE[package_name]
    except KeyError:
        platform_key = package_name.removeprefix(PACKAGE_PREFIX)
        raise UnsupportedPlatformError(platform_key, package_name, "unknown package") from None


def find_entry(name: str) -> PlatformEntry:
    """Look up an entry by platform key, package name or build target.

    Raises:
        UnsupportedPlatformError: If no lookup matches
    """
    for lookup in (get_entry, get_entry_by_package, get_entry_by_target):
        try:
            return lookup(name)
        except UnsupportedPlatformError:
            continue
    raise UnsupportedPlatformError(name, package_name_for(name), "not a platform key, package or build target")


# 🌶️📦🔚
