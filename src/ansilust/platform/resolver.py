#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Platform key resolution.

A platform key names one OS/CPU/libc combination, e.g. ``linux-x64-gnu`` or
``darwin-arm64``. It is spelled the same way by the assembler (package
directory names) and the launcher (package lookup), so both sides go through
the functions here.
"""

from __future__ import annotations

from collections.abc import Callable
import platform

from provide.foundation import logger
from provide.foundation.platform import get_os_name

from ansilust.platform.libc import LibcFamily, detect_libc_family

LibcProbe = Callable[[], LibcFamily | str | None]

# Runtime CPU name -> package CPU name (64-bit ARM is handled separately)
CPU_RENAMES = {
    "x64": "x64",
    "ia32": "i386",
    "arm": "arm",
}

# platform.machine() -> runtime CPU name
MACHINE_TO_CPU = {
    "x86_64": "x64",
    "amd64": "x64",
    "x64": "x64",
    "aarch64": "arm64",
    "arm64": "arm64",
    "armv6l": "arm",
    "armv7l": "arm",
    "armv8l": "arm",
    "arm": "arm",
    "i386": "ia32",
    "i486": "ia32",
    "i586": "ia32",
    "i686": "ia32",
    "x86": "ia32",
}

# get_os_name() -> runtime OS name
OS_NAMES = {
    "darwin": "darwin",
    "linux": "linux",
    "windows": "win32",
}


def normalize_cpu(host_os: str, host_cpu: str) -> str:
    """Map a runtime CPU name to the spelling used in package names."""
    if host_cpu == "arm64":
        return "arm64" if host_os == "darwin" else "aarch64"
    return CPU_RENAMES.get(host_cpu, host_cpu)


def normalize_libc(libc_probe: LibcProbe) -> str:
    """Run the libc probe and fold its answer into ``gnu`` or ``musl``."""
    try:
        family = libc_probe()
    except Exception as e:
        logger.debug(f"🔍 libc probe raised, assuming gnu: {e}")
        return LibcFamily.GNU.value

    value = family.value if isinstance(family, LibcFamily) else family
    return LibcFamily.MUSL.value if value == LibcFamily.MUSL.value else LibcFamily.GNU.value


def resolve_platform_key(host_os: str, host_cpu: str, libc_probe: LibcProbe = detect_libc_family) -> str:
    """Compose the platform key for a host.

    Args:
        host_os: Runtime OS name (``darwin``, ``linux``, ``win32``)
        host_cpu: Runtime CPU name (``x64``, ``arm64``, ``arm``, ``ia32``)
        libc_probe: Callable reporting the C library family; only consulted on Linux

    Returns:
        ``{os}-{cpu}`` or ``{os}-{cpu}-{libc}``. Unknown names pass through
        unchanged; unsupported keys are rejected by the registry, not here.
    """
    cpu = normalize_cpu(host_os, host_cpu)
    if host_os == "linux":
        return f"{host_os}-{cpu}-{normalize_libc(libc_probe)}"
    return f"{host_os}-{cpu}"


def get_host_os() -> str:
    """Get the runtime OS name for this machine."""
    os_name = get_os_name()
    return OS_NAMES.get(os_name, os_name)


def get_host_cpu() -> str:
    """Get the runtime CPU name for this machine."""
    machine = platform.machine().lower()
    return MACHINE_TO_CPU.get(machine, machine)


def current_platform_key(libc_probe: LibcProbe = detect_libc_family) -> str:
    """Resolve the platform key of the running machine."""
    key = resolve_platform_key(get_host_os(), get_host_cpu(), libc_probe)
    logger.debug(f"🖥️ Resolved platform key: {key}")
    return key


# 🌶️📦🔚
