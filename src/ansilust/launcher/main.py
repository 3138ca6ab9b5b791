#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""The ``ansilust`` command: find the platform binary and run it.

Every argument is forwarded to the native binary untouched, so this entry
point parses no options of its own.
"""

from __future__ import annotations

from collections.abc import Sequence
import sys
from typing import NoReturn

from provide.foundation import logger
from provide.foundation.console import perr

from ansilust.config import AnsilustRuntimeConfig
from ansilust.config.defaults import FAILURE_EXIT_CODE, REINSTALL_COMMAND, UPGRADE_COMMAND
from ansilust.console import initialize_logging
from ansilust.exceptions import CorruptInstallationError, UnsupportedPlatformError
from ansilust.launcher.binary import verify_binary
from ansilust.launcher.locator import InstalledPackage, candidate_roots, find_package
from ansilust.launcher.process import spawn_and_wait
from ansilust.platform.registry import is_supported, iter_entries, package_name_for
from ansilust.platform.resolver import current_platform_key, get_host_os


def locate_package(platform_key: str, config: AnsilustRuntimeConfig) -> InstalledPackage:
    """Find the installed package for a platform key.

    Raises:
        UnsupportedPlatformError: If the key is unknown or its package is not installed
        CorruptInstallationError: If the package is installed but unusable
    """
    package_name = package_name_for(platform_key)
    if not is_supported(platform_key):
        raise UnsupportedPlatformError(platform_key, package_name, "not a supported platform")
    return find_package(package_name, platform_key, candidate_roots(config.packages_dir))


def run_launcher(
    args: Sequence[str],
    config: AnsilustRuntimeConfig | None = None,
    platform_key: str | None = None,
    host_os: str | None = None,
) -> int:
    """Resolve, validate and run the native binary; return the exit status."""
    config = config or AnsilustRuntimeConfig.from_env()
    platform_key = platform_key or current_platform_key()
    host_os = host_os or get_host_os()

    try:
        package = locate_package(platform_key, config)
        binary = verify_binary(package.bin_path, package.name, host_os)
    except UnsupportedPlatformError as e:
        report_unsupported_platform(e)
        return FAILURE_EXIT_CODE
    except CorruptInstallationError as e:
        report_corrupt_installation(e)
        return FAILURE_EXIT_CODE

    return spawn_and_wait(binary, args).exit_status


def launch(argv: Sequence[str], config: AnsilustRuntimeConfig | None = None) -> NoReturn:
    """Run the native binary with ``argv`` and exit with its status."""
    sys.exit(run_launcher(argv, config=config))


def report_unsupported_platform(error: UnsupportedPlatformError) -> None:
    logger.debug(f"🚫 Unsupported platform: {error}")
    perr(f"Error: ansilust is not available for your platform ({error.platform_key})")
    perr("")
    perr(f'The package "{error.package_name}" was not found.')
    perr("")
    perr("Supported platforms:")
    for entry in iter_entries():
        perr(f"  - {entry.platform_key} ({entry.description})")
    perr("")
    perr("To reinstall with your platform binary:")
    perr(f"  {REINSTALL_COMMAND}")


def report_corrupt_installation(error: CorruptInstallationError) -> None:
    logger.debug(f"💥 Corrupt installation: {error}")
    location = error.binary_path or error.package_name
    perr(f"Error: Binary not found at {location}")
    perr("")
    perr(f"The ansilust binary is missing or corrupted ({error.reason}).")
    perr("")
    perr("To fix this:")
    perr(f"  {REINSTALL_COMMAND}")
    perr("")
    perr("Or to reinstall the package:")
    perr(f"  {UPGRADE_COMMAND}")


def main() -> NoReturn:
    """Console script entry point."""
    config = AnsilustRuntimeConfig.from_env()
    initialize_logging(config.log_level)
    launch(sys.argv[1:], config=config)


# 🌶️📦🔚
