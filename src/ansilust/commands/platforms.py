#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Platform inspection commands for the ansilust-pack CLI."""

from __future__ import annotations

import json

import click
from provide.foundation.console import perr, pout

from ansilust.config import AnsilustRuntimeConfig
from ansilust.console import get_command_logger
from ansilust.exceptions import CorruptInstallationError, UnsupportedPlatformError
from ansilust.platform import current_platform_key, find_entry, is_supported, iter_entries, package_name_for

log = get_command_logger("platforms")


@click.command("platforms")
@click.argument("name", required=False)
@click.option("--json", "as_json", is_flag=True, help="Output the registry as JSON")
def platforms_command(name: str | None, as_json: bool) -> None:
    """List supported platforms and their packages.

    NAME limits the listing to one platform key, package name or build target.
    """
    if name:
        try:
            entries = [find_entry(name)]
        except UnsupportedPlatformError as e:
            perr(f"❌ {e}")
            raise click.Abort() from e
    else:
        entries = list(iter_entries())

    if as_json:
        data = [
            {
                "platform_key": entry.platform_key,
                "package_name": entry.package_name,
                "build_target": entry.build_target,
                **entry.metadata.as_constraints(),
            }
            for entry in entries
        ]
        pout(json.dumps(data, indent=2))
        return

    pout("🖥️  Supported platforms")
    pout("=" * 60)
    for entry in entries:
        pout(f"  • {entry.platform_key:<20} {entry.package_name:<30} ({entry.build_target})")


@click.command("resolve")
def resolve_command() -> None:
    """Show the platform key and package for this machine."""
    from ansilust.launcher.main import locate_package

    platform_key = current_platform_key()
    package_name = package_name_for(platform_key)
    log.debug("Resolved platform", platform_key=platform_key, package_name=package_name)

    pout(f"Platform: {platform_key}")
    pout(f"Package:  {package_name}")
    pout(f"Supported: {'yes' if is_supported(platform_key) else 'no'}")

    try:
        package = locate_package(platform_key, AnsilustRuntimeConfig.from_env())
    except UnsupportedPlatformError as e:
        perr(f"❌ {e}")
        return
    except CorruptInstallationError as e:
        perr(f"💥 {e}")
        return

    pout(f"Installed: {package.root}")
    pout(f"Binary:   {package.bin_path}")


# 🌶️📦🔚
