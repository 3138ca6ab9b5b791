#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""ansilust-pack command-line interface entrypoint."""

from __future__ import annotations

import click
from provide.foundation.utils import get_version

from ansilust.commands.assemble import assemble_command
from ansilust.commands.platforms import platforms_command, resolve_command
from ansilust.config import AnsilustRuntimeConfig
from ansilust.console import get_command_logger, initialize_logging

__version__ = get_version("ansilust", caller_file=__file__)


@click.group(context_settings=dict(help_option_names=["-h", "--help"]))
@click.version_option(
    __version__,
    "-V",
    "--version",
    prog_name="ansilust-pack",
    message="%(prog)s version %(version)s",
)
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Build and inspect the per-platform ansilust packages.

    Configure via environment variables:
    - ANSILUST_LOG_LEVEL: Log level (trace, debug, info, warning, error)
    - ANSILUST_RELEASE_VERSION: Version stamped into assembled packages
    - ANSILUST_PACKAGES_DIR: Extra directory searched for installed packages
    """
    ctx.ensure_object(dict)

    config = AnsilustRuntimeConfig.from_env()
    initialize_logging(config.log_level, service_name="ansilust-pack")

    ctx.obj["config"] = config
    ctx.obj["log"] = get_command_logger("cli")


cli.add_command(assemble_command, name="assemble")
cli.add_command(platforms_command, name="platforms")
cli.add_command(resolve_command, name="resolve")

main = cli

if __name__ == "__main__":
    cli()

# 🌶️📦🔚
