#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Package assembly command for the ansilust-pack CLI."""

from __future__ import annotations

from pathlib import Path

import click
from provide.foundation.console import perr, pout

from ansilust.config import AnsilustRuntimeConfig
from ansilust.console import get_command_logger
from ansilust.packaging import PackageAssembler

# Get structured logger for this command
log = get_command_logger("assemble")


@click.command("assemble")
@click.option(
    "--root",
    "root_dir",
    default=".",
    type=click.Path(file_okay=False, exists=True, resolve_path=True, path_type=Path),
    help="Project root holding LICENSE, the root manifest and build outputs.",
)
@click.option(
    "--output",
    "output_dir",
    type=click.Path(file_okay=False, resolve_path=True, path_type=Path),
    help="Directory for the package directories (default: <root>/packages).",
)
@click.option(
    "--binaries-dir",
    type=click.Path(file_okay=False, resolve_path=True, path_type=Path),
    help="CI layout with one subdirectory per build target (default: <root>/platform-binaries).",
)
@click.option(
    "--local-binary",
    type=click.Path(dir_okay=False, resolve_path=True, path_type=Path),
    help="Single host binary used when no CI layout exists (default: <root>/zig-out/bin/ansilust).",
)
@click.option(
    "--version-override",
    help="Version to stamp into packages (default: $ANSILUST_RELEASE_VERSION or the root manifest).",
)
@click.pass_context
def assemble_command(
    ctx: click.Context,
    root_dir: Path,
    output_dir: Path | None,
    binaries_dir: Path | None,
    local_binary: Path | None,
    version_override: str | None,
) -> None:
    """Assemble one installable package per supported platform."""
    config = AnsilustRuntimeConfig.from_env()
    version = version_override or config.release_version
    log.debug("Assemble command started", root=str(root_dir), version=version)

    assembler = PackageAssembler(
        root_dir,
        output_dir=output_dir,
        binaries_dir=binaries_dir,
        local_binary=local_binary,
        version=version,
    )
    pout(f"📦 Assembling ansilust packages (v{assembler.version}, {assembler.source.mode.value} mode)")
    pout("")

    report = assembler.assemble()

    for name in report.skipped:
        pout(f"⏭️  Skipped {name} (binary not found)")
    for name in report.assembled:
        pout(f"✓ {name}")
    for name, message in report.failed.items():
        perr(f"✗ {name}: {message}")

    pout("")
    pout(f"Complete: {len(report.assembled)} packages assembled")
    log.info(
        "Assembly finished",
        assembled=len(report.assembled),
        skipped=len(report.skipped),
        failed=len(report.failed),
    )

    if report.failed:
        perr(f"Failed: {len(report.failed)} packages")
        ctx.exit(report.exit_code)


# 🌶️📦🔚
