#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Shared pytest fixtures and helpers for ansilust tests."""

from __future__ import annotations

from collections.abc import Callable, Iterator
import os
from pathlib import Path

import provide.testkit  # noqa: F401 - Installs setproctitle blocker early
from provide.testkit.logger import reset_foundation_setup_for_testing
import pytest

from ansilust.config import AnsilustRuntimeConfig
from ansilust.platform.registry import PlatformEntry, get_entry


def write_script(path: Path, body: str, mode: int = 0o755) -> Path:
    """Write a /bin/sh script that stands in for the native binary."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(f"#!/bin/sh\n{body}\n")
    path.chmod(mode)
    return path


@pytest.fixture(autouse=True)
def reset_foundation_logging() -> Iterator[None]:
    """Reset foundation logging state before each test to avoid conflicts."""
    reset_foundation_setup_for_testing()
    yield
    reset_foundation_setup_for_testing()


@pytest.fixture(autouse=True)
def clean_ansilust_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's ANSILUST_* settings out of tests."""
    for name in list(os.environ):
        if name.startswith("ANSILUST_"):
            monkeypatch.delenv(name, raising=False)


@pytest.fixture
def make_script() -> Callable[..., Path]:
    """Factory for /bin/sh scripts standing in for the native binary."""
    return write_script


@pytest.fixture
def host_entry() -> PlatformEntry:
    """Registry entry used as "this machine" by launcher tests."""
    return get_entry("linux-x64-gnu")


@pytest.fixture
def install_package(tmp_path: Path) -> Callable[..., Path]:
    """Factory that lays out an installed platform package under tmp_path/site."""

    def _install(entry: PlatformEntry, body: str = "exit 0", mode: int = 0o755) -> Path:
        from ansilust.packaging.templates import generate_loader_stub, render_manifest

        package_dir = tmp_path / "site" / entry.package_name
        (package_dir / "bin").mkdir(parents=True, exist_ok=True)
        (package_dir / "package.json").write_text(render_manifest(entry, "1.2.3"))
        (package_dir / "index.py").write_text(generate_loader_stub(entry))
        write_script(package_dir / "bin" / "ansilust", body, mode)
        return package_dir

    return _install


@pytest.fixture
def site_config(tmp_path: Path) -> AnsilustRuntimeConfig:
    """Runtime config pointing the launcher at tmp_path/site."""
    return AnsilustRuntimeConfig(packages_dir=str(tmp_path / "site"))


# 🌶️📦🔚
