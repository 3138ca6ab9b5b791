#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Tests for generated package files."""

from __future__ import annotations

import json
from pathlib import Path
import runpy
import sys

import pytest

from ansilust.packaging.templates import (
    generate_loader_stub,
    generate_manifest,
    generate_readme,
    render_manifest,
)
from ansilust.platform.registry import get_entry, iter_entries


class TestManifest:
    def test_fields(self) -> None:
        manifest = generate_manifest(get_entry("linux-x64-musl"), "1.4.0")

        assert manifest["name"] == "ansilust-linux-x64-musl"
        assert manifest["version"] == "1.4.0"
        assert manifest["description"] == "ansilust binaries for linux-x64-musl"
        assert manifest["main"] == "index.py"
        assert manifest["files"] == ["bin/", "index.py", "README.md", "LICENSE"]
        assert manifest["license"] == "MIT"
        assert manifest["os"] == ["linux"]
        assert manifest["cpu"] == ["x64"]
        assert manifest["libc"] == ["musl"]

    @pytest.mark.parametrize("platform_key", ["darwin-x64", "darwin-arm64", "win32-x64"])
    def test_no_libc_constraint(self, platform_key: str) -> None:
        assert "libc" not in generate_manifest(get_entry(platform_key), "1.0.0")

    def test_rendering_is_deterministic(self) -> None:
        entry = get_entry("linux-arm-gnu")

        rendered = render_manifest(entry, "1.0.0")

        assert rendered == render_manifest(entry, "1.0.0")
        assert rendered.endswith("}\n")
        assert rendered.startswith('{\n  "name": "ansilust-linux-arm-gnu",\n')
        assert json.loads(rendered) == generate_manifest(entry, "1.0.0")


class TestLoaderStub:
    def test_bin_path_is_absolute(self, tmp_path: Path) -> None:
        entry = get_entry("linux-x64-gnu")
        stub = tmp_path / entry.package_name / "index.py"
        stub.parent.mkdir()
        stub.write_text(generate_loader_stub(entry))

        namespace = runpy.run_path(str(stub))

        expected_name = "ansilust.exe" if sys.platform == "win32" else "ansilust"
        assert namespace["bin_path"] == str(stub.parent / "bin" / expected_name)

    def test_stub_is_identical_apart_from_name(self) -> None:
        stubs = {generate_loader_stub(entry).replace(entry.package_name, "PKG") for entry in iter_entries()}

        assert len(stubs) == 1


def test_readme_names_the_platform() -> None:
    readme = generate_readme(get_entry("linux-i386-musl"))

    assert readme.startswith("# ansilust-linux-i386-musl\n")
    assert "native ansilust binary for linux-i386-musl" in readme
    assert "## License\n\nMIT\n" in readme


# 🌶️📦🔚
