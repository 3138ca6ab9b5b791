#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Tests for release version lookup."""

from __future__ import annotations

import json
from pathlib import Path

from ansilust.packaging.version import resolve_version


class TestResolveVersion:
    def test_override_wins(self, tmp_path: Path) -> None:
        (tmp_path / "pyproject.toml").write_text('[project]\nversion = "1.0.0"\n')

        assert resolve_version(tmp_path, "3.1.4") == "3.1.4"

    def test_pyproject(self, tmp_path: Path) -> None:
        (tmp_path / "pyproject.toml").write_text('[project]\nname = "ansilust"\nversion = "1.2.3"\n')
        (tmp_path / "package.json").write_text(json.dumps({"version": "9.9.9"}))

        assert resolve_version(tmp_path) == "1.2.3"

    def test_package_json_fallback(self, tmp_path: Path) -> None:
        (tmp_path / "pyproject.toml").write_text('[project]\nname = "ansilust"\ndynamic = ["version"]\n')
        (tmp_path / "package.json").write_text(json.dumps({"name": "ansilust", "version": "0.5.0"}))

        assert resolve_version(tmp_path) == "0.5.0"

    def test_malformed_pyproject_falls_through(self, tmp_path: Path) -> None:
        (tmp_path / "pyproject.toml").write_text("[project\nversion = ")
        (tmp_path / "package.json").write_text(json.dumps({"version": "0.6.0"}))

        assert resolve_version(tmp_path) == "0.6.0"

    def test_default(self, tmp_path: Path) -> None:
        assert resolve_version(tmp_path) == "0.0.1"

    def test_non_object_package_json(self, tmp_path: Path) -> None:
        (tmp_path / "package.json").write_text("[1, 2, 3]")

        assert resolve_version(tmp_path) == "0.0.1"


# 🌶️📦🔚
