#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Tests for environment-driven runtime configuration."""

from __future__ import annotations

import pytest

from ansilust.config import AnsilustRuntimeConfig, parse_log_level
from ansilust.config.runtime import parse_optional


class TestAnsilustRuntimeConfig:
    """Test runtime configuration."""

    def test_defaults(self) -> None:
        config = AnsilustRuntimeConfig()
        assert config.log_level == "WARNING"
        assert config.packages_dir is None
        assert config.release_version is None

    def test_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ANSILUST_LOG_LEVEL", "debug")
        monkeypatch.setenv("ANSILUST_PACKAGES_DIR", "/opt/ansilust")
        monkeypatch.setenv("ANSILUST_RELEASE_VERSION", "1.0.0")

        config = AnsilustRuntimeConfig.from_env()

        assert config.log_level == "DEBUG"
        assert config.packages_dir == "/opt/ansilust"
        assert config.release_version == "1.0.0"

    def test_from_env_unset(self) -> None:
        config = AnsilustRuntimeConfig.from_env()
        assert config.log_level == "WARNING"
        assert config.packages_dir is None


class TestConverters:
    @pytest.mark.parametrize("value", ["trace", "Info", " ERROR "])
    def test_log_levels(self, value: str) -> None:
        assert parse_log_level(value) == value.strip().upper()

    def test_invalid_log_level(self) -> None:
        with pytest.raises(ValueError, match="Invalid log level"):
            parse_log_level("loud")

    def test_optional(self) -> None:
        assert parse_optional(None) is None
        assert parse_optional("   ") is None
        assert parse_optional(" /srv/pkgs ") == "/srv/pkgs"


# 🌶️📦🔚
