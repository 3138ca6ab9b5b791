#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""ansilust runtime configuration, read from the environment."""

from __future__ import annotations

from attrs import define
from provide.foundation.config.base import field
from provide.foundation.config.env import RuntimeConfig

from ansilust.config.defaults import DEFAULT_LAUNCHER_LOG_LEVEL

VALID_LOG_LEVELS = {"TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def parse_log_level(value: str) -> str:
    """Validate and normalize log levels."""
    normalized = value.strip().upper()
    if normalized not in VALID_LOG_LEVELS:
        raise ValueError(f"Invalid log level: {value}")
    return normalized


def parse_optional(value: str | None) -> str | None:
    """Treat empty environment values as unset."""
    if value is None:
        return None
    stripped = value.strip()
    return stripped or None


@define
class AnsilustRuntimeConfig(RuntimeConfig):
    """Settings shared by the launcher and the package assembler."""

    log_level: str = field(
        default=DEFAULT_LAUNCHER_LOG_LEVEL,
        env_var="ANSILUST_LOG_LEVEL",
        converter=parse_log_level,
        metadata={"help": "Log level for ansilust (TRACE, DEBUG, INFO, WARNING, ERROR, CRITICAL)"},
    )

    packages_dir: str | None = field(
        default=None,
        env_var="ANSILUST_PACKAGES_DIR",
        converter=parse_optional,
        metadata={"help": "Extra directory searched first for installed platform packages"},
    )

    release_version: str | None = field(
        default=None,
        env_var="ANSILUST_RELEASE_VERSION",
        converter=parse_optional,
        metadata={"help": "Version stamped into assembled platform packages"},
    )


# 🌶️📦🔚
