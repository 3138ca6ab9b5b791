#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Logging setup shared by the ansilust entry points."""

from __future__ import annotations

from typing import Any

from attrs import evolve
from provide.foundation import TelemetryConfig, get_hub
from provide.foundation.logger import get_logger


def get_command_logger(name: str) -> Any:
    """Get a structured logger for a CLI command."""
    return get_logger(f"ansilust.commands.{name}")


def initialize_logging(log_level: str, service_name: str = "ansilust") -> None:
    """Initialize Foundation telemetry with the configured log level."""
    base_telemetry = TelemetryConfig.from_env()
    telemetry_config = evolve(
        base_telemetry,
        service_name=service_name,
        logging=evolve(
            base_telemetry.logging,
            default_level=log_level,  # type: ignore[arg-type]
        ),
    )
    get_hub().initialize_foundation(telemetry_config)


# 🌶️📦🔚
