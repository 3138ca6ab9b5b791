#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""ansilust configuration built on the Provide Foundation config stack."""

from __future__ import annotations

from ansilust.config.runtime import AnsilustRuntimeConfig, parse_log_level

__all__ = [
    "AnsilustRuntimeConfig",
    "parse_log_level",
]

# 🌶️📦🔚
