#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Command modules for the ansilust-pack CLI."""

from __future__ import annotations

from ansilust.commands.assemble import assemble_command
from ansilust.commands.platforms import platforms_command, resolve_command

__all__ = [
    "assemble_command",
    "platforms_command",
    "resolve_command",
]

# 🌶️📦🔚
