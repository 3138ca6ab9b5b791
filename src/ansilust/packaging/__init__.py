#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Build-time assembly of the per-platform ansilust packages."""

from ansilust.packaging.assembler import AssemblyReport, PackageAssembler
from ansilust.packaging.sources import BinarySource, SourceMode
from ansilust.packaging.version import resolve_version

__all__ = [
    "AssemblyReport",
    "BinarySource",
    "PackageAssembler",
    "SourceMode",
    "resolve_version",
]

# 🌶️📦🔚
