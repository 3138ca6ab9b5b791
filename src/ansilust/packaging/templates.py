#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Generated files of a platform package.

All output is deterministic for a given entry and version so that
reassembling unchanged inputs reproduces the same bytes.
"""

from __future__ import annotations

import json
from typing import Any

from ansilust.config.defaults import (
    LOADER_STUB_FILE,
    PACKAGE_AUTHOR,
    PACKAGE_FILES,
    PACKAGE_KEYWORDS,
    PACKAGE_LICENSE,
    PACKAGE_REPOSITORY,
)
from ansilust.platform.registry import PlatformEntry

LOADER_STUB_TEMPLATE = '''"""Binary location for the {package_name} platform package."""

import os
import sys

bin_name = "ansilust.exe" if sys.platform == "win32" else "ansilust"
bin_path = os.path.join(os.path.dirname(os.path.abspath(__file__)), "bin", bin_name)
'''

README_TEMPLATE = """# {package_name}

Platform-specific binary for ansilust.

This package contains the native ansilust binary for {platform_key}.

This is a private package meant to be installed alongside the main `ansilust` package.

## Usage

```python
import runpy

stub = runpy.run_path("{package_name}/{stub_file}")
print(stub["bin_path"])
```

See the main ansilust package for CLI usage.

## License

{license}
"""


def generate_manifest(entry: PlatformEntry, version: str) -> dict[str, Any]:
    """Build the manifest for one platform package."""
    manifest: dict[str, Any] = {
        "name": entry.package_name,
        "version": version,
        "description": f"ansilust binaries for {entry.platform_key}",
        "main": LOADER_STUB_FILE,
        "files": list(PACKAGE_FILES),
        "repository": dict(PACKAGE_REPOSITORY),
        "keywords": list(PACKAGE_KEYWORDS),
        "author": PACKAGE_AUTHOR,
        "license": PACKAGE_LICENSE,
    }
    manifest.update(entry.metadata.as_constraints())
    return manifest


def render_manifest(entry: PlatformEntry, version: str) -> str:
    return json.dumps(generate_manifest(entry, version), indent=2) + "\n"


def generate_loader_stub(entry: PlatformEntry) -> str:
    """Loader stub; picks the binary name on the machine that loads it."""
    return LOADER_STUB_TEMPLATE.format(package_name=entry.package_name)


def generate_readme(entry: PlatformEntry) -> str:
    return README_TEMPLATE.format(
        package_name=entry.package_name,
        platform_key=entry.platform_key,
        stub_file=LOADER_STUB_FILE,
        license=PACKAGE_LICENSE,
    )


# 🌶️📦🔚
