#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Release version lookup for assembled packages."""

from __future__ import annotations

from pathlib import Path
import tomllib

from provide.foundation import logger
from provide.foundation.file.formats import read_json

from ansilust.config.defaults import DEFAULT_PACKAGE_VERSION, ROOT_PACKAGE_JSON, ROOT_PYPROJECT


def resolve_version(root_dir: Path, override: str | None = None) -> str:
    """Determine the version stamped into every package.

    Order: explicit override, ``pyproject.toml`` ``[project].version``,
    ``package.json`` ``version``, then the placeholder default.
    """
    if override:
        return override

    version = _version_from_pyproject(root_dir / ROOT_PYPROJECT) or _version_from_package_json(
        root_dir / ROOT_PACKAGE_JSON
    )
    if version:
        return version

    logger.warning(f"⚠️ Could not read a version from {root_dir}, using {DEFAULT_PACKAGE_VERSION}")
    return DEFAULT_PACKAGE_VERSION


def _version_from_pyproject(path: Path) -> str | None:
    if not path.is_file():
        return None
    try:
        with path.open("rb") as f:
            project = tomllib.load(f).get("project", {})
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.warning(f"⚠️ Could not read {path}: {e}")
        return None
    version = project.get("version")
    return str(version) if version else None


def _version_from_package_json(path: Path) -> str | None:
    if not path.is_file():
        return None
    try:
        data = read_json(path)
    except Exception as e:
        logger.warning(f"⚠️ Could not read {path}: {e}")
        return None
    version = data.get("version") if isinstance(data, dict) else None
    return str(version) if version else None


# 🌶️📦🔚
