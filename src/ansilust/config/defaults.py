#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Centralized default values for ansilust."""

from __future__ import annotations

# =================================
# Naming
# =================================
PACKAGE_PREFIX = "ansilust-"
BINARY_NAME = "ansilust"
WINDOWS_BINARY_NAME = "ansilust.exe"

# =================================
# File permissions defaults
# =================================
DEFAULT_EXECUTABLE_PERMS = 0o755  # rwx for owner, rx for group/other
EXECUTE_BITS = 0o111  # Owner/group/other execute

# =================================
# Package layout
# =================================
MANIFEST_FILE = "package.json"
LOADER_STUB_FILE = "index.py"
README_FILE = "README.md"
LICENSE_FILE = "LICENSE"
BIN_DIR = "bin"
PACKAGE_FILES = ["bin/", LOADER_STUB_FILE, README_FILE, LICENSE_FILE]

# =================================
# Assembler source layouts
# =================================
CI_BINARIES_DIR = "platform-binaries"  # One subdirectory per build target
LOCAL_BINARY_DIR = ("zig-out", "bin")  # Single host binary
PACKAGES_DIR = "packages"
ROOT_PYPROJECT = "pyproject.toml"
ROOT_PACKAGE_JSON = "package.json"

# =================================
# Package metadata defaults
# =================================
DEFAULT_PACKAGE_VERSION = "0.0.1"
PACKAGE_AUTHOR = "Tom Aylott <oblivious@subtlegradient.com>"
PACKAGE_LICENSE = "MIT"
PACKAGE_REPOSITORY = {
    "type": "git",
    "url": "https://github.com/effect-native/ansilust.git",
}
PACKAGE_KEYWORDS = ["ansi", "art", "text-art", "ascii", "bbs", "ansilove", "ansilust"]

# =================================
# Launcher defaults
# =================================
DEFAULT_LAUNCHER_LOG_LEVEL = "WARNING"
FAILURE_EXIT_CODE = 1
SIGNAL_EXIT_BASE = 128
REINSTALL_COMMAND = "pip install --force-reinstall ansilust"
UPGRADE_COMMAND = "pip uninstall ansilust && pip install ansilust"

# 🌶️📦🔚
