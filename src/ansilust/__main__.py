#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Run the ansilust launcher with ``python -m ansilust``."""

from ansilust.launcher.main import main

if __name__ == "__main__":
    main()

# 🌶️📦🔚
