# Copyright (c) 2026 Lumitheme
# SPDX-License-Identifier: MIT

import sys

from lumitheme.cli import main

sys.exit(main())
