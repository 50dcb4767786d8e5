# SPDX-License-Identifier: Apache-2.0
# Copyright (C) 2024-2026 The Birthmark Standard Foundation

"""Entry point for ``python -m sif_integrity``."""

import sys

from .cli import main

sys.exit(main())
