#!/usr/bin/env python3

# Copyright (C) 2024-2026 The ecdsalib developers
#
# This file is part of ecdsalib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecdsalib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Entry point for 'python -m ecdsalib'."

import sys

from ecdsalib.cli import main

sys.exit(main())
