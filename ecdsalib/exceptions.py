#!/usr/bin/env python3

# Copyright (C) 2024-2026 The ecdsalib developers
#
# This file is part of ecdsalib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecdsalib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Exception classes.

These are only meant to discriminate between Exceptions being raised
by ecdsalib from those raised by other codebase.

Users are usually better off just dealing with the regular
ValueError, TypeError, and RuntimeError
from which the ecdsalib versions are derived.
"""


class ECDSALibValueError(ValueError):
    pass


class ECDSALibTypeError(TypeError):
    pass


class ECDSALibRuntimeError(RuntimeError):
    pass


class NonceExhaustionError(ECDSALibRuntimeError):
    """Every nonce drawn during signing led to r = 0 or s = 0."""

    def __init__(self, attempts: int) -> None:
        super().__init__(f"failed to sign: no valid nonce in {attempts} attempts")
        self.attempts = attempts
