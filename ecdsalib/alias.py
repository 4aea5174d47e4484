#!/usr/bin/env python3

# Copyright (C) 2024-2026 The ecdsalib developers
#
# This file is part of ecdsalib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecdsalib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Aliases

mypy aliases, documenting also coding input conventions.
"""

from os import PathLike
from typing import Tuple, Union

# Octets are a sequence of eight-bit bytes or a hex-string (not text string)
#
# hex-strings are strings that can be converted to bytes using bytes.fromhex,
# e.g.:
# "deadbeef"
# "dead beef"
# "9f86d081884c7d659a2feaa0c55ad015a3bf4f1b2b0b822cd15d6c15b0f00a08"
#
# Octets are used for message digests (32 bytes for SHA-256)
Octets = Union[bytes, str]

# file system path, as accepted by open()
StrPath = Union[str, "PathLike[str]"]

# hex-string or bytes representation of an int
# Integer = Union[Octets, int]
Integer = Union[bytes, str, int]

# Elliptic curve point in affine coordinates: (x, y).
# Warning: to make Point a NamedTuple would slow down the code
Point = Tuple[int, ...]

# The infinity point has no affine coordinates: it is the empty tuple.
# It can be checked with 'not Q' (or 'len(Q) == 0').
# Curves with even order have points of order two, i.e. (x, 0):
# those are finite points and must not be mistaken for INF.
INF: Point = ()
