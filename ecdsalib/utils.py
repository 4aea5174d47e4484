#!/usr/bin/env python3

# Copyright (C) 2024-2026 The ecdsalib developers
#
# This file is part of ecdsalib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecdsalib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Assorted conversion utilities.

Integers travel between files and the curve engine
as fixed-width, big-endian, lowercase hex-strings:
64 hex-digits, i.e. 256 bits.
"""

import string
from typing import Optional

from ecdsalib.alias import Integer
from ecdsalib.exceptions import ECDSALibValueError

# hex-digits per integer field (256 bits)
HEX_WIDTH = 64

_HEXDIGITS = frozenset(string.hexdigits)


def int_from_integer(i: Integer) -> int:
    """Return an int from many possible integer representations.

    Allowed integer representations are:

    * 3735928559
    * -3735928559
    * "0xdeadbeef"
    * "-0xdeadbeef"
    * "deadbeef"
    * b'\xde\xad\xbe\xef'

    The binary representation is not allowed because there is no way to
    discriminate it from a valid hex-string
    (e.g. "0b11011110101011011011111011101111").
    """

    if isinstance(i, int):
        return i

    if isinstance(i, str):
        i = i.strip().lower()
        if i.startswith("0x") or i.startswith("-0x"):
            return int(i, 16)
        i = bytes.fromhex(i)

    # must be bytes
    return int.from_bytes(i, "big", signed=False)


def hex_string(i: Integer) -> str:
    """Return a hex-string from many positive integer representations.

    Negative integers are not allowed.

    The resulting hex-string has an even number of hex-digits and
    includes a space every four bytes (i.e. every eight hex-digits).
    It is meant for human eyes (e.g. error messages),
    not for storage: see hex_from_int.
    """

    int_ = int_from_integer(i)
    if int_ < 0:
        raise ECDSALibValueError(f"negative integer: {int_}")
    a_str = hex(int_)[2:]
    if len(a_str) % 2 != 0:
        a_str = "0" + a_str

    indx = list(reversed(range(len(a_str), 0, -8)))
    lresult = [(a_str[max(0, i - 8) : i]) for i in indx]
    result = " ".join(lresult)
    return result.upper()


def hex_from_int(i: int, width: int = HEX_WIDTH) -> str:
    """Return the zero-padded, lowercase hex-string of a non-negative int.

    An Error is raised if the integer does not fit in width hex-digits:
    no silent truncation of the most significant digits.
    """

    if i < 0:
        raise ECDSALibValueError(f"negative integer: {i}")
    if i >> (4 * width):
        err_msg = f"integer too large for {width} hex-digits: "
        err_msg += f"'{hex_string(i)}'"
        raise ECDSALibValueError(err_msg)
    return format(i, f"0{width}x")


def int_from_hex(hex_str: str, width: Optional[int] = None) -> int:
    """Return the int of a big-endian hex-string.

    Leading/trailing blanks are stripped, both cases are accepted;
    an empty string, a non hex-digit, or more than width hex-digits
    (if width is provided) raise an Error.
    """

    hex_str = hex_str.strip()
    if not hex_str:
        raise ECDSALibValueError("empty hex-string")
    if width is not None and len(hex_str) > width:
        err_msg = f"too many hex-digits: {len(hex_str)}, max {width}"
        raise ECDSALibValueError(err_msg)
    if not _HEXDIGITS.issuperset(hex_str):
        raise ECDSALibValueError(f"invalid hex-string: '{hex_str}'")
    return int(hex_str, 16)
