#!/usr/bin/env python3

# Copyright (C) 2024-2026 The ecdsalib developers
#
# This file is part of ecdsalib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecdsalib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `ecdsalib.utils` module."

import secrets

import pytest

from ecdsalib.exceptions import ECDSALibValueError
from ecdsalib.utils import (
    HEX_WIDTH,
    hex_from_int,
    hex_string,
    int_from_hex,
    int_from_integer,
)


def test_int_from_integer() -> None:
    for i in (
        secrets.randbits(256 - 8),
        0x0B6CA75B7D3076C561958CCED813797F6D2275C7F42F3856D007D587769A90,
    ):
        assert i == int_from_integer(i)
        assert i == int_from_integer(" " + hex(i).upper())
        assert -i == int_from_integer(hex(-i).upper() + " ")
        assert i == int_from_integer(hex_string(i))
        assert i == int_from_integer(i.to_bytes(32, byteorder="big", signed=False))


def test_hex_string() -> None:
    int_ = 34492435054806958080
    assert hex_string(int_) == "01 DEADBEEF 00000000"
    assert hex_string(hex(int_)) == "01 DEADBEEF 00000000"
    assert hex_string(0) == "00"
    assert hex_string(0xFFFFFFFF) == "FFFFFFFF"

    with pytest.raises(ECDSALibValueError, match="negative integer: "):
        hex_string(-1)


def test_hex_from_int() -> None:
    assert hex_from_int(0) == "0" * HEX_WIDTH
    assert hex_from_int(1) == "0" * (HEX_WIDTH - 1) + "1"
    assert hex_from_int(0xDEADBEEF) == "0" * 56 + "deadbeef"
    assert hex_from_int(2**256 - 1) == "f" * HEX_WIDTH
    assert hex_from_int(0xAB, 4) == "00ab"

    with pytest.raises(ECDSALibValueError, match="negative integer: "):
        hex_from_int(-1)
    err_msg = "integer too large for 64 hex-digits: "
    with pytest.raises(ECDSALibValueError, match=err_msg):
        hex_from_int(2**256)
    with pytest.raises(ECDSALibValueError, match="too large for 2 hex-digits"):
        hex_from_int(0x100, 2)


def test_int_from_hex() -> None:
    assert int_from_hex("0" * HEX_WIDTH) == 0
    assert int_from_hex("f" * HEX_WIDTH, HEX_WIDTH) == 2**256 - 1
    assert int_from_hex("DeadBeef") == 0xDEADBEEF
    assert int_from_hex("  deadbeef\n") == 0xDEADBEEF
    # shorter strings are fine: leading zeros are implied
    assert int_from_hex("1", HEX_WIDTH) == 1

    for _ in range(10):
        i = secrets.randbits(256)
        assert int_from_hex(hex_from_int(i)) == i
        assert int_from_hex(hex_from_int(i).upper(), HEX_WIDTH) == i

    with pytest.raises(ECDSALibValueError, match="empty hex-string"):
        int_from_hex("")
    with pytest.raises(ECDSALibValueError, match="empty hex-string"):
        int_from_hex(" \n")
    with pytest.raises(ECDSALibValueError, match="too many hex-digits: 65, max 64"):
        int_from_hex("0" * 65, HEX_WIDTH)
    # no silent remapping of invalid characters
    for invalid in ("deadbeeg", "0xdeadbeef", "dead beef", "-1", "+1"):
        with pytest.raises(ECDSALibValueError, match="invalid hex-string: "):
            int_from_hex(invalid)
