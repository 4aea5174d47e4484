#!/usr/bin/env python3

# Copyright (C) 2024-2026 The ecdsalib developers
#
# This file is part of ecdsalib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecdsalib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Hex-line files for curve domains, keys, and signatures.

Every file is a sequence of newline-terminated lines,
each line being a 64 hex-digit (256-bit) big-endian integer:

* curve domain: p, a, b, x_G, y_G, n, h
* private key: q
* public key: x_Q, y_Q
* signature: r, s

Blank lines are ignored when reading, extra lines are not allowed.
Unreadable files raise OSError, malformed ones ECDSALibValueError.
"""

import logging
from typing import List, Sequence

from ecdsalib.alias import Point, StrPath
from ecdsalib.curve import CurveDomain
from ecdsalib.dsa import Sig
from ecdsalib.exceptions import ECDSALibValueError
from ecdsalib.utils import HEX_WIDTH, hex_from_int, int_from_hex

logger = logging.getLogger(__name__)

CURVE_FIELDS = ("p", "a", "b", "x_G", "y_G", "n", "h")
PRV_KEY_FIELDS = ("q",)
PUB_KEY_FIELDS = ("x_Q", "y_Q")
SIG_FIELDS = ("r", "s")


def read_ints(path: StrPath, names: Sequence[str]) -> List[int]:
    "Return the integers stored in a hex-line file, one per name."

    with open(path, "r", encoding="ascii") as file_:
        try:
            lines = [line.strip() for line in file_ if line.strip()]
        except UnicodeDecodeError as e:
            raise ECDSALibValueError(f"invalid {path}: not an ascii file") from e

    if len(lines) != len(names):
        err_msg = f"invalid {path}: {len(lines)} lines instead of {len(names)}"
        raise ECDSALibValueError(err_msg)

    ints: List[int] = []
    for name, line in zip(names, lines):
        try:
            ints.append(int_from_hex(line, HEX_WIDTH))
        except ECDSALibValueError as e:
            raise ECDSALibValueError(f"invalid {name} in {path}: {e}") from e
    logger.debug("loaded %s from %s", ", ".join(names), path)
    return ints


def write_ints(path: StrPath, ints: Sequence[int]) -> None:
    "Store integers in a hex-line file, truncating it."

    # encode everything first: a failure must not leave a partial file
    lines = [hex_from_int(i) + "\n" for i in ints]
    with open(path, "w", encoding="ascii") as file_:
        file_.writelines(lines)
    logger.debug("saved %d lines to %s", len(lines), path)


def load_curve(path: StrPath) -> CurveDomain:
    p, a, b, x_G, y_G, n, h = read_ints(path, CURVE_FIELDS)
    return CurveDomain(p, a, b, (x_G, y_G), n, h)


def save_curve(path: StrPath, ec: CurveDomain) -> None:
    write_ints(path, (ec.p, ec.a, ec.b, ec.G[0], ec.G[1], ec.n, ec.h))


def load_prv_key(path: StrPath) -> int:
    return read_ints(path, PRV_KEY_FIELDS)[0]


def save_prv_key(path: StrPath, prv_key: int) -> None:
    write_ints(path, (prv_key,))


def load_pub_key(path: StrPath) -> Point:
    "Return the public key, not checked to be on the curve."
    x_Q, y_Q = read_ints(path, PUB_KEY_FIELDS)
    return x_Q, y_Q


def save_pub_key(path: StrPath, pub_key: Point) -> None:
    """Store a public key.

    INF has no affine coordinates, so it cannot be stored.
    """
    if not pub_key:
        raise ECDSALibValueError("INF public key cannot be saved")
    write_ints(path, pub_key)


def load_sig(path: StrPath) -> Sig:
    "Return the signature, not checked to be in range."
    r, s = read_ints(path, SIG_FIELDS)
    return Sig(r, s)


def save_sig(path: StrPath, sig: Sig) -> None:
    write_ints(path, (sig.r, sig.s))
