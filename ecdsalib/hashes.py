#!/usr/bin/env python3

# Copyright (C) 2024-2026 The ecdsalib developers
#
# This file is part of ecdsalib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecdsalib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Hash based helper functions."""

import hashlib
import logging
from typing import Union

from ecdsalib.alias import Octets, StrPath
from ecdsalib.utils import int_from_hex

logger = logging.getLogger(__name__)

# bytes read at a time when hashing a file
CHUNK_SIZE = 32768


def reduce_to_hlen(msg: Union[bytes, str]) -> bytes:
    """Return the SHA256 digest of a message.

    A str message is text, not a hex-string: it is utf-8 encoded.
    """
    if isinstance(msg, str):
        msg = msg.encode()
    h = hashlib.sha256()
    h.update(msg)
    return h.digest()


def sha256_file(path: StrPath) -> str:
    """Return the lowercase SHA256 hex digest of a file content.

    The file is read in chunks of CHUNK_SIZE bytes;
    OSError is raised if it cannot be opened.
    """
    h = hashlib.sha256()
    with open(path, "rb") as file_:
        for chunk in iter(lambda: file_.read(CHUNK_SIZE), b""):
            h.update(chunk)
    digest = h.hexdigest()
    logger.debug("sha256(%s) = %s", path, digest)
    return digest


def int_from_digest(digest: Union[Octets, int]) -> int:
    """Return the message representative as a big-endian int.

    The digest can be the int itself, bytes, or a hex-string;
    it is not truncated to the bit-length of the group order.
    """
    if isinstance(digest, int):
        return digest
    if isinstance(digest, str):
        return int_from_hex(digest)
    return int.from_bytes(digest, byteorder="big", signed=False)
