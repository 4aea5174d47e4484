#!/usr/bin/env python3

# Copyright (C) 2024-2026 The ecdsalib developers
#
# This file is part of ecdsalib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecdsalib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic Curve Digital Signature Algorithm (ECDSA).

Implementation according to SEC 1 v.2:

http://www.secg.org/sec1-v2.pdf

with the following conventions:

* the message representative is the whole SHA256 digest
  read as a big-endian integer, without truncation
  to the bit-length of the group order n;
* the signing nonce is drawn as randbits(256) mod (n - 2) + 2,
  from a cryptographically secure source by default;
* nonces leading to r = 0 or s = 0 are discarded and a new one is drawn,
  up to MAX_NONCE_ATTEMPTS times.

Known gaps, inherited from the lack of input validation:
the private key is reduced mod n without range check
(a private key equal to 0 mod n yields the INF public key)
and public keys are not checked to be on the curve.
"""

import logging
import secrets
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Sequence, Union

from dataclasses_json import DataClassJsonMixin, config

from ecdsalib.alias import Integer, Octets, Point, StrPath
from ecdsalib.curve import CurveDomain, double_mult
from ecdsalib.curve_group import mult_aff
from ecdsalib.exceptions import (
    ECDSALibRuntimeError,
    ECDSALibValueError,
    NonceExhaustionError,
)
from ecdsalib.hashes import int_from_digest, reduce_to_hlen, sha256_file
from ecdsalib.number_theory import mod_inv
from ecdsalib.utils import hex_from_int, hex_string, int_from_hex, int_from_integer

logger = logging.getLogger(__name__)

# bits of randomness drawn for each nonce candidate
NONCE_BITS = 256
# nonce candidates drawn before giving up
MAX_NONCE_ATTEMPTS = 64
# lowest acceptable value for r and s in verification:
# SEC 1 requires [1, n-1], use 2 for the stricter [2, n-1] legacy check
MIN_SCALAR = 1

# message digest: bytes, hex-string, or the int representative itself
MsgHash = Union[Octets, int]


def _hex_from_point(Q: Point) -> List[str]:
    return [hex_from_int(coord) for coord in Q]


def _point_from_hex(coords: Sequence[str]) -> Point:
    return tuple(int_from_hex(coord) for coord in coords)


@dataclass(frozen=True)
class KeyPair(DataClassJsonMixin):
    """Private/public key-pair.

    The public key is always derived from the private key,
    see gen_keys; the private key is kept as provided.
    """

    prv_key: int = field(
        metadata=config(encoder=hex_from_int, decoder=int_from_hex)
    )
    # INF is serialized as an empty list
    pub_key: Point = field(
        metadata=config(encoder=_hex_from_point, decoder=_point_from_hex)
    )


@dataclass(frozen=True)
class Sig(DataClassJsonMixin):
    """ECDSA signature (r, s).

    Validity depends on the curve domain,
    so it is checked by assert_valid, not at construction:
    signatures loaded from file are allowed to be out of range
    and are then rejected by verification.
    """

    # scalar, MIN_SCALAR <= r < ec.n
    r: int = field(metadata=config(encoder=hex_from_int, decoder=int_from_hex))
    # scalar, MIN_SCALAR <= s < ec.n
    s: int = field(metadata=config(encoder=hex_from_int, decoder=int_from_hex))

    def assert_valid(self, ec: CurveDomain, min_scalar: int = MIN_SCALAR) -> None:
        if not min_scalar <= self.r < ec.n:
            err_msg = f"scalar r not in {min_scalar}..n-1: "
            err_msg += f"'{hex_string(self.r)}'" if self.r > 0xFFFFFFFF else f"{self.r}"
            raise ECDSALibValueError(err_msg)

        if not min_scalar <= self.s < ec.n:
            err_msg = f"scalar s not in {min_scalar}..n-1: "
            err_msg += f"'{hex_string(self.s)}'" if self.s > 0xFFFFFFFF else f"{self.s}"
            raise ECDSALibValueError(err_msg)


def pub_key_from_prv_key(prv_key: Integer, ec: CurveDomain) -> Point:
    """Return the public key prv_key*G.

    The private key is reduced mod n and not range-checked.
    """
    q = int_from_integer(prv_key) % ec.n
    return mult_aff(q, ec.G, ec)


def gen_keys(prv_key: Optional[Integer], ec: CurveDomain) -> KeyPair:
    """Return a private/public key-pair.

    If no private key is provided, it is drawn uniformly in [1, n-1].
    """
    if prv_key is None:
        if ec.n < 2:
            err_msg = f"group order too small for a private key: {ec.n}"
            raise ECDSALibValueError(err_msg)
        q = 1 + secrets.randbelow(ec.n - 1)
    else:
        q = int_from_integer(prv_key)

    Q = pub_key_from_prv_key(q, ec)
    if not Q:
        logger.warning("private key is 0 mod n: the public key is INF")
    return KeyPair(q, Q)


def _nonce(ec: CurveDomain, randbits: Callable[[int], int]) -> int:
    # nonce in [2, n-1]
    return randbits(NONCE_BITS) % (ec.n - 2) + 2


def _sign_(c: int, q: int, nonce: int, ec: CurveDomain) -> Sig:
    # Private function for testing purposes: it allows to explore all
    # possible values of the nonce (for low-cardinality curves).
    # Steps numbering follows SEC 1 v.2 section 4.1.3
    K = mult_aff(nonce, ec.G, ec)  # 1

    # INF has no x-coordinate: no valid r either
    if not K:
        raise ECDSALibRuntimeError("failed to sign: r = 0")
    # mod n makes it a scalar
    r = K[0] % ec.n  # 2, 3
    if r == 0:  # r≠0 required as it multiplies the public key
        raise ECDSALibRuntimeError("failed to sign: r = 0")

    s = mod_inv(nonce, ec.n) * (c + q * r) % ec.n  # 6
    if s == 0:  # s≠0 required as verify will need the inverse of s
        raise ECDSALibRuntimeError("failed to sign: s = 0")

    return Sig(r, s)


def sign_(
    msg_hash: MsgHash,
    prv_key: Integer,
    ec: CurveDomain,
    nonce: Optional[Integer] = None,
    max_attempts: int = MAX_NONCE_ATTEMPTS,
    randbits: Callable[[int], int] = secrets.randbits,
) -> Sig:
    """Sign a message digest according to ECDSA signature algorithm.

    Nonces are drawn from randbits (secrets.randbits by default)
    until one of them yields a valid signature,
    at most max_attempts times: NonceExhaustionError is raised then.

    If the nonce is provided, it is used for a single attempt
    and a degenerate r or s raises ECDSALibRuntimeError.
    """
    c = int_from_digest(msg_hash)
    q = int_from_integer(prv_key)

    if nonce is not None:
        return _sign_(c, q, int_from_integer(nonce) % ec.n, ec)

    if ec.n < 3:
        raise ECDSALibValueError(f"group order too small for a nonce: {ec.n}")
    if max_attempts < 1:
        raise ECDSALibValueError(f"non positive max_attempts: {max_attempts}")

    for attempt in range(1, max_attempts + 1):
        k = _nonce(ec, randbits)
        try:
            return _sign_(c, q, k, ec)
        except ECDSALibRuntimeError as e:
            logger.debug("nonce %d of %d discarded: %s", attempt, max_attempts, e)
    raise NonceExhaustionError(max_attempts)


def sign(
    msg: Union[bytes, str],
    prv_key: Integer,
    ec: CurveDomain,
    nonce: Optional[Integer] = None,
    max_attempts: int = MAX_NONCE_ATTEMPTS,
    randbits: Callable[[int], int] = secrets.randbits,
) -> Sig:
    """ECDSA signature of a message.

    The message msg is first processed by SHA256,
    then signed with sign_.
    """
    msg_hash = reduce_to_hlen(msg)
    return sign_(msg_hash, prv_key, ec, nonce, max_attempts, randbits)


def sign_file(
    path: StrPath,
    prv_key: Integer,
    ec: CurveDomain,
    nonce: Optional[Integer] = None,
    max_attempts: int = MAX_NONCE_ATTEMPTS,
    randbits: Callable[[int], int] = secrets.randbits,
) -> Sig:
    "ECDSA signature of the SHA256 digest of a file content."
    msg_hash = sha256_file(path)
    return sign_(msg_hash, prv_key, ec, nonce, max_attempts, randbits)


def _assert_as_valid_(c: int, Q: Point, r: int, s: int, ec: CurveDomain) -> None:
    # Private function for test/dev purposes
    # r and s are assumed to be in range already

    w = mod_inv(s, ec.n)
    u = c * w % ec.n
    v = r * w % ec.n  # 4
    # Let K = u*G + v*Q.
    K = double_mult(u, ec.G, v, Q, ec)  # 5

    # Fail if infinite(K).
    if not K:  # 5
        raise ECDSALibRuntimeError("invalid (INF) key")

    # Fail if r ≠ x_K %n.
    if r != K[0] % ec.n:  # 6, 7, 8
        raise ECDSALibRuntimeError("signature verification failed")


def assert_as_valid_(
    msg_hash: MsgHash,
    pub_key: Point,
    sig: Sig,
    ec: CurveDomain,
    min_scalar: int = MIN_SCALAR,
) -> None:
    # It raises Errors, while verify should always return True or False
    sig.assert_valid(ec, min_scalar)  # 1
    c = int_from_digest(msg_hash)  # 2, 3
    _assert_as_valid_(c, pub_key, sig.r, sig.s, ec)


def assert_as_valid(
    msg: Union[bytes, str],
    pub_key: Point,
    sig: Sig,
    ec: CurveDomain,
    min_scalar: int = MIN_SCALAR,
) -> None:
    # It raises Errors, while verify should always return True or False
    msg_hash = reduce_to_hlen(msg)
    assert_as_valid_(msg_hash, pub_key, sig, ec, min_scalar)


def verify_(
    msg_hash: MsgHash,
    pub_key: Point,
    sig: Sig,
    ec: CurveDomain,
    min_scalar: int = MIN_SCALAR,
) -> bool:
    """ECDSA signature verification (SEC 1 v.2 section 4.1.4)."""
    # all kind of Exceptions are catched because
    # verify must always return a bool
    try:
        assert_as_valid_(msg_hash, pub_key, sig, ec, min_scalar)
    except Exception:  # pylint: disable=broad-except
        return False

    return True


def verify(
    msg: Union[bytes, str],
    pub_key: Point,
    sig: Sig,
    ec: CurveDomain,
    min_scalar: int = MIN_SCALAR,
) -> bool:
    """ECDSA signature verification (SEC 1 v.2 section 4.1.4)."""
    msg_hash = reduce_to_hlen(msg)
    return verify_(msg_hash, pub_key, sig, ec, min_scalar)


def verify_file(
    path: StrPath,
    pub_key: Point,
    sig: Sig,
    ec: CurveDomain,
    min_scalar: int = MIN_SCALAR,
) -> bool:
    """ECDSA signature verification of the SHA256 digest of a file content.

    Unlike a failed verification, an unreadable file raises OSError.
    """
    msg_hash = sha256_file(path)
    return verify_(msg_hash, pub_key, sig, ec, min_scalar)
