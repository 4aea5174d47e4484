#!/usr/bin/env python3

# Copyright (C) 2024-2026 The ecdsalib developers
#
# This file is part of ecdsalib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecdsalib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic curve domain parameters and point multiplication functions.

A CurveDomain is immutable and hashable: it is meant to be built once
(e.g. by ecdsalib.storage.load_curve) and then passed explicitly
to every key, signature, and point operation.
Concurrent calls can safely share the same domain.
"""

from dataclasses import dataclass
from typing import Sequence

from ecdsalib.alias import Integer, Point
from ecdsalib.curve_group import HEX_THRESHOLD, CurveGroup, _fmt, mult_aff
from ecdsalib.exceptions import ECDSALibValueError
from ecdsalib.utils import hex_string, int_from_integer


@dataclass(frozen=True)
class CurveDomain(CurveGroup):
    """Cyclic subgroup of order n, generated by G, of an elliptic curve.

    Besides the curve coefficients (p, a, b),
    the domain includes the generator G,
    its order n, and the cofactor h.

    No parameter validation is performed:
    the generator is not checked to be on the curve,
    nor n to be its (prime) order.
    Use is_on_curve as an opt-in gate for untrusted parameters.
    """

    G: Point
    n: int
    h: int

    def __init__(
        self,
        p: Integer,
        a: Integer,
        b: Integer,
        G: Sequence[Integer],
        n: Integer,
        h: Integer,
    ) -> None:

        super().__init__(p, a, b)
        if len(G) != 2:
            raise ECDSALibValueError("Generator must a be a sequence[int, int]")
        object.__setattr__(
            self, "G", (int_from_integer(G[0]), int_from_integer(G[1]))
        )
        object.__setattr__(self, "n", int_from_integer(n))
        object.__setattr__(self, "h", int_from_integer(h))

    def __str__(self) -> str:
        result = super().__str__()
        if self.p > HEX_THRESHOLD:
            result += f"\n x_G = {hex_string(self.G[0])}"
            result += f"\n y_G = {hex_string(self.G[1])}"
        else:
            result += f"\n x_G = {self.G[0]}"
            result += f"\n y_G = {self.G[1]}"
        if self.n > HEX_THRESHOLD:
            result += f"\n n   = {hex_string(self.n)}"
        else:
            result += f"\n n   = {self.n}"
        result += f"\n h   = {self.h}"
        return result

    def __repr__(self) -> str:
        result = f"CurveDomain({_fmt(self.p)}, {_fmt(self.a)}, {_fmt(self.b)}"
        result += f", ({_fmt(self.G[0])}, {_fmt(self.G[1])})"
        result += f", {_fmt(self.n)}, {self.h})"
        return result


def mult(m: Integer, Q: Point, ec: CurveDomain) -> Point:
    "Elliptic curve scalar multiplication, with m reduced mod n."

    m = int_from_integer(m) % ec.n
    return mult_aff(m, Q, ec)


def double_mult(
    u: Integer, H: Point, v: Integer, Q: Point, ec: CurveDomain
) -> Point:
    "Double scalar multiplication (u*H + v*Q)."

    u = int_from_integer(u) % ec.n
    v = int_from_integer(v) % ec.n
    return ec.add_aff(mult_aff(u, H, ec), mult_aff(v, Q, ec))


# SEC 2 v.2 section 2.4.1, provided as a ready-made parameter set;
# any other domain is loaded with ecdsalib.storage.load_curve
secp256k1 = CurveDomain(
    "0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEFFFFFC2F",
    0,
    7,
    (
        "0x79BE667EF9DCBBAC55A06295CE870B07029BFCDB2DCE28D959F2815B16F81798",
        "0x483ADA7726A3C4655DA4FBFC0E1108A8FD17B448A68554199C47D08FFB10D4B8",
    ),
    "0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141",
    1,
)
