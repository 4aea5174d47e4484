#!/usr/bin/env python3

# Copyright (C) 2024-2026 The ecdsalib developers
#
# This file is part of ecdsalib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecdsalib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic CurveGroup class and scalar multiplication.

Note that CurveGroup does not have to be a cyclic subgroup.
For the cyclic subgroup generated by G, of order n,
see the ecdsalib.curve module.
"""

from dataclasses import dataclass

from ecdsalib.alias import INF, Integer, Point
from ecdsalib.exceptions import ECDSALibTypeError, ECDSALibValueError
from ecdsalib.number_theory import mod_inv
from ecdsalib.utils import hex_string, int_from_integer

HEX_THRESHOLD = 0xFFFFFFFF


def _fmt(i: int) -> str:
    return f"'{hex_string(i)}'" if i > HEX_THRESHOLD else f"{i}"


@dataclass(frozen=True)
class CurveGroup:
    """Finite group of the points of an elliptic curve over Fp.

    The elliptic curve is the set of points (x, y)
    that are solutions to a Weierstrass equation y^2 = x^3 + a*x + b,
    with x, y, a, and b in Fp (p being a prime),
    together with a point at infinity INF.

    The group is defined by the point addition group law.

    Parameters are taken at face value: p is not checked to be prime,
    nor the discriminant 4 a^3 + 27 b^2 to be non-zero.
    """

    p: int
    a: int
    b: int

    def __init__(self, p: Integer, a: Integer, b: Integer) -> None:
        object.__setattr__(self, "p", int_from_integer(p))
        object.__setattr__(self, "a", int_from_integer(a))
        object.__setattr__(self, "b", int_from_integer(b))

    def __str__(self) -> str:
        result = "Curve"
        if self.p > HEX_THRESHOLD:
            result += f"\n p   = {hex_string(self.p)}"
        else:
            result += f"\n p   = {self.p}"

        if self.a > HEX_THRESHOLD or self.b > HEX_THRESHOLD:
            result += f"\n a   = {hex_string(self.a)}"
            result += f"\n b   = {hex_string(self.b)}"
        else:
            result += f"\n a   = {self.a}"
            result += f"\n b   = {self.b}"

        return result

    def __repr__(self) -> str:
        return f"CurveGroup({_fmt(self.p)}, {_fmt(self.a)}, {_fmt(self.b)})"

    # methods using p only

    def is_equal(self, Q: Point, R: Point) -> bool:
        """Return True if both points are INF or have the same x and y.

        Coordinates are compared as they are, without reduction mod p.
        """
        if not Q or not R:
            return not Q and not R
        return Q[0] == R[0] and Q[1] == R[1]

    def negate(self, Q: Point) -> Point:
        """Return the opposite point.

        The input point is not checked to be on the curve.
        """
        if not Q:
            return INF
        if len(Q) == 2:
            return Q[0], (self.p - Q[1]) % self.p
        raise ECDSALibTypeError("not a point")

    # methods using a, b, and p

    def double_aff(self, Q: Point) -> Point:
        # point is assumed to be on curve

        if not Q:
            return INF
        # points of order two: the tangent is vertical
        if Q[1] % self.p == 0:
            return INF

        lam = (3 * Q[0] * Q[0] + self.a) * mod_inv(2 * Q[1], self.p)
        x = (lam * lam - Q[0] - Q[0]) % self.p
        y = (lam * (Q[0] - x) - Q[1]) % self.p
        return x, y

    def add_aff(self, Q: Point, R: Point) -> Point:
        # points are assumed to be on curve

        if not R:
            return Q
        if not Q:
            return R

        if self.is_equal(Q, R):
            return self.double_aff(Q)
        if self.is_equal(R, self.negate(Q)):
            return INF

        # if R[0] == Q[0] here, at least one point is not on the curve:
        # mod_inv will raise
        lam = (R[1] - Q[1]) * mod_inv(R[0] - Q[0], self.p)
        x = (lam * lam - Q[0] - R[0]) % self.p
        y = (lam * (Q[0] - x) - Q[1]) % self.p
        return x, y

    def add(self, Q: Point, R: Point) -> Point:
        """Return the sum of two points.

        The input points are not checked to be on the curve:
        use require_on_curve beforehand for untrusted input.
        """
        return self.add_aff(Q, R)

    def double(self, Q: Point) -> Point:
        """Return the double of a point.

        The input point is not checked to be on the curve.
        """
        return self.double_aff(Q)

    def _y2(self, x: int) -> int:
        return ((x * x + self.a) * x + self.b) % self.p

    def is_on_curve(self, Q: Point) -> bool:
        """Return True if the point is on the curve."""
        if not Q:
            return True
        if len(Q) != 2:
            raise ECDSALibValueError("point must be a tuple[int, int]")
        if not 0 <= Q[0] < self.p:
            return False
        if not 0 <= Q[1] < self.p:
            return False
        return self._y2(Q[0]) == Q[1] * Q[1] % self.p

    def require_on_curve(self, Q: Point) -> None:
        """Require the input curve Point to be on the curve.

        An Error is raised if not.
        """
        if not self.is_on_curve(Q):
            raise ECDSALibValueError("point not on curve")


def mult_aff(m: int, Q: Point, ec: CurveGroup) -> Point:
    """Scalar multiplication of a curve point in affine coordinates.

    This implementation uses a 'halving double & add' algorithm:
    m is repeatedly halved, rounding odd values up,
    while the base point is doubled at every step;
    when m is even the base point is also accumulated
    into the running result.
    The invariant

        m_0 * Q == R + (m - 1) * T

    holds at every step (m_0 being the input coefficient,
    R the running result, T the current base),
    so that R is the result when m reaches 1.

    It is not constant-time.

    The input point is assumed to be on curve and
    the m coefficient is NOT reduced mod n: m = n returns INF
    for a point Q of order n.
    """

    if m < 0:
        raise ECDSALibValueError(f"negative m: {hex(m)}")

    if m == 0 or not Q:
        return INF

    T = R = Q
    while m > 1:
        if m % 2 == 0:
            R = ec.add_aff(T, R)
            T = ec.double_aff(T)
            m //= 2
        else:
            T = ec.double_aff(T)
            m = m // 2 + 1
    return R
