#!/usr/bin/env python3

# Copyright (C) 2024-2026 The ecdsalib developers
#
# This file is part of ecdsalib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecdsalib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `ecdsalib.curve_group` module."

import pytest

from ecdsalib.alias import INF
from ecdsalib.curve import secp256k1
from ecdsalib.curve_group import CurveGroup, mult_aff
from ecdsalib.exceptions import ECDSALibTypeError, ECDSALibValueError
from tests.test_curve import all_curves, ec23_7, low_card_curves

# y^2 = x^3 + x + 1 over F23: cyclic group of order 28
ec23 = CurveGroup(23, 1, 1)
# generator of the whole group
P = (3, 10)
# the only point of order two
T = (4, 0)

# 0*G, 1*G, ..., 6*G for G = (17, 3) = 4*P, of order 7
ec23_7_multiples = [INF, (17, 3), (13, 16), (5, 4), (5, 19), (13, 7), (17, 20)]


def test_repr() -> None:
    assert repr(ec23) == "CurveGroup(23, 1, 1)"
    assert str(ec23) == "Curve\n p   = 23\n a   = 1\n b   = 1"

    ec = CurveGroup(secp256k1.p, secp256k1.a, secp256k1.b)
    assert repr(ec).startswith("CurveGroup('FFFFFFFF FFFFFFFF")
    assert repr(ec).endswith("FFFFFC2F', 0, 7)")


def test_is_equal() -> None:
    assert ec23.is_equal(INF, INF)
    assert ec23.is_equal(P, P)
    assert ec23.is_equal(P, (3, 10))
    assert not ec23.is_equal(P, INF)
    assert not ec23.is_equal(INF, P)
    assert not ec23.is_equal(P, (3, 13))
    assert not ec23.is_equal(P, (7, 10))
    # INF is not a point with y = 0
    assert not ec23.is_equal(T, INF)


def test_negate() -> None:
    assert ec23.negate(INF) == INF
    assert ec23.negate(P) == (3, 13)
    assert ec23.negate(ec23.negate(P)) == P
    # points of order two are their own opposite
    assert ec23.negate(T) == T

    for ec in all_curves.values():
        Q = ec.negate(ec.G)
        assert ec.is_on_curve(Q)
        assert ec.add(Q, ec.G) == INF
        assert ec.add(ec.G, Q) == INF

    with pytest.raises(ECDSALibTypeError, match="not a point"):
        ec23.negate((1, 2, 3))


def test_double() -> None:
    assert ec23.double(INF) == INF
    assert ec23.double(T) == INF
    assert ec23.double(P) == (7, 12)
    assert ec23.double((7, 12)) == (17, 3)

    for ec in all_curves.values():
        assert ec.double(ec.G) == ec.add(ec.G, ec.G)
        assert ec.is_on_curve(ec.double(ec.G))


def test_add() -> None:
    assert ec23.add(P, INF) == P
    assert ec23.add(INF, P) == P
    assert ec23.add(INF, INF) == INF
    assert ec23.add(P, ec23.negate(P)) == INF
    assert ec23.add(T, T) == INF
    # doubling
    assert ec23.add(P, P) == ec23.double(P)
    # chord rule
    assert ec23.add(P, (7, 12)) == (19, 5)
    assert ec23.add((7, 12), P) == (19, 5)
    assert ec23.add((17, 3), (19, 5)) == (11, 3)

    for ec in all_curves.values():
        Q = ec.double(ec.G)
        assert ec.add(Q, INF) == Q
        assert ec.add(ec.add(Q, ec.G), ec.G) == ec.add(Q, ec.add(ec.G, ec.G))


def test_add_invalid_points() -> None:
    # same x-coordinate, neither equal nor opposite: not on the curve
    with pytest.raises(ECDSALibValueError, match="No inverse for 0 mod 23"):
        ec23.add(P, (3, 5))


def test_toy_curve_table() -> None:
    ec = ec23_7
    Q = INF
    for i, expected in enumerate(ec23_7_multiples):
        assert Q == expected, i
        assert mult_aff(i, ec.G, ec) == expected, i
        Q = ec.add(Q, ec.G)
    assert Q == INF
    assert mult_aff(7, ec.G, ec) == INF

    # G = 4*P
    assert mult_aff(4, P, ec23) == ec.G


def test_whole_group() -> None:
    multiples = [INF]
    for _ in range(28):
        multiples.append(ec23.add(multiples[-1], P))
    assert multiples[-1] == INF
    # P generates 28 distinct points
    assert len(set(multiples)) == 28
    assert multiples[14] == T
    assert multiples[7] == (11, 3)

    for i, Q in enumerate(multiples):
        assert mult_aff(i, P, ec23) == Q, i
        assert ec23.is_on_curve(Q)
    assert mult_aff(28 * 3 + 5, P, ec23) == multiples[5]


def test_mult_aff() -> None:
    for ec in all_curves.values():
        assert mult_aff(0, ec.G, ec) == INF
        assert mult_aff(0, INF, ec) == INF
        assert mult_aff(1, INF, ec) == INF
        assert mult_aff(1, ec.G, ec) == ec.G
        assert mult_aff(2, ec.G, ec) == ec.double(ec.G)

        Q = mult_aff(ec.n - 1, ec.G, ec)
        assert ec.negate(ec.G) == Q
        assert ec.add(Q, ec.G) == INF
        assert mult_aff(ec.n, ec.G, ec) == INF
        assert mult_aff(ec.n, INF, ec) == INF
        assert mult_aff(ec.n + 1, ec.G, ec) == ec.G

        with pytest.raises(ECDSALibValueError, match="negative m: "):
            mult_aff(-1, ec.G, ec)

    # brute-force repeated addition
    for ec in low_card_curves.values():
        Q = INF
        for m in range(ec.n + 1):
            assert mult_aff(m, ec.G, ec) == Q, f"{m}, {ec}"
            assert ec.is_on_curve(Q)
            Q = ec.add(Q, ec.G)


def test_is_on_curve() -> None:
    assert ec23.is_on_curve(INF)
    assert ec23.is_on_curve(P)
    assert ec23.is_on_curve(T)
    assert not ec23.is_on_curve((3, 11))
    # coordinates must be reduced mod p
    assert not ec23.is_on_curve((3 + 23, 10))
    assert not ec23.is_on_curve((3, -13))

    ec23.require_on_curve(P)
    with pytest.raises(ECDSALibValueError, match="point not on curve"):
        ec23.require_on_curve((3, 11))

    with pytest.raises(ECDSALibValueError, match="point must be a tuple"):
        ec23.is_on_curve((3, 10, 1))
