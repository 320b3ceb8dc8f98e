#!/usr/bin/env python3

# Copyright (C) The stealthkit developers
#
# This file is part of stealthkit. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of stealthkit including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `stealthkit.ecc.curve` module."

import pytest

from stealthkit.alias import INF, INFJ
from stealthkit.ecc.curve import Curve, jac_from_aff, mult, mult_mont_ladder, secp256k1
from stealthkit.ecc.number_theory import mod_inv, mod_sqrt
from stealthkit.exceptions import StealthKitValueError

ec = secp256k1

# 2G, 3G as published in the secp256k1 test vectors
G2 = (
    0xC6047F9441ED7D6D3045406E95C07CD85C778E4B8CEF3CA7ABAC09B95C709EE5,
    0x1AE168FEA63DC339A3C58419466CEAEEF7F632653266D0E1236431A950CFE52A,
)
G3 = (
    0xF9308A019258C31049344F85F89D5229B531C845836F99B08601F113BCE036F9,
    0x388F7B0F632DE8140FE337E62A37F3566500A99934C2231B6CB9FD7584B8E672,
)


def test_secp256k1() -> None:

    assert ec.is_on_curve(ec.G)
    assert str(ec) == "secp256k1"
    assert repr(ec) == "Curve('secp256k1')"
    assert ec.p_size == ec.n_size == 32
    assert ec.nlen == 256

    assert mult(1) == ec.G
    assert mult(2) == G2
    assert mult(3) == G3
    assert mult(ec.n) == INF
    assert mult(ec.n + 2) == G2
    assert mult(0, ec.G) == INF
    assert mult(ec.n - 1) == ec.negate(ec.G)


def test_group_law() -> None:

    assert ec.add(ec.G, ec.G) == G2
    assert ec.add(ec.G, G2) == G3
    assert ec.add(G3, INF) == G3
    assert ec.add(INF, G3) == G3
    assert ec.add(G3, ec.negate(G3)) == INF
    assert ec.double_aff(INF) == INF

    assert ec.aff_from_jac(jac_from_aff(G3)) == G3
    assert ec.aff_from_jac(INFJ) == INF
    assert jac_from_aff(INF)[2] == 0

    QJ = mult_mont_ladder(3, ec.GJ, ec)
    assert ec.aff_from_jac(QJ) == G3
    assert ec.aff_from_jac(ec.add_jac(ec.GJ, ec.GJ)) == G2
    assert ec.add_jac(INFJ, ec.GJ) == ec.GJ

    with pytest.raises(StealthKitValueError, match="negative m: "):
        mult_mont_ladder(-1, ec.GJ, ec)


def test_y() -> None:

    x = ec.G[0]
    assert ec.y_even(x) % 2 == 0
    assert ec.y(x) in (ec.G[1], ec.p - ec.G[1])

    # 5 is not a valid x-coordinate
    with pytest.raises(StealthKitValueError, match="invalid x-coordinate: "):
        ec.y(INF[0])
    with pytest.raises(StealthKitValueError, match="x-coordinate not in 0..p-1: "):
        ec.y(ec.p)


def test_on_curve() -> None:

    assert ec.is_on_curve(INF)
    assert not ec.is_on_curve((ec.G[0], ec.G[1] + 1))

    with pytest.raises(StealthKitValueError, match="point not on curve"):
        ec.require_on_curve((ec.G[0], ec.G[1] + 1))
    with pytest.raises(StealthKitValueError, match="point must be a tuple"):
        ec.is_on_curve((1, 2, 3))  # type: ignore
    with pytest.raises(StealthKitValueError, match="y-coordinate not in 1..p-1: "):
        ec.is_on_curve((ec.G[0], ec.p))
    with pytest.raises(StealthKitValueError, match="point not on curve"):
        mult(2, (ec.G[0], ec.G[1] + 1))


def test_invalid_curve() -> None:

    G = ec.G
    with pytest.raises(StealthKitValueError, match="p is not prime: "):
        Curve("c", 15, 0, 7, G, ec.n, 1)
    with pytest.raises(StealthKitValueError, match="a not in 0..p-1: "):
        Curve("c", ec.p, -1, 7, G, ec.n, 1)
    with pytest.raises(StealthKitValueError, match="b not in 0..p-1: "):
        Curve("c", ec.p, 0, ec.p, G, ec.n, 1)
    with pytest.raises(StealthKitValueError, match="zero discriminant"):
        Curve("c", ec.p, 0, 0, G, ec.n, 1)
    with pytest.raises(StealthKitValueError, match="n is not prime: "):
        Curve("c", ec.p, 0, 7, G, ec.n - 1, 1)


def test_number_theory() -> None:

    for p in (3, 7, 11, 19, ec.p):
        for a in (2, 5, 9):
            if a % p:
                assert a * mod_inv(a, p) % p == 1
                b = a * a % p
                r = mod_sqrt(b, p)
                assert r * r % p == b

    with pytest.raises(StealthKitValueError, match="no inverse for "):
        mod_inv(0, ec.p)
    with pytest.raises(StealthKitValueError, match="no root for "):
        # 3 is not a quadratic residue mod 7
        mod_sqrt(3, 7)
