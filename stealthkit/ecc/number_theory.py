#!/usr/bin/env python3

# Copyright (C) The stealthkit developers
#
# This file is part of stealthkit. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of stealthkit including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Modular arithmetic functions.

Only what is needed for prime fields with p = 3 mod 4 (e.g. secp256k1):
the modular square root has a closed form there.
"""

from typing import Tuple

from stealthkit.exceptions import StealthKitValueError


def xgcd(a: int, b: int) -> Tuple[int, int, int]:
    """Return (g, x, y) such that a*x + b*y = g = gcd(x, y).

    based on Extended Euclidean Algorithm, see
    https://en.wikibooks.org/wiki/Algorithm_Implementation/Mathematics/Extended_Euclidean_algorithm
    """

    x0, x1, y0, y1 = 0, 1, 1, 0
    while a != 0:
        q, b, a = b // a, a, b % a
        y0, y1 = y1, y0 - q * y1
        x0, x1 = x1, x0 - q * x1
    return b, x0, y0


def mod_inv(a: int, m: int) -> int:
    """Return the inverse of a (mod m). m does not have to be a prime."""

    a %= m
    g, x, _ = xgcd(a, m)
    if g == 1:
        return x % m
    raise StealthKitValueError(f"no inverse for {hex(a)} mod {hex(m)}")


def mod_sqrt(a: int, p: int) -> int:
    """Return a quadratic residue (mod p) of a, with p = 3 mod 4 prime.

    Solve the equation x^2 = a mod p and return x.
    Note that p - x is also a root.
    """

    if p % 4 != 3:
        raise StealthKitValueError(f"field prime is not equal to 3 mod 4: {hex(p)}")

    a %= p
    # inverse candidate is pow(a, (p + 1) // 4, p)
    r = pow(a, (p >> 2) + 1, p)
    if r * r % p != a:
        raise StealthKitValueError(f"no root for {hex(a)} mod {hex(p)}")
    return r
