#!/usr/bin/env python3

# Copyright (C) The stealthkit developers
#
# This file is part of stealthkit. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of stealthkit including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic curve class and scalar multiplication.

A Curve is the cyclic group of prime order n generated by G,
a point on the elliptic curve y^2 = x^3 + a*x + b over Fp.

Points are affine (x, y) tuples; INF = (5, 0) is the point at infinity.
Scalar multiplication runs on Jacobian coordinates (X, Y, Z),
with x = X / Z^2 and y = Y / Z^3, to avoid a modular inversion
at every step.

http://www.secg.org/sec2-v2.pdf
"""

from math import ceil
from typing import Optional

from stealthkit.alias import INF, INFJ, JacPoint, Point
from stealthkit.ecc.number_theory import mod_inv, mod_sqrt
from stealthkit.exceptions import StealthKitValueError


def jac_from_aff(Q: Point) -> JacPoint:
    """Return the Jacobian representation of the affine point.

    The input point is assumed to be on curve.
    """
    return Q[0], Q[1], 1 if Q[1] else 0


class Curve:
    "Cyclic subgroup of prime order n of an elliptic curve over Fp."

    def __init__(
        self, name: str, p: int, a: int, b: int, G: Point, n: int, cofactor: int
    ) -> None:
        # Parameters are checked according to SEC 1 v.2 3.1.1.2.1

        # Fermat test will do as _probabilistic_ primality test...
        if p < 3 or p % 2 == 0 or pow(2, p - 1, p) != 1:
            raise StealthKitValueError(f"p is not prime: {hex(p)}")
        if not 0 <= a < p:
            raise StealthKitValueError(f"a not in 0..p-1: {hex(a)}")
        if not 0 <= b < p:
            raise StealthKitValueError(f"b not in 0..p-1: {hex(b)}")
        if (4 * a * a * a + 27 * b * b) % p == 0:
            raise StealthKitValueError("zero discriminant")

        self.name = name
        self.p = p
        self.p_size = ceil(p.bit_length() / 8)
        self._a = a
        self._b = b

        self.G = G
        self.require_on_curve(G)
        self.GJ = jac_from_aff(G)

        if n < 2 or pow(2, n - 1, n) != 1:
            raise StealthKitValueError(f"n is not prime: {hex(n)}")
        self.n = n
        self.nlen = n.bit_length()
        self.n_size = ceil(self.nlen / 8)
        self.cofactor = cofactor

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"Curve('{self.name}')"

    def negate(self, Q: Point) -> Point:
        """Return the opposite point.

        The input point is not checked to be on the curve.
        """
        # % self.p is required to account for INF (i.e. Q[1]==0)
        return Q[0], (self.p - Q[1]) % self.p

    def aff_from_jac(self, Q: JacPoint) -> Point:
        # point is assumed to be on curve
        if Q[2] == 0:  # Infinity point in Jacobian coordinates
            return INF

        Z2 = Q[2] * Q[2]
        x = Q[0] * mod_inv(Z2, self.p)
        y = Q[1] * mod_inv(Z2 * Q[2], self.p)
        return x % self.p, y % self.p

    def add(self, Q1: Point, Q2: Point) -> Point:
        """Return the sum of two points.

        The input points must be on the curve.
        """
        self.require_on_curve(Q1)
        self.require_on_curve(Q2)
        return self.add_aff(Q1, Q2)

    def add_aff(self, Q: Point, R: Point) -> Point:
        # points are assumed to be on curve

        if R[1] == 0:  # Infinity point in affine coordinates
            return Q
        if Q[1] == 0:  # Infinity point in affine coordinates
            return R

        if R[0] == Q[0]:
            if R[1] == Q[1]:  # point doubling
                return self.double_aff(R)
            # opposite points
            return INF

        lam = (R[1] - Q[1]) * mod_inv(R[0] - Q[0], self.p)
        x = lam * lam - Q[0] - R[0]
        y = lam * (Q[0] - x) - Q[1]
        return x % self.p, y % self.p

    def double_aff(self, Q: Point) -> Point:
        # point is assumed to be on curve

        if Q[1] == 0:  # Infinity point in affine coordinates
            return INF

        lam = (3 * Q[0] * Q[0] + self._a) * mod_inv(2 * Q[1], self.p)
        x = lam * lam - Q[0] - Q[0]
        y = lam * (Q[0] - x) - Q[1]
        return x % self.p, y % self.p

    def add_jac(self, Q: JacPoint, R: JacPoint) -> JacPoint:
        # points are assumed to be on curve

        RZ2 = R[2] * R[2]
        RZ3 = RZ2 * R[2]
        QZ2 = Q[2] * Q[2]
        QZ3 = QZ2 * Q[2]

        M = Q[0] * RZ2
        N = R[0] * QZ2

        T = Q[1] * RZ3
        U = R[1] * QZ3

        if M % self.p == N % self.p and T % self.p == U % self.p:
            return self.double_jac(Q)

        W = U - T
        V = N - M

        V2 = V * V
        V3 = V2 * V
        MV2 = M * V2

        X = (W * W - V3 - 2 * MV2) % self.p
        Y = (W * (MV2 - X) - T * V3) % self.p
        Z = (V * Q[2] * R[2]) % self.p

        # Z is zero if Q or R are equal to INFJ,
        # so (X, Y, Z) is INFJ instead of being R or Q (respectively)
        #      Q==INFJ  +    R==INFJ  * 2
        #            0  +          0  * 2 = 0 → (X, Y, Z)
        #            1  +          0  * 2 = 1 → R
        #            0  +          1  * 2 = 2 → Q
        #            1  +          1  * 2 = 3 → INFJ
        ret_values = [(X, Y, Z), R, Q, INFJ]
        return ret_values[(Q[2] == 0) + (R[2] == 0) * 2]

    def double_jac(self, Q: JacPoint) -> JacPoint:
        # point is assumed to be on curve

        QZ2 = Q[2] * Q[2]
        QY2 = Q[1] * Q[1]
        W = 3 * Q[0] * Q[0] + self._a * QZ2 * QZ2
        V = 4 * Q[0] * QY2
        X = W * W - 2 * V
        Y = W * (V - X) - 8 * QY2 * QY2
        Z = 2 * Q[1] * Q[2]
        return X % self.p, Y % self.p, Z % self.p

    def _y2(self, x: int) -> int:
        # skipping a crucial check here:
        # if sqrt(y*y) does not exist, then x is not valid.
        return ((x * x + self._a) * x + self._b) % self.p

    def y(self, x: int) -> int:
        """Return the y coordinate from x, as in (x, y)."""
        if not 0 <= x < self.p:
            raise StealthKitValueError(f"x-coordinate not in 0..p-1: {hex(x)}")
        try:
            return mod_sqrt(self._y2(x), self.p)
        except StealthKitValueError as e:
            raise StealthKitValueError(f"invalid x-coordinate: {hex(x)}") from e

    def y_even(self, x: int) -> int:
        """Return the even affine y-coordinate associated to x."""
        root = self.y(x)
        return self.p - root if root % 2 else root

    def require_on_curve(self, Q: Point) -> None:
        """Require the input curve Point to be on the curve.

        An Error is raised if not.
        """
        if not self.is_on_curve(Q):
            raise StealthKitValueError("point not on curve")

    def is_on_curve(self, Q: Point) -> bool:
        """Return True if the point is on the curve."""
        if len(Q) != 2:
            raise StealthKitValueError("point must be a tuple[int, int]")
        if Q[1] == 0:  # Infinity point in affine coordinates
            return True
        if not 0 < Q[1] < self.p:  # y cannot be zero
            raise StealthKitValueError(f"y-coordinate not in 1..p-1: {hex(Q[1])}")
        return self._y2(Q[0]) == (Q[1] * Q[1] % self.p)


def mult_mont_ladder(m: int, Q: JacPoint, ec: Curve) -> JacPoint:
    """Scalar multiplication using 'Montgomery ladder' algorithm.

    'left-to-right' binary decomposition of the m coefficient,
    Jacobian coordinates.
    It prevents branch prediction avoiding any if.

    The input point is assumed to be on curve and
    the m coefficient is assumed to have been reduced mod n.
    """

    if m < 0:
        raise StealthKitValueError(f"negative m: {hex(m)}")

    # R[0] is the running result, R[1] = R[0] + Q is an ancillary variable
    R = [INFJ, Q]
    for i in [int(i) for i in bin(m)[2:]]:
        R[not i] = ec.add_jac(R[i], R[not i])
        R[i] = ec.double_jac(R[i])
    return R[0]


secp256k1 = Curve(
    "secp256k1",
    p=0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEFFFFFC2F,
    a=0,
    b=7,
    G=(
        0x79BE667EF9DCBBAC55A06295CE870B07029BFCDB2DCE28D959F2815B16F81798,
        0x483ADA7726A3C4655DA4FBFC0E1108A8FD17B448A68554199C47D08FFB10D4B8,
    ),
    n=0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141,
    cofactor=1,
)


def mult(m: int, Q: Optional[Point] = None, ec: Curve = secp256k1) -> Point:
    """Elliptic curve scalar multiplication.

    The point defaults to the curve generator G.
    """
    if Q is None:
        QJ = ec.GJ
    else:
        ec.require_on_curve(Q)
        QJ = jac_from_aff(Q)

    m %= ec.n
    R = mult_mont_ladder(m, QJ, ec)
    return ec.aff_from_jac(R)
