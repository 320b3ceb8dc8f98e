#!/usr/bin/env python3

# Copyright (C) The stealthkit developers
#
# This file is part of stealthkit. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of stealthkit including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Diffie-Hellman elliptic curve key agreement scheme.

Two entities holding private keys dU, dV and public keys QU = dU*G,
QV = dV*G obtain the same shared secret point, as
dU*QV = dU*dV*G = dV*QU.

Here the shared secret is the whole (x, y) point, not just its
x-coordinate: the stealth key schemes hash both coordinates.

http://www.secg.org/sec1-v2.pdf, section 6.1
"""

from stealthkit.alias import Point
from stealthkit.ecc.curve import Curve, mult, secp256k1
from stealthkit.ecc.sec_point import bytes_from_point
from stealthkit.exceptions import DerivationFailure


def shared_point(dU: int, QV: Point, ec: Curve = secp256k1) -> Point:
    "Return the Diffie-Hellman shared secret point dU*QV."

    shared_secret_point = mult(dU, QV, ec)
    # edge case that cannot be reproduced in the test suite
    if shared_secret_point[1] == 0:
        err_msg = "invalid (INF) shared secret point"  # pragma: no cover
        raise DerivationFailure(err_msg)  # pragma: no cover
    return shared_secret_point


def shared_secret(dU: int, QV: Point, ec: Curve = secp256k1) -> bytes:
    """Return the shared secret as x||y serialization.

    It is the uncompressed SEC serialization of the shared point,
    with the leading 0x04 format byte stripped.
    """

    Q = shared_point(dU, QV, ec)
    return bytes_from_point(Q, ec, compressed=False)[1:]
