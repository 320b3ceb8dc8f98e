#!/usr/bin/env python3

# Copyright (C) The stealthkit developers
#
# This file is part of stealthkit. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of stealthkit including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `stealthkit.ecc.dh` module."

from stealthkit.ecc.curve import mult, secp256k1
from stealthkit.ecc.dh import shared_point, shared_secret
from stealthkit.ecc.sec_point import bytes_from_point

ec = secp256k1


def test_key_agreement() -> None:

    dU = 0x641F9F8B285FA1D22B009EA8C947BB6D88129B320B729D98810B40B51E8572C7
    QU = mult(dU)
    dV = 0x4F80725F967E22F2597E363F977BB563DE45C5E22E9C3594EBC0DE8BDCCF8945
    QV = mult(dV)

    assert shared_point(dU, QV) == shared_point(dV, QU) == mult(dU * dV)

    secret = shared_secret(dU, QV)
    assert len(secret) == 2 * ec.p_size
    assert secret == shared_secret(dV, QU)
    assert secret == bytes_from_point(mult(dU * dV), compressed=False)[1:]
    P = shared_point(dU, QV)
    assert secret[:32] == P[0].to_bytes(32, byteorder="big")
    assert secret[32:] == P[1].to_bytes(32, byteorder="big")
