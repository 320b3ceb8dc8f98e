#!/usr/bin/env python3

# Copyright (C) The stealthkit developers
#
# This file is part of stealthkit. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of stealthkit including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `stealthkit.ecc.sec_point` module."

import pytest

from stealthkit.alias import INF
from stealthkit.ecc.curve import mult, secp256k1
from stealthkit.ecc.sec_point import bytes_from_point, point_from_octets
from stealthkit.exceptions import InvalidInputFormat, StealthKitValueError

ec = secp256k1


def test_octets2point() -> None:

    for q in (1, 2, 3, 0xFF, ec.n - 1, ec.n // 2):
        Q = mult(q)

        Q_bytes = b"\x03" if Q[1] & 1 else b"\x02"
        Q_bytes += Q[0].to_bytes(ec.p_size, byteorder="big", signed=False)
        assert bytes_from_point(Q, ec) == Q_bytes
        assert point_from_octets(Q_bytes, ec) == Q
        assert point_from_octets(Q_bytes.hex(), ec) == Q

        Q_bytes = b"\x04" + Q[0].to_bytes(ec.p_size, byteorder="big", signed=False)
        Q_bytes += Q[1].to_bytes(ec.p_size, byteorder="big", signed=False)
        assert bytes_from_point(Q, ec, compressed=False) == Q_bytes
        assert point_from_octets(Q_bytes, ec) == Q


def test_generator() -> None:

    G_hex = "0279be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798"
    assert bytes_from_point(ec.G).hex() == G_hex
    assert point_from_octets(G_hex) == ec.G


def test_exceptions() -> None:

    with pytest.raises(StealthKitValueError, match="no bytes representation for"):
        bytes_from_point(INF, ec)

    Q_bytes = bytes_from_point(ec.G)
    with pytest.raises(InvalidInputFormat, match="not a point: "):
        point_from_octets(b"\x05" + Q_bytes[1:], ec)
    with pytest.raises(InvalidInputFormat, match="invalid size: "):
        point_from_octets(Q_bytes[:-1], ec)
    with pytest.raises(InvalidInputFormat, match="not a hex-string: "):
        point_from_octets("not a point", ec)

    # 5 is not a valid x-coordinate
    x_bytes = (5).to_bytes(ec.p_size, byteorder="big", signed=False)
    with pytest.raises(InvalidInputFormat, match="invalid x-coordinate: "):
        point_from_octets(b"\x02" + x_bytes, ec)

    Q_bytes = bytes_from_point(ec.G, compressed=False)
    with pytest.raises(InvalidInputFormat, match="invalid size for uncompressed"):
        point_from_octets(Q_bytes[:33], ec)
    with pytest.raises(InvalidInputFormat, match="invalid size for compressed"):
        point_from_octets(b"\x02" + Q_bytes[1:], ec)
    with pytest.raises(InvalidInputFormat, match="point not on curve: "):
        point_from_octets(Q_bytes[:-1] + bytes([Q_bytes[-1] ^ 1]), ec)
    with pytest.raises(InvalidInputFormat, match="no bytes representation for"):
        point_from_octets(Q_bytes[:33] + b"\x00" * 32, ec)
