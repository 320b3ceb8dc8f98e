#!/usr/bin/env python3

# Copyright (C) The stealthkit developers
#
# This file is part of stealthkit. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of stealthkit including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Aliases

mypy aliases, documenting also coding input conventions.
"""

from typing import Tuple, Union

# Octets are a sequence of eight-bit bytes or a bare hex-string,
# i.e. a string that can be converted to bytes using bytes.fromhex:
# "deadbeef"
# "04 cc71eb30d653c0c3163990c47b976f3fb3f37cccdcbedb169a1dfef58bbfbfaf f7d8a473e7e2e6d317b87bafe8bde97e3cf8f065dec022b51d11fcdd0d348ac4"
#
# use stealthkit.utils.bytes_from_octets to convert Octets to bytes
Octets = Union[bytes, str]

# 0x-prefixed hex-string, the ethereum convention:
# "0x641f9f8b285fa1d22b009ea8c947bb6d88129b320b729d98810b40b51e8572c7"
# "0xb9e7de28c2e6c8f3c29fc0e061485a34c5864614"
#
# use stealthkit.utils.bytes_from_hex to convert it to bytes
# enforcing the expected size
HexStr = str

# public API inputs accept either a 0x hex-string or raw bytes
HexBytes = Union[bytes, HexStr]

# Elliptic curve point in affine coordinates.
Point = Tuple[int, int]

# The infinity point in affine coordinates is INF = (int, 0):
# no affine point has y=0 coordinate in a group of prime order.
# It can be checked with 'INF[1] == 0'
# The x-coordinate is arbitrary: 5 is not a valid secp256k1 x-coordinate.
INF = 5, 0

# Elliptic curve point in Jacobian coordinates.
JacPoint = Tuple[int, int, int]

# Infinity point in Jacobian coordinates is INFJ = (int, int, 0).
# It can be checked with 'INFJ[2] == 0'
INFJ = 7, 0, 0
