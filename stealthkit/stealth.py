#!/usr/bin/env python3

# Copyright (C) The stealthkit developers
#
# This file is part of stealthkit. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of stealthkit including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Stealth addresses.

Given the ephemeral private key e and a spending public key P = k*G,
the Diffie-Hellman shared secret point e*P = k*E
(E = e*G being the ephemeral public key) is hashed to the scalar

    s = keccak256(x || y)

and the stealth public key is s*P, whose private key is s*k.

The sender knows e and P, so it can compute the stealth address;
only the owner of k can compute the stealth private key,
given the ephemeral public key E.
"""

from typing import List, Sequence

from stealthkit.alias import HexBytes, Point
from stealthkit.address import (
    address_from_point,
    int_from_prv_key,
    point_from_pub_key,
)
from stealthkit.ecc.curve import mult, secp256k1
from stealthkit.ecc.dh import shared_secret
from stealthkit.ecc.sec_point import bytes_from_point
from stealthkit.exceptions import DerivationFailure
from stealthkit.hashes import keccak256
from stealthkit.utils import hex_from_bytes, hex_from_int

ec = secp256k1


def _hashed_shared_secret(d: int, Q: Point) -> int:
    s = int.from_bytes(keccak256(shared_secret(d, Q, ec)), byteorder="big")
    # edge case that cannot be reproduced in the test suite
    if s % ec.n == 0:
        raise DerivationFailure("invalid hashed shared secret")  # pragma: no cover
    return s


def _stealth_point(e: int, P: Point) -> Point:
    return mult(_hashed_shared_secret(e, P), P, ec)


def stealth_public_key(
    ephemeral_private_key: HexBytes, spending_public_key: HexBytes
) -> str:
    "Return the uncompressed stealth public key for a spending public key."

    e = int_from_prv_key(ephemeral_private_key)
    P = point_from_pub_key(spending_public_key)
    Q = _stealth_point(e, P)
    return hex_from_bytes(bytes_from_point(Q, ec, compressed=False))


def stealth_addresses(
    ephemeral_private_key: HexBytes, spending_public_keys: Sequence[HexBytes]
) -> List[str]:
    """Return the stealth addresses of the spending public keys.

    The output list has the same order of the input keys.
    All inputs are validated before any stealth address is computed.
    """

    e = int_from_prv_key(ephemeral_private_key)
    points = [point_from_pub_key(pub_key) for pub_key in spending_public_keys]
    return [address_from_point(_stealth_point(e, P)) for P in points]


def stealth_private_key(
    spending_private_key: HexBytes, ephemeral_public_key: HexBytes
) -> str:
    "Return the private key of the stealth address, as 0x 64 hex digits."

    k = int_from_prv_key(spending_private_key)
    E = point_from_pub_key(ephemeral_public_key)
    s = _hashed_shared_secret(k, E)
    q = k * s % ec.n
    # edge case that cannot be reproduced in the test suite
    if q == 0:
        raise DerivationFailure("invalid stealth private key")  # pragma: no cover
    return hex_from_int(q)
