#!/usr/bin/env python3

# Copyright (C) The stealthkit developers
#
# This file is part of stealthkit. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of stealthkit including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Ethereum keys and addresses.

An address is the last 20 bytes of the keccak256 hash
of the uncompressed public key, without its 0x04 prefix.

Private key inputs are 0x-prefixed 64 hex digits strings (or 32 raw bytes);
public key inputs are SEC points, compressed or uncompressed.
Outputs are always lowercase 0x-prefixed hex-strings,
with EIP-55 mixed-case checksum addresses available on request.
"""

from stealthkit.alias import HexBytes, Point
from stealthkit.ecc.curve import Curve, mult, secp256k1
from stealthkit.ecc.sec_point import bytes_from_point, point_from_octets
from stealthkit.exceptions import InvalidInputFormat
from stealthkit.hashes import keccak256
from stealthkit.utils import bytes_from_hex, hex_from_bytes

ADDRESS_SIZE = 20
ZERO_ADDRESS = "0x" + "00" * ADDRESS_SIZE


def int_from_prv_key(prv_key: HexBytes, ec: Curve = secp256k1) -> int:
    """Return a verified-as-valid private key integer."""

    q_bytes = bytes_from_hex(prv_key, ec.n_size, "private key")
    q = int.from_bytes(q_bytes, byteorder="big", signed=False)
    if not 0 < q < ec.n:
        raise InvalidInputFormat("private key not in 1..n-1")
    return q


def point_from_pub_key(pub_key: HexBytes, ec: Curve = secp256k1) -> Point:
    """Return the curve point of a compressed or uncompressed public key."""

    pub_key_bytes = bytes_from_hex(
        pub_key, (ec.p_size + 1, 2 * ec.p_size + 1), "public key"
    )
    return point_from_octets(pub_key_bytes, ec)


def pub_key_from_prv_key(prv_key: HexBytes, compressed: bool = False) -> str:
    "Return the public key hex-string of a private key."
    Q = mult(int_from_prv_key(prv_key))
    return hex_from_bytes(bytes_from_point(Q, compressed=compressed))


def address_from_point(Q: Point) -> str:
    pub_key = bytes_from_point(Q, compressed=False)
    return hex_from_bytes(keccak256(pub_key[1:])[-ADDRESS_SIZE:])


def address_from_pub_key(pub_key: HexBytes) -> str:
    "Return the lowercase address of a compressed or uncompressed public key."
    return address_from_point(point_from_pub_key(pub_key))


def address_from_prv_key(prv_key: HexBytes) -> str:
    return address_from_point(mult(int_from_prv_key(prv_key)))


def bytes_from_address(address: HexBytes) -> bytes:
    "Return the 20 bytes of an address, checksum case is not verified."
    return bytes_from_hex(address, ADDRESS_SIZE, "address")


def to_checksum_address(address: HexBytes) -> str:
    """Return the EIP-55 mixed-case checksum address.

    https://eips.ethereum.org/EIPS/eip-55
    """

    hex_address = bytes_from_address(address).hex()
    hashed = keccak256(hex_address.encode("ascii")).hex()
    return "0x" + "".join(
        c.upper() if int(h, 16) >= 8 else c for c, h in zip(hex_address, hashed)
    )


def is_checksum_address(address: str) -> bool:
    try:
        return address == to_checksum_address(address)
    except InvalidInputFormat:
        return False
