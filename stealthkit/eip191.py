#!/usr/bin/env python3

# Copyright (C) The stealthkit developers
#
# This file is part of stealthkit. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of stealthkit including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Ethereum message signing (EIP-191 personal_sign).

https://eips.ethereum.org/EIPS/eip-191

To mitigate the risk of signing a possibly deceiving message,
for any given message a *magic* "\\x19Ethereum Signed Message:\\n"
prefix, followed by the decimal message length, is added;
then the keccak256 hash of the resulting message is signed.

The ECDSA signature uses the RFC6979 deterministic nonce and
the low-s canonical form, as wallets do:
the same message signed with the same key
always results in the same signature.

The (r, s) signature is serialized as
[32-bytes r][32-bytes s][1-byte v], with v = 27 + recovery id,
and its verification does not need the public key:
the signer address is recovered from the signature itself.
"""

from typing import Union

from stealthkit.address import address_from_point, bytes_from_address, int_from_prv_key
from stealthkit.alias import HexBytes
from stealthkit.ecc import dsa
from stealthkit.exceptions import InvalidInputFormat
from stealthkit.hashes import keccak256
from stealthkit.utils import hex_from_bytes

Message = Union[str, bytes]

_MAGIC_PREFIX = b"\x19Ethereum Signed Message:\n"


def magic_message(msg: Message) -> bytes:
    if isinstance(msg, str):
        msg = msg.encode("utf-8")
    return _MAGIC_PREFIX + str(len(msg)).encode("ascii") + msg


def hash_message(msg: Message) -> bytes:
    "Return the keccak256 hash of the magic message."
    return keccak256(magic_message(msg))


def sign_message(msg: Message, prv_key: HexBytes) -> str:
    "Return the 0x-prefixed 130 hex digits signature of the message."

    q = int_from_prv_key(prv_key)
    sig = dsa.sign_(hash_message(msg), q)
    return hex_from_bytes(sig.serialize())


def recover_address(msg: Message, signature: HexBytes) -> str:
    "Return the lowercase address of the message signer."

    sig = dsa.Sig.parse(signature)
    Q = dsa.recover_pub_key_(hash_message(msg), sig)
    return address_from_point(Q)


def assert_as_valid(msg: Message, address: HexBytes, signature: HexBytes) -> None:
    # It raises Errors, while verify should always return True or False

    expected = bytes_from_address(address)
    recovered = bytes_from_address(recover_address(msg, signature))
    if recovered != expected:
        raise InvalidInputFormat("signature does not match the address")


def verify(msg: Message, address: HexBytes, signature: HexBytes) -> bool:
    "Verify the message signature against the signer address."

    # all kind of Exceptions are catched because
    # verify must always return a bool
    try:
        assert_as_valid(msg, address, signature)
    except Exception:  # pylint: disable=broad-except
        return False
    else:
        return True
