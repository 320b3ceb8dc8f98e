#!/usr/bin/env python3

# Copyright (C) The stealthkit developers
#
# This file is part of stealthkit. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of stealthkit including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Elliptic Curve Digital Signature Algorithm (ECDSA) with key recovery.

Implemented according to SEC 1 v.2, restricted to what ethereum
wallets do: low-s canonical signatures, RFC6979 deterministic nonce,
and a recovery id in 0..3 identifying the signer public key among the
candidates that verify the signature.

The signature is serialized as [32-bytes r][32-bytes s][1-byte v],
with v = 27 + recovery id.
"""

from __future__ import annotations

from dataclasses import dataclass

from stealthkit.alias import HexBytes, Octets, Point
from stealthkit.ecc.curve import Curve, mult, secp256k1
from stealthkit.ecc.number_theory import mod_inv
from stealthkit.ecc.rfc6979 import challenge_, rfc6979_nonce_
from stealthkit.exceptions import (
    DerivationFailure,
    InvalidInputFormat,
    StealthKitValueError,
)
from stealthkit.utils import bytes_from_hex, bytes_from_octets

_V_OFFSET = 27


@dataclass(frozen=True)
class Sig:
    r: int
    s: int
    recovery_id: int

    def __post_init__(self) -> None:
        self.assert_valid()

    def assert_valid(self, ec: Curve = secp256k1) -> None:
        if not 0 < self.r < ec.n:
            raise InvalidInputFormat(f"r not in 1..n-1: {hex(self.r)}")
        if not 0 < self.s < ec.n:
            raise InvalidInputFormat(f"s not in 1..n-1: {hex(self.s)}")
        if self.recovery_id not in (0, 1, 2, 3):
            raise InvalidInputFormat(f"invalid recovery id: {self.recovery_id}")

    def serialize(self, ec: Curve = secp256k1) -> bytes:
        return b"".join(
            [
                self.r.to_bytes(ec.n_size, byteorder="big", signed=False),
                self.s.to_bytes(ec.n_size, byteorder="big", signed=False),
                bytes([_V_OFFSET + self.recovery_id]),
            ]
        )

    @classmethod
    def parse(cls: type[Sig], data: HexBytes, ec: Curve = secp256k1) -> Sig:
        "Return a Sig by parsing r||s||v, accepting v in (0, 1) or (27, 28)."
        data = bytes_from_hex(data, 2 * ec.n_size + 1, "signature")
        r = int.from_bytes(data[: ec.n_size], byteorder="big", signed=False)
        s = int.from_bytes(data[ec.n_size : -1], byteorder="big", signed=False)
        v = data[-1]
        recovery_id = v - _V_OFFSET if v >= _V_OFFSET else v
        return cls(r, s, recovery_id)


def sign_(msg_hash: Octets, q: int, lower_s: bool = True, ec: Curve = secp256k1) -> Sig:
    """Sign a message hash with the private key q.

    Steps numbering follows SEC 1 v.2 section 4.1.3
    """

    msg_hash = bytes_from_octets(msg_hash, ec.n_size)
    if not 0 < q < ec.n:
        raise StealthKitValueError(f"private key not in 1..n-1: {hex(q)}")

    c = challenge_(msg_hash, ec)  # 4, 5
    nonce = rfc6979_nonce_(c, q, ec)  # 1

    K = mult(nonce, ec.G, ec)
    r = K[0] % ec.n  # 2, 3
    # edge cases that cannot be reproduced in the test suite
    if r == 0:
        raise DerivationFailure("failed to sign: r = 0")  # pragma: no cover
    s = mod_inv(nonce, ec.n) * (c + r * q) % ec.n  # 6
    if s == 0:
        raise DerivationFailure("failed to sign: s = 0")  # pragma: no cover

    recovery_id = (K[1] & 1) | (2 if K[0] >= ec.n else 0)
    # ethereum canonical 'low-s' encoding: -s is valid too,
    # and it flips the parity of the implied K point
    if lower_s and s > ec.n // 2:
        s = ec.n - s
        recovery_id ^= 1

    return Sig(r, s, recovery_id)


def recover_pub_key_(msg_hash: Octets, sig: Sig, ec: Curve = secp256k1) -> Point:
    """Return the public key that verifies the signature.

    SEC 1 v.2 section 4.1.6
    """

    msg_hash = bytes_from_octets(msg_hash, ec.n_size)
    c = challenge_(msg_hash, ec)

    x_K = sig.r + (ec.n if sig.recovery_id & 2 else 0)
    try:
        y_K = ec.y_even(x_K)
    except StealthKitValueError as e:
        raise InvalidInputFormat("invalid signature: no point for r") from e
    if sig.recovery_id & 1:
        y_K = ec.p - y_K
    K = x_K, y_K

    r1 = mod_inv(sig.r, ec.n)
    sR = mult(sig.s * r1, K, ec)
    cG = mult(c * r1, ec.G, ec)
    Q = ec.add(sR, ec.negate(cG))
    if Q[1] == 0:
        raise InvalidInputFormat("invalid signature: INF public key")
    return Q
