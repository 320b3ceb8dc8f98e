#!/usr/bin/env python3

# Copyright (C) The stealthkit developers
#
# This file is part of stealthkit. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of stealthkit including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Deterministic generation of the ECDSA nonce following RFC6979.

https://tools.ietf.org/html/rfc6979

Reusing the same nonce for a different message signed with the same
private key reveals the private key: RFC6979 derives it
deterministically from the private key and the message hash,
making signatures reproducible (and testable) without any
source of randomness.
"""

import hmac
from hashlib import sha256
from typing import Any, Callable

from stealthkit.alias import Octets
from stealthkit.ecc.curve import Curve, secp256k1
from stealthkit.utils import bytes_from_octets

HashF = Callable[[], Any]


def int_from_bits(octets: Octets, nlen: int) -> int:
    """Return the leftmost nlen bits.

    SEC 1 v.2 section 4.1.3 (5), see also
    https://tools.ietf.org/html/rfc6979#section-2.3.2
    """

    octets = bytes_from_octets(octets)
    i = int.from_bytes(octets, byteorder="big", signed=False)

    blen = len(octets) * 8  # bits
    n = (blen - nlen) if blen >= nlen else 0
    return i >> n


def challenge_(msg_hash: Octets, ec: Curve = secp256k1) -> int:
    "Return the challenge c, i.e. the message hash as scalar mod n."
    return int_from_bits(msg_hash, ec.nlen) % ec.n


def rfc6979_nonce_(c: int, q: int, ec: Curve = secp256k1, hf: HashF = sha256) -> int:
    # https://tools.ietf.org/html/rfc6979 section 3.2

    # convert the private key q to an octet sequence of size n_size
    q_bytes = q.to_bytes(ec.n_size, byteorder="big", signed=False)
    c_bytes = c.to_bytes(ec.n_size, byteorder="big", signed=False)
    bprvbm = q_bytes + c_bytes

    hf_size = hf().digest_size
    v = b"\x01" * hf_size  # 3.2.b
    k = b"\x00" * hf_size  # 3.2.c

    k = hmac.new(k, v + b"\x00" + bprvbm, hf).digest()  # 3.2.d
    v = hmac.new(k, v, hf).digest()  # 3.2.e
    k = hmac.new(k, v + b"\x01" + bprvbm, hf).digest()  # 3.2.f
    v = hmac.new(k, v, hf).digest()  # 3.2.g

    while True:  # 3.2.h
        t = b""  # 3.2.h.1
        while len(t) < ec.n_size:  # 3.2.h.2
            v = hmac.new(k, v, hf).digest()
            t += v
        nonce = int_from_bits(t, ec.nlen)  # 3.2.h.3
        if 0 < nonce < ec.n:
            return nonce
        k = hmac.new(k, v + b"\x00", hf).digest()
        v = hmac.new(k, v, hf).digest()
