#!/usr/bin/env python3

# Copyright (C) The stealthkit developers
#
# This file is part of stealthkit. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of stealthkit including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Hash based helper functions.

keccak256 is the original Keccak submission (0x01 padding) used by ethereum,
not the standardized SHA3-256 available in hashlib.
"""

import hashlib

from Crypto.Hash import RIPEMD160, keccak

from stealthkit.alias import Octets
from stealthkit.utils import bytes_from_octets


def keccak256(octets: Octets) -> bytes:
    """Return the KECCAK256(*) of the input octet sequence."""
    octets = bytes_from_octets(octets)
    return keccak.new(data=octets, digest_bits=256).digest()


def sha256(octets: Octets) -> bytes:
    """Return the SHA256(*) of the input octet sequence."""
    octets = bytes_from_octets(octets)
    return hashlib.sha256(octets).digest()


def ripemd160(octets: Octets) -> bytes:
    """Return the RIPEMD160(*) of the input octet sequence."""
    # hashlib ripemd160 is unusable with OpenSSL 3.x default provider
    octets = bytes_from_octets(octets)
    return RIPEMD160.new(data=octets).digest()


def hash160(octets: Octets) -> bytes:
    """Return the HASH160=RIPEMD160(SHA256) of the input octet sequence."""
    return ripemd160(sha256(octets))
