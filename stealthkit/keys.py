#!/usr/bin/env python3

# Copyright (C) The stealthkit developers
#
# This file is part of stealthkit. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of stealthkit including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Spending and viewing private keys from a master signature.

The 65 bytes [r][s][v] signature of the key generation message
is split into its r and s halves (v is discarded):
their keccak256 hashes are the spending and the viewing private keys.

The spending key controls the funds and never leaves the user;
the viewing key only allows to generate (and recognize)
stealth addresses on behalf of the user.
"""

from dataclasses import dataclass
from typing import Dict

from stealthkit.alias import HexBytes
from stealthkit.hashes import keccak256
from stealthkit.utils import bytes_from_hex, hex_from_bytes

_SIGNATURE_SIZE = 65


@dataclass(frozen=True)
class StealthKeys:
    spending_private_key: str
    viewing_private_key: str

    def to_dict(self) -> Dict[str, str]:
        return {
            "spending_private_key": self.spending_private_key,
            "viewing_private_key": self.viewing_private_key,
        }


def keys_from_signature(signature: HexBytes) -> StealthKeys:
    """Return the spending and viewing private keys of a signature.

    The signature must be a 0x-prefixed 130 hex digits string
    (or 65 raw bytes).
    """

    sig = bytes_from_hex(signature, _SIGNATURE_SIZE, "signature")
    return StealthKeys(
        spending_private_key=hex_from_bytes(keccak256(sig[:32])),
        viewing_private_key=hex_from_bytes(keccak256(sig[32:64])),
    )
