#!/usr/bin/env python3

# Copyright (C) The stealthkit developers
#
# This file is part of stealthkit. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of stealthkit including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Key generation message, whose signature is the master signature."

from stealthkit.hashes import keccak256

_TEMPLATE = (
    "Sign this message to generate your Fluidkey private payment keys.\n"
    "\n"
    "WARNING: Only sign this message within a trusted website or platform"
    " to avoid loss of funds.\n"
    "\n"
    "Secret: {secret}"
)


def key_generation_message(pin: str, address: str) -> str:
    """Return the message to be signed for key generation.

    The secret binds the message to the user address (as connected,
    case included) and to the user PIN.
    """

    secret = keccak256((address + pin).encode("utf-8")).hex()
    return _TEMPLATE.format(secret=secret)
