#!/usr/bin/env python3

# Copyright (C) The stealthkit developers
#
# This file is part of stealthkit. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of stealthkit including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `stealthkit.message` module."

from stealthkit.message import key_generation_message

ADDRESS = "0x547F17276D3952004eafDD0910FB47F6f2E391a0"
SECRET = "deccc7b0ba824d3b6f73c50c41935eabf5e7e10f5b0177732344899c60be0f16"


def test_key_generation_message() -> None:

    msg = key_generation_message("1234", ADDRESS)
    assert msg == (
        "Sign this message to generate your Fluidkey private payment keys.\n"
        "\n"
        "WARNING: Only sign this message within a trusted website or platform"
        " to avoid loss of funds.\n"
        "\n"
        f"Secret: {SECRET}"
    )
    assert key_generation_message("1234", ADDRESS) == msg

    # the secret depends on both pin and address, case included
    assert key_generation_message("1235", ADDRESS) != msg
    assert key_generation_message("1234", ADDRESS.lower()) != msg
