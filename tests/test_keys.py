#!/usr/bin/env python3

# Copyright (C) The stealthkit developers
#
# This file is part of stealthkit. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of stealthkit including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `stealthkit.keys` module."

import pytest

from stealthkit.exceptions import InvalidInputFormat
from stealthkit.keys import StealthKeys, keys_from_signature
from stealthkit.utils import bytes_from_hex

SIGNATURE = (
    "0xd6bf71e45d06a0ccc68523f090148e38941cbdf4113edb59ecad3e0a5f1e7ceb"
    "7b6fd1e1ddd1d2141f263bcfa4b1a3f8bf64f809aaed1b03e722cd88c82344c21b"
)


def test_keys_from_signature() -> None:

    keys = keys_from_signature(SIGNATURE)
    assert keys == StealthKeys(
        spending_private_key=(
            "0x641f9f8b285fa1d22b009ea8c947bb6d88129b320b729d98810b40b51e8572c7"
        ),
        viewing_private_key=(
            "0x16988506fc3aa66bad0f3f231aa9552a1639b7c05477e6d59f8044adb3155322"
        ),
    )
    assert keys.spending_private_key != keys.viewing_private_key

    # deterministic, case and input type insensitive
    assert keys_from_signature(SIGNATURE) == keys
    assert keys_from_signature(SIGNATURE.upper().replace("0X", "0x")) == keys
    assert keys_from_signature(bytes_from_hex(SIGNATURE)) == keys

    # the recovery byte is discarded
    assert keys_from_signature(SIGNATURE[:-2] + "1c") == keys

    assert keys.to_dict() == {
        "spending_private_key": keys.spending_private_key,
        "viewing_private_key": keys.viewing_private_key,
    }


def test_invalid_signature() -> None:

    with pytest.raises(InvalidInputFormat, match="invalid signature size: "):
        keys_from_signature(SIGNATURE[:-2])
    with pytest.raises(InvalidInputFormat, match="invalid signature size: "):
        keys_from_signature(SIGNATURE + "00")
    with pytest.raises(InvalidInputFormat, match="invalid signature: "):
        keys_from_signature(SIGNATURE[2:])
    with pytest.raises(InvalidInputFormat, match="invalid signature: "):
        keys_from_signature(SIGNATURE[:-1] + "g")
    with pytest.raises(InvalidInputFormat, match="invalid signature: "):
        keys_from_signature(SIGNATURE[:-1])
    with pytest.raises(InvalidInputFormat, match="invalid signature size: "):
        keys_from_signature(b"\x00" * 64)
