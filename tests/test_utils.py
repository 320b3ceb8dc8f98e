#!/usr/bin/env python3

# Copyright (C) The stealthkit developers
#
# This file is part of stealthkit. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of stealthkit including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `stealthkit.utils` and `stealthkit.hashes` modules."

import pytest

from stealthkit.exceptions import InvalidInputFormat
from stealthkit.hashes import hash160, keccak256, ripemd160, sha256
from stealthkit.utils import (
    bytes_from_hex,
    bytes_from_octets,
    hex_from_bytes,
    hex_from_int,
    is_hex,
)


def test_bytes_from_octets() -> None:

    assert bytes_from_octets("deadbeef") == b"\xde\xad\xbe\xef"
    assert bytes_from_octets(" de ad be ef ") == b"\xde\xad\xbe\xef"
    assert bytes_from_octets(b"\x01", 1) == b"\x01"
    assert bytes_from_octets(b"\x01", (1, 2)) == b"\x01"

    with pytest.raises(InvalidInputFormat, match="not a hex-string: "):
        bytes_from_octets("0xdeadbeef")
    with pytest.raises(InvalidInputFormat, match="invalid size: "):
        bytes_from_octets(b"\x01", 2)
    with pytest.raises(InvalidInputFormat, match="invalid size: "):
        bytes_from_octets(b"\x01", (2, 3))


def test_hex() -> None:

    assert is_hex("0x")
    assert is_hex("0xdeadBEEF")
    assert not is_hex("deadbeef")
    assert not is_hex("0xdeadbee")
    assert not is_hex("0xdeadbeeg")
    assert not is_hex(b"0xdeadbeef")
    assert not is_hex(" 0xdeadbeef")

    assert bytes_from_hex("0x") == b""
    assert bytes_from_hex("0xdeadBEEF") == b"\xde\xad\xbe\xef"
    assert bytes_from_hex(b"\xde\xad", 2) == b"\xde\xad"
    assert bytes_from_hex(bytearray(b"\xde\xad"), 2) == b"\xde\xad"

    with pytest.raises(InvalidInputFormat, match="invalid signature: "):
        bytes_from_hex("a" * 132, label="signature")
    with pytest.raises(InvalidInputFormat, match="invalid signature size: "):
        bytes_from_hex("0x" + "a" * 128, 65, "signature")
    with pytest.raises(InvalidInputFormat, match="invalid hex-string: "):
        bytes_from_hex(1)  # type: ignore

    assert hex_from_bytes(b"\xde\xad") == "0xdead"
    assert hex_from_int(1) == "0x" + "00" * 31 + "01"
    assert hex_from_int(1, 1) == "0x01"


def test_hashes() -> None:

    # keccak256 is not the standardized sha3_256
    assert keccak256(b"").hex() == (
        "c5d2460186f7233c927e7db2dcc703c0e500b653ca82273b7bfad8045d85a470"
    )
    assert keccak256("") == keccak256(b"")
    assert sha256(b"").hex() == (
        "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"
    )
    assert ripemd160(b"").hex() == "9c1185a5c5e9fc54612808977ee8f548b2258d31"
    assert hash160(b"") == ripemd160(sha256(b""))
