#!/usr/bin/env python3

# Copyright (C) The stealthkit developers
#
# This file is part of stealthkit. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of stealthkit including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Assorted conversion utilities.

Two hex-string conventions coexist:

- Octets: bytes or bare hex-string (bytes.fromhex friendly),
  used internally and by the elliptic curve helpers
- HexStr: 0x-prefixed hex-string, used at the public API boundary;
  its parsing is strict: ^0x[0-9a-fA-F]*$ with an even number of digits
"""

import re
from collections.abc import Iterable as IterableCollection
from typing import Iterable, Optional, Union

from stealthkit.alias import HexBytes, Octets
from stealthkit.exceptions import InvalidInputFormat

NoneOneOrMoreInt = Optional[Union[int, Iterable[int]]]

_HEX_PATTERN = re.compile(r"^0x(?:[0-9a-fA-F]{2})*$")


def _size_ok(size: int, out_size: NoneOneOrMoreInt) -> bool:
    return (
        out_size is None
        or isinstance(out_size, int)
        and size == out_size
        or isinstance(out_size, IterableCollection)
        and size in out_size
    )


def bytes_from_octets(octets: Octets, out_size: NoneOneOrMoreInt = None) -> bytes:
    """Return bytes from a bare hex-string.

    If the input is not a string, then it goes untouched.
    Optionally, it also ensures required output size.
    """

    if isinstance(octets, str):  # hex string
        try:
            octets = bytes.fromhex(octets)
        except ValueError as e:
            raise InvalidInputFormat(f"not a hex-string: {octets!r}") from e

    if _size_ok(len(octets), out_size):
        return octets

    err_msg = f"invalid size: {len(octets)} bytes instead of {out_size}"
    raise InvalidInputFormat(err_msg)


def is_hex(value: object) -> bool:
    "Return True if value is a well formed 0x-prefixed hex-string."
    return isinstance(value, str) and _HEX_PATTERN.match(value) is not None


def bytes_from_hex(
    value: HexBytes, out_size: NoneOneOrMoreInt = None, label: str = "hex-string"
) -> bytes:
    """Return bytes from a 0x-prefixed hex-string.

    Raw bytes go untouched, apart from the size check.
    The label is only used to make error messages meaningful.
    """

    if isinstance(value, (bytes, bytearray)):
        result = bytes(value)
    elif is_hex(value):
        result = bytes.fromhex(value[2:])  # type: ignore
    else:
        raise InvalidInputFormat(f"invalid {label}: {value!r}")

    if _size_ok(len(result), out_size):
        return result

    err_msg = f"invalid {label} size: {len(result)} bytes"
    err_msg += f" instead of {out_size}"
    raise InvalidInputFormat(err_msg)


def hex_from_bytes(value: bytes) -> str:
    "Return the lowercase 0x-prefixed hex-string of the input bytes."
    return "0x" + value.hex()


def hex_from_int(i: int, size: int = 32) -> str:
    "Return the 0x-prefixed, left-zero-padded hex-string of an int."
    return hex_from_bytes(i.to_bytes(size, byteorder="big", signed=False))
