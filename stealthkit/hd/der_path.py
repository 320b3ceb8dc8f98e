#!/usr/bin/env python3

# Copyright (C) The stealthkit developers
#
# This file is part of stealthkit. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of stealthkit including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Hierarchical derivation path.

A derivation path can be represented as:

- "m/5564'/0'" or "5564h/0H" string
- sequence of integer indexes (even a single int)
"""

from typing import List, Sequence, Union

from stealthkit.exceptions import StealthKitValueError

# default hardening symbol among the possible ones: "h", "H", "'"
_HARDENING = "'"

HARDENED = 0x80000000


def int_from_index_str(s: str) -> int:

    s = s.strip().lower()
    hardened = False
    if s and s[-1] in ("'", "h"):
        s = s[:-1]
        hardened = True

    try:
        index = int(s)
    except ValueError as e:
        raise StealthKitValueError(f"invalid index: {s!r}") from e
    if not 0 <= index < HARDENED:
        raise StealthKitValueError(f"invalid index: {index}")
    return index + (HARDENED if hardened else 0)


def str_from_index_int(i: int, hardening: str = _HARDENING) -> str:

    if hardening not in ("'", "h", "H"):
        raise StealthKitValueError(f"invalid hardening symbol: {hardening}")
    if not 0 <= i <= 0xFFFFFFFF:
        raise StealthKitValueError(f"invalid index: {i}")
    if i < HARDENED:
        return str(i)
    return str(i - HARDENED) + hardening


def _indexes_from_der_path_str(der_path: str, skip_m: bool = True) -> List[int]:

    steps = [x.strip().lower() for x in der_path.split("/")]
    if skip_m and steps[0] == "m":
        steps = steps[1:]

    indexes = [int_from_index_str(s) for s in steps if s != ""]

    if len(indexes) > 255:
        err_msg = f"depth greater than 255: {len(indexes)}"
        raise StealthKitValueError(err_msg)
    return indexes


DerPath = Union[str, Sequence[int], int]


def indexes_from_der_path(der_path: DerPath) -> List[int]:

    if isinstance(der_path, str):
        return _indexes_from_der_path_str(der_path)

    if isinstance(der_path, int):
        return [der_path]

    # Iterable[int]
    return [int(i) for i in der_path]


def str_from_der_path(der_path: DerPath, hardening: str = _HARDENING) -> str:
    indexes = indexes_from_der_path(der_path)
    result = "/".join(str_from_index_int(i, hardening) for i in indexes)
    return "m" + ("/" + result if result else "")


def hardened_path(*indexes: int) -> List[int]:
    "Return the hardened version of the input (unhardened) indexes."
    for i in indexes:
        if not 0 <= i < HARDENED:
            raise StealthKitValueError(f"invalid index: {i}")
    return [i + HARDENED for i in indexes]
