#!/usr/bin/env python3

# Copyright (C) The stealthkit developers
#
# This file is part of stealthkit. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of stealthkit including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Minimal contract ABI encoding.

https://docs.soliditylang.org/en/latest/abi-spec.html

Supported types are address, uintN, bool, bytesN, bytes, string,
and dynamic arrays T[] of any supported type.

A function call is the 4-bytes selector, i.e. the first 4 bytes of
the keccak256 hash of the canonical function signature, followed by
the encoded arguments: a head of 32-bytes words, where dynamic
arguments are replaced by the offset of their tail encoding.
"""

import re
from typing import Any, List, Sequence

from stealthkit.address import bytes_from_address
from stealthkit.exceptions import InvalidInputFormat
from stealthkit.hashes import keccak256
from stealthkit.utils import bytes_from_hex

_WORD = 32

_ARRAY = re.compile(r"^(.+)\[\]$")
_UINT = re.compile(r"^uint(\d*)$")
_BYTES_N = re.compile(r"^bytes(\d+)$")
_SIGNATURE = re.compile(r"^([A-Za-z_$][A-Za-z0-9_$]*)\((.*)\)$")


def _uint_word(value: int, bits: int = 256) -> bytes:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidInputFormat(f"not an integer: {value!r}")
    if not 0 <= value < 1 << bits:
        raise InvalidInputFormat(f"uint{bits} out of range: {value}")
    return value.to_bytes(_WORD, byteorder="big", signed=False)


def _pad_right(data: bytes) -> bytes:
    return data + b"\x00" * (-len(data) % _WORD)


def is_dynamic(type_: str) -> bool:
    return type_ in ("bytes", "string") or _ARRAY.match(type_) is not None


def _encode_static(type_: str, value: Any) -> bytes:

    if type_ == "address":
        return bytes_from_address(value).rjust(_WORD, b"\x00")

    if type_ == "bool":
        if not isinstance(value, bool):
            raise InvalidInputFormat(f"not a bool: {value!r}")
        return _uint_word(int(value))

    m = _UINT.match(type_)
    if m:
        bits = int(m.group(1) or 256)
        if bits % 8 or not 8 <= bits <= 256:
            raise InvalidInputFormat(f"invalid type: {type_}")
        if isinstance(value, str):
            # decimal string, to avoid any loss of precision upstream
            try:
                value = int(value)
            except ValueError as e:
                raise InvalidInputFormat(f"not an integer: {value!r}") from e
        return _uint_word(value, bits)

    m = _BYTES_N.match(type_)
    if m:
        size = int(m.group(1))
        if not 1 <= size <= _WORD:
            raise InvalidInputFormat(f"invalid type: {type_}")
        return _pad_right(bytes_from_hex(value, size, type_))

    raise InvalidInputFormat(f"unsupported type: {type_}")


def _encode(type_: str, value: Any) -> bytes:

    if type_ in ("bytes", "string"):
        if type_ == "string":
            data = value.encode("utf-8")
        else:
            data = bytes_from_hex(value, label="bytes")
        return _uint_word(len(data)) + _pad_right(data)

    m = _ARRAY.match(type_)
    if m:
        if isinstance(value, (str, bytes)):
            raise InvalidInputFormat(f"not a sequence for {type_}: {value!r}")
        items = list(value)
        return _uint_word(len(items)) + encode_abi([m.group(1)] * len(items), items)

    return _encode_static(type_, value)


def encode_abi(types: Sequence[str], args: Sequence[Any]) -> bytes:
    "Return the ABI encoding of the arguments as a tuple of the given types."

    if len(types) != len(args):
        err_msg = f"{len(args)} arguments for {len(types)} types"
        raise InvalidInputFormat(err_msg)

    heads: List[bytes] = []
    tails: List[bytes] = []
    offset = _WORD * len(types)
    for type_, arg in zip(types, args):
        encoded = _encode(type_, arg)
        if is_dynamic(type_):
            heads.append(_uint_word(offset))
            tails.append(encoded)
            offset += len(encoded)
        else:
            heads.append(encoded)
    return b"".join(heads + tails)


def parse_signature(signature: str) -> List[str]:
    "Return the argument types of a canonical function signature."

    m = _SIGNATURE.match(signature.replace(" ", ""))
    if not m:
        raise InvalidInputFormat(f"invalid function signature: {signature!r}")
    args = m.group(2)
    return args.split(",") if args else []


def function_selector(signature: str) -> bytes:
    "Return the 4-bytes selector of a canonical function signature."

    parse_signature(signature)
    return keccak256(signature.replace(" ", "").encode("ascii"))[:4]


def encode_function_call(signature: str, args: Sequence[Any]) -> bytes:
    "Return the call data of a function, i.e. selector and encoded arguments."

    types = parse_signature(signature)
    return function_selector(signature) + encode_abi(types, args)
