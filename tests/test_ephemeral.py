#!/usr/bin/env python3

# Copyright (C) The stealthkit developers
#
# This file is part of stealthkit. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of stealthkit including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"Tests for the `stealthkit.ephemeral` module."

import secrets

import pytest

from stealthkit.ecc.curve import secp256k1
from stealthkit.ephemeral import (
    MAX_NONCE,
    NONCE_LIMIT,
    coin_type_from_chain_id,
    ephemeral_private_key,
    split_coin_type,
    split_nonce,
    viewing_node,
)
from stealthkit.exceptions import (
    InvalidInputFormat,
    MissingParameter,
    NonceOutOfRange,
)
from stealthkit.hd.der_path import HARDENED
from stealthkit.utils import bytes_from_hex, is_hex

VIEWING_PRV_KEY = "0xe377059c0f7d594f953672d99706109ef69b9044a6d009daf6e3066e179dd42d"


def test_viewing_node() -> None:

    node = viewing_node(VIEWING_PRV_KEY)
    assert node.depth == 2
    assert node.index == HARDENED
    assert node.parent_fingerprint == 105519527
    assert node.private_key.hex() == (
        "ff99fb02c84beb1e4937e4c3624b9a8b4011feaaf84483a4c2ca6c64e0fcfe42"
    )
    assert viewing_node(bytes_from_hex(VIEWING_PRV_KEY)) == node
    assert viewing_node(VIEWING_PRV_KEY, 0) == node

    node_1 = viewing_node(VIEWING_PRV_KEY, 1)
    assert node_1.index == HARDENED + 1
    assert node_1.parent_fingerprint == node.parent_fingerprint
    assert node_1.private_key != node.private_key

    with pytest.raises(InvalidInputFormat, match="invalid viewing private key: "):
        viewing_node(VIEWING_PRV_KEY[2:])
    with pytest.raises(InvalidInputFormat, match="invalid viewing private key size"):
        viewing_node(VIEWING_PRV_KEY[:-2])
    with pytest.raises(InvalidInputFormat, match="invalid node index: "):
        viewing_node(VIEWING_PRV_KEY, -1)
    with pytest.raises(InvalidInputFormat, match="invalid node index: "):
        viewing_node(VIEWING_PRV_KEY, HARDENED)


def test_split_coin_type() -> None:

    assert coin_type_from_chain_id(10) == 2147483658
    assert coin_type_from_chain_id(0) == 0x80000000
    assert split_coin_type(2147483658) == (8, 10)
    assert split_coin_type(0x80000000) == (8, 0)
    assert split_coin_type(0x8ABCDEF1) == (8, 0xABCDEF1)
    assert split_coin_type(60) == (0, 60)

    with pytest.raises(InvalidInputFormat, match="invalid coin type: "):
        split_coin_type(-1)
    with pytest.raises(InvalidInputFormat, match="invalid coin type: "):
        split_coin_type(0x100000000)
    with pytest.raises(InvalidInputFormat, match="invalid chain id: "):
        coin_type_from_chain_id(-1)


def test_split_nonce() -> None:

    assert split_nonce(0) == (0, 0)
    assert split_nonce(MAX_NONCE) == (0, MAX_NONCE)
    assert split_nonce(MAX_NONCE + 1) == (1, 0)
    assert split_nonce(2147483649) == (8, 1)
    assert split_nonce(NONCE_LIMIT - 1) == (0x7FFFFFF, MAX_NONCE - 1)

    for _ in range(10):
        nonce = secrets.randbelow(NONCE_LIMIT)
        parent_nonce, child_nonce = split_nonce(nonce)
        assert 0 <= child_nonce <= MAX_NONCE
        assert parent_nonce < HARDENED
        assert parent_nonce * (MAX_NONCE + 1) + child_nonce == nonce

    with pytest.raises(NonceOutOfRange, match="invalid nonce: "):
        split_nonce(NONCE_LIMIT)
    with pytest.raises(NonceOutOfRange, match="invalid nonce: "):
        split_nonce(-1)


def test_ephemeral_private_key() -> None:

    node = viewing_node(VIEWING_PRV_KEY)
    key_0 = "0xe0b00bde074552abedf968bdbfbcaab4d7a2c85a2251ef7cd6c29df9d9cf13b7"
    key_1 = "0x51bbb418b9c5743db6ea0419002b7da4bf3e0232adde05fc2d23334b388a726e"

    assert ephemeral_private_key(node, 0, chain_id=10) == key_0
    assert ephemeral_private_key(node, 2147483649, chain_id=10) == key_1
    assert ephemeral_private_key(node, 0, coin_type=2147483658) == key_0
    assert ephemeral_private_key(node, 2147483649, coin_type=2147483658) == key_1

    assert ephemeral_private_key(node, 1, chain_id=10) not in (key_0, key_1)
    assert ephemeral_private_key(node, 0, chain_id=1) != key_0
    node_1 = viewing_node(VIEWING_PRV_KEY, 1)
    assert ephemeral_private_key(node_1, 0, chain_id=10) != key_0


def test_ephemeral_private_key_random() -> None:

    for _ in range(5):
        node = viewing_node("0x" + secrets.token_hex(32), secrets.randbelow(100))
        nonce = secrets.randbelow(NONCE_LIMIT)
        chain_id = secrets.randbelow(100_000)
        key = ephemeral_private_key(node, nonce, chain_id=chain_id)
        assert is_hex(key)
        assert len(key) == 66
        assert 0 < int(key, 16) < secp256k1.n
        coin_type = coin_type_from_chain_id(chain_id)
        assert ephemeral_private_key(node, nonce, coin_type=coin_type) == key


def test_ephemeral_private_key_errors() -> None:

    node = viewing_node(VIEWING_PRV_KEY)

    err_msg = "either chain_id or coin_type must be provided"
    with pytest.raises(MissingParameter, match=err_msg):
        ephemeral_private_key(node, 0)
    with pytest.raises(MissingParameter, match="ambiguous parameters: "):
        ephemeral_private_key(node, 0, chain_id=10, coin_type=2147483658)
    with pytest.raises(NonceOutOfRange, match="invalid nonce: "):
        ephemeral_private_key(node, NONCE_LIMIT, chain_id=10)
    with pytest.raises(NonceOutOfRange, match="invalid nonce: "):
        ephemeral_private_key(node, -1, chain_id=10)
