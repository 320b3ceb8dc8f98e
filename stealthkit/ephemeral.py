#!/usr/bin/env python3

# Copyright (C) The stealthkit developers
#
# This file is part of stealthkit. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of stealthkit including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Viewing key node and ephemeral private keys.

The viewing private key is used as seed of a key tree.
Only the node m/5564'/N' is shared with the server,
which derives from it one ephemeral private key per
(chain, nonce) pair along the path

    m/5564'/N' / c0'/c1'/0'/p'/n'

where:

- 5564 is the BIP43 purpose, after the EIP-5564 stealth address number
- c0, c1 split the ENSIP-11 coin type (0x80000000 | chain_id) in its
  first hex digit and the remaining seven, as a hardened index must be
  lower than 0x80000000
- p, n split the nonce: p is the overflow above 0xFFFFFFF
"""

from typing import Optional, Tuple

from stealthkit.alias import HexBytes
from stealthkit.exceptions import InvalidInputFormat, MissingParameter, NonceOutOfRange
from stealthkit.hd.der_path import HARDENED, hardened_path
from stealthkit.hd.hd_node import HDNode
from stealthkit.utils import bytes_from_hex, hex_from_bytes

PURPOSE = 5564

# nonces above MAX_NONCE overflow into the parent nonce
MAX_NONCE = 0xFFFFFFF
# exclusive upper bound of the (parent nonce, nonce) combination
NONCE_LIMIT = 0x7FFFFFFFFFFFFF


def viewing_node(viewing_private_key: HexBytes, node_index: int = 0) -> HDNode:
    """Return the node m/5564'/node_index' of the viewing key tree.

    It must be computed client side:
    only the resulting node is meant to be shared with the server.
    """

    seed = bytes_from_hex(viewing_private_key, 32, "viewing private key")
    if not 0 <= node_index < HARDENED:
        raise InvalidInputFormat(f"invalid node index: {node_index}")
    root = HDNode.from_seed(seed)
    return root.derive(hardened_path(PURPOSE, node_index))


def split_coin_type(coin_type: int) -> Tuple[int, int]:
    "Return the first hex digit and the remaining seven of the coin type."

    if not 0 <= coin_type <= 0xFFFFFFFF:
        raise InvalidInputFormat(f"invalid coin type: {coin_type}")
    return coin_type >> 28, coin_type & 0xFFFFFFF


def coin_type_from_chain_id(chain_id: int) -> int:
    "Return the ENSIP-11 coin type of an EVM chain."

    if not 0 <= chain_id <= 0xFFFFFFFF:
        raise InvalidInputFormat(f"invalid chain id: {chain_id}")
    return chain_id | HARDENED


def split_nonce(nonce: int) -> Tuple[int, int]:
    "Return the (parent nonce, nonce) pair of a nonce."

    if not 0 <= nonce < NONCE_LIMIT:
        err_msg = f"invalid nonce: {nonce} not in 0..{hex(NONCE_LIMIT - 1)}"
        raise NonceOutOfRange(err_msg)
    if nonce > MAX_NONCE:
        return divmod(nonce, MAX_NONCE + 1)
    return 0, nonce


def ephemeral_private_key(
    node: HDNode,
    nonce: int,
    chain_id: Optional[int] = None,
    coin_type: Optional[int] = None,
) -> str:
    """Return the ephemeral private key for a nonce on a chain.

    Exactly one among chain_id and coin_type must be provided;
    the chain id is converted to its ENSIP-11 coin type.
    """

    if coin_type is None:
        if chain_id is None:
            raise MissingParameter("either chain_id or coin_type must be provided")
        coin_type = coin_type_from_chain_id(chain_id)
    elif chain_id is not None:
        err_msg = "ambiguous parameters: provide chain_id or coin_type, not both"
        raise MissingParameter(err_msg)

    part1, part2 = split_coin_type(coin_type)
    parent_nonce, nonce = split_nonce(nonce)

    child = node.derive(hardened_path(part1, part2, 0, parent_nonce, nonce))
    return hex_from_bytes(child.private_key)
