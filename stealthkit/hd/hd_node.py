#!/usr/bin/env python3

# Copyright (C) The stealthkit developers
#
# This file is part of stealthkit. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of stealthkit including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Hierarchical deterministic key node.

A hierarchical deterministic key tree is derived from a single root,
allowing for selective sharing of key pair sub-trees.

The derivation follows the BIP32 bitcoin standard
https://github.com/bitcoin/bips/blob/master/bip-0032.mediawiki,
restricted to private key nodes: a node is an immutable value,
derivation returns a new node and never touches the parent.
"""

import hmac
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Tuple, Type, TypeVar

from stealthkit.alias import Octets
from stealthkit.ecc.curve import mult, secp256k1
from stealthkit.ecc.sec_point import bytes_from_point, point_from_octets
from stealthkit.exceptions import DerivationFailure, StealthKitValueError
from stealthkit.hashes import hash160
from stealthkit.hd.der_path import HARDENED, DerPath, indexes_from_der_path
from stealthkit.utils import bytes_from_octets

ec = secp256k1

# BIP32 mainnet xprv/xpub versions
VERSIONS: Tuple[int, int] = (0x0488ADE4, 0x0488B21E)

_HDNode = TypeVar("_HDNode", bound="HDNode")


@dataclass(frozen=True)
class HDNode:
    private_key: bytes
    # compressed SEC serialization
    public_key: bytes
    chain_code: bytes
    depth: int
    # index is an int, not bytes, to avoid any byteorder ambiguity
    index: int
    parent_fingerprint: int
    versions: Tuple[int, int] = VERSIONS

    def __post_init__(self) -> None:
        self.assert_valid()

    @property
    def prv_key_int(self) -> int:
        return int.from_bytes(self.private_key, byteorder="big", signed=False)

    @property
    def fingerprint(self) -> int:
        "Return the node fingerprint, i.e. the parent fingerprint of its children."
        return int.from_bytes(hash160(self.public_key)[:4], byteorder="big")

    def assert_valid(self) -> None:

        for key, size in (("private_key", 32), ("public_key", 33), ("chain_code", 32)):
            value = getattr(self, key)
            if len(value) != size:
                err_msg = f"invalid {key} length: "
                err_msg += f"{len(value)} bytes"
                err_msg += f" instead of {size}"
                raise StealthKitValueError(err_msg)

        if not 0 < self.prv_key_int < ec.n:
            raise StealthKitValueError("invalid private key not in 1..n-1")
        if self.public_key[0] not in (2, 3):
            err_msg = "invalid public key prefix not in (0x02, 0x03): "
            err_msg += f"0x{self.public_key[:1].hex()}"
            raise StealthKitValueError(err_msg)

        if not 0 <= self.index <= 0xFFFFFFFF:
            raise StealthKitValueError(f"invalid index: {self.index}")
        if not 0 <= self.depth <= 255:
            raise StealthKitValueError(f"invalid depth: {self.depth}")
        if not 0 <= self.parent_fingerprint <= 0xFFFFFFFF:
            err_msg = f"invalid parent fingerprint: {self.parent_fingerprint}"
            raise StealthKitValueError(err_msg)

        if self.depth == 0:
            if self.parent_fingerprint != 0:
                err_msg = "zero depth with non-zero parent fingerprint: "
                err_msg += f"{self.parent_fingerprint}"
                raise StealthKitValueError(err_msg)
            if self.index != 0:
                err_msg = f"zero depth with non-zero index: {self.index}"
                raise StealthKitValueError(err_msg)

    @classmethod
    def from_seed(
        cls: Type[_HDNode], seed: Octets, versions: Tuple[int, int] = VERSIONS
    ) -> _HDNode:
        """Return the root node from seed."""

        seed = bytes_from_octets(seed)
        bitlenght = len(seed) * 8
        if bitlenght < 128:
            raise StealthKitValueError(f"too few bits for seed: {bitlenght}")
        if bitlenght > 512:
            raise StealthKitValueError(f"too many bits for seed: {bitlenght}")
        hmac_ = hmac.new(b"Bitcoin seed", seed, "sha512").digest()

        q = int.from_bytes(hmac_[:32], byteorder="big", signed=False)
        # edge case that cannot be reproduced in the test suite
        if not 0 < q < ec.n:
            raise DerivationFailure("invalid root private key")  # pragma: no cover

        return cls(
            private_key=hmac_[:32],
            public_key=bytes_from_point(mult(q)),
            chain_code=hmac_[32:],
            depth=0,
            index=0,
            parent_fingerprint=0,
            versions=versions,
        )

    def derive_child(self: _HDNode, index: int) -> _HDNode:
        """Return the child node at index.

        Hardened derivation (index >= 0x80000000) commits to the
        private key, normal derivation to the compressed public key.
        """

        if not 0 <= index <= 0xFFFFFFFF:
            raise StealthKitValueError(f"invalid index: {index}")
        if self.depth == 255:
            raise StealthKitValueError("depth greater than 255")

        index_bytes = index.to_bytes(4, byteorder="big", signed=False)
        if index >= HARDENED:  # hardened derivation
            data = b"\x00" + self.private_key + index_bytes
        else:  # normal derivation
            data = self.public_key + index_bytes
        hmac_ = hmac.new(self.chain_code, data, "sha512").digest()

        offset = int.from_bytes(hmac_[:32], byteorder="big", signed=False)
        q = (self.prv_key_int + offset) % ec.n
        # edge cases that cannot be reproduced in the test suite
        if offset >= ec.n or q == 0:
            err_msg = f"invalid child at index {index}"  # pragma: no cover
            raise DerivationFailure(err_msg)  # pragma: no cover

        return type(self)(
            private_key=q.to_bytes(32, byteorder="big", signed=False),
            public_key=bytes_from_point(mult(q)),
            chain_code=hmac_[32:],
            depth=self.depth + 1,
            index=index,
            parent_fingerprint=self.fingerprint,
            versions=self.versions,
        )

    def derive(self: _HDNode, der_path: DerPath) -> _HDNode:
        """Return the node at the derivation path, relative to this node."""

        indexes = indexes_from_der_path(der_path)

        final_depth = self.depth + len(indexes)
        if final_depth > 255:
            err_msg = f"final depth greater than 255: {final_depth}"
            raise StealthKitValueError(err_msg)

        node = self
        for index in indexes:
            node = node.derive_child(index)
        return node

    def to_dict(self) -> Dict[str, Any]:

        return {
            "private_key": self.private_key.hex(),
            "public_key": self.public_key.hex(),
            "chain_code": self.chain_code.hex(),
            "depth": self.depth,
            "index": self.index,
            "parent_fingerprint": self.parent_fingerprint,
            "versions": {"private": self.versions[0], "public": self.versions[1]},
        }

    @classmethod
    def from_dict(cls: Type[_HDNode], dict_: Mapping[str, Any]) -> _HDNode:

        private_key = bytes_from_octets(dict_["private_key"], 32)
        public_key = bytes_from_octets(dict_["public_key"], 33)
        q = int.from_bytes(private_key, byteorder="big", signed=False)
        if not 0 < q < ec.n:
            raise StealthKitValueError("invalid private key not in 1..n-1")
        if point_from_octets(public_key) != mult(q):
            raise StealthKitValueError("public key does not match private key")

        versions = dict_.get("versions", {})
        return cls(
            private_key=private_key,
            public_key=public_key,
            chain_code=bytes_from_octets(dict_["chain_code"], 32),
            depth=int(dict_["depth"]),
            index=int(dict_["index"]),
            parent_fingerprint=int(dict_["parent_fingerprint"]),
            versions=(
                int(versions.get("private", VERSIONS[0])),
                int(versions.get("public", VERSIONS[1])),
            ),
        )
