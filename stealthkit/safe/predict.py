#!/usr/bin/env python3

# Copyright (C) The stealthkit developers
#
# This file is part of stealthkit. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of stealthkit including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Safe address prediction.

A Safe is a proxy deployed by the proxy factory with

    createProxyWithNonce(singleton, initializer, salt_nonce)

i.e. with CREATE2, where:

- salt = keccak256(uint256(keccak256(initializer)) || uint256(salt_nonce))
- init code = proxy creation code || uint256(singleton)

so its address is known before deployment. Two strategies are available,
resulting in the very same address:

- Create2Predictor computes the CREATE2 address offline,
  given the proxy creation code
- SimulationPredictor asks a node to simulate the factory call
  and reads the returned proxy address

There is no fallback from a strategy to the other one.
"""

import logging
from typing import Optional, Sequence, Tuple, Union

from stealthkit.address import ADDRESS_SIZE, ZERO_ADDRESS, bytes_from_address
from stealthkit.alias import HexBytes
from stealthkit.exceptions import NetworkError
from stealthkit.hashes import keccak256
from stealthkit.safe.abi import encode_abi, encode_function_call
from stealthkit.safe.deployments import DEFAULT_VERSION
from stealthkit.safe.deployments import proxy_creation_code as known_creation_code
from stealthkit.safe.initializer import (
    InitializerExtraFields,
    SafeContracts,
    encode_setup,
    resolve_contracts,
    setup_params,
)
from stealthkit.safe.rpc import ChainClient, JsonRpcClient
from stealthkit.utils import bytes_from_hex, hex_from_bytes

LOGGER = logging.getLogger(__name__)

# the salt nonce used for stealth Safes
SALT_NONCE = 0


def proxy_salt(initializer: bytes, salt_nonce: int = SALT_NONCE) -> bytes:
    "Return the CREATE2 salt used by the factory."
    initializer_hash = keccak256(initializer)
    return keccak256(encode_abi(["bytes32", "uint256"], [initializer_hash, salt_nonce]))


def create2_address(factory: HexBytes, salt: HexBytes, init_code: HexBytes) -> str:
    """Return the lowercase CREATE2 contract address.

    https://eips.ethereum.org/EIPS/eip-1014
    """

    data = b"".join(
        [
            b"\xff",
            bytes_from_address(factory),
            bytes_from_hex(salt, 32, "salt"),
            keccak256(bytes_from_hex(init_code, label="init code")),
        ]
    )
    return hex_from_bytes(keccak256(data)[-ADDRESS_SIZE:])


def _prepare(
    stealth_addresses: Sequence[str],
    threshold: int,
    chain_id: Optional[int],
    version: str,
    use_default_address: bool,
    extra: Optional[InitializerExtraFields],
) -> Tuple[SafeContracts, bytes]:

    contracts = resolve_contracts(version, chain_id, use_default_address)
    params = setup_params(stealth_addresses, threshold, contracts, extra)
    return contracts, encode_setup(params, contracts.setup_signature)


class Create2Predictor:
    """Offline prediction of the Safe address.

    Without an explicit proxy creation code, the one known
    for the Safe version is used.
    """

    def __init__(self, proxy_creation_code: Optional[HexBytes] = None) -> None:
        if proxy_creation_code is None:
            self.proxy_creation_code = None
        else:
            self.proxy_creation_code = bytes_from_hex(
                proxy_creation_code, label="proxy creation code"
            )

    def predict(
        self,
        stealth_addresses: Sequence[str],
        threshold: int,
        chain_id: Optional[int] = None,
        version: str = DEFAULT_VERSION,
        use_default_address: bool = False,
        extra: Optional[InitializerExtraFields] = None,
    ) -> str:

        contracts, initializer = _prepare(
            stealth_addresses, threshold, chain_id, version, use_default_address, extra
        )
        code = self.proxy_creation_code
        if code is None:
            code = known_creation_code(version)
        init_code = code + encode_abi(["address"], [contracts.singleton])
        address = create2_address(
            contracts.proxy_factory, proxy_salt(initializer), init_code
        )
        LOGGER.debug("CREATE2 Safe %s on chain %s", address, contracts.chain_id)
        return address


class SimulationPredictor:
    """Prediction of the Safe address by simulating its creation.

    The factory call is simulated from the zero address,
    with zero gas price: the returned data ends with the proxy address.
    """

    def __init__(self, client: ChainClient) -> None:
        self.client = client

    def predict(
        self,
        stealth_addresses: Sequence[str],
        threshold: int,
        chain_id: Optional[int] = None,
        version: str = DEFAULT_VERSION,
        use_default_address: bool = False,
        extra: Optional[InitializerExtraFields] = None,
    ) -> str:

        contracts, initializer = _prepare(
            stealth_addresses, threshold, chain_id, version, use_default_address, extra
        )
        data = encode_function_call(
            contracts.create_proxy_signature,
            [contracts.singleton, initializer, SALT_NONCE],
        )
        LOGGER.debug("simulating Safe creation at %s", contracts.proxy_factory)
        result = self.client.call(
            contracts.proxy_factory, data, from_address=ZERO_ADDRESS, gas_price=0
        )
        if len(result) < ADDRESS_SIZE:
            err_msg = f"invalid simulation result: {len(result)} bytes"
            raise NetworkError(err_msg)
        address = hex_from_bytes(result[-ADDRESS_SIZE:])
        LOGGER.debug("simulated Safe %s on chain %s", address, contracts.chain_id)
        return address


def predict_safe_address_with_client(
    client: Union[ChainClient, str],
    stealth_addresses: Sequence[str],
    threshold: int,
    chain_id: Optional[int] = None,
    version: str = DEFAULT_VERSION,
    use_default_address: bool = False,
    extra: Optional[InitializerExtraFields] = None,
) -> str:
    """Return the Safe address as simulated by a chain client.

    The client can also be a JSON-RPC endpoint URL.
    """

    if isinstance(client, str):
        with JsonRpcClient(client) as rpc_client:
            return SimulationPredictor(rpc_client).predict(
                stealth_addresses,
                threshold,
                chain_id,
                version,
                use_default_address,
                extra,
            )
    return SimulationPredictor(client).predict(
        stealth_addresses, threshold, chain_id, version, use_default_address, extra
    )


def predict_safe_address_with_bytecode(
    stealth_addresses: Sequence[str],
    threshold: int,
    proxy_creation_code: Optional[HexBytes] = None,
    chain_id: Optional[int] = None,
    version: str = DEFAULT_VERSION,
    use_default_address: bool = False,
    extra: Optional[InitializerExtraFields] = None,
) -> str:
    "Return the Safe address as computed with CREATE2."

    return Create2Predictor(proxy_creation_code).predict(
        stealth_addresses, threshold, chain_id, version, use_default_address, extra
    )
