#!/usr/bin/env python3

# Copyright (C) The stealthkit developers
#
# This file is part of stealthkit. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of stealthkit including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Safe initializer, i.e. the setup call executed at Safe creation.

The Safe setup function is

    setup(
        address[] owners,
        uint256 threshold,
        address to,
        bytes data,
        address fallbackHandler,
        address paymentToken,
        uint256 payment,
        address paymentReceiver
    )

Its encoded call data is the initializer passed to the proxy factory:
as it determines the CREATE2 salt, any change of the setup parameters
results in a different Safe address.
"""

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from stealthkit.address import ZERO_ADDRESS, bytes_from_address
from stealthkit.alias import HexBytes
from stealthkit.exceptions import InvalidInputFormat, MissingParameter
from stealthkit.safe.abi import encode_function_call
from stealthkit.safe.deployments import DEFAULT_VERSION, get_deployment_by_role
from stealthkit.utils import bytes_from_hex, hex_from_bytes


@dataclass(frozen=True)
class InitializerExtraFields:
    """Optional setup fields; None means the default value.

    For their meaning see the Safe setup function.
    """

    to: Optional[str] = None
    data: Optional[HexBytes] = None
    fallback_handler: Optional[str] = None
    payment_token: Optional[str] = None
    payment: Optional[int] = None
    payment_receiver: Optional[str] = None


@dataclass(frozen=True)
class SafeSetupParams:
    owners: Tuple[str, ...]
    threshold: int
    to: str = ZERO_ADDRESS
    data: bytes = b""
    fallback_handler: str = ZERO_ADDRESS
    payment_token: str = ZERO_ADDRESS
    payment: int = 0
    payment_receiver: str = ZERO_ADDRESS

    def __post_init__(self) -> None:

        owners = tuple(_lower_address(owner) for owner in self.owners)
        object.__setattr__(self, "owners", owners)
        for key in ("to", "fallback_handler", "payment_token", "payment_receiver"):
            object.__setattr__(self, key, _lower_address(getattr(self, key)))
        object.__setattr__(self, "data", bytes_from_hex(self.data, label="data"))
        try:
            payment = int(self.payment)
        except (TypeError, ValueError) as e:
            raise InvalidInputFormat(f"invalid payment: {self.payment!r}") from e
        object.__setattr__(self, "payment", payment)

        self.assert_valid()

    def assert_valid(self) -> None:

        if not self.owners:
            raise InvalidInputFormat("no owners")
        if len(set(self.owners)) != len(self.owners):
            raise InvalidInputFormat("duplicate owners")
        if ZERO_ADDRESS in self.owners:
            raise InvalidInputFormat("zero address owner")
        if isinstance(self.threshold, bool) or not isinstance(self.threshold, int):
            raise InvalidInputFormat(f"invalid threshold: {self.threshold!r}")
        if not 1 <= self.threshold <= len(self.owners):
            err_msg = f"invalid threshold: {self.threshold} "
            err_msg += f"not in 1..{len(self.owners)}"
            raise InvalidInputFormat(err_msg)
        if not 0 <= self.payment < 1 << 256:
            raise InvalidInputFormat(f"invalid payment: {self.payment}")

    def args(self) -> list:
        return [
            list(self.owners),
            self.threshold,
            self.to,
            self.data,
            self.fallback_handler,
            self.payment_token,
            self.payment,
            self.payment_receiver,
        ]


def _lower_address(address: HexBytes) -> str:
    return hex_from_bytes(bytes_from_address(address))


@dataclass(frozen=True)
class SafeContracts:
    "The Safe contracts resolved for a version on a chain."

    version: str
    chain_id: int
    singleton: str
    proxy_factory: str
    fallback_handler: str
    setup_signature: str
    create_proxy_signature: str


def resolve_contracts(
    version: str = DEFAULT_VERSION,
    chain_id: Optional[int] = None,
    use_default_address: bool = False,
) -> SafeContracts:
    """Return the Safe contracts of a version on a chain.

    With default addresses the contracts are chain independent:
    mainnet (chain_id 1) is then used whatever chain_id is provided.
    """

    if use_default_address:
        chain_id = 1
    elif chain_id is None:
        raise MissingParameter("chain_id is required when not using default address")

    singleton = get_deployment_by_role("singleton", version)
    factory = get_deployment_by_role("proxy_factory", version)
    handler = get_deployment_by_role("fallback_handler", version)

    return SafeContracts(
        version=version,
        chain_id=chain_id,
        singleton=singleton.address(chain_id, use_default_address),
        proxy_factory=factory.address(chain_id, use_default_address),
        fallback_handler=handler.address(chain_id, use_default_address),
        setup_signature=singleton.function_signature("setup"),
        create_proxy_signature=factory.function_signature("createProxyWithNonce"),
    )


def setup_params(
    owners: Sequence[str],
    threshold: int,
    contracts: SafeContracts,
    extra: Optional[InitializerExtraFields] = None,
) -> SafeSetupParams:
    "Return the setup parameters, defaulting to the resolved fallback handler."

    extra = extra or InitializerExtraFields()
    return SafeSetupParams(
        owners=tuple(owners),
        threshold=threshold,
        to=extra.to or ZERO_ADDRESS,
        data=extra.data or b"",
        fallback_handler=extra.fallback_handler or contracts.fallback_handler,
        payment_token=extra.payment_token or ZERO_ADDRESS,
        payment=extra.payment or 0,
        payment_receiver=extra.payment_receiver or ZERO_ADDRESS,
    )


def encode_setup(
    params: SafeSetupParams, setup_signature: Optional[str] = None
) -> bytes:
    "Return the initializer, i.e. the setup call data."

    if setup_signature is None:
        singleton = get_deployment_by_role("singleton")
        setup_signature = singleton.function_signature("setup")
    return encode_function_call(setup_signature, params.args())
