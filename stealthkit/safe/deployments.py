#!/usr/bin/env python3

# Copyright (C) The stealthkit developers
#
# This file is part of stealthkit. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of stealthkit including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Safe contracts deployment registry.

Released Safe contracts are deployed at a default (canonical) address
on most chains; a chain may also have its own address.
The registry is loaded at import time from package JSON data.

Each Safe version has three contracts involved in a Safe creation,
here identified by their role:

- singleton: the Safe logic contract the proxy delegates to
- proxy_factory: the factory deploying proxies with CREATE2
- fallback_handler: the default fallback handler set up in the Safe
"""

import json
from dataclasses import dataclass
from os import path
from typing import Any, Dict, Mapping, Optional, Tuple, Type, TypeVar

from stealthkit.address import bytes_from_address
from stealthkit.exceptions import DeploymentNotFound, MissingParameter
from stealthkit.utils import bytes_from_hex, hex_from_bytes

DEFAULT_VERSION = "1.3.0"

_Deployment = TypeVar("_Deployment", bound="Deployment")


@dataclass(frozen=True)
class Deployment:
    contract_name: str
    version: str
    default_address: str
    network_addresses: Mapping[int, str]
    # function name: canonical function signature
    abi: Mapping[str, str]
    proxy_creation_code: Optional[bytes] = None

    def __post_init__(self) -> None:

        object.__setattr__(
            self, "default_address", _normalized_address(self.default_address)
        )
        object.__setattr__(
            self,
            "network_addresses",
            {
                int(chain_id): _normalized_address(address)
                for chain_id, address in self.network_addresses.items()
            },
        )
        object.__setattr__(self, "abi", dict(self.abi))
        if self.proxy_creation_code is not None:
            code = bytes_from_hex(self.proxy_creation_code, label="creation code")
            object.__setattr__(self, "proxy_creation_code", code)

    def address(
        self, chain_id: Optional[int] = None, use_default_address: bool = False
    ) -> str:
        """Return the contract address on a chain.

        The default address is chain independent.
        """

        if use_default_address:
            return self.default_address
        if chain_id is None:
            raise MissingParameter("chain_id is required without default address")
        try:
            return self.network_addresses[chain_id]
        except KeyError as e:
            err_msg = f"{self.contract_name} {self.version} "
            err_msg += f"not deployed on chain {chain_id}"
            raise DeploymentNotFound(err_msg) from e

    def function_signature(self, function_name: str) -> str:
        try:
            return self.abi[function_name]
        except KeyError as e:
            err_msg = f"unknown function {function_name} "
            err_msg += f"for {self.contract_name} {self.version}"
            raise DeploymentNotFound(err_msg) from e

    def to_dict(self) -> Dict[str, Any]:

        dict_: Dict[str, Any] = {
            "contract_name": self.contract_name,
            "version": self.version,
            "default_address": self.default_address,
            "network_addresses": {
                str(chain_id): address
                for chain_id, address in self.network_addresses.items()
            },
            "abi": dict(self.abi),
        }
        if self.proxy_creation_code is not None:
            dict_["proxy_creation_code"] = hex_from_bytes(self.proxy_creation_code)
        return dict_

    @classmethod
    def from_dict(cls: Type[_Deployment], dict_: Mapping[str, Any]) -> _Deployment:

        return cls(
            dict_["contract_name"],
            dict_["version"],
            dict_["default_address"],
            dict_["network_addresses"],
            dict_["abi"],
            dict_.get("proxy_creation_code"),
        )


def _normalized_address(address: str) -> str:
    return hex_from_bytes(bytes_from_address(address))


DEPLOYMENTS: Dict[Tuple[str, str], Deployment] = {}
# version: {role: contract name}
ROLES: Dict[str, Dict[str, str]] = {}
datadir = path.join(path.dirname(__file__), "..", "_data")
with open(path.join(datadir, "safe_deployments.json"), "r", encoding="ascii") as f:
    _data = json.load(f)
    for _dict in _data["deployments"]:
        _deployment = Deployment.from_dict(_dict)
        DEPLOYMENTS[(_deployment.contract_name, _deployment.version)] = _deployment
    ROLES.update(_data["roles"])

SUPPORTED_VERSIONS = tuple(ROLES)


def get_deployment(
    contract_name: str,
    version: str = DEFAULT_VERSION,
    chain_id: Optional[int] = None,
    use_default_address: bool = False,
) -> Deployment:
    """Return the deployment of a contract.

    When chain_id is provided (and the default address is not used)
    the contract must be deployed on that chain.
    """

    try:
        deployment = DEPLOYMENTS[(contract_name, version)]
    except KeyError as e:
        err_msg = f"unknown contract: {contract_name} {version}"
        raise DeploymentNotFound(err_msg) from e

    if chain_id is not None and not use_default_address:
        # raise DeploymentNotFound if missing
        deployment.address(chain_id)
    return deployment


def get_deployment_by_role(
    role: str,
    version: str = DEFAULT_VERSION,
    chain_id: Optional[int] = None,
    use_default_address: bool = False,
) -> Deployment:

    try:
        contract_name = ROLES[version][role]
    except KeyError as e:
        raise DeploymentNotFound(f"no {role} for Safe version {version}") from e
    return get_deployment(contract_name, version, chain_id, use_default_address)


def resolve_address(
    contract_name: str,
    version: str = DEFAULT_VERSION,
    chain_id: Optional[int] = None,
    use_default_address: bool = False,
) -> str:
    "Return the lowercase address of a contract on a chain."

    deployment = get_deployment(contract_name, version)
    return deployment.address(chain_id, use_default_address)


def proxy_creation_code(version: str = DEFAULT_VERSION) -> bytes:
    "Return the creation code of the proxies deployed by the factory."

    factory = get_deployment_by_role("proxy_factory", version)
    if factory.proxy_creation_code is None:
        err_msg = f"unknown proxy creation code for Safe version {version}"
        raise DeploymentNotFound(err_msg)
    return factory.proxy_creation_code
