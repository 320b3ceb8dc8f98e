#!/usr/bin/env python3

# Copyright (C) The stealthkit developers
#
# This file is part of stealthkit. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of stealthkit including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Module stealthkit.safe."""

from stealthkit.safe.deployments import Deployment, get_deployment, resolve_address
from stealthkit.safe.initializer import (
    InitializerExtraFields,
    SafeContracts,
    SafeSetupParams,
    encode_setup,
    resolve_contracts,
)
from stealthkit.safe.predict import (
    Create2Predictor,
    SimulationPredictor,
    create2_address,
    predict_safe_address_with_bytecode,
    predict_safe_address_with_client,
)
from stealthkit.safe.rpc import ChainClient, JsonRpcClient

__all__ = [
    "ChainClient",
    "Create2Predictor",
    "Deployment",
    "InitializerExtraFields",
    "JsonRpcClient",
    "SafeContracts",
    "SafeSetupParams",
    "SimulationPredictor",
    "create2_address",
    "encode_setup",
    "get_deployment",
    "predict_safe_address_with_bytecode",
    "predict_safe_address_with_client",
    "resolve_address",
    "resolve_contracts",
]
