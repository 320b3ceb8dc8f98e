#!/usr/bin/env python3

# Copyright (C) The stealthkit developers
#
# This file is part of stealthkit. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of stealthkit including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Minimal ethereum JSON-RPC client.

Only read-only calls are supported: the client never signs nor sends
transactions, and only public call data ever leaves the process.

Every failure (transport, HTTP status, JSON-RPC error, malformed
response) is reported as NetworkError; retrying is up to the caller.
"""

import itertools
import logging
from typing import Any, List, Optional, Protocol

import requests

from stealthkit.address import ZERO_ADDRESS
from stealthkit.exceptions import InvalidInputFormat, NetworkError
from stealthkit.utils import bytes_from_hex, hex_from_bytes

LOGGER = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0


class ChainClient(Protocol):
    "Anything able to simulate a contract call."

    def call(
        self,
        to: str,
        data: bytes,
        from_address: str = ZERO_ADDRESS,
        gas_price: int = 0,
    ) -> bytes:
        ...  # pragma: no cover


class JsonRpcClient:
    """JSON-RPC client over HTTP, using a requests.Session."""

    def __init__(
        self,
        url: str,
        timeout: float = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.url = url
        self.timeout = timeout
        self.session = session or requests.Session()
        self._ids = itertools.count(1)

    def __enter__(self) -> "JsonRpcClient":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def close(self) -> None:
        self.session.close()

    def request(self, method: str, params: Optional[List[Any]] = None) -> Any:
        "Return the result of a JSON-RPC method call."

        payload = {
            "jsonrpc": "2.0",
            "id": next(self._ids),
            "method": method,
            "params": list(params or []),
        }
        LOGGER.debug("%s request to %s", method, self.url)
        try:
            response = self.session.post(self.url, json=payload, timeout=self.timeout)
            response.raise_for_status()
            data = response.json()
        except requests.RequestException as e:
            raise NetworkError(f"{method} request failed: {e}") from e
        except ValueError as e:
            raise NetworkError(f"{method} invalid JSON response: {e}") from e

        if not isinstance(data, dict):
            raise NetworkError(f"{method} malformed response: {data!r}")
        if data.get("error"):
            raise NetworkError(f"{method} error: {data['error']}")
        if "result" not in data:
            raise NetworkError(f"{method} response without result")
        return data["result"]

    def call(
        self,
        to: str,
        data: bytes,
        from_address: str = ZERO_ADDRESS,
        gas_price: int = 0,
    ) -> bytes:
        "Return the data returned by an eth_call simulation."

        tx = {
            "from": from_address,
            "to": to,
            "data": hex_from_bytes(data),
            "gasPrice": hex(gas_price),
        }
        result = self.request("eth_call", [tx, "latest"])
        try:
            return bytes_from_hex(result, label="eth_call result")
        except InvalidInputFormat as e:
            raise NetworkError(f"malformed eth_call result: {result!r}") from e
