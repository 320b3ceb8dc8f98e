#!/usr/bin/env python3

# Copyright (C) The stealthkit developers
#
# This file is part of stealthkit. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of stealthkit including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Module stealthkit.hd."""

from stealthkit.hd.der_path import (
    HARDENED,
    DerPath,
    hardened_path,
    indexes_from_der_path,
    int_from_index_str,
    str_from_der_path,
    str_from_index_int,
)
from stealthkit.hd.hd_node import VERSIONS, HDNode

__all__ = [
    "HARDENED",
    "DerPath",
    "HDNode",
    "VERSIONS",
    "hardened_path",
    "indexes_from_der_path",
    "int_from_index_str",
    "str_from_der_path",
    "str_from_index_int",
]
