#!/usr/bin/env python3

# Copyright (C) The stealthkit developers
#
# This file is part of stealthkit. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of stealthkit including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Module stealthkit.ecc."""
