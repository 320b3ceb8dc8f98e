#!/usr/bin/env python3

# Copyright (C) The stealthkit developers
#
# This file is part of stealthkit. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of stealthkit including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"__init__ module for the stealthkit package."

name = "stealthkit"
__version__ = "2024.3.1"
__author__ = "The stealthkit developers"
__author_email__ = "devs@stealthkit.org"
__copyright__ = "Copyright (C) 2024 The stealthkit developers"
__license__ = "MIT License"
