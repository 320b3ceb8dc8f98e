#!/usr/bin/env python3

# Copyright (C) The stealthkit developers
#
# This file is part of stealthkit. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of stealthkit including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Exception classes.

The base classes are only meant to discriminate between Exceptions raised
by stealthkit from those raised by other codebase:
they derive from the regular ValueError and RuntimeError.

Input problems (malformed hex, missing or ambiguous parameters,
out of range nonces, unknown deployments) are ValueErrors:
retrying the same call is pointless.
NetworkError is transient and the caller may decide to retry;
DerivationFailure signals a broken internal invariant.
"""


class StealthKitValueError(ValueError):
    pass


class StealthKitRuntimeError(RuntimeError):
    pass


class InvalidInputFormat(StealthKitValueError):
    pass


class MissingParameter(StealthKitValueError):
    pass


class NonceOutOfRange(StealthKitValueError):
    pass


class DeploymentNotFound(StealthKitValueError):
    pass


class NetworkError(StealthKitRuntimeError):
    pass


class DerivationFailure(StealthKitRuntimeError):
    pass
