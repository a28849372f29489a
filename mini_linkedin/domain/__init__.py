# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .exceptions import InvariantViolation, InvariantViolationError
from .ownership import OwnedResource, OwnershipGuard

__all__ = [
    "InvariantViolation",
    "InvariantViolationError",
    "OwnedResource",
    "OwnershipGuard",
]
