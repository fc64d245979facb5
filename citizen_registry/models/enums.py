# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Enumeration types for the citizen registry.
"""

from enum import Enum


class ErrorCode(int, Enum):
    """Stable numeric error codes returned to callers."""
    NOT_AUTHORIZED = 100
    ALREADY_REGISTERED = 101
    NOT_REGISTERED = 102


class CitizenStatus(str, Enum):
    """Lifecycle state of a principal in the registry."""
    UNREGISTERED = "unregistered"
    UNVERIFIED = "unverified"
    VERIFIED = "verified"


class RegistryOperation(str, Enum):
    """Contract names of the registry call interface."""
    REGISTER_CITIZEN = "register-citizen"
    VERIFY_CITIZEN = "verify-citizen"
    IS_VERIFIED = "is-verified"
    GET_REPUTATION = "get-reputation"
    ADJUST_REPUTATION = "adjust-reputation"
    UPDATE_ALIAS = "update-alias"
    TRANSFER_AUTHORITY = "transfer-authority"

    @property
    def is_read_only(self) -> bool:
        """Whether the operation never mutates registry state."""
        return self in (RegistryOperation.IS_VERIFIED, RegistryOperation.GET_REPUTATION)


class AuditOutcome(str, Enum):
    """Outcome recorded for an audited registry call."""
    ACCEPTED = "accepted"
    REJECTED = "rejected"
