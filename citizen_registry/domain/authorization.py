# SPDX-License-Identifier: Apache-2.0

"""
Authorization domain logic for registry operations.

This module contains pure guard functions. Each returns an AuthorizationResult
instead of raising, so the registry can turn a rejection into an error code
without touching state.
"""

from typing import Mapping, Optional
from dataclasses import dataclass

from ..models.entities import CitizenRecord, Principal
from ..models.enums import ErrorCode


@dataclass
class AuthorizationResult:
    """Result of a guard check."""
    allowed: bool
    reason: Optional[str] = None
    error_code: Optional[ErrorCode] = None


ALLOWED = AuthorizationResult(allowed=True)


def check_authority(authority: Principal, caller: Principal) -> AuthorizationResult:
    """
    Check that the caller is the registry authority.
    
    Args:
        authority: Current authority principal
        caller: Principal making the call
        
    Returns:
        AuthorizationResult indicating if the caller holds authority
    """
    if caller == authority:
        return ALLOWED
    
    return AuthorizationResult(
        allowed=False,
        reason=f"Caller {caller} is not the registry authority",
        error_code=ErrorCode.NOT_AUTHORIZED
    )


def check_registered(citizens: Mapping[Principal, CitizenRecord], principal: Principal) -> AuthorizationResult:
    """
    Check that a principal has a citizen record.
    
    Args:
        citizens: Registry table
        principal: Principal to look up
        
    Returns:
        AuthorizationResult indicating if the record exists
    """
    if principal in citizens:
        return ALLOWED
    
    return AuthorizationResult(
        allowed=False,
        reason=f"Principal {principal} is not registered",
        error_code=ErrorCode.NOT_REGISTERED
    )


def check_not_registered(citizens: Mapping[Principal, CitizenRecord], principal: Principal) -> AuthorizationResult:
    """
    Check that a principal has no citizen record yet.
    
    Args:
        citizens: Registry table
        principal: Principal to look up
        
    Returns:
        AuthorizationResult indicating if registration may proceed
    """
    if principal not in citizens:
        return ALLOWED
    
    return AuthorizationResult(
        allowed=False,
        reason=f"Principal {principal} is already registered",
        error_code=ErrorCode.ALREADY_REGISTERED
    )


def check_authority_over_citizen(
    authority: Principal,
    caller: Principal,
    citizens: Mapping[Principal, CitizenRecord],
    target: Principal
) -> AuthorizationResult:
    """
    Check that the authority is acting on a registered citizen.
    
    Authorization is evaluated before existence: a non-authority caller
    targeting an unknown principal is rejected as not authorized.
    
    Args:
        authority: Current authority principal
        caller: Principal making the call
        citizens: Registry table
        target: Citizen being acted upon
        
    Returns:
        First failing check, or an allowed result
    """
    authority_check = check_authority(authority, caller)
    if not authority_check.allowed:
        return authority_check
    
    return check_registered(citizens, target)
