# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Call interface for the registry.

Translates contract-style calls of the shape operation(caller, *args) into
Registry method calls and returns the wire form {"value": V} or
{"error": code}.
"""

import logging
from typing import Any, Callable, Dict, Union
from opentelemetry import trace

from ..models.entities import Principal
from ..models.enums import RegistryOperation
from ..models.results import RegistryResult
from .registry import Registry

logger = logging.getLogger(__name__)
tracer = trace.get_tracer(__name__)


# Read-only operations take the caller for shape compatibility and ignore it.
_HANDLERS: Dict[RegistryOperation, Callable[..., RegistryResult]] = {
    RegistryOperation.REGISTER_CITIZEN:
        lambda registry, caller, alias=None: registry.register_citizen(caller, alias),
    RegistryOperation.VERIFY_CITIZEN:
        lambda registry, caller, target: registry.verify_citizen(caller, target),
    RegistryOperation.IS_VERIFIED:
        lambda registry, caller, target: registry.is_verified(target),
    RegistryOperation.GET_REPUTATION:
        lambda registry, caller, target: registry.get_reputation(target),
    RegistryOperation.ADJUST_REPUTATION:
        lambda registry, caller, target, delta: registry.adjust_reputation(caller, target, delta),
    RegistryOperation.UPDATE_ALIAS:
        lambda registry, caller, alias: registry.update_alias(caller, alias),
    RegistryOperation.TRANSFER_AUTHORITY:
        lambda registry, caller, new_authority: registry.transfer_authority(caller, new_authority),
}


def resolve_operation(operation: Union[str, RegistryOperation]) -> RegistryOperation:
    """
    Resolve a contract operation name.
    
    Args:
        operation: Contract name such as "verify-citizen"
        
    Returns:
        RegistryOperation member
        
    Raises:
        ValueError: if the name is not a registry operation
    """
    try:
        return RegistryOperation(operation)
    except ValueError:
        raise ValueError(f"Unknown registry operation: {operation}") from None


def call(registry: Registry, operation: Union[str, RegistryOperation], caller: Principal, *args: Any) -> RegistryResult:
    """
    Invoke a registry operation and return its RegistryResult.
    
    Args:
        registry: Registry instance handling the call
        operation: Contract operation name
        caller: Authenticated caller identity
        *args: Operation arguments after the caller
        
    Returns:
        RegistryResult from the operation
        
    Raises:
        ValueError: for unknown operation names
        TypeError: for a wrong number of arguments
    """
    op = resolve_operation(operation)
    with tracer.start_as_current_span("dispatch.call") as span:
        span.set_attributes({"dispatch.operation": op.value, "dispatch.caller": caller})
        logger.debug("Dispatching registry call", extra={"operation": op.value, "caller": caller})
        return _HANDLERS[op](registry, caller, *args)


def invoke(registry: Registry, operation: Union[str, RegistryOperation], caller: Principal, *args: Any) -> Dict[str, Any]:
    """
    Invoke a registry operation and return its wire form.
    
    Returns:
        {"value": V} on success, {"error": code} on rejection
    """
    return call(registry, operation, caller, *args).to_dict()
