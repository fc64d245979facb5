# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Error kinds surfaced by registry operations.
"""

from typing import Dict, Optional, Type

from ..models.enums import ErrorCode


class RegistryError(Exception):
    """Base class for registry rejections."""
    
    code: ErrorCode
    
    def __init__(self, message: str, code: ErrorCode):
        super().__init__(message)
        self.message = message
        self.code = code


class NotAuthorizedError(RegistryError):
    """Caller is not the registry authority."""
    
    def __init__(self, message: str = "Caller is not the registry authority"):
        super().__init__(message, ErrorCode.NOT_AUTHORIZED)


class AlreadyRegisteredError(RegistryError):
    """Principal already has a citizen record."""
    
    def __init__(self, message: str = "Principal is already registered"):
        super().__init__(message, ErrorCode.ALREADY_REGISTERED)


class NotRegisteredError(RegistryError):
    """Principal has no citizen record."""
    
    def __init__(self, message: str = "Principal is not registered"):
        super().__init__(message, ErrorCode.NOT_REGISTERED)


_ERRORS_BY_CODE: Dict[ErrorCode, Type[RegistryError]] = {
    ErrorCode.NOT_AUTHORIZED: NotAuthorizedError,
    ErrorCode.ALREADY_REGISTERED: AlreadyRegisteredError,
    ErrorCode.NOT_REGISTERED: NotRegisteredError,
}


def error_for_code(code: int, message: Optional[str] = None) -> RegistryError:
    """
    Build the exception matching an error code.
    
    Args:
        code: Numeric error code (100, 101 or 102)
        message: Optional message overriding the default
        
    Returns:
        RegistryError subclass instance
        
    Raises:
        ValueError: if the code is not a known registry error code
    """
    error_cls = _ERRORS_BY_CODE[ErrorCode(code)]
    if message is None:
        return error_cls()
    return error_cls(message)
