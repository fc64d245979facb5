# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Result model returned by every registry operation.
"""

from typing import Any, Dict, Optional
from pydantic import BaseModel, ConfigDict, Field, model_validator

from .enums import ErrorCode
from ..domain.errors import error_for_code


class RegistryResult(BaseModel):
    """Either a success value or an error code, never both."""
    
    model_config = ConfigDict(frozen=True)
    
    value: Any = Field(None, description="Success value")
    error: Optional[ErrorCode] = Field(None, description="Error code for rejected calls")
    
    @model_validator(mode='after')
    def validate_exclusive(self):
        """A rejected call carries no value."""
        if self.error is not None and self.value is not None:
            raise ValueError('Result cannot carry both a value and an error')
        return self
    
    @classmethod
    def success(cls, value: Any) -> "RegistryResult":
        return cls(value=value)
    
    @classmethod
    def failure(cls, code: ErrorCode) -> "RegistryResult":
        return cls(error=code)
    
    @property
    def ok(self) -> bool:
        """Whether the call succeeded."""
        return self.error is None
    
    def unwrap(self) -> Any:
        """
        Return the success value or raise the matching RegistryError.
        
        Returns:
            The success value
            
        Raises:
            RegistryError: subclass matching the error code
        """
        if self.error is not None:
            raise error_for_code(self.error)
        return self.value
    
    def to_dict(self) -> Dict[str, Any]:
        """Wire form: {"value": V} or {"error": code}."""
        if self.error is not None:
            return {"error": int(self.error)}
        return {"value": self.value}
