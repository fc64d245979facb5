# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Core entity models for the citizen registry.
"""

from datetime import datetime
from typing import Optional, Dict, Any
from pydantic import Field, StrictInt, TypeAdapter, field_validator

from .base import RegistryModel, generate_object_id, utc_now
from .enums import CitizenStatus, ErrorCode, RegistryOperation, AuditOutcome


# Principals are opaque identities already authenticated by the runtime.
Principal = str

_principal_adapter = TypeAdapter(Principal)
_delta_adapter = TypeAdapter(StrictInt)


def validate_principal(value: Any) -> Principal:
    """Validate a principal identity, raising ValidationError for non-strings."""
    return _principal_adapter.validate_python(value)


def validate_delta(value: Any) -> int:
    """Validate a reputation delta, raising ValidationError for non-integers."""
    return _delta_adapter.validate_python(value)


class CitizenRecord(RegistryModel):
    """Registry entry for a single citizen."""
    
    verified: bool = Field(default=False, description="Set by the authority, never cleared")
    reputation: int = Field(default=0, description="Signed, unbounded standing score")
    alias: Optional[str] = Field(None, description="Display name chosen by the citizen")
    registered_at: datetime = Field(default_factory=utc_now, description="Registration timestamp")
    updated_at: datetime = Field(default_factory=utc_now, description="Last update timestamp")
    schema_version: int = Field(default=1, description="Schema version for migrations")
    
    @property
    def status(self) -> CitizenStatus:
        """Verification state of this registered citizen."""
        return CitizenStatus.VERIFIED if self.verified else CitizenStatus.UNVERIFIED
    
    def has_alias(self) -> bool:
        """Check whether an alias is set."""
        return self.alias is not None
    
    def touch(self) -> None:
        """Update the last-modified timestamp."""
        self.updated_at = utc_now()
    
    def snapshot(self) -> Dict[str, Any]:
        """Plain dictionary view of the tracked fields."""
        return {
            "verified": self.verified,
            "reputation": self.reputation,
            "alias": self.alias
        }


class AuditEntry(RegistryModel):
    """Audit trail entry for a state-changing registry call."""
    
    id: str = Field(default_factory=generate_object_id, description="Unique identifier")
    timestamp: datetime = Field(default_factory=utc_now, description="Call timestamp")
    operation: RegistryOperation = Field(..., description="Operation invoked")
    caller: Principal = Field(..., description="Principal that made the call")
    target: Optional[Principal] = Field(None, description="Principal affected by the call")
    outcome: AuditOutcome = Field(..., description="Whether the call was accepted")
    error_code: Optional[ErrorCode] = Field(None, description="Error code for rejected calls")
    before: Optional[Dict[str, Any]] = Field(None, description="State before the call")
    after: Optional[Dict[str, Any]] = Field(None, description="State after the call")
    trace_id: Optional[str] = Field(None, description="OpenTelemetry trace ID")
    span_id: Optional[str] = Field(None, description="OpenTelemetry span ID")
    schema_version: int = Field(default=1, description="Schema version")
    
    @field_validator('operation')
    @classmethod
    def validate_operation(cls, v):
        """Only state-changing operations are audited."""
        if RegistryOperation(v).is_read_only:
            raise ValueError(f'Read-only operation cannot be audited: {RegistryOperation(v).value}')
        return v
    
    def is_accepted(self) -> bool:
        """Check if the audited call was accepted."""
        return self.outcome == AuditOutcome.ACCEPTED
