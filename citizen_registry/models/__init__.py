# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Models package - Pydantic schemas and data models for the citizen registry.
"""

# Base models
from .base import RegistryModel, generate_object_id, utc_now

# Enumerations
from .enums import (
    ErrorCode,
    CitizenStatus,
    RegistryOperation,
    AuditOutcome
)

# Core entities
from .entities import Principal, CitizenRecord, AuditEntry

# Results
from .results import RegistryResult

__all__ = [
    # Base models
    "RegistryModel",
    "generate_object_id",
    "utc_now",
    
    # Enumerations
    "ErrorCode",
    "CitizenStatus",
    "RegistryOperation",
    "AuditOutcome",
    
    # Core entities
    "Principal",
    "CitizenRecord",
    "AuditEntry",
    
    # Results
    "RegistryResult"
]
