# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Permissioned citizen identity registry.
"""

from .models import (
    ErrorCode,
    CitizenStatus,
    RegistryOperation,
    AuditOutcome,
    Principal,
    CitizenRecord,
    AuditEntry,
    RegistryResult
)
from .domain.errors import (
    RegistryError,
    NotAuthorizedError,
    AlreadyRegisteredError,
    NotRegisteredError,
    error_for_code
)
from .services import AuditService, AuditFilters, Registry, call, invoke
from .config import RegistryConfig, load_config, create_registry

__version__ = "1.0.0"

__all__ = [
    "ErrorCode",
    "CitizenStatus",
    "RegistryOperation",
    "AuditOutcome",
    "Principal",
    "CitizenRecord",
    "AuditEntry",
    "RegistryResult",
    "RegistryError",
    "NotAuthorizedError",
    "AlreadyRegisteredError",
    "NotRegisteredError",
    "error_for_code",
    "AuditService",
    "AuditFilters",
    "Registry",
    "call",
    "invoke",
    "RegistryConfig",
    "load_config",
    "create_registry"
]
