# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Services package - stateful registry, audit trail and call interface.
"""

from .audit import AuditService, AuditFilters
from .registry import Registry
from .dispatch import call, invoke, resolve_operation

__all__ = [
    "AuditService",
    "AuditFilters",
    "Registry",
    "call",
    "invoke",
    "resolve_operation"
]
