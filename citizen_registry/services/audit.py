# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Audit service for registry call logging with OpenTelemetry correlation.
"""

import logging
from datetime import datetime
from typing import Dict, List, Optional, Any
from opentelemetry import trace

from ..models.entities import AuditEntry, Principal
from ..models.enums import AuditOutcome, ErrorCode, RegistryOperation

logger = logging.getLogger(__name__)
tracer = trace.get_tracer(__name__)


class AuditFilters:
    """Filters for audit trail queries."""
    
    def __init__(
        self,
        caller: Optional[Principal] = None,
        target: Optional[Principal] = None,
        operation: Optional[RegistryOperation] = None,
        outcome: Optional[AuditOutcome] = None,
        start_date: Optional[datetime] = None,
        end_date: Optional[datetime] = None
    ):
        self.caller = caller
        self.target = target
        self.operation = operation
        self.outcome = outcome
        self.start_date = start_date
        self.end_date = end_date
    
    def matches(self, entry: AuditEntry) -> bool:
        """Check whether an entry satisfies every set filter."""
        if self.caller is not None and entry.caller != self.caller:
            return False
        
        if self.target is not None and entry.target != self.target:
            return False
        
        if self.operation is not None and entry.operation != RegistryOperation(self.operation):
            return False
        
        if self.outcome is not None and entry.outcome != AuditOutcome(self.outcome):
            return False
        
        # Date range filter
        if self.start_date and entry.timestamp < self.start_date:
            return False
        if self.end_date and entry.timestamp > self.end_date:
            return False
        
        return True


class AuditService:
    """Append-only, in-memory audit trail of state-changing registry calls."""
    
    def __init__(self):
        self._entries: List[AuditEntry] = []
        logger.info("Audit service initialized")
    
    def __len__(self) -> int:
        return len(self._entries)
    
    def log_action(
        self,
        operation: RegistryOperation,
        caller: Principal,
        target: Optional[Principal] = None,
        error_code: Optional[ErrorCode] = None,
        before: Optional[Dict[str, Any]] = None,
        after: Optional[Dict[str, Any]] = None
    ) -> str:
        """
        Record a registry call with trace correlation and structured logging.
        
        Args:
            operation: Operation invoked
            caller: Principal that made the call
            target: Principal affected by the call (optional)
            error_code: Error code if the call was rejected (optional)
            before: State before the call (optional)
            after: State after the call (optional)
        
        Returns:
            str: ID of the created audit entry
        """
        with tracer.start_as_current_span("audit.log_action") as span:
            span_context = span.get_span_context()
            
            entry = AuditEntry(
                operation=operation,
                caller=caller,
                target=target,
                outcome=AuditOutcome.ACCEPTED if error_code is None else AuditOutcome.REJECTED,
                error_code=error_code,
                before=before,
                after=after
            )
            
            # Add trace correlation if available
            if span_context.is_valid:
                entry.trace_id = format(span_context.trace_id, "032x")
                entry.span_id = format(span_context.span_id, "016x")
            
            span.set_attributes({
                "audit.operation": entry.operation.value,
                "audit.caller": caller,
                "audit.outcome": entry.outcome.value
            })
            
            self._entries.append(entry)
            
            changes_count = 0
            if before and after:
                changes_count = len(self.changes(entry))
            
            logger.info(
                "Audit trail entry created",
                extra={
                    "audit_id": entry.id,
                    "operation": entry.operation.value,
                    "caller": caller,
                    "target": target,
                    "outcome": entry.outcome.value,
                    "trace_id": entry.trace_id,
                    "changes_count": changes_count
                }
            )
            
            return entry.id
    
    def get_entry(self, entry_id: str) -> Optional[AuditEntry]:
        """
        Get a single audit entry by ID.
        
        Args:
            entry_id: Audit entry ID
        
        Returns:
            Copy of the entry, or None if not found
        """
        for entry in self._entries:
            if entry.id == entry_id:
                return entry.model_copy(deep=True)
        return None
    
    def query(self, filters: Optional[AuditFilters] = None) -> List[AuditEntry]:
        """
        Query the audit trail in recording order.
        
        Args:
            filters: Audit filters; all entries when omitted
        
        Returns:
            List of matching entry copies
        """
        with tracer.start_as_current_span("audit.query") as span:
            filters = filters or AuditFilters()
            results = [
                entry.model_copy(deep=True)
                for entry in self._entries
                if filters.matches(entry)
            ]
            
            span.set_attribute("audit.query.result_count", len(results))
            logger.debug(
                "Audit trail queried",
                extra={"total_entries": len(self._entries), "returned_items": len(results)}
            )
            
            return results
    
    def changes(self, entry: AuditEntry) -> List[Dict[str, Any]]:
        """
        Calculate field-level changes for an audit entry.
        
        Args:
            entry: Audit entry with before and after snapshots
        
        Returns:
            List[Dict]: List of field changes, sorted by field name
        """
        before = entry.before or {}
        after = entry.after or {}
        changes = []
        
        for key in sorted(set(before.keys()) | set(after.keys())):
            old_value = before.get(key)
            new_value = after.get(key)
            
            if old_value != new_value:
                changes.append({
                    "field": key,
                    "old_value": old_value,
                    "new_value": new_value
                })
        
        return changes
