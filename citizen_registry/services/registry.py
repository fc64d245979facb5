# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Registry service owning the authority principal and the citizen table.

Every operation runs as a single transaction: guards are evaluated against
the current state first, and state is only touched once they all pass.
Rejections come back as RegistryResult error codes rather than exceptions.
"""

import logging
from typing import Dict, Iterator, Optional, Any
from opentelemetry import trace

from ..domain import authorization
from ..domain import citizens as citizen_ops
from ..domain.authorization import AuthorizationResult
from ..models.entities import CitizenRecord, Principal, validate_principal, validate_delta
from ..models.enums import CitizenStatus, ErrorCode, RegistryOperation
from ..models.results import RegistryResult
from .audit import AuditService

logger = logging.getLogger(__name__)
tracer = trace.get_tracer(__name__)


class Registry:
    """Permissioned identity registry with a single authority."""

    def __init__(self, genesis_authority: Principal, audit_service: Optional[AuditService] = None):
        """
        Initialize an empty registry.

        Args:
            genesis_authority: Principal holding authority at construction
            audit_service: Optional audit trail for state-changing calls

        Raises:
            ValidationError: if the genesis authority is not a valid principal
        """
        self._authority: Principal = validate_principal(genesis_authority)
        self._citizens: Dict[Principal, CitizenRecord] = {}
        self.audit_service = audit_service
        logger.info("Registry initialized", extra={"authority": genesis_authority})

    @property
    def authority(self) -> Principal:
        """Current authority principal."""
        return self._authority

    @property
    def citizen_count(self) -> int:
        return len(self._citizens)

    def __len__(self) -> int:
        return len(self._citizens)

    def __contains__(self, principal: object) -> bool:
        return principal in self._citizens

    def __iter__(self) -> Iterator[Principal]:
        # Iterate over a copy so callers cannot observe table mutation mid-loop
        return iter(list(self._citizens))

    # Mutating operations

    def register_citizen(self, caller: Principal, alias: Optional[str]) -> RegistryResult:
        """
        Register the caller as a citizen.

        Args:
            caller: Principal registering itself
            alias: Optional display name

        Returns:
            RegistryResult with True, or ALREADY_REGISTERED
        """
        operation = RegistryOperation.REGISTER_CITIZEN
        caller = validate_principal(caller)
        with tracer.start_as_current_span("registry.register_citizen") as span:
            span.set_attributes({"registry.caller": caller, "registry.target": caller})

            check = authorization.check_not_registered(self._citizens, caller)
            if not check.allowed:
                return self._reject(span, operation, caller, caller, check, self._snapshot(caller))

            record = citizen_ops.new_citizen_record(alias)
            self._citizens[caller] = record

            return self._accept(span, operation, caller, caller, None, record.snapshot())

    def verify_citizen(self, caller: Principal, target: Principal) -> RegistryResult:
        """
        Mark a registered citizen as verified.

        Args:
            caller: Principal making the call; must be the authority
            target: Citizen to verify

        Returns:
            RegistryResult with True, or NOT_AUTHORIZED / NOT_REGISTERED
        """
        operation = RegistryOperation.VERIFY_CITIZEN
        caller = validate_principal(caller)
        target = validate_principal(target)
        with tracer.start_as_current_span("registry.verify_citizen") as span:
            span.set_attributes({"registry.caller": caller, "registry.target": target})

            check = authorization.check_authority_over_citizen(
                self._authority, caller, self._citizens, target
            )
            if not check.allowed:
                return self._reject(span, operation, caller, target, check, self._snapshot(target))

            record = self._citizens[target]
            before = record.snapshot()
            citizen_ops.mark_verified(record)

            return self._accept(span, operation, caller, target, before, record.snapshot())

    def adjust_reputation(self, caller: Principal, target: Principal, delta: int) -> RegistryResult:
        """
        Add a signed delta to a citizen's reputation.

        Args:
            caller: Principal making the call; must be the authority
            target: Citizen whose reputation changes
            delta: Signed amount to add

        Returns:
            RegistryResult with True, or NOT_AUTHORIZED / NOT_REGISTERED
        """
        operation = RegistryOperation.ADJUST_REPUTATION
        caller = validate_principal(caller)
        target = validate_principal(target)
        delta = validate_delta(delta)
        with tracer.start_as_current_span("registry.adjust_reputation") as span:
            span.set_attributes({
                "registry.caller": caller,
                "registry.target": target,
                "registry.delta": delta
            })

            check = authorization.check_authority_over_citizen(
                self._authority, caller, self._citizens, target
            )
            if not check.allowed:
                return self._reject(span, operation, caller, target, check, self._snapshot(target))

            record = self._citizens[target]
            before = record.snapshot()
            citizen_ops.apply_reputation_delta(record, delta)

            return self._accept(span, operation, caller, target, before, record.snapshot())

    def update_alias(self, caller: Principal, new_alias: Optional[str]) -> RegistryResult:
        """
        Replace the caller's own alias.

        Args:
            caller: Registered citizen updating its record
            new_alias: New display name

        Returns:
            RegistryResult with True, or NOT_REGISTERED
        """
        operation = RegistryOperation.UPDATE_ALIAS
        caller = validate_principal(caller)
        with tracer.start_as_current_span("registry.update_alias") as span:
            span.set_attributes({"registry.caller": caller, "registry.target": caller})

            check = authorization.check_registered(self._citizens, caller)
            if not check.allowed:
                return self._reject(span, operation, caller, caller, check)

            record = self._citizens[caller]
            before = record.snapshot()
            citizen_ops.set_alias(record, new_alias)

            return self._accept(span, operation, caller, caller, before, record.snapshot())

    def transfer_authority(self, caller: Principal, new_authority: Principal) -> RegistryResult:
        """
        Hand authority to another principal.

        The new authority does not need a citizen record.

        Args:
            caller: Principal making the call; must be the authority
            new_authority: Principal receiving authority

        Returns:
            RegistryResult with True, or NOT_AUTHORIZED
        """
        operation = RegistryOperation.TRANSFER_AUTHORITY
        caller = validate_principal(caller)
        new_authority = validate_principal(new_authority)
        with tracer.start_as_current_span("registry.transfer_authority") as span:
            span.set_attributes({"registry.caller": caller, "registry.target": new_authority})

            check = authorization.check_authority(self._authority, caller)
            if not check.allowed:
                return self._reject(
                    span, operation, caller, new_authority, check, {"authority": self._authority}
                )

            before = {"authority": self._authority}
            self._authority = new_authority

            return self._accept(
                span, operation, caller, new_authority, before, {"authority": new_authority}
            )

    # Read-only operations

    def is_verified(self, target: Principal) -> RegistryResult:
        """
        Verified flag of a principal.

        Never fails: an unregistered principal reads as not verified.
        """
        with tracer.start_as_current_span("registry.is_verified") as span:
            span.set_attribute("registry.target", target)
            record = self._citizens.get(target)
            verified = record.verified if record is not None else False
            logger.debug("Verification status read", extra={"target": target, "verified": verified})
            return RegistryResult.success(verified)

    def get_reputation(self, target: Principal) -> RegistryResult:
        """
        Reputation of a registered citizen.

        Returns:
            RegistryResult with the reputation, or NOT_REGISTERED
        """
        with tracer.start_as_current_span("registry.get_reputation") as span:
            span.set_attribute("registry.target", target)
            record = self._citizens.get(target)
            if record is None:
                span.set_attribute("registry.result.error_code", int(ErrorCode.NOT_REGISTERED))
                logger.debug("Reputation read for unregistered principal", extra={"target": target})
                return RegistryResult.failure(ErrorCode.NOT_REGISTERED)
            return RegistryResult.success(record.reputation)

    def get_citizen(self, target: Principal) -> RegistryResult:
        """Copy of a citizen record, or NOT_REGISTERED."""
        with tracer.start_as_current_span("registry.get_citizen") as span:
            span.set_attribute("registry.target", target)
            record = self._citizens.get(target)
            if record is None:
                span.set_attribute("registry.result.error_code", int(ErrorCode.NOT_REGISTERED))
                return RegistryResult.failure(ErrorCode.NOT_REGISTERED)
            return RegistryResult.success(record.model_copy(deep=True))

    def get_alias(self, target: Principal) -> RegistryResult:
        """
        Alias of a registered citizen.

        The success value is None when the citizen never set an alias.
        """
        with tracer.start_as_current_span("registry.get_alias") as span:
            span.set_attribute("registry.target", target)
            record = self._citizens.get(target)
            if record is None:
                span.set_attribute("registry.result.error_code", int(ErrorCode.NOT_REGISTERED))
                return RegistryResult.failure(ErrorCode.NOT_REGISTERED)
            return RegistryResult.success(record.alias)

    def is_registered(self, target: Principal) -> bool:
        return target in self._citizens

    def citizen_status(self, target: Principal) -> CitizenStatus:
        """Lifecycle state of a principal."""
        with tracer.start_as_current_span("registry.citizen_status") as span:
            span.set_attribute("registry.target", target)
            status = citizen_ops.citizen_status(self._citizens.get(target))
            span.set_attribute("registry.citizen_status", status.value)
            return status

    # Internal helpers

    def _snapshot(self, principal: Principal) -> Optional[Dict[str, Any]]:
        record = self._citizens.get(principal)
        return record.snapshot() if record is not None else None

    def _accept(
        self,
        span: trace.Span,
        operation: RegistryOperation,
        caller: Principal,
        target: Principal,
        before: Optional[Dict[str, Any]],
        after: Optional[Dict[str, Any]]
    ) -> RegistryResult:
        span.set_attribute("registry.result", "accepted")
        logger.info(
            "Registry call accepted",
            extra={
                "operation": operation.value,
                "caller": caller,
                "target": target
            }
        )
        if self.audit_service is not None:
            self.audit_service.log_action(
                operation, caller, target=target, before=before, after=after
            )
        return RegistryResult.success(True)

    def _reject(
        self,
        span: trace.Span,
        operation: RegistryOperation,
        caller: Principal,
        target: Principal,
        check: AuthorizationResult,
        before: Optional[Dict[str, Any]] = None
    ) -> RegistryResult:
        span.set_attributes({
            "registry.result": "rejected",
            "registry.result.error_code": int(check.error_code)
        })
        logger.warning(
            "Registry call rejected",
            extra={
                "operation": operation.value,
                "caller": caller,
                "target": target,
                "error_code": int(check.error_code),
                "reason": check.reason
            }
        )
        if self.audit_service is not None:
            self.audit_service.log_action(
                operation, caller, target=target, error_code=check.error_code, before=before
            )
        return RegistryResult.failure(check.error_code)
