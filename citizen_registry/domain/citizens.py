# SPDX-License-Identifier: Apache-2.0

"""
Citizen record transitions.

Records are updated in place; callers are expected to have run the
matching guard from the authorization module first.
"""

from typing import Optional

from ..models.entities import CitizenRecord
from ..models.enums import CitizenStatus


def new_citizen_record(alias: Optional[str]) -> CitizenRecord:
    """Create an unverified record with zero reputation."""
    return CitizenRecord(alias=alias)


def mark_verified(record: CitizenRecord) -> None:
    """Set the verified flag. Verification is never cleared."""
    record.verified = True
    record.touch()


def apply_reputation_delta(record: CitizenRecord, delta: int) -> int:
    """
    Add a signed delta to a record's reputation.
    
    Args:
        record: Record to update
        delta: Signed amount; no floor or ceiling is applied
        
    Returns:
        New reputation value
    """
    record.reputation = record.reputation + delta
    record.touch()
    return record.reputation


def set_alias(record: CitizenRecord, alias: Optional[str]) -> None:
    """Replace the display alias."""
    record.alias = alias
    record.touch()


def citizen_status(record: Optional[CitizenRecord]) -> CitizenStatus:
    """Lifecycle state for a possibly missing record."""
    if record is None:
        return CitizenStatus.UNREGISTERED
    return record.status
