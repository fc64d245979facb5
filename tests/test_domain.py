# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Tests for pure domain guards and record transitions.
"""

import pytest

from citizen_registry.domain.authorization import (
    check_authority, check_registered, check_not_registered, check_authority_over_citizen
)
from citizen_registry.domain.citizens import (
    new_citizen_record, mark_verified, apply_reputation_delta, set_alias, citizen_status
)
from citizen_registry.models.entities import CitizenRecord
from citizen_registry.models.enums import CitizenStatus, ErrorCode


@pytest.fixture
def table():
    return {"alice": CitizenRecord(alias="alice")}


class TestAuthorizationChecks:
    """Test guard functions."""
    
    def test_authority_allowed(self):
        """Test the authority passes the authority check."""
        result = check_authority("admin", "admin")
        
        assert result.allowed is True
        assert result.error_code is None
    
    def test_authority_denied(self):
        """Test other principals fail the authority check."""
        result = check_authority("admin", "alice")
        
        assert result.allowed is False
        assert result.error_code == ErrorCode.NOT_AUTHORIZED
        assert "not the registry authority" in result.reason
    
    def test_registered(self, table):
        """Test registration checks against the table."""
        assert check_registered(table, "alice").allowed
        assert check_registered(table, "bob").error_code == ErrorCode.NOT_REGISTERED
    
    def test_not_registered(self, table):
        """Test registration precondition."""
        assert check_not_registered(table, "bob").allowed
        assert check_not_registered(table, "alice").error_code == ErrorCode.ALREADY_REGISTERED
    
    def test_authority_checked_first(self, table):
        """Test authority failure wins over missing target."""
        result = check_authority_over_citizen("admin", "alice", table, "bob")
        
        assert result.error_code == ErrorCode.NOT_AUTHORIZED
    
    def test_authority_over_missing_citizen(self, table):
        """Test the authority still needs a registered target."""
        result = check_authority_over_citizen("admin", "admin", table, "bob")
        
        assert result.error_code == ErrorCode.NOT_REGISTERED
    
    def test_authority_over_registered_citizen(self, table):
        """Test both checks pass."""
        assert check_authority_over_citizen("admin", "admin", table, "alice").allowed


class TestCitizenTransitions:
    """Test in-place record transitions."""
    
    def test_new_record(self):
        """Test a fresh record is unverified with zero reputation."""
        record = new_citizen_record("carol")
        
        assert record.snapshot() == {"verified": False, "reputation": 0, "alias": "carol"}
    
    def test_mark_verified(self, table):
        """Test verification updates the record in place."""
        record = table["alice"]
        
        mark_verified(record)
        
        assert table["alice"].verified is True
        assert citizen_status(table["alice"]) == CitizenStatus.VERIFIED
    
    def test_apply_reputation_delta(self, table):
        """Test deltas are added and the new value returned."""
        record = table["alice"]
        
        assert apply_reputation_delta(record, 5) == 5
        assert apply_reputation_delta(record, -8) == -3
        assert table["alice"].reputation == -3
    
    def test_set_alias(self, table):
        """Test alias replacement leaves other fields untouched."""
        record = table["alice"]
        
        set_alias(record, "alicia")
        
        assert record.snapshot() == {"verified": False, "reputation": 0, "alias": "alicia"}
    
    def test_status_of_missing_record(self):
        """Test a missing record is unregistered."""
        assert citizen_status(None) == CitizenStatus.UNREGISTERED
