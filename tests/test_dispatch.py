# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Tests for the registry call interface.
"""

import pytest

from citizen_registry.models.enums import RegistryOperation
from citizen_registry.services.dispatch import call, invoke, resolve_operation


class TestResolveOperation:
    """Test contract name resolution."""
    
    @pytest.mark.parametrize("name", [op.value for op in RegistryOperation])
    def test_known_names(self, name):
        """Test every contract name resolves."""
        assert resolve_operation(name).value == name
    
    def test_unknown_name(self):
        """Test unknown operations are programming errors."""
        with pytest.raises(ValueError) as exc_info:
            resolve_operation("delete-citizen")
        
        assert "Unknown registry operation" in str(exc_info.value)


class TestInvoke:
    """Test wire-form dispatch."""
    
    def test_contract_flow(self, registry, admin, citizen1):
        """Test a full lifecycle through the call interface."""
        assert invoke(registry, "register-citizen", citizen1, "alice") == {"value": True}
        assert invoke(registry, "verify-citizen", admin, citizen1) == {"value": True}
        assert invoke(registry, "is-verified", citizen1, citizen1) == {"value": True}
        assert invoke(registry, "adjust-reputation", admin, citizen1, 10) == {"value": True}
        assert invoke(registry, "adjust-reputation", admin, citizen1, -3) == {"value": True}
        assert invoke(registry, "get-reputation", citizen1, citizen1) == {"value": 7}
        assert invoke(registry, "update-alias", citizen1, "alice2") == {"value": True}
        assert invoke(registry, "transfer-authority", admin, citizen1) == {"value": True}
        assert registry.authority == citizen1
    
    def test_error_codes(self, registry, citizen1, citizen2):
        """Test rejections come back as numeric codes."""
        invoke(registry, "register-citizen", citizen1, "alice")
        
        assert invoke(registry, "register-citizen", citizen1, "alice") == {"error": 101}
        assert invoke(registry, "verify-citizen", citizen1, citizen2) == {"error": 100}
        assert invoke(registry, "get-reputation", citizen1, citizen2) == {"error": 102}
        assert invoke(registry, "update-alias", citizen2, "ghost") == {"error": 102}
    
    def test_read_ignores_caller(self, registry, admin, citizen1, citizen2):
        """Test read-only calls answer the same for any caller."""
        invoke(registry, RegistryOperation.REGISTER_CITIZEN, citizen1, "alice")
        
        assert invoke(registry, "get-reputation", admin, citizen1) == invoke(
            registry, "get-reputation", citizen2, citizen1
        )
    
    def test_register_without_alias(self, registry, citizen1):
        """Test alias defaults to None when omitted."""
        invoke(registry, "register-citizen", citizen1)
        
        assert registry.get_alias(citizen1).unwrap() is None
    
    def test_wrong_arity(self, registry, admin):
        """Test missing arguments raise TypeError."""
        with pytest.raises(TypeError):
            invoke(registry, "adjust-reputation", admin, "alice")
    
    def test_call_returns_result(self, registry, citizen1):
        """Test call exposes the RegistryResult."""
        result = call(registry, "register-citizen", citizen1, "alice")
        
        assert result.ok
        assert result.value is True
