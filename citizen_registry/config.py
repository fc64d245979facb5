# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Environment-driven configuration and registry factory.
"""

import os
import logging
from dataclasses import dataclass
from typing import Optional

from .models.entities import Principal
from .services.audit import AuditService
from .services.registry import Registry

logger = logging.getLogger(__name__)


@dataclass
class RegistryConfig:
    """Registry and observability settings."""
    environment: str = "development"
    otel_enabled: bool = True
    service_name: str = "citizen-registry"
    service_version: str = "1.0.0"
    otlp_endpoint: Optional[str] = None
    genesis_authority: Optional[Principal] = None
    audit_enabled: bool = True


def load_config() -> RegistryConfig:
    """
    Build configuration from environment variables.
    
    Returns:
        RegistryConfig populated from the environment
    """
    return RegistryConfig(
        environment=os.getenv('ENVIRONMENT', 'development'),
        otel_enabled=os.getenv('OTEL_ENABLED', 'true').lower() == 'true',
        service_version=os.getenv('SERVICE_VERSION', '1.0.0'),
        otlp_endpoint=os.getenv('OTEL_EXPORTER_OTLP_ENDPOINT') or None,
        genesis_authority=os.getenv('REGISTRY_GENESIS_AUTHORITY') or None,
        audit_enabled=os.getenv('REGISTRY_AUDIT_ENABLED', 'true').lower() == 'true'
    )


def create_registry(
    config: Optional[RegistryConfig] = None,
    genesis_authority: Optional[Principal] = None
) -> Registry:
    """
    Factory function to create a registry from configuration.
    
    Args:
        config: Settings; loaded from the environment when omitted
        genesis_authority: Overrides the configured genesis authority
        
    Returns:
        Registry: Empty registry owned by the genesis authority
        
    Raises:
        ValueError: if no genesis authority is configured
    """
    config = config or load_config()
    authority = genesis_authority or config.genesis_authority
    if not authority:
        raise ValueError("Genesis authority not configured (set REGISTRY_GENESIS_AUTHORITY)")
    
    audit_service = AuditService() if config.audit_enabled else None
    logger.info(
        "Creating registry",
        extra={"environment": config.environment, "audit_enabled": config.audit_enabled}
    )
    return Registry(authority, audit_service=audit_service)
