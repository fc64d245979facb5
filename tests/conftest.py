# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Pytest configuration and fixtures.
"""

import os
import pytest
from opentelemetry import trace
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import SimpleSpanProcessor
from opentelemetry.sdk.trace.export.in_memory_span_exporter import InMemorySpanExporter

from citizen_registry.services.audit import AuditService
from citizen_registry.services.registry import Registry

# Set test environment
os.environ['ENVIRONMENT'] = 'test'

ADMIN = 'ST1ADMIN1111111111111111111111111111111111'
CITIZEN_1 = 'ST2CITIZEN111111111111111111111111111111111'
CITIZEN_2 = 'ST3CITIZEN222222222222222222222222222222222'


_span_exporter = InMemorySpanExporter()


@pytest.fixture(scope="session")
def tracer_provider():
    """Global tracer provider recording spans in memory."""
    provider = TracerProvider()
    provider.add_span_processor(SimpleSpanProcessor(_span_exporter))
    trace.set_tracer_provider(provider)
    return provider


@pytest.fixture
def span_exporter(tracer_provider):
    """In-memory span exporter, cleared for each test."""
    _span_exporter.clear()
    yield _span_exporter
    _span_exporter.clear()


@pytest.fixture
def admin():
    return ADMIN


@pytest.fixture
def citizen1():
    return CITIZEN_1


@pytest.fixture
def citizen2():
    return CITIZEN_2


@pytest.fixture
def registry():
    """Empty registry owned by the admin principal."""
    return Registry(ADMIN)


@pytest.fixture
def audit_service():
    return AuditService()


@pytest.fixture
def audited_registry(audit_service):
    """Empty registry recording an audit trail."""
    return Registry(ADMIN, audit_service=audit_service)
