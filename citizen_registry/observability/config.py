"""
OpenTelemetry Configuration

Sets up tracing and logging for the citizen registry based on the
environment configuration.
"""

import logging
from typing import Optional
from opentelemetry import trace
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.sampling import TraceIdRatioBased
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter
from opentelemetry.sdk.resources import Resource
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter

from ..config import RegistryConfig, load_config

logger = logging.getLogger(__name__)


def build_tracer_provider(config: RegistryConfig) -> TracerProvider:
    """Create a tracer provider with environment-specific sampling and exporters."""
    environment = config.environment
    
    # Environment-specific sampling
    if environment == 'production':
        sampler = TraceIdRatioBased(0.1)  # 10% sampling in production
    elif environment == 'staging':
        sampler = TraceIdRatioBased(0.5)  # 50% sampling in staging
    else:
        sampler = TraceIdRatioBased(1.0)
    
    resource = Resource.create({
        "service.name": config.service_name,
        "service.version": config.service_version,
        "deployment.environment": environment
    })
    
    tracer_provider = TracerProvider(
        sampler=sampler,
        resource=resource
    )
    
    if config.otlp_endpoint:
        otlp_exporter = OTLPSpanExporter(endpoint=config.otlp_endpoint)
        tracer_provider.add_span_processor(
            BatchSpanProcessor(otlp_exporter, max_export_batch_size=512)
        )
    elif environment == 'development':
        tracer_provider.add_span_processor(BatchSpanProcessor(ConsoleSpanExporter()))
    
    return tracer_provider


def setup_observability(config: Optional[RegistryConfig] = None) -> Optional[TracerProvider]:
    """
    Initialize OpenTelemetry instrumentation and logging.
    
    Args:
        config: Settings; loaded from the environment when omitted
        
    Returns:
        The installed tracer provider, or None when tracing is disabled
    """
    config = config or load_config()
    setup_structured_logging(config.environment)
    
    if not config.otel_enabled:
        logger.info("OpenTelemetry disabled")
        return None
    
    tracer_provider = build_tracer_provider(config)
    trace.set_tracer_provider(tracer_provider)
    return tracer_provider


def setup_structured_logging(environment: str):
    """Configure log levels for the given environment."""
    log_level = {
        'production': logging.WARNING,
        'staging': logging.INFO,
        'development': logging.DEBUG,
        'test': logging.WARNING
    }.get(environment, logging.INFO)
    
    logging.basicConfig(
        level=log_level,
        format='%(asctime)s %(levelname)s %(name)s %(message)s',
        handlers=[logging.StreamHandler()]
    )
    
    if environment == 'production':
        logging.getLogger('citizen_registry.services.registry').setLevel(logging.WARNING)
        logging.getLogger('opentelemetry').setLevel(logging.ERROR)
    
    elif environment == 'development':
        logging.getLogger('citizen_registry').setLevel(logging.DEBUG)
