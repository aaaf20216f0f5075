"""OpenTelemetry tracing for the search service.

One SearchTelemetry per process, built from settings in the lifespan. start()
installs the tracer provider and instruments the FastAPI app, the SQLAlchemy
engine behind the search index, and log records (trace_id/span_id injection).
Health probes are not traced.
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING

from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.instrumentation.logging import LoggingInstrumentor
from opentelemetry.instrumentation.sqlalchemy import SQLAlchemyInstrumentor
from opentelemetry.sdk.resources import SERVICE_NAME, SERVICE_VERSION, Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import (
    BatchSpanProcessor,
    ConsoleSpanExporter,
    SpanExporter,
)
from opentelemetry.sdk.trace.sampling import ParentBased, TraceIdRatioBased

if TYPE_CHECKING:
    from fastapi import FastAPI
    from sqlalchemy.ext.asyncio import AsyncEngine

    from sportsdb.core.config import Settings

logger = logging.getLogger(__name__)

UNTRACED_URLS = "/api/v1/health"
EXPORTERS = ("console", "otlp", "none")


def build_exporter(exporter: str, otlp_endpoint: str | None = None) -> SpanExporter | None:
    """Span exporter for TELEMETRY_EXPORTER; None means spans are sampled but not exported.

    Raises:
        ValueError: Unknown exporter, or otlp without an endpoint.
    """
    if exporter == "none":
        return None
    if exporter == "console":
        return ConsoleSpanExporter()
    if exporter == "otlp":
        if not otlp_endpoint:
            raise ValueError("TELEMETRY_OTLP_ENDPOINT is required for the otlp exporter")
        return OTLPSpanExporter(
            endpoint=otlp_endpoint, insecure=otlp_endpoint.startswith("http://")
        )
    raise ValueError(f"Unknown telemetry exporter {exporter!r}; expected one of {EXPORTERS}")


class SearchTelemetry:
    """Tracer provider plus the instrumentations it drives."""

    def __init__(
        self,
        service_name: str,
        service_version: str,
        environment: str = "development",
        exporter: str = "console",
        otlp_endpoint: str | None = None,
        sample_rate: float = 1.0,
    ) -> None:
        self.service_name = service_name
        self.service_version = service_version
        self.environment = environment
        self.exporter = exporter
        self.otlp_endpoint = otlp_endpoint
        self.sample_rate = sample_rate
        self.tracer_provider: TracerProvider | None = None

    @classmethod
    def from_settings(cls, settings: Settings) -> SearchTelemetry:
        return cls(
            service_name=settings.app_name,
            service_version=settings.app_version,
            environment=settings.telemetry_environment,
            exporter=settings.telemetry_exporter,
            otlp_endpoint=settings.telemetry_otlp_endpoint,
            sample_rate=settings.telemetry_sample_rate,
        )

    @property
    def started(self) -> bool:
        return self.tracer_provider is not None

    def _build_provider(self) -> TracerProvider:
        resource = Resource(
            attributes={
                SERVICE_NAME: self.service_name,
                SERVICE_VERSION: self.service_version,
                "deployment.environment": self.environment,
            }
        )
        provider = TracerProvider(
            resource=resource,
            sampler=ParentBased(TraceIdRatioBased(self.sample_rate)),
        )
        exporter = build_exporter(self.exporter, self.otlp_endpoint)
        if exporter is not None:
            provider.add_span_processor(BatchSpanProcessor(exporter))
        return provider

    def start(self, app: FastAPI, engine: AsyncEngine | None = None) -> None:
        """Install the global tracer provider and instrument app, engine, and logging.

        Raises:
            ValueError: The configured exporter is invalid.
        """
        if self.started:
            return
        provider = self._build_provider()
        trace.set_tracer_provider(provider)
        self.tracer_provider = provider

        FastAPIInstrumentor.instrument_app(
            app, tracer_provider=provider, excluded_urls=UNTRACED_URLS
        )
        if engine is not None:
            SQLAlchemyInstrumentor().instrument(
                engine=engine.sync_engine,
                tracer_provider=provider,
                enable_commenter=True,
            )
        LoggingInstrumentor().instrument(tracer_provider=provider, set_logging_format=True)
        logger.info(
            "Tracing started: service=%s version=%s exporter=%s sample_rate=%s sql=%s",
            self.service_name,
            self.service_version,
            self.exporter,
            self.sample_rate,
            engine is not None,
        )

    def shutdown(self) -> None:
        """Flush pending spans and stop the provider."""
        if self.tracer_provider is None:
            return
        self.tracer_provider.shutdown()
        self.tracer_provider = None
        logger.info("Tracing shut down")


_telemetry: SearchTelemetry | None = None
_telemetry_lock = threading.RLock()


def get_telemetry() -> SearchTelemetry | None:
    """Return the process-wide telemetry instance (set in the lifespan)."""
    with _telemetry_lock:
        return _telemetry


def set_telemetry(telemetry: SearchTelemetry | None) -> None:
    """Set (or clear) the process-wide telemetry instance."""
    global _telemetry
    with _telemetry_lock:
        _telemetry = telemetry
