"""
observability.py — Tracing, error tracking and request timing
==============================================================
Covers: OpenTelemetry spans around each evaluation, Sentry error tracking,
        per-request latency and trace-id headers.

Setup in app.py:
    from observability import init_observability
    init_observability(app)
"""

import os
import time
import uuid
import logging
from contextlib import contextmanager
from typing import Iterator

from flask import request, g

# ── OpenTelemetry: distributed tracing ──
from opentelemetry import trace
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor
from opentelemetry.sdk.resources import Resource

# ── Sentry: error tracking ──
import sentry_sdk
from sentry_sdk.integrations.flask import FlaskIntegration

from three_whys import SCORER_VERSION

log = logging.getLogger("observability")

SLOW_REQUEST_MS = 1000

_tracer = trace.get_tracer("three-whys")
_provider_installed = False


def init_observability(app):
    """Initialize tracing, Sentry and timing middleware. Call once at app startup."""
    global _tracer, _provider_installed

    # ── 1. OpenTelemetry tracing ──
    if not _provider_installed:
        resource = Resource.create({"service.name": "three-whys", "service.version": SCORER_VERSION})
        provider = TracerProvider(resource=resource)

        otlp_endpoint = os.getenv("OTLP_ENDPOINT")
        if otlp_endpoint:
            from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
            provider.add_span_processor(BatchSpanProcessor(OTLPSpanExporter(endpoint=otlp_endpoint)))

        trace.set_tracer_provider(provider)
        _provider_installed = True
    _tracer = trace.get_tracer("three-whys")

    # ── 2. Sentry error tracking ──
    sentry_dsn = os.getenv("SENTRY_DSN")
    if sentry_dsn:
        sentry_sdk.init(
            dsn=sentry_dsn,
            integrations=[FlaskIntegration()],
            traces_sample_rate=float(os.getenv("SENTRY_TRACES_RATE", "0.1")),
            environment=os.getenv("ENVIRONMENT", "production"),
            release=SCORER_VERSION,
        )
        log.info("Sentry initialized")

    # ── 3. Request timing middleware ──
    @app.before_request
    def _start_timer():
        g.start_time = time.time()
        g.trace_id = request.headers.get("X-Trace-Id", str(uuid.uuid4())[:16])

    @app.after_request
    def _record_timing(response):
        if hasattr(g, "start_time"):
            latency = (time.time() - g.start_time) * 1000
            response.headers["X-Response-Time-Ms"] = str(int(latency))
            response.headers["X-Trace-Id"] = getattr(g, "trace_id", "")
            if latency > SLOW_REQUEST_MS:
                log.warning(f"slow request {request.method} {request.path} {int(latency)}ms "
                            f"status={response.status_code}")
        return response


@contextmanager
def evaluation_span(request_id: str) -> Iterator[trace.Span]:
    with _tracer.start_as_current_span("evaluate") as span:
        span.set_attribute("request_id", request_id)
        yield span


def report_exception(exc: BaseException) -> None:
    """Send a handled exception to Sentry. No-op when Sentry is not initialized."""
    sentry_sdk.capture_exception(exc)
