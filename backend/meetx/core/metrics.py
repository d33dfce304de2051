"""
Metrics instrumentation for observability.
Exposes Prometheus-compatible metrics at /metrics endpoint.
"""

from prometheus_client import Counter, Histogram, generate_latest, CONTENT_TYPE_LATEST
from fastapi import Response

# Booking metrics
booking_attempts = Counter(
    'booking_attempts_total',
    'Total booking attempts',
    ['status']  # success, duplicate, not_found, error
)

booking_latency = Histogram(
    'booking_latency_seconds',
    'Booking request latency',
    buckets=[0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0]
)

# Auth metrics
auth_attempts = Counter(
    'auth_attempts_total',
    'Registration and login attempts',
    ['action', 'result']  # register/login, success/failure
)

token_rejections = Counter(
    'token_rejections_total',
    'Bearer tokens rejected by the authorization guard',
    ['reason']  # missing, malformed, expired, tampered
)


def metrics_endpoint() -> Response:
    """
    Prometheus metrics endpoint.

    Usage:
        @app.get("/metrics")
        def metrics():
            return metrics_endpoint()
    """
    return Response(
        content=generate_latest(),
        media_type=CONTENT_TYPE_LATEST
    )


def record_booking_attempt(status: str):
    """Record booking attempt. Status: success, duplicate, not_found, error"""
    booking_attempts.labels(status=status).inc()


def record_auth_attempt(action: str, success: bool):
    result = "success" if success else "failure"
    auth_attempts.labels(action=action, result=result).inc()


def record_token_rejection(reason: str):
    token_rejections.labels(reason=reason).inc()
