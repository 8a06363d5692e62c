from __future__ import annotations

from prometheus_client import (
    Counter,
    Histogram,
    generate_latest,
    CONTENT_TYPE_LATEST,
)

REQUEST_COUNT = Counter(
    "well_requests_total",
    "Total API requests",
    ["path", "method", "status"],
)

# Static answers return in about a millisecond; LLM answers take several seconds.
_LATENCY_BUCKETS = (
    0.001, 0.005, 0.010, 0.025, 0.050, 0.100,
    0.250, 0.500, 1.0, 2.5, 5.0,
    10.0, 30.0, 60.0,
)

REQUEST_LATENCY = Histogram(
    "well_request_latency_seconds",
    "API request latency in seconds",
    ["path", "method"],
    buckets=_LATENCY_BUCKETS,
)

INTENT_COUNT = Counter(
    "well_intents_total",
    "Classified intents per guidance mode",
    ["mode", "intent"],
)

UPSTREAM_ERRORS = Counter(
    "well_upstream_errors_total",
    "Failed chat-completion calls",
    ["kind"],
)

PARSE_FALLBACKS = Counter(
    "well_parse_fallbacks_total",
    "Model outputs that were not a JSON object and were wrapped verbatim",
)


def render_metrics() -> tuple[bytes, str]:
    return generate_latest(), CONTENT_TYPE_LATEST
