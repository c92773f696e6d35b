"""Prometheus metrics for categorization outcomes, providers and parsing."""

from mail_categorizer.monitoring.metrics import (
    categorizations_total,
    parser_corrections_total,
    provider_failures_total,
    provider_latency_seconds,
)

__all__ = [
    "categorizations_total",
    "parser_corrections_total",
    "provider_failures_total",
    "provider_latency_seconds",
]
