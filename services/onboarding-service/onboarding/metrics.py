"""Prometheus instruments for the onboarding flow."""

from __future__ import annotations

from prometheus_client import CONTENT_TYPE_LATEST, Counter, generate_latest

ACCOUNTS_OPENED = Counter(
    "onboarding_accounts_opened_total",
    "Accounts that completed enrichment, persistence and the welcome notification.",
)

STEP_FAILURES = Counter(
    "onboarding_step_failures_total",
    "Onboarding steps that raised, by step name.",
    ["step"],
)


def render_metrics() -> tuple[bytes, str]:
    """Return the exposition payload and its content type for a metrics scrape."""
    return generate_latest(), CONTENT_TYPE_LATEST
