# SPDX-License-Identifier: Apache-2.0
"""Prometheus metrics for dispatcher runtime."""
from __future__ import annotations

from prometheus_client import Counter, Gauge, Histogram

JOBS_HANDLED = Counter(
    "eventflow_jobs_total",
    "Jobs dispatched for incoming events, by outcome",
    labelnames=("outcome",),
)

JOB_RETRIES = Counter(
    "eventflow_job_retries_total",
    "Explicit retries of failed jobs, by outcome",
    labelnames=("outcome",),
)

ACTION_FAILURES = Counter(
    "eventflow_action_failures_total",
    "Action executions that raised",
    labelnames=("action",),
)

ACTION_LATENCY = Histogram(
    "eventflow_action_latency_ms",
    "Time spent inside a single action call (milliseconds)",
    labelnames=("action",),
    buckets=(1, 2, 5, 10, 20, 50, 100, 200, 500, 1000, 2000),
)

REGISTERED_ACTIONS = Gauge(
    "eventflow_registered_actions",
    "Actions currently registered across all dispatchers",
)
