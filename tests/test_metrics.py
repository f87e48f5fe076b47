# SPDX-License-Identifier: Apache-2.0
"""Prometheus counters updated by the dispatcher."""
from __future__ import annotations

import pytest
from prometheus_client import REGISTRY

from eventflow.actions.base import Action
from eventflow.dispatcher import EventDispatcher
from eventflow.errors import ActionExecutionError, ActionNotFoundError


def _value(name, **labels):
    return REGISTRY.get_sample_value(name, labels) or 0.0


def test_job_and_failure_counters(dispatcher, ctx):
    ok_before = _value("eventflow_jobs_total", outcome="succeeded")
    failed_before = _value("eventflow_jobs_total", outcome="failed")
    divider_before = _value("eventflow_action_failures_total", action="divider")
    retry_before = _value("eventflow_job_retries_total", outcome="failed")

    dispatcher.handle_event(ctx, {"dividend": 10, "divider": 5})
    with pytest.raises(ActionExecutionError):
        dispatcher.handle_event(ctx, {"dividend": 10, "divider": 0})
    with pytest.raises(ActionExecutionError):
        dispatcher.retry_job(1)

    assert _value("eventflow_jobs_total", outcome="succeeded") == ok_before + 1
    assert _value("eventflow_jobs_total", outcome="failed") == failed_before + 1
    assert _value("eventflow_action_failures_total", action="divider") == divider_before + 2
    assert _value("eventflow_job_retries_total", outcome="failed") == retry_before + 1


def test_registered_actions_gauge_counts_every_dispatcher(dispatcher):
    before = _value("eventflow_registered_actions")

    other = EventDispatcher()
    other.add_action(Action(name="audit", do=lambda ctx, payload: None))
    assert _value("eventflow_registered_actions") == before + 1

    dispatcher.remove_action("divider")
    assert _value("eventflow_registered_actions") == before

    with pytest.raises(ActionNotFoundError):
        other.remove_action("divider")
    assert _value("eventflow_registered_actions") == before
