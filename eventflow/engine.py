# SPDX-License-Identifier: Apache-2.0
"""Sequential, fail-fast execution of a job's pending actions."""
from __future__ import annotations

import logging
import time
from collections.abc import Mapping
from types import MappingProxyType

from .errors import ActionExecutionError
from .metrics import ACTION_FAILURES, ACTION_LATENCY
from .snapshots import ActionResult, Snapshot

log = logging.getLogger(__name__)


def execute(snapshot: Snapshot) -> None:
    """Run the snapshot's pending actions front to back, updating it in place.

    Stops at the first action that raises. The failed action stays at the
    head of ``pending`` so a retry runs it again; results of earlier actions
    are kept. Marks the snapshot successful once nothing is pending.
    """
    while snapshot.pending:
        action = snapshot.pending[0]
        log.debug("job %d running action %s", snapshot.id, action.name)
        start = time.perf_counter()
        try:
            output = action.do(snapshot.context, snapshot.event)
            if output is None:
                output = {}
            elif not isinstance(output, Mapping):
                raise TypeError(f"action output must be a mapping, got {type(output).__name__}")
            output = MappingProxyType(dict(output))
        except Exception as exc:
            ACTION_FAILURES.labels(action.name).inc()
            raise ActionExecutionError(action.name, exc, job_id=snapshot.id) from exc
        finally:
            ACTION_LATENCY.labels(action.name).observe((time.perf_counter() - start) * 1000)
        snapshot.results.append(
            ActionResult(name=action.name, input=snapshot.event, output=output)
        )
        snapshot.pending.pop(0)
    snapshot.success = True
