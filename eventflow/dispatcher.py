# SPDX-License-Identifier: Apache-2.0
"""
EventDispatcher - runtime-changeable action pipeline with resumable jobs.

Every incoming event becomes a job: the dispatcher copies the current action
order, assigns the next job id, runs the actions in sequence and keeps the
resulting snapshot. A failed job can later be resumed with ``retry_job``,
which runs only the actions that did not complete, in the order planned at
dispatch time.

One lock serialises all public operations, including action execution. A
slow action therefore blocks every other caller, and an action must not call
back into the dispatcher that runs it.
"""
from __future__ import annotations

import logging
import threading
from typing import Any, List, Optional, Tuple

from . import engine
from .actions import build_actions
from .actions.base import Action
from .config import DispatcherConfig
from .context import Context
from .errors import ActionExecutionError, JobAlreadySucceededError
from .messages import freeze_event
from .metrics import JOB_RETRIES, JOBS_HANDLED, REGISTERED_ACTIONS
from .registry import ActionRegistry
from .snapshots import Snapshot, SnapshotStore

log = logging.getLogger(__name__)


class EventDispatcher:
    def __init__(self):
        self._lock = threading.Lock()
        self._registry = ActionRegistry()
        self._snapshots = SnapshotStore()
        self._next_job_id = 0

    @classmethod
    def from_config(cls, config: DispatcherConfig) -> "EventDispatcher":
        dispatcher = cls()
        for action in build_actions(config.actions):
            dispatcher.add_action(action)
        return dispatcher

    def add_action(self, action: Action) -> None:
        """Append an action; it runs after every action already registered.

        Raises:
            DuplicateActionError: If an action with the same name exists.
        """
        with self._lock:
            self._registry.add(action)
            REGISTERED_ACTIONS.inc()
        log.info("registered action %s", action.name)

    def remove_action(self, action: Action | str) -> None:
        """Remove an action by name; jobs already dispatched are unaffected.

        Raises:
            ActionNotFoundError: If no action with that name is registered.
        """
        with self._lock:
            removed = self._registry.remove(action)
            REGISTERED_ACTIONS.dec()
        log.info("removed action %s", removed.name)

    def actions(self) -> Tuple[Action, ...]:
        with self._lock:
            return self._registry.plan()

    def handle_event(self, ctx: Optional[Context], event: Any) -> int:
        """Run every registered action for ``event`` and return the job id.

        An invalid event is rejected before a job id is assigned. Once an id
        is assigned it is always retryable: on failure the raised
        ``ActionExecutionError`` carries it in ``job_id``.

        Raises:
            InvalidEventError: If the event is None, empty, or not a mapping.
            ActionExecutionError: If an action raised.
        """
        frozen = freeze_event(event)
        with self._lock:
            job_id = self._next_job_id
            self._next_job_id += 1
            snapshot = Snapshot(
                id=job_id,
                event=frozen,
                context=ctx if ctx is not None else Context.background(),
                pending=list(self._registry.plan()),
            )
            self._snapshots.put(snapshot)
            try:
                engine.execute(snapshot)
            except ActionExecutionError as exc:
                JOBS_HANDLED.labels("failed").inc()
                log.warning("job %d failed at action %s: %s", job_id, exc.action, exc.cause)
                raise
            JOBS_HANDLED.labels("succeeded").inc()
            log.info("job %d completed %d actions", job_id, len(snapshot.results))
            return job_id

    def retry_job(self, job_id: int) -> None:
        """Resume a failed job from its first incomplete action.

        Uses the context and event stored at dispatch time and the pending
        actions planned back then; actions added or removed since are ignored.

        Raises:
            InvalidJobIdError: If the id is negative or was never assigned.
            JobAlreadySucceededError: If the job already completed.
            ActionExecutionError: If an action raised again.
        """
        with self._lock:
            snapshot = self._snapshots.get(job_id)
            if snapshot.success:
                raise JobAlreadySucceededError(job_id)
            log.info("retrying job %d from action %s", job_id, snapshot.pending[0].name)
            try:
                engine.execute(snapshot)
            except ActionExecutionError as exc:
                JOB_RETRIES.labels("failed").inc()
                log.warning("retry of job %d failed at action %s: %s", job_id, exc.action, exc.cause)
                raise
            JOB_RETRIES.labels("succeeded").inc()
            log.info("job %d completed on retry with %d actions", job_id, len(snapshot.results))

    def get_snapshot(self, job_id: int) -> Snapshot:
        """Return a detached copy of the job's snapshot.

        Raises:
            InvalidJobIdError: If the id is negative or was never assigned.
        """
        with self._lock:
            return self._snapshots.get(job_id).copy()

    def failed_jobs(self) -> List[int]:
        with self._lock:
            return [
                job_id for job_id in self._snapshots.job_ids()
                if not self._snapshots.get(job_id).success
            ]
